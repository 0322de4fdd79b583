"""
Command-line entrypoint: interactive menu around a single session.

Options:
- 1: play the piece at the front of the queue
- 2: move the front piece onto the reserve
- 3: use (discard) the top reserved piece
- 0: quit
"""

import argparse
import logging
from typing import Callable, Optional
from uuid import UUID

from src.api.models import ActionRequest, GetSessionRequest, NewSessionRequest
from src.cli.render import render_menu, render_outcome, render_state
from src.core.config import Settings
from src.core.exceptions import PieceReserveError
from src.core.shared_types import ActionType
from src.db.memory_repository import InMemorySessionRepository
from src.services.session_service import SessionService

logger = logging.getLogger(__name__)

QUIT = 0
MENU_ACTIONS: dict[int, ActionType] = {
    1: ActionType.PLAY,
    2: ActionType.RESERVE,
    3: ActionType.USE_RESERVED,
}

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser. Flags override PIECE_RESERVE_* environment values."""
    parser = argparse.ArgumentParser(
        prog="piece-reserve",
        description="Piece queue with a reserve stack.",
    )
    parser.add_argument("--queue-capacity", type=int, default=None, help="Size of the upcoming-pieces queue")
    parser.add_argument("--stack-capacity", type=int, default=None, help="Size of the reserve stack")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece kinds")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (DEBUG, INFO, ...)")
    return parser


def parse_option(raw: str) -> Optional[int]:
    """Menu choice as an integer, None when the input is not a number."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


def run_menu(
    service: SessionService,
    session_id: UUID,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> int:
    """Loop until the user quits (or input runs out). Returns the number of actions performed."""
    actions_performed = 0
    while True:
        output(render_state(service.get_session(GetSessionRequest(session_id=session_id))))
        output(render_menu())
        try:
            raw = input_fn("\nOption: ")
        except EOFError:
            output("\nInput closed, quitting.")
            return actions_performed

        option = parse_option(raw)
        if option is None:
            output("[Error] Invalid input. Try again.")
            continue
        if option == QUIT:
            output("\nShutting down... removed pieces do not return to the game. Bye!")
            output(render_state(service.get_session(GetSessionRequest(session_id=session_id))))
            return actions_performed
        if option not in MENU_ACTIONS:
            output("\n[Warning] Invalid option. Choose 0, 1, 2 or 3.")
            continue

        response = service.perform_action(
            ActionRequest(session_id=session_id, action=MENU_ACTIONS[option])
        )
        actions_performed += 1
        output(render_outcome(response))


def main(argv: list[str] | None = None, input_fn: InputFn = input, output: OutputFn = print) -> int:
    """Main entrypoint.

    Returns:
        Process exit code (0 for success, 2 for invalid configuration).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings.from_env().override(
            queue_capacity=args.queue_capacity,
            stack_capacity=args.stack_capacity,
            seed=args.seed,
            log_level=args.log_level,
        )
    except PieceReserveError as err:
        output(f"[Error] Invalid configuration: {err}")
        return 2

    logging.basicConfig(level=settings.log_level)
    service = SessionService(InMemorySessionRepository(), settings)
    session = service.create_session(NewSessionRequest())
    logger.debug("Started session %s", session.session_id)

    output("=== Piece queue & reserve stack ===")
    run_menu(service, session.session_id, input_fn, output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
