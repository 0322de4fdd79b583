"""Text rendering of a session. Owns all user-facing formatting; holds no rules."""

from src.api.models import ActionResponse, PieceResponse, SessionResponse

EMPTY_MARKER = "(empty)"

MENU_OPTIONS: dict[str, str] = {
    "1": "Play piece",
    "2": "Reserve piece",
    "3": "Use reserved piece",
    "0": "Quit",
}


def render_piece(piece: PieceResponse) -> str:
    return f"[{piece.kind} {piece.id}]"


def _render_pieces(pieces: list[PieceResponse]) -> str:
    if not pieces:
        return EMPTY_MARKER
    return " ".join(render_piece(piece) for piece in pieces)


def render_state(session: SessionResponse) -> str:
    """Queue in play order, reserve from top to base."""
    return "\n".join(
        [
            "Current state:",
            "",
            f"Piece queue\t{_render_pieces(session.queue)}",
            f"Reserve stack\t(Top -> Base): {_render_pieces(session.stack)}",
        ]
    )


def render_outcome(response: ActionResponse) -> str:
    """Action line first ([Action] when something changed, [Info] when not), then the replenishment."""
    tag = "[Action]" if response.succeeded else "[Info]"
    if response.replenished:
        system_line = f"[System] New piece added to the end of the queue: {render_piece(response.replenished_piece)}"
    else:
        system_line = f"[System] Queue already full; new piece {render_piece(response.replenished_piece)} was discarded."
    return f"{tag} {response.message}\n{system_line}"


def render_menu() -> str:
    lines = ["Actions:", "Code\tAction"]
    lines += [f"{code}\t{label}" for code, label in MENU_OPTIONS.items()]
    return "\n".join(lines)
