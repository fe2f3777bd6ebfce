"""renderer.py

A minimal text renderer for the board, used by the trace output.

Every door becomes one token: braces mark the player's current pick, ``C`` the
car, a blank an opened door and ``X`` any other closed door, e.g.::

    [C] {X} [ ]
"""
from .state import Board, Door


def render_door(door: Door) -> str:
    if door.has_car:
        symbol = "C"
    elif door.is_open:
        symbol = " "
    else:
        symbol = "X"

    left, right = ("{", "}") if door.is_selected else ("[", "]")
    return f"{left}{symbol}{right} "


def render_board(board: Board) -> str:
    """Render *one* line describing every door of the board.

    Args:
        board (Board): the doors of the current trial, in index order.

    Returns:
        str: the concatenated door tokens, each followed by a single space.
    """
    return "".join(render_door(door) for door in board)
