"""
Plain-text rendering of an engine's grid.
"""
from .engine import GameEngine


def render_ansi(engine: GameEngine, reveal_mines: bool = False) -> str:
    """
    Render the grid as ASCII, one line per row.

    Cells are "." when hidden, blank for a revealed zero, the digit for
    a revealed count, and "*" for a mine. With reveal_mines, hidden
    mines are shown as "*" as well.
    """
    lines = []
    for row in range(engine.size):
        row_str = ""
        for col in range(engine.size):
            cell = engine.get_cell(row, col)
            if cell.is_mine and (cell.is_revealed or reveal_mines):
                row_str += "*"
            elif cell.is_hidden:
                row_str += "."
            elif cell.adjacent_mines == 0:
                row_str += " "
            else:
                row_str += str(cell.adjacent_mines)
            row_str += " "
        lines.append(row_str)

    return "\n".join(lines)
