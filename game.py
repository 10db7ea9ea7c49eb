from __future__ import annotations

# Facade module that re-exports the tic-tac-toe core.
# The Flask app and the tests import from here; single-responsibility
# modules live under tictactoe_core/*.

from tictactoe_core.board import (  # noqa: F401
    CELL_COUNT,
    EMPTY_BOARD,
    MARKS,
    Board,
    Cell,
    Mark,
    check_cell_index,
)
from tictactoe_core.winner import WIN_LINES, calculate_winner, winning_line  # noqa: F401
from tictactoe_core.state import GameState  # noqa: F401
from tictactoe_core.view import (  # noqa: F401
    game_to_json,
    move_label,
    move_list,
    render_text,
    status,
)


def main() -> None:
    # CLI driver delegated to tictactoe_core.cli
    from tictactoe_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
