from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

Mark = str  # 'X' or 'O'
Cell = Optional[Mark]  # None when empty

SIZE = 3
CELL_COUNT = SIZE * SIZE
MARKS: Tuple[Mark, Mark] = ('X', 'O')


@dataclass(frozen=True)
class Board:
    """Immutable 3x3 snapshot of the grid, stored row-major."""
    cells: Tuple[Cell, ...] = (None,) * CELL_COUNT

    def __post_init__(self) -> None:
        if len(self.cells) != CELL_COUNT:
            raise ValueError(f'Board needs {CELL_COUNT} cells, got {len(self.cells)}')
        for cell in self.cells:
            if cell is not None and cell not in MARKS:
                raise ValueError(f'Invalid cell value: {cell!r}')

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> 'Board':
        return cls(tuple(cells))

    @staticmethod
    def index(r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * SIZE + c

    def at(self, r: int, c: int) -> Cell:
        return self.cells[self.index(r, c)]

    def __getitem__(self, i: int) -> Cell:
        return self.cells[i]

    def __len__(self) -> int:
        return CELL_COUNT

    def is_empty(self, i: int) -> bool:
        return self.cells[i] is None

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def with_mark(self, i: int, mark: Mark) -> 'Board':
        """Returns a copy of the board with cell i set to mark."""
        if mark not in MARKS:
            raise ValueError(f'Invalid mark: {mark!r}')
        cells = list(self.cells)
        cells[i] = mark
        return Board(tuple(cells))


EMPTY_BOARD = Board()


def check_cell_index(i: object) -> int:
    """Returns i if it names a cell (0-8), else raises IndexError."""
    if isinstance(i, bool) or not isinstance(i, int):
        raise IndexError(f'cell index must be an int, got {i!r}')
    if not 0 <= i < CELL_COUNT:
        raise IndexError(f'cell index out of range: {i}')
    return i
