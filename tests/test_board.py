import unittest

from game import EMPTY_BOARD, Board, check_cell_index


class TestBoard(unittest.TestCase):
    def test_given_empty_board_when_inspected_then_nine_empty_cells(self):
        self.assertEqual(len(EMPTY_BOARD), 9)
        self.assertEqual(EMPTY_BOARD.cells, (None,) * 9)
        self.assertFalse(EMPTY_BOARD.is_full())

    def test_given_row_and_column_when_indexing_then_row_major(self):
        self.assertEqual(Board.index(0, 0), 0)
        self.assertEqual(Board.index(1, 2), 5)
        self.assertEqual(Board.index(2, 1), 7)
        b = EMPTY_BOARD.with_mark(5, 'O')
        self.assertEqual(b.at(1, 2), 'O')

    def test_given_board_when_marking_then_original_untouched(self):
        b1 = EMPTY_BOARD.with_mark(4, 'X')
        self.assertIsNone(EMPTY_BOARD[4])
        self.assertEqual(b1[4], 'X')
        self.assertEqual(b1.cells.count(None), 8)

    def test_given_wrong_shape_or_value_when_constructing_then_value_error(self):
        with self.assertRaises(ValueError):
            Board((None,) * 8)
        with self.assertRaises(ValueError):
            Board(('Z',) + (None,) * 8)
        with self.assertRaises(ValueError):
            EMPTY_BOARD.with_mark(0, 'Z')

    def test_given_bad_indices_when_checked_then_index_error(self):
        self.assertEqual(check_cell_index(8), 8)
        for bad in (-1, 9, '3', 1.0, True, None):
            with self.assertRaises(IndexError):
                check_cell_index(bad)


if __name__ == '__main__':
    unittest.main(verbosity=2)
