import unittest

from game import Board, WIN_LINES, calculate_winner, winning_line


def make_board(rows):
    flat = []
    for r in rows:
        assert len(r) == 3
        flat.extend(None if c == '.' else c for c in r)
    return Board.from_cells(flat)


def board_with(marks):
    cells = [None] * 9
    for i, m in marks.items():
        cells[i] = m
    return Board.from_cells(cells)


class TestCalculateWinner(unittest.TestCase):
    def test_given_empty_board_when_evaluated_then_no_winner(self):
        self.assertIsNone(calculate_winner(Board()))
        self.assertIsNone(winning_line(Board()))

    def test_given_each_line_filled_when_evaluated_then_that_mark_wins(self):
        for line in WIN_LINES:
            for mark in ('X', 'O'):
                board = board_with({i: mark for i in line})
                self.assertEqual(calculate_winner(board), mark, (line, mark))
                self.assertEqual(winning_line(board), line)

    def test_given_completed_line_when_other_cells_change_then_result_unchanged(self):
        for line in WIN_LINES:
            for mark, other in (('X', 'O'), ('O', 'X')):
                for extra in range(9):
                    if extra in line:
                        continue
                    marks = {i: mark for i in line}
                    marks[extra] = other
                    self.assertEqual(calculate_winner(board_with(marks)), mark, (line, extra))

    def test_given_two_in_a_row_when_evaluated_then_no_winner(self):
        board = make_board([
            ['X', 'X', '.'],
            ['O', 'O', '.'],
            ['.', '.', '.'],
        ])
        self.assertIsNone(calculate_winner(board))

    def test_given_mixed_line_when_evaluated_then_no_winner(self):
        board = make_board([
            ['X', 'O', 'X'],
            ['.', '.', '.'],
            ['.', '.', '.'],
        ])
        self.assertIsNone(calculate_winner(board))

    def test_given_two_completed_lines_when_evaluated_then_first_in_order_wins(self):
        board = make_board([
            ['O', 'O', 'O'],
            ['.', '.', '.'],
            ['X', 'X', 'X'],
        ])
        self.assertEqual(calculate_winner(board), 'O')
        self.assertEqual(winning_line(board), (0, 1, 2))

        flipped = make_board([
            ['X', 'X', 'X'],
            ['.', '.', '.'],
            ['O', 'O', 'O'],
        ])
        self.assertEqual(calculate_winner(flipped), 'X')

    def test_given_row_and_diagonal_when_evaluated_then_row_reported_first(self):
        board = make_board([
            ['X', 'X', 'X'],
            ['O', 'X', 'O'],
            ['O', '.', 'X'],
        ])
        self.assertEqual(winning_line(board), (0, 1, 2))

    def test_given_full_board_without_line_when_evaluated_then_no_winner(self):
        board = make_board([
            ['X', 'O', 'X'],
            ['X', 'O', 'O'],
            ['O', 'X', 'X'],
        ])
        self.assertTrue(board.is_full())
        self.assertIsNone(calculate_winner(board))


if __name__ == '__main__':
    unittest.main(verbosity=2)
