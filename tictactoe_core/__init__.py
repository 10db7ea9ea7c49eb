"""
Tic-tac-toe core Python package.

Pure-logic building blocks behind the Flask app and the terminal client.
Modules:
- board.py: Mark, Board, EMPTY_BOARD
- winner.py: WIN_LINES, calculate_winner
- state.py: GameState (history + time travel)
- view.py: status text, move list, JSON view
- config.py / logging_utils.py: environment settings and logging setup
- cli.py: terminal driver
"""
