from __future__ import annotations

import argparse
import re
from typing import List, Optional, Tuple

from .config import load_settings
from .logging_utils import configure_logging
from .state import GameState
from .view import move_list, render_text, status

_NUMBER = re.compile(r'[0-9]+')

HELP_TEXT = (
    'Commands: 0-8 to play a cell, "jump N" to revisit move N, '
    '"history" to list moves, "new" to restart, "quit" to exit.'
)


def render(game: GameState) -> str:
    text = render_text(game.current()) + '\n' + status(game)
    if game.current().is_full() and not game.is_game_over():
        text += '\nBoard is full. Use "jump N" or "new".'
    return text


def render_history(game: GameState) -> str:
    lines: List[str] = []
    for item in move_list(game):
        marker = '>' if item['current'] else ' '
        lines.append(f"{marker} {item['step']}: {item['label']}")
    return '\n'.join(lines)


def handle_command(game: GameState, text: str) -> Tuple[GameState, Optional[str], bool]:
    """
    Applies one line of user input.

    Returns (game, message, done). game is a fresh GameState after "new";
    message is None when there is nothing extra to print.
    """
    words = text.strip().lower().split()
    if not words:
        return game, None, False
    cmd = words[0]
    if cmd in ('q', 'quit', 'exit'):
        return game, None, True
    if cmd in ('h', 'help', '?'):
        return game, HELP_TEXT, False
    if cmd == 'history':
        return game, render_history(game), False
    if cmd == 'new':
        fresh = GameState()
        return fresh, render(fresh), False
    if cmd == 'jump':
        if len(words) != 2 or not _NUMBER.fullmatch(words[1]):
            return game, 'Usage: jump N', False
        try:
            game.jump_to(int(words[1]))
        except IndexError:
            return game, f'No such move. Pick a step between 0 and {len(game) - 1}.', False
        return game, render(game), False
    if len(words) == 1 and _NUMBER.fullmatch(cmd):
        try:
            game.apply_move(int(cmd))
        except IndexError:
            return game, 'Cells are numbered 0-8.', False
        return game, render(game), False
    return game, 'Could not parse. Type "help" for commands.', False


def play() -> None:
    game = GameState()
    print(render(game))
    print(HELP_TEXT)
    while True:
        try:
            text = input('> ')
        except EOFError:
            break
        game, message, done = handle_command(game, text)
        if done:
            break
        if message:
            print(message)


def main(argv: Optional[List[str]] = None) -> None:
    settings = load_settings()
    parser = argparse.ArgumentParser(description='Tic-tac-toe with move history')
    parser.add_argument('--serve', action='store_true', help='Run the web API instead of the terminal game')
    parser.add_argument('--host', default=settings.host, help='Bind address for --serve')
    parser.add_argument('--port', type=int, default=settings.port, help='Port for --serve')
    parser.add_argument('--log-level', default=settings.log_level, help='Logging level')
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level)

    if not args.serve:
        play()
        return

    from app import app  # Flask is only needed for --serve

    app.run(host=args.host, port=args.port, debug=settings.debug)
