from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from game import GameState, game_to_json
from tictactoe_core.config import load_settings

logger = logging.getLogger(__name__)

SETTINGS = load_settings()

app = Flask(__name__)

# In-memory registry: game id -> GameState, oldest first.
GAMES: "OrderedDict[str, GameState]" = OrderedDict()
# Serializes registry changes and every move/jump so each event runs to completion.
GAMES_LOCK = threading.Lock()


class InvalidRequest(ValueError):
    pass


class UnknownGame(KeyError):
    pass


def _new_game() -> Tuple[str, GameState]:
    game_id = uuid.uuid4().hex
    game = GameState()
    with GAMES_LOCK:
        GAMES[game_id] = game
        while len(GAMES) > SETTINGS.max_games:
            evicted, _ = GAMES.popitem(last=False)
            logger.info("evicted game %s (registry full)", evicted)
    logger.info("created game %s", game_id)
    return game_id, game


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        raise InvalidRequest("JSON object body required")
    return body


def _int_field(body: Dict[str, Any], name: str) -> int:
    value = body.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequest(f"{name} must be an integer")
    return value


def _lookup(game_id: Optional[str]) -> GameState:
    if game_id is None:
        raise InvalidRequest("gameId required")
    if not isinstance(game_id, str) or game_id not in GAMES:
        raise UnknownGame(game_id)
    return GAMES[game_id]


def _game_response(game_id: str, game: GameState, **extra: Any) -> Any:
    payload: Dict[str, Any] = {"ok": True, "gameId": game_id, "state": game_to_json(game)}
    payload.update(extra)
    return jsonify(payload)


@app.errorhandler(InvalidRequest)
def _bad_request(e: InvalidRequest) -> Any:
    logger.warning("bad request on %s: %s", request.path, e)
    return jsonify({"ok": False, "error": str(e)}), 400


@app.errorhandler(UnknownGame)
def _unknown_game(e: UnknownGame) -> Any:
    return jsonify({"ok": False, "error": "unknown game"}), 404


# ---------- Game API ----------

@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True, "games": len(GAMES)})


@app.post("/api/new")
def api_new() -> Any:
    game_id, game = _new_game()
    return _game_response(game_id, game)


@app.get("/api/game/<game_id>")
def api_game(game_id: str) -> Any:
    with GAMES_LOCK:
        return _game_response(game_id, _lookup(game_id))


@app.delete("/api/game/<game_id>")
def api_delete(game_id: str) -> Any:
    with GAMES_LOCK:
        _lookup(game_id)
        del GAMES[game_id]
    logger.info("deleted game %s", game_id)
    return jsonify({"ok": True})


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    game_id = body.get("gameId")
    index = _int_field(body, "index")
    with GAMES_LOCK:
        game = _lookup(game_id)
        try:
            applied = game.apply_move(index)
        except IndexError as e:
            raise InvalidRequest(str(e)) from e
        return _game_response(game_id, game, applied=applied)


@app.post("/api/jump")
def api_jump() -> Any:
    body = _body()
    game_id = body.get("gameId")
    step = _int_field(body, "step")
    with GAMES_LOCK:
        game = _lookup(game_id)
        try:
            game.jump_to(step)
        except IndexError as e:
            raise InvalidRequest(str(e)) from e
        return _game_response(game_id, game)


# Entrypoint for "python app.py"
if __name__ == "__main__":
    from tictactoe_core.logging_utils import configure_logging

    configure_logging(level=SETTINGS.log_level)
    app.run(host=SETTINGS.host, port=SETTINGS.port, debug=SETTINGS.debug)
