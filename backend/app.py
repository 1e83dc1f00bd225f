import atexit
import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

import config
from game_session import GameSession
from inputs.base import Intent, parse_intent

logging.basicConfig(level=config.get_log_level(), format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)


def create_app(session: GameSession = None) -> Flask:
    """
    Build the Flask app serving the game to the browser frontend.

    Args:
        session: game session to expose; a fresh one with a background
                 loop is created when omitted
    """
    app = Flask(__name__)
    game_session = session or GameSession()
    app.config["GAME_SESSION"] = game_session

    # Enable CORS for API routes so the web frontend (different origin) can call Flask
    CORS(app, resources={r"/api/*": {"origins": config.get_cors_origins()}})

    @app.route("/api/config", methods=["GET"])
    def get_config():
        """
        Shared settings the frontend needs to draw the board.
        """
        return jsonify({
            "boardSize": game_session.engine.board_size,
            "tickIntervalMs": game_session.loop.interval_ms,
        })

    @app.route("/api/game", methods=["GET"])
    def get_game():
        """
        Get the latest snapshot of the game.

        Returns snakeCells, food, score, phase, direction, boardSize, tick
        and deathReason.
        """
        try:
            return jsonify(game_session.snapshot().to_dict()), 200
        except Exception as error:
            logging.error(f"Error reading game state: {error}")
            return jsonify({"error": "Failed to load game state"}), 500

    @app.route("/api/game/start", methods=["POST"])
    def start_game():
        """
        Queue a start intent. Starts a new game unless one is running.
        """
        try:
            game_session.submit(Intent.START)
            return jsonify({"queued": Intent.START.value}), 202
        except Exception as error:
            logging.error(f"Error starting game: {error}")
            return jsonify({"error": "Failed to start game"}), 500

    @app.route("/api/game/direction", methods=["POST"])
    def change_direction():
        """
        Queue a direction change.

        Request body:
        {
            "direction": "UP" | "DOWN" | "LEFT" | "RIGHT"
        }
        """
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        name = data.get("direction")
        if not isinstance(name, str):
            return jsonify({"error": "Missing 'direction' in request body"}), 400

        try:
            intent = parse_intent(name)
        except ValueError as error:
            return jsonify({"error": str(error)}), 400
        if intent.direction is None:
            return jsonify({"error": f"'{name}' is not a direction"}), 400

        try:
            game_session.submit(intent)
            return jsonify({
                "queued": intent.value,
                "vector": list(intent.direction),
            }), 202
        except Exception as error:
            logging.error(f"Error queueing direction {intent.value}: {error}")
            return jsonify({"error": "Failed to queue direction"}), 500

    @app.route("/api/game/key", methods=["POST"])
    def press_key():
        """
        Forward a raw key press from the browser (e.g. "ArrowUp", "Enter").

        Request body:
        {
            "key": "ArrowUp"
        }
        """
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        key = data.get("key")
        if not isinstance(key, str):
            return jsonify({"error": "Missing 'key' in request body"}), 400

        try:
            intent = game_session.submit_key(key)
        except Exception as error:
            logging.error(f"Error handling key {key!r}: {error}")
            return jsonify({"error": "Failed to handle key"}), 500

        if intent is None:
            return jsonify({"error": f"Key '{key}' is not bound"}), 400
        return jsonify({"queued": intent.value}), 202

    return app


session = GameSession()
atexit.register(session.shutdown)
app = create_app(session)


if __name__ == "__main__":
    # FLASK_DEBUG=1 turns on the debugger and reloader
    app.run(debug=config.get_flask_debug())
