"""Blueprint exposing one in-process contest over JSON."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, Response, current_app, jsonify, request

from ..cli.protocol import CommandRunner
from ..engine.contest import Contest
from ..engine.errors import ScoreboardError, TeamNotFoundError
from ..engine.ledger import MATCH_ANY
from ..utils.logger_config import get_logger

logger = get_logger("server")

api_bp = Blueprint("icpcboard_api", __name__, url_prefix="/api")


def _get_contest() -> Contest:
    return current_app.extensions["icpcboard_contest"]


def _error(message: str, status_code: int):
    return jsonify({"status": "error", "message": message}), status_code


@api_bp.errorhandler(TeamNotFoundError)
def handle_team_not_found(exc: TeamNotFoundError):
    return _error(exc.message, 404)


@api_bp.errorhandler(ScoreboardError)
def handle_rejection(exc: ScoreboardError):
    return _error(exc.message, 409)


@api_bp.route("/commands", methods=["POST"])
def run_commands() -> Response:
    payload: Dict[str, Any] = request.get_json(silent=True) or {}
    text = payload.get("commands")
    if not isinstance(text, str):
        return _error("Field 'commands' must be a string", 400)

    runner = CommandRunner(_get_contest())
    try:
        output = runner.run_text(text)
    except ValueError as exc:
        logger.warning(f"Malformed command stream: {exc}")
        return _error(f"Malformed command stream: {exc}", 400)

    return jsonify({"status": "success", "data": {"output": output}})


@api_bp.route("/board", methods=["GET"])
def get_board() -> Response:
    contest = _get_contest()
    board = contest.board()
    data = board.to_dict()
    data["frozen"] = contest.frozen
    return jsonify({"status": "success", "data": data})


@api_bp.route("/flush", methods=["POST"])
def flush_board() -> Response:
    board = _get_contest().flush()
    return jsonify({"status": "success", "data": board.to_dict()})


@api_bp.route("/freeze", methods=["POST"])
def freeze_board() -> Response:
    _get_contest().freeze()
    return jsonify({"status": "success", "data": {"frozen": True}})


@api_bp.route("/scroll", methods=["POST"])
def scroll_board() -> Response:
    result = _get_contest().scroll()
    return jsonify({"status": "success", "data": result.to_dict()})


@api_bp.route("/teams/<name>/ranking", methods=["GET"])
def get_ranking(name: str) -> Response:
    query = _get_contest().query_ranking(name)
    return jsonify({"status": "success", "data": query.to_dict()})


@api_bp.route("/teams/<name>/submissions", methods=["GET"])
def get_submission(name: str) -> Response:
    problem = request.args.get("problem", MATCH_ANY)
    status = request.args.get("status", MATCH_ANY)
    submission = _get_contest().query_submission(name, problem, status)
    return jsonify({
        "status": "success",
        "data": {
            "team": name,
            "submission": submission.to_dict() if submission else None,
        },
    })


def register_api_blueprint(app, *, contest: Contest) -> None:
    """Register the API blueprint and attach the contest to the Flask app."""

    app.extensions.setdefault("icpcboard_contest", contest)
    if "icpcboard_api" not in app.blueprints:
        app.register_blueprint(api_bp)
