"""Standalone Flask application serving the scoreboard API."""

from __future__ import annotations

import argparse
from typing import Optional

from flask import Flask

from ..engine.contest import Contest
from ..utils.config_manager import ConfigManager, get_config
from ..utils.logger_config import get_logger, setup_logging
from .blueprint import register_api_blueprint

logger = get_logger("server")


def create_app(contest: Optional[Contest] = None, config: Optional[ConfigManager] = None) -> Flask:
    """Create a Flask app around a single contest."""

    config = config or get_config()
    if contest is None:
        contest = Contest(penalty_per_reject=int(config.get("scoreboard.penalty_per_reject", 20)))

    app = Flask(__name__)
    register_api_blueprint(app, contest=contest)
    return app


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Serve an ICPC contest scoreboard over HTTP"
    )
    parser.add_argument(
        "--config",
        help="Path to a JSON configuration file (default: config/icpcboard.json)",
    )
    parser.add_argument(
        "--host",
        help="Host to bind the server (default from config: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Port to bind the server (default from config: 5000)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode",
    )

    args = parser.parse_args()

    config = get_config(args.config)
    setup_logging(
        level=config.get("log.level", "INFO"),
        log_file=config.get("log.file"),
        enable_colors=bool(config.get("log.enable_colors", True)),
    )

    host = args.host or config.get("server.host", "127.0.0.1")
    port = args.port or int(config.get("server.port", 5000))

    app = create_app(config=config)
    logger.info(f"Starting scoreboard server on {host}:{port}")
    # Events must be applied one at a time
    app.run(host=host, port=port, debug=args.debug, threaded=False)


if __name__ == "__main__":
    main()
