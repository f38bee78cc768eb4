"""Command-line entry point: run a contest command stream."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from ..client import ScoreboardClient, ScoreboardClientError
from ..engine.contest import Contest
from ..utils.config_manager import ConfigManager, set_config
from ..utils.logger_config import get_logger, setup_logging
from .protocol import CommandRunner, iter_tokens, parse_commands

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate an ICPC contest scoreboard from a command stream"
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="File with protocol commands (default: read from stdin)",
    )
    parser.add_argument(
        "--config",
        help="Path to a JSON configuration file (default: config/icpcboard.json)",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level for stderr output (default from config: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        help="Also write DEBUG logs to this file",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored log output",
    )
    parser.add_argument(
        "--penalty",
        type=int,
        help="Penalty minutes per rejected attempt (default: 20)",
    )
    parser.add_argument(
        "--remote",
        metavar="URL",
        help="Send the commands to a running icpcboard-server instead of evaluating locally",
    )
    return parser


def run_local(source: TextIO, out: TextIO, penalty_per_reject: int) -> None:
    runner = CommandRunner(Contest(penalty_per_reject=penalty_per_reject))
    for line in runner.run(parse_commands(iter_tokens(source))):
        out.write(line + "\n")


def run_remote(source: TextIO, out: TextIO, api_base: str) -> int:
    client = ScoreboardClient(api_base)
    try:
        lines = client.send_commands(source.read())
    except ScoreboardClientError as e:
        logger.error(f"Remote scoreboard rejected the request: {e}")
        return 1
    for line in lines:
        out.write(line + "\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = ConfigManager(args.config)
    set_config(config)
    setup_logging(
        level=args.log_level or config.get("log.level", "WARNING"),
        log_file=args.log_file or config.get("log.file"),
        enable_colors=not args.no_color and bool(config.get("log.enable_colors", True)),
    )

    penalty = args.penalty if args.penalty is not None else int(config.get("scoreboard.penalty_per_reject", 20))

    try:
        source = open(args.input, "r", encoding="utf-8") if args.input else sys.stdin
    except OSError as e:
        parser.error(f"cannot read {args.input}: {e.strerror}")
    try:
        if args.remote:
            return run_remote(source, sys.stdout, args.remote)
        run_local(source, sys.stdout, penalty)
        return 0
    except ValueError as e:
        logger.error(f"Malformed command stream: {e}")
        return 1
    finally:
        if source is not sys.stdin:
            source.close()


if __name__ == "__main__":
    sys.exit(main())
