"""
Text command protocol.

Commands are read as a whitespace-separated token stream, the way a judge
feeds them: a command keyword followed by a fixed number of operand
tokens. The runner turns each command into the protocol's output lines.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, List, Tuple

from ..engine.contest import Contest
from ..engine.errors import ScoreboardError, TeamNotFoundError
from ..engine.ledger import MATCH_ANY
from ..utils.logger_config import get_logger

logger = get_logger("protocol")

# Operand token count per command keyword
ARITY: Dict[str, int] = {
    "ADDTEAM": 1,
    "START": 4,        # DURATION <d> PROBLEM <n>
    "SUBMIT": 7,       # <P> BY <team> WITH <status> AT <t>
    "FLUSH": 0,
    "FREEZE": 0,
    "SCROLL": 0,
    "QUERY_RANKING": 1,
    "QUERY_SUBMISSION": 5,  # <team> WHERE PROBLEM=<p> AND STATUS=<s>
    "END": 0,
}

FROZEN_WARNING = "[Warning]Scoreboard is frozen. The ranking may be inaccurate until it were scrolled."
NO_SUBMISSION = "Cannot find any submission."


@dataclass(frozen=True)
class Command:
    name: str
    operands: Tuple[str, ...] = field(default_factory=tuple)


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def parse_commands(tokens: Iterable[str]) -> Iterator[Command]:
    """
    Group a token stream into commands.

    Unknown keywords are skipped one token at a time. A command cut short by
    the end of the stream is dropped.
    """
    stream = iter(tokens)
    for keyword in stream:
        arity = ARITY.get(keyword)
        if arity is None:
            logger.debug(f"Skipping unknown token {keyword!r}")
            continue
        operands = []
        while len(operands) < arity:
            token = next(stream, None)
            if token is None:
                break
            operands.append(token)
        if len(operands) < arity:
            logger.warning(f"Truncated {keyword} command at end of input")
            return
        yield Command(keyword, tuple(operands))


def _filter_value(expression: str, prefix: str) -> str:
    """Value after `prefix`; a missing prefix or empty value matches nothing"""
    if expression.startswith(prefix):
        return expression[len(prefix):]
    return ""


class CommandRunner:
    """Executes protocol commands against a contest and renders the replies"""

    def __init__(self, contest: Contest):
        self.contest = contest
        self._handlers: Dict[str, Callable[[Tuple[str, ...]], List[str]]] = {
            "ADDTEAM": self._add_team,
            "START": self._start,
            "SUBMIT": self._submit,
            "FLUSH": self._flush,
            "FREEZE": self._freeze,
            "SCROLL": self._scroll,
            "QUERY_RANKING": self._query_ranking,
            "QUERY_SUBMISSION": self._query_submission,
            "END": self._end,
        }

    def execute(self, command: Command) -> List[str]:
        handler = self._handlers[command.name]
        try:
            return handler(command.operands)
        except ScoreboardError as e:
            logger.warning(f"Rejected {command.name}: {e.message}")
            return [f"[Error]{e.message}"]

    def run(self, commands: Iterable[Command]) -> Iterator[str]:
        """Execute commands in order, stopping after END"""
        for command in commands:
            yield from self.execute(command)
            if command.name == "END":
                break

    def run_text(self, text: str) -> List[str]:
        return list(self.run(parse_commands(iter_tokens(text.splitlines()))))

    def _add_team(self, operands: Tuple[str, ...]) -> List[str]:
        self.contest.add_team(operands[0])
        return ["[Info]Add successfully."]

    def _start(self, operands: Tuple[str, ...]) -> List[str]:
        _, duration, _, problem_count = operands
        self.contest.start(int(duration), int(problem_count))
        return ["[Info]Competition starts."]

    def _submit(self, operands: Tuple[str, ...]) -> List[str]:
        problem, _, team, _, status, _, time = operands
        try:
            self.contest.submit(problem[0], team, status, int(time))
        except TeamNotFoundError:
            # SUBMIT has no reply; unknown teams are dropped
            logger.warning(f"Ignoring submission for unknown team {team!r}")
        return []

    def _flush(self, operands: Tuple[str, ...]) -> List[str]:
        self.contest.flush()
        return ["[Info]Flush scoreboard."]

    def _freeze(self, operands: Tuple[str, ...]) -> List[str]:
        self.contest.freeze()
        return ["[Info]Freeze scoreboard."]

    def _scroll(self, operands: Tuple[str, ...]) -> List[str]:
        result = self.contest.scroll()
        lines = ["[Info]Scroll scoreboard."]
        lines.extend(result.before.to_lines())
        lines.extend(change.to_line() for change in result.changes)
        lines.extend(result.after.to_lines())
        return lines

    def _query_ranking(self, operands: Tuple[str, ...]) -> List[str]:
        query = self.contest.query_ranking(operands[0])
        lines = ["[Info]Complete query ranking."]
        if query.frozen:
            lines.append(FROZEN_WARNING)
        lines.append(f"{query.team} NOW AT RANKING {query.rank}")
        return lines

    def _query_submission(self, operands: Tuple[str, ...]) -> List[str]:
        team, _, problem_expr, _, status_expr = operands
        problem = _filter_value(problem_expr, "PROBLEM=")
        if problem != MATCH_ANY:
            problem = problem[:1]
        status = _filter_value(status_expr, "STATUS=")
        submission = self.contest.query_submission(team, problem, status)
        lines = ["[Info]Complete query submission."]
        if submission is None:
            lines.append(NO_SUBMISSION)
        else:
            lines.append(f"{team} {submission.problem} {submission.status.value} {submission.time}")
        return lines

    def _end(self, operands: Tuple[str, ...]) -> List[str]:
        self.contest.end()
        return ["[Info]Competition ends."]
