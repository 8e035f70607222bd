"""The running score, the high-score table and the systems reporting them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

DEFAULT_PLAYER_NAME = "Player"


class _ScoredEvent(Protocol):
    score: int


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass
class ScoreBoard:
    """Current score plus the list of (player name, score) high scores.

    Both parts count as changed when first created, so the reporting
    systems announce them once at start-up.
    """

    value: int = 0
    high_scores: list[tuple[str, int]] = field(default_factory=list)
    score_changed: bool = field(default=True, repr=False)
    high_scores_changed: bool = field(default=True, repr=False)

    def add_point(self) -> None:
        """Add one to the current score."""
        self.value += 1
        self.score_changed = True

    def record_game_over(self, score: int) -> None:
        """Append a finished game's score to the high-score table."""
        self.high_scores.append((DEFAULT_PLAYER_NAME, score))
        self.high_scores_changed = True

    def describe_high_scores(self) -> str:
        entries = ", ".join(f"({_quote(name)}, {score})" for name, score in self.high_scores)
        return f"HighScores {{ scores: [{entries}] }}"


def update_score(board: ScoreBoard) -> str | None:
    """Print the score if it changed since the last call; return the line printed."""
    if not board.score_changed:
        return None
    board.score_changed = False
    line = f"Score: {board.value}"
    print(line)
    return line


def update_high_scores(board: ScoreBoard, events: Iterable[_ScoredEvent]) -> None:
    """Record every game-over event in the high-score table."""
    for event in events:
        board.record_game_over(event.score)


def high_scores_updated(board: ScoreBoard) -> str | None:
    """Print the high-score table if it changed; return the line printed."""
    if not board.high_scores_changed:
        return None
    board.high_scores_changed = False
    line = f"High Scores: {board.describe_high_scores()}"
    print(line)
    return line