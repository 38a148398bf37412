"""
High score table, kept in a JSON file on the player's machine
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from space_invaders.utils import logger

ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class HighScore:
    name: str
    score: int


class HighScoreTable:
    """
    Best scores first, at most ``limit`` of them
    """

    def __init__(self, path: Path | str, limit: int = 10):
        """
        :param path: JSON file holding the table
        :type path: Path | str

        :param limit: How many scores to keep
        :type limit: int
        """
        self.path = Path(path)
        self.limit = limit
        self.entries: list[HighScore] = []

    def __len__(self) -> int:
        return len(self.entries)

    def load(self) -> list[HighScore]:
        """
        Read the table from disk

        A missing file is an empty table. So is a file that cannot be parsed,
        after logging it.
        """
        if not self.path.exists():
            logger.debug(f"No high scores at {self.path}")
            self.entries = []
            return self.entries

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            entries = [HighScore(str(e["name"]), int(e["score"])) for e in data]
        except (OSError, ValueError, TypeError, KeyError) as e:
            logger.error(f"Failed to read high scores from {self.path}: {e}")
            entries = []

        self.entries = sorted(entries, key=lambda e: e.score, reverse=True)[
            : self.limit
        ]
        return self.entries

    def save(self) -> bool:
        """
        Write the table to disk

        A failed write is logged and the game carries on without it.

        :return: True if the table was written
        :rtype: bool
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps([asdict(e) for e in self.entries], indent=2),
                encoding="utf-8",
            )
        except OSError as e:
            logger.error(f"Failed to write high scores to {self.path}: {e}")
            return False

        logger.debug(f"Saved {len(self.entries)} high scores to {self.path}")
        return True

    def qualifies(self, score: int) -> bool:
        """Check whether a score would make it into the table."""
        if score <= 0:
            return False
        if len(self.entries) < self.limit:
            return True
        return score > self.entries[-1].score

    def submit(self, score: int, name: str = ANONYMOUS) -> int | None:
        """
        Add a score if it qualifies

        Ties go below the scores already in the table.

        :param score: Final score
        :type score: int

        :param name: Who made it
        :type name: str

        :return: 1-based rank, or None if the score did not qualify
        :rtype: int | None
        """
        if not self.qualifies(score):
            return None

        rank = 0
        while rank < len(self.entries) and self.entries[rank].score >= score:
            rank += 1

        self.entries.insert(rank, HighScore(name or ANONYMOUS, score))
        del self.entries[self.limit :]

        logger.info(f"New high score {score} by {name or ANONYMOUS} at #{rank + 1}")
        return rank + 1
