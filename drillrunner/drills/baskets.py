"""Fruit baskets and a football scores table built with dictionaries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255


class Fruit(Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """Return a basket holding at least three kinds and five pieces of fruit."""
    basket = {"banana": 2}
    basket["apple"] = 3
    basket["mango"] = 1
    return basket


def fill_fruit_basket(basket: dict[Fruit, int]) -> dict[Fruit, int]:
    """Add one of every fruit kind missing from *basket*; present kinds stay untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)
    return basket


@dataclass
class Team:
    """A team's name with the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add the goals of one match, keeping each total within a byte."""
        goals_scored = self.goals_scored + scored
        goals_conceded = self.goals_conceded + conceded
        if goals_scored > _U8_MAX or goals_conceded > _U8_MAX:
            raise OverflowError(f"goal count of {self.name} overflowed")
        self.goals_scored = goals_scored
        self.goals_conceded = goals_conceded


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.lstrip("+").isdigit() or text.count("+") > 1:
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of "team_1,team_2,goals_1,goals_2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        scores.setdefault(team_1_name, Team(team_1_name)).record(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team(team_2_name)).record(team_2_score, team_1_score)
    return scores