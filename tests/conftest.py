"""
Shared pytest fixtures for QuickCraps tests.

Provides helpers for building known rolls and scripted dice.
"""
import pytest

from quick_craps.bets import DEFAULT_CATALOG
from quick_craps.dice import DiceRoll, SequenceDice
from quick_craps.game import PlayerRoll, TableRules

# an "easy" (or only) way to make each total
EASY_FACES = {
    2: (1, 1), 3: (1, 2), 4: (1, 3), 5: (2, 3), 6: (2, 4), 7: (3, 4),
    8: (3, 5), 9: (4, 5), 10: (4, 6), 11: (5, 6), 12: (6, 6),
}
HARD_FACES = {4: (2, 2), 6: (3, 3), 8: (4, 4), 10: (5, 5)}


def roll(total: int, hard: bool = False) -> DiceRoll:
    """Build a DiceRoll for a total, made the hard way if asked.

    Examples:
        >>> roll(6, hard=True).faces
        (3, 3)
    """
    return DiceRoll(HARD_FACES[total] if hard else EASY_FACES[total])


def faces(*totals) -> list[tuple[int, int]]:
    """Face pairs for a list of totals; 'h6' style strings mean hard."""
    result = []
    for total in totals:
        if isinstance(total, str) and total.startswith('h'):
            result.append(HARD_FACES[int(total[1:])])
        else:
            result.append(EASY_FACES[total])
    return result


@pytest.fixture
def rules() -> TableRules:
    return TableRules()


@pytest.fixture
def catalog():
    return DEFAULT_CATALOG


@pytest.fixture
def r():
    """Expose the roll() helper as a fixture for convenience."""
    return roll


@pytest.fixture
def classified():
    """Build a PlayerRoll already tagged with an outcome."""
    def build(total: int, outcome, hard: bool = False) -> PlayerRoll:
        player_roll = PlayerRoll(roll(total, hard))
        player_roll.outcome = outcome
        return player_roll
    return build


@pytest.fixture
def scripted_dice():
    def build(*totals) -> SequenceDice:
        return SequenceDice(faces(*totals))
    return build
