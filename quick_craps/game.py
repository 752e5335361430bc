"""
Table rules, table state and roll classification.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .dice import DiceRoll
from .errors import RollAlreadyClassified, RollNotClassified

POINTS = (4, 5, 6, 8, 9, 10)
NATURALS = (7, 11)
CRAPS = (2, 3, 12)
SEVEN = 7


@dataclass
class TableRules:
    """Betting limits for the table."""
    bet_unit: int = 25       # also the table minimum
    table_limit: int = 5000

    def __post_init__(self):
        if self.bet_unit < 1:
            raise ValueError("Bet unit must be at least 1")
        if self.table_limit < self.bet_unit:
            raise ValueError("Table limit must be >= bet unit")


class TablePhase(Enum):
    """Whether a point is established."""
    OFF = "off"
    ON = "on"


class Outcome(Enum):
    """Classification of a roll against the table phase it was rolled in."""
    POINT_ESTABLISHED = "point"
    FRONT_LINE_WINNER = "front_line_winner"
    CRAPS = "craps"
    POINT_WINNER = "point_winner"
    PLACE_WINNER = "place_winner"
    HORN_WINNER = "horn"
    SEVEN_OUT = "seven_out"

    @property
    def symbol(self) -> str:
        return _OUTCOME_SYMBOLS[self]


_OUTCOME_SYMBOLS = {
    Outcome.POINT_ESTABLISHED: "*",
    Outcome.POINT_WINNER: "!",
    Outcome.FRONT_LINE_WINNER: "!",
    Outcome.PLACE_WINNER: "",
    Outcome.CRAPS: "x",
    Outcome.HORN_WINNER: "",
    Outcome.SEVEN_OUT: "x",
}

ON_PHASE_OUTCOMES = frozenset({
    Outcome.POINT_WINNER,
    Outcome.PLACE_WINNER,
    Outcome.HORN_WINNER,
    Outcome.SEVEN_OUT,
})


class TableState:
    """The puck: OFF with no point, or ON with a point."""

    def __init__(self):
        self.phase = TablePhase.OFF
        self.point: Optional[int] = None

    @property
    def is_on(self) -> bool:
        return self.phase == TablePhase.ON

    @property
    def is_off(self) -> bool:
        return self.phase == TablePhase.OFF

    def set_on(self, point: int) -> None:
        if point not in POINTS:
            raise ValueError(f"Invalid point: {point}")
        self.phase = TablePhase.ON
        self.point = point

    def set_off(self) -> None:
        self.phase = TablePhase.OFF
        self.point = None

    def __repr__(self) -> str:
        if self.is_on:
            return f"TableState(ON, point={self.point})"
        return "TableState(OFF)"


class PlayerRoll:
    """
    One roll of the turn, tagged with its outcome once classified.

    The outcome can be assigned exactly once.
    """

    def __init__(self, roll: DiceRoll):
        self.roll = roll
        self._outcome: Optional[Outcome] = None

    @property
    def total(self) -> int:
        return self.roll.total

    @property
    def is_hard(self) -> bool:
        return self.roll.is_hard

    def hard(self, number: int) -> bool:
        return self.roll.hard(number)

    @property
    def is_classified(self) -> bool:
        return self._outcome is not None

    @property
    def outcome(self) -> Outcome:
        if self._outcome is None:
            raise RollNotClassified(f"no outcome yet for roll {self.roll}")
        return self._outcome

    @outcome.setter
    def outcome(self, outcome: Outcome) -> None:
        if self._outcome is not None:
            raise RollAlreadyClassified(f"roll {self.roll} already classified as {self._outcome.name}")
        self._outcome = outcome

    def __str__(self) -> str:
        symbol = self._outcome.symbol if self._outcome else "?"
        return f"{self.total}{'h' if self.is_hard else ''}{symbol}"

    __repr__ = __str__


class TableStateMachine:
    """Classifies each roll against the current phase and moves the puck."""

    def __init__(self, state: Optional[TableState] = None):
        self.state = state or TableState()

    def classify(self, player_roll: PlayerRoll) -> Outcome:
        """Tag the roll with its outcome, updating the table state."""
        total = player_roll.total
        if self.state.is_off:
            outcome = self._classify_come_out(total)
        else:
            outcome = self._classify_point_roll(total)
        player_roll.outcome = outcome
        return outcome

    def _classify_come_out(self, total: int) -> Outcome:
        if total in NATURALS:
            return Outcome.FRONT_LINE_WINNER
        if total in CRAPS:
            return Outcome.CRAPS
        self.state.set_on(total)
        return Outcome.POINT_ESTABLISHED

    def _classify_point_roll(self, total: int) -> Outcome:
        if total == SEVEN:
            self.state.set_off()
            return Outcome.SEVEN_OUT
        if total == self.state.point:
            self.state.set_off()
            return Outcome.POINT_WINNER
        if total in POINTS:
            return Outcome.PLACE_WINNER
        return Outcome.HORN_WINNER
