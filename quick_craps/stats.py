"""
Statistics for turns, players and the dice.
"""
import statistics
from collections import Counter
from typing import TYPE_CHECKING, Optional

from .dice import DiceRoll
from .errors import RollNotClassified
from .game import ON_PHASE_OUTCOMES, Outcome, PlayerRoll

if TYPE_CHECKING:
    from .player import Player
    from .round import PlayerTurn

TOTAL_ROLLS = 'total_rolls'


class PlayerTurnStatsKeeper:
    """Tallies one turn's outcomes and money."""

    def __init__(self, start_rail: int, turn_number: int):
        self.turn_number = turn_number
        self.start_rail = start_rail
        self.end_rail: Optional[int] = None
        self.outcome_counts: Counter = Counter()
        self.place_counts: Counter = Counter()
        self.point_counts: Counter = Counter()
        self.point_run = 0
        self.longest_point_run = 0

    @property
    def total_rolls(self) -> int:
        return self.outcome_counts[TOTAL_ROLLS]

    def tally(self, player_roll: PlayerRoll) -> None:
        if not player_roll.is_classified:
            raise RollNotClassified(f"no outcome yet for roll {player_roll.roll}")
        outcome = player_roll.outcome

        self.outcome_counts[TOTAL_ROLLS] += 1
        self.outcome_counts[outcome.value] += 1

        if outcome == Outcome.PLACE_WINNER:
            self.place_counts[player_roll.total] += 1
        elif outcome == Outcome.POINT_WINNER:
            self.point_counts[player_roll.total] += 1

        if outcome == Outcome.POINT_ESTABLISHED:
            self.point_run = 0
        elif outcome in ON_PHASE_OUTCOMES:
            self.point_run += 1
            self.longest_point_run = max(self.longest_point_run, self.point_run)

    def settle(self, net: int) -> None:
        self.end_rail = self.start_rail + net

    def to_dict(self) -> dict:
        money = {'start': self.start_rail}
        if self.end_rail is not None:
            money['end'] = self.end_rail
            money['net'] = self.end_rail - self.start_rail
        return {
            'turn': self.turn_number,
            'outcomes': dict(self.outcome_counts),
            'point_winners': dict(sorted(self.point_counts.items())),
            'place_winners': dict(sorted(self.place_counts.items())),
            'longest_point_run': self.longest_point_run,
            'money': money,
        }


class ConsecutiveNumberStatsKeeper:
    """
    Longest run of back-to-back rolls of one number.

    Watches every roll of the dice for the whole session; only `reset()`
    clears it.
    """

    def __init__(self, number: int, name: Optional[str] = None):
        self.number = number
        self.name = name or f"consecutive_{number}s"
        self.current_run = 0
        self.max_run = 0

    def observe(self, roll: DiceRoll) -> None:
        if roll.total == self.number:
            self.current_run += 1
            self.max_run = max(self.max_run, self.current_run)
        else:
            self.current_run = 0

    def reset(self) -> None:
        self.current_run = 0
        self.max_run = 0

    def stats(self) -> dict:
        return {'number': self.number, 'longest_streak': self.max_run}


class PlayerStats:
    """Roll-length statistics over every turn a player has taken."""

    def __init__(self, player: 'Player'):
        self.player = player

    @property
    def turns(self) -> list['PlayerTurn']:
        return self.player.turns

    def roll_lengths(self) -> dict[int, int]:
        """Number of turns for each turn length in rolls."""
        lengths = Counter(turn.roll_count for turn in self.turns)
        return dict(sorted(lengths.items()))

    def longest_turn(self) -> Optional['PlayerTurn']:
        if not self.turns:
            return None
        return max(self.turns, key=lambda turn: turn.roll_count)

    def avg_rolls_before_seven_out(self) -> float:
        if not self.turns:
            return 0.0
        return statistics.mean(turn.roll_count for turn in self.turns)

    def to_dict(self) -> dict:
        longest = self.longest_turn()
        return {
            'name': self.player.name,
            'buyin': self.player.buyin,
            'rail': self.player.rail,
            'turns': len(self.turns),
            'roll_lengths': self.roll_lengths(),
            'longest_roll': {
                'rolls': longest.roll_count if longest else 0,
                'detailed_stats': longest.stats() if longest else {},
            },
            'avg_rolls_before_seven_out': self.avg_rolls_before_seven_out(),
        }
