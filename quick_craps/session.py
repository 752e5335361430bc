"""
Session driver: hands the dice around the table for a number of turns.
"""
import logging
import secrets
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .bets import DEFAULT_CATALOG, BetCatalog
from .dice import Dice
from .game import TableRules
from .player import Player
from .round import RoundEngine
from .stats import ConsecutiveNumberStatsKeeper
from .strategies import PassLineOddsAndPlace
from .strategy import BettingPolicy

log = logging.getLogger(__name__)

SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_ROLL = 60
ROLLS_PER_HOUR = SECONDS_PER_HOUR // SECONDS_PER_ROLL
DEFAULT_BUYIN_UNITS = 40


@dataclass
class SessionConfig:
    """Configuration for a simulated session."""
    num_players: int = 6
    hours_of_play: int = 4
    rolls_per_hour: int = ROLLS_PER_HOUR
    total_turns: Optional[int] = None
    bet_unit: int = 25
    table_limit: int = 5000
    buyin: Optional[int] = None
    seed: Optional[int] = None
    streak_numbers: tuple[int, ...] = (7,)
    rules: TableRules = field(init=False)

    def __post_init__(self):
        if self.num_players < 1:
            raise ValueError("Need at least one player")
        if self.total_turns is None:
            self.total_turns = self.hours_of_play * self.rolls_per_hour
        if self.total_turns < 0:
            raise ValueError("Total turns must not be negative")
        if self.buyin is None:
            self.buyin = DEFAULT_BUYIN_UNITS * self.bet_unit
        if self.seed is None:
            self.seed = secrets.randbits(64)
        self.rules = TableRules(bet_unit=self.bet_unit, table_limit=self.table_limit)


class PlayerRotation(Protocol):
    """Supplies the next player to get the dice."""

    def next_player(self) -> Player: ...


class RoundRobinRotation:
    """Passes the dice around the table in seat order."""

    def __init__(self, players: list[Player]):
        if not players:
            raise ValueError("Need at least one player")
        self.players = players
        self._next = 0

    def next_player(self) -> Player:
        player = self.players[self._next]
        self._next = (self._next + 1) % len(self.players)
        return player


class CrapsSession:
    """
    Plays `total_turns` turns at one table with one set of dice.

    The same config (including its seed) always replays the same session.
    """

    def __init__(self, config: Optional[SessionConfig] = None,
                 policy: Optional[BettingPolicy] = None,
                 rotation: Optional[PlayerRotation] = None,
                 catalog: BetCatalog = DEFAULT_CATALOG,
                 dice: Optional[Dice] = None):
        self.config = config or SessionConfig()
        self.rules = self.config.rules
        self.catalog = catalog
        self.policy = policy or PassLineOddsAndPlace(self.rules)
        self.players = [
            Player(name=f"Player{n + 1}", buyin=self.config.buyin)
            for n in range(self.config.num_players)
        ]
        self.rotation = rotation or RoundRobinRotation(self.players)
        self.dice = dice or Dice(seed=self.config.seed)
        for number in self.config.streak_numbers:
            self.dice.attach(ConsecutiveNumberStatsKeeper(number))
        self.turns_played = 0
        self.shooter: Optional[Player] = None

    @property
    def seed(self) -> int:
        return self.config.seed

    @property
    def total_turns(self) -> int:
        return self.config.total_turns

    @classmethod
    def run_session(cls, policy: Optional[BettingPolicy] = None, **kwargs) -> dict:
        """Build a session from config keywords, play it and return its stats."""
        session = cls(SessionConfig(**kwargs), policy=policy)
        session.run()
        return session.stats()

    def next_player_turn(self) -> int:
        self.shooter = self.rotation.next_player()
        turn = self.shooter.new_player_turn(self.dice, self.rules, self.policy, self.catalog)
        net = RoundEngine(turn).play()
        self.turns_played += 1
        return net

    def run(self) -> None:
        log.info("Starting session: %d players, %d turns, seed=%s, policy=%s",
                 len(self.players), self.total_turns, self.seed, self.policy.name)
        for _ in range(self.total_turns):
            self.next_player_turn()
        log.info("Session finished: %d turns, %d rolls", self.turns_played, self.dice.total_rolls)

    def reset(self) -> None:
        """Clear dice and streak stats for a fresh session on the same dice."""
        self.dice.reset()

    def stats(self) -> dict:
        return {
            'seed': self.seed,
            'policy': self.policy.name,
            'hours_of_play': self.config.hours_of_play,
            'total_turns': self.total_turns,
            'players': [player.stats() for player in self.players],
            'dice': self.dice.stats(),
        }

    def __repr__(self) -> str:
        return f"CrapsSession({len(self.players)} players, {self.dice.total_rolls} rolls of dice)"
