"""
Players at the table.
"""
from typing import Optional

from .bets import DEFAULT_CATALOG, BetCatalog
from .dice import Dice
from .game import TableRules
from .round import PlayerTurn
from .stats import PlayerStats
from .strategy import BettingPolicy


class Player:
    """A player's bankroll and the turns they have shot."""

    def __init__(self, name: str, buyin: int):
        self.name = name
        self.buyin = buyin
        self.rail = buyin
        self.turns: list[PlayerTurn] = []

    def new_player_turn(self, dice: Dice, rules: TableRules,
                        policy: Optional[BettingPolicy] = None,
                        catalog: BetCatalog = DEFAULT_CATALOG) -> PlayerTurn:
        turn = PlayerTurn(self, dice, len(self.turns) + 1, rules, policy, catalog)
        self.turns.append(turn)
        return turn

    def settle_turn(self, net: int) -> None:
        self.rail += net

    @property
    def net_change(self) -> int:
        return self.rail - self.buyin

    def stats(self) -> dict:
        return PlayerStats(self).to_dict()

    def __repr__(self) -> str:
        return f"Player({self.name}: {len(self.turns)} turns, rail={self.rail})"
