"""
The per-turn driver: bet, roll, classify, settle, tally, until seven-out.
"""
import logging
from typing import TYPE_CHECKING, Iterator, Optional

from .bet_book import BetBook
from .bets import DEFAULT_CATALOG, BetCatalog
from .dice import Dice
from .game import Outcome, PlayerRoll, TableRules, TableStateMachine
from .stats import PlayerTurnStatsKeeper
from .strategy import BettingPolicy

if TYPE_CHECKING:
    from .player import Player

log = logging.getLogger(__name__)


class PlayerTurn:
    """One shooter's rolls from getting the dice to the seven-out."""

    def __init__(self, player: 'Player', dice: Dice, turn_number: int,
                 rules: TableRules, policy: Optional[BettingPolicy] = None,
                 catalog: BetCatalog = DEFAULT_CATALOG):
        self.player = player
        self.dice = dice
        self.turn_number = turn_number
        self.policy = policy
        self.rolls: list[PlayerRoll] = []
        self.bet_book = BetBook(rules, catalog)
        self.stats_keeper = PlayerTurnStatsKeeper(player.rail, turn_number)
        self.is_complete = False

    @property
    def roll_count(self) -> int:
        return len(self.rolls)

    def make_bets(self, table_state) -> None:
        if self.policy is not None:
            self.policy.make_bets(self.bet_book, table_state)

    def roll(self) -> PlayerRoll:
        player_roll = PlayerRoll(self.dice.roll())
        self.rolls.append(player_roll)
        return player_roll

    def pay_bets(self, player_roll: PlayerRoll) -> int:
        return self.bet_book.evaluate(player_roll)

    def keep_stats(self, player_roll: PlayerRoll) -> None:
        self.stats_keeper.tally(player_roll)

    def finish(self) -> int:
        """Bring down whatever is still working and settle with the rail."""
        self.bet_book.take_down_all()
        net = self.bet_book.net_result()
        self.stats_keeper.settle(net)
        self.is_complete = True
        return net

    def stats(self) -> dict:
        snapshot = self.stats_keeper.to_dict()
        snapshot['rolls'] = [str(r) for r in self.rolls]
        snapshot['bets'] = self.bet_book.stats()
        return snapshot

    def __repr__(self) -> str:
        return f"PlayerTurn({self.player.name}, turn={self.turn_number}, rolls={self.roll_count})"


class RoundEngine:
    """
    Plays a single turn to its seven-out.

    `rolls()` yields each classified, settled roll lazily; `play()` runs the
    turn to completion and returns the turn's net result.
    """

    def __init__(self, player_turn: PlayerTurn):
        self.player_turn = player_turn
        self.table = TableStateMachine()

    @property
    def table_state(self):
        return self.table.state

    def rolls(self) -> Iterator[PlayerRoll]:
        if self.player_turn.is_complete:
            raise RuntimeError(f"{self.player_turn!r} is already complete")
        keep_rolling = True
        while keep_rolling:
            player_roll = self.player_roll()
            keep_rolling = player_roll.outcome != Outcome.SEVEN_OUT
            yield player_roll

    def player_roll(self) -> PlayerRoll:
        """Bet, roll and settle one roll of the turn."""
        turn = self.player_turn
        turn.make_bets(self.table_state)

        player_roll = turn.roll()
        self.table.classify(player_roll)

        net = turn.pay_bets(player_roll)
        turn.keep_stats(player_roll)
        log.debug("%s roll %d: %s (%s) net %+d", turn.player.name, turn.roll_count,
                  player_roll, player_roll.outcome.name, net)
        return player_roll

    def play(self) -> int:
        for _ in self.rolls():
            pass
        net = self.player_turn.finish()
        self.player_turn.player.settle_turn(net)
        log.debug("%s turn %d over after %d rolls, net %+d", self.player_turn.player.name,
                  self.player_turn.turn_number, self.player_turn.roll_count, net)
        return net
