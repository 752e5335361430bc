"""
A shooter's bets for one turn.

Bets are kept per bet name as an ordered history. Only the newest entry for
a name can still be working; older entries are finished and kept for stats.
"""
import logging
from collections import defaultdict
from typing import Iterator, Optional

from .bets import DEFAULT_CATALOG, BetCatalog, BetDefinition
from .dice import DiceRoll
from .errors import InvalidBetAmount, RollNotClassified
from .game import PlayerRoll, TableRules
from .ledger import PlayerBet, PressStrategy

log = logging.getLogger(__name__)


class BetBook:
    """Manages all bets made during a single turn."""

    def __init__(self, rules: TableRules, catalog: BetCatalog = DEFAULT_CATALOG):
        self.rules = rules
        self.catalog = catalog
        self.player_bets: dict[str, list[PlayerBet]] = defaultdict(list)

    def active_bet(self, definition: BetDefinition) -> Optional[PlayerBet]:
        """The working (on or off) bet for `definition`, if any."""
        history = self.player_bets.get(definition.name)
        if not history:
            return None
        candidate = history[-1]
        return candidate if candidate.is_active else None

    def each_active_bet(self) -> Iterator[PlayerBet]:
        for history in list(self.player_bets.values()):
            if history and history[-1].is_active:
                yield history[-1]

    def ensure(self, definition: BetDefinition, amount: int,
               press_strategy: Optional[PressStrategy] = None,
               regress: bool = False) -> Optional[PlayerBet]:
        """
        Make sure a bet on `definition` is working at `amount`.

        An existing bet that is on is pressed up to `amount`; with `regress`
        it is also taken down to `amount`. Bets that are off are left alone.
        A new bet is made only when none is working and `amount` is positive.

        Returns:
            The working bet, or None if there is none.
        """
        bet = self.active_bet(definition)
        if bet is not None:
            bet.reconcile(amount, regress=regress)
            return bet if bet.is_active else None
        if amount <= 0:
            return None
        return self._create_bet(definition, amount, press_strategy)

    def ensure_pass_line(self, amount: int,
                         press_strategy: Optional[PressStrategy] = None) -> Optional[PlayerBet]:
        return self.ensure(self.catalog.pass_line, amount, press_strategy)

    def ensure_pass_line_and_odds(self, point: int, line_amount: int, odds_amount: int,
                                  press_strategy: Optional[PressStrategy] = None) -> None:
        """
        Move a pass line bet behind the point and back it with odds.

        A pass line bet can't be made once the point is on, so this does
        nothing unless a pass line or pass point bet is already working.

        Raises:
            InvalidBetAmount: if the odds exceed the table's maximum for the point
        """
        pass_line = self.active_bet(self.catalog.pass_line)
        pass_point_def = self.catalog.pass_point[point]
        odds_def = self.catalog.pass_odds[point]
        if pass_line is None and self.active_bet(pass_point_def) is None:
            return

        max_odds = odds_def.max_odds_amount(line_amount)
        if max_odds is not None and odds_amount > max_odds:
            raise InvalidBetAmount(odds_def.name, odds_amount,
                                   f"odds limited to {odds_def.max_odds}x line bet of {line_amount}")

        if pass_line is not None:
            pass_line.take_down()
        self.ensure(pass_point_def, line_amount, press_strategy)
        if odds_amount > 0:
            self.ensure(odds_def, odds_amount, press_strategy)

    def take_down(self, definition: BetDefinition) -> int:
        bet = self.active_bet(definition)
        return bet.take_down() if bet is not None else 0

    def turn_off(self, definition: BetDefinition) -> None:
        bet = self.active_bet(definition)
        if bet is not None and bet.ledger.is_on:
            bet.ledger.off()

    def turn_on(self, definition: BetDefinition) -> None:
        bet = self.active_bet(definition)
        if bet is not None and bet.ledger.is_off:
            bet.ledger.on()

    def evaluate(self, player_roll: PlayerRoll) -> int:
        """
        Settle every working bet against a classified roll.

        Returns the net of all wins and losses on this roll.
        """
        if not player_roll.is_classified:
            raise RollNotClassified(f"roll {player_roll.roll} reached bet evaluation without an outcome")
        roll: DiceRoll = player_roll.roll
        return sum(bet.evaluate(roll) for bet in self.each_active_bet())

    def take_down_all(self) -> int:
        """Bring every working bet back to the rail."""
        return sum(bet.take_down() for bet in self.each_active_bet())

    def net_result(self) -> int:
        return sum(bet.ledger.net_result for history in self.player_bets.values() for bet in history)

    def total_at_risk(self) -> int:
        return sum(bet.ledger.current_amount for bet in self.each_active_bet())

    def stats(self) -> dict:
        return {
            name: [bet.stats() for bet in history]
            for name, history in self.player_bets.items()
        }

    def _create_bet(self, definition: BetDefinition, amount: int,
                    press_strategy: Optional[PressStrategy]) -> PlayerBet:
        bet = PlayerBet(definition, amount, self.rules, press_strategy)
        self.player_bets[definition.name].append(bet)
        log.debug("placed %s for %d", definition.name, bet.ledger.current_amount)
        return bet

    def __repr__(self) -> str:
        return f"BetBook({[bet.name for bet in self.each_active_bet()]})"
