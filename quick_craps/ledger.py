"""
Per-bet money ledger and lifecycle.

A ledger tracks what a single bet has cost the player's rail and what it has
won. `profit_loss` is the net cash that has left the rail for this bet
(negative while capital is committed); winnings sit on the ledger until they
are pressed or taken down.
"""
import logging
from enum import Enum
from typing import Callable, Optional

from .bets import BetDefinition
from .dice import DiceRoll
from .errors import IllegalBetTransition, InvalidBetAmount, LedgerInvariantViolation
from .game import TableRules

log = logging.getLogger(__name__)


class BetState(Enum):
    """Lifecycle of a bet on the layout."""
    ON = "on"        # in play and pressable
    OFF = "off"      # temporarily not working, can go back on or come down
    DOWN = "down"    # taken down by the player
    WON = "won"      # proposition bet paid and finished
    LOST = "lost"    # lost to the dice

    @property
    def is_active(self) -> bool:
        return self in (BetState.ON, BetState.OFF)

    @property
    def is_terminal(self) -> bool:
        return not self.is_active


class BetLedger:
    """State machine plus money ledger for one bet instance."""

    def __init__(self, amount: int, proposition: bool = False):
        if amount <= 0:
            raise LedgerInvariantViolation(f"bet must start with a positive amount, got {amount}")
        self.proposition = proposition
        self.state = BetState.ON
        self.start_amount = amount
        self.current_amount = amount
        self.winnings = 0
        self.profit_loss = -amount
        self.num_wins = 0
        self.total_won = 0

    @property
    def is_on(self) -> bool:
        return self.state == BetState.ON

    @property
    def is_off(self) -> bool:
        return self.state == BetState.OFF

    @property
    def is_active(self) -> bool:
        return self.state.is_active

    @property
    def available(self) -> int:
        """Money that could be taken back to the rail right now."""
        return self.current_amount + self.winnings

    @property
    def net_result(self) -> int:
        """Net to the player if everything still on the ledger came back."""
        at_risk = 0 if self.state == BetState.LOST else self.current_amount
        return self.profit_loss + self.winnings + at_risk

    def won(self, amount: int) -> None:
        self._require(BetState.ON, "win")
        if amount < 0:
            raise LedgerInvariantViolation(f"cannot win a negative amount {amount}")
        self.winnings += amount
        self.total_won += amount
        self.num_wins += 1
        if self.proposition:
            self.state = BetState.WON

    def lost(self) -> None:
        # the stake already left the rail when the bet was made
        self._require(BetState.ON, "lose")
        self.state = BetState.LOST

    def off(self) -> None:
        self._require(BetState.ON, "turn off")
        self.state = BetState.OFF

    def on(self) -> None:
        self._require(BetState.OFF, "turn on")
        self.state = BetState.ON

    def down(self, amount: Optional[int] = None) -> int:
        """
        Take money back to the rail, winnings first, then the stake.

        Returns the amount taken down. The bet is DOWN once its stake is gone.

        Raises:
            LedgerInvariantViolation: if more than the bet holds is requested
        """
        if not self.is_active:
            raise IllegalBetTransition(f"cannot take down a bet that is {self.state.value}")
        if amount is None:
            amount = self.available
        if amount < 0 or amount > self.available:
            raise LedgerInvariantViolation(
                f"cannot take down {amount}, bet holds {self.current_amount} + {self.winnings} winnings"
            )
        from_winnings = min(amount, self.winnings)
        self.winnings -= from_winnings
        self.profit_loss += from_winnings

        from_stake = amount - from_winnings
        self.current_amount -= from_stake
        self.profit_loss += from_stake

        if self.current_amount == 0:
            self.state = BetState.DOWN
        return amount

    def press(self, amount: Optional[int] = None) -> int:
        """
        Add `amount` to the stake, funded from winnings before the rail.

        Winnings left over after funding the press go back to the rail.
        Returns the new stake.
        """
        self._require(BetState.ON, "press")
        if amount is None:
            amount = self.winnings
        if amount < 0:
            raise LedgerInvariantViolation(f"cannot press by a negative amount {amount}")
        from_winnings = min(amount, self.winnings)
        shortfall = amount - from_winnings
        self.current_amount += amount
        self.profit_loss -= shortfall
        self.profit_loss += self.winnings - from_winnings
        self.winnings = 0
        return self.current_amount

    def check_conservation(self) -> None:
        """Every unit on the ledger came from the rail or from a win."""
        if self.profit_loss + self.current_amount + self.winnings != self.total_won:
            raise LedgerInvariantViolation(
                f"ledger out of balance: profit_loss={self.profit_loss} "
                f"current={self.current_amount} winnings={self.winnings} won={self.total_won}"
            )
        if self.current_amount < 0 or self.winnings < 0:
            raise LedgerInvariantViolation("ledger amounts must not be negative")

    def stats(self) -> dict:
        return {
            'state': self.state.value,
            'start_amount': self.start_amount,
            'current_amount': self.current_amount,
            'winnings': self.winnings,
            'profit_loss': self.profit_loss,
            'num_wins': self.num_wins,
        }

    def _require(self, state: BetState, action: str) -> None:
        if self.state != state:
            raise IllegalBetTransition(f"cannot {action} a bet that is {self.state.value}")

    def __repr__(self) -> str:
        return (f"BetLedger({self.state.value}, amount={self.current_amount}, "
                f"winnings={self.winnings}, profit_loss={self.profit_loss})")


PressStrategy = Callable[[BetLedger, int], int]


def no_press(ledger: BetLedger, win_amount: int) -> int:
    """Leave the bet alone and let winnings accumulate."""
    return 0


class PlayerBet:
    """One bet on the layout: its definition, its ledger and its press strategy."""

    def __init__(self, definition: BetDefinition, amount: int, rules: TableRules,
                 press_strategy: Optional[PressStrategy] = None):
        self.definition = definition
        self.rules = rules
        self.press_strategy = press_strategy or no_press
        self.ledger = BetLedger(definition.validate(amount, rules), definition.proposition)

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def state(self) -> BetState:
        return self.ledger.state

    @property
    def is_active(self) -> bool:
        return self.ledger.is_active

    def evaluate(self, roll: DiceRoll) -> int:
        """Settle this bet against one roll; bets that are off are skipped."""
        if not self.ledger.is_on:
            return 0
        result = self.definition.evaluate(roll, self.ledger.current_amount)
        if result < 0:
            self.ledger.lost()
            log.debug("%s lost %d on %s", self.name, -result, roll)
        elif result > 0:
            self.ledger.won(result)
            log.debug("%s won %d on %s", self.name, result, roll)
            if self.ledger.is_on:
                self.apply_press(self.press_strategy(self.ledger, result))
        return result

    def apply_press(self, amount: int) -> None:
        """
        Press by a positive amount or take down a negative one.

        Presses stop at the table limit; a bet already at the limit sends
        its winnings back to the rail.
        """
        if amount > 0:
            current = self.ledger.current_amount
            target = min(self.definition.appropriate_amount(current + amount),
                         self.definition.max_amount(self.rules))
            if target > current:
                self.ledger.press(target - current)
            elif self.ledger.winnings:
                log.debug("%s at table limit %d, collecting winnings", self.name, current)
                self.ledger.down(self.ledger.winnings)
        elif amount < 0:
            self.ledger.down(-amount)

    def reconcile(self, amount: int, regress: bool = False) -> None:
        """Press up to `amount`, or take down to it when `regress` is set."""
        if not self.ledger.is_on:
            return
        current = self.ledger.current_amount
        if amount > current:
            target = self.definition.validate(amount, self.rules)
            self.ledger.press(target - current)
        elif regress and amount < current:
            if amount > 0:
                self.definition.validate(amount, self.rules)
                if self.definition.appropriate_amount(amount) != amount:
                    raise InvalidBetAmount(self.name, amount, "not a multiple of the bet's pricing")
            self.ledger.down(self.ledger.winnings + current - amount)

    def take_down(self) -> int:
        return self.ledger.down()

    def stats(self) -> dict:
        return self.ledger.stats()

    def __repr__(self) -> str:
        return f"PlayerBet({self.name}, {self.ledger!r})"
