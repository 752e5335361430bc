"""
Press strategies.

Each strategy is called with the ledger of a bet that just won (winnings
already credited) and the amount won. It returns how much to add to the
bet: positive presses, funded from winnings first; negative takes money
down; zero leaves the winnings on the ledger.
"""
from .ledger import BetLedger, PressStrategy, no_press

__all__ = [
    'no_press',
    'double_every_other_hit',
    'press_winnings',
    'regress_after_first_hit',
    'PRESS_STRATEGIES',
]


def double_every_other_hit(ledger: BetLedger, win_amount: int) -> int:
    """Double the bet on every second hit."""
    return ledger.current_amount if ledger.num_wins % 2 == 0 else 0


def press_winnings(ledger: BetLedger, win_amount: int) -> int:
    """Put every win back on the bet."""
    return win_amount


def regress_after_first_hit(base_amount: int) -> PressStrategy:
    """
    Start high, then collect and drop to `base_amount` on the first hit.

    Later hits press by one `base_amount` each.

    `BetBook.ensure` presses a bet back up to its target on the next roll,
    so a policy using this strategy must pass `base_amount` as the target
    after placing the opening bet, or the regression is undone from the rail.
    """
    def press(ledger: BetLedger, win_amount: int) -> int:
        if ledger.num_wins == 1 and ledger.current_amount > base_amount:
            return -(ledger.winnings + ledger.current_amount - base_amount)
        if ledger.num_wins > 1:
            return base_amount
        return 0
    return press


PRESS_STRATEGIES = {
    'none': no_press,
    'double-every-other-hit': double_every_other_hit,
    'press-winnings': press_winnings,
}
