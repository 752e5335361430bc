"""
Pass Line plus hardways.
"""
from typing import Optional

from ..bet_book import BetBook
from ..game import TableRules, TableState
from ..ledger import PressStrategy
from ..strategy import BettingPolicy


class HardwaysPolicy(BettingPolicy):
    """Pass line on the come-out, hardway bets working while the point is on."""

    def __init__(self, rules: TableRules, press_strategy: Optional[PressStrategy] = None,
                 hard_numbers: tuple[int, ...] = (4, 6, 8, 10), hard_amount: Optional[int] = None):
        super().__init__(rules, press_strategy)
        self.hard_numbers = hard_numbers
        self.hard_amount = hard_amount or rules.bet_unit

    @property
    def name(self) -> str:
        return "Pass + Hardways"

    @property
    def description(self) -> str:
        numbers = "/".join(str(n) for n in self.hard_numbers)
        return f"Pass line ${self.rules.bet_unit}, hard {numbers} for ${self.hard_amount} each"

    def make_bets(self, book: BetBook, table_state: TableState) -> None:
        if table_state.is_off:
            self.come_out_clean_up(book)
            book.ensure_pass_line(self.rules.bet_unit)
            return
        book.ensure_pass_line_and_odds(table_state.point, self.rules.bet_unit, 0)
        for number in self.hard_numbers:
            # a hardway that paid is finished, so this puts a fresh one up
            book.ensure(book.catalog.hardway[number], self.hard_amount, self.press_strategy)
