"""
Field bet on every roll.
"""
from typing import Optional

from ..bet_book import BetBook
from ..game import TableRules, TableState
from ..ledger import PressStrategy
from ..strategy import BettingPolicy


class FieldPolicy(BettingPolicy):
    """Pass line on the come-out and a field bet before every roll."""

    def __init__(self, rules: TableRules, press_strategy: Optional[PressStrategy] = None,
                 field_amount: Optional[int] = None):
        super().__init__(rules, press_strategy)
        self.field_amount = field_amount or rules.bet_unit

    @property
    def name(self) -> str:
        return "Pass + Field"

    @property
    def description(self) -> str:
        return f"Pass line ${self.rules.bet_unit}, field ${self.field_amount} every roll"

    def make_bets(self, book: BetBook, table_state: TableState) -> None:
        if table_state.is_off:
            self.come_out_clean_up(book)
            book.ensure_pass_line(self.rules.bet_unit)
        else:
            book.ensure_pass_line_and_odds(table_state.point, self.rules.bet_unit, 0)
        book.ensure(book.catalog.field, self.field_amount)
