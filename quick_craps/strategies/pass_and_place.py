"""
Pass Line with maximum odds, plus inside place bets once the point is on.
"""
from typing import Optional

from ..bet_book import BetBook
from ..game import TableRules, TableState
from ..ledger import PressStrategy
from ..strategy import BettingPolicy


class PassLineOddsAndPlace(BettingPolicy):
    """
    Pass Line on the come-out, maximum odds behind the point, and place
    bets on the inside numbers other than the point.

    Place bets are turned off for come-out rolls and back on once a new
    point is established.
    """

    def __init__(self, rules: TableRules, press_strategy: Optional[PressStrategy] = None,
                 line_units: int = 1, place_units: int = 1,
                 place_numbers: tuple[int, ...] = (5, 6, 8, 9)):
        """
        Initialize the policy.

        Args:
            rules: Table rules
            press_strategy: Press strategy for every bet
            line_units: Bet units on the pass line
            place_units: Bet units on each place number
            place_numbers: Numbers to place once the point is on
        """
        super().__init__(rules, press_strategy)
        self.line_amount = rules.bet_unit * line_units
        self.place_amount = rules.bet_unit * place_units
        self.place_numbers = place_numbers

    @property
    def name(self) -> str:
        return "Pass + Max Odds + Place"

    @property
    def description(self) -> str:
        numbers = "/".join(str(n) for n in self.place_numbers)
        return f"Pass line ${self.line_amount} with max odds, place ${self.place_amount} on {numbers}"

    def make_bets(self, book: BetBook, table_state: TableState) -> None:
        if table_state.is_off:
            self.come_out_clean_up(book)
            for number in self.place_numbers:
                book.turn_off(book.catalog.place[number])
            book.ensure_pass_line(self.line_amount, self.press_strategy)
            return

        point = table_state.point
        odds = book.catalog.pass_odds[point]
        book.ensure_pass_line_and_odds(
            point, self.line_amount, odds.max_odds_amount(self.line_amount), self.press_strategy
        )
        for number in self.place_numbers:
            place = book.catalog.place[number]
            book.turn_on(place)
            if number != point:
                book.ensure(place, self.place_amount, self.press_strategy)
