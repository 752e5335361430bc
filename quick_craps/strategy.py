"""
Betting policy base class.

A betting policy decides, before every roll, which bets should be working
for the shooter. Press strategies decide what to do with each win; they are
plain callables `f(ledger, win_amount) -> press_amount` (see `press`).
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from .ledger import PressStrategy, no_press

if TYPE_CHECKING:
    from .bet_book import BetBook
    from .game import TableRules, TableState


class BettingPolicy(ABC):
    """
    Abstract base class for all betting policies.

    Subclasses should implement:
    - name: Display name of the policy
    - description: Brief description of the betting approach
    - make_bets(): issue `ensure` calls on the bet book for the table state
    """

    def __init__(self, rules: 'TableRules', press_strategy: Optional[PressStrategy] = None):
        """
        Initialize the policy.

        Args:
            rules: Table rules for this game
            press_strategy: Applied to every win of every bet this policy makes
        """
        self.rules = rules
        self.press_strategy = press_strategy or no_press

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the policy."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Brief description of the betting approach."""

    @abstractmethod
    def make_bets(self, book: 'BetBook', table_state: 'TableState') -> None:
        """
        Called before every roll. Make, press or take down bets here.

        Args:
            book: The shooter's bets for this turn
            table_state: Current table state
        """

    def come_out_clean_up(self, book: 'BetBook') -> None:
        """Take down line bets whose point has been decided."""
        for point, definition in book.catalog.pass_point.items():
            book.take_down(definition)
            book.take_down(book.catalog.pass_odds[point])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
