"""
Error types raised by the craps simulator.

Every error here is a precondition violation in a betting policy, a press
strategy or the engine itself; none of them is retried.
"""
from typing import Optional


class CrapsError(Exception):
    """Base class for all simulator errors."""


class InvalidBetAmount(CrapsError, ValueError):
    """A bet amount is outside the table limits or its pricing."""

    def __init__(self, bet_name: str, amount: int, reason: Optional[str] = None):
        self.bet_name = bet_name
        self.amount = amount
        message = f"Invalid bet amount {amount} for {bet_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class RollNotClassified(CrapsError):
    """A roll reached bet evaluation or stats before it got an outcome."""


class LedgerInvariantViolation(CrapsError):
    """A ledger operation would create or destroy money."""


class IllegalBetTransition(LedgerInvariantViolation):
    """A ledger operation was attempted from a state that does not allow it."""


class RollAlreadyClassified(CrapsError):
    """A roll was given a second outcome."""
