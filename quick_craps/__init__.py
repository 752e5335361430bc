# QuickCraps Simulator Package
from .dice import Dice, DiceRoll, SequenceDice
from .game import Outcome, PlayerRoll, TablePhase, TableRules, TableState, TableStateMachine
from .bets import DEFAULT_CATALOG, BetCatalog, BetDefinition, BetKind, Payout, PayoutTable
from .ledger import BetLedger, BetState, PlayerBet, no_press
from .bet_book import BetBook
from .round import PlayerTurn, RoundEngine
from .player import Player
from .stats import ConsecutiveNumberStatsKeeper, PlayerStats, PlayerTurnStatsKeeper
from .session import CrapsSession, RoundRobinRotation, SessionConfig
from .errors import (
    CrapsError,
    IllegalBetTransition,
    InvalidBetAmount,
    LedgerInvariantViolation,
    RollAlreadyClassified,
    RollNotClassified,
)

__version__ = "0.1.0"
