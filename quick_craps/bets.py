"""
Craps bet definitions and pay tables.

Each bet kind is a small immutable record: the totals it wins and loses on,
and how it pays. The catalog is built once and shared by every engine.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from .dice import DiceRoll
from .errors import InvalidBetAmount
from .game import POINTS, SEVEN, TableRules

HARDWAY_NUMBERS = (4, 6, 8, 10)


@dataclass(frozen=True)
class Payout:
    """Pays `pays` for every `for_every` wagered, less vig on the win."""
    pays: int
    for_every: int
    vig: Fraction = Fraction(0)

    def payout(self, amount: int) -> int:
        win = (amount // self.for_every) * self.pays
        if self.vig > 0:
            win -= math.floor(win * self.vig)
        return win

    def round_up(self, amount: int) -> int:
        """Round a wager up to the next multiple this payout is priced for."""
        return -(-amount // self.for_every) * self.for_every

    def round_down(self, amount: int) -> int:
        return (amount // self.for_every) * self.for_every

    def __str__(self) -> str:
        text = f"{self.pays}:{self.for_every}"
        if self.vig:
            text += f" ({float(self.vig):.0%} vig)"
        return text


PAYS_EVEN = Payout(1, 1)
PAYS_DOUBLE = Payout(2, 1)
PAYS_TRIPLE = Payout(3, 1)
PAYS_2_1 = PAYS_DOUBLE
PAYS_2_1_VIG_05 = Payout(2, 1, vig=Fraction(5, 100))
PAYS_3_2 = Payout(3, 2)
PAYS_6_5 = Payout(6, 5)
PAYS_7_5 = Payout(7, 5)
PAYS_7_6 = Payout(7, 6)
PAYS_7_1 = Payout(7, 1)
PAYS_9_1 = Payout(9, 1)


@dataclass(frozen=True)
class PayoutTable:
    """Payout chosen by the roll total; priced for 1, so never rounds."""
    default: Payout
    by_total: Mapping[int, Payout] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'by_total', MappingProxyType(dict(self.by_total)))

    def for_total(self, total: int) -> Payout:
        return self.by_total.get(total, self.default)

    def round_up(self, amount: int) -> int:
        return amount

    def round_down(self, amount: int) -> int:
        return amount

    def __hash__(self):
        return hash((self.default, tuple(sorted(self.by_total.items()))))


PayoutRule = Union[Payout, PayoutTable]


class BetKind(Enum):
    """Family a bet definition belongs to."""
    PASS_LINE = "pass_line"
    PASS_POINT = "pass_point"
    PASS_ODDS = "pass_odds"
    PLACE = "place"
    HARDWAY = "hardway"
    FIELD = "field"


@dataclass(frozen=True)
class BetDefinition:
    """
    Static description of one bet kind.

    `hard_number` marks a hardway: it wins only on that number rolled as a
    pair and also loses when the number comes easy.
    """
    name: str
    kind: BetKind
    wins_on: frozenset[int]
    loses_on: frozenset[int]
    payout_rule: PayoutRule
    number: Optional[int] = None
    max_odds: Optional[int] = None
    proposition: bool = False
    hard_number: Optional[int] = None

    def wins(self, roll: DiceRoll) -> bool:
        if self.hard_number is not None:
            return roll.hard(self.hard_number)
        return roll.total in self.wins_on

    def loses(self, roll: DiceRoll) -> bool:
        if roll.total in self.loses_on:
            return True
        return self.hard_number is not None and roll.total == self.hard_number and not roll.is_hard

    def payout_for(self, total: int) -> Payout:
        if isinstance(self.payout_rule, PayoutTable):
            return self.payout_rule.for_total(total)
        return self.payout_rule

    def winnings(self, roll: DiceRoll, amount: int) -> int:
        return self.payout_for(roll.total).payout(amount)

    def evaluate(self, roll: DiceRoll, amount: int) -> int:
        """Signed result of `amount` riding on this bet for one roll."""
        if self.loses(roll):
            return -amount
        if self.wins(roll):
            return self.winnings(roll, amount)
        return 0

    def appropriate_amount(self, amount: int) -> int:
        """Round `amount` up so the bet pays in whole units."""
        return self.payout_rule.round_up(amount)

    def validate(self, amount: int, rules: TableRules) -> int:
        """
        Return the amount actually wagered for a requested `amount`.

        Raises:
            InvalidBetAmount: if the rounded amount is outside the table limits
        """
        adjusted = self.appropriate_amount(amount)
        if not rules.bet_unit <= adjusted <= rules.table_limit:
            raise InvalidBetAmount(
                self.name, adjusted,
                f"must be between {rules.bet_unit} and {rules.table_limit}"
            )
        return adjusted

    def max_amount(self, rules: TableRules) -> int:
        """Largest correctly priced wager the table limit allows."""
        return self.payout_rule.round_down(rules.table_limit)

    def max_odds_amount(self, line_amount: int) -> Optional[int]:
        if self.max_odds is None:
            return None
        return line_amount * self.max_odds

    def __str__(self) -> str:
        return self.name


def _place(number: int, payout: Payout) -> BetDefinition:
    return BetDefinition(
        name=f"place_{number}", kind=BetKind.PLACE, number=number,
        wins_on=frozenset({number}), loses_on=frozenset({SEVEN}), payout_rule=payout,
    )


def _pass_point(number: int) -> BetDefinition:
    return BetDefinition(
        name=f"pass_{number}", kind=BetKind.PASS_POINT, number=number,
        wins_on=frozenset({number}), loses_on=frozenset({SEVEN}), payout_rule=PAYS_EVEN,
    )


def _pass_odds(number: int, payout: Payout, max_odds: int) -> BetDefinition:
    return BetDefinition(
        name=f"pass_odds_{number}", kind=BetKind.PASS_ODDS, number=number,
        wins_on=frozenset({number}), loses_on=frozenset({SEVEN}), payout_rule=payout,
        max_odds=max_odds,
    )


def _hardway(number: int, payout: Payout) -> BetDefinition:
    return BetDefinition(
        name=f"hard_{number}", kind=BetKind.HARDWAY, number=number,
        wins_on=frozenset({number}), loses_on=frozenset({SEVEN}), payout_rule=payout,
        proposition=True, hard_number=number,
    )


PLACE_PAYOUTS = {4: PAYS_2_1_VIG_05, 5: PAYS_7_5, 6: PAYS_7_6, 8: PAYS_7_6, 9: PAYS_7_5, 10: PAYS_2_1_VIG_05}
ODDS_PAYOUTS = {4: PAYS_2_1, 5: PAYS_3_2, 6: PAYS_6_5, 8: PAYS_6_5, 9: PAYS_3_2, 10: PAYS_2_1}
MAX_ODDS = {4: 3, 5: 4, 6: 5, 8: 5, 9: 4, 10: 3}
HARDWAY_PAYOUTS = {4: PAYS_7_1, 6: PAYS_9_1, 8: PAYS_9_1, 10: PAYS_7_1}
FIELD_PAYOUTS = PayoutTable(PAYS_EVEN, {2: PAYS_DOUBLE, 12: PAYS_TRIPLE})


class BetCatalog:
    """Read-only registry of every bet definition, keyed by name."""

    def __init__(self, definitions: list[BetDefinition]):
        by_name = {}
        for definition in definitions:
            if definition.name in by_name:
                raise ValueError(f"duplicate bet name {definition.name}")
            by_name[definition.name] = definition
        self._by_name = MappingProxyType(by_name)
        self.pass_line = self._only(BetKind.PASS_LINE)
        self.field = self._only(BetKind.FIELD)
        self.pass_point = self._by_number(BetKind.PASS_POINT)
        self.pass_odds = self._by_number(BetKind.PASS_ODDS)
        self.place = self._by_number(BetKind.PLACE)
        self.hardway = self._by_number(BetKind.HARDWAY)

    @classmethod
    def standard(cls) -> 'BetCatalog':
        """The standard table layout."""
        definitions = [
            BetDefinition(
                name="pass_line", kind=BetKind.PASS_LINE,
                wins_on=frozenset({7, 11}), loses_on=frozenset({2, 3, 12}), payout_rule=PAYS_EVEN,
            ),
            BetDefinition(
                name="field", kind=BetKind.FIELD,
                wins_on=frozenset({2, 3, 4, 9, 10, 11, 12}), loses_on=frozenset({5, 6, 7, 8}),
                payout_rule=FIELD_PAYOUTS, proposition=True,
            ),
        ]
        definitions += [_pass_point(n) for n in POINTS]
        definitions += [_pass_odds(n, ODDS_PAYOUTS[n], MAX_ODDS[n]) for n in POINTS]
        definitions += [_place(n, PLACE_PAYOUTS[n]) for n in POINTS]
        definitions += [_hardway(n, HARDWAY_PAYOUTS[n]) for n in HARDWAY_NUMBERS]
        return cls(definitions)

    def _only(self, kind: BetKind) -> BetDefinition:
        matches = [d for d in self._by_name.values() if d.kind == kind]
        if len(matches) != 1:
            raise ValueError(f"catalog needs exactly one {kind.value} bet, found {len(matches)}")
        return matches[0]

    def _by_number(self, kind: BetKind) -> Mapping[int, BetDefinition]:
        return MappingProxyType({
            d.number: d for d in self._by_name.values() if d.kind == kind
        })

    def __getitem__(self, name: str) -> BetDefinition:
        return self._by_name[name]

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[BetDefinition]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)


DEFAULT_CATALOG = BetCatalog.standard()
