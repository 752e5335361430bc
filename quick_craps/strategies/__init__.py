"""
Pre-built betting policies.

This package contains example policies for comparing how different bets
and press strategies fare over many turns.
"""
from .pass_and_place import PassLineOddsAndPlace
from .hardways import HardwaysPolicy
from .field import FieldPolicy

__all__ = [
    'PassLineOddsAndPlace',
    'HardwaysPolicy',
    'FieldPolicy',
    'POLICIES',
]

POLICIES = {
    'pass-and-place': PassLineOddsAndPlace,
    'hardways': HardwaysPolicy,
    'field': FieldPolicy,
}
