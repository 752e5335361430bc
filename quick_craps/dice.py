"""
Seeded dice for the craps simulator.

A single root seed derives an independent sub-seed for every die so a whole
session can be replayed bit-for-bit from that one number.
"""
import random
from dataclasses import dataclass
from typing import Optional, Protocol

NUM_FACES = 6
HARD_NUMBERS = (4, 6, 8, 10)
SUB_SEED_BITS = 128


@dataclass(frozen=True)
class DiceRoll:
    """Faces shown by one shake of the dice."""
    faces: tuple[int, ...]

    @property
    def total(self) -> int:
        return sum(self.faces)

    @property
    def is_hard(self) -> bool:
        """True for a 4, 6, 8 or 10 rolled as a pair."""
        return self.total in HARD_NUMBERS and len(set(self.faces)) == 1

    def hard(self, number: int) -> bool:
        """True if this roll is `number` made the hard way."""
        return self.total == number and self.is_hard

    def __str__(self) -> str:
        return f"{self.faces} = {self.total}"


class StreakObserver(Protocol):
    """Session-scoped stats keeper notified on every roll of the dice."""

    name: str

    def observe(self, roll: DiceRoll) -> None: ...

    def reset(self) -> None: ...

    def stats(self) -> dict: ...


class Die:
    """One six-sided die with its own random source."""

    def __init__(self, prng: random.Random):
        self._prng = prng
        self.value = 0

    def roll(self) -> int:
        self.value = self._prng.randint(1, NUM_FACES)
        return self.value

    def __repr__(self) -> str:
        return str(self.value)


class Dice:
    """
    The shooter's dice.

    Keeps a frequency histogram over every possible total and a count of
    rolls for the whole session, and forwards each roll to any attached
    streak observers.
    """

    def __init__(self, seed: Optional[int] = None, num_dice: int = 2):
        self.seed = seed
        root = random.Random(seed)
        self._dice = [
            Die(random.Random(root.getrandbits(SUB_SEED_BITS)))
            for _ in range(num_dice)
        ]
        self._observers: list[StreakObserver] = []
        self.frequency: dict[int, int] = {}
        self.total_rolls = 0
        self.last_roll: Optional[DiceRoll] = None
        self.reset()

    @property
    def num_dice(self) -> int:
        return len(self._dice)

    @property
    def max_total(self) -> int:
        return NUM_FACES * self.num_dice

    def roll(self) -> DiceRoll:
        """Shake the dice, tally the result and notify observers."""
        roll = self._shake()
        self.total_rolls += 1
        self.frequency[roll.total] += 1
        for observer in self._observers:
            observer.observe(roll)
        return roll

    def attach(self, observer: StreakObserver) -> None:
        """Register a stats observer for every subsequent roll."""
        self._observers.append(observer)

    @property
    def observers(self) -> list[StreakObserver]:
        return list(self._observers)

    def reset(self) -> None:
        """Clear session stats, including attached observers."""
        self.frequency = {total: 0 for total in range(self.num_dice, self.max_total + 1)}
        self.total_rolls = 0
        for observer in self._observers:
            observer.reset()
        self._shake()

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < len(self._dice):
            raise IndexError(f"invalid die number {index}")
        return self._dice[index].value

    def stats(self) -> dict:
        return {
            'total_rolls': self.total_rolls,
            'frequency': dict(self.frequency),
            'streaks': {observer.name: observer.stats() for observer in self._observers},
        }

    def _shake(self) -> DiceRoll:
        self.last_roll = DiceRoll(tuple(die.roll() for die in self._dice))
        return self.last_roll

    def __repr__(self) -> str:
        return f"Dice(seed={self.seed}, rolls={self.total_rolls})"


class SequenceDice(Dice):
    """
    Dice that replay a pre-recorded list of faces.

    Bookkeeping and observers behave exactly as for random dice.
    Raises IndexError when the sequence is exhausted.
    """

    def __init__(self, sequence: list[tuple[int, ...]]):
        if not sequence:
            raise ValueError("dice sequence must not be empty")
        for faces in sequence:
            if any(not 1 <= face <= NUM_FACES for face in faces):
                raise ValueError(f"invalid faces {faces}")
        self.sequence = [tuple(faces) for faces in sequence]
        self.index = 0
        super().__init__(seed=None, num_dice=len(self.sequence[0]))

    @property
    def remaining(self) -> int:
        return len(self.sequence) - self.index

    def reset(self) -> None:
        self.index = 0
        self.frequency = {total: 0 for total in range(self.num_dice, self.max_total + 1)}
        self.total_rolls = 0
        for observer in self._observers:
            observer.reset()

    def _shake(self) -> DiceRoll:
        if self.index >= len(self.sequence):
            raise IndexError(f"Dice sequence exhausted after {self.index} rolls")
        faces = self.sequence[self.index]
        self.index += 1
        for die, face in zip(self._dice, faces):
            die.value = face
        self.last_roll = DiceRoll(faces)
        return self.last_roll

    def __repr__(self) -> str:
        return f"SequenceDice(rolls={len(self.sequence)}, remaining={self.remaining})"
