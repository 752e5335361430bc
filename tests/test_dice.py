"""Tests for quick_craps/dice.py: seeded dice, hard rolls and roll stats."""
import pytest

from quick_craps.dice import Dice, DiceRoll, SequenceDice
from quick_craps.stats import ConsecutiveNumberStatsKeeper

from conftest import faces


class TestDiceRoll:
    @pytest.mark.parametrize("pair", [(2, 2), (3, 3), (4, 4), (5, 5)])
    def test_pairs_on_hard_numbers_are_hard(self, pair):
        assert DiceRoll(pair).is_hard

    @pytest.mark.parametrize("pair", [(1, 1), (6, 6), (1, 3), (2, 4), (3, 5), (4, 6), (3, 4)])
    def test_not_hard(self, pair):
        assert not DiceRoll(pair).is_hard

    def test_total(self):
        assert DiceRoll((5, 6)).total == 11

    def test_hard_number(self):
        assert DiceRoll((3, 3)).hard(6)
        assert not DiceRoll((3, 3)).hard(8)
        assert not DiceRoll((2, 4)).hard(6)

    def test_immutable(self):
        roll = DiceRoll((1, 2))
        with pytest.raises(AttributeError):
            roll.faces = (3, 3)


class TestDice:
    def test_same_seed_same_rolls(self):
        first = Dice(seed=834831100909038)
        second = Dice(seed=834831100909038)
        assert [first.roll() for _ in range(200)] == [second.roll() for _ in range(200)]

    def test_same_seed_same_initial_faces(self):
        first = Dice(seed=99)
        second = Dice(seed=99)
        assert (first[0], first[1]) == (second[0], second[1])

    def test_different_seeds_differ(self):
        first = Dice(seed=1)
        second = Dice(seed=2)
        assert [first.roll() for _ in range(50)] != [second.roll() for _ in range(50)]

    def test_faces_in_range(self):
        dice = Dice(seed=7)
        for _ in range(500):
            roll = dice.roll()
            assert all(1 <= face <= 6 for face in roll.faces)
            assert 2 <= roll.total <= 12

    def test_faces_match_last_roll(self):
        dice = Dice(seed=3)
        roll = dice.roll()
        assert (dice[0], dice[1]) == roll.faces

    def test_initial_shake_not_counted(self):
        dice = Dice(seed=5)
        assert dice.total_rolls == 0
        assert sum(dice.frequency.values()) == 0

    def test_frequency_tracks_rolls(self):
        dice = Dice(seed=11)
        for _ in range(300):
            dice.roll()
        assert dice.total_rolls == 300
        assert sum(dice.frequency.values()) == 300
        assert sorted(dice.frequency) == list(range(2, 13))

    @pytest.mark.parametrize("index", [2, -1, 10])
    def test_bad_die_index(self, index):
        with pytest.raises(IndexError):
            Dice(seed=1)[index]

    def test_stats(self):
        dice = Dice(seed=1)
        dice.attach(ConsecutiveNumberStatsKeeper(7))
        dice.roll()
        stats = dice.stats()
        assert stats['total_rolls'] == 1
        assert set(stats['frequency']) == set(range(2, 13))
        assert 'consecutive_7s' in stats['streaks']

    def test_reset_clears_stats_and_observers(self):
        dice = SequenceDice(faces(7, 7, 7))
        keeper = ConsecutiveNumberStatsKeeper(7)
        dice.attach(keeper)
        dice.roll()
        dice.roll()
        dice.reset()
        assert dice.total_rolls == 0
        assert keeper.max_run == 0


class TestSequenceDice:
    def test_replays_sequence(self):
        dice = SequenceDice([(5, 6), (3, 3)])
        assert dice.roll().total == 11
        roll = dice.roll()
        assert roll.total == 6 and roll.is_hard
        assert dice.remaining == 0

    def test_exhausted(self):
        dice = SequenceDice([(1, 1)])
        dice.roll()
        with pytest.raises(IndexError):
            dice.roll()

    def test_observers_notified(self):
        dice = SequenceDice(faces(7, 7, 2, 7))
        keeper = ConsecutiveNumberStatsKeeper(7)
        dice.attach(keeper)
        for _ in range(4):
            dice.roll()
        assert keeper.max_run == 2
        assert keeper.current_run == 1

    def test_rejects_bad_faces(self):
        with pytest.raises(ValueError):
            SequenceDice([(0, 7)])
