"""Tests for quick_craps/ledger.py: bet lifecycle, money ledger and presses."""
import pytest

from quick_craps.errors import IllegalBetTransition, InvalidBetAmount, LedgerInvariantViolation
from quick_craps.game import TableRules
from quick_craps.ledger import BetLedger, BetState, PlayerBet
from quick_craps.press import double_every_other_hit, press_winnings, regress_after_first_hit

from conftest import roll


def balance(ledger: BetLedger) -> int:
    return ledger.profit_loss + ledger.current_amount + ledger.winnings


@pytest.fixture
def ledger() -> BetLedger:
    return BetLedger(100)


class TestInitialState:
    def test_amounts(self, ledger):
        assert ledger.state == BetState.ON
        assert ledger.start_amount == 100
        assert ledger.current_amount == 100
        assert ledger.winnings == 0
        assert ledger.profit_loss == -100

    @pytest.mark.parametrize("amount", [0, -5])
    def test_positive_amount_required(self, amount):
        with pytest.raises(LedgerInvariantViolation):
            BetLedger(amount)


class TestWinAndLose:
    def test_win_accumulates(self, ledger):
        ledger.won(200)
        ledger.won(50)
        assert ledger.winnings == 250
        assert ledger.num_wins == 2
        assert ledger.is_on

    def test_proposition_win_is_final(self):
        ledger = BetLedger(25, proposition=True)
        ledger.won(225)
        assert ledger.state == BetState.WON
        assert ledger.winnings == 225
        with pytest.raises(IllegalBetTransition):
            ledger.won(225)

    def test_lost(self, ledger):
        ledger.lost()
        assert ledger.state == BetState.LOST
        assert ledger.profit_loss == -100
        assert ledger.current_amount == 100

    def test_lost_is_final(self, ledger):
        ledger.lost()
        with pytest.raises(IllegalBetTransition):
            ledger.lost()
        with pytest.raises(IllegalBetTransition):
            ledger.down()

    def test_negative_win_rejected(self, ledger):
        with pytest.raises(LedgerInvariantViolation):
            ledger.won(-1)

    def test_net_result_after_loss_keeps_winnings(self, ledger):
        ledger.won(50)
        ledger.lost()
        assert ledger.net_result == -50


class TestOnOff:
    def test_toggle(self, ledger):
        ledger.off()
        assert ledger.state == BetState.OFF
        assert ledger.is_active
        ledger.on()
        assert ledger.is_on

    def test_cannot_turn_on_twice(self, ledger):
        with pytest.raises(IllegalBetTransition):
            ledger.on()

    def test_off_bets_cannot_win_or_press(self, ledger):
        ledger.off()
        with pytest.raises(IllegalBetTransition):
            ledger.won(10)
        with pytest.raises(IllegalBetTransition):
            ledger.press(10)

    def test_off_bet_can_come_down(self, ledger):
        ledger.off()
        assert ledger.down() == 100
        assert ledger.state == BetState.DOWN
        assert ledger.profit_loss == 0


class TestDown:
    def test_all(self, ledger):
        ledger.won(50)
        assert ledger.down() == 150
        assert ledger.state == BetState.DOWN
        assert ledger.current_amount == 0
        assert ledger.winnings == 0
        assert ledger.profit_loss == 50

    def test_winnings_first(self, ledger):
        ledger.won(50)
        ledger.down(30)
        assert ledger.winnings == 20
        assert ledger.current_amount == 100
        assert ledger.profit_loss == -70
        assert ledger.is_on

    def test_then_stake(self, ledger):
        ledger.won(50)
        ledger.down(80)
        assert ledger.winnings == 0
        assert ledger.current_amount == 70
        assert ledger.profit_loss == -20
        assert ledger.is_on

    @pytest.mark.parametrize("amount", [151, -1])
    def test_out_of_range(self, ledger, amount):
        ledger.won(50)
        with pytest.raises(LedgerInvariantViolation):
            ledger.down(amount)


class TestPress:
    def test_press_winnings(self, ledger):
        ledger.won(50)
        assert ledger.press() == 150
        assert ledger.winnings == 0
        assert ledger.profit_loss == -100

    def test_press_less_than_winnings_collects_rest(self, ledger):
        ledger.won(50)
        ledger.press(30)
        assert ledger.current_amount == 130
        assert ledger.winnings == 0
        assert ledger.profit_loss == -80

    def test_press_more_than_winnings_draws_rail(self, ledger):
        ledger.won(50)
        ledger.press(80)
        assert ledger.current_amount == 180
        assert ledger.profit_loss == -130

    def test_negative_press(self, ledger):
        with pytest.raises(LedgerInvariantViolation):
            ledger.press(-10)

    def test_press_after_loss(self, ledger):
        ledger.lost()
        with pytest.raises(IllegalBetTransition):
            ledger.press(10)

    def test_illegal_transition_is_ledger_violation(self):
        assert issubclass(IllegalBetTransition, LedgerInvariantViolation)


class TestConservation:
    def test_money_only_enters_through_wins(self, ledger):
        steps = [
            lambda: ledger.won(40),
            lambda: ledger.press(25),
            lambda: ledger.won(70),
            lambda: ledger.down(90),
            lambda: ledger.press(60),
            lambda: ledger.won(10),
            lambda: ledger.off(),
            lambda: ledger.on(),
            lambda: ledger.down(),
        ]
        for step in steps:
            step()
            assert balance(ledger) == ledger.total_won
            ledger.check_conservation()
        assert ledger.state == BetState.DOWN

    def test_detects_imbalance(self, ledger):
        ledger.winnings = 10
        with pytest.raises(LedgerInvariantViolation):
            ledger.check_conservation()


class TestPlayerBet:
    def test_amount_rounded(self, catalog, rules):
        bet = PlayerBet(catalog.place[6], 25, rules)
        assert bet.ledger.current_amount == 30

    def test_invalid_amount(self, catalog, rules):
        with pytest.raises(InvalidBetAmount):
            PlayerBet(catalog.pass_line, 10, rules)

    def test_off_bet_skipped(self, catalog, rules):
        bet = PlayerBet(catalog.place[6], 30, rules)
        bet.ledger.off()
        assert bet.evaluate(roll(7)) == 0
        assert bet.state == BetState.OFF

    def test_loss(self, catalog, rules):
        bet = PlayerBet(catalog.place[6], 30, rules)
        assert bet.evaluate(roll(7)) == -30
        assert bet.state == BetState.LOST

    def test_no_press_keeps_winnings(self, catalog, rules):
        bet = PlayerBet(catalog.place[6], 30, rules)
        bet.evaluate(roll(6))
        bet.evaluate(roll(6))
        assert bet.ledger.winnings == 70
        assert bet.ledger.current_amount == 30

    def test_press_winnings_rounds_to_pricing(self, catalog, rules):
        bet = PlayerBet(catalog.place[6], 30, rules, press_winnings)
        assert bet.evaluate(roll(6)) == 35
        assert bet.ledger.current_amount == 66
        assert bet.ledger.winnings == 0
        assert bet.ledger.profit_loss == -31
        bet.ledger.check_conservation()

    def test_double_every_other_hit(self, catalog, rules):
        bet = PlayerBet(catalog.place[6], 30, rules, double_every_other_hit)
        bet.evaluate(roll(6))
        assert bet.ledger.current_amount == 30
        assert bet.ledger.winnings == 35
        bet.evaluate(roll(6))
        assert bet.ledger.current_amount == 60
        assert bet.ledger.winnings == 0
        assert bet.ledger.profit_loss == 10
        bet.ledger.check_conservation()

    def test_regress_after_first_hit(self, catalog, rules):
        bet = PlayerBet(catalog.place[6], 120, rules, regress_after_first_hit(30))
        bet.evaluate(roll(6))
        assert bet.ledger.current_amount == 30
        assert bet.ledger.winnings == 0
        assert bet.ledger.profit_loss == 110
        bet.evaluate(roll(6))
        assert bet.ledger.current_amount == 60
        assert bet.ledger.profit_loss == 115
        bet.ledger.check_conservation()

    def test_press_stops_at_table_limit(self, catalog):
        rules = TableRules(bet_unit=5, table_limit=50)
        bet = PlayerBet(catalog.place[6], 30, rules, press_winnings)
        bet.evaluate(roll(6))
        assert bet.ledger.current_amount == 48
        assert bet.ledger.winnings == 0
        assert bet.ledger.profit_loss == -13
        bet.ledger.check_conservation()

    def test_bet_at_table_limit_collects_winnings(self, catalog):
        rules = TableRules(bet_unit=5, table_limit=50)
        bet = PlayerBet(catalog.place[6], 48, rules, press_winnings)
        bet.evaluate(roll(6))
        assert bet.state == BetState.ON
        assert bet.ledger.current_amount == 48
        assert bet.ledger.winnings == 0
        assert bet.ledger.profit_loss == 8
        bet.ledger.check_conservation()

    def test_max_amount_is_priced(self, catalog):
        rules = TableRules(bet_unit=5, table_limit=50)
        assert catalog.place[6].max_amount(rules) == 48
        assert catalog.place[5].max_amount(rules) == 50
        assert catalog.field.max_amount(rules) == 50

    def test_proposition_win_not_pressed(self, catalog, rules):
        bet = PlayerBet(catalog.hardway[6], 25, rules, press_winnings)
        bet.evaluate(roll(6, hard=True))
        assert bet.state == BetState.WON
        assert bet.ledger.current_amount == 25
        assert bet.ledger.winnings == 225
