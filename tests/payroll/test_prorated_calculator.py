from src.staffing_portal.staffing_portal.payroll.calculator.prorated_calculator import ProratedPayCalculator


def test_prorates_by_days_present():
    calc = ProratedPayCalculator()
    assert calc.payable(30000, 15, 31) == 14516
    assert calc.payable(30000, 30, 30) == 30000
    assert calc.payable(30000, 0, 30) == 0


def test_no_base_amount_means_no_payable():
    assert ProratedPayCalculator().payable(None, 20, 30) is None


def test_half_rupee_rounds_up():
    calc = ProratedPayCalculator()
    assert calc.payable(75, 1, 30) == 3
    assert calc.payable(15, 1, 30) == 1
    assert calc.payable(45, 1, 30) == 2
