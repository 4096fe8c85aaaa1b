from datetime import datetime

from carrental.pricing import RentalPriceCalculator

START = datetime(2024, 1, 1, 10, 0)


def price(end, per_day=100.0, start=START):
    return RentalPriceCalculator(start, end, per_day).calculate()


def test_whole_days_at_same_time():
    assert price(datetime(2024, 1, 3, 10, 0)) == 200.0


def test_later_end_time_adds_a_day():
    whole = price(datetime(2024, 1, 3, 10, 0))
    assert price(datetime(2024, 1, 3, 10, 1)) == whole + 100.0


def test_earlier_end_time_adds_nothing():
    assert price(datetime(2024, 1, 3, 9, 0)) == price(datetime(2024, 1, 3, 10, 0))


def test_same_moment_costs_nothing():
    assert price(START) == 0.0


def test_same_day_partial_counts_as_one_day():
    assert price(datetime(2024, 1, 1, 12, 0), per_day=75.5) == 75.5


def test_price_scales_with_daily_rate():
    end = datetime(2024, 1, 5, 18, 0)
    assert price(end, per_day=50.0) * 2 == price(end, per_day=100.0)


def test_zero_rate_is_free():
    assert price(datetime(2024, 2, 1, 10, 0), per_day=0.0) == 0.0