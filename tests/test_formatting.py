import pytest

from coursekit.formatting import (
    format_fixed,
    format_general,
    format_grouped,
    format_money,
    format_percent,
    main,
)


def test_general_uses_exponent_for_large_values():
    assert format_general(1234567890.555) == "1.23457e+09"


@pytest.mark.parametrize("value", [12.3456789, 98.7654321, 1234.5678, 9e-16])
def test_general_round_trips_to_six_digits(value):
    assert float(format_general(value)) == pytest.approx(value, rel=1e-5)


@pytest.mark.parametrize("value", [12.3456789, 98.7654321, 1234567890.555])
def test_fixed_zero_places_has_no_point(value):
    text = format_fixed(value, 0)
    assert "." not in text
    assert abs(float(text) - value) <= 0.5


@pytest.mark.parametrize("places", [1, 2, 4])
def test_fixed_has_requested_places(places):
    text = format_fixed(98.7654321, places)
    assert len(text.split(".")[1]) == places
    assert float(text) == pytest.approx(98.7654321, abs=10 ** -places)


def test_grouped_separates_thousands():
    assert format_grouped(1234567890.555, 2) == "1,234,567,890.56"


@pytest.mark.parametrize("value", [0.5, 999.99, 1234.5678, 1234567890.555, -98765.4321])
def test_grouped_matches_fixed_without_commas(value):
    grouped = format_grouped(value, 2)
    assert grouped.replace(",", "") == format_fixed(value, 2)
    whole = grouped.lstrip("-").split(".")[0].split(",")
    assert all(len(group) == 3 for group in whole[1:])
    assert 1 <= len(whole[0]) <= 3


@pytest.mark.parametrize("formatter", [format_fixed, format_grouped])
def test_negative_places_are_rejected(formatter):
    with pytest.raises(ValueError):
        formatter(1.0, -1)


@pytest.mark.parametrize("amount", [75000, 75000 / 52.0, 0.0])
def test_money_is_dollar_sign_and_two_places(amount):
    assert format_money(amount) == "$" + format_fixed(amount, 2)


def test_percent_of_tax_rate():
    assert format_percent(0.20) == "20%"


def test_percent_round_trips():
    text = format_percent(0.37)
    assert text.endswith("%")
    assert float(text[:-1]) / 100 == pytest.approx(0.37)


def test_main_prints_all_sections(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "No formatting: " in out
    assert "fmt3 #,###.## - Comma-separated, 2 decimal places: " in out
    assert f"Yearly salary: {format_money(75000)}" in out
    assert "Kendra Sorenson is 13 years old" in out