import math

import pytest

from practicekit.convert import celsius_to_fahrenheit, fahrenheit_to_celsius, main


def test_freezing_point():
    assert celsius_to_fahrenheit(0) == 32
    assert fahrenheit_to_celsius(32) == 0


def test_boiling_point():
    assert celsius_to_fahrenheit(100) == 212


def test_minus_forty_is_fixed_point():
    assert celsius_to_fahrenheit(-40) == -40
    assert fahrenheit_to_celsius(-40) == -40


@pytest.mark.parametrize("value", [-273.15, -12.5, 0.0, 21.3, 37.0, 1000.0])
def test_round_trip(value):
    assert math.isclose(fahrenheit_to_celsius(celsius_to_fahrenheit(value)), value, abs_tol=1e-9)
    assert math.isclose(celsius_to_fahrenheit(fahrenheit_to_celsius(value)), value, abs_tol=1e-9)


def test_conversion_is_increasing():
    values = [-50, -10, 0, 10, 50]
    converted = [celsius_to_fahrenheit(v) for v in values]
    assert converted == sorted(converted)


def test_main_c2f(capsys):
    assert main(["100", "c2f"]) == 0
    assert capsys.readouterr().out == "100.00°C = 212.00°F\n"


def test_main_f2c(capsys):
    main(["32", "f2c"])
    assert capsys.readouterr().out == "32.00°F = 0.00°C\n"


def test_main_unknown_unit(capsys):
    main(["5", "k2c"])
    assert capsys.readouterr().out == "Unknown unit\n"


def test_main_usage(capsys):
    main(["5"])
    assert capsys.readouterr().out == "Usage: converter <value> <unit>\n"


def test_main_unparsable_value_counts_as_zero(capsys):
    main(["abc", "c2f"])
    bad = capsys.readouterr().out
    main(["0", "c2f"])
    assert bad == capsys.readouterr().out