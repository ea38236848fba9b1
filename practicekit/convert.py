"""Temperature conversion between Celsius and Fahrenheit."""

from __future__ import annotations

import sys
from typing import Optional, Sequence


def celsius_to_fahrenheit(c: float) -> float:
    """Degrees Celsius expressed in degrees Fahrenheit."""
    return c * 9 / 5 + 32


def fahrenheit_to_celsius(f: float) -> float:
    """Degrees Fahrenheit expressed in degrees Celsius."""
    return (f - 32) * 5 / 9


def _parse_value(text: str) -> float:
    # An unparsable value counts as zero.
    try:
        return float(text)
    except ValueError:
        return 0.0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Convert ``<value> <unit>`` where unit is ``c2f`` or ``f2c``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Usage: converter <value> <unit>")
        return 0
    value = _parse_value(args[0])
    unit = args[1]
    if unit == "c2f":
        print(f"{value:.2f}°C = {celsius_to_fahrenheit(value):.2f}°F")
    elif unit == "f2c":
        print(f"{value:.2f}°F = {fahrenheit_to_celsius(value):.2f}°C")
    else:
        print("Unknown unit")
    return 0


if __name__ == "__main__":
    sys.exit(main())