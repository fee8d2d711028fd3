"""Celsius and Fahrenheit conversion and printed conversion tables."""

from __future__ import annotations

from collections.abc import Callable

DEGREE = "\u00b0"
BAR = "=" * 23


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert degrees Fahrenheit to degrees Celsius."""
    return (fahrenheit - 32) * 5 / 9


def conversion_table(
    from_label: str, to_label: str, convert: Callable[[float], float]
) -> list[str]:
    """Lines of a table converting -40 to 100 in steps of 5."""
    lines = [
        BAR,
        f"| {DEGREE + from_label:<8} | {DEGREE + to_label:<8} |",
        BAR,
    ]
    for value in range(-40, 101, 5):
        lines.append(f"| {float(value):<8.1f} | {convert(float(value)):<8.1f} |")
        lines.append(BAR)
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print the Celsius-to-Fahrenheit and Fahrenheit-to-Celsius tables."""
    print("\n".join(conversion_table("C", "F", celsius_to_fahrenheit)))
    print()
    print()
    print("\n".join(conversion_table("F", "C", fahrenheit_to_celsius)))
    return 0