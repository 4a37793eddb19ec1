"""
Conversión de unidades y redondeo.

Todas las funciones son puras. El redondeo es "half up" (0.5 sube), nunca
el redondeo bancario de `round()`: 2.5 g tiene que mostrarse como 3 g.
"""

from __future__ import annotations

import math

GRAMS_TO_OUNCES = 0.03527396


def round_half_up(value: float) -> int:
    """Redondea al entero más cercano; los empates suben."""
    return int(math.floor(value + 0.5))


def round1(value: float) -> float:
    """Redondea a un decimal con la misma regla que `round_half_up`."""
    return math.floor(value * 10 + 0.5) / 10


def grams_to_ounces(grams: float) -> float:
    return round1(grams * GRAMS_TO_OUNCES)


def ounces_to_grams(ounces: float) -> float:
    return round1(ounces / GRAMS_TO_OUNCES)


def celsius_to_fahrenheit(celsius: float) -> int:
    return round_half_up(celsius * 9 / 5 + 32)


def fahrenheit_to_celsius(fahrenheit: float) -> int:
    return round_half_up((fahrenheit - 32) * 5 / 9)
