"""
Etiquetas descriptivas para mostrar.

Mapean rangos numéricos a categorías legibles. No intervienen en ningún
cálculo: las usan la UI, el renderer y la API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

WaterIcon = Literal["ice", "fridge", "tap", "warm"]


@dataclass(frozen=True)
class WaterTempAdvice:
    label: str
    icon: WaterIcon


def get_hydration_label(hydration: float) -> str:
    if hydration < 65:
        return "Stiff"
    if hydration < 70:
        return "Standard"
    if hydration < 75:
        return "Supple"
    if hydration < 80:
        return "Wet"
    return "Very Wet"


def get_speed_label(speed: float) -> str:
    if speed <= 0.6:
        return "Overnight"
    if speed <= 0.8:
        return "Slow"
    if speed <= 1.2:
        return "Standard"
    if speed <= 1.5:
        return "Quick"
    return "Rush"


def get_water_temp_advice(temp: float) -> WaterTempAdvice:
    """Qué agua usar según la temperatura calculada (°C)."""
    if temp <= 5:
        return WaterTempAdvice(label="Ice Water", icon="ice")
    if temp <= 12:
        return WaterTempAdvice(label="Refrigerated", icon="fridge")
    if temp <= 22:
        return WaterTempAdvice(label="Cool Tap", icon="tap")
    return WaterTempAdvice(label="Warm", icon="warm")


def format_duration(minutes: int) -> str:
    """
    Minutos → texto corto.

    45 → "45 min", 120 → "2h", 90 → "1h 30m".
    """
    if minutes < 60:
        return f"{minutes} min"
    hours, mins = divmod(minutes, 60)
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"
