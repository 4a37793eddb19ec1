"""
crumb_core.constants
====================

Tabla de parámetros numéricos del motor de cálculo.

Este módulo NO tiene comportamiento: solo define valores con nombre
(ratios, porcentajes, umbrales, duraciones fijas de pasos) que usan
`calculator`, `engine` y `steps`.

Convenciones
------------
- Temperaturas en °C, masas en gramos, tiempos en minutos.
- Los porcentajes "de panadero" se expresan como número (1.5 == 1.5 %),
  los ratios como fracción (0.30 == 30 %).
- Los rangos de entrada (`*_CONFIG`) son para la UI / API: el motor
  nunca los aplica por su cuenta.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


# ============================================================
# Temperatura objetivo y fricción
# ============================================================

TARGET_DDT = 24  # temperatura de masa deseada (°C)

FRICTION_HAND = 2
FRICTION_MIXER = 12

# Umbrales de alta hidratación. Son tres constantes independientes aunque hoy
# valen lo mismo: fricción, levadura y flujo de trabajo (autolisis, coil folds).
HIGH_HYDRATION_THRESHOLD = 75
FRICTION_HYDRATION_THRESHOLD = 75
YEAST_HYDRATION_THRESHOLD = 75

HIGH_HYDRATION_FRICTION_REDUCTION = 2
HIGH_HYDRATION_YEAST_REDUCTION = 0.10

# Límites físicos del agua de amasado (°C)
MIN_WATER_TEMP = 0
MAX_WATER_TEMP = 40


# ============================================================
# Prefermentos
# ============================================================

BIGA_FLOUR_RATIO = 0.30
BIGA_HYDRATION = 0.50  # firme
POOLISH_FLOUR_RATIO = 0.30
POOLISH_HYDRATION = 1.00  # líquido

# Levadura fresca, % sobre harina
FRESH_YEAST_BASE = 1.5
BIGA_YEAST_PERCENT = 1.0
POOLISH_YEAST_PERCENT = 0.1

SALT_PERCENT = 2.0


# ============================================================
# Fermentación
# ============================================================

TEMP_COEFFICIENT = 8  # °C para duplicar / reducir a la mitad la velocidad
FRIDGE_TEMP = 4

BASE_BULK_TIME = 120  # minutos a TARGET_DDT
BASE_PREFERMENT_TIME = 8 * 60  # biga al 1 % a TARGET_DDT
PREFERMENT_YEAST_LOG_WEIGHT = 0.5

MAX_FRIDGE_BIGA_TIME = 16 * 60
MAX_FRIDGE_POOLISH_TIME = 24 * 60

HYDRATION_BASELINE = 65
HYDRATION_EFFECT_COEFFICIENT = 0.015  # por cada punto sobre la base
MAX_HYDRATION_EFFECT = 0.30
LOW_HYDRATION_EFFECT_COEFFICIENT = 0.01  # por cada punto bajo la base
MAX_LOW_HYDRATION_EFFECT = 0.15

PROOF_TO_BULK_RATIO = 0.50
MIN_PROOF_TIME = 30
MAX_PROOF_TIME = 120


# ============================================================
# Duraciones fijas de pasos (minutos)
# ============================================================

@dataclass(frozen=True)
class StepDurations:
    """
    Duraciones fijas usadas tanto para el tiempo total como para los pasos.

    `preheat_overlap` vale 0: el precalentado ocurre durante el leudado final
    y no suma al total.
    """

    autolyse: int = 45
    mix_hand: int = 15
    mix_machine: int = 12
    preshape_rest: int = 20
    final_shape: int = 5
    preheat: int = 45
    preheat_overlap: int = 0
    bake_covered: int = 22
    bake_uncovered: int = 22
    cool: int = 60


STEP_DURATIONS = StepDurations()

COIL_FOLD_COUNT = 4
BASSINAGE_RESERVE = 0.10  # fracción del agua final reservada para el bassinage


# ============================================================
# Rangos de entrada (UI / API)
# ============================================================

@dataclass(frozen=True)
class InputRange:
    """Rango admitido para un control numérico de entrada."""

    min: float
    max: float
    default: float
    step: float


FLOUR_CONFIG = InputRange(min=100, max=2000, default=500, step=50)
HYDRATION_CONFIG = InputRange(min=60, max=90, default=70, step=1)
SPEED_CONFIG = InputRange(min=0.5, max=2.0, default=1.0, step=0.1)
TEMP_CONFIG = InputRange(min=15, max=35, default=22, step=1)


# ============================================================
# Etiquetas para mostrar
# ============================================================

METHOD_LABELS: Dict[str, str] = {
    "DIRECT": "Direct",
    "BIGA": "Biga",
    "POOLISH": "Poolish",
}

MIXER_LABELS: Dict[str, str] = {
    "HAND": "By Hand",
    "KITCHENAID": "Stand Mixer",
}

STORAGE_LABELS: Dict[str, str] = {
    "FRIDGE": "Refrigerator",
    "ROOM": "Room Temp",
}
