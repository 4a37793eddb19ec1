"""
crumb_core.calculator
=====================

Calculadoras escalares del motor: cada función es pura y depende solo de
unos pocos valores numéricos o enums.

Contenido
---------
- Fricción y temperatura del agua (regla de 3 / regla de 4)
- Levadura y composición del prefermento
- Factor de hidratación y tiempos de fermentación (bloque, leudado final,
  prefermento) con un modelo tipo Q10
- Tiempo total de punta a punta

Política de robustez
--------------------
Ninguna función lanza excepciones por valores numéricos fuera de rango.
Lo que puede divergir se acota explícitamente:

- temperatura del agua en [0, 40] °C
- leudado final en [30, 120] minutos
- prefermento en heladera con tope por método

El tiempo de bloque NO tiene tope: con ambientes muy fríos puede crecer
sin límite.
"""

from __future__ import annotations

import math
from typing import Optional

from . import constants as C
from .conversions import round1, round_half_up
from .domain_models import Method, MixerType, Preferment, PrefermentStorage, RecipeInputs


def _q10_factor(temp: float) -> float:
    """Factor de tiempo: se duplica cada `TEMP_COEFFICIENT` °C por debajo del DDT."""
    return math.pow(2, -(temp - C.TARGET_DDT) / C.TEMP_COEFFICIENT)


# ============================================================
# Temperatura
# ============================================================

def calculate_friction(mixer: MixerType, hydration: float) -> float:
    """
    Fricción del amasado en °C.

    Las masas muy hidratadas ofrecen menos resistencia: por encima del umbral
    (estricto) se descuenta `HIGH_HYDRATION_FRICTION_REDUCTION`, sin bajar de 0.
    """
    base = C.FRICTION_HAND if mixer is MixerType.HAND else C.FRICTION_MIXER
    if hydration > C.FRICTION_HYDRATION_THRESHOLD:
        return max(0, base - C.HIGH_HYDRATION_FRICTION_REDUCTION)
    return base


def calculate_water_temp(inputs: RecipeInputs) -> int:
    """
    Temperatura del agua de amasado en °C enteros, acotada a [0, 40].

    Directo (regla de 3)::

        agua = DDT*3 - ambiente - harina - fricción

    Indirecto (regla de 4)::

        agua = DDT*4 - ambiente - harina - fricción - prefermento

    La harina se asume a temperatura ambiente. El prefermento está a
    `FRIDGE_TEMP` si se guardó en heladera, si no a temperatura ambiente.
    """
    friction = calculate_friction(inputs.mixer, inputs.target_hydration)
    flour_temp = inputs.room_temp

    if inputs.method is Method.DIRECT:
        water_temp = C.TARGET_DDT * 3 - inputs.room_temp - flour_temp - friction
    else:
        if inputs.preferment_storage is PrefermentStorage.FRIDGE:
            preferment_temp = C.FRIDGE_TEMP
        else:
            preferment_temp = inputs.room_temp
        water_temp = (
            C.TARGET_DDT * 4 - inputs.room_temp - flour_temp - friction - preferment_temp
        )

    clamped = max(C.MIN_WATER_TEMP, min(C.MAX_WATER_TEMP, water_temp))
    return round_half_up(clamped)


# ============================================================
# Ingredientes
# ============================================================

def calculate_yeast(total_flour: float, fermentation_speed: float, hydration: float) -> float:
    """
    Levadura fresca en gramos (1 decimal).

    1.5 % por defecto, escalado por la velocidad (0.5 → 0.75 %, 2.0 → 3 %).
    Las masas sobre el umbral de hidratación fermentan más rápido y llevan
    un 10 % menos.
    """
    yeast_percent = C.FRESH_YEAST_BASE * fermentation_speed
    if hydration > C.YEAST_HYDRATION_THRESHOLD:
        yeast_percent *= 1 - C.HIGH_HYDRATION_YEAST_REDUCTION
    return round1(total_flour * yeast_percent / 100)


def calculate_preferment(method: Method, total_flour: float) -> Optional[Preferment]:
    """
    Composición del prefermento, o None para el método directo.

    Biga: 30 % de la harina al 50 % de hidratación con 1 % de levadura.
    Poolish: 30 % de la harina al 100 % de hidratación con 0.1 % de levadura.
    """
    if method is Method.DIRECT:
        return None

    if method is Method.BIGA:
        flour_ratio = C.BIGA_FLOUR_RATIO
        hydration = C.BIGA_HYDRATION
        yeast_percent = C.BIGA_YEAST_PERCENT
    else:
        flour_ratio = C.POOLISH_FLOUR_RATIO
        hydration = C.POOLISH_HYDRATION
        yeast_percent = C.POOLISH_YEAST_PERCENT

    flour = round_half_up(total_flour * flour_ratio)
    return Preferment(
        flour=flour,
        water=round_half_up(flour * hydration),
        yeast=round1(flour * yeast_percent / 100),
    )


# ============================================================
# Fermentación
# ============================================================

def calculate_hydration_factor(hydration: float) -> float:
    """
    Multiplicador del tiempo de fermentación según la hidratación.

    Base 65 %. Por debajo la masa fermenta más lento (hasta +15 %), por encima
    más rápido (hasta -30 %). Vale exactamente 1 en la base y es monótona a
    cada lado.
    """
    diff = hydration - C.HYDRATION_BASELINE

    if diff <= 0:
        return 1 + min(C.MAX_LOW_HYDRATION_EFFECT, abs(diff) * C.LOW_HYDRATION_EFFECT_COEFFICIENT)

    return 1 - min(C.MAX_HYDRATION_EFFECT, diff * C.HYDRATION_EFFECT_COEFFICIENT)


def calculate_bulk_time(room_temp: float, fermentation_speed: float, hydration: float) -> int:
    """
    Fermentación en bloque, en minutos.

    tiempo = 120 × factor_temp × factor_hidratación × (1 / velocidad)

    Sin tope superior.
    """
    temp_factor = _q10_factor(room_temp)
    hydration_factor = calculate_hydration_factor(hydration)
    speed_factor = 1 / fermentation_speed
    return round_half_up(C.BASE_BULK_TIME * temp_factor * hydration_factor * speed_factor)


def calculate_proof_time(bulk_time: float) -> int:
    """Leudado final: la mitad del bloque, acotado a [30, 120] minutos."""
    proof_time = round_half_up(bulk_time * C.PROOF_TO_BULK_RATIO)
    return max(C.MIN_PROOF_TIME, min(C.MAX_PROOF_TIME, proof_time))


def calculate_preferment_time(
    method: Method,
    room_temp: float,
    storage: PrefermentStorage,
) -> int:
    """
    Tiempo de fermentación del prefermento, en minutos.

    Parte de 8 h para una biga al 1 % a 24 °C y aplica:

    - factor de temperatura Q10 sobre la temperatura de guardado
      (`FRIDGE_TEMP` en heladera, ambiente si no)
    - factor de levadura ``1 + log10(biga% / método%) * 0.5``
      (1.0 para biga, 1.5 para poolish)

    En heladera el resultado se topea en 16 h (biga) o 24 h (poolish).
    Para el método directo devuelve 0.
    """
    if method is Method.DIRECT:
        return 0

    storage_temp = C.FRIDGE_TEMP if storage is PrefermentStorage.FRIDGE else room_temp
    temp_factor = _q10_factor(storage_temp)

    yeast_percent = C.BIGA_YEAST_PERCENT if method is Method.BIGA else C.POOLISH_YEAST_PERCENT
    yeast_factor = 1 + math.log10(C.BIGA_YEAST_PERCENT / yeast_percent) * C.PREFERMENT_YEAST_LOG_WEIGHT

    preferment_time = C.BASE_PREFERMENT_TIME * temp_factor * yeast_factor

    if storage is PrefermentStorage.FRIDGE:
        cap = C.MAX_FRIDGE_BIGA_TIME if method is Method.BIGA else C.MAX_FRIDGE_POOLISH_TIME
        preferment_time = min(preferment_time, cap)

    return round_half_up(preferment_time)


def calculate_total_time(
    bulk_time: int,
    proof_time: int,
    preferment_time: int,
    mixer: MixerType,
    is_high_hydration: bool,
    is_indirect: bool,
) -> int:
    """
    Minutos desde el inicio hasta el pan listo para cortar.

    Suma prefermento (si es indirecto), autolisis (si es alta hidratación),
    amasado, bloque, pre-formado, formado, leudado, horneado tapado y
    destapado y enfriado. El precalentado se superpone con el leudado y no suma.
    """
    d = C.STEP_DURATIONS
    total = 0

    if is_indirect:
        total += preferment_time
    if is_high_hydration:
        total += d.autolyse

    total += d.mix_hand if mixer is MixerType.HAND else d.mix_machine
    total += bulk_time
    total += d.preshape_rest + d.final_shape
    total += proof_time + d.preheat_overlap
    total += d.bake_covered + d.bake_uncovered
    total += d.cool

    return total


def is_high_hydration(hydration: float) -> bool:
    """True si la masa sigue el flujo de alta hidratación (autolisis, coil folds)."""
    return hydration > C.HIGH_HYDRATION_THRESHOLD
