"""
crumb_core
==========

Motor de cálculo de recetas de pan: convierte unas pocas entradas del
panadero en masas de ingredientes, temperatura del agua, tiempos de
fermentación y una secuencia ordenada de pasos.

El motor no guarda estado: cada llamada recalcula todo desde cero.
"""

from .calculator import (
    calculate_bulk_time,
    calculate_friction,
    calculate_hydration_factor,
    calculate_preferment,
    calculate_preferment_time,
    calculate_proof_time,
    calculate_total_time,
    calculate_water_temp,
    calculate_yeast,
)
from .conversions import celsius_to_fahrenheit, fahrenheit_to_celsius, grams_to_ounces, ounces_to_grams
from .domain_models import (
    FinalDough,
    Method,
    MixerType,
    Preferment,
    PrefermentStorage,
    RecipeInputs,
    RecipeOutput,
    Step,
    StepCategory,
    Unit,
)
from .engine import BakePlan, calculate_recipe, plan_bake
from .labels import format_duration, get_hydration_label, get_speed_label, get_water_temp_advice
from .steps import generate_steps

__all__ = [
    "BakePlan",
    "FinalDough",
    "Method",
    "MixerType",
    "Preferment",
    "PrefermentStorage",
    "RecipeInputs",
    "RecipeOutput",
    "Step",
    "StepCategory",
    "Unit",
    "calculate_bulk_time",
    "calculate_friction",
    "calculate_hydration_factor",
    "calculate_preferment",
    "calculate_preferment_time",
    "calculate_proof_time",
    "calculate_recipe",
    "calculate_total_time",
    "calculate_water_temp",
    "calculate_yeast",
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    "format_duration",
    "generate_steps",
    "get_hydration_label",
    "get_speed_label",
    "get_water_temp_advice",
    "grams_to_ounces",
    "ounces_to_grams",
    "plan_bake",
]
