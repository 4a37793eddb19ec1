from __future__ import annotations

"""
crumb_core.engine
=================

Orquestador del motor de cálculo.

Este módulo expone la API interna y estable que usan la CLI y la API HTTP:

- `calculate_recipe(inputs)`: entradas → `RecipeOutput`
- `plan_bake(inputs)`: entradas → receta + pasos en una sola estructura

Ninguna función de este módulo guarda estado ni hace I/O. Llamarlas dos
veces con las mismas entradas devuelve resultados iguales (==), así que la
capa llamadora puede recalcular desde cero en cada cambio de entrada.
"""

from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, List, TypedDict

from .calculator import (
    calculate_bulk_time,
    calculate_preferment,
    calculate_preferment_time,
    calculate_proof_time,
    calculate_total_time,
    calculate_water_temp,
    calculate_yeast,
    is_high_hydration,
)
from .constants import SALT_PERCENT
from .conversions import round1, round_half_up
from .domain_models import FinalDough, RecipeInputs, RecipeOutput, Step
from .steps import generate_steps


class BakePlan(TypedDict):
    """
    Resultado de `plan_bake`.

    Estructura simple y serializable, pensada para devolverla a una capa HTTP
    o guardarla en un store externo.
    """

    inputs: RecipeInputs
    output: RecipeOutput
    steps: List[Step]


def calculate_recipe(inputs: RecipeInputs) -> RecipeOutput:
    """
    Calcula la receta completa a partir de las entradas del panadero.

    Flujo:
    ------
    1) Totales de la tanda (porcentajes de panadero): agua, sal, levadura.
    2) Prefermento (si el método es indirecto).
    3) Masa final = totales - prefermento. La levadura de refuerzo nunca
       queda negativa.
    4) Temperatura del agua, bloque, leudado, prefermento y tiempo total.

    Invariante: ``final_dough.flour + preferment.flour == flour_total``.
    """
    total_flour = inputs.total_flour
    hydration = inputs.target_hydration

    water_total = round_half_up(total_flour * (hydration / 100))
    salt = round_half_up(total_flour * (SALT_PERCENT / 100))
    total_yeast = calculate_yeast(total_flour, inputs.fermentation_speed, hydration)

    preferment = calculate_preferment(inputs.method, total_flour)

    if preferment is not None:
        final_dough = FinalDough(
            flour=total_flour - preferment.flour,
            water=water_total - preferment.water,
            salt=salt,
            yeast=max(0.0, round1(total_yeast - preferment.yeast)),
        )
    else:
        final_dough = FinalDough(
            flour=total_flour,
            water=water_total,
            salt=salt,
            yeast=total_yeast,
        )

    bulk_time = calculate_bulk_time(inputs.room_temp, inputs.fermentation_speed, hydration)
    proof_time = calculate_proof_time(bulk_time)

    is_indirect = inputs.method.is_indirect
    preferment_time = (
        calculate_preferment_time(inputs.method, inputs.room_temp, inputs.preferment_storage)
        if is_indirect
        else 0
    )

    total_time = calculate_total_time(
        bulk_time,
        proof_time,
        preferment_time,
        inputs.mixer,
        is_high_hydration(hydration),
        is_indirect,
    )

    return RecipeOutput(
        flour_total=total_flour,
        water_total=water_total,
        salt=salt,
        yeast=total_yeast,
        preferment=preferment,
        final_dough=final_dough,
        calculated_water_temp=calculate_water_temp(inputs),
        estimated_bulk_time=bulk_time,
        estimated_proof_time=proof_time,
        preferment_time=preferment_time,
        total_time=total_time,
    )


def plan_bake(inputs: RecipeInputs) -> BakePlan:
    """
    Calcula la receta y genera los pasos en una sola llamada.

    Es lo que hace la UI en cada cambio de entrada: recalcular todo desde cero.
    """
    output = calculate_recipe(inputs)
    return BakePlan(
        inputs=inputs,
        output=output,
        steps=generate_steps(inputs, output),
    )


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def plan_to_dict(plan: BakePlan) -> Dict[str, Any]:
    """
    Versión JSON-serializable de un `BakePlan` (enums como string).

    Es el formato que guarda la capa de estado externa y devuelve la CLI.
    """
    return {
        "inputs": {k: _plain(v) for k, v in asdict(plan["inputs"]).items()},
        "output": asdict(plan["output"]),
        "steps": [step.to_dict() for step in plan["steps"]],
    }
