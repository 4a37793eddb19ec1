"""
Generación de pasos del proceso.

`generate_steps` es una expansión de plantilla determinística: a partir de
las entradas y de un `RecipeOutput` ya calculado arma la lista ordenada de
pasos. No hay estado de transición ni horarios absolutos; los tiempos de
reloj los calcula la capa consumidora (ver `schedule`).

Ramas
-----
- Método indirecto: se antepone la preparación del prefermento.
- Alta hidratación: autolisis → sal y levadura → bassinage, y el bloque se
  parte en coil folds espaciados uniformemente.
- Hidratación estándar: un paso de mezcla, amasado según amasadora y un único
  paso de bloque con pliegue opcional.
- Siempre: pre-formado, formado, leudado, precalentado, greñado y carga,
  horneado tapado / destapado y enfriado.
"""

from __future__ import annotations

from typing import List, Optional

from .calculator import is_high_hydration
from .constants import BASSINAGE_RESERVE, COIL_FOLD_COUNT, STEP_DURATIONS
from .conversions import round_half_up
from .domain_models import Method, MixerType, RecipeInputs, RecipeOutput, Step, StepCategory

PREFERMENT_NAMES = {Method.BIGA: "Biga", Method.POOLISH: "Poolish"}
PREFERMENT_HYDRATION_TEXT = {Method.BIGA: "50%", Method.POOLISH: "100%"}


def _num(value: float) -> str:
    """Formatea gramos / grados sin '.0' de más (500.0 → '500', 1.5 → '1.5')."""
    return f"{value:g}"


class _StepSequence:
    """Acumula pasos asignando ids secuenciales."""

    def __init__(self) -> None:
        self.steps: List[Step] = []

    def add(
        self,
        title: str,
        description: str,
        category: StepCategory,
        critical: bool = False,
        duration: Optional[int] = None,
    ) -> None:
        self.steps.append(
            Step(
                id=f"step-{len(self.steps) + 1}",
                title=title,
                description=description,
                critical=critical,
                category=category,
                duration=duration,
            )
        )


def generate_steps(inputs: RecipeInputs, output: RecipeOutput) -> List[Step]:
    """
    Arma la lista ordenada de pasos para una receta ya calculada.

    Parameters
    ----------
    inputs:
        Entradas usadas para calcular `output`.
    output:
        Resultado de `engine.calculate_recipe(inputs)`.

    Returns
    -------
    List[Step]
        Pasos con ids "step-1".."step-N", en orden de ejecución.
    """
    method = inputs.method
    high_hydration = is_high_hydration(inputs.target_hydration)
    dough = output.final_dough
    d = STEP_DURATIONS
    seq = _StepSequence()

    # --- PREFERMENTO ---
    if method.is_indirect and output.preferment is not None:
        pf = output.preferment
        seq.add(
            f"Prepare {PREFERMENT_NAMES[method]}",
            f"Mix {_num(pf.flour)}g flour with {_num(pf.water)}g water "
            f"({PREFERMENT_HYDRATION_TEXT[method]} hydration) and {_num(pf.yeast)}g yeast. "
            "Cover and let ferment for 8-16 hours.",
            StepCategory.PREP,
            critical=True,
        )

    # --- MEZCLA ---
    if high_hydration:
        autolyse_water = round_half_up(dough.water * (1 - BASSINAGE_RESERVE))
        reserved_water = round_half_up(dough.water * BASSINAGE_RESERVE)
        seq.add(
            "Autolyse",
            f"Mix {_num(dough.flour)}g flour with {autolyse_water}g water "
            "(reserve 10% for bassinage). Let rest for 30-60 minutes.",
            StepCategory.MIX,
            duration=d.autolyse,
        )
        seq.add(
            "Add Salt & Yeast",
            f"Sprinkle {_num(dough.salt)}g salt and {_num(dough.yeast)}g yeast over the dough. "
            "Pinch and fold to incorporate.",
            StepCategory.MIX,
        )
        seq.add(
            "Bassinage",
            f"Gradually incorporate the reserved {reserved_water}g water "
            "using the slap and fold technique.",
            StepCategory.MIX,
            critical=True,
        )
    else:
        if method.is_indirect:
            seq.add(
                "Combine Final Dough",
                f"Add the mature {PREFERMENT_NAMES[method]} to {_num(dough.flour)}g flour. "
                f"Mix in {_num(dough.water)}g water at {output.calculated_water_temp}°C.",
                StepCategory.MIX,
            )
        else:
            seq.add(
                "Mix Ingredients",
                f"Combine {_num(output.flour_total)}g flour with {_num(output.water_total)}g water "
                f"at {output.calculated_water_temp}°C. "
                f"Add {_num(output.salt)}g salt and {_num(output.yeast)}g yeast.",
                StepCategory.MIX,
            )

        if inputs.mixer is MixerType.KITCHENAID:
            seq.add(
                "Machine Knead",
                "Mix on low speed (1-2) for 3 minutes to combine. Increase to medium (4) "
                "and knead for 8-10 minutes until smooth and elastic.",
                StepCategory.MIX,
                duration=d.mix_machine,
            )
        else:
            seq.add(
                "Hand Knead",
                "Turn out onto a clean surface. Knead using stretch and fold technique "
                "for 10-15 minutes until the dough passes the windowpane test.",
                StepCategory.MIX,
                duration=d.mix_hand,
            )

    # --- BLOQUE ---
    bulk_time = output.estimated_bulk_time

    if high_hydration:
        fold_interval = round_half_up(bulk_time / (COIL_FOLD_COUNT + 1))
        seq.add(
            "Begin Bulk Fermentation",
            "Place dough in a lightly oiled container. Cover and rest at room temperature.",
            StepCategory.BULK,
        )
        for i in range(1, COIL_FOLD_COUNT + 1):
            seq.add(
                f"Coil Fold {i}",
                "Gently lift dough from center, letting edges fold underneath. "
                "Rotate 90° and repeat. Cover and rest.",
                StepCategory.BULK,
                critical=i == 1,
                duration=fold_interval,
            )
        seq.add(
            "Complete Bulk Fermentation",
            "Let dough rest undisturbed until increased by 50-75%. "
            "Look for bubbles and a domed surface.",
            StepCategory.BULK,
            critical=True,
            duration=fold_interval,
        )
    else:
        seq.add(
            "Bulk Fermentation",
            f"Cover dough and let rise at room temperature for approximately {bulk_time} minutes "
            "until doubled in size.",
            StepCategory.BULK,
            critical=True,
            duration=bulk_time,
        )
        seq.add(
            "Stretch & Fold (Optional)",
            "Perform one set of stretch and folds halfway through bulk if desired "
            "for additional strength.",
            StepCategory.BULK,
        )

    # --- FORMADO ---
    seq.add(
        "Pre-shape",
        "Gently turn dough onto a lightly floured surface. Pre-shape into a round "
        "using a bench scraper. Rest 15-20 minutes.",
        StepCategory.SHAPE,
        duration=d.preshape_rest,
    )
    seq.add(
        "Final Shape",
        "Shape into your desired form (boule, batard, or loaf). "
        "Create surface tension by pulling dough towards you.",
        StepCategory.SHAPE,
        critical=True,
    )

    # --- LEUDADO ---
    seq.add(
        "Final Proof",
        "Place shaped dough in a banneton or loaf pan. Proof at room temperature for "
        f"approximately {output.estimated_proof_time} minutes. Watch for 50-75% size increase.",
        StepCategory.PROOF,
        duration=output.estimated_proof_time,
    )
    seq.add(
        "Preheat Oven",
        f"Preheat oven to 250°C (480°F) with a Dutch oven or baking stone inside "
        f"for at least {d.preheat} minutes.",
        StepCategory.PROOF,
        critical=True,
        duration=d.preheat,
    )

    # --- HORNEADO ---
    seq.add(
        "Score & Load",
        "Score the top of your loaf with a sharp blade or lame. "
        "Carefully transfer to the preheated Dutch oven or stone.",
        StepCategory.BAKE,
        critical=True,
    )
    seq.add(
        "Bake (Covered)",
        "Bake covered at 250°C for 20-25 minutes to create steam for oven spring.",
        StepCategory.BAKE,
        duration=d.bake_covered,
    )
    seq.add(
        "Bake (Uncovered)",
        "Remove lid and reduce temp to 230°C (445°F). "
        "Bake for 20-25 more minutes until deep golden brown.",
        StepCategory.BAKE,
        duration=d.bake_uncovered,
    )
    seq.add(
        "Cool",
        "Remove from oven and let cool on a wire rack for at least 1 hour before slicing. "
        'Listen for the "singing" crust!',
        StepCategory.BAKE,
        critical=True,
        duration=d.cool,
    )

    return seq.steps
