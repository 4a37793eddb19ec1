"""
Renderer Markdown para un `BakePlan`.

Convierte receta + pasos a un documento legible según un `RenderProfile`
y una preferencia de unidades. Nunca recalcula: solo formatea lo que ya
devolvió el motor.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from .constants import METHOD_LABELS, MIXER_LABELS, STORAGE_LABELS
from .conversions import celsius_to_fahrenheit, grams_to_ounces
from .domain_models import Unit
from .engine import BakePlan
from .labels import format_duration, get_hydration_label, get_speed_label, get_water_temp_advice
from .profiles import RenderProfile
from .schedule import build_schedule, ready_at


def format_mass(grams: float, unit: Unit = Unit.METRIC) -> str:
    if unit is Unit.IMPERIAL:
        return f"{grams_to_ounces(grams):g} oz"
    return f"{grams:g} g"


def format_temp(celsius: float, unit: Unit = Unit.METRIC) -> str:
    if unit is Unit.IMPERIAL:
        return f"{celsius_to_fahrenheit(celsius)}°F"
    return f"{celsius:g}°C"


class BakeRenderer:
    """
    Renderer de documentos de horneado.

    Secciones soportadas (según `profile.show`): summary, ingredients,
    breakdown, water, timing, steps, schedule. "schedule" solo se renderiza
    si se pasa `start`.
    """

    def render_markdown(
        self,
        plan: BakePlan,
        profile: RenderProfile,
        unit: Unit = Unit.METRIC,
        start: Optional[datetime] = None,
    ) -> str:
        inputs = plan["inputs"]
        output = plan["output"]
        steps = plan["steps"]

        def title(key: str, fallback: str) -> str:
            t = (profile.titles.get(key, "") or "").strip()
            return t if t else fallback

        def mass(grams: float) -> str:
            return format_mass(grams, unit)

        lines: List[str] = []
        lines.append(f"# {METHOD_LABELS[inputs.method.value]} Bread\n\n")

        # RESUMEN
        if "summary" in profile.show:
            lines.append(f"## {title('summary', 'Summary')}\n\n")
            lines.append(f"- **Method**: {METHOD_LABELS[inputs.method.value]}\n")
            lines.append(
                f"- **Hydration**: {inputs.target_hydration:g}% "
                f"({get_hydration_label(inputs.target_hydration)})\n"
            )
            lines.append(
                f"- **Fermentation speed**: {inputs.fermentation_speed:g}x "
                f"({get_speed_label(inputs.fermentation_speed)})\n"
            )
            lines.append(f"- **Mixer**: {MIXER_LABELS[inputs.mixer.value]}\n")
            lines.append(f"- **Room temperature**: {format_temp(inputs.room_temp, unit)}\n")
            if inputs.method.is_indirect:
                lines.append(
                    f"- **Preferment storage**: {STORAGE_LABELS[inputs.preferment_storage.value]}\n"
                )
            lines.append("\n")

        # INGREDIENTES
        if "ingredients" in profile.show:
            lines.append(f"## {title('ingredients', 'Ingredients')}\n\n")
            lines.append(f"- **Flour**: {mass(output.flour_total)}\n")
            lines.append(f"- **Water**: {mass(output.water_total)}\n")
            lines.append(f"- **Salt**: {mass(output.salt)}\n")
            lines.append(f"- **Fresh yeast**: {mass(output.yeast)}\n")
            lines.append("\n")

        # PREFERMENTO / MASA FINAL
        if "breakdown" in profile.show and output.preferment is not None:
            pf = output.preferment
            fd = output.final_dough
            lines.append(f"## {title('breakdown', 'Preferment & Final Dough')}\n\n")
            lines.append("| | Flour | Water | Salt | Yeast |\n")
            lines.append("|---|---|---|---|---|\n")
            lines.append(
                f"| {METHOD_LABELS[inputs.method.value]} | {mass(pf.flour)} | {mass(pf.water)} "
                f"| - | {mass(pf.yeast)} |\n"
            )
            lines.append(
                f"| Final dough | {mass(fd.flour)} | {mass(fd.water)} "
                f"| {mass(fd.salt)} | {mass(fd.yeast)} |\n"
            )
            lines.append("\n")

        # AGUA
        if "water" in profile.show:
            advice = get_water_temp_advice(output.calculated_water_temp)
            lines.append(f"## {title('water', 'Water')}\n\n")
            lines.append(
                f"Use water at **{format_temp(output.calculated_water_temp, unit)}** "
                f"({advice.label}).\n\n"
            )

        # TIEMPOS
        if "timing" in profile.show:
            lines.append(f"## {title('timing', 'Timing')}\n\n")
            if inputs.method.is_indirect:
                lines.append(f"- **Preferment**: {format_duration(output.preferment_time)}\n")
            lines.append(f"- **Bulk fermentation**: {format_duration(output.estimated_bulk_time)}\n")
            lines.append(f"- **Final proof**: {format_duration(output.estimated_proof_time)}\n")
            lines.append(f"- **Total**: {format_duration(output.total_time)}\n")
            lines.append("\n")

        # PASOS
        if "steps" in profile.show and steps:
            lines.append(f"## {title('steps', 'Steps')}\n\n")
            for n, step in enumerate(steps, start=1):
                header = f"**{n}. {step.title}**"
                if step.critical:
                    header += " ⚠️"
                lines.append(header + "\n")
                lines.append(f"{step.description}\n")
                if step.duration:
                    lines.append(f"- Time: {format_duration(step.duration)}\n")
                lines.append("\n")

        # AGENDA
        if "schedule" in profile.show and start is not None and steps:
            lines.append(f"## {title('schedule', 'Schedule')}\n\n")
            lines.append("| Start | Step |\n")
            lines.append("|---|---|\n")
            for item in build_schedule(steps, start):
                lines.append(f"| {item.starts_at:%a %H:%M} | {item.title} |\n")
            lines.append(f"\nReady by **{ready_at(steps, start):%a %H:%M}**.\n\n")

        return "".join(lines)
