"""
Perfiles de render para el documento de horneado.

Un perfil controla *cómo* se presenta un mismo `BakePlan` (qué secciones y con
qué títulos). No cambia ningún valor calculado.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Literal

Mode = Literal["simple", "detailed"]


@dataclass(frozen=True)
class RenderProfile:
    """
    Perfil de render.

    Attributes
    ----------
    id:
        Identificador estable del perfil (logs, tests). Ej: "simple_v1".
    mode:
        "simple" | "detailed".
    label:
        Etiqueta humana del perfil.
    show:
        Claves de secciones a renderizar, alineadas con `BakeRenderer.render_markdown`:
        "summary", "ingredients", "breakdown", "water", "timing", "steps", "schedule".
    titles:
        Clave de sección → título en el documento.
    """

    id: str
    mode: Mode
    label: str
    show: List[str]
    titles: Dict[str, str]


SIMPLE_V1 = RenderProfile(
    id="simple_v1",
    mode="simple",
    label="Simple",
    show=["ingredients", "water", "steps"],
    titles={
        "ingredients": "Ingredients",
        "water": "Water",
        "steps": "Steps",
    },
)

DETAILED_V1 = RenderProfile(
    id="detailed_v1",
    mode="detailed",
    label="Detailed",
    show=["summary", "ingredients", "breakdown", "water", "timing", "steps", "schedule"],
    titles={
        "summary": "Summary",
        "ingredients": "Ingredients",
        "breakdown": "Preferment & Final Dough",
        "water": "Water",
        "timing": "Timing",
        "steps": "Steps",
        "schedule": "Schedule",
    },
)


def get_profile(mode: Mode) -> RenderProfile:
    """Perfil V1 por defecto para `mode`."""
    return SIMPLE_V1 if mode == "simple" else DETAILED_V1
