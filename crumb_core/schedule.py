"""
crumb_core.schedule
===================

Horarios de reloj ("listo a las ...") para una lista de pasos.

Esto es política de la capa consumidora, no del motor: los pasos no guardan
horarios absolutos. Se recorre la lista acumulando duraciones; los pasos sin
duración cuentan con `FALLBACK_STEP_MINUTES` solo a efectos de agenda.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Sequence

from .domain_models import Step

FALLBACK_STEP_MINUTES = 5


@dataclass(frozen=True)
class ScheduledStep:
    """Un paso con su ventana de reloj estimada."""

    step_id: str
    title: str
    starts_at: datetime
    ends_at: datetime


def step_minutes(step: Step, fallback: int = FALLBACK_STEP_MINUTES) -> int:
    return step.duration or fallback


def build_schedule(
    steps: Sequence[Step],
    start: datetime,
    fallback: int = FALLBACK_STEP_MINUTES,
) -> List[ScheduledStep]:
    """
    Asigna a cada paso un horario de inicio y fin a partir de `start`.

    Cada paso empieza cuando termina el anterior.
    """
    schedule: List[ScheduledStep] = []
    cursor = start
    for step in steps:
        ends_at = cursor + timedelta(minutes=step_minutes(step, fallback))
        schedule.append(
            ScheduledStep(step_id=step.id, title=step.title, starts_at=cursor, ends_at=ends_at)
        )
        cursor = ends_at
    return schedule


def ready_at(
    steps: Sequence[Step],
    start: datetime,
    fallback: int = FALLBACK_STEP_MINUTES,
) -> datetime:
    """Hora estimada en que termina el último paso."""
    return start + timedelta(minutes=sum(step_minutes(s, fallback) for s in steps))


def remaining_minutes(
    steps: Sequence[Step],
    current_index: int,
    fallback: int = FALLBACK_STEP_MINUTES,
) -> int:
    """Minutos que faltan desde el paso `current_index` (incluido) hasta el final."""
    return sum(step_minutes(s, fallback) for s in steps[max(0, current_index):])
