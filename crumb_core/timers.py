"""
crumb_core.timers
=================

Temporizadores por paso, tal como los guarda la capa de estado externa.

Un `TimerState` es un objeto de valor serializable: la capa externa lo
persiste y, al retomar la sesión, `resume_timer_states` descuenta el tiempo
de reloj transcurrido desde `last_updated`. Nada de esto vive dentro del
motor de cálculo: son funciones puras de timestamps.

Los timestamps son segundos UNIX (float), como `time.time()`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Sequence

from .domain_models import Step


@dataclass(frozen=True)
class TimerState:
    """
    Estado de un temporizador.

    Attributes
    ----------
    step_id:
        Id del paso (`Step.id`) al que pertenece.
    remaining_seconds:
        Segundos que faltan; nunca negativo.
    is_running:
        Si el temporizador está corriendo.
    last_updated:
        Momento (segundos UNIX) en que se escribió este estado.
    """

    step_id: str
    remaining_seconds: int
    is_running: bool
    last_updated: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_id": self.step_id,
            "remaining_seconds": self.remaining_seconds,
            "is_running": self.is_running,
            "last_updated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TimerState":
        """
        Reconstruye un estado guardado.

        `remaining_seconds` tiene que ser un entero (un float entero como 300.0
        se acepta) y `last_updated` un número finito.

        Raises
        ------
        ValueError
            Si faltan campos o tienen valores inválidos.
        """
        try:
            step_id = data["step_id"]
            remaining = data["remaining_seconds"]
            is_running = data["is_running"]
            last_updated = float(data["last_updated"])
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"Estado de temporizador inválido: {e}") from e

        if isinstance(remaining, bool) or not isinstance(remaining, (int, float)):
            raise ValueError("remaining_seconds debe ser un número entero")
        if isinstance(remaining, float) and not (math.isfinite(remaining) and remaining.is_integer()):
            raise ValueError("remaining_seconds debe ser un número entero")
        if remaining < 0:
            raise ValueError("remaining_seconds no puede ser negativo")
        if not isinstance(is_running, bool):
            raise ValueError("is_running debe ser booleano")
        if not math.isfinite(last_updated):
            raise ValueError("last_updated debe ser un número finito")

        return cls(
            step_id=str(step_id),
            remaining_seconds=int(remaining),
            is_running=is_running,
            last_updated=last_updated,
        )


def init_timer_states(steps: Sequence[Step], now: float) -> Dict[str, TimerState]:
    """Un temporizador detenido por cada paso con duración, indexado por id."""
    return {
        step.id: TimerState(
            step_id=step.id,
            remaining_seconds=step.duration * 60,
            is_running=False,
            last_updated=now,
        )
        for step in steps
        if step.duration
    }


def _elapsed_seconds(state: TimerState, now: float) -> int:
    return max(0, int(math.floor(now - state.last_updated)))


def resume_timer_states(
    states: Mapping[str, TimerState],
    now: float,
) -> Dict[str, TimerState]:
    """
    Descuenta el tiempo transcurrido a los temporizadores que estaban corriendo.

    Los detenidos quedan igual. El resultado nunca baja de 0 segundos.
    """
    resumed: Dict[str, TimerState] = {}
    for step_id, state in states.items():
        if state.is_running:
            remaining = max(0, state.remaining_seconds - _elapsed_seconds(state, now))
            resumed[step_id] = replace(state, remaining_seconds=remaining, last_updated=now)
        else:
            resumed[step_id] = state
    return resumed


def start_timer(state: TimerState, now: float) -> TimerState:
    return replace(state, is_running=True, last_updated=now)


def pause_timer(state: TimerState, now: float) -> TimerState:
    """Detiene el temporizador guardando lo que faltaba en ese momento."""
    if not state.is_running:
        return state
    remaining = max(0, state.remaining_seconds - _elapsed_seconds(state, now))
    return replace(state, remaining_seconds=remaining, is_running=False, last_updated=now)


def reset_timer(state: TimerState, step: Step, now: float) -> TimerState:
    return replace(
        state,
        remaining_seconds=(step.duration or 0) * 60,
        is_running=False,
        last_updated=now,
    )
