"""
Endpoints de seguimiento de un horneado (capa consumidora del motor).

- POST /api/v1/bakes/schedule: horarios estimados por paso
- POST /api/v1/bakes/timers/resume: retoma temporizadores guardados
"""

import logging
import time

from fastapi import APIRouter, HTTPException

from crumb_core.engine import plan_bake
from crumb_core.schedule import build_schedule, ready_at, remaining_minutes
from crumb_core.timers import TimerState, resume_timer_states

from ..models.requests import (
    ScheduledStepModel,
    ScheduleRequest,
    ScheduleResponse,
    TimerResumeRequest,
    TimerResumeResponse,
    TimerStateModel,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/bakes", tags=["bakes"])


@router.post("/schedule", response_model=ScheduleResponse)
async def schedule(request: ScheduleRequest):
    """
    Horarios de inicio / fin de cada paso a partir de `start`.

    Los pasos sin duración cuentan 5 minutos.
    """
    steps = plan_bake(request.inputs.to_inputs())["steps"]
    if request.current_step_index >= len(steps):
        raise HTTPException(
            status_code=400,
            detail=f"current_step_index fuera de rango (hay {len(steps)} pasos)",
        )

    items = build_schedule(steps, request.start)
    return ScheduleResponse(
        items=[
            ScheduledStepModel(
                step_id=item.step_id,
                title=item.title,
                starts_at=item.starts_at,
                ends_at=item.ends_at,
            )
            for item in items
        ],
        ready_at=ready_at(steps, request.start),
        remaining_minutes=remaining_minutes(steps, request.current_step_index),
    )


@router.post("/timers/resume", response_model=TimerResumeResponse)
async def resume_timers(request: TimerResumeRequest):
    """Descuenta el tiempo transcurrido a los temporizadores que estaban corriendo."""
    try:
        states = {s.step_id: s for s in (TimerState.from_dict(t) for t in request.timers)}
    except ValueError as e:
        logger.warning(f"Estado de temporizador rechazado: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e

    now = request.now if request.now is not None else time.time()
    resumed = resume_timer_states(states, now)
    return TimerResumeResponse(
        timers=[TimerStateModel(**state.to_dict()) for state in resumed.values()]
    )
