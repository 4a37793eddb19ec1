from datetime import datetime, timedelta

from crumb_core.domain_models import Step, StepCategory
from crumb_core.engine import plan_bake
from crumb_core.schedule import FALLBACK_STEP_MINUTES, build_schedule, ready_at, remaining_minutes


def _step(n, duration=None):
    return Step(
        id=f"step-{n}",
        title=f"Step {n}",
        description="",
        critical=False,
        category=StepCategory.MIX,
        duration=duration,
    )


START = datetime(2026, 3, 14, 8, 0)


def test_schedule_accumulates_durations_with_fallback():
    steps = [_step(1, 15), _step(2), _step(3, 30)]
    schedule = build_schedule(steps, START)

    assert [item.starts_at for item in schedule] == [
        START,
        START + timedelta(minutes=15),
        START + timedelta(minutes=15 + FALLBACK_STEP_MINUTES),
    ]
    assert schedule[1].ends_at == schedule[2].starts_at
    assert schedule[-1].ends_at == START + timedelta(minutes=50)
    assert ready_at(steps, START) == schedule[-1].ends_at


def test_remaining_minutes():
    steps = [_step(1, 15), _step(2), _step(3, 30)]
    assert remaining_minutes(steps, 0) == 50
    assert remaining_minutes(steps, 1) == 35
    assert remaining_minutes(steps, 3) == 0


def test_schedule_for_a_real_plan(default_inputs):
    steps = plan_bake(default_inputs)["steps"]
    schedule = build_schedule(steps, START)

    assert len(schedule) == len(steps)
    assert [item.step_id for item in schedule] == [s.id for s in steps]
    # Preheat se agenda en serie aunque en el total se superpone con el leudado.
    total = sum(s.duration or FALLBACK_STEP_MINUTES for s in steps)
    assert ready_at(steps, START) == START + timedelta(minutes=total)
