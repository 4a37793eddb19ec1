"""
Endpoints de cálculo de recetas.

- GET  /api/v1/recipes/defaults: entradas por defecto y rangos
- POST /api/v1/recipes/calculate: receta + pasos + etiquetas
- POST /api/v1/recipes/markdown: documento Markdown renderizado
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter

from crumb_core.constants import FLOUR_CONFIG, HYDRATION_CONFIG, SPEED_CONFIG, TEMP_CONFIG
from crumb_core.engine import plan_bake
from crumb_core.labels import format_duration, get_hydration_label, get_speed_label, get_water_temp_advice
from crumb_core.profiles import get_profile
from crumb_core.renderer import BakeRenderer

from ..models.requests import (
    BakePlanResponse,
    DefaultsResponse,
    LabelsModel,
    MarkdownRequest,
    MarkdownResponse,
    RecipeInputsRequest,
    RecipeOutputModel,
    StepModel,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


@router.get("/defaults", response_model=DefaultsResponse)
async def get_defaults():
    """Entradas por defecto y rangos admitidos (para armar la UI)."""
    return DefaultsResponse(
        defaults=RecipeInputsRequest(),
        ranges={
            "total_flour": asdict(FLOUR_CONFIG),
            "target_hydration": asdict(HYDRATION_CONFIG),
            "fermentation_speed": asdict(SPEED_CONFIG),
            "room_temp": asdict(TEMP_CONFIG),
        },
    )


@router.post("/calculate", response_model=BakePlanResponse)
async def calculate(request: RecipeInputsRequest):
    """
    Calcula la receta y los pasos.

    Es idempotente: las mismas entradas devuelven siempre la misma respuesta.
    """
    inputs = request.to_inputs()
    plan = plan_bake(inputs)
    output = plan["output"]
    advice = get_water_temp_advice(output.calculated_water_temp)

    logger.info(
        f"Receta {inputs.method.value}: {len(plan['steps'])} pasos, total {output.total_time} min"
    )

    return BakePlanResponse(
        output=RecipeOutputModel(**asdict(output)),
        steps=[StepModel(**step.to_dict()) for step in plan["steps"]],
        labels=LabelsModel(
            hydration=get_hydration_label(inputs.target_hydration),
            speed=get_speed_label(inputs.fermentation_speed),
            water_advice=advice.label,
            water_icon=advice.icon,
            total_time=format_duration(output.total_time),
        ),
    )


@router.post("/markdown", response_model=MarkdownResponse)
async def render_markdown(request: MarkdownRequest):
    """Renderiza la receta y sus pasos a Markdown según perfil y unidades."""
    profile = get_profile(request.profile.value)
    plan = plan_bake(request.inputs.to_inputs())
    markdown = BakeRenderer().render_markdown(
        plan,
        profile,
        unit=request.unit,
        start=request.start,
    )
    return MarkdownResponse(profile_id=profile.id, markdown=markdown)
