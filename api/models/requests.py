"""
Modelos de request / response para la API.

Estos modelos validan tipos y rangos antes de pasar los valores al core.
El motor no valida rangos: esa responsabilidad es de esta capa.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from crumb_core.constants import FLOUR_CONFIG, HYDRATION_CONFIG, SPEED_CONFIG, TEMP_CONFIG
from crumb_core.domain_models import (
    Method,
    MixerType,
    PrefermentStorage,
    RecipeInputs,
    StepCategory,
    Unit,
)


class RenderMode(str, Enum):
    """Perfil del documento Markdown."""

    SIMPLE = "simple"
    DETAILED = "detailed"


class RecipeInputsRequest(BaseModel):
    """
    Entradas del panadero.

    Los defaults y rangos son los mismos que usa la UI.
    """

    method: Method = Field(default=Method.DIRECT, description="DIRECT | BIGA | POOLISH")
    total_flour: float = Field(
        default=FLOUR_CONFIG.default, ge=FLOUR_CONFIG.min, le=FLOUR_CONFIG.max,
        description="Harina total (g)",
    )
    target_hydration: float = Field(
        default=HYDRATION_CONFIG.default, ge=HYDRATION_CONFIG.min, le=HYDRATION_CONFIG.max,
        description="Hidratación objetivo (%)",
    )
    mixer: MixerType = Field(default=MixerType.HAND, description="HAND | KITCHENAID")
    room_temp: float = Field(
        default=TEMP_CONFIG.default, ge=TEMP_CONFIG.min, le=TEMP_CONFIG.max,
        description="Temperatura ambiente (°C)",
    )
    fermentation_speed: float = Field(
        default=SPEED_CONFIG.default, ge=SPEED_CONFIG.min, le=SPEED_CONFIG.max,
        description="Multiplicador de velocidad de fermentación",
    )
    preferment_storage: PrefermentStorage = Field(
        default=PrefermentStorage.ROOM, description="FRIDGE | ROOM (solo métodos indirectos)",
    )

    def to_inputs(self) -> RecipeInputs:
        return RecipeInputs(
            method=self.method,
            total_flour=self.total_flour,
            target_hydration=self.target_hydration,
            mixer=self.mixer,
            room_temp=self.room_temp,
            fermentation_speed=self.fermentation_speed,
            preferment_storage=self.preferment_storage,
        )


class PrefermentModel(BaseModel):
    flour: float
    water: float
    yeast: float


class FinalDoughModel(BaseModel):
    flour: float
    water: float
    salt: float
    yeast: float


class RecipeOutputModel(BaseModel):
    """Resultado del cálculo (espejo de `crumb_core.RecipeOutput`)."""

    flour_total: float
    water_total: int
    salt: int
    yeast: float
    preferment: Optional[PrefermentModel] = None
    final_dough: FinalDoughModel
    calculated_water_temp: int
    estimated_bulk_time: int
    estimated_proof_time: int
    preferment_time: int
    total_time: int


class StepModel(BaseModel):
    id: str
    title: str
    description: str
    critical: bool
    duration: Optional[int] = None
    category: StepCategory


class LabelsModel(BaseModel):
    """Etiquetas descriptivas para la UI."""

    hydration: str
    speed: str
    water_advice: str
    water_icon: str
    total_time: str


class BakePlanResponse(BaseModel):
    output: RecipeOutputModel
    steps: List[StepModel]
    labels: LabelsModel


class DefaultsResponse(BaseModel):
    defaults: RecipeInputsRequest
    ranges: Dict[str, Dict[str, float]]


class MarkdownRequest(BaseModel):
    inputs: RecipeInputsRequest = Field(default_factory=RecipeInputsRequest)
    profile: RenderMode = Field(default=RenderMode.DETAILED)
    unit: Unit = Field(default=Unit.METRIC)
    start: Optional[datetime] = Field(default=None, description="Inicio para la agenda (opcional)")


class MarkdownResponse(BaseModel):
    profile_id: str
    markdown: str


class ScheduleRequest(BaseModel):
    inputs: RecipeInputsRequest = Field(default_factory=RecipeInputsRequest)
    start: datetime = Field(..., description="Momento de inicio del horneado")
    current_step_index: int = Field(default=0, ge=0, description="Paso actual (para tiempo restante)")


class ScheduledStepModel(BaseModel):
    step_id: str
    title: str
    starts_at: datetime
    ends_at: datetime


class ScheduleResponse(BaseModel):
    items: List[ScheduledStepModel]
    ready_at: datetime
    remaining_minutes: int


class TimerStateModel(BaseModel):
    step_id: str
    remaining_seconds: int
    is_running: bool
    last_updated: float


class TimerResumeRequest(BaseModel):
    """
    Estados de temporizadores tal como los guardó el cliente.

    Se reciben como dicts crudos: un estado mal formado devuelve 400, no 422.
    """

    timers: List[Dict[str, Any]] = Field(default_factory=list)
    now: Optional[float] = Field(
        default=None, allow_inf_nan=False, description="Segundos UNIX; default: ahora",
    )


class TimerResumeResponse(BaseModel):
    timers: List[TimerStateModel]
