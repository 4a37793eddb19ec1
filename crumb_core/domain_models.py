from __future__ import annotations

"""
crumb_core.domain_models
========================

Modelos de dominio (enums + dataclasses) usados por el motor de cálculo.

Objetivo
--------
Este módulo define las estructuras de datos "neutras" del sistema:

- Entradas del panadero (`RecipeInputs`)
- Resultado del cálculo (`RecipeOutput`, con `Preferment` y `FinalDough`)
- Pasos del proceso (`Step`)

Principios de diseño
--------------------
- Objetos de valor inmutables (`frozen=True`): cada recálculo crea objetos
  nuevos, nunca se modifican a medias.
- Solo campos numéricos / string / enum (str): se serializan a JSON tal cual
  y se pueden guardar y recuperar fuera del core.
- Sin lógica de cálculo acá: eso vive en `calculator`, `engine` y `steps`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional


# ============================================================
# Enums cerrados
# ============================================================

class Method(str, Enum):
    """Método de elaboración (define la política de prefermento)."""

    DIRECT = "DIRECT"
    BIGA = "BIGA"
    POOLISH = "POOLISH"

    @property
    def is_indirect(self) -> bool:
        return self is not Method.DIRECT


class MixerType(str, Enum):
    HAND = "HAND"
    KITCHENAID = "KITCHENAID"


class PrefermentStorage(str, Enum):
    FRIDGE = "FRIDGE"
    ROOM = "ROOM"


class StepCategory(str, Enum):
    PREP = "prep"
    MIX = "mix"
    BULK = "bulk"
    SHAPE = "shape"
    PROOF = "proof"
    BAKE = "bake"


class Unit(str, Enum):
    """Preferencia de unidades para mostrar (no afecta el cálculo)."""

    METRIC = "METRIC"
    IMPERIAL = "IMPERIAL"


# ============================================================
# Entradas
# ============================================================

@dataclass(frozen=True)
class RecipeInputs:
    """
    Entradas del panadero para un cálculo.

    Attributes
    ----------
    method:
        DIRECT, BIGA o POOLISH.
    total_flour:
        Harina total en gramos (rango esperado 100-2000, no se valida acá).
    target_hydration:
        Hidratación objetivo en % (rango esperado 60-90).
    mixer:
        A mano o amasadora; afecta fricción y textos de pasos.
    room_temp:
        Temperatura ambiente en °C.
    fermentation_speed:
        Multiplicador 0.5-2.0, 1.0 = estándar. Siempre > 0.
    preferment_storage:
        FRIDGE o ROOM; solo importa si el método es indirecto.
    """

    method: Method
    total_flour: float
    target_hydration: float
    mixer: MixerType
    room_temp: float
    fermentation_speed: float
    preferment_storage: PrefermentStorage = PrefermentStorage.ROOM

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RecipeInputs":
        """
        Construye `RecipeInputs` desde un dict plano (JSON, formulario, store).

        Raises
        ------
        ValueError
            Si falta un campo, un enum no es válido o un valor numérico no se
            puede convertir.
        """
        try:
            return cls(
                method=Method(str(data["method"]).upper()),
                total_flour=float(data["total_flour"]),
                target_hydration=float(data["target_hydration"]),
                mixer=MixerType(str(data["mixer"]).upper()),
                room_temp=float(data["room_temp"]),
                fermentation_speed=float(data["fermentation_speed"]),
                preferment_storage=PrefermentStorage(
                    str(data.get("preferment_storage", PrefermentStorage.ROOM.value)).upper()
                ),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Entradas de receta inválidas: {e}") from e


# ============================================================
# Resultado del cálculo
# ============================================================

@dataclass(frozen=True)
class Preferment:
    """Composición del prefermento (biga o poolish), en gramos."""

    flour: float
    water: float
    yeast: float


@dataclass(frozen=True)
class FinalDough:
    """
    Masa final que se amasa luego de incorporar el prefermento.

    `yeast` es la levadura "de refuerzo" que se agrega en la masa final.
    """

    flour: float
    water: float
    salt: float
    yeast: float


@dataclass(frozen=True)
class RecipeOutput:
    """
    Resultado completo de `engine.calculate_recipe`.

    Totales de la tanda (`flour_total`, `water_total`, `salt`, `yeast`),
    desglose en prefermento / masa final y tiempos en minutos enteros.
    `preferment` es None para el método directo.
    """

    flour_total: float
    water_total: int
    salt: int
    yeast: float
    preferment: Optional[Preferment]
    final_dough: FinalDough
    calculated_water_temp: int
    estimated_bulk_time: int
    estimated_proof_time: int
    preferment_time: int
    total_time: int


# ============================================================
# Pasos del proceso
# ============================================================

@dataclass(frozen=True)
class Step:
    """
    Paso del proceso generado por `steps.generate_steps`.

    Attributes
    ----------
    id:
        Identificador secuencial ("step-1", "step-2", ...). Único dentro de una
        generación; no es estable entre regeneraciones con entradas distintas.
    title / description:
        Texto para mostrar.
    critical:
        Marca los pasos que no conviene saltear ni demorar.
    category:
        Fase del proceso (prep, mix, bulk, shape, proof, bake).
    duration:
        Minutos, o None si el paso no tiene duración fija.
    """

    id: str
    title: str
    description: str
    critical: bool
    category: StepCategory
    duration: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "critical": self.critical,
            "duration": self.duration,
            "category": self.category.value,
        }
