# crumb_core/config.py
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List
import os

from dotenv import load_dotenv

"""
crumb_core.config
=================

Gestión centralizada de configuración de la aplicación.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Objetivos de diseño
-------------------
1. **Fuente única de verdad**
   La CLI y la API obtienen configuración solo a través de `get_settings()`.

2. **Separación de responsabilidades**
   - Este módulo NO toca el cálculo: las constantes de panadería viven en
     `crumb_core.constants` y no se configuran por entorno.
   - Solo expone preferencias de presentación y de ejecución.

3. **Facilidad de testing**
   Al estar encapsulado, es fácil mockear `get_settings()` en tests
   (o llamar `get_settings.cache_clear()` luego de cambiar el entorno).

Notas importantes
-----------------
- `load_dotenv()` se ejecuta al importar el módulo.
- Valores inválidos caen al default en lugar de fallar.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()

_UNITS = ("metric", "imperial")
_PROFILES = ("simple", "detailed")


@dataclass
class Settings:
    """
    Contenedor tipado de configuración global.

    Attributes
    ----------
    unit:
        Unidades por defecto para mostrar: "metric" | "imperial".
    profile:
        Perfil de render por defecto: "simple" | "detailed".
    log_level:
        Nivel de logging ("DEBUG", "INFO", ...).
    environment:
        Ambiente de ejecución ("local", "prod", ...). Solo informativo.
    cors_origins:
        Orígenes permitidos por la API HTTP.
    """

    unit: str = "metric"
    profile: str = "detailed"
    log_level: str = "INFO"
    environment: str = "local"
    cors_origins: List[str] = field(default_factory=list)


def _choice(name: str, allowed: tuple, default: str) -> str:
    value = os.getenv(name, default).strip().lower()
    return value if value in allowed else default


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - CRUMB_UNIT (default: "metric")
    - CRUMB_PROFILE (default: "detailed")
    - LOG_LEVEL (default: "INFO")
    - ENVIRONMENT (default: "local")
    - CORS_ORIGINS (default: "http://localhost:3000,http://localhost:5173")
    """
    cors_origins_str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")
    return Settings(
        unit=_choice("CRUMB_UNIT", _UNITS, "metric"),
        profile=_choice("CRUMB_PROFILE", _PROFILES, "detailed"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        environment=os.getenv("ENVIRONMENT", "local"),
        cors_origins=[o.strip() for o in cors_origins_str.split(",") if o.strip()],
    )
