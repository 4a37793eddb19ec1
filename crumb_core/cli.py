"""
crumb_core.cli
==============

Punto de entrada de línea de comandos (`crumb`).

Flujo
-----
1) Lee configuración (settings) y configura logging.
2) Arma `RecipeInputs` desde los argumentos.
3) Corre `engine.plan_bake` (receta + pasos).
4) Renderiza Markdown según perfil / unidades, o vuelca JSON.
5) Escribe a stdout o al archivo indicado con `--output`.

Los rangos de entrada se validan acá (son responsabilidad de la capa que
recibe al usuario, no del motor).
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from .config import get_settings
from .constants import FLOUR_CONFIG, HYDRATION_CONFIG, SPEED_CONFIG, TEMP_CONFIG, InputRange
from .domain_models import Method, MixerType, PrefermentStorage, RecipeInputs, Unit
from .engine import plan_bake, plan_to_dict
from .profiles import get_profile
from .renderer import BakeRenderer

logger = logging.getLogger(__name__)


def _ranged(name: str, rng: InputRange) -> Callable[[str], float]:
    """Tipo argparse que acepta floats dentro de `rng`."""

    def parse(value: str) -> float:
        try:
            number = float(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{name} debe ser un número: {value!r}")
        if not rng.min <= number <= rng.max:
            raise argparse.ArgumentTypeError(
                f"{name} fuera de rango ({rng.min:g}-{rng.max:g}): {number:g}"
            )
        return number

    return parse


def _start_time(value: str) -> datetime:
    if value == "now":
        return datetime.now().replace(second=0, microsecond=0)
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"--start debe ser 'now' o ISO 8601: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="crumb",
        description="Calcula una receta de pan y sus pasos de elaboración.",
    )
    parser.add_argument("--method", type=str.upper, choices=[m.value for m in Method], default=Method.DIRECT.value)
    parser.add_argument("--flour", type=_ranged("--flour", FLOUR_CONFIG), default=FLOUR_CONFIG.default, help="Harina total (g)")
    parser.add_argument("--hydration", type=_ranged("--hydration", HYDRATION_CONFIG), default=HYDRATION_CONFIG.default, help="Hidratación (%%)")
    parser.add_argument("--mixer", type=str.upper, choices=[m.value for m in MixerType], default=MixerType.HAND.value)
    parser.add_argument("--room-temp", type=_ranged("--room-temp", TEMP_CONFIG), default=TEMP_CONFIG.default, help="Temperatura ambiente (°C)")
    parser.add_argument("--speed", type=_ranged("--speed", SPEED_CONFIG), default=SPEED_CONFIG.default, help="Multiplicador de fermentación")
    parser.add_argument("--storage", type=str.upper, choices=[s.value for s in PrefermentStorage], default=PrefermentStorage.ROOM.value)
    parser.add_argument("--unit", choices=["metric", "imperial"], default=settings.unit)
    parser.add_argument("--profile", choices=["simple", "detailed"], default=settings.profile)
    parser.add_argument("--format", choices=["markdown", "json"], default="markdown")
    parser.add_argument("--start", type=_start_time, default=None, help="Inicio para la agenda: 'now' o fecha ISO")
    parser.add_argument("--output", type=Path, default=None, help="Archivo de salida (default: stdout)")
    return parser


def generate(args: argparse.Namespace) -> str:
    """Calcula y formatea según los argumentos ya parseados (sin I/O)."""
    inputs = RecipeInputs(
        method=Method(args.method),
        total_flour=args.flour,
        target_hydration=args.hydration,
        mixer=MixerType(args.mixer),
        room_temp=args.room_temp,
        fermentation_speed=args.speed,
        preferment_storage=PrefermentStorage(args.storage),
    )
    logger.debug(f"Entradas: {inputs}")

    plan = plan_bake(inputs)
    logger.info(
        f"🍞 Receta calculada: {len(plan['steps'])} pasos, total {plan['output'].total_time} min"
    )

    if args.format == "json":
        return json.dumps(plan_to_dict(plan), indent=2, ensure_ascii=False)

    return BakeRenderer().render_markdown(
        plan,
        get_profile(args.profile),
        unit=Unit(args.unit.upper()),
        start=args.start,
    )


def run(argv: Optional[List[str]] = None) -> str:
    """
    Ejecuta la CLI y devuelve el texto generado (Markdown o JSON).

    Con `--output` lo escribe en disco; si no, lo imprime en stdout.
    """
    args = build_parser().parse_args(argv)
    text = generate(args)

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text, encoding="utf-8")
        logger.info(f"✅ Documento generado en: {args.output.resolve()}")
    else:
        print(text)

    return text


def main(argv: Optional[List[str]] = None) -> None:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run(argv)


if __name__ == "__main__":
    main()
