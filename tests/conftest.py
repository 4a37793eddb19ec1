from dataclasses import replace

import pytest

from crumb_core.domain_models import Method, MixerType, PrefermentStorage, RecipeInputs


@pytest.fixture
def default_inputs():
    """Entradas por defecto de la UI: directo, 500 g, 70 %, a mano, 22 °C."""
    return RecipeInputs(
        method=Method.DIRECT,
        total_flour=500,
        target_hydration=70,
        mixer=MixerType.HAND,
        room_temp=22,
        fermentation_speed=1.0,
        preferment_storage=PrefermentStorage.ROOM,
    )


@pytest.fixture
def make_inputs(default_inputs):
    """Fábrica: las entradas por defecto con algunos campos cambiados."""

    def _make(**overrides):
        return replace(default_inputs, **overrides)

    return _make
