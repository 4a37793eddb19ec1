from datetime import datetime

from crumb_core.domain_models import Method, PrefermentStorage, Unit
from crumb_core.engine import plan_bake
from crumb_core.profiles import DETAILED_V1, SIMPLE_V1, get_profile
from crumb_core.renderer import BakeRenderer, format_mass, format_temp


def test_get_profile():
    assert get_profile("simple") is SIMPLE_V1
    assert get_profile("detailed") is DETAILED_V1


def test_render_simple_direct(default_inputs):
    md = BakeRenderer().render_markdown(plan_bake(default_inputs), SIMPLE_V1)

    assert md.startswith("# Direct Bread")
    assert "## Ingredients" in md
    assert "- **Water**: 350 g" in md
    assert "Use water at **26°C** (Warm)." in md
    assert "**1. Mix Ingredients**" in md
    assert "## Timing" not in md
    assert "## Summary" not in md


def test_render_detailed_biga_breakdown(make_inputs):
    inputs = make_inputs(method=Method.BIGA, preferment_storage=PrefermentStorage.FRIDGE)
    md = BakeRenderer().render_markdown(plan_bake(inputs), DETAILED_V1)

    assert "## Preferment & Final Dough" in md
    assert "| Biga | 150 g | 75 g | - | 1.5 g |" in md
    assert "| Final dough | 350 g | 275 g | 10 g | 6 g |" in md
    assert "- **Preferment storage**: Refrigerator" in md
    assert "- **Preferment**: 16h" in md
    assert "**1. Prepare Biga** ⚠️" in md


def test_render_detailed_direct_has_no_breakdown(default_inputs):
    md = BakeRenderer().render_markdown(plan_bake(default_inputs), DETAILED_V1)
    assert "## Preferment & Final Dough" not in md
    assert "- **Bulk fermentation**: 2h 12m" in md
    assert "- **Final proof**: 1h 6m" in md


def test_render_imperial_units(default_inputs):
    md = BakeRenderer().render_markdown(plan_bake(default_inputs), DETAILED_V1, unit=Unit.IMPERIAL)
    assert "- **Flour**: 17.6 oz" in md
    assert "Use water at **79°F**" in md
    assert "- **Room temperature**: 72°F" in md


def test_schedule_only_with_start(default_inputs):
    plan = plan_bake(default_inputs)
    renderer = BakeRenderer()

    assert "## Schedule" not in renderer.render_markdown(plan, DETAILED_V1)

    md = renderer.render_markdown(plan, DETAILED_V1, start=datetime(2026, 3, 14, 8, 0))
    assert "## Schedule" in md
    assert "| Sat 08:00 | Mix Ingredients |" in md
    assert "Ready by **" in md


def test_format_helpers():
    assert format_mass(500) == "500 g"
    assert format_mass(1.5) == "1.5 g"
    assert format_mass(500, Unit.IMPERIAL) == "17.6 oz"
    assert format_temp(22.0) == "22°C"
    assert format_temp(0, Unit.IMPERIAL) == "32°F"
