from crumb_core.domain_models import Method, MixerType, StepCategory
from crumb_core.engine import calculate_recipe
from crumb_core.steps import generate_steps


def _steps(inputs):
    return generate_steps(inputs, calculate_recipe(inputs))


def _titles(steps):
    return [s.title for s in steps]


def test_direct_standard_sequence(default_inputs):
    steps = _steps(default_inputs)

    assert _titles(steps) == [
        "Mix Ingredients",
        "Hand Knead",
        "Bulk Fermentation",
        "Stretch & Fold (Optional)",
        "Pre-shape",
        "Final Shape",
        "Final Proof",
        "Preheat Oven",
        "Score & Load",
        "Bake (Covered)",
        "Bake (Uncovered)",
        "Cool",
    ]
    assert "500g flour with 350g water at 26°C" in steps[0].description
    assert "10g salt and 7.5g yeast" in steps[0].description


def test_ids_are_sequential_and_unique(make_inputs):
    steps = _steps(make_inputs(method=Method.POOLISH, target_hydration=85))
    assert [s.id for s in steps] == [f"step-{i}" for i in range(1, len(steps) + 1)]


def test_standard_durations(default_inputs):
    out = calculate_recipe(default_inputs)
    by_title = {s.title: s for s in generate_steps(default_inputs, out)}

    assert by_title["Hand Knead"].duration == 15
    assert by_title["Bulk Fermentation"].duration == out.estimated_bulk_time
    assert by_title["Bulk Fermentation"].critical
    assert by_title["Stretch & Fold (Optional)"].duration is None
    assert by_title["Pre-shape"].duration == 20
    assert by_title["Final Shape"].duration is None
    assert by_title["Final Shape"].critical
    assert by_title["Final Proof"].duration == out.estimated_proof_time
    assert by_title["Preheat Oven"].duration == 45
    assert by_title["Preheat Oven"].critical
    assert by_title["Score & Load"].duration is None
    assert by_title["Bake (Covered)"].duration == 22
    assert by_title["Bake (Uncovered)"].duration == 22
    assert by_title["Cool"].duration == 60
    assert by_title["Cool"].critical


def test_machine_knead(make_inputs):
    steps = _steps(make_inputs(mixer=MixerType.KITCHENAID))
    knead = steps[1]
    assert knead.title == "Machine Knead"
    assert knead.duration == 12
    assert "Hand Knead" not in _titles(steps)


def test_biga_prepends_preferment_step(make_inputs):
    steps = _steps(make_inputs(method=Method.BIGA))
    first = steps[0]

    assert first.title == "Prepare Biga"
    assert first.category is StepCategory.PREP
    assert first.critical
    assert first.duration is None
    assert "150g flour with 75g water (50% hydration) and 1.5g yeast" in first.description
    assert "8-16 hours" in first.description
    assert steps[1].title == "Combine Final Dough"
    assert "mature Biga to 350g flour" in steps[1].description
    assert "275g water at 28°C" in steps[1].description


def test_poolish_preferment_step(make_inputs):
    first = _steps(make_inputs(method=Method.POOLISH))[0]
    assert first.title == "Prepare Poolish"
    assert "(100% hydration)" in first.description


def test_high_hydration_branch(make_inputs):
    inputs = make_inputs(target_hydration=80)
    out = calculate_recipe(inputs)
    steps = generate_steps(inputs, out)
    titles = _titles(steps)

    assert "Autolyse" in titles
    assert "Bassinage" in titles
    assert any("Coil Fold" in t for t in titles)
    assert "Mix Ingredients" not in titles
    assert "Bulk Fermentation" not in titles

    assert titles[:3] == ["Autolyse", "Add Salt & Yeast", "Bassinage"]
    assert steps[0].duration == 45
    # 80 % de 500 g = 400 g: 360 g en la autolisis y 40 g reservados
    assert "360g water" in steps[0].description
    assert "reserved 40g water" in steps[2].description
    assert steps[2].critical


def test_coil_folds_spaced_across_bulk(make_inputs):
    inputs = make_inputs(target_hydration=80)
    out = calculate_recipe(inputs)
    steps = generate_steps(inputs, out)
    titles = _titles(steps)

    folds = [s for s in steps if s.title.startswith("Coil Fold")]
    interval = int(out.estimated_bulk_time / 5 + 0.5)

    assert [s.title for s in folds] == ["Coil Fold 1", "Coil Fold 2", "Coil Fold 3", "Coil Fold 4"]
    assert all(s.duration == interval for s in folds)
    assert folds[0].critical and not any(s.critical for s in folds[1:])

    start = titles.index("Begin Bulk Fermentation")
    end = titles.index("Complete Bulk Fermentation")
    assert titles[start + 1:end] == [s.title for s in folds]
    assert steps[end].duration == interval
    assert steps[end].critical


def test_threshold_75_is_standard(make_inputs):
    titles = _titles(_steps(make_inputs(target_hydration=75)))
    assert "Autolyse" not in titles
    assert "Mix Ingredients" in titles


def test_tail_is_always_the_same(make_inputs):
    expected_tail = [
        "Pre-shape",
        "Final Shape",
        "Final Proof",
        "Preheat Oven",
        "Score & Load",
        "Bake (Covered)",
        "Bake (Uncovered)",
        "Cool",
    ]
    for method in Method:
        for hydration in (65, 85):
            titles = _titles(_steps(make_inputs(method=method, target_hydration=hydration)))
            assert titles[-8:] == expected_tail


def test_categories_follow_process_order(make_inputs):
    order = [c for c in StepCategory]
    steps = _steps(make_inputs(method=Method.BIGA, target_hydration=80))
    positions = [order.index(s.category) for s in steps]
    assert positions == sorted(positions)


def test_generation_is_deterministic(make_inputs):
    inputs = make_inputs(method=Method.BIGA, target_hydration=78)
    assert _steps(inputs) == _steps(inputs)
