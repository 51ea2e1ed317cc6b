import numpy as np
import pytest

from veggie_catch.core.catalog import Catalog, ItemKind, build_catalog


def test_default_catalog_uses_reference_breakpoints(catalog):
    assert len(catalog) == 4
    assert catalog.uses_breakpoints
    np.testing.assert_allclose(catalog.thresholds, [0.40, 0.70, 0.85, 1.00])
    assert catalog.total_weight == 11


@pytest.mark.parametrize("u, expected", [
    (0.0, "carrot"),
    (0.399, "carrot"),
    (0.40, "cucumber"),
    (0.699, "cucumber"),
    (0.70, "tomato"),
    (0.849, "tomato"),
    (0.85, "pancake"),
    (0.999999, "pancake"),
])
def test_pick_follows_breakpoints(catalog, u, expected):
    assert catalog.pick(u).name == expected


def test_weight_mode_uses_exact_ratios(settings):
    weighted = build_catalog(settings.catalog, "weights")
    np.testing.assert_allclose(weighted.thresholds, [4 / 11, 7 / 11, 9 / 11, 1.0])
    # 0.38 落在 4/11 之後，但在 0.40 斷點之前
    assert weighted.pick(0.38).name == "cucumber"
    assert build_catalog(settings.catalog, "breakpoints").pick(0.38).name == "carrot"


def test_probabilities_sum_to_one(catalog):
    assert catalog.probabilities().sum() == pytest.approx(1.0)


def test_draw_frequencies_match_breakpoints(catalog):
    rng = np.random.default_rng(123)
    names = [catalog.draw(rng).name for _ in range(20000)]
    freq = {name: names.count(name) / len(names) for name in set(names)}
    assert freq["carrot"] == pytest.approx(0.40, abs=0.02)
    assert freq["cucumber"] == pytest.approx(0.30, abs=0.02)
    assert freq["tomato"] == pytest.approx(0.15, abs=0.02)
    assert freq["pancake"] == pytest.approx(0.15, abs=0.02)


def test_empty_catalog_rejected():
    with pytest.raises(ValueError):
        Catalog([])


def test_non_positive_weight_rejected():
    with pytest.raises(ValueError):
        Catalog([ItemKind("bad", "B", 10, False, 0)])


def test_breakpoints_must_match_kinds(catalog):
    with pytest.raises(ValueError):
        Catalog(catalog.kinds, breakpoints=[0.5, 1.0])
    with pytest.raises(ValueError):
        Catalog(catalog.kinds, breakpoints=[0.4, 0.4, 0.9, 1.0])
    with pytest.raises(ValueError):
        Catalog(catalog.kinds, breakpoints=[0.1, 0.2, 0.3, 0.9])


def test_item_kind_from_dict_defaults():
    kind = ItemKind.from_dict({"name": "rock", "score_delta": -50, "weight": 1})
    assert kind.is_penalty
    assert kind.icon == "R"
    assert isinstance(kind.color, tuple)


def test_by_name_and_non_penalty(catalog):
    assert catalog.by_name("pancake").is_penalty
    assert [k.name for k in catalog.non_penalty_kinds()] == ["carrot", "cucumber", "tomato"]
    with pytest.raises(KeyError):
        catalog.by_name("potato")


def test_unknown_mode_rejected(settings):
    with pytest.raises(ValueError):
        build_catalog(settings.catalog, "uniform")
