import numpy as np
import pytest

from veggie_catch.core import (
    DifficultyCurve, apply_score, derive_level, derive_spawn_cadence, item_speed,
)


def test_score_clamps_at_zero(catalog):
    assert apply_score(100, catalog.by_name("pancake")) == 0
    assert apply_score(800, catalog.by_name("pancake")) == 300
    assert apply_score(0, catalog.by_name("tomato")) == 300


def test_score_never_negative_for_any_sequence(catalog):
    rng = np.random.default_rng(5)
    score = 0
    for _ in range(2000):
        score = apply_score(score, catalog.draw(rng))
        assert score >= 0


@pytest.mark.parametrize("score, level", [
    (0, 1), (999, 1), (1000, 2), (1999, 2), (2500, 3), (8000, 9),
])
def test_level_from_score(score, level):
    assert derive_level(score) == level


def test_cadence_curve():
    assert derive_spawn_cadence(1) == 55
    assert derive_spawn_cadence(2) == 50
    cadences = [derive_spawn_cadence(level) for level in range(1, 9)]
    assert cadences == sorted(cadences, reverse=True)
    assert len(set(cadences)) == len(cadences)
    assert derive_spawn_cadence(8) == 20


@pytest.mark.parametrize("level", [9, 10, 12, 50, 1000])
def test_cadence_floor(level):
    assert derive_spawn_cadence(level) == 20


def test_item_speed():
    assert item_speed(1) == 1.5
    assert item_speed(4) == 3.0
    assert item_speed(2, base_speed=2.0, speed_per_level=1.0) == 4.0


def test_curve_from_settings(settings):
    settings.points_per_level = 500
    settings.min_spawn_cadence = 30
    curve = DifficultyCurve.from_settings(settings)
    assert curve.level_for(1000) == 3
    assert curve.cadence_for(3) == 45
    assert curve.cadence_for(20) == 30
