import pandas as pd

from veggie_catch.config import Settings
from veggie_catch.controls import LaneFollowerBot, StayBot
from veggie_catch.simulation import (
    generate_summary_report, plot_score_distribution, run_batch, run_session,
)


def test_run_session_record():
    record = run_session(Settings(), StayBot(), seed=1)
    assert record['bot'] == "StayBot"
    assert record['score'] >= 0
    assert record['level'] >= 1
    assert record['spawned'] > 0
    assert record['spawned'] >= record['caught'] + record['missed']
    assert record['commands'] == 0


def test_run_session_is_reproducible():
    first = run_session(Settings(), LaneFollowerBot(), seed=11)
    second = run_session(Settings(), LaneFollowerBot(), seed=11)
    assert first == second


def test_batch_and_summary():
    results = run_batch(Settings(), ["StayBot", "LaneFollowerBot"], episodes=2,
                        base_seed=5, show_progress=False)
    assert isinstance(results, pd.DataFrame)
    assert len(results) == 4
    assert set(results['seed']) == {5, 6}

    summary = generate_summary_report(results)
    assert set(summary.index) == {"StayBot", "LaneFollowerBot"}
    assert (summary['episodes'] == 2).all()
    assert list(summary['mean_score']) == sorted(summary['mean_score'], reverse=True)


def test_plot_written(tmp_path):
    results = run_batch(Settings(), ["StayBot", "RandomBot"], episodes=2, show_progress=False)
    path = tmp_path / "scores.png"
    plot_score_distribution(results, path)
    assert path.exists() and path.stat().st_size > 0
