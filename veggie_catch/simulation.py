"""
無頭模擬: 以代理跑多局並輸出統計
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd
from tqdm import tqdm

from .config.settings import Settings
from .controls.agent import Controller, create_bot
from .core.scheduling import ManualTickSource
from .core.session import GameSession

logger = logging.getLogger(__name__)


def run_session(settings: Settings, bot: Controller, seed: Optional[int] = None) -> Dict:
    """
    以邏輯時間跑完一局

    每 tick_rate 個 tick 觸發一次倒數，直到遊戲結束。

    Returns:
        單局結果記錄
    """
    ticker = ManualTickSource()
    countdown = ManualTickSource()
    rng = np.random.default_rng(seed if seed is not None else settings.seed)
    session = GameSession(settings, rng=rng, tick_source=ticker, countdown_source=countdown)

    final = {}
    session.set_game_end_callback(lambda score, level: final.update(score=score, level=level))
    bot.reset_episode()
    session.start()

    tick_rate = int(settings.tick_rate)
    max_ticks = settings.session_seconds * tick_rate
    for tick in range(1, max_ticks + 1):
        if not session.active:
            break
        bot.drive(session)
        ticker.fire()
        if tick % tick_rate == 0:
            countdown.fire()

    return {
        'bot': bot.name,
        'seed': seed,
        'score': final['score'],
        'level': final['level'],
        **session.stats.as_dict(),
    }


def run_batch(settings: Settings, bot_names: Sequence[str], episodes: int,
              base_seed: int = 0, show_progress: bool = True) -> pd.DataFrame:
    """每個代理各跑 episodes 局，種子相同以便比較"""
    records: List[Dict] = []
    total = len(bot_names) * episodes
    with tqdm(total=total, desc="模擬進度", unit="局", disable=not show_progress) as pbar:
        for name in bot_names:
            pbar.set_description(f"代理: {name}")
            for episode in range(episodes):
                seed = base_seed + episode
                bot = create_bot(name, seed=seed)
                records.append(run_session(settings, bot, seed=seed))
                pbar.update(1)
    return pd.DataFrame.from_records(records)


def generate_summary_report(results: pd.DataFrame) -> pd.DataFrame:
    """依代理彙總分數與接取統計"""
    summary = results.groupby('bot').agg(
        episodes=('score', 'size'),
        mean_score=('score', 'mean'),
        max_score=('score', 'max'),
        mean_level=('level', 'mean'),
        caught=('caught', 'sum'),
        penalties_caught=('penalties_caught', 'sum'),
        missed=('missed', 'sum'),
    )
    return summary.sort_values('mean_score', ascending=False)


def plot_score_distribution(results: pd.DataFrame, output_path: Path):
    """各代理分數分佈盒鬚圖"""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    import seaborn as sns

    plt.figure(figsize=(max(6, results['bot'].nunique() * 2), 5))
    sns.boxplot(data=results, x='bot', y='score', hue='bot', palette="viridis", legend=False)
    sns.stripplot(data=results, x='bot', y='score', color="black", size=3, alpha=0.5)
    plt.xlabel("Bot")
    plt.ylabel("Final score")
    plt.title("Score distribution per bot")
    plt.tight_layout()
    plt.savefig(output_path, dpi=150)
    plt.close()
    logger.info("分數分佈圖已儲存至: %s", output_path)
