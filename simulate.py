#!/usr/bin/env python3
"""
simulate.py ─ 無頭代理模擬
====================================================================
- 以邏輯時間快速跑完多局，不開視窗、不等待真實時間。
- 每個代理使用相同的種子序列，分數可直接比較。
- 輸出原始結果與彙總排名 CSV，並可選生成分數分佈圖。
"""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Dict

from veggie_catch.config import load_settings
from veggie_catch.simulation import run_batch, generate_summary_report, plot_score_distribution

# ────────────────── 1. 用戶配置區域 (SIM_CONFIG) ──────────────────
SIM_CONFIG: Dict[str, Any] = {
    "config_path": "config.yaml",
    "base_seed": 1000,
    # None 時使用 config.yaml 的 sim_episodes / sim_bots
    "episodes": None,
    "bots": None,
}
# ────────────────── (用戶配置區域結束) ──────────────────


def main():
    start_time = time.time()
    logging.basicConfig(level=logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("=" * 60)
    print("       Veggie Catch 代理模擬")
    print("=" * 60)

    settings = load_settings(SIM_CONFIG["config_path"])
    episodes = SIM_CONFIG["episodes"] or settings.sim_episodes
    bots = SIM_CONFIG["bots"] or settings.sim_bots

    output_dir = Path(settings.sim_output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    print(f"[資訊] 代理: {', '.join(bots)}")
    print(f"[資訊] 每個代理 {episodes} 局，抽樣模式: {settings.catalog_mode}")

    print("\n[階段 1/2] 執行模擬...")
    results = run_batch(settings, bots, episodes, base_seed=SIM_CONFIG["base_seed"])

    print("\n[階段 2/2] 生成報告...")
    stamp = time.strftime('%Y%m%d_%H%M%S')
    raw_path = output_dir / f"results_{stamp}.csv"
    results.to_csv(raw_path, index=False)
    print(f"[報告] 原始結果已儲存至: {raw_path}")

    summary = generate_summary_report(results)
    summary_path = output_dir / f"summary_{stamp}.csv"
    summary.to_csv(summary_path)
    print(f"[報告] 彙總排名已儲存至: {summary_path}")

    print("\n" + "=" * 25 + " 彙總排名 " + "=" * 25)
    print(summary.to_string(float_format="{:.1f}".format))

    if settings.generate_plots:
        plot_path = output_dir / f"score_distribution_{stamp}.png"
        plot_score_distribution(results, plot_path)
        print(f"[圖表] 分數分佈圖已儲存至: {plot_path}")

    total_time = time.time() - start_time
    print(f"\n[完成] 模擬總耗時: {total_time:.2f} 秒。")


if __name__ == "__main__":
    main()
