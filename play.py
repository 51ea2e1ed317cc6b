#!/usr/bin/env python3
"""
Veggie Catch - 互動版
鍵盤控制籃子接住蔬菜，避開鬆餅
"""

import argparse
import logging

from veggie_catch.config import Settings, load_settings
from veggie_catch.controls import KeyboardController
from veggie_catch.core import GameSession, ManualTickSource, IntervalTickSource
from veggie_catch.rendering.pygame_renderer import PygameRenderer


class VeggieCatchApp:
    """主視覺化應用"""

    def __init__(self, settings: Settings):
        """初始化應用"""
        self.settings = settings
        self.renderer = None
        self.session = None
        self.controller = None
        self.frame_ticker = ManualTickSource()
        self.last_result = None

    def initialize(self):
        """初始化系統"""
        self.renderer = PygameRenderer(enable_effects=self.settings.enable_effects)
        self.renderer.init(self.settings.window_title)
        self.controller = KeyboardController()

        self.session = GameSession(
            self.settings,
            tick_source=self.frame_ticker,
            countdown_source=IntervalTickSource(1.0, name="countdown"),
            render_sink=self.renderer,
            on_end=self._on_game_end,
        )
        print(f"[資訊] 遊戲時間 {self.settings.session_seconds} 秒，"
              f"物品抽樣模式: {self.settings.catalog_mode}")

    def _on_game_end(self, score: int, level: int):
        """遊戲結束通知 (可能來自倒數執行緒)"""
        self.last_result = (score, level)
        self.renderer.banner = f"Score {score} / Lv {level} - SPACE"
        print(f"[完成] 遊戲結束! 最終分數: {score}，等級: {level}")

    def run(self):
        """運行主迴圈"""
        self.renderer.banner = None
        self.session.start()

        running = True
        while running:
            events = self.renderer.handle_events()
            if events['quit']:
                running = False
                continue

            if events['space'] and not self.session.active:
                self.renderer.banner = None
                self.session.start()

            self.controller.feed_keys(events['keys'], self.session.catcher_lane)
            self.controller.drive(self.session)
            self.frame_ticker.fire()

            self.renderer.draw_frame()
            self.renderer.present()
            self.renderer.tick(self.settings.tick_rate)

        self.cleanup()

    def cleanup(self):
        """清理資源"""
        if self.session:
            self.session.stop()
        if self.renderer:
            self.renderer.cleanup()
        print("[資訊] 程序正常結束。")


def main():
    """主函數"""
    parser = argparse.ArgumentParser(description="Veggie Catch")
    parser.add_argument("--config", default="config.yaml", help="配置文件路徑")
    parser.add_argument("--seed", type=int, default=None, help="隨機種子")
    parser.add_argument("-v", "--verbose", action="store_true", help="顯示除錯日誌")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = load_settings(args.config)
    if args.seed is not None:
        settings.seed = args.seed

    app = VeggieCatchApp(settings)
    app.initialize()
    app.run()


if __name__ == "__main__":
    main()
