from __future__ import annotations

import tkinter as tk

from pyrunner.app.game_loop import GameLoop
from pyrunner.app.session import GameSession
from pyrunner.config import AppConfig
from pyrunner.domain.rng import make_rng
from pyrunner.domain.world import World
from pyrunner.infra.audio import build_cue_player
from pyrunner.infra.sprite_sheet import try_load_sprite_sheet
from pyrunner.logger import get_logger
from pyrunner.ui.input_mapper import TkInputMapper
from pyrunner.ui.tk_canvas_view import TkCanvasView

log = get_logger("app")


class GameApp:
    def __init__(self, config: AppConfig) -> None:
        self.config = config
        sim = config.simulation()

        self.root = tk.Tk()
        self.root.title("Runner")
        self.root.resizable(False, False)

        self.world = World(sim, make_rng(config.seed))
        audio = build_cue_player(config.assets_dir / "sfx", volume=config.volume, mute=config.mute)
        self.session = GameSession(self.world, audio)

        self.view = TkCanvasView(
            self.root,
            width=config.width,
            height=config.height,
            ground_y=sim.ground_y,
            sheet=try_load_sprite_sheet(self.root, config.assets_dir),
        )

        self.input = TkInputMapper(
            self.root,
            on_jump=self.session.jump,
            on_reset=self.session.reset,
            on_pointer=self.session.pointer,
            on_gesture=self.session.unlock_audio,
        )

        self.loop = GameLoop(
            root=self.root,
            tick_fn=self.session.tick,
            render_fn=self._render,
            fps=config.fps,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        log.info("starting (seed=%s, %dx%d @ %d fps)", self.config.seed, self.config.width,
                 self.config.height, self.config.fps)
        self.loop.start()
        self.root.mainloop()

    def _render(self) -> None:
        self.view.render_game(self.session.state)

    def _on_close(self) -> None:
        self.loop.stop()
        self.root.destroy()
