from __future__ import annotations

import tkinter as tk

from pyrunner.domain.animation import frame_index, select_pose
from pyrunner.domain.game_state import GameState
from pyrunner.domain.scoring import displayed
from pyrunner.infra.sprite_sheet import SpriteSheet

INK = "#111"
HUD_FONT = ("TkDefaultFont", 14)
TITLE_FONT = ("TkDefaultFont", 22)


class TkCanvasView:
    def __init__(
        self,
        root: tk.Misc,
        *,
        width: int,
        height: int,
        ground_y: float,
        sheet: SpriteSheet | None = None,
    ) -> None:
        self._w = width
        self._h = height
        self._ground_y = ground_y
        self._sheet = sheet

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, bg="#fff")
        self.canvas.pack(fill="both", expand=True)

        # Static items are created once and moved; obstacles are redrawn each frame.
        self.canvas.create_rectangle(0, ground_y, width, ground_y + 3, outline="", fill=INK)
        self._player_rect = self.canvas.create_rectangle(0, 0, 0, 0, outline="", fill=INK)
        self._player_img = self.canvas.create_image(0, 0, anchor="nw")
        self._score_id = self.canvas.create_text(20, 30, anchor="sw", text="", font=HUD_FONT, fill=INK)
        self._best_id = self.canvas.create_text(20, 55, anchor="sw", text="", font=HUD_FONT, fill=INK)
        self._over_title = self.canvas.create_text(
            width / 2, height / 2 - 10, text="Game Over", font=TITLE_FONT, fill=INK, state="hidden"
        )
        self._over_hint = self.canvas.create_text(
            width / 2, height / 2 + 25, text="Press R or Click to restart", font=HUD_FONT, fill=INK,
            state="hidden",
        )

    def render_game(self, state: GameState) -> None:
        self._render_player(state)

        self.canvas.delete("obstacle")
        for o in state.obstacles:
            self.canvas.create_rectangle(o.x, o.y, o.x + o.w, o.y + o.h, outline="", fill=INK, tags=("obstacle",))

        self.canvas.itemconfigure(self._score_id, text=f"Score: {displayed(state.score)}")
        self.canvas.itemconfigure(self._best_id, text=f"Best: {state.best}")

        overlay = "hidden" if state.running else "normal"
        self.canvas.itemconfigure(self._over_title, state=overlay)
        self.canvas.itemconfigure(self._over_hint, state=overlay)
        self.canvas.tag_raise(self._over_title)
        self.canvas.tag_raise(self._over_hint)

    def _render_player(self, state: GameState) -> None:
        p = state.player

        if self._sheet is None:
            # No sheet: plain box.
            self.canvas.itemconfigure(self._player_img, state="hidden")
            self.canvas.itemconfigure(self._player_rect, state="normal")
            self.canvas.coords(self._player_rect, p.x, p.y, p.x + p.w, p.y + p.h)
            return

        pose = select_pose(state.phase, p, self._ground_y)
        img = self._sheet.frame(frame_index(pose, state.animation), int(p.w), int(p.h))
        self.canvas.itemconfigure(self._player_rect, state="hidden")
        self.canvas.itemconfigure(self._player_img, image=img, state="normal")
        self.canvas.coords(self._player_img, p.x, p.y)
