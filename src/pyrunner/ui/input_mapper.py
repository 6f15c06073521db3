from __future__ import annotations

import tkinter as tk
from collections.abc import Callable


class TkInputMapper:
    """
    Turns raw Tk events into commands. Commands run as soon as the event
    arrives; nothing is queued for the next tick.
    """

    def __init__(
        self,
        root: tk.Tk,
        *,
        on_jump: Callable[[], None],
        on_reset: Callable[[], None],
        on_pointer: Callable[[], None],
        on_gesture: Callable[[], None],
    ) -> None:
        self._on_jump = on_jump
        self._on_reset = on_reset
        self._on_pointer = on_pointer
        self._on_gesture = on_gesture

        root.bind("<KeyPress-space>", self._on_space)
        root.bind("<KeyPress-r>", self._on_r)
        root.bind("<KeyPress-R>", self._on_r)
        root.bind("<KeyPress>", self._on_any_key)
        root.bind("<ButtonPress-1>", self._on_click)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_any_key(self, _evt: tk.Event) -> None:
        self._on_gesture()

    def _on_space(self, _evt: tk.Event) -> None:
        self._on_gesture()
        self._on_jump()

    def _on_r(self, _evt: tk.Event) -> None:
        self._on_gesture()
        self._on_reset()

    def _on_click(self, _evt: tk.Event) -> None:
        self._on_gesture()
        self._on_pointer()
