from __future__ import annotations

import tkinter as tk
from collections.abc import Callable

from pyrunner.logger import get_logger

log = get_logger("loop")


class GameLoop:
    """
    One simulation tick plus one render per callback. There is no wall-clock
    timestep: the tick rate is the callback rate.
    """

    def __init__(
        self,
        *,
        root: tk.Tk,
        tick_fn: Callable[[], None],
        render_fn: Callable[[], None],
        fps: int = 60,
    ) -> None:
        self._root = root
        self._tick_fn = tick_fn
        self._render_fn = render_fn
        self._target_ms = max(1, int(1000 / max(1, fps)))

        self._running = False
        self._after_id: str | None = None

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Window closed before the pending frame could be cancelled.
                pass
            finally:
                self._after_id = None

    def _schedule_next(self) -> None:
        self._after_id = self._root.after(self._target_ms, self._frame)

    def _frame(self) -> None:
        if not self._running:
            return

        try:
            self._tick_fn()
            self._render_fn()
        except Exception:
            # Fail fast rather than keep ticking a corrupt state.
            log.exception("frame failed, stopping loop")
            self.stop()
            raise

        self._schedule_next()
