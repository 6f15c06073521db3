from __future__ import annotations

import tkinter as tk
from fractions import Fraction
from pathlib import Path

from pyrunner.domain.animation import frame_size, source_rect
from pyrunner.infra.exceptions import AssetLoadError
from pyrunner.logger import get_logger

log = get_logger("sprites")

SHEET_FILE = "character_sheet.png"

# Upper bound on the intermediate zoom, so a big frame is never blown up to huge sizes.
MAX_ZOOM = 16


def scale_factors(src: int, dst: int) -> tuple[int, int]:
    """
    (zoom, subsample) pair with src * zoom // subsample as close to dst as Tk
    allows. Exact whenever dst/src reduces to a numerator <= MAX_ZOOM.
    """
    if src <= 0 or dst <= 0:
        return 1, 1
    # src/dst = subsample/zoom, with the zoom kept small.
    shrink = Fraction(src, dst).limit_denominator(MAX_ZOOM)
    return shrink.denominator, max(1, shrink.numerator)


class SpriteSheet:
    """
    2x3 character sheet. Frames are cropped once per (index, size) and cached,
    since Tk keeps drawing from the same PhotoImage objects.
    """

    def __init__(self, root: tk.Misc, image: tk.PhotoImage) -> None:
        self._root = root
        self._image = image
        self.frame_w, self.frame_h = frame_size(image.width(), image.height())
        self._cache: dict[tuple[int, int, int], tk.PhotoImage] = {}

    def frame(self, index: int, target_w: int, target_h: int) -> tk.PhotoImage:
        key = (index, target_w, target_h)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        sx, sy, fw, fh = source_rect(index, self.frame_w, self.frame_h)
        crop = tk.PhotoImage(master=self._root)
        crop.tk.call(crop, "copy", self._image, "-from", sx, sy, sx + fw, sy + fh)

        zoom_x, sub_x = scale_factors(fw, target_w)
        zoom_y, sub_y = scale_factors(fh, target_h)
        if (zoom_x, zoom_y) != (1, 1):
            crop = crop.zoom(zoom_x, zoom_y)
        if (sub_x, sub_y) != (1, 1):
            crop = crop.subsample(sub_x, sub_y)

        self._cache[key] = crop
        return crop


def load_sprite_sheet(root: tk.Misc, assets_dir: Path) -> SpriteSheet:
    path = assets_dir / SHEET_FILE
    if not path.exists():
        raise AssetLoadError(f"Sprite sheet not found: {path}")
    try:
        image = tk.PhotoImage(master=root, file=str(path))
    except tk.TclError as e:
        raise AssetLoadError(f"Failed to load sprite sheet {path}: {e}") from e

    if image.width() < 2 or image.height() < 3:
        raise AssetLoadError(f"Sprite sheet {path} is too small for a 2x3 grid.")
    return SpriteSheet(root, image)


def try_load_sprite_sheet(root: tk.Misc, assets_dir: Path) -> SpriteSheet | None:
    """None means the player is drawn as a plain rectangle."""
    try:
        sheet = load_sprite_sheet(root, assets_dir)
    except AssetLoadError as e:
        log.warning("%s; drawing the player as a rectangle", e)
        return None
    log.info("sprite sheet ready: frame %dx%d", sheet.frame_w, sheet.frame_h)
    return sheet
