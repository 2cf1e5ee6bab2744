from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from PIL import Image, ImageDraw

from labelchart.raster.canvas import RGBA, blend_mask


def fill_polygon(dst: np.ndarray, points: Sequence[tuple[float, float]], color: RGBA) -> None:
    """Fill the implicitly closed polygon through ``points``."""
    if len(points) < 3:
        return
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    x0 = max(0, int(np.floor(min(xs))))
    y0 = max(0, int(np.floor(min(ys))))
    x1 = min(dst.shape[1], int(np.ceil(max(xs))) + 1)
    y1 = min(dst.shape[0], int(np.ceil(max(ys))) + 1)
    if x1 <= x0 or y1 <= y0:
        return
    image = Image.new("L", (x1 - x0, y1 - y0), 0)
    draw = ImageDraw.Draw(image)
    draw.polygon([(x - x0, y - y0) for x, y in points], fill=255)
    blend_mask(dst, x0, y0, np.asarray(image, dtype=np.uint8), color)
