from .canvas import blend_mask, draw_pixel, new_canvas
from .draw_lines import draw_polyline
from .draw_shapes import fill_polygon
from .draw_text import draw_text, font_ascent, load_font, text_size
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "blend_mask",
    "draw_pixel",
    "draw_polyline",
    "draw_text",
    "fill_polygon",
    "font_ascent",
    "load_font",
    "new_canvas",
    "text_size",
]
