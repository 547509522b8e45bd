"""Graphics module for JUMP BOI rendering."""

from jumpboi.graphics.renderer import SceneRenderer, format_hud
from jumpboi.graphics.primitives import clear, fill_rect, hline, new_buffer

__all__ = [
    # Renderer
    "SceneRenderer",
    "format_hud",
    # Primitives
    "clear",
    "fill_rect",
    "hline",
    "new_buffer",
]
