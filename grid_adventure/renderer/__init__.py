"""Rendering subpackage.

Turns immutable ``State`` snapshots into something a front-end can show:

* :mod:`grid_adventure.renderer.grid` draws the board and player token with
  NumPy + Pillow.
* :mod:`grid_adventure.renderer.chat` turns the transcript into styled,
  escaped HTML.

Nothing here feeds back into game logic.
"""

from .chat import CHAT_CSS_CLASSES, render_chat_html, render_chat_line
from .grid import DEFAULT_RESOLUTION, GridPalette, GridRenderer, is_loadable_image

__all__ = [
    "CHAT_CSS_CLASSES",
    "DEFAULT_RESOLUTION",
    "GridPalette",
    "GridRenderer",
    "is_loadable_image",
    "render_chat_html",
    "render_chat_line",
]
