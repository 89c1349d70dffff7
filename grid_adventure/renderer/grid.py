"""Board renderer.

The board background (cell fills and border lines) is built as a NumPy RGBA
array, then the round player token is drawn on top with ``ImageDraw``. Cells
are square; the image is ``cell * width`` by ``cell * height`` pixels where
``cell = resolution // max(width, height)``.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from grid_adventure.components import Position
from grid_adventure.state import State


DEFAULT_RESOLUTION = 480
DEFAULT_BORDER = 1
TOKEN_INSET = 1 / 6

RGBA = Tuple[int, int, int, int]
UInt8Array = npt.NDArray[np.uint8]


def is_loadable_image(path: str) -> bool:
    """Return True if Pillow can open and decode ``path``."""
    try:
        with Image.open(path) as img:
            img.load()
    except OSError:
        # missing, not an image, or truncated
        return False
    return True


@dataclass(frozen=True)
class GridPalette:
    background: RGBA = (0, 0, 0, 255)
    border: RGBA = (64, 64, 64, 255)
    player_cell: RGBA = (38, 38, 38, 255)
    token: RGBA = (59, 130, 246, 255)


@lru_cache(maxsize=8)
def _board_array(
    width: int, height: int, cell: int, border: int, palette: GridPalette
) -> UInt8Array:
    """Empty board: every cell filled, borders on all four cell edges."""
    img: UInt8Array = np.empty((height * cell, width * cell, 4), dtype=np.uint8)
    img[:, :] = palette.border
    inner = cell - 2 * border
    if inner <= 0:
        return img
    for row in range(height):
        top = row * cell + border
        for col in range(width):
            left = col * cell + border
            img[top : top + inner, left : left + inner] = palette.background
    img.setflags(write=False)
    return img


@dataclass
class GridRenderer:
    """Draws a :class:`State` as a Pillow image.

    Attributes:
        resolution: Target size in pixels of the longer board side.
        border: Border line width in pixels around each cell.
        palette: Colors used for the board and token.
    """

    resolution: int = DEFAULT_RESOLUTION
    border: int = DEFAULT_BORDER
    palette: GridPalette = field(default_factory=GridPalette)

    def cell_size(self, width: int, height: int) -> int:
        return max(1, self.resolution // max(width, height))

    def cell_box(self, pos: Position, cell: int) -> Tuple[int, int, int, int]:
        """Inclusive pixel box of a cell's interior."""
        left = pos.x * cell + self.border
        top = pos.y * cell + self.border
        right = (pos.x + 1) * cell - self.border - 1
        bottom = (pos.y + 1) * cell - self.border - 1
        return left, top, right, bottom

    def render(self, state: State) -> Image.Image:
        cell = self.cell_size(state.width, state.height)
        board = _board_array(state.width, state.height, cell, self.border, self.palette)
        img = Image.fromarray(board.copy())

        draw = ImageDraw.Draw(img)
        box = self.cell_box(state.position, cell)
        draw.rectangle(box, fill=self.palette.player_cell)

        inset = int(cell * TOKEN_INSET)
        left, top, right, bottom = box
        if right - left > 2 * inset:
            draw.ellipse(
                (left + inset, top + inset, right - inset, bottom - inset),
                fill=self.palette.token,
            )
        return img

    def render_portrait(
        self, size: int = 300, image_path: Optional[str] = None
    ) -> Image.Image:
        """Decorative player picture.

        Loads ``image_path`` when given, otherwise draws a large token on the
        board background color.
        """
        if image_path is not None:
            with Image.open(image_path) as loaded:
                return loaded.convert("RGBA").resize((size, size))

        img = Image.new("RGBA", (size, size), self.palette.background)
        draw = ImageDraw.Draw(img)
        inset = int(size * TOKEN_INSET)
        draw.ellipse(
            (inset, inset, size - inset - 1, size - inset - 1),
            fill=self.palette.token,
        )
        return img
