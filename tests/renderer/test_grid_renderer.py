import pytest
from pathlib import Path

from grid_adventure.components import Position
from grid_adventure.renderer import GridPalette, GridRenderer, is_loadable_image
from tests.test_utils import make_state


PALETTE = GridPalette()


def test_image_size_matches_grid() -> None:
    renderer = GridRenderer(resolution=100)
    assert renderer.render(make_state()).size == (100, 100)
    assert renderer.render(make_state(width=10, height=5)).size == (100, 50)


def test_cell_size_never_zero() -> None:
    assert GridRenderer(resolution=5).cell_size(10, 10) == 1


@pytest.mark.parametrize("pos", [(0, 0), (3, 7), (9, 9)])
def test_token_drawn_at_player_cell(pos: tuple[int, int]) -> None:
    renderer = GridRenderer(resolution=100)
    img = renderer.render(make_state(pos=pos))
    x, y = pos
    center = (x * 10 + 5, y * 10 + 5)
    corner = (x * 10 + 1, y * 10 + 1)
    assert img.getpixel(center) == PALETTE.token
    assert img.getpixel(corner) == PALETTE.player_cell


def test_empty_cells_and_borders() -> None:
    img = GridRenderer(resolution=100).render(make_state(pos=(0, 0)))
    assert img.getpixel((35, 35)) == PALETTE.background
    assert img.getpixel((30, 35)) == PALETTE.border
    assert img.getpixel((99, 99)) == PALETTE.border


def test_render_does_not_share_pixels_between_calls() -> None:
    renderer = GridRenderer(resolution=100)
    first = renderer.render(make_state(pos=(0, 0)))
    renderer.render(make_state(pos=(5, 5)))
    assert first.getpixel((55, 55)) == PALETTE.background


def test_cell_box() -> None:
    renderer = GridRenderer(resolution=100)
    assert renderer.cell_box(Position(2, 1), 10) == (21, 11, 28, 18)


def test_placeholder_portrait() -> None:
    img = GridRenderer().render_portrait(size=60)
    assert img.size == (60, 60)
    assert img.getpixel((30, 30)) == PALETTE.token
    assert img.getpixel((0, 0)) == PALETTE.background


def test_portrait_from_file(tmp_path: Path) -> None:
    from PIL import Image

    path = tmp_path / "player.png"
    Image.new("RGB", (10, 10), (255, 0, 0)).save(path)
    img = GridRenderer().render_portrait(size=40, image_path=str(path))
    assert img.size == (40, 40)
    assert img.mode == "RGBA"
    assert img.getpixel((20, 20)) == (255, 0, 0, 255)


def test_is_loadable_image(tmp_path: Path) -> None:
    from PIL import Image

    good = tmp_path / "player.png"
    Image.new("RGB", (4, 4), (0, 255, 0)).save(good)
    not_image = tmp_path / "notes.png"
    not_image.write_text("not an image")

    assert is_loadable_image(str(good))
    assert not is_loadable_image(str(not_image))
    assert not is_loadable_image(str(tmp_path / "missing.png"))
    assert not is_loadable_image(str(tmp_path))
