import logging

import pytest
from PIL import Image

from commit_art import canvas
from commit_art.errors import InputError, InvalidImageShapeError, UnsupportedGlyphError


def test_from_text_hi_layout() -> None:
    """H (5 wide) + 1 spacing column + I (3 wide)."""

    grid = canvas.from_text("HI", 1)

    assert len(grid) == 7
    assert {len(row) for row in grid} == {9}
    assert [row[0] for row in grid] == [True] * 7
    assert [row[1] for row in grid] == [False, False, False, True, False, False, False]
    assert [row[5] for row in grid] == [False] * 7
    assert [row[6] for row in grid] == [True, False, False, False, False, False, True]
    assert [row[7] for row in grid] == [True] * 7


@pytest.mark.parametrize("spacing", [0, 3, 7])
def test_from_text_width_accounts_for_spacing(spacing: int) -> None:
    """Width is the sum of glyph widths plus spacing between glyphs."""

    grid = canvas.from_text("HIH", spacing)

    assert len(grid) == 7
    assert {len(row) for row in grid} == {5 + 3 + 5 + 2 * spacing}


@pytest.mark.parametrize("spacing", [-1, 8])
def test_from_text_rejects_spacing_out_of_range(spacing: int) -> None:
    """Spacing outside 0..7 is an input error, not clamped."""

    with pytest.raises(InputError, match="between 0 and 7"):
        canvas.from_text("HI", spacing)


def test_from_text_rejects_unsupported_character() -> None:
    """The error names the offending character."""

    with pytest.raises(UnsupportedGlyphError) as excinfo:
        canvas.from_text("HI@", 1)

    assert excinfo.value.char == "@"
    assert "'@'" in str(excinfo.value)
    assert isinstance(excinfo.value, InputError)


def test_from_text_rejects_empty_text() -> None:
    """Nothing to draw is an input error."""

    with pytest.raises(InputError):
        canvas.from_text("", 1)


def test_from_text_warns_when_wider_than_a_year(caplog: pytest.LogCaptureFixture) -> None:
    """Long text is allowed but reported as truncated."""

    with caplog.at_level(logging.WARNING, logger="commit_art.canvas"):
        grid = canvas.from_text("HELLO WORLD HELLO", 1)

    assert len(grid[0]) > canvas.MAX_WEEKS
    assert "only columns up to the end date" in caplog.text


def test_from_image_thresholds_dark_pixels(tmp_path) -> None:
    """Dark opaque pixels are filled, light and transparent ones are not."""

    path = tmp_path / "dots.png"
    im = Image.new("RGBA", (3, 7), (255, 255, 255, 255))
    im.putpixel((1, 2), (0, 0, 0, 255))
    im.putpixel((2, 6), (40, 40, 40, 255))
    im.putpixel((0, 0), (0, 0, 0, 0))
    im.save(path)

    grid = canvas.from_image(path)

    assert len(grid) == 7
    assert {len(row) for row in grid} == {3}
    filled = {(x, y) for y, row in enumerate(grid) for x, cell in enumerate(row) if cell}
    assert filled == {(1, 2), (2, 6)}


def test_from_image_rejects_wrong_height(tmp_path) -> None:
    """Images must be exactly 7 pixels high."""

    path = tmp_path / "tall.png"
    Image.new("L", (10, 8), 0).save(path)

    with pytest.raises(InvalidImageShapeError, match="7 pixels high"):
        canvas.from_image(path)


def test_from_image_rejects_unreadable_file(tmp_path) -> None:
    """A file that is not an image is an input error."""

    path = tmp_path / "notes.png"
    path.write_text("not an image")

    with pytest.raises(InputError, match="cannot read image"):
        canvas.from_image(path)


def test_from_image_accepts_wide_images(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    """Images wider than a year load and warn about truncation."""

    path = tmp_path / "wide.png"
    Image.new("L", (60, 7), 0).save(path)

    with caplog.at_level(logging.WARNING, logger="commit_art.canvas"):
        grid = canvas.from_image(path)

    assert {len(row) for row in grid} == {60}
    assert all(all(row) for row in grid)
    assert "60 pixels wide" in caplog.text


def test_flatten_by_columns_walks_weeks_then_weekdays() -> None:
    """Index i maps to row i % 7 and column i // 7."""

    grid = canvas.from_text("HI", 1)
    pixels = canvas.flatten_by_columns(grid)

    assert len(pixels) == 7 * 9
    for i, cell in enumerate(pixels):
        assert cell == grid[i % 7][i // 7]


def test_unflatten_reverses_flatten() -> None:
    """Rebuilding from the sequence and width gives the original canvas."""

    grid = canvas.from_text("A1?", 2)
    width = len(grid[0])

    assert canvas.unflatten_by_columns(canvas.flatten_by_columns(grid), width) == grid


def test_unflatten_rejects_wrong_length() -> None:
    """The sequence length must match 7 x width."""

    with pytest.raises(ValueError):
        canvas.unflatten_by_columns([True] * 13, 2)


def test_render_canvas() -> None:
    """Filled cells print as '#', empty ones as spaces."""

    grid = canvas.from_text("I", 0)

    assert canvas.render_canvas(grid).splitlines() == [
        "###",
        " # ",
        " # ",
        " # ",
        " # ",
        " # ",
        "###",
    ]
