import pytest
from PIL import Image

from termglyph.converter import image_to_ascii, join_rows
from termglyph.errors import DecodeError, InputValidationError
from termglyph.model import BrightnessTable
from termglyph.sampler import BrightnessEngine


def make_engine(entries=None, invert=False, stretch=False):
    """Build a BrightnessEngine with known glyph brightnesses for testing."""
    if entries is None:
        entries = ((" ", 0), ("#", 255))
    return BrightnessEngine(BrightnessTable(entries=tuple(entries)), invert=invert, stretch=stretch)


def test_solid_white_maps_to_brightest():
    result = image_to_ascii(Image.new("L", (100, 50), 255), make_engine(), terminal_width=40)
    assert result == "#####\n#####"


def test_solid_black_maps_to_darkest():
    result = image_to_ascii(Image.new("L", (100, 50), 0), make_engine(), terminal_width=40)
    assert result == "     \n     "


def test_empty_table_renders_blanks():
    engine = make_engine(entries=())
    result = image_to_ascii(Image.new("L", (100, 50), 200), engine, terminal_width=40)
    assert result == "     \n     "


def test_output_dimensions():
    result = image_to_ascii(Image.new("L", (1000, 1000), 128), make_engine(), terminal_width=40)
    lines = result.split("\n")
    assert len(lines) == 20
    assert all(len(line) == 40 for line in lines)


def test_gradient_produces_varying_characters():
    img = Image.new("L", (20, 20), 0)
    img.paste(255, (10, 0, 20, 20))
    result = image_to_ascii(img, make_engine(), terminal_width=80)
    assert result == " #"


def test_invert():
    result = image_to_ascii(Image.new("L", (100, 50), 255), make_engine(invert=True), terminal_width=40)
    assert result == "     \n     "


def test_stretch_spreads_brightness():
    img = Image.new("L", (100, 50), 100)
    img.paste(150, (50, 0, 100, 50))
    entries = (("a", 0), ("b", 100), ("c", 150), ("d", 255))

    plain = image_to_ascii(img, make_engine(entries), terminal_width=40)
    stretched = image_to_ascii(img, make_engine(entries, stretch=True), terminal_width=40)

    assert plain == "bbbcc\nbbbcc"
    assert stretched == "aacdd\naacdd"


def test_accepts_rgb_image():
    result = image_to_ascii(Image.new("RGB", (100, 50), (255, 255, 255)), make_engine(), terminal_width=40)
    assert result == "#####\n#####"


def test_accepts_file_path(tmp_path):
    path = tmp_path / "test.png"
    Image.new("L", (100, 50), 255).save(path)
    assert image_to_ascii(path, make_engine(), terminal_width=40) == "#####\n#####"


def test_missing_file():
    with pytest.raises(InputValidationError, match="File not found"):
        image_to_ascii("/nonexistent/image.png", make_engine(), terminal_width=40)


def test_corrupt_file(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"definitely not a png")
    with pytest.raises(DecodeError):
        image_to_ascii(path, make_engine(), terminal_width=40)


def test_colour_output_wraps_each_character():
    img = Image.new("RGB", (100, 50), (255, 0, 0))
    result = image_to_ascii(img, make_engine(), terminal_width=40, colour=True)
    lines = result.split("\n")
    assert len(lines) == 2
    for line in lines:
        assert line.count("\033[38;2;") == 5
        assert line.count("\033[0m") == 5
    # Luma of pure red is 76, closer to black than white
    assert lines[0].startswith("\033[38;2;255;0;0m \033[0m")


def test_colour_averages_each_block():
    img = Image.new("RGB", (20, 20), (0, 0, 0))
    img.paste((200, 100, 50), (10, 0, 20, 20))
    result = image_to_ascii(img, make_engine(), terminal_width=80, colour=True)
    assert result == "\033[38;2;0;0;0m \033[0m\033[38;2;200;100;50m \033[0m"


def test_colour_false_has_no_escapes():
    img = Image.new("RGB", (100, 50), (255, 0, 0))
    assert "\033" not in image_to_ascii(img, make_engine(), terminal_width=40)


def test_join_rows_breaks_after_each_full_row():
    assert join_rows(list("abcdefghijklmno"), 5) == "abcde\nfghij\nklmno"

    result = join_rows(["x"] * 12, 5)
    assert result.count("\n") == 2
    assert [i for i, c in enumerate(result.replace("\n", "|")) if c == "|"] == [5, 11]


def test_join_rows_single_row_has_no_break():
    assert join_rows(list("abc"), 3) == "abc"
    assert join_rows(list("a"), 1) == "a"


def test_stretch_maps_brightest_blocks_to_brightest_glyph():
    img = Image.new("L", (100, 50), 0)
    img.paste(25, (50, 0, 100, 50))
    engine = make_engine((("a", 0), ("y", 254), ("z", 255)), stretch=True)
    assert image_to_ascii(img, engine, terminal_width=40) == "aaazz\naaazz"


def test_invert_and_stretch_leave_colours_alone():
    img = Image.new("RGB", (100, 50), (200, 100, 50))
    engine = make_engine(invert=True, stretch=True)
    result = image_to_ascii(img, engine, terminal_width=40, colour=True)
    unit = "\033[38;2;200;100;50m#\033[0m"
    assert result == "\n".join([unit * 5] * 2)
