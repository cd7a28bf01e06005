"""Reading XPM pixmaps into in-memory images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from fractol.colornames import lookup_color
from fractol.image import Image
from fractol.wordtab import find_unquoted, split_words

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63

_INT = re.compile(r"\s*[+-]?\d+")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data is malformed or incomplete."""


def _atoi(word: str) -> int:
    match = _INT.match(word)
    return int(match.group()) if match else 0


def _hex_prefix(text: str) -> int:
    match = _HEX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if sign == "-" else value


def strip_comments(text: str) -> str:
    """Blank out C-style comments that are not inside double quotes.

    Comments are replaced by spaces so that the text keeps its length. A
    ``//`` comment is blanked up to and including its newline.
    """
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (begin := find_unquoted(text, opener)) != -1:
            end = text.find(closer, begin + len(opener))
            stop = len(text) if end == -1 else end + len(closer)
            text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn an XPM colour specification into 0xRRGGBB.

    ``#`` introduces a hexadecimal value. Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up as a colour name; "None"
    gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        return _hex_prefix(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def xpm_from_lines(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour lines, pixel rows."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError(f"header needs four values, got {len(header)}")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values {header[:4]}")

    # One or two characters per pixel: a later definition replaces an
    # earlier one. Wider keys keep the first definition.
    later_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        key = line[:cpp]
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], end)
        if later_wins or key not in palette:
            palette[key] = rgb

    image = Image(width, height)
    for y in range(height):
        row = next_line("pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = palette.get(row[x * cpp : (x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1 : end]
        pos = end + 1


def parse_xpm_text(text: str) -> Image:
    """Parse the text of an XPM file."""
    return xpm_from_lines(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> Image:
    """Read and parse an XPM file."""
    with open(path, encoding="latin-1") as handle:
        return parse_xpm_text(handle.read())