"""Parsing of ``.cub`` scene descriptions.

A scene file names four wall textures (``NO``, ``SO``, ``WE``, ``EA``),
a floor colour (``F``) and a ceiling colour (``C``), followed by the
map itself. The map is everything after the last blank line of the file.

Each element that is consumed is masked with ``#`` characters, so later
searches cannot pick it up again. The helpers therefore return the
masked text next to the value they found.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

MASK = "#"
EXTENSION = ".cub"
_BLANKS = " \t"
_COLOR_SEPARATORS = ", \t"


class ConfigError(Exception):
    """Raised when a scene file cannot be opened or is malformed.

    ``text`` holds the file contents when the file was read before the
    problem was found, and is ``None`` otherwise.
    """

    def __init__(self, message: str, text: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.text = text


@dataclass(frozen=True)
class MapConfig:
    """Textures, colours and raw map read from a scene file."""

    north: str
    south: str
    west: str
    east: str
    floor: int
    ceiling: int
    map: Optional[str]
    source: str
    masked: str


def _mask(text: str, start: int, end: int) -> str:
    return text[:start] + MASK * (end - start) + text[end:]


def _skip(text: str, pos: int, chars: str) -> int:
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def _digits(text: str, pos: int) -> Tuple[int, int]:
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return value, pos


def extract_color(text: str, start: int) -> Tuple[int, int]:
    """Read an ``R,G,B`` triple beginning at *start*.

    Components are runs of digits separated by commas, spaces or tabs;
    a missing component counts as 0. Returns the packed ``0xRRGGBB``
    value and the index just past the last component read. Raises
    ``ConfigError`` if any component exceeds 255.
    """
    components = []
    pos = start
    for index in range(3):
        if index:
            pos = _skip(text, pos, _COLOR_SEPARATORS)
        value, pos = _digits(text, pos)
        components.append(value)
    red, green, blue = components
    if red > 255 or green > 255 or blue > 255:
        raise ConfigError("Invalid map")
    return (red << 16) | (green << 8) | blue, pos


def get_texture(text: str, key: str) -> Tuple[Optional[str], str]:
    """Find the texture line introduced by *key*.

    Returns the path (the rest of the line after blanks) and the text
    with the whole element masked, or ``(None, text)`` if *key* is absent.
    """
    found = text.find(key)
    if found < 0:
        return None, text
    pos = _skip(text, found + len(key), _BLANKS)
    end = text.find("\n", pos)
    if end < 0:
        end = len(text)
    return text[pos:end], _mask(text, found, end)


def get_color(text: str, key: str) -> Tuple[Optional[int], str]:
    """Find the colour element introduced by *key*.

    Returns the packed colour and the text with the element masked, or
    ``(None, text)`` if *key* is absent. Raises ``ConfigError`` on an
    out-of-range component.
    """
    found = text.find(key)
    if found < 0:
        return None, text
    pos = min(found + 2, len(text))
    pos = _skip(text, pos, _BLANKS)
    color, end = extract_color(text, pos)
    return color, _mask(text, found, end)


def get_map(text: str) -> Tuple[Optional[str], str]:
    """Take the map: everything after the last blank line.

    Trailing newlines at the very end of the file do not count as a
    blank line. Returns the map and the text with it masked, or
    ``(None, text)`` when there is no blank line to separate it.
    """
    length = len(text)
    pos = length
    while pos > 0 and (pos == length or text[pos] == "\n"):
        pos -= 1
    while pos > 0:
        if text[pos] == "\n" and text[pos - 1] == "\n":
            pos += 1
            break
        pos -= 1
    else:
        return None, text
    return text[pos:], _mask(text, pos, length)


def parse_config(text: str) -> MapConfig:
    """Parse the contents of a scene file.

    Raises ``ConfigError`` when a colour is missing or out of range, or
    when any of the six elements is missing.
    """
    masked = text
    north, masked = get_texture(masked, "NO")
    south, masked = get_texture(masked, "SO")
    west, masked = get_texture(masked, "WE")
    east, masked = get_texture(masked, "EA")
    try:
        floor, masked = get_color(masked, "F")
        if floor is None:
            raise ConfigError("Invalid map")
        ceiling, masked = get_color(masked, "C")
        if ceiling is None:
            raise ConfigError("Invalid map")
    except ConfigError as error:
        raise ConfigError(error.message, text) from None
    if north is None or south is None or west is None or east is None:
        raise ConfigError("Invalid map", text)
    tmp_map, masked = get_map(masked)
    return MapConfig(
        north=north,
        south=south,
        west=west,
        east=east,
        floor=floor,
        ceiling=ceiling,
        map=tmp_map,
        source=text,
        masked=masked,
    )


def read_config(path: Union[str, Path]) -> MapConfig:
    """Read and parse the scene file at *path*, which must end in ``.cub``."""
    name = str(path)
    if len(name) < len(EXTENSION) or not name.endswith(EXTENSION):
        raise ConfigError("Invalid Map")
    try:
        with open(name, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        raise ConfigError("Invalid Map") from None
    return parse_config(text)