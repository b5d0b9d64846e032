"""FIGlet fonts for the big timer digits.

A built-in font covers what the timer needs (digits, ``:`` and ``!``). Any
FIGlet ``.flf`` font can be loaded instead; see
http://www.jave.de/figlet/figfont.html for the format.
"""

from __future__ import annotations

from pathlib import Path

from solanum.errors import FontError
from solanum.models.duration import to_hhmmss

# fmt: off
_BUILTIN_GLYPHS: dict[str, list[str]] = {
    ":": [
        "   ",
        " _ ",
        "(_)",
        " _ ",
        "(_)",
    ],
    "!": [
        " _ ",
        "| |",
        "| |",
        "|_|",
        "(_)",
    ],
    "0": [
        "  ___  ",
        " / _ \\ ",
        "| | | |",
        "| |_| |",
        " \\___/ ",
    ],
    "1": [
        " _ ",
        "/ |",
        "| |",
        "| |",
        "|_|",
    ],
    "2": [
        " ____  ",
        "|___ \\ ",
        "  __) |",
        " / __/ ",
        "|_____|",
    ],
    "3": [
        " _____ ",
        "|___ / ",
        "  |_ \\ ",
        " ___) |",
        "|____/ ",
    ],
    "4": [
        " _  _   ",
        "| || |  ",
        "| || |_ ",
        "|__   _|",
        "   |_|  ",
    ],
    "5": [
        " ____  ",
        "| ___| ",
        "|___ \\ ",
        " ___) |",
        "|____/ ",
    ],
    "6": [
        "  __   ",
        " / /_  ",
        "| '_ \\ ",
        "| (_) |",
        " \\___/ ",
    ],
    "7": [
        " _____ ",
        "|___  |",
        "   / / ",
        "  / /  ",
        " /_/   ",
    ],
    "8": [
        "  ___  ",
        " ( _ ) ",
        " / _ \\ ",
        "| (_) |",
        " \\___/ ",
    ],
    "9": [
        "  ___  ",
        " / _ \\ ",
        "| (_) |",
        " \\__, |",
        "   /_/ ",
    ],
}
# fmt: on

# Every FIGlet font defines these, in this order.
FLF_REQUIRED_CHARS = [chr(code) for code in range(32, 127)]
FLF_SIGNATURE = "flf2a"


class Font:
    """Maps characters to equally tall blocks of text lines."""

    def __init__(self, glyphs: dict[str, list[str]]):
        heights = {len(lines) for lines in glyphs.values()}
        if len(heights) != 1:
            raise FontError("all glyphs of a font must have the same height")
        self.height = heights.pop()
        self._glyphs = {char: _pad(lines) for char, lines in glyphs.items()}

    @classmethod
    def default(cls) -> Font:
        return cls(_BUILTIN_GLYPHS)

    @classmethod
    def from_flf(cls, path: Path) -> Font:
        """Parse a FIGlet font file.

        Raises:
            FontError: if ``path`` is not a readable, well formed ``.flf`` file.
        """
        path = Path(path)
        if not path.is_file():
            raise FontError(f"provided path `{path}` is not a file")
        if path.suffix != ".flf":
            raise FontError(
                f"provided path `{path}` does not match FIGlet font file extension `.flf`"
            )
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except UnicodeDecodeError as exc:
            raise FontError("FIGlet font file contains invalid, non-UTF8 text") from exc
        except OSError as exc:
            raise FontError(f"unable to read `{path}`: {exc}") from exc

        return cls(_parse_flf(lines, path))

    def render(self, text: str) -> str:
        """Render ``text`` as multi-line art."""
        rows = [""] * self.height
        for char in text:
            glyph = self._glyphs.get(char)
            if glyph is None:
                raise FontError(f"unsupported FIGlet character `{char}`")
            for i, line in enumerate(glyph):
                rows[i] += line
        return "\n".join(rows)

    def render_duration(self, seconds: int) -> str:
        """Render a duration as ``HH:MM:SS`` art."""
        return self.render(to_hhmmss(seconds))


def _pad(lines: list[str]) -> list[str]:
    width = max(len(line) for line in lines)
    return [line.ljust(width) for line in lines]


def _parse_flf(lines: list[str], path: Path) -> dict[str, list[str]]:
    invalid = FontError(f"provided path `{path}` is not a valid FIGlet font file")

    if not lines or not lines[0].startswith(FLF_SIGNATURE):
        raise invalid

    # Header: flf2a<hardblank> height baseline max_length old_layout comment_lines ...
    header = lines[0][len(FLF_SIGNATURE):]
    fields = header[1:].split()
    if not header or len(fields) < 5:
        raise invalid
    hard_blank = header[0]
    try:
        height = int(fields[0])
        comment_lines = int(fields[4])
    except ValueError:
        raise invalid from None
    if height <= 0 or comment_lines < 0:
        raise invalid

    body = lines[1 + comment_lines:]
    glyphs: dict[str, list[str]] = {}
    for index, char in enumerate(FLF_REQUIRED_CHARS):
        block = body[index * height:(index + 1) * height]
        if len(block) < height or not all(block):
            raise invalid
        endmark = block[0][-1]
        glyphs[char] = [
            line.rstrip(endmark).replace(hard_blank, " ") for line in block
        ]
    return glyphs
