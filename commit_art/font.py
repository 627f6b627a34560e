"""
7-row bitmap font used to draw text on the calendar.

Each glyph is a tuple of 7 row strings, top (Sunday) to bottom (Saturday).
'#' is a filled cell, '.' an empty one. Glyphs may differ in width but all
rows of one glyph share it.
"""

HEIGHT = 7
FILL = "#"
EMPTY = "."

GLYPHS = {
    "A": (".###.", "#...#", "#...#", "#####", "#...#", "#...#", "#...#"),
    "B": ("####.", "#...#", "#...#", "####.", "#...#", "#...#", "####."),
    "C": (".###.", "#...#", "#....", "#....", "#....", "#...#", ".###."),
    "D": ("####.", "#...#", "#...#", "#...#", "#...#", "#...#", "####."),
    "E": ("#####", "#....", "#....", "####.", "#....", "#....", "#####"),
    "F": ("#####", "#....", "#....", "####.", "#....", "#....", "#...."),
    "G": (".###.", "#...#", "#....", "#.###", "#...#", "#...#", ".###."),
    "H": ("#...#", "#...#", "#...#", "#####", "#...#", "#...#", "#...#"),
    "I": ("###", ".#.", ".#.", ".#.", ".#.", ".#.", "###"),
    "J": ("..###", "...#.", "...#.", "...#.", "#..#.", "#..#.", ".##.."),
    "K": ("#...#", "#..#.", "#.#..", "##...", "#.#..", "#..#.", "#...#"),
    "L": ("#....", "#....", "#....", "#....", "#....", "#....", "#####"),
    "M": ("#...#", "##.##", "#.#.#", "#.#.#", "#...#", "#...#", "#...#"),
    "N": ("#...#", "#...#", "##..#", "#.#.#", "#..##", "#...#", "#...#"),
    "O": (".###.", "#...#", "#...#", "#...#", "#...#", "#...#", ".###."),
    "P": ("####.", "#...#", "#...#", "####.", "#....", "#....", "#...."),
    "Q": (".###.", "#...#", "#...#", "#...#", "#.#.#", "#..#.", ".##.#"),
    "R": ("####.", "#...#", "#...#", "####.", "#.#..", "#..#.", "#...#"),
    "S": (".####", "#....", "#....", ".###.", "....#", "....#", "####."),
    "T": ("#####", "..#..", "..#..", "..#..", "..#..", "..#..", "..#.."),
    "U": ("#...#", "#...#", "#...#", "#...#", "#...#", "#...#", ".###."),
    "V": ("#...#", "#...#", "#...#", "#...#", "#...#", ".#.#.", "..#.."),
    "W": ("#...#", "#...#", "#...#", "#.#.#", "#.#.#", "#.#.#", ".#.#."),
    "X": ("#...#", "#...#", ".#.#.", "..#..", ".#.#.", "#...#", "#...#"),
    "Y": ("#...#", "#...#", ".#.#.", "..#..", "..#..", "..#..", "..#.."),
    "Z": ("#####", "....#", "...#.", "..#..", ".#...", "#....", "#####"),
    "0": (".###.", "#...#", "#..##", "#.#.#", "##..#", "#...#", ".###."),
    "1": (".#.", "##.", ".#.", ".#.", ".#.", ".#.", "###"),
    "2": (".###.", "#...#", "....#", "...#.", "..#..", ".#...", "#####"),
    "3": ("####.", "....#", "....#", ".###.", "....#", "....#", "####."),
    "4": ("...#.", "..##.", ".#.#.", "#..#.", "#####", "...#.", "...#."),
    "5": ("#####", "#....", "####.", "....#", "....#", "#...#", ".###."),
    "6": (".###.", "#....", "#....", "####.", "#...#", "#...#", ".###."),
    "7": ("#####", "....#", "...#.", "..#..", ".#...", ".#...", ".#..."),
    "8": (".###.", "#...#", "#...#", ".###.", "#...#", "#...#", ".###."),
    "9": (".###.", "#...#", "#...#", ".####", "....#", "....#", ".###."),
    " ": ("...",) * HEIGHT,
    "!": ("#", "#", "#", "#", "#", ".", "#"),
    "?": (".###.", "#...#", "....#", "...#.", "..#..", ".....", "..#.."),
    ".": (".", ".", ".", ".", ".", ".", "#"),
    ",": ("..", "..", "..", "..", "..", ".#", "#."),
    "-": ("...", "...", "...", "###", "...", "...", "..."),
    "'": ("#", "#", ".", ".", ".", ".", "."),
    ":": (".", ".", "#", ".", ".", "#", "."),
    "+": (".....", "..#..", "..#..", "#####", "..#..", "..#..", "....."),
    "♥": (".##.##.", "#######", "#######", ".#####.", "..###..", "...#...", "......."),
}

SUPPORTED_CHARACTERS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789 !?.,-':+♥"
)


def validate_font(glyphs=GLYPHS, alphabet=SUPPORTED_CHARACTERS):
    missing = sorted(alphabet - set(glyphs))
    if missing:
        raise RuntimeError(f"font is missing glyphs for {missing!r}")
    for char, rows in glyphs.items():
        if len(rows) != HEIGHT:
            raise RuntimeError(f"glyph {char!r} has {len(rows)} rows, expected {HEIGHT}")
        if len({len(row) for row in rows}) != 1 or not rows[0]:
            raise RuntimeError(f"glyph {char!r} has ragged rows")
        if set("".join(rows)) - {FILL, EMPTY}:
            raise RuntimeError(f"glyph {char!r} uses characters other than {FILL!r}/{EMPTY!r}")


def glyph(char: str) -> list:
    """
    Boolean rows for `char`, [y][x]. Lower-case letters use the upper-case
    glyph. Raises KeyError for characters outside the font.
    """
    rows = GLYPHS[char.upper()]
    return [[cell == FILL for cell in row] for row in rows]


validate_font()
