# =============================================================================
# Colour Model
# =============================================================================
# The closed set of colours a terminal can show with plain SGR codes.
#
# Each colour carries two codes:
#   - Foreground: 30-37 (normal) and 90-97 (bright)
#   - Background: 40-47 (normal) and 100-107 (bright)
#
# "Transparent" is not a colour. Drawing operations accept `None` in place
# of a colour to mean "skip this pass"; the framebuffer never stores it.
# =============================================================================

from enum import Enum


class UnknownColorError(ValueError):
    """Raised when a colour name from outside the program isn't recognized."""
    pass


class Color(Enum):
    """
    The 16 named terminal colours.

    The member value is the `(foreground, background)` SGR code pair, so
    the codes travel with the colour and no lookup table is needed.

    Example:
        >>> Color.RED.fg
        31
        >>> Color.BRIGHT_BLUE.bg
        104
    """
    BLACK = (30, 40)
    RED = (31, 41)
    GREEN = (32, 42)
    YELLOW = (33, 43)
    BLUE = (34, 44)
    MAGENTA = (35, 45)
    CYAN = (36, 46)
    WHITE = (37, 47)
    BRIGHT_BLACK = (90, 100)
    BRIGHT_RED = (91, 101)
    BRIGHT_GREEN = (92, 102)
    BRIGHT_YELLOW = (93, 103)
    BRIGHT_BLUE = (94, 104)
    BRIGHT_MAGENTA = (95, 105)
    BRIGHT_CYAN = (96, 106)
    BRIGHT_WHITE = (97, 107)

    @property
    def fg(self) -> int:
        """SGR code that sets this colour as the foreground."""
        return self.value[0]

    @property
    def bg(self) -> int:
        """SGR code that sets this colour as the background."""
        return self.value[1]

    @property
    def label(self) -> str:
        """Lower-case name as users type it (e.g. "bright_red")."""
        return self.name.lower()

    @classmethod
    def parse(cls, name: str) -> "Color":
        """
        Look up a colour by name.

        Matching is case-insensitive and accepts "-" or spaces in place
        of "_", so "Bright Red", "bright-red" and "BRIGHT_RED" all work.

        Args:
            name: Colour name from user input or a config file.

        Returns:
            The matching Color.

        Raises:
            UnknownColorError: If no colour has that name.
        """
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise UnknownColorError(f"Unknown colour: {name!r}") from None

    def __str__(self) -> str:
        return self.label


# A drawing colour: either paint with a Color, or None to skip that pass.
DrawColor = Color | None

# Names that mean "no colour" when parsing user input
TRANSPARENT_NAMES = frozenset({"", "none", "transparent"})


def parse_draw_color(value: "str | Color | None") -> DrawColor:
    """
    Convert an external colour argument into a DrawColor.

    Accepts a Color (returned as-is), None, or a name. The names "none"
    and "transparent" map to None.

    Raises:
        UnknownColorError: If a name isn't a known colour, or value is
                           neither a name nor a Color.
    """
    if value is None or isinstance(value, Color):
        return value
    if not isinstance(value, str):
        raise UnknownColorError(f"Not a colour: {value!r}")
    if value.strip().lower() in TRANSPARENT_NAMES:
        return None
    return Color.parse(value)


def color_names() -> list[str]:
    """All colour names, in definition order."""
    return [color.label for color in Color]


# =============================================================================
# Fractal Palette
# =============================================================================
# Ordered from the "inside" colour outwards. Index 0 is reserved for points
# that never escape; indices 1..N-1 cycle over escaping iteration counts.

FRACTAL_PALETTE: tuple[Color, ...] = (
    Color.BLACK,
    Color.BLUE,
    Color.BRIGHT_BLUE,
    Color.CYAN,
    Color.BRIGHT_CYAN,
    Color.GREEN,
    Color.BRIGHT_GREEN,
    Color.YELLOW,
    Color.BRIGHT_YELLOW,
    Color.RED,
    Color.BRIGHT_RED,
    Color.MAGENTA,
    Color.BRIGHT_MAGENTA,
    Color.WHITE,
    Color.BRIGHT_WHITE,
)
