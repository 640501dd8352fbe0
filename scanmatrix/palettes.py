"""Scanner trail palettes - six bands each, bright leading edge to blackish tail."""

from typing import NamedTuple

# Type alias for RGB tuples
Color = tuple[int, int, int]

BAND_COUNT = 6


def hex_to_rgb(value: str) -> Color:
    """Convert '#rrggbb' to an (R, G, B) tuple."""
    value = value.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb, got {value!r}")
    n = int(value, 16)
    return ((n >> 16) & 0xFF, (n >> 8) & 0xFF, n & 0xFF)


class Palette(NamedTuple):
    """A named set of trail bands, index 0 brightest."""

    name: str
    colors: tuple[Color, ...]

    @classmethod
    def from_hex(cls, name: str, *colors: str) -> "Palette":
        if len(colors) != BAND_COUNT:
            raise ValueError(f"Palette {name!r} needs {BAND_COUNT} colors, got {len(colors)}")
        return cls(name, tuple(hex_to_rgb(c) for c in colors))


PALETTES: tuple[Palette, ...] = (
    Palette.from_hex("Green", "#00ff88", "#00ee77", "#00cc55", "#008833", "#004422", "#001111"),
    Palette.from_hex("Blue", "#00bbff", "#00aaee", "#0088cc", "#005588", "#002244", "#001122"),
    Palette.from_hex("Orange", "#ffaa00", "#ee9900", "#cc7700", "#885500", "#442200", "#221100"),
    Palette.from_hex("Purple", "#aa00ff", "#9900ee", "#7700cc", "#550088", "#220044", "#110022"),
    Palette.from_hex("Cyan", "#00ffff", "#00eeee", "#00cccc", "#008888", "#004444", "#002222"),
    Palette.from_hex("Red", "#ff0066", "#ee0055", "#cc0044", "#880033", "#440022", "#220011"),
)
