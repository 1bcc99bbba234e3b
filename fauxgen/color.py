"""Random colours."""

from __future__ import annotations

from .generator import Generator

HEX_DIGITS = "0123456789ABCDEF"

SAFE_COLOR_NAMES = tuple(
    """
    black maroon green navy olive purple teal lime
    blue silver gray yellow fuchsia aqua white
    """.split()
)

ALL_COLOR_NAMES = tuple(
    """
    AliceBlue AntiqueWhite Aqua Aquamarine Azure Beige Bisque
    Black BlanchedAlmond Blue BlueViolet Brown BurlyWood
    CadetBlue Chartreuse Chocolate Coral CornflowerBlue Cornsilk
    Crimson Cyan DarkBlue DarkCyan DarkGoldenRod DarkGray
    DarkGreen DarkKhaki DarkMagenta DarkOliveGreen Darkorange
    DarkOrchid DarkRed DarkSalmon DarkSeaGreen DarkSlateBlue
    DarkSlateGray DarkTurquoise DarkViolet DeepPink DeepSkyBlue
    DimGray DimGrey DodgerBlue FireBrick FloralWhite ForestGreen
    Fuchsia Gainsboro GhostWhite Gold GoldenRod Gray Green
    GreenYellow HoneyDew HotPink IndianRed Indigo Ivory Khaki
    Lavender LavenderBlush LawnGreen LemonChiffon LightBlue
    LightCoral LightCyan LightGoldenRodYellow LightGray LightGreen
    LightPink LightSalmon LightSeaGreen LightSkyBlue LightSlateGray
    LightSteelBlue LightYellow Lime LimeGreen Linen Magenta Maroon
    MediumAquaMarine MediumBlue MediumOrchid MediumPurple
    MediumSeaGreen MediumSlateBlue MediumSpringGreen MediumTurquoise
    MediumVioletRed MidnightBlue MintCream MistyRose Moccasin
    NavajoWhite Navy OldLace Olive OliveDrab Orange OrangeRed
    Orchid PaleGoldenRod PaleGreen PaleTurquoise PaleVioletRed
    PapayaWhip PeachPuff Peru Pink Plum PowderBlue Purple Red
    RosyBrown RoyalBlue SaddleBrown Salmon SandyBrown SeaGreen
    SeaShell Sienna Silver SkyBlue SlateBlue SlateGray Snow
    SpringGreen SteelBlue Tan Teal Thistle Tomato Turquoise
    Violet Wheat White WhiteSmoke Yellow YellowGreen
    """.split()
)


class Color:
    """Produces colours as hex codes, RGB triples and names."""

    def __init__(self, faker: Generator) -> None:
        self.faker = faker

    def hex(self) -> str:
        """Return a colour such as ``#1A2B3C``."""
        return "#" + "".join(
            self.faker.random_string_element(HEX_DIGITS) for _ in range(6)
        )

    def rgb(self) -> str:
        """Return three components from 0 to 255 joined by commas."""
        return ",".join(str(self.faker.int_between(0, 255)) for _ in range(3))

    def rgb_as_array(self) -> tuple[str, str, str]:
        """Return the three components of :meth:`rgb` as strings."""
        red, green, blue = self.rgb().split(",")
        return red, green, blue

    def css(self) -> str:
        """Return a colour in CSS ``rgb(...)`` notation."""
        return f"rgb({self.rgb()})"

    def safe_color_name(self) -> str:
        """Return one of the web-safe colour names."""
        return self.faker.random_string_element(SAFE_COLOR_NAMES)

    def color_name(self) -> str:
        """Return a named CSS colour."""
        return self.faker.random_string_element(ALL_COLOR_NAMES)