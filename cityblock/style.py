"""Building colours chosen from PLUTO building class and land use."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import PLUTOData


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB triplet with 8-bit channels."""

    r: int
    g: int
    b: int


DEFAULT_COLOR = Color(125, 115, 105)

# Keyed by the first letter of the building class.
_CLASS_COLORS: dict[str, Color] = {
    "A": Color(140, 100, 70),  # one-family dwellings: warm brown
    "B": Color(130, 95, 65),  # two-family dwellings
    "C": Color(120, 85, 60),  # walk-up apartments: brownstone
    "D": Color(150, 140, 130),  # elevator apartments: concrete
    "E": Color(95, 85, 80),  # warehouses
    "F": Color(100, 90, 85),  # factory/industrial
    "G": Color(90, 88, 85),  # garages
    "H": Color(160, 145, 120),  # hotels
    "I": Color(170, 165, 160),  # hospitals/health
    "J": Color(145, 110, 90),  # theatres
    "K": Color(135, 120, 105),  # stores
    "L": Color(110, 100, 90),  # lofts
    "M": Color(155, 140, 120),  # religious
    "N": Color(140, 135, 130),  # asylums
    "O": Color(160, 160, 165),  # offices: steel/glass
    "P": Color(130, 125, 115),  # indoor recreation
    "Q": Color(110, 120, 100),  # outdoor recreation
    "R": Color(155, 145, 135),  # condos
    "S": Color(135, 115, 95),  # mixed residential/commercial
    "W": Color(145, 135, 125),  # educational
}

_LAND_USE_COLORS: dict[str, Color] = {
    "1": Color(130, 95, 65),
    "2": Color(120, 85, 60),
    "3": Color(150, 140, 130),
    "4": Color(135, 115, 95),
    "5": Color(160, 160, 165),
    "6": Color(100, 90, 85),
    "7": Color(110, 108, 105),
    "8": Color(145, 140, 135),
    "9": Color(110, 120, 100),
    "10": Color(90, 88, 85),
    "11": Color(105, 100, 95),
}


def style_color(pluto: PLUTOData) -> Color:
    """Pick a colour by building class, then land use, then a neutral default."""
    if pluto.bldg_class:
        color = _CLASS_COLORS.get(pluto.bldg_class[0])
        if color is not None:
            return color
    return _LAND_USE_COLORS.get(pluto.land_use, DEFAULT_COLOR)