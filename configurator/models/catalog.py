"""Option catalog models and the shared height-band pricing primitive."""

from __future__ import annotations
from numbers import Real
from typing import Annotated, Literal
from pydantic import BaseModel, Field


UNKNOWN_NAME = "unknown"

Price = Annotated[int, Field(ge=0)]


def positive(value: object) -> float | None:
    """Return the value if it is a positive number, else None.

    Stored prices use zero to mean "not set", so zero, negative and
    non-numeric values all collapse to None.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    return value if value > 0 else None


def amount(value: object) -> float:
    """A stored price as a usable amount: anything not positive prices as 0."""
    return positive(value) or 0


class OptionEntry(BaseModel):
    """A catalog option: a selectable leaf, or a group holding sub-options."""
    id: str
    name: str
    price: Price = 0            # H <= 200
    price_h2200: Price = 0      # H <= 220
    price_h2400: Price = 0      # H > 220
    price_h90: Price | None = None
    price_h120: Price | None = None

    # Storage: width-banded prices, _r for the handed (R-type) variant
    price_w80: Price | None = None
    price_w120: Price | None = None
    price_w160: Price | None = None
    price_w200: Price | None = None
    price_w80_r: Price | None = None
    price_w120_r: Price | None = None
    price_w160_r: Price | None = None
    price_w200_r: Price | None = None

    sub_options: list[OptionEntry] | None = None

    detail_drawing_url: str | None = None
    detail_drawing_url_r: str | None = None
    detail_drawing_url_w80: str | None = None
    detail_drawing_url_w120: str | None = None
    detail_drawing_url_w160: str | None = None
    detail_drawing_url_w200: str | None = None
    detail_drawing_url_w80_r: str | None = None
    detail_drawing_url_w120_r: str | None = None
    detail_drawing_url_w160_r: str | None = None
    detail_drawing_url_w200_r: str | None = None

    @property
    def is_group(self) -> bool:
        return self.sub_options is not None

    def width_price(self, width: float, handed: bool = False) -> float | None:
        """Width-banded price for a storage width, None if the width has no band."""
        band = _width_band(width)
        if band is None:
            return None
        if handed:
            handed_price = positive(getattr(self, f"price_w{band}_r"))
            if handed_price is not None:
                return handed_price
        plain = getattr(self, f"price_w{band}")
        if plain is not None:
            return amount(plain)
        return amount(self.price)

    def width_drawing_url(self, width: float, handed: bool = False) -> str | None:
        band = _width_band(width)
        url = None
        if band is not None:
            if handed:
                url = getattr(self, f"detail_drawing_url_w{band}_r")
            if not url:
                url = getattr(self, f"detail_drawing_url_w{band}")
        if not url:
            url = self.detail_drawing_url_r if handed else self.detail_drawing_url
        return url or None


def _width_band(width: float) -> int | None:
    for band in (80, 120, 160, 200):
        if width == band:
            return band
    return None


class ColorOption(OptionEntry):
    """A door color; display fields are carried for document collaborators."""
    short_id: str = ""
    hex: str = "#FFFFFF"
    category: Literal["monotone", "wood"] = "monotone"


class MatrixPriceEntry(BaseModel):
    """One row of the price override matrix (frame and lock included)."""
    h90: Price | None = None
    h120: Price | None = None
    h2000: Price | None = None
    h2200: Price | None = None
    h2400: Price | None = None
    url: str | None = None

    def band_price(self, height: float) -> float | None:
        """Positive price for the height band, None means use the catalog."""
        if height <= 90:
            value = self.h90
        elif height <= 120:
            value = self.h120
        elif height <= 200:
            value = self.h2000
        elif height <= 220:
            value = self.h2200
        else:
            value = self.h2400
        return positive(value)


PriceMatrix = dict[str, MatrixPriceEntry]


class Catalog(BaseModel):
    """The full set of option trees plus global pricing parameters."""
    base_price: Price = 0
    price_per_unit_area: float = Field(default=0.0, ge=0)  # per cm^2
    door_types: list[OptionEntry] = []
    frame_types: list[OptionEntry] = []
    colors: list[ColorOption] = []
    handles: list[OptionEntry] = []
    glass_styles: list[OptionEntry] = []
    locks: list[OptionEntry] = []


OPTION_SECTIONS = ("door_types", "frame_types", "colors", "handles", "glass_styles", "locks")


def find_price_entry(tree: list[OptionEntry], option_id: str) -> OptionEntry | None:
    """Find a top-level entry or a direct sub-option by id."""
    for option in tree:
        if option.id == option_id:
            return option
        for sub in option.sub_options or []:
            if sub.id == option_id:
                return sub
    return None


def find_name(tree: list[OptionEntry], option_id: str) -> str:
    """Display name for an id; UNKNOWN_NAME when the catalog has drifted."""
    entry = find_price_entry(tree, option_id)
    return entry.name if entry is not None else UNKNOWN_NAME


def price_for_height(entry: OptionEntry | None, height: float) -> float:
    """Height-banded price: <=90 / <=120 / <=200 / <=220 / >220."""
    if entry is None:
        return 0
    if entry.price_h90 is not None and height <= 90:
        return amount(entry.price_h90)
    if entry.price_h120 is not None and height <= 120:
        return amount(entry.price_h120)
    if height <= 200:
        return amount(entry.price)
    if height <= 220:
        return amount(entry.price_h2200)
    return amount(entry.price_h2400)
