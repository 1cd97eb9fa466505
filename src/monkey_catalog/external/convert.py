"""Conversion from wire records to catalog records."""

from __future__ import annotations

from ..catalog.types import Monkey
from .types import ExternalMonkey

# The tool server does not send a species; these are the ones we know.
SPECIES_BY_NAME: dict[str, str] = {
    "baboon": "Papio",
    "capuchin": "Cebus",
    "macaque": "Macaca",
    "mandrill": "Mandrillus sphinx",
    "tamarin": "Saguinus",
}


def derive_species(name: str) -> str:
    """Species for a monkey name, or the name itself when unknown."""
    return SPECIES_BY_NAME.get(name.strip().casefold(), name)


def to_monkey(external: ExternalMonkey) -> Monkey:
    """Convert a validated wire record into the catalog's record shape."""
    return Monkey(
        name=external.name,
        species=derive_species(external.name),
        location=external.location,
        population=external.population,
        description=external.details,
        image_url=external.image,
    )
