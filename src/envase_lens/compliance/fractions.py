"""Material to separate-collection container mapping (RD 1055/2022, Anexo II)."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Protocol

from envase_lens.schema import ContainerFraction, DetectedMaterial


class MaterialLike(Protocol):
    material_code: str | None
    material_abbrev: str | None


# material_code or uppercase material_abbrev -> bin fraction (Decision 97/129/CE)
CONTAINER_TABLE: Mapping[str, ContainerFraction] = MappingProxyType(
    {
        # Aluminium
        "41": "amarillo",
        "ALU": "amarillo",
        # Plastics
        "01": "amarillo",
        "PET": "amarillo",
        "02": "amarillo",
        "HDPE": "amarillo",
        "03": "amarillo",
        "PVC": "amarillo",
        "04": "amarillo",
        "LDPE": "amarillo",
        "05": "amarillo",
        "PP": "amarillo",
        "06": "amarillo",
        "PS": "amarillo",
        # Steel
        "40": "amarillo",
        "FE": "amarillo",
        # Composites
        "81": "amarillo",
        "82": "amarillo",
        "83": "amarillo",
        "84": "amarillo",
        "C/PAP": "amarillo",
        "C/LDPE": "amarillo",
        "C/PP": "amarillo",
        "C/PS": "amarillo",
        # Paper and cardboard
        "20": "azul",
        "21": "azul",
        "22": "azul",
        "PAP": "azul",
        # Glass
        "70": "verde",
        "71": "verde",
        "72": "verde",
        "73": "verde",
        "74": "verde",
        "GL": "verde",
    }
)

KNOWN_MATERIAL_CODES: frozenset[str] = frozenset(key for key in CONTAINER_TABLE if key.isdigit())

COMPOSITE_PREFIX = "C/"

# Glass first, then the lightweight-packaging stream, then paper.
_GROUP_PRECEDENCE: tuple[ContainerFraction, ...] = ("verde", "amarillo", "azul")


def resolve_fraction(code: str | None, abbrev: str | None) -> ContainerFraction:
    """Return the collection bin for a material, or "otro" when unknown."""
    if code:
        by_code = CONTAINER_TABLE.get(code.strip())
        if by_code:
            return by_code
    if abbrev:
        upper = abbrev.strip().upper()
        by_abbrev = CONTAINER_TABLE.get(upper)
        if by_abbrev:
            return by_abbrev
        if upper.startswith(COMPOSITE_PREFIX):
            return "amarillo"
    return "otro"


def resolve_inseparable_group_fraction(materials: Iterable[MaterialLike]) -> ContainerFraction:
    """Return the single bin for materials permanently bonded together."""
    fractions = {resolve_fraction(m.material_code, m.material_abbrev) for m in materials}
    for fraction in _GROUP_PRECEDENCE:
        if fraction in fractions:
            return fraction
    return "otro"


def container_fractions(materials: Iterable[DetectedMaterial]) -> dict[str, ContainerFraction]:
    """Map each part to its bin; inseparable parts share the group bin."""
    items = list(materials)
    inseparable = [m for m in items if m.separability == "inseparable"]
    group_fraction = resolve_inseparable_group_fraction(inseparable) if inseparable else None

    fractions: dict[str, ContainerFraction] = {}
    for material in items:
        if material.separability == "inseparable" and group_fraction is not None:
            fractions[material.part] = group_fraction
        else:
            fractions[material.part] = resolve_fraction(material.material_code, material.material_abbrev)
    return fractions
