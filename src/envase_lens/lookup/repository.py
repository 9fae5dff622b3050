"""Product lookup repository."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import import_module

from envase_lens.schema import DetectedMaterial, PackagingType


@dataclass(frozen=True)
class ProductEntry:
    name: str
    keywords: tuple[str, ...]
    materials: tuple[DetectedMaterial, ...]
    packaging_types: tuple[PackagingType, ...] = ()

    def matches(self, product_name: str) -> bool:
        normalized = product_name.lower()
        return any(keyword in normalized for keyword in self.keywords)

    def accepts_packaging_type(self, packaging_type: str) -> bool:
        if not self.packaging_types:
            return True
        return packaging_type.lower() in self.packaging_types


class LookupRepository:
    """Loads the product table from packaged lookup data."""

    def __init__(self, version: str = "v1"):
        self.version = version
        self.entries: list[ProductEntry] = self._load_entries()

    def find(self, product_name: str) -> list[ProductEntry]:
        return [entry for entry in self.entries if entry.matches(product_name)]

    def _load_entries(self) -> list[ProductEntry]:
        module = import_module(f"envase_lens.lookup.data.{self.version}.products")
        catalog = module.MATERIALS
        return [
            ProductEntry(
                name=item["name"],
                keywords=tuple(keyword.lower() for keyword in item["keywords"]),
                materials=tuple(_build_material(row, catalog) for row in item["materials"]),
                packaging_types=tuple(item.get("packaging_types", ())),
            )
            for item in module.PRODUCTS
        ]


def _build_material(row: dict, catalog: dict[str, dict]) -> DetectedMaterial:
    return DetectedMaterial(
        part=row["part"],
        **catalog[row["material"]],
        confidence=1.0,
        visual_evidence=row["evidence"],
        inference_method="lookup",
    )
