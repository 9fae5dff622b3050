"""Product lookup override for known Spanish products."""

from envase_lens.lookup.engine import lookup_product_materials, merge_lookup_materials
from envase_lens.lookup.repository import LookupRepository, ProductEntry

__all__ = [
    "LookupRepository",
    "ProductEntry",
    "lookup_product_materials",
    "merge_lookup_materials",
]
