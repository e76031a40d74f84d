"""Android resource parsing and models."""

from .drawables import DrawableEnumerator
from .models import IdentifierMap, ResourceKind, ResourceTable
from .parser import ResourceTableParser, load_identifier_map

__all__ = [
    "DrawableEnumerator",
    "IdentifierMap",
    "ResourceKind",
    "ResourceTable",
    "ResourceTableParser",
    "load_identifier_map",
]
