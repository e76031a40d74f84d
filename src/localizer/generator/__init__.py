"""Kotlin multiplatform resource module generation."""

from .flavours import Binding, Flavour, FlavourRole, RModule
from .interface import ResourceInterfaceGenerator, check_consistency
from .renderers import (
    FallbackRenderer,
    NativeLookupRenderer,
    default_flavours,
    render_contract,
)

__all__ = [
    "Binding",
    "FallbackRenderer",
    "Flavour",
    "FlavourRole",
    "NativeLookupRenderer",
    "RModule",
    "ResourceInterfaceGenerator",
    "check_consistency",
    "default_flavours",
    "render_contract",
]
