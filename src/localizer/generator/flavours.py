"""Target flavours of the generated resource modules."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from ..resources.models import ResourceKind

# Renders the declaration of one identifier, or None to leave it out
Renderer = Callable[[str, ResourceKind], Optional[str]]


class FlavourRole(Enum):
    """Role of a flavour in the generated module set."""
    SHARED = "shared"
    BINDING = "binding"

    @property
    def keyword(self) -> str:
        """Kotlin multiplatform modifier for objects of this role."""
        return "expect" if self == FlavourRole.SHARED else "actual"


@dataclass
class Flavour:
    """A source set that receives one generated R module.

    Attributes:
        name: Source set name, e.g. ``androidMain``.
        role: Whether the flavour declares or binds the resources.
        render: Turns an identifier and kind into a declaration line.
    """
    name: str
    role: FlavourRole
    render: Renderer

    @property
    def is_shared(self) -> bool:
        return self.role == FlavourRole.SHARED


@dataclass
class Binding:
    """One rendered declaration inside a generated module."""
    identifier: str
    kind: ResourceKind
    source: str


@dataclass
class RModule:
    """Structured form of a generated R module before templating.

    Attributes:
        flavour: Flavour the module belongs to.
        groups: Declarations per resource kind, in generation order.
    """
    flavour: Flavour
    groups: dict[ResourceKind, list[Binding]] = field(default_factory=dict)

    def identifiers(self, kind: ResourceKind) -> list[str]:
        return [binding.identifier for binding in self.groups.get(kind, [])]
