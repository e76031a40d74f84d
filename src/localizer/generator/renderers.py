"""Value renderers for each kind of flavour."""

from typing import Optional

from ..config import GeneratorConfig
from ..errors import MissingCategoryError
from ..resources.models import ResourceKind, ResourceTable
from ..strings.escape import StringLiteralEscaper
from .flavours import Flavour, FlavourRole

# Plural categories baked into fallback literals
FALLBACK_CATEGORIES = ("one", "other")


def render_contract(name: str, kind: ResourceKind) -> str:
    """Abstract declaration in the shared contract."""
    return f"val {name}: {kind.type_name}"


class NativeLookupRenderer:
    """Delegates each identifier to the platform's generated R class."""

    def __init__(self, android_r: str):
        self.android_r = android_r

    def __call__(self, name: str, kind: ResourceKind) -> str:
        return f"actual val {name} get() = {self.android_r}.{kind.value}.{name}"


class FallbackRenderer:
    """Bakes resource text into source for platforms without native lookup.

    Strings become ``StringResource(id, text)``, plurals
    ``PluralsResource(id, one, other)`` and drawables ``DrawableResource(id)``.
    """

    def __init__(self, table: ResourceTable, escaper: Optional[StringLiteralEscaper] = None):
        self.table = table
        self.escaper = escaper or StringLiteralEscaper()

    def __call__(self, name: str, kind: ResourceKind) -> str:
        if kind == ResourceKind.STRING:
            args = [self.table.strings[name]]
        elif kind == ResourceKind.PLURALS:
            args = self._plural_texts(name)
        else:
            args = []

        literals = ", ".join(f'"{self.escaper.escape(arg)}"' for arg in [name] + args)
        return f"actual val {name} = {kind.type_name}({literals})"

    def _plural_texts(self, name: str) -> list[str]:
        items = self.table.plurals[name]
        texts = []
        for category in FALLBACK_CATEGORIES:
            if category not in items:
                raise MissingCategoryError(name, category)
            texts.append(items[category])
        return texts


def default_flavours(
    config: GeneratorConfig,
    table: ResourceTable,
    escaper: Optional[StringLiteralEscaper] = None
) -> list[Flavour]:
    """Build the flavour set described by a configuration."""
    native = NativeLookupRenderer(config.android_r)
    fallback = FallbackRenderer(table, escaper)

    flavours = [Flavour(config.shared_flavour, FlavourRole.SHARED, render_contract)]
    flavours.extend(
        Flavour(name, FlavourRole.BINDING, native)
        for name in config.native_flavours
    )
    flavours.extend(
        Flavour(name, FlavourRole.BINDING, fallback)
        for name in config.fallback_flavours
    )
    return flavours
