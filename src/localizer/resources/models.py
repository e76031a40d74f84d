"""Data models for parsed Android resources."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping


class ResourceKind(Enum):
    """Kind of resource exposed through the generated accessor."""
    STRING = "string"
    PLURALS = "plurals"
    DRAWABLE = "drawable"

    @property
    def type_name(self) -> str:
        """Kotlin type of a resource of this kind, e.g. ``StringResource``."""
        return self.value[0].upper() + self.value[1:] + "Resource"


@dataclass(frozen=True)
class ResourceTable:
    """Strings and plurals parsed from one strings.xml file.

    Attributes:
        strings: Identifier to text, in document order.
        plurals: Identifier to a mapping of quantity category to text.
    """
    strings: Mapping[str, str] = field(default_factory=dict)
    plurals: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "strings", MappingProxyType(dict(self.strings)))
        object.__setattr__(self, "plurals", MappingProxyType({
            name: MappingProxyType(dict(items))
            for name, items in self.plurals.items()
        }))

    def identifiers(self, kind: ResourceKind) -> list[str]:
        """Identifiers of one kind in generation order.

        Drawables are not part of the table and yield an empty list.
        """
        if kind == ResourceKind.STRING:
            return list(self.strings)
        if kind == ResourceKind.PLURALS:
            return list(self.plurals)
        return []


@dataclass(frozen=True)
class IdentifierMap:
    """Mapping of external (e.g. iOS) ids to Android dotted ids.

    Attributes:
        entries: External id to Android id such as ``string.app_title``.
    """
    entries: Mapping[str, str] = field(default_factory=dict)

    STRING_PREFIX = "string."

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @classmethod
    def parse(cls, content: str) -> "IdentifierMap":
        """Parse ``external = android`` lines.

        Lines that do not split into exactly two parts are ignored. Both
        sides are stripped of spaces, semicolons and double quotes. A later
        line for the same external id replaces the earlier one.
        """
        entries = {}
        for line in content.splitlines():
            parts = line.split("=")
            if len(parts) != 2:
                continue
            external_id, android_id = (part.strip(' ;"') for part in parts)
            entries[external_id] = android_id
        return cls(entries)

    def string_targets(self) -> Iterator[tuple[str, str]]:
        """Yield ``(external_id, string_name)`` for entries targeting strings."""
        for external_id, android_id in self.entries.items():
            if android_id.startswith(self.STRING_PREFIX):
                yield external_id, android_id[len(self.STRING_PREFIX):]
