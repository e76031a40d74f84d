"""Exception types raised while generating localization output."""

from typing import Iterable, Optional


class LocalizerError(Exception):
    """Base class for all fatal generation errors."""


class ParseError(LocalizerError):
    """An input file could not be read or is not well-formed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse {path}: {reason}")


class EscapeError(LocalizerError):
    """A string contains a backslash escape we cannot translate."""

    def __init__(self, char: str, text: str):
        self.char = char
        self.text = text
        super().__init__(f"Unknown escape <{char}> in <{text}>")


class MissingCategoryError(LocalizerError):
    """A plural entry lacks a category needed for a fallback literal."""

    def __init__(self, identifier: str, category: str):
        self.identifier = identifier
        self.category = category
        super().__init__(
            f"Plural '{identifier}' has no '{category}' item"
        )


class ConsistencyError(LocalizerError):
    """A platform binding does not match the shared contract."""

    def __init__(
        self,
        flavour: str,
        kind: str,
        missing: Iterable[str] = (),
        extra: Optional[Iterable[str]] = None
    ):
        self.flavour = flavour
        self.kind = kind
        self.missing = sorted(missing)
        self.extra = sorted(extra or ())
        details = []
        if self.missing:
            details.append(f"missing {', '.join(self.missing)}")
        if self.extra:
            details.append(f"unexpected {', '.join(self.extra)}")
        super().__init__(
            f"Flavour '{flavour}' does not match the shared {kind} "
            f"contract: {'; '.join(details)}"
        )


class ConfigurationError(LocalizerError):
    """The generator was given an unusable flavour set."""
