"""Export of Android resources as Apple .strings files."""

import logging
from pathlib import Path
from typing import Optional

from ..config import AUTOGEN_HEADER
from ..resources.models import IdentifierMap, ResourceTable
from .escape import StringLiteralEscaper
from .models import StringEntry

logger = logging.getLogger(__name__)


class AppleStringsExporter:
    """Writes a ResourceTable as ``"key" = "value";`` lines.

    Direct exports namespace keys as ``strings.<id>`` and
    ``plurals.<category>.<id>`` and append ``meta.lang`` and
    ``meta.androidLocale``. Mapped exports rename strings through an
    IdentifierMap and never include plurals.
    """

    def __init__(self, escaper: Optional[StringLiteralEscaper] = None):
        self.escaper = escaper or StringLiteralEscaper()

    def direct_entries(self, table: ResourceTable, lang: str) -> list[StringEntry]:
        """Entries of a direct export.

        Args:
            table: Parsed resources.
            lang: Android language tag, e.g. ``pt-BR``.
        """
        entries = [
            StringEntry(f"strings.{name}", text)
            for name, text in table.strings.items()
        ]
        for name, items in table.plurals.items():
            for category, text in items.items():
                entries.append(StringEntry(f"plurals.{category}.{name}", text))

        entries.append(StringEntry("meta.lang", lang.split("-", 1)[0]))
        entries.append(StringEntry("meta.androidLocale", lang))
        return entries

    def mapped_entries(
        self,
        table: ResourceTable,
        identifier_map: IdentifierMap
    ) -> list[StringEntry]:
        """Entries of a mapped export.

        Mapping entries that target plurals or unknown strings are skipped.
        """
        entries = []
        for external_id, name in identifier_map.string_targets():
            text = table.strings.get(name)
            if text is None:
                logger.debug("Skipping %s: no string named %s", external_id, name)
                continue
            entries.append(StringEntry(external_id, text))
        return entries

    def format(self, entries: list[StringEntry]) -> str:
        """Format entries as .strings content with the autogen header."""
        lines = [AUTOGEN_HEADER]
        for entry in entries:
            lines.append(entry.to_strings_format(self.escaper.escape))
        return "\n".join(lines) + "\n"

    def export(self, table: ResourceTable, lang: str, path: Path) -> int:
        """Write a direct export.

        Returns:
            Number of entries written.
        """
        return self._write(self.direct_entries(table, lang), path)

    def export_mapped(
        self,
        table: ResourceTable,
        identifier_map: IdentifierMap,
        path: Path
    ) -> int:
        """Write a mapped export.

        Returns:
            Number of entries written.
        """
        return self._write(self.mapped_entries(table, identifier_map), path)

    def _write(self, entries: list[StringEntry], path: Path) -> int:
        # Render before touching the file so escape errors leave no partial output
        content = self.format(entries)

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

        logger.info("Wrote %d entries to %s", len(entries), path)
        return len(entries)
