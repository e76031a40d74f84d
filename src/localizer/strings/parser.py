"""Reader for Apple .strings files."""

import re
from pathlib import Path
from typing import Optional

from .models import StringEntry


class StringsParser:
    """Reader for Apple .strings files.

    Handles both UTF-8 and UTF-16 encoded files, keeps the comment preceding
    each entry and undoes the escapes written by the exporter.
    """

    # Pattern to match string entries: "key" = "value";
    ENTRY_PATTERN = re.compile(
        r'"((?:[^"\\]|\\.)*)"\s*=\s*"((?:[^"\\]|\\.)*)"\s*;',
        re.DOTALL
    )

    # Pattern to match comments: /* ... */
    COMMENT_PATTERN = re.compile(r'/\*\s*(.*?)\s*\*/', re.DOTALL)

    def parse(self, content: str) -> list[StringEntry]:
        """Parse .strings content into StringEntry objects.

        Args:
            content: The content of a .strings file.

        Returns:
            List of StringEntry objects with unescaped keys and values.
        """
        entries = []
        current_comment: Optional[str] = None

        for line in content.split('\n'):
            line = line.strip()
            if not line:
                continue

            comment_match = self.COMMENT_PATTERN.match(line)
            if comment_match:
                current_comment = comment_match.group(1).strip()
                continue

            entry_match = self.ENTRY_PATTERN.match(line)
            if entry_match:
                entries.append(StringEntry(
                    key=StringEntry._unescape(entry_match.group(1)),
                    value=StringEntry._unescape(entry_match.group(2)),
                    comment=current_comment
                ))
                current_comment = None

        return entries

    def parse_file(self, path: Path) -> list[StringEntry]:
        """Parse a .strings file.

        Automatically detects UTF-16 vs UTF-8 encoding.
        """
        return self.parse(self._read_file(path))

    def parse_to_dict(self, content: str) -> dict[str, str]:
        """Parse .strings content into a key to value dictionary."""
        return {entry.key: entry.value for entry in self.parse(content)}

    def _read_file(self, path: Path) -> str:
        raw = Path(path).read_bytes()

        # Check for UTF-16 BOM
        if raw.startswith(b'\xff\xfe') or raw.startswith(b'\xfe\xff'):
            return raw.decode('utf-16')

        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError:
            return raw.decode('utf-16')
