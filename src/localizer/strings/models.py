"""Data models for .strings file entries."""

from dataclasses import dataclass
from typing import Callable, Optional

from .escape import escape


@dataclass
class StringEntry:
    """Represents a single entry in a .strings file.

    Attributes:
        key: The string key/identifier.
        value: The string value, as Android resource text.
        comment: Optional comment associated with the entry.
    """
    key: str
    value: str
    comment: Optional[str] = None

    def to_strings_format(self, escaper: Callable[[str], str] = escape) -> str:
        """Convert entry to .strings file format.

        Args:
            escaper: Function escaping key and value for a quoted literal.

        Returns:
            Formatted string entry with optional comment.
        """
        lines = []
        if self.comment:
            lines.append(f"/* {self.comment} */")

        lines.append(f'"{escaper(self.key)}" = "{escaper(self.value)}";')

        return "\n".join(lines)

    @staticmethod
    def _unescape(s: str) -> str:
        """Unescape special characters from .strings format."""
        result = []
        i = 0
        while i < len(s):
            if s[i] == '\\' and i + 1 < len(s):
                next_char = s[i + 1]
                if next_char == 'n':
                    result.append('\n')
                elif next_char in ('"', "'", '\\', '$'):
                    result.append(next_char)
                else:
                    result.append(s[i])
                    result.append(next_char)
                i += 2
            else:
                result.append(s[i])
                i += 1
        return ''.join(result)
