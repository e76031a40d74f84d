"""Escaping of Android resource text into quoted source literals."""

from ..errors import EscapeError


class StringLiteralEscaper:
    """Converts Android resource text into the body of a quoted literal.

    Android backslash escapes (``\\n``, ``\\\\``, ``\\"``, ``\\'``) are kept
    as escapes and ``\\?`` becomes a bare ``?``. Raw newlines are dropped,
    since Android collapses them as whitespace. Quotes and the template
    delimiter are escaped so the result is safe both in Kotlin string
    literals and in Apple .strings values.
    """

    ESCAPES = frozenset("n\\\"'")

    def __init__(self, delimiter: str = "$"):
        """Initialize the escaper.

        Args:
            delimiter: Template-substitution character of the target syntax.
        """
        self.delimiter = delimiter

    def escape(self, text: str) -> str:
        """Escape text for embedding between double quotes.

        Raises:
            EscapeError: If text contains an unsupported backslash escape.
        """
        result = []
        is_escape = False

        for c in text:
            if is_escape:
                if c in self.ESCAPES:
                    result.append("\\" + c)
                elif c == "?":
                    result.append("?")
                else:
                    raise EscapeError(c, text)
                is_escape = False
            elif c == "\n":
                continue
            elif c == "\\":
                is_escape = True
            elif c in ('"', "'", self.delimiter):
                result.append("\\" + c)
            else:
                result.append(c)

        return "".join(result)


_default_escaper = StringLiteralEscaper()


def escape(text: str) -> str:
    """Escape text with the default ``$`` template delimiter."""
    return _default_escaper.escape(text)
