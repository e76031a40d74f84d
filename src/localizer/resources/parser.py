"""Parser for Android strings.xml resource files."""

import logging
from pathlib import Path

from lxml import etree

from ..errors import ParseError
from .models import IdentifierMap, ResourceTable

logger = logging.getLogger(__name__)


class ResourceTableParser:
    """Parser for Android ``<resources>`` documents.

    Reads ``<string name="...">`` and ``<plurals name="...">`` children of
    the root element. Elements without a ``name`` attribute are skipped.
    """

    STRING_TAG = "string"
    PLURALS_TAG = "plurals"
    ITEM_TAG = "item"

    def __init__(self):
        self._xml_parser = etree.XMLParser(remove_comments=True, remove_pis=True)

    def parse(self, content: bytes) -> ResourceTable:
        """Parse strings.xml content.

        Args:
            content: Raw XML document.

        Returns:
            The parsed ResourceTable.
        """
        try:
            root = etree.fromstring(content, parser=self._xml_parser)
        except etree.XMLSyntaxError as e:
            raise ParseError("<string>", str(e)) from e
        return self._read_root(root)

    def parse_file(self, path: Path) -> ResourceTable:
        """Parse a strings.xml file.

        Args:
            path: Path to the XML file.

        Returns:
            The parsed ResourceTable.
        """
        try:
            doc = etree.parse(str(path), parser=self._xml_parser)
        except (OSError, etree.XMLSyntaxError) as e:
            raise ParseError(path, str(e)) from e

        table = self._read_root(doc.getroot())
        logger.debug(
            "Read %d strings and %d plurals from %s",
            len(table.strings), len(table.plurals), path
        )
        return table

    def _read_root(self, root) -> ResourceTable:
        strings = {}
        plurals = {}

        for node in root:
            name = node.get("name")
            if name is None:
                logger.debug("Skipping <%s> without a name", node.tag)
                continue

            if node.tag == self.STRING_TAG:
                strings[name] = self._text_content(node)
            elif node.tag == self.PLURALS_TAG:
                plurals[name] = self._read_plurals(name, node)

        return ResourceTable(strings=strings, plurals=plurals)

    def _read_plurals(self, name: str, node) -> dict[str, str]:
        items = {}
        for item in node:
            if item.tag != self.ITEM_TAG:
                continue
            quantity = item.get("quantity")
            if quantity is None:
                logger.debug("Skipping <item> without quantity in plural %s", name)
                continue
            items[quantity] = self._text_content(item)
        return items

    @staticmethod
    def _text_content(node) -> str:
        """All descendant text of a node, markup removed."""
        return "".join(node.itertext())


def load_identifier_map(path: Path) -> IdentifierMap:
    """Read an identifier mapping file.

    Args:
        path: Path to a UTF-8 file of ``external = android`` lines.

    Returns:
        The parsed IdentifierMap.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ParseError(path, str(e)) from e
    return IdentifierMap.parse(content)
