"""Reader for CLDR plural rule files."""

import logging
from pathlib import Path

from lxml import etree

from ..errors import ParseError

logger = logging.getLogger(__name__)


class PluralRulesParser:
    """Reads cardinal rules from a CLDR ``plurals.xml`` file.

    The result maps each locale to its ``{category: condition}`` rules in
    document order, conditions still in raw CLDR syntax.
    """

    def parse_file(self, path: Path) -> dict[str, dict[str, str]]:
        parser = etree.XMLParser(remove_comments=True)
        try:
            doc = etree.parse(str(path), parser=parser)
        except (OSError, etree.XMLSyntaxError) as e:
            raise ParseError(path, str(e)) from e

        rules = {}
        for plurals in doc.getroot().iter("plurals"):
            if plurals.get("type", "cardinal") != "cardinal":
                continue
            for rule_set in plurals.iter("pluralRules"):
                categories = {
                    rule.get("count"): (rule.text or "")
                    for rule in rule_set.iter("pluralRule")
                    if rule.get("count")
                }
                for locale in rule_set.get("locales", "").split():
                    rules[locale] = categories

        logger.debug("Read plural rules for %d locales from %s", len(rules), path)
        return rules
