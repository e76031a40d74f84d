"""Main localization service orchestration."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from ..config import GeneratorConfig
from ..generator import ResourceInterfaceGenerator, default_flavours
from ..plurals import PluralRulesParser
from ..resources import DrawableEnumerator, ResourceTableParser, load_identifier_map
from ..strings import AppleStringsExporter, StringLiteralEscaper

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    """Report of a generation run.

    Attributes:
        files_written: Paths of all files written.
        strings: Number of strings read from the source table.
        plurals: Number of plurals read from the source table.
        drawables: Number of drawable ids enumerated.
        entries: Number of .strings entries written (exports only).
    """
    files_written: list[Path] = field(default_factory=list)
    strings: int = 0
    plurals: int = 0
    drawables: int = 0
    entries: int = 0


class LocalizeService:
    """Runs the three generation operations end to end."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize the localization service.

        Args:
            config: Generator configuration.
        """
        self.config = config or GeneratorConfig()
        self.escaper = StringLiteralEscaper()
        self.parser = ResourceTableParser()
        self.enumerator = DrawableEnumerator()
        self.generator = ResourceInterfaceGenerator(self.config, self.escaper)
        self.exporter = AppleStringsExporter(self.escaper)

    def generate_localize(
        self,
        output_dir: Path,
        strings_file: Path,
        drawable_dirs: Iterable[Path] = (),
        plural_rules_file: Optional[Path] = None
    ) -> GenerationReport:
        """Generate the shared contract and every platform binding.

        Args:
            output_dir: Root directory of the generated source sets.
            strings_file: Android strings.xml.
            drawable_dirs: Directories whose images become drawables.
            plural_rules_file: Optional CLDR plurals.xml.

        Returns:
            GenerationReport with the written modules.
        """
        table = self.parser.parse_file(strings_file)
        drawables = self.enumerator.enumerate(drawable_dirs)
        plural_rules = None
        if plural_rules_file is not None:
            plural_rules = PluralRulesParser().parse_file(plural_rules_file)

        flavours = default_flavours(self.config, table, self.escaper)
        files = self.generator.generate(
            Path(output_dir), table, drawables, flavours, plural_rules
        )
        logger.info(
            "Generated %d modules for %d strings, %d plurals, %d drawables",
            len(files), len(table.strings), len(table.plurals), len(drawables)
        )

        return GenerationReport(
            files_written=files,
            strings=len(table.strings),
            plurals=len(table.plurals),
            drawables=len(drawables),
        )

    def generate_apple_strings(
        self,
        output_file: Path,
        strings_file: Path,
        lang: str
    ) -> GenerationReport:
        """Export strings.xml as a namespaced .strings file.

        Args:
            output_file: .strings file to write.
            strings_file: Android strings.xml.
            lang: Android language tag of the table, e.g. ``pt-BR``.
        """
        table = self.parser.parse_file(strings_file)
        count = self.exporter.export(table, lang, Path(output_file))
        return GenerationReport(
            files_written=[Path(output_file)],
            strings=len(table.strings),
            plurals=len(table.plurals),
            entries=count,
        )

    def generate_mapped_apple_strings(
        self,
        output_file: Path,
        strings_file: Path,
        map_file: Path
    ) -> GenerationReport:
        """Export strings.xml under external ids from a mapping file.

        Args:
            output_file: .strings file to write.
            strings_file: Android strings.xml.
            map_file: Lines of ``external_id = string.android_id``.
        """
        table = self.parser.parse_file(strings_file)
        identifier_map = load_identifier_map(map_file)
        count = self.exporter.export_mapped(table, identifier_map, Path(output_file))
        return GenerationReport(
            files_written=[Path(output_file)],
            strings=len(table.strings),
            plurals=len(table.plurals),
            entries=count,
        )
