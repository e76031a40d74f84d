"""Tests for the Apple .strings exporter."""

import tempfile
from pathlib import Path

import pytest

from localizer.errors import EscapeError
from localizer.resources import IdentifierMap, ResourceTable
from localizer.strings import AppleStringsExporter, StringsParser

HEADER = "/* This file is autogenerated. Do not edit manually.  */"


@pytest.fixture
def table():
    """Create a small resource table."""
    return ResourceTable(
        strings={
            "app_title": "Hello",
            "quote": 'Say "hi"',
            "fare": "Don't pay $5",
        },
        plurals={"stops": {"one": "%d stop", "other": "%d stops"}},
    )


@pytest.fixture
def exporter():
    """Create exporter instance."""
    return AppleStringsExporter()


class TestDirectExport:
    """Tests for direct .strings exports."""

    def test_format(self, exporter, table):
        """Test the complete direct export."""
        content = exporter.format(exporter.direct_entries(table, "pt-BR"))
        assert content == "\n".join([
            HEADER,
            '"strings.app_title" = "Hello";',
            '"strings.quote" = "Say \\"hi\\"";',
            '"strings.fare" = "Don\\\'t pay \\$5";',
            '"plurals.one.stops" = "%d stop";',
            '"plurals.other.stops" = "%d stops";',
            '"meta.lang" = "pt";',
            '"meta.androidLocale" = "pt-BR";',
        ]) + "\n"

    def test_lang_without_region(self, exporter):
        """Test a bare language tag is used for both metadata keys."""
        entries = exporter.direct_entries(ResourceTable(), "de")
        assert [(e.key, e.value) for e in entries] == [
            ("meta.lang", "de"),
            ("meta.androidLocale", "de"),
        ]

    def test_roundtrip(self, exporter, table):
        """Test reading an export back gives the original strings."""
        content = exporter.format(exporter.direct_entries(table, "en"))
        parsed = StringsParser().parse_to_dict(content)

        strings = {
            key[len("strings."):]: value
            for key, value in parsed.items()
            if key.startswith("strings.")
        }
        assert strings == dict(table.strings)

    def test_export_writes_file(self, exporter, table):
        """Test the export creates parent directories and writes UTF-8."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "pt-BR.lproj" / "Localizable.strings"
            count = exporter.export(table, "pt-BR", path)

            assert count == 7
            assert path.read_text(encoding="utf-8").startswith(HEADER + "\n")

    def test_escape_error_writes_nothing(self, exporter):
        """Test an escape failure leaves no output file."""
        bad = ResourceTable(strings={"bad": "tab\\there"})
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "out.strings"
            with pytest.raises(EscapeError):
                exporter.export(bad, "en", path)
            assert not path.exists()


class TestMappedExport:
    """Tests for mapped .strings exports."""

    MAP = "\n".join([
        "ios.title = string.app_title",
        '"ios.quote" = "string.quote";',
        "ios.count = plurals.stops",
        "ios.missing = string.nope",
        "this line has no separator",
        "a = b = c",
    ])

    def test_mapped_lines(self, exporter, table):
        """Test only resolvable string mappings are exported."""
        entries = exporter.mapped_entries(table, IdentifierMap.parse(self.MAP))
        content = exporter.format(entries)

        assert content == "\n".join([
            HEADER,
            '"ios.title" = "Hello";',
            '"ios.quote" = "Say \\"hi\\"";',
        ]) + "\n"

    def test_title_mapping(self, exporter):
        """Test a single mapping line produces the renamed entry."""
        table = ResourceTable(strings={"app_title": "Hello"})
        mapping = IdentifierMap.parse("ios.title = string.app_title")
        content = exporter.format(exporter.mapped_entries(table, mapping))
        assert '"ios.title" = "Hello";' in content.splitlines()

    def test_export_mapped_writes_file(self, exporter, table):
        """Test the mapped export returns the number of entries."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "Localizable.strings"
            count = exporter.export_mapped(table, IdentifierMap.parse(self.MAP), path)

            assert count == 2
            assert path.exists()

    def test_empty_map(self, exporter, table):
        """Test an empty mapping only writes the header."""
        entries = exporter.mapped_entries(table, IdentifierMap.parse(""))
        assert exporter.format(entries) == HEADER + "\n"
