"""Integration tests for the localization service and CLI."""

import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from localizer.cli import cli
from localizer.config import GeneratorConfig
from localizer.core import LocalizeService
from localizer.errors import EscapeError, ParseError
from localizer.strings import StringsParser

STRINGS_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="app_title">Hello</string>
    <string name="card_blank">This card is blank</string>
    <plurals name="trips">
        <item quantity="one">%d trip</item>
        <item quantity="other">%d trips</item>
    </plurals>
</resources>
"""

PACKAGE_DIR = Path("kotlin", "au", "id", "micolous", "metrodroid", "multi")


class TestLocalizeService:
    """Integration tests for LocalizeService."""

    @pytest.fixture
    def temp_dir(self):
        """Create temporary directory with a resource tree."""
        with tempfile.TemporaryDirectory() as tmpdir:
            base = Path(tmpdir)
            values = base / "res" / "values"
            values.mkdir(parents=True)
            (values / "strings.xml").write_text(STRINGS_XML, encoding="utf-8")

            drawable = base / "res" / "drawable"
            drawable.mkdir()
            (drawable / "icon.png").write_bytes(b"")
            (drawable / "logo.xml").write_bytes(b"")

            yield base

    def test_generate_localize(self, temp_dir):
        """Test the full module generation run."""
        service = LocalizeService()
        report = service.generate_localize(
            temp_dir / "out",
            temp_dir / "res" / "values" / "strings.xml",
            drawable_dirs=[temp_dir / "res" / "drawable"],
        )

        assert report.strings == 2
        assert report.plurals == 1
        assert report.drawables == 2
        assert len(report.files_written) == 5

        jvm = (temp_dir / "out" / "jvmCliMain" / PACKAGE_DIR / "R.kt").read_text(encoding="utf-8")
        assert 'actual val card_blank = StringResource("card_blank", "This card is blank")' in jvm
        assert 'actual val logo = DrawableResource("logo")' in jvm

    def test_every_contract_identifier_bound(self, temp_dir):
        """Test each binding module mentions every contract identifier."""
        service = LocalizeService()
        report = service.generate_localize(
            temp_dir / "out",
            temp_dir / "res" / "values" / "strings.xml",
            drawable_dirs=[temp_dir / "res" / "drawable"],
        )

        for path in report.files_written[1:]:
            content = path.read_text(encoding="utf-8")
            for name in ["app_title", "card_blank", "trips", "icon", "logo"]:
                assert content.count(f"actual val {name} ") == 1

    def test_generate_apple_strings(self, temp_dir):
        """Test the direct export can be read back."""
        output = temp_dir / "ios" / "de.lproj" / "Localizable.strings"
        report = LocalizeService().generate_apple_strings(
            output, temp_dir / "res" / "values" / "strings.xml", "de-AT"
        )

        assert report.entries == 6
        parsed = StringsParser().parse_to_dict(output.read_text(encoding="utf-8"))
        assert parsed["strings.app_title"] == "Hello"
        assert parsed["plurals.other.trips"] == "%d trips"
        assert parsed["meta.lang"] == "de"
        assert parsed["meta.androidLocale"] == "de-AT"

    def test_generate_mapped_apple_strings(self, temp_dir):
        """Test the mapped export skips unusable lines without failing."""
        map_file = temp_dir / "map.strings"
        map_file.write_text(
            'ios.title = string.app_title\n'
            '"ios.blank" = "string.card_blank";\n'
            'ios.trips = plurals.trips\n'
            'garbage\n',
            encoding="utf-8"
        )
        output = temp_dir / "ios" / "Mapped.strings"
        report = LocalizeService().generate_mapped_apple_strings(
            output, temp_dir / "res" / "values" / "strings.xml", map_file
        )

        assert report.entries == 2
        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines[1:] == [
            '"ios.title" = "Hello";',
            '"ios.blank" = "This card is blank";',
        ]

    def test_malformed_xml_aborts(self, temp_dir):
        """Test a broken strings.xml aborts before writing."""
        broken = temp_dir / "broken.xml"
        broken.write_text("<resources><string name='a'>", encoding="utf-8")

        with pytest.raises(ParseError):
            LocalizeService().generate_localize(temp_dir / "out", broken)
        assert not (temp_dir / "out").exists()

    def test_plural_rules_written(self, temp_dir):
        """Test a CLDR rules file adds PluralRules.kt to the contract."""
        rules = temp_dir / "plurals.xml"
        rules.write_text(
            '<supplementalData><plurals type="cardinal">'
            '<pluralRules locales="en">'
            '<pluralRule count="one">i = 1 and v = 0 @integer 1</pluralRule>'
            '<pluralRule count="other"> @integer 0, 2~16</pluralRule>'
            '</pluralRules></plurals></supplementalData>',
            encoding="utf-8"
        )
        config = GeneratorConfig(fallback_flavours=["iOSMain"])
        report = LocalizeService(config).generate_localize(
            temp_dir / "out",
            temp_dir / "res" / "values" / "strings.xml",
            plural_rules_file=rules,
        )

        assert report.files_written[-1].name == "PluralRules.kt"
        content = report.files_written[-1].read_text(encoding="utf-8")
        assert '"one" to "i = 1",' in content
        assert '"other" to "else",' in content


class TestCli:
    """Tests for the click command line."""

    @pytest.fixture
    def temp_dir(self):
        """Create temporary directory with a strings.xml."""
        with tempfile.TemporaryDirectory() as tmpdir:
            base = Path(tmpdir)
            (base / "strings.xml").write_text(STRINGS_XML, encoding="utf-8")
            yield base

    def test_generate(self, temp_dir):
        """Test the generate command writes every module."""
        result = CliRunner().invoke(cli, [
            "generate", str(temp_dir / "out"),
            "--strings", str(temp_dir / "strings.xml"),
            "--fallback-flavour", "iOSMain",
        ])

        assert result.exit_code == 0, result.output
        assert "2 strings, 1 plurals, 0 drawables" in result.output
        assert (temp_dir / "out" / "iOSMain" / PACKAGE_DIR / "R.kt").exists()
        assert not (temp_dir / "out" / "jvmCliMain").exists()

    def test_apple_strings(self, temp_dir):
        """Test the apple-strings command."""
        output = temp_dir / "en.lproj" / "Localizable.strings"
        result = CliRunner().invoke(cli, [
            "apple-strings", str(output), str(temp_dir / "strings.xml"), "--lang", "en",
        ])

        assert result.exit_code == 0, result.output
        assert "Wrote 6 entries" in result.output
        assert '"meta.lang" = "en";' in output.read_text(encoding="utf-8")

    def test_mapped_strings(self, temp_dir):
        """Test the mapped-strings command."""
        map_file = temp_dir / "map.txt"
        map_file.write_text("ios.title = string.app_title\n", encoding="utf-8")
        output = temp_dir / "Localizable.strings"

        result = CliRunner().invoke(cli, [
            "mapped-strings", str(output), str(temp_dir / "strings.xml"), str(map_file),
        ])

        assert result.exit_code == 0, result.output
        assert '"ios.title" = "Hello";' in output.read_text(encoding="utf-8")

    def test_escape_error_exit_status(self, temp_dir):
        """Test generation errors are reported with exit status 1."""
        bad = temp_dir / "bad.xml"
        bad.write_text(
            '<resources><string name="bad">tab\\there</string></resources>',
            encoding="utf-8"
        )
        result = CliRunner().invoke(cli, [
            "apple-strings", str(temp_dir / "out.strings"), str(bad), "--lang", "en",
        ])

        assert result.exit_code == 1
        assert "Unknown escape <t>" in result.output

    def test_parse(self, temp_dir):
        """Test the parse command lists exported entries."""
        strings_file = temp_dir / "Localizable.strings"
        strings_file.write_text('"greeting" = "Say \\"hi\\"";\n', encoding="utf-8")

        result = CliRunner().invoke(cli, ["parse", str(strings_file)])

        assert result.exit_code == 0
        assert 'greeting = Say "hi"' in result.output

    def test_expr(self):
        """Test the expr command prints the simplified condition."""
        result = CliRunner().invoke(cli, ["expr", "n % 10 = 1 and n % 100 != 11"])

        assert result.exit_code == 0
        assert result.output == "n % 10 = 1 && n % 100 != 11\n"

    def test_service_escape_error(self, temp_dir):
        """Test the service raises EscapeError directly."""
        bad = temp_dir / "bad.xml"
        bad.write_text(
            '<resources><string name="bad">a\\qb</string></resources>',
            encoding="utf-8"
        )
        with pytest.raises(EscapeError):
            LocalizeService().generate_apple_strings(temp_dir / "x.strings", bad, "en")
