"""CLI entry point for the resource generator."""

from functools import wraps
from pathlib import Path

import click

from . import __version__
from .config import GeneratorConfig
from .core import LocalizeService
from .errors import LocalizerError
from .logging_config import setup_logging
from .plurals import transform_expr
from .strings import StringsParser


def _fail_on_error(command):
    """Report generation errors in red and exit with status 1."""
    @wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except LocalizerError as e:
            click.secho(f"Error: {e}", fg='red', err=True)
            raise SystemExit(1)
    return wrapper


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def cli(verbose: bool):
    """Generate multiplatform resource accessors and Apple .strings files."""
    setup_logging(verbose)


@cli.command()
@click.argument('output_dir', type=click.Path(file_okay=False, path_type=Path))
@click.option('--strings', 'strings_file', required=True,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Android strings.xml to read')
@click.option('--drawables', '-d', multiple=True,
              type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Drawable directory (repeatable)')
@click.option('--plural-rules', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='CLDR plurals.xml to render into the shared module')
@click.option('--package', default=GeneratorConfig.package, help='Kotlin package of the generated modules')
@click.option('--android-r', default=GeneratorConfig.android_r, help='Android R class for native lookups')
@click.option('--fallback-flavour', '-f', multiple=True,
              help='Source set without native resources (repeatable)')
@_fail_on_error
def generate(
    output_dir: Path,
    strings_file: Path,
    drawables: tuple[Path, ...],
    plural_rules: Path,
    package: str,
    android_r: str,
    fallback_flavour: tuple[str, ...]
):
    """Generate the shared R contract and one R module per platform.

    OUTPUT_DIR is the directory containing the source sets (e.g. src/).
    """
    config = GeneratorConfig(package=package, android_r=android_r)
    if fallback_flavour:
        config.fallback_flavours = list(fallback_flavour)

    service = LocalizeService(config=config)
    report = service.generate_localize(
        output_dir,
        strings_file,
        drawable_dirs=drawables,
        plural_rules_file=plural_rules
    )

    click.echo(
        f"Resources: {report.strings} strings, {report.plurals} plurals, "
        f"{report.drawables} drawables"
    )
    click.echo("\nFiles written:")
    for path in report.files_written:
        click.secho(f"  {path}", fg='green')


@cli.command('apple-strings')
@click.argument('output_file', type=click.Path(dir_okay=False, path_type=Path))
@click.argument('strings_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--lang', required=True, help='Android language tag, e.g. pt-BR')
@_fail_on_error
def apple_strings(output_file: Path, strings_file: Path, lang: str):
    """Export STRINGS_FILE as a namespaced .strings file.

    Keys are strings.<id> and plurals.<category>.<id>.
    """
    report = LocalizeService().generate_apple_strings(output_file, strings_file, lang)
    click.secho(f"Wrote {report.entries} entries to {output_file}", fg='green')


@cli.command('mapped-strings')
@click.argument('output_file', type=click.Path(dir_okay=False, path_type=Path))
@click.argument('strings_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('map_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_fail_on_error
def mapped_strings(output_file: Path, strings_file: Path, map_file: Path):
    """Export STRINGS_FILE under the ids listed in MAP_FILE.

    MAP_FILE holds lines of the form: external.id = string.android_id
    """
    report = LocalizeService().generate_mapped_apple_strings(
        output_file, strings_file, map_file
    )
    click.secho(f"Wrote {report.entries} entries to {output_file}", fg='green')


@cli.command()
@click.argument('file', type=click.Path(exists=True, path_type=Path))
def parse(file: Path):
    """Parse and display entries from a .strings file.

    FILE is the path to the .strings file to parse.
    """
    parser = StringsParser()
    entries = parser.parse_file(file)

    if not entries:
        click.secho("No entries found.", fg='yellow')
        return

    click.echo(f"Entries ({len(entries)} total):\n")

    for entry in entries:
        if entry.comment:
            click.secho(f"/* {entry.comment} */", fg='cyan')
        click.echo(f'{entry.key} = {entry.value}')


@cli.command()
@click.argument('condition')
def expr(condition: str):
    """Show how a CLDR plural CONDITION is simplified."""
    click.echo(transform_expr(condition))


if __name__ == '__main__':
    cli()
