"""
Main CLI entry point for catalog-codepoints.
"""

import click

from catalog_codepoints import __version__
from catalog_codepoints.config.debug import DebugFlag
from catalog_codepoints.config.paths import DEFAULT_ROOT


@click.group()
@click.version_option(version=__version__)
def cli():
    """Extract the codepoints used in gettext catalogs, per font subset."""
    pass


@cli.command()
@click.option(
    "-l",
    "--lang",
    "language",
    type=str,
    default=None,
    help="Only process this language subdirectory. Defaults to all configured languages.",
)
@click.option(
    "-t",
    "--top-dir",
    "root",
    type=str,
    default=DEFAULT_ROOT,
    show_default=True,
    help="Top-level directory of the translation tree.",
)
@click.option(
    "-d",
    "--debug",
    "debug",
    type=click.IntRange(min=0),
    default=int(DebugFlag.FILES),
    show_default=True,
    help="Debug selector bitmask (1 files, 2 lines, 4 strings, 8 codepoints, 16 dump chars, 32 dump).",
)
@click.option(
    "--discover",
    is_flag=True,
    help="Scan every xx / xx_YY directory under the top-level directory.",
)
@click.option(
    "-o",
    "--output-dir",
    type=str,
    default=None,
    help="Directory for the .ucp files. Defaults to the top-level directory.",
)
def extract(language, root, debug, discover, output_dir):
    """Write <font>.ucp files listing the codepoints each font needs."""
    from catalog_codepoints.pipeline.runner import run_extract
    from catalog_codepoints.utils.logging import set_debug_selector

    set_debug_selector(debug)
    run_extract(root, language, discover=discover, output_dir=output_dir)


@cli.command()
def fonts():
    """Show the font range table and the fonts used per language."""
    from catalog_codepoints.config.fonts import (
        DEFAULT_LANGUAGES,
        FONT_SPECS,
        language_to_fonts,
    )

    for spec in FONT_SPECS:
        languages = "all" if spec.languages is None else ", ".join(sorted(spec.languages))
        ranges = ", ".join(f"0x{low:04x}-0x{high:04x}" for low, high in spec.ranges)
        click.echo(f"{spec.name}: [{languages}] {ranges}")

    click.echo()
    for language, names in language_to_fonts(DEFAULT_LANGUAGES).items():
        click.echo(f"{language}: {' '.join(names)}")


@cli.command()
@click.argument("font", type=click.Path(exists=True, dir_okay=False))
@click.argument("ucp", type=click.Path(exists=True, dir_okay=False))
def coverage(font, ucp):
    """Check that FONT maps every codepoint listed in UCP."""
    import sys
    from pathlib import Path

    from catalog_codepoints.operations.coverage import check_coverage

    if not check_coverage(Path(font), Path(ucp)):
        sys.exit(1)


if __name__ == "__main__":
    cli()
