"""
CLI tests.

Runs the click commands in-process with CliRunner.
"""

from click.testing import CliRunner
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from catalog_codepoints import __version__
from catalog_codepoints.cli.main import cli


def build_font(path, codepoints):
    """Build a minimal TrueType font mapping the given codepoints."""
    glyph_order = [".notdef"] + [f"uni{cp:04X}" for cp in codepoints]
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({cp: f"uni{cp:04X}" for cp in codepoints})
    fb.setupGlyf({name: TTGlyphPen(None).glyph() for name in glyph_order})
    fb.setupHorizontalMetrics({name: (500, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Test", "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()
    fb.save(str(path))
    return path


def test_version():
    """Test --version prints the package version."""
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_extract(po_tree):
    """Test extract writes .ucp files into the top-level directory."""
    po_tree("fr/app.po", 'msgstr "caf\\u00e9"\n')

    result = CliRunner().invoke(cli, ["extract", "-t", str(po_tree.root), "-l", "fr", "-d", "0"])

    assert result.exit_code == 0
    text = (po_tree.root / "SuSESans.ucp").read_text(encoding="utf-8")
    assert text == "0x0061 a\n0x0063 c\n0x0066 f\n0x00e9 é\n"


def test_extract_debug_does_not_change_output(po_tree, tmp_path):
    """Test the debug selector leaves output files unchanged."""
    po_tree("ja/app.po", 'msgstr "日本\\"語\\n"\n')
    runner = CliRunner()

    quiet = runner.invoke(
        cli, ["extract", "-t", str(po_tree.root), "-d", "0", "-o", str(tmp_path / "quiet")]
    )
    loud = runner.invoke(
        cli, ["extract", "-t", str(po_tree.root), "-d", "63", "-o", str(tmp_path / "loud")]
    )

    assert quiet.exit_code == 0
    assert loud.exit_code == 0
    for name in ["kochi.ucp", "SuSESans.ucp", "unassigned.ucp"]:
        assert (tmp_path / "quiet" / name).read_bytes() == (tmp_path / "loud" / name).read_bytes()


def test_extract_missing_root(tmp_path):
    """Test a missing top-level directory exits non-zero."""
    result = CliRunner().invoke(cli, ["extract", "-t", str(tmp_path / "missing")])
    assert result.exit_code == 1


def test_extract_bad_option():
    """Test unparseable options exit non-zero."""
    result = CliRunner().invoke(cli, ["extract", "-d", "lots"])
    assert result.exit_code == 2


def test_fonts():
    """Test the font table listing."""
    result = CliRunner().invoke(cli, ["fonts"])

    assert result.exit_code == 0
    assert "SuSESans: [all] 0x0020-0x036f, 0x1e00-0x1eff" in result.output
    assert "kochi: [ja] 0x2e80-0x312f, 0x3190-0x9fff, 0xf900-0xfaff" in result.output
    assert "zh_CN: SuSESans FreeSans gbsn" in result.output


def test_coverage(tmp_path):
    """Test coverage passes when the font maps every listed codepoint."""
    font = build_font(tmp_path / "test.ttf", [0x41, 0x42])
    ucp = tmp_path / "test.ucp"
    ucp.write_text("0x0041 A\n0x0042 B\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["coverage", str(font), str(ucp)])
    assert result.exit_code == 0


def test_coverage_missing(tmp_path):
    """Test coverage fails when the font lacks a listed codepoint."""
    font = build_font(tmp_path / "test.ttf", [0x41])
    ucp = tmp_path / "test.ucp"
    ucp.write_text("0x0041 A\n0x65e5 日\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["coverage", str(font), str(ucp)])
    assert result.exit_code == 1
