import shutil
import tempfile
import unittest
from pathlib import Path

import pytest

from pyslip import StyleAggregationError, StyledComponent, StyleFragment, View, render_styles
from pyslip.compiler.styles import BANNER, build_stylesheet


class Card(View, StyledComponent):
    component_css = ".card{}"

    @property
    def body(self):
        return []


class FancyCard(Card):
    pass


class Badge(StyledComponent):
    component_name = "Status Badge"
    component_css = ".badge{color:green}"


class SmallBadge(Badge):
    pass


class TestComponentName(unittest.TestCase):
    def test_default_name_is_type_name(self) -> None:
        self.assertEqual(Card().component_name, "Card")
        self.assertEqual(FancyCard().component_name, "FancyCard")

    def test_explicit_name_is_inherited(self) -> None:
        self.assertEqual(Badge().component_name, "Status Badge")
        self.assertEqual(SmallBadge().component_name, "Status Badge")

    def test_fragment_name(self) -> None:
        self.assertEqual(StyleFragment(".x{}").component_name, "StyleFragment")
        self.assertEqual(StyleFragment(".x{}", name="X").component_name, "X")


class TestRenderStyles(unittest.TestCase):
    def setUp(self) -> None:
        self.test_dir = tempfile.mkdtemp()
        self.tmp_path = Path(self.test_dir).resolve()
        self.base = self.tmp_path / "base.css"
        self.base.write_text(".a{color:red}", encoding="utf-8")

    def tearDown(self) -> None:
        shutil.rmtree(self.test_dir)

    def test_single_component(self) -> None:
        output = self.tmp_path / "out.css"
        render_styles([StyleFragment(".card{}", name="Card")], self.base, output)

        self.assertEqual(
            output.read_text(encoding="utf-8"),
            ".a{color:red}\n\n/* Component-specific styles */\n/* Card */\n.card{}\n\n",
        )

    def test_order_and_content_preserved(self) -> None:
        output = self.tmp_path / "out.css"
        fragments = [Badge(), Card(), StyleFragment("/* raw */ .z > .y {}", name="Raw")]
        render_styles(fragments, self.base, output)

        expected = (
            ".a{color:red}\n\n"
            + BANNER
            + "/* Status Badge */\n.badge{color:green}\n\n"
            + "/* Card */\n.card{}\n\n"
            + "/* Raw */\n/* raw */ .z > .y {}\n\n"
        )
        self.assertEqual(output.read_text(encoding="utf-8"), expected)

    def test_no_components(self) -> None:
        output = self.tmp_path / "out.css"
        render_styles([], self.base, output)
        self.assertEqual(output.read_text(encoding="utf-8"), ".a{color:red}\n\n" + BANNER)

    def test_creates_missing_directories(self) -> None:
        output = self.tmp_path / "dist" / "assets" / "styles.css"
        result = render_styles([Card()], self.base, output)
        self.assertEqual(result, output)
        self.assertTrue(output.exists())

    def test_idempotent(self) -> None:
        first = self.tmp_path / "one" / "styles.css"
        second = self.tmp_path / "two" / "styles.css"
        components = [Card(), Badge()]
        render_styles(components, self.base, first)
        render_styles(components, self.base, second)
        self.assertEqual(first.read_bytes(), second.read_bytes())

    def test_missing_base_writes_nothing(self) -> None:
        output = self.tmp_path / "out" / "styles.css"
        with self.assertRaises(StyleAggregationError):
            render_styles([Card()], self.tmp_path / "missing.css", output)
        self.assertFalse(output.exists())
        self.assertFalse(output.parent.exists())

    def test_unwritable_destination_leaves_no_file(self) -> None:
        blocker = self.tmp_path / "blocker"
        blocker.write_text("not a directory")
        with self.assertRaises(StyleAggregationError):
            render_styles([Card()], self.base, blocker / "styles.css")
        self.assertEqual(sorted(p.name for p in self.tmp_path.iterdir()), ["base.css", "blocker"])

    def test_replaces_existing_output(self) -> None:
        output = self.tmp_path / "styles.css"
        output.write_text("stale", encoding="utf-8")
        render_styles([Card()], self.base, output)
        self.assertTrue(output.read_text(encoding="utf-8").startswith(".a{color:red}"))
        self.assertEqual(sorted(p.name for p in self.tmp_path.iterdir()), ["base.css", "styles.css"])


def test_progress_line(tmp_path, capsys):
    base = tmp_path / "base.css"
    base.write_text("", encoding="utf-8")
    render_styles([Card(), Badge()], base, tmp_path / "site.css")

    out = capsys.readouterr().out
    assert "Rendered styles: 2 components" in out
    assert "site.css" in out


def test_build_stylesheet_accepts_duck_typed_components():
    class Plain:
        component_css = "p{}"

    assert build_stylesheet([Plain()], "") == "\n\n" + BANNER + "/* Plain */\np{}\n\n"


def test_base_line_endings_are_preserved(tmp_path):
    base = tmp_path / "base.css"
    base.write_bytes(b"a{}\r\nb{}")
    output = tmp_path / "out.css"
    render_styles([], base, output)
    assert output.read_bytes().startswith(b"a{}\r\nb{}\n\n")


def test_undecodable_base_is_an_error(tmp_path):
    base = tmp_path / "base.css"
    base.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(StyleAggregationError):
        render_styles([], base, tmp_path / "out.css")
