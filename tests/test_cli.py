import sys
import textwrap

import pytest
from click.testing import CliRunner

from pyslip.cli.main import cli

SITE_MODULE = textwrap.dedent(
    """
    from pathlib import Path

    from pyslip import Site, StyleFragment
    from pyslip.elements import Radio

    site = Site(
        project_root=Path(__file__).parent,
        styles=[StyleFragment(".radio{}", name="Radio")],
    )
    site.add_page("/", Radio(name="plan", value="basic"), title="Plans")

    radio = Radio(name="plan", value="premium", checked=True)

    def make_radio():
        return Radio(name="factory")
    """
)


@pytest.fixture
def project(tmp_path, monkeypatch):
    (tmp_path / "pyslip_cli_site.py").write_text(SITE_MODULE, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "path", list(sys.path))
    yield tmp_path
    sys.modules.pop("pyslip_cli_site", None)


def test_build_command(project):
    result = CliRunner().invoke(cli, ["build", "pyslip_cli_site:site"])

    assert result.exit_code == 0, result.output
    assert "Build complete" in result.output
    assert "pages=1" in result.output
    assert "Rendered styles: 1 components" in result.output
    assert (project / "dist" / "index.html").exists()
    assert (project / "dist" / "styles.css").exists()


def test_build_rejects_non_site(project):
    result = CliRunner().invoke(cli, ["build", "pyslip_cli_site:radio"])
    assert result.exit_code != 0


def test_build_bad_target_format(project):
    result = CliRunner().invoke(cli, ["build", "pyslip_cli_site"])
    assert result.exit_code != 0


def test_render_command(project):
    result = CliRunner().invoke(cli, ["render", "pyslip_cli_site:radio"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == (
        '<input type="radio" name="plan" value="premium" checked />'
    )


def test_render_factory_as_document(project):
    result = CliRunner().invoke(
        cli, ["render", "pyslip_cli_site:make_radio", "--document", "--title", "Demo"]
    )

    assert result.exit_code == 0, result.output
    assert "<title>Demo</title>" in result.output
    assert '<input type="radio" name="factory" />' in result.output


def test_render_missing_attribute(project):
    result = CliRunner().invoke(cli, ["render", "pyslip_cli_site:nothing"])
    assert result.exit_code != 0


def test_version_option():
    from pyslip import __version__

    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
