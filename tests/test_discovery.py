"""
Tests for end-to-end discovery, the result model, and the version gate.
"""

import os
import sys

import pytest
from pydantic import ValidationError

import gnuplot_core
from gnuplot_core import (
    DiscoveryResult,
    IdentityError,
    NotFoundError,
    ParseError,
    Terminal,
    VersionTooLowError,
    discover,
    require_version,
)
from gnuplot_core.discovery import meets_recommended, parse_version_string, version_at_least

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="fake gnuplot is a shell script")


def _result(version, patch_level=None, terminals=()):
    return DiscoveryResult(
        executable_path="/usr/bin/gnuplot",
        version=version,
        patch_level=patch_level,
        terminals=terminals,
    )


@posix_only
class TestDiscover:
    def test_discover_genuine(self, genuine_gnuplot):
        result = discover(env={"GNUPLOT_BINARY": genuine_gnuplot})
        assert result.executable_path == genuine_gnuplot
        assert result.version == "5.2"
        assert result.patch_level == "4"
        assert result.terminal_names == ("png", "x11", "svg")
        assert result.terms["x11"] == "X11 Window System interactive terminal"

    def test_discover_via_path(self, tmp_path, genuine_gnuplot):
        result = discover(env={"PATH": str(tmp_path / "bin")})
        assert result.executable_path == genuine_gnuplot

    def test_discover_via_settings(self, genuine_gnuplot):
        result = discover(env={}, settings={"binary": genuine_gnuplot})
        assert result.executable_path == genuine_gnuplot

    def test_not_gnuplot(self, fake_gnuplot, private_tempdir):
        gp = fake_gnuplot("cat > /dev/null\necho 'Python 3.12.1'\n")
        with pytest.raises(IdentityError) as exc:
            discover(env={"GNUPLOT_BINARY": gp})
        assert exc.value.path == gp
        assert list(private_tempdir.iterdir()) == []

    def test_unparsable_version(self, fake_gnuplot, private_tempdir):
        gp = fake_gnuplot("cat > /dev/null\necho '  G N U P L O T'\necho '  Version five'\n")
        with pytest.raises(ParseError):
            discover(env={"GNUPLOT_BINARY": gp})
        assert list(private_tempdir.iterdir()) == []

    def test_nothing_found(self, tmp_path):
        with pytest.raises(NotFoundError):
            discover(env={"PATH": str(tmp_path)})

    def test_relative_override_runs_checked_file(self, tmp_path, genuine_gnuplot, monkeypatch):
        """The file that passed the executable check is the one that gets run."""
        monkeypatch.chdir(tmp_path / "bin")
        monkeypatch.setenv("PATH", str(tmp_path))
        result = discover(env={"GNUPLOT_BINARY": "gnuplot"})
        assert os.path.samefile(result.executable_path, genuine_gnuplot)
        assert result.version == "5.2"

    def test_hung_gnuplot_still_parsed(self, fake_gnuplot, monkeypatch):
        from gnuplot_core.discovery import prober
        monkeypatch.setattr(prober, "PROBE_TIMEOUT_S", 0.5)
        gp = fake_gnuplot(
            "echo '  G N U P L O T'\n"
            "echo '  Version 4.6 patchlevel 6'\n"
            "echo 'Available terminal types:'\n"
            "echo '   dumb  ascii art for anything that prints text'\n"
            "exec sleep 30\n"
        )
        result = discover(env={"GNUPLOT_BINARY": gp})
        assert result.version == "4.6"
        assert result.patch_level == "6"
        assert result.terminals == (("dumb", "ascii art for anything that prints text"),)


@posix_only
class TestProcessCache:
    def test_discovery_runs_once(self, genuine_gnuplot, monkeypatch):
        monkeypatch.setenv("GNUPLOT_BINARY", genuine_gnuplot)
        first = gnuplot_core.get_discovery()
        monkeypatch.setenv("GNUPLOT_BINARY", "/nonexistent/gnuplot")
        assert gnuplot_core.get_discovery() is first

    def test_failure_not_cached(self, genuine_gnuplot, monkeypatch):
        monkeypatch.setenv("GNUPLOT_BINARY", "/nonexistent/gnuplot")
        with pytest.raises(NotFoundError):
            gnuplot_core.get_discovery()
        monkeypatch.setenv("GNUPLOT_BINARY", genuine_gnuplot)
        assert gnuplot_core.get_discovery().version == "5.2"

    def test_partial_settings_dict(self, genuine_gnuplot):
        result = gnuplot_core.get_discovery({"binary": genuine_gnuplot})
        assert result.executable_path == genuine_gnuplot

    def test_empty_settings_dict_skips_settings_file(self, genuine_gnuplot, isolated_config, monkeypatch):
        (isolated_config / "gnuplot.yml").write_text("binary: [broken\n", encoding="utf-8")
        monkeypatch.setenv("GNUPLOT_BINARY", genuine_gnuplot)
        assert gnuplot_core.get_discovery({}).version == "5.2"

    def test_settings_file_binary(self, genuine_gnuplot, isolated_config):
        (isolated_config / "gnuplot.yml").write_text(f"binary: {genuine_gnuplot}\n", encoding="utf-8")
        assert gnuplot_core.get_discovery().executable_path == genuine_gnuplot


class TestResult:
    def test_terms_later_duplicate_wins(self):
        result = _result("5.4", terminals=[("png", "old"), ("svg", "vector"), ("png", "new")])
        assert result.terminal_names == ("png", "svg", "png")
        assert dict(result.terms) == {"png": "new", "svg": "vector"}

    def test_terminals_coerced(self):
        result = _result("5.4", terminals=[("png", "PNG file output")])
        assert isinstance(result.terminals[0], Terminal)
        assert result.supports("png")
        assert not result.supports("aqua")

    def test_result_is_frozen(self):
        result = _result("5.4")
        with pytest.raises(ValidationError):
            result.version = "6.0"

    def test_terms_read_only(self):
        result = _result("5.4", terminals=[("png", "PNG file output")])
        with pytest.raises(TypeError):
            result.terms["png"] = "changed"

    def test_version_info(self):
        assert _result("5.10").version_info == (5, 10)

    def test_malformed_version_rejected(self):
        with pytest.raises(ValidationError, match="major.minor"):
            _result("5")

    def test_to_dict(self):
        result = _result("5.2", "4", [("png", "PNG file output")])
        assert result.to_dict() == {
            "executable_path": "/usr/bin/gnuplot",
            "version": "5.2",
            "patch_level": "4",
            "terminals": [{"name": "png", "description": "PNG file output"}],
        }


class TestVersionGate:
    def test_lower_requirement_passes(self):
        found = _result("5.0")
        assert require_version(found, "4.6") is found

    def test_equal_requirement_passes(self):
        require_version(_result("4.6"), "4.6")

    def test_higher_requirement_fails(self):
        with pytest.raises(VersionTooLowError) as exc:
            require_version(_result("4.6"), "5.5")
        assert exc.value.found == "4.6"
        assert exc.value.required == "5.5"
        assert "upgrade gnuplot" in str(exc.value)

    def test_minor_compared_numerically(self):
        assert version_at_least("5.10", "5.9")
        assert not version_at_least("5.2", "5.10")

    def test_malformed_requirement(self):
        with pytest.raises(ValueError):
            require_version(_result("5.0"), "five")

    def test_parse_version_string(self):
        assert parse_version_string(" 4.6 ") == (4, 6)
        for bad in ("4", "4.6.1", "4.x", ""):
            with pytest.raises(ValueError):
                parse_version_string(bad)

    def test_recommended(self):
        assert gnuplot_core.RECOMMENDED_VERSION == "4.6"
        assert meets_recommended(_result("5.0"))
        assert not meets_recommended(_result("4.4"))
