import os
import tempfile

import pytest

import gnuplot_core

GNUPLOT_TRANSCRIPT = """
\tG N U P L O T
\tVersion 5.2 patchlevel 4    last modified 2018-06-01

\tCopyright (C) 1986-1993, 1998, 2004, 2007-2018
\tThomas Williams, Colin Kelley and many others

\tgnuplot home:     http://www.gnuplot.info

Available terminal types:
           png  PNG images using libgd and TrueType fonts
           x11  X11 Window System interactive terminal
Press return for more:
           svg  W3C Scalable Vector Graphics

"""


@pytest.fixture
def gnuplot_transcript():
    return GNUPLOT_TRANSCRIPT


@pytest.fixture
def fake_gnuplot(tmp_path):
    """
    Factory for fake gnuplot executables.

    ``body`` is shell script text run after the shebang; the returned
    path lives at ``<tmp_path>/<subdir>/gnuplot``.
    """
    def make(body, subdir="bin", mode=0o755):
        d = tmp_path / subdir
        d.mkdir(exist_ok=True)
        path = d / "gnuplot"
        path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
        os.chmod(path, mode)
        return str(path)
    return make


@pytest.fixture
def genuine_gnuplot(fake_gnuplot):
    """Fake gnuplot that reads its commands and prints a 5.2pl4 transcript."""
    # Shell builtins only, so the fake still works when a test narrows PATH
    return fake_gnuplot(
        "while read -r _; do :; done\n"
        "while IFS= read -r line; do printf '%s\\n' \"$line\"; done <<'OUT'\n"
        + GNUPLOT_TRANSCRIPT + "OUT\n"
    )


@pytest.fixture
def private_tempdir(tmp_path, monkeypatch):
    """Point tempfile at an empty directory so leftover transcripts are visible."""
    d = tmp_path / "tmp"
    d.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(d))
    return d


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's settings file and GNUPLOT_BINARY out of every test."""
    cfg = tmp_path / "config"
    cfg.mkdir()
    monkeypatch.setenv("GNUPLOT_CORE_CONFIG_DIR", str(cfg))
    monkeypatch.delenv("GNUPLOT_BINARY", raising=False)
    gnuplot_core.reset_discovery_cache()
    yield cfg
    gnuplot_core.reset_discovery_cache()
