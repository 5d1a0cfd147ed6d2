"""
Prober - run a candidate gnuplot and capture what it says about itself.

gnuplot splits its banner and listings between stdout and stderr depending
on build and version, so both streams go to one temporary file. The child
gets a fixed amount of time to answer; a child that is still running after
that is killed and reaped, and whatever it wrote so far is returned.
"""

from __future__ import annotations
import contextlib
import os
import subprocess
import tempfile
import time

from ..errors import SpawnError
from ..obs.logging import get_logger

logger = get_logger("gnuplot_core")

# "show version", "set terminal", then blank lines to get past the pager
PROBE_COMMANDS = "show version\nset terminal\n" + "\n" * 9

PROBE_TIMEOUT_S = 2.0
TRANSCRIPT_PREFIX = "gnuplot_probe_"


def probe(executable_path: str) -> str:
    """
    Run ``executable_path`` with the probe commands and return its transcript.

    The temporary transcript file is removed before this returns, whether
    the probe succeeded or raised.

    Raises:
        SpawnError: The subprocess could not be started
    """
    fd, transcript_path = tempfile.mkstemp(prefix=TRANSCRIPT_PREFIX, suffix=".txt")
    started = time.monotonic()
    try:
        with os.fdopen(fd, "wb") as out:
            try:
                proc = subprocess.Popen(
                    [executable_path],
                    stdin=subprocess.PIPE,
                    stdout=out,
                    stderr=subprocess.STDOUT,
                )
            except OSError as e:
                raise SpawnError.for_path(executable_path, e) from e
            try:
                _send_commands(proc)
                returncode = _wait_or_kill(proc, executable_path)
            except BaseException:
                # Interrupted (e.g. Ctrl-C); the child must not outlive us
                proc.kill()
                proc.wait()
                raise

        with open(transcript_path, "rb") as f:
            raw = f.read()
    finally:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(transcript_path)

    logger.debug(
        "Probe finished",
        extra={
            "executable": executable_path,
            "returncode": returncode,
            "transcript_bytes": len(raw),
            "duration_ms": round((time.monotonic() - started) * 1000, 1),
        },
    )
    return raw.decode("utf-8", errors="replace")


def _send_commands(proc: subprocess.Popen) -> None:
    # A child that exits without reading stdin is judged by its transcript
    try:
        proc.stdin.write(PROBE_COMMANDS.encode("ascii"))
    except BrokenPipeError:
        logger.debug("Probe child closed stdin before reading commands")
    finally:
        try:
            proc.stdin.close()
        except BrokenPipeError:
            pass


def _wait_or_kill(proc: subprocess.Popen, executable_path: str) -> int:
    """Wait up to PROBE_TIMEOUT_S for the child; kill and reap it otherwise."""
    try:
        return proc.wait(timeout=PROBE_TIMEOUT_S)
    except subprocess.TimeoutExpired:
        logger.warning(
            f"gnuplot did not exit within {PROBE_TIMEOUT_S}s, killing it",
            extra={"executable": executable_path, "timeout_s": PROBE_TIMEOUT_S},
        )
        proc.kill()
        return proc.wait()
