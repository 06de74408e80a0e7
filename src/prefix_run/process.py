"""Process supervisor — runs a shell command and relays its output."""

import os
import subprocess
import sys

from prefix_run import log
from prefix_run.outcome import Outcome
from prefix_run.prefix import LinePrefixWriter
from prefix_run.relay import start_relay


def shell_command(command: str) -> list[str]:
    """Wrap a command line for the platform shell."""
    if sys.platform == "win32":
        return ["cmd.exe", "/C", command]
    return ["/bin/sh", "-c", command]


def run_streaming(
    command: str,
    prefix: bytes = b"",
    stdout=None,
    stderr=None,
    env: dict[str, str] | None = None,
    cwd: str | None = None,
) -> Outcome:
    """Run a shell command, relaying stdout/stderr (optionally prefixed).

    Returns once the child has exited and both streams are fully drained.
    """
    args = shell_command(command)

    merged_env = None
    if env is not None:
        merged_env = {**os.environ, **env}

    try:
        proc = subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            bufsize=0,
            env=merged_env,
            cwd=cwd,
        )
    except OSError as e:
        log.error(f"start command: {e}")
        return Outcome(error=str(e))

    out_sink = stdout if stdout is not None else sys.stdout.buffer
    err_sink = stderr if stderr is not None else sys.stderr.buffer
    if prefix:
        # one writer per stream: line starts are tracked independently
        out_sink = LinePrefixWriter(out_sink, prefix)
        err_sink = LinePrefixWriter(err_sink, prefix)

    relays = [
        start_relay(proc.stdout, out_sink, "stdout"),
        start_relay(proc.stderr, err_sink, "stderr"),
    ]
    returncode = proc.wait()
    for thread in relays:
        thread.join()
    proc.stdout.close()
    proc.stderr.close()
    return Outcome(returncode=returncode)
