"""Click entry point."""

import sys

import click

from prefix_run import __version__, process
from prefix_run.config import PREFIX_ENV, RunConfig
from prefix_run.outcome import exit_code


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="prefix-run")
@click.option(
    "--command",
    "-c",
    default=None,
    help='Command string to execute (example: "ls -lah" or "ls")',
)
@click.option(
    "--prefix",
    "--apend-text-line",
    "-p",
    "prefix",
    default="",
    envvar=PREFIX_ENV,
    show_envvar=True,
    help="Prefix text to add at the beginning of each output line",
)
@click.pass_context
def main(ctx, command, prefix):
    """Run a shell command, prefixing each line of its stdout/stderr.

    Exits with the command's own exit code.

    \b
    Examples:
      prefix-run --command "ls -lah"
      prefix-run --prefix "[abc] " --command "ls"
    """
    try:
        cfg = RunConfig.from_options(command, prefix)
    except ValueError as e:
        raise click.UsageError(str(e), ctx=ctx)

    outcome = process.run_streaming(cfg.command, prefix=cfg.prefix)
    sys.exit(exit_code(outcome))


if __name__ == "__main__":
    main()
