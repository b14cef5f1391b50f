# src/subnetcalc/cli/__init__.py
from __future__ import annotations

from typing import Optional

import click

from ..config import AppCfg, LOG_LEVELS, load_env
from ..logging import setup_logging, get_logger
from ..terminal import TerminalError
from .. import __version__, tui


@click.command("subnetcalc")
@click.option("--env-file", default=None, type=click.Path(dir_okay=False),
              help="Load SUBNETCALC_* settings from this .env file.")
@click.option("--log-file", default=None, help="Also write log records to this file.")
@click.option("-q", "--quiet", is_flag=True, help="Don't print log records to the console.")
@click.option("--log-level", default=None,
              type=click.Choice(list(LOG_LEVELS), case_sensitive=False))
@click.option("--poll-interval", "poll_ms", type=int, default=None,
              help="Key poll timeout in milliseconds. [default: 100]")
@click.version_option(version=__version__, prog_name="subnetcalc")
def cli(env_file: Optional[str], log_file: Optional[str], quiet: bool, log_level: Optional[str], poll_ms: Optional[int]):
    """Interactive IPv4 subnet calculator.

    Press 'i' to type the address, 's' to type the mask, Enter to calculate
    and 'q' to quit.
    """
    load_env(env_file)
    try:
        cfg = AppCfg.from_env().with_overrides(
            log_file=log_file,
            log_level=log_level.upper() if log_level else None,
            poll_ms=poll_ms,
        )
        cfg.validate()
    except RuntimeError as e:
        raise click.ClickException(str(e))

    setup_logging(level=cfg.log_level, quiet=quiet, log_file=cfg.log_file)
    log = get_logger()
    log.debug(f"Config: {cfg}")

    try:
        tui.run(cfg)
    except TerminalError as e:
        raise click.ClickException(str(e))


def main():
    cli()


if __name__ == "__main__":
    main()
