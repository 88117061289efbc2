"""
hwgate command-line interface.

Usage::

    hwgate serve --port 8080
    hwgate check
    hwgate check --json
"""

from __future__ import annotations

import json
import logging
import sys

import click

from . import __version__

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="hwgate")
def main() -> None:
    """hwgate: check this machine against minimum hardware requirements."""


# ---------------------------------------------------------------------------
# hwgate serve
# ---------------------------------------------------------------------------


@main.command()
@click.option("--port", "-p", default=8080, help="Port to listen on.")
@click.option("--host", default="0.0.0.0", help="Host to bind to.")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(LOG_LEVELS),
    help="Logging level for hwgate and uvicorn (default: info).",
)
def serve(port: int, host: str, log_level: str) -> None:
    """Serve the requirement check over HTTP.

    Every request to / probes the host again and returns an HTML page
    with the result.  JSON is available at /v1/diagnosis.
    """
    from .server import run_server

    _configure_logging(log_level)
    run_server(host=host, port=port, log_level=log_level)


# ---------------------------------------------------------------------------
# hwgate check
# ---------------------------------------------------------------------------


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def check(as_json: bool) -> None:
    """Probe this machine once and print the result.

    Exits with status 1 when the requirements are not met.
    """
    from .evaluator import evaluate
    from .hardware import probe_hardware

    _configure_logging("warning")
    diagnosis = evaluate(probe_hardware())

    if as_json:
        click.echo(json.dumps(diagnosis.to_dict(), indent=2))
        sys.exit(0 if diagnosis.meets else 1)

    snapshot = diagnosis.snapshot
    if snapshot is not None:
        click.secho("\n  Hardware\n", bold=True)
        click.echo(f"    Cores:  {snapshot.cores}")
        click.echo(f"    Clock:  {snapshot.clock_ghz:.2f} GHz")
        click.echo(f"    Memory: {snapshot.memory_gb} GB")
        click.echo(f"    Disk:   {snapshot.disk_gb} GB free")
        if snapshot.diagnostics:
            click.echo()
            click.secho("  Diagnostics", bold=True, fg="yellow")
            for d in snapshot.diagnostics:
                click.echo(f"    • {d}")
        click.echo()

    if diagnosis.meets:
        click.secho(f"  {diagnosis.summary}", fg="green", bold=True)
        click.echo()
        return

    click.secho(f"  {diagnosis.summary}", fg="red", bold=True)
    click.echo(f"  {diagnosis.reason_header}")
    for dimension in diagnosis.failed_dimensions:
        click.echo(f"    • {diagnosis.message_for(dimension)}")
    click.echo()
    sys.exit(1)


if __name__ == "__main__":
    main()
