"""CLI точка входа preflight: команда `preflight sysinfo`."""

from __future__ import annotations

import logging
import sys

import click

from preflight.constants import DATA_DIR_DEFAULT, ENV_PREFIX
from preflight.runner import check_output_format, run_sysinfo
from probes.base import ProbeEngineError
from probes.tree import SysinfoSpec

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

logger = logging.getLogger(__name__)


@click.group(context_settings={"auto_envvar_prefix": ENV_PREFIX})
@click.option("--verbose", "-v", is_flag=True, help="Отладочный журнал в stderr")
def cli(verbose: bool) -> None:
    """preflight — предполётные проверки хоста."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command(short_help="Display system information")
@click.option("--controller/--no-controller", default=True, show_default=True,
              help="Include controller-specific sysinfo")
@click.option("--worker/--no-worker", default=True, show_default=True,
              help="Include worker-specific sysinfo")
@click.option("--data-dir", default=DATA_DIR_DEFAULT, show_default=True,
              help="Data Directory")
@click.option("--output", "-o", default="text", show_default=True,
              help="Output format (valid values: text, json, yaml)")
@click.option("--debug/--no-debug", default=True, show_default=True,
              help="Include debug probes")
def sysinfo(controller: bool, worker: bool, data_dir: str, output: str, debug: bool) -> None:
    """Runs the pre-flight checks and issues the results to stdout."""
    check_output_format(output)

    spec = SysinfoSpec(
        controller_role_enabled=controller,
        worker_role_enabled=worker,
        data_dir=data_dir,
        add_debug_probes=debug,
    )
    try:
        probes = spec.new_sysinfo_probes()
    except ProbeEngineError as exc:
        raise click.ClickException(str(exc)) from exc
    logger.debug("Зондов в дереве: %d", len(probes))

    run_sysinfo(probes, output, sys.stdout)


if __name__ == "__main__":
    cli()
