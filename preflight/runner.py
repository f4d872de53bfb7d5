"""Запуск зондов и выбор репортера по формату вывода."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from preflight.constants import OUTPUT_FORMATS
from preflight.errors import SysinfoFailed, UnknownOutputFormat
from preflight.reporters.collector import ENCODERS, collect_and_print
from preflight.reporters.text import CliReporter

logger = logging.getLogger(__name__)


def check_output_format(output_format: str) -> str:
    """Проверить значение --output до запуска зондов."""
    if output_format not in OUTPUT_FORMATS:
        raise UnknownOutputFormat(output_format)
    return output_format


def run_sysinfo(
    probes,
    output_format: str,
    out: TextIO,
    color: Optional[bool] = None,
) -> None:
    """Один синхронный проход зондов с выводом в выбранном формате.

    Args:
        probes: Движок зондов с методом probe(reporter).
        output_format: text, json или yaml.
        out: Приёмник вывода (обычно stdout команды); не закрывается.
        color: Принудительно включить/выключить цвет для text.

    Raises:
        UnknownOutputFormat: Формат не распознан; зонды не запускались.
        SysinfoFailed: Хотя бы один зонд rejected или error.
        ReportWriteError: Запись в приёмник не удалась.
    """
    check_output_format(output_format)
    logger.debug("Запуск зондов, формат %s", output_format)

    if output_format == "text":
        reporter = CliReporter(out, color=color)
        probes.probe(reporter)
        if reporter.failed:
            raise SysinfoFailed()
        return

    collector = collect_and_print(probes, out, ENCODERS[output_format])
    logger.debug("Документ %s записан: %d записей", output_format, len(collector.results))
