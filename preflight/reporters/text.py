"""Текстовый репортер: по строке на зонд, с отступами и цветом."""

from __future__ import annotations

from typing import Optional, TextIO

import click

from preflight.errors import ReportWriteError
from preflight.models import ProbeCategory
from preflight.reporters.base import build_msg, indent, prop_string
from probes.base import ProbeDesc, ProbedProp


class CliReporter:
    """Печатает итоги зондов сразу по мере поступления.

    Цвет включается, только если приёмник является интерактивным терминалом
    (решает click); color=True/False переопределяет автоопределение.
    """

    def __init__(self, out: TextIO, color: Optional[bool] = None):
        self.out = out
        self.color = color
        self.failed = False

    def pass_(self, desc: ProbeDesc, prop: ProbedProp) -> None:
        value = prop_string(prop)
        self._line(
            desc,
            click.style(value, fg="green"),
            build_msg(value, ProbeCategory.PASS.value, ""),
        )

    def warn(self, desc: ProbeDesc, prop: ProbedProp, msg: str = "") -> None:
        value = prop_string(prop)
        self._line(
            desc,
            click.style(value, fg="yellow"),
            build_msg(value, ProbeCategory.WARNING.value, msg),
        )

    def reject(self, desc: ProbeDesc, prop: ProbedProp, msg: str = "") -> None:
        self.failed = True
        value = prop_string(prop)
        self._line(
            desc,
            click.style(value, fg="red", bold=True),
            build_msg(value, ProbeCategory.REJECTED.value, msg),
        )

    def error(self, desc: ProbeDesc, err: Optional[BaseException]) -> None:
        self.failed = True
        text = ProbeCategory.ERROR.value
        if err is not None:
            detail = str(err)
            if detail:
                text = f"{text}: {detail}"
        self._line(desc, click.style(text, fg="red", bold=True), "")

    def _line(self, desc: ProbeDesc, value: str, suffix: str) -> None:
        name = click.style(f"{desc.display_name}: ", fg="bright_white")
        try:
            click.echo(f"{indent(desc)}{name}{value}{suffix}", file=self.out, color=self.color)
        except OSError as exc:
            raise ReportWriteError(exc) from exc
