"""Исключения preflight.

Все ошибки уровня команды наследуют click-исключения: click сам печатает
`Error: ...` в stderr и выставляет код выхода.
"""

from __future__ import annotations

import click


class PreflightError(click.ClickException):
    """Базовая ошибка preflight (код выхода 1)."""


class ReportWriteError(PreflightError):
    """Запись в приёмник вывода не удалась; отчёт прерван на середине."""

    def __init__(self, cause: OSError):
        self.cause = cause
        super().__init__(f"failed to write report: {cause}")


class SysinfoFailed(PreflightError):
    """Агрегированный провал: хотя бы один зонд rejected или error.

    Деталей по отдельным зондам не несёт.
    """

    def __init__(self) -> None:
        super().__init__("sysinfo failed")


class UnknownOutputFormat(click.BadParameter):
    """Неизвестное значение --output. Проверяется до запуска зондов."""

    def __init__(self, output_format: str):
        self.output_format = output_format
        super().__init__(
            f"unknown output format: {output_format!r}",
            param_hint="'--output'",
        )
