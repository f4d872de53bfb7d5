"""Коллектор результатов для структурированного вывода (JSON/YAML).

Всё или ничего: при любом rejected/error документ не печатается вовсе,
потребитель-машина не должна получить частичный набор результатов.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, TextIO

import yaml

from preflight.errors import ReportWriteError, SysinfoFailed
from preflight.models import ProbeCategory, ProbeResult
from preflight.reporters.base import probe_path, prop_string
from probes.base import ProbeDesc, ProbedProp

logger = logging.getLogger(__name__)

Encoder = Callable[[Any], str]


def encode_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def encode_yaml(data: Any) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)


ENCODERS: dict[str, Encoder] = {
    "json": encode_json,
    "yaml": encode_yaml,
}


class ResultsCollector:
    """Накопитель записей: по одной на вызов, в порядке вызовов."""

    def __init__(self) -> None:
        self.results: list[ProbeResult] = []
        self.failed = False

    def pass_(self, desc: ProbeDesc, prop: ProbedProp) -> None:
        self._add(desc, ProbeCategory.PASS, prop=prop_string(prop))

    def warn(self, desc: ProbeDesc, prop: ProbedProp, msg: str = "") -> None:
        self._add(desc, ProbeCategory.WARNING, prop=prop_string(prop), message=msg)

    def reject(self, desc: ProbeDesc, prop: ProbedProp, msg: str = "") -> None:
        self._add(desc, ProbeCategory.REJECTED, prop=prop_string(prop), message=msg)

    def error(self, desc: ProbeDesc, err: Optional[BaseException]) -> None:
        detail = str(err) if err is not None else ""
        self._add(desc, ProbeCategory.ERROR, error=detail or None)

    def _add(self, desc: ProbeDesc, category: ProbeCategory, **fields: Any) -> None:
        if category.is_failure:
            self.failed = True
        self.results.append(ProbeResult(
            path=probe_path(desc),
            display_name=desc.display_name,
            category=category,
            **fields,
        ))

    def document(self) -> list[dict]:
        """Накопленные записи в виде, пригодном для кодировщика."""
        return [r.to_document() for r in self.results]


def collect_and_print(probes, out: TextIO, encode: Encoder) -> ResultsCollector:
    """Прогнать зонды в коллектор и один раз записать документ.

    Args:
        probes: Движок зондов с методом probe(reporter).
        out: Приёмник вывода; не закрывается.
        encode: Кодировщик списка записей в текст.

    Returns:
        Заполненный коллектор.

    Raises:
        SysinfoFailed: Хотя бы один зонд rejected или error; ничего не записано.
        ReportWriteError: Запись в приёмник не удалась.
    """
    collector = ResultsCollector()
    probes.probe(collector)
    logger.debug("Собрано записей: %d", len(collector.results))

    if collector.failed:
        raise SysinfoFailed()

    text = encode(collector.document())
    try:
        out.write(text)
        out.flush()
    except OSError as exc:
        raise ReportWriteError(exc) from exc
    return collector
