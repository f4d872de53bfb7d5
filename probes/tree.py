"""Дерево зондов: автообнаружение, фильтрация по ролям, последовательный обход."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from typing import Iterable

from pydantic import BaseModel, Field

from probes.base import BaseProbe, ProbeEngineError, ProbeError, Reporter

logger = logging.getLogger(__name__)

CATALOG_PACKAGE = "probes.host"


class SysinfoSpec(BaseModel):
    """Параметры прогона sysinfo."""

    controller_role_enabled: bool = Field(True, description="Проверки контроллера")
    worker_role_enabled: bool = Field(True, description="Проверки воркера")
    data_dir: str = Field(..., description="Директория данных")
    add_debug_probes: bool = Field(False, description="Отладочные зонды")

    def enabled_roles(self) -> frozenset[str]:
        roles = set()
        if self.controller_role_enabled:
            roles.add("controller")
        if self.worker_role_enabled:
            roles.add("worker")
        return frozenset(roles)

    def new_sysinfo_probes(self, package: str = CATALOG_PACKAGE) -> ProbeTree:
        """Собрать дерево зондов для этих параметров."""
        return ProbeTree(self, select_probes(discover_probes(package), self))


def discover_probes(package: str = CATALOG_PACKAGE) -> list[BaseProbe]:
    """Автообнаружение зондов.

    Сканирует пакет и импортирует все классы, наследующие BaseProbe.
    """
    try:
        pkg = importlib.import_module(package)
    except ModuleNotFoundError as exc:
        raise ProbeEngineError(f"пакет зондов {package} не найден") from exc

    found: list[BaseProbe] = []
    seen: set[type] = set()
    for module_info in pkgutil.iter_modules(pkg.__path__):
        module = importlib.import_module(f"{package}.{module_info.name}")
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if (
                isinstance(attr, type)
                and issubclass(attr, BaseProbe)
                and attr is not BaseProbe
                and attr.name
                and attr not in seen
            ):
                seen.add(attr)
                found.append(attr())
    return found


def select_probes(probes: Iterable[BaseProbe], spec: SysinfoSpec) -> list[BaseProbe]:
    """Отфильтровать зонды по ролям и отладке, упорядочить по пути.

    Raises:
        ProbeEngineError: Два зонда претендуют на один путь.
    """
    roles = spec.enabled_roles()
    selected: dict[tuple[str, ...], BaseProbe] = {}
    for probe in probes:
        if probe.roles and not probe.roles & roles:
            continue
        if probe.debug and not spec.add_debug_probes:
            continue
        key = tuple(probe.path)
        if key in selected:
            raise ProbeEngineError(
                f"зонды {selected[key].name} и {probe.name} делят путь {'/'.join(key)}"
            )
        selected[key] = probe
    return [selected[key] for key in sorted(selected)]


class ProbeTree:
    """Упорядоченный набор зондов; probe() обходит его один раз."""

    def __init__(self, spec: SysinfoSpec, probes: list[BaseProbe]):
        self.spec = spec
        self.probes = probes

    def probe(self, reporter: Reporter) -> None:
        """Запустить все зонды последовательно.

        Ошибки измерения (ProbeError) уходят репортеру как error;
        исключения самого репортера не перехватываются.
        """
        for probe in self.probes:
            logger.debug("Запуск зонда %s", probe.name)
            try:
                probe.probe(reporter, self.spec)
            except ProbeError as exc:
                logger.debug("[%s] ошибка: %s", probe.name, exc)
                reporter.error(probe, exc)

    def __len__(self) -> int:
        return len(self.probes)
