"""Базовые интерфейсы зондов: дескриптор, репортер, BaseProbe."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from probes.tree import SysinfoSpec

#: Измеренное значение зонда: всё, у чего есть str(), либо None
ProbedProp = Optional[Any]


class ProbeEngineError(Exception):
    """Жёсткая ошибка движка зондов: обход прерван, отчёт неполон."""


class ProbeError(Exception):
    """Зонд не смог выполнить измерение. Движок сообщает её как error."""


class ProbeDesc(Protocol):
    """Дескриптор зонда: путь в дереве и имя для отображения."""

    path: Sequence[str]
    display_name: str


class Reporter(Protocol):
    """Потребитель итогов зондов. Движок вызывает ровно один метод на зонд."""

    def pass_(self, desc: ProbeDesc, prop: ProbedProp) -> None: ...

    def warn(self, desc: ProbeDesc, prop: ProbedProp, msg: str = "") -> None: ...

    def reject(self, desc: ProbeDesc, prop: ProbedProp, msg: str = "") -> None: ...

    def error(self, desc: ProbeDesc, err: Optional[BaseException]) -> None: ...


class BaseProbe(ABC):
    """Интерфейс зонда. Один зонд = одна проверка хоста."""

    #: Уникальный идентификатор зонда (kebab-case)
    name: str = ""
    #: Путь в дереве зондов; длина пути = глубина вложенности
    path: tuple[str, ...] = ()
    #: Имя для отображения в отчёте
    display_name: str = ""
    #: Роли, для которых зонд нужен; пусто: для всех
    roles: frozenset[str] = frozenset()
    #: Только для отладочного прогона
    debug: bool = False

    @abstractmethod
    def probe(self, reporter: Reporter, spec: SysinfoSpec) -> None:
        """Выполнить проверку и сообщить итог репортеру.

        Args:
            reporter: Получатель итога; вызывается ровно один его метод.
            spec: Параметры прогона (роли, директория данных).

        Raises:
            ProbeError: Измерение не удалось.
        """
        ...

    def __repr__(self) -> str:
        return f"<Probe {self.name!r} path={'/'.join(self.path)!r}>"
