"""Общие помощники репортеров: отступы, строка значения, суффикс итога."""

from __future__ import annotations

from typing import Optional

from probes.base import ProbeDesc, ProbedProp


def probe_path(desc: ProbeDesc) -> Optional[list[str]]:
    """Путь зонда списком; пустой путь даёт None."""
    if not desc.path:
        return None
    return list(desc.path)


def prop_string(prop: ProbedProp) -> str:
    """Строковое представление значения; для отсутствующего значения пустая строка."""
    if prop is None:
        return ""
    return str(prop)


def indent(desc: Optional[ProbeDesc]) -> str:
    """Два пробела на каждый уровень вложенности глубже первого."""
    if desc is None:
        return ""
    count = len(desc.path) - 1
    if count < 1:
        return ""
    return "  " * count


def build_msg(prop: str, category: str, msg: str) -> str:
    """Суффикс вида ` (warning: msg)`; пробел-разделитель только при непустом значении."""
    parts = [" " if prop else "", "(", category]
    if msg:
        parts.append(": ")
        parts.append(msg)
    parts.append(")")
    return "".join(parts)
