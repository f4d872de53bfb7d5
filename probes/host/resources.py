"""Зонды ресурсов хоста: память, диск, процессоры."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from probes.base import BaseProbe, ProbeError, Reporter

KIB = 1024
MIB = 1024 * KIB
GIB = 1024 * MIB

CONTROLLER_MIN_MEMORY = 1 * GIB
MIN_MEMORY = 512 * MIB
MIN_DISK_FREE = 500 * MIB


class ByteSize(int):
    """Размер в байтах, печатается в человекочитаемом виде."""

    def __str__(self) -> str:
        value = float(self)
        for unit in ("B", "KiB", "MiB"):
            if value < 1024:
                return f"{value:.0f} {unit}" if unit == "B" else f"{value:.1f} {unit}"
            value /= 1024
        return f"{value:.1f} GiB"


def read_mem_total(meminfo: str | Path) -> ByteSize:
    """Прочитать MemTotal из /proc/meminfo.

    Raises:
        ProbeError: Файл недоступен или не содержит MemTotal.
    """
    try:
        text = Path(meminfo).read_text(encoding="utf-8")
    except OSError as exc:
        raise ProbeError(f"failed to read {meminfo}: {exc.strerror or exc}") from exc

    for line in text.splitlines():
        key, _, rest = line.partition(":")
        if key.strip() != "MemTotal":
            continue
        fields = rest.split()
        try:
            value = int(fields[0])
        except (IndexError, ValueError) as exc:
            raise ProbeError(f"malformed MemTotal line: {line.strip()!r}") from exc
        unit = fields[1].lower() if len(fields) > 1 else ""
        return ByteSize(value * KIB if unit == "kb" else value)

    raise ProbeError(f"MemTotal not found in {meminfo}")


def nearest_existing(path: str | Path) -> Path:
    """Ближайший существующий предок пути (сам путь, если он есть).

    Raises:
        ProbeError: Путь не удалось проверить (слишком длинное имя, нет доступа).
    """
    p = Path(path).absolute()
    try:
        while not p.exists() and p != p.parent:
            p = p.parent
    except OSError as exc:
        raise ProbeError(f"{path}: {exc.strerror or exc}") from exc
    return p


class TotalMemory(BaseProbe):
    name = "total-memory"
    path = ("memory",)
    display_name = "Total memory"

    meminfo: str = "/proc/meminfo"

    def probe(self, reporter: Reporter, spec) -> None:
        total = read_mem_total(self.meminfo)
        if spec.controller_role_enabled and total < CONTROLLER_MIN_MEMORY:
            reporter.reject(self, total, f"{ByteSize(CONTROLLER_MIN_MEMORY)} recommended")
        elif total < MIN_MEMORY:
            reporter.warn(self, total, f"{ByteSize(MIN_MEMORY)} recommended")
        else:
            reporter.pass_(self, total)


class DiskSpace(BaseProbe):
    """Свободное место на разделе директории данных."""

    name = "disk-space"
    path = ("disk",)
    display_name = "Disk space available for data directory"

    def probe(self, reporter: Reporter, spec) -> None:
        target = nearest_existing(spec.data_dir)
        try:
            usage = shutil.disk_usage(target)
        except OSError as exc:
            raise ProbeError(f"{target}: {exc.strerror or exc}") from exc

        free = ByteSize(usage.free)
        if free < MIN_DISK_FREE:
            reporter.reject(self, free, f"{ByteSize(MIN_DISK_FREE)} recommended")
        else:
            reporter.pass_(self, free)


class LogicalCpus(BaseProbe):
    name = "logical-cpus"
    path = ("cpus",)
    display_name = "Logical CPUs"
    debug = True

    def probe(self, reporter: Reporter, spec) -> None:
        count = os.cpu_count()
        if count is None:
            reporter.warn(self, None, "unable to determine CPU count")
        else:
            reporter.pass_(self, count)
