"""Зонды файловой системы: директория данных, исполняемые файлы в PATH."""

from __future__ import annotations

import os
import shutil

from probes.base import BaseProbe, Reporter
from probes.host.resources import nearest_existing


class DataDirWritable(BaseProbe):
    """Директория данных доступна на запись (или может быть создана)."""

    name = "data-dir-writable"
    path = ("datadir",)
    display_name = "Data directory"

    def probe(self, reporter: Reporter, spec) -> None:
        existing = nearest_existing(spec.data_dir)
        if not existing.is_dir():
            reporter.reject(self, spec.data_dir, f"{existing} is not a directory")
        elif os.access(existing, os.W_OK | os.X_OK):
            reporter.pass_(self, spec.data_dir)
        else:
            reporter.reject(self, spec.data_dir, f"{existing} is not writable")


class ModprobeInPath(BaseProbe):
    name = "executable-modprobe"
    path = ("executables", "modprobe")
    display_name = "Executable in PATH: modprobe"
    roles = frozenset({"worker"})

    executable: str = "modprobe"

    def probe(self, reporter: Reporter, spec) -> None:
        found = shutil.which(self.executable)
        if found:
            reporter.pass_(self, found)
        else:
            reporter.warn(self, None, "not found in PATH")


class ExecutablesInPath(BaseProbe):
    """Групповой узел для проверок PATH."""

    name = "executables"
    path = ("executables",)
    display_name = "Executables in PATH"
    roles = frozenset({"worker"})

    def probe(self, reporter: Reporter, spec) -> None:
        entries = [p for p in os.environ.get("PATH", "").split(os.pathsep) if p]
        if entries:
            reporter.pass_(self, f"{len(entries)} directories")
        else:
            reporter.warn(self, None, "PATH is empty")
