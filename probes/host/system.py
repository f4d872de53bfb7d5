"""Зонды операционной системы: ОС, ядро, архитектура."""

from __future__ import annotations

import platform

from probes.base import BaseProbe, Reporter

# platform.machine() → имя архитектуры в отчёте
ARCH_ALIASES: dict[str, str] = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "armv8l": "arm",
}


class OperatingSystem(BaseProbe):
    """Операционная система: поддерживается только Linux."""

    name = "operating-system"
    path = ("os",)
    display_name = "Operating system"

    def probe(self, reporter: Reporter, spec) -> None:
        system = platform.system()
        if system == "Linux":
            reporter.pass_(self, system)
        else:
            reporter.warn(self, system or None, "only Linux is supported")


class KernelRelease(BaseProbe):
    name = "kernel-release"
    path = ("os", "kernel")
    display_name = "Linux kernel release"

    def probe(self, reporter: Reporter, spec) -> None:
        release = platform.release()
        if release:
            reporter.pass_(self, release)
        else:
            reporter.warn(self, None, "unable to determine kernel release")


class Architecture(BaseProbe):
    """Архитектура CPU."""

    name = "cpu-architecture"
    path = ("os", "arch")
    display_name = "CPU architecture"

    def probe(self, reporter: Reporter, spec) -> None:
        machine = platform.machine()
        arch = ARCH_ALIASES.get(machine.lower())
        if arch:
            reporter.pass_(self, arch)
        else:
            reporter.warn(self, machine or None, "unsupported architecture")
