"""Константы preflight."""

#: Директория данных по умолчанию
DATA_DIR_DEFAULT = "/var/lib/k0s"

#: Допустимые форматы вывода (--output)
OUTPUT_FORMATS: tuple[str, ...] = ("text", "json", "yaml")

#: Префикс переменных окружения для опций CLI
ENV_PREFIX = "PREFLIGHT"
