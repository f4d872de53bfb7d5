"""Тесты коллектора результатов и структурированного вывода."""

import errno
import io
import json
from dataclasses import dataclass

import pytest
import yaml

from preflight.errors import ReportWriteError, SysinfoFailed
from preflight.models import ProbeCategory
from preflight.reporters.collector import (
    ENCODERS,
    ResultsCollector,
    collect_and_print,
    encode_json,
    encode_yaml,
)


@dataclass
class Desc:
    path: tuple = ("os",)
    display_name: str = "Operating system"


class ScriptedProbes:
    """Движок-заглушка: проигрывает заранее заданные вызовы репортера."""

    def __init__(self, *calls):
        self.calls = calls
        self.runs = 0

    def probe(self, reporter) -> None:
        self.runs += 1
        for method, args in self.calls:
            getattr(reporter, method)(*args)


class BrokenSink(io.StringIO):
    def write(self, s):
        raise OSError(errno.EPIPE, "Broken pipe")


PASSING = ScriptedProbes(
    ("pass_", (Desc(), "Linux")),
    ("pass_", (Desc(path=("os", "kernel"), display_name="Linux kernel release"), "6.1.0")),
    ("warn", (Desc(path=("os", "arch"), display_name="CPU architecture"), "riscv64", "unsupported")),
    ("pass_", (Desc(path=(), display_name="Root"), None)),
)


class TestResultsCollector:
    def setup_method(self):
        self.c = ResultsCollector()

    def test_pass(self):
        self.c.pass_(Desc(), "Linux")
        r = self.c.results[0]
        assert r.path == ["os"]
        assert r.display_name == "Operating system"
        assert r.prop == "Linux"
        assert r.category is ProbeCategory.PASS
        assert not self.c.failed

    def test_warn_keeps_message(self):
        self.c.warn(Desc(), "x", "careful")
        assert self.c.results[0].message == "careful"
        assert self.c.results[0].category is ProbeCategory.WARNING
        assert not self.c.failed

    def test_reject_sets_failed(self):
        self.c.reject(Desc(), "x", "no")
        assert self.c.results[0].category is ProbeCategory.REJECTED
        assert self.c.failed

    def test_error(self):
        self.c.error(Desc(), OSError("denied"))
        r = self.c.results[0]
        assert r.category is ProbeCategory.ERROR
        assert r.error == "denied"
        assert r.prop == ""
        assert self.c.failed

    def test_error_none(self):
        self.c.error(Desc(), None)
        assert self.c.results[0].error is None

    def test_empty_path_is_none(self):
        self.c.pass_(Desc(path=()), None)
        assert self.c.results[0].path is None
        assert self.c.results[0].prop == ""

    def test_order_preserved(self):
        PASSING.probe(self.c)
        assert [r.display_name for r in self.c.results] == [
            "Operating system", "Linux kernel release", "CPU architecture", "Root",
        ]


class TestEncoders:
    def test_registry(self):
        assert set(ENCODERS) == {"json", "yaml"}

    def test_json_pretty(self):
        text = encode_json([{"a": 1}])
        assert text == '[\n  {\n    "a": 1\n  }\n]\n'

    def test_yaml_keeps_key_order(self):
        text = encode_yaml([{"Path": ["os"], "DisplayName": "x"}])
        assert text.index("Path") < text.index("DisplayName")


class TestCollectAndPrint:
    @pytest.mark.parametrize("fmt, load", [("json", json.loads), ("yaml", yaml.safe_load)])
    def test_emits_one_record_per_callback(self, fmt, load):
        out = io.StringIO()
        collect_and_print(PASSING, out, ENCODERS[fmt])
        doc = load(out.getvalue())
        assert len(doc) == 4
        assert [d["Category"] for d in doc] == ["pass", "pass", "warning", "pass"]
        assert doc[1]["Path"] == ["os", "kernel"]
        assert doc[2]["Message"] == "unsupported"
        assert doc[3]["Path"] is None

    @pytest.mark.parametrize("failing_call", [
        ("reject", (Desc(), "Windows", "only Linux")),
        ("error", (Desc(), RuntimeError("boom"))),
        ("error", (Desc(), None)),
    ])
    def test_failure_writes_nothing(self, failing_call):
        probes = ScriptedProbes(("pass_", (Desc(), "Linux")), failing_call)
        out = io.StringIO()
        with pytest.raises(SysinfoFailed) as info:
            collect_and_print(probes, out, encode_json)
        assert out.getvalue() == ""
        assert info.value.message == "sysinfo failed"

    def test_empty_run_is_empty_document(self):
        out = io.StringIO()
        collect_and_print(ScriptedProbes(), out, encode_json)
        assert json.loads(out.getvalue()) == []

    def test_write_error_propagates(self):
        with pytest.raises(ReportWriteError) as info:
            collect_and_print(PASSING, BrokenSink(), encode_json)
        assert isinstance(info.value.cause, OSError)
        assert info.value.cause.errno == errno.EPIPE

    def test_engine_error_propagates(self):
        class Exploding:
            def probe(self, reporter):
                raise RuntimeError("engine down")

        out = io.StringIO()
        with pytest.raises(RuntimeError, match="engine down"):
            collect_and_print(Exploding(), out, encode_json)
        assert out.getvalue() == ""
