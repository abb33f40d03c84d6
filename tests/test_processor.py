# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for locating and invoking the XQuery processor."""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from xqrun.config import ProcessorConfig
from xqrun.core.runtime import CommandOptions
from xqrun.options import OptionRegistry, OptionSet
from xqrun.processor import (
    InvocationResult,
    XQueryProcessor,
    build_command,
    invoke,
    locate_executable,
)


def _fail_if_called(*_args: object, **_kwargs: object) -> InvocationResult:
    raise AssertionError("processor must not be invoked")


def test_locate_executable_prefers_configured_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("xqrun.processor.shutil.which", lambda _: "/usr/bin/zorba")
    configured = tmp_path / "bin" / "zorba"

    assert locate_executable(ProcessorConfig(executable=configured)) == configured
    assert locate_executable(ProcessorConfig()) == Path("/usr/bin/zorba")


def test_locate_executable_returns_none_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("xqrun.processor.shutil.which", lambda _: None)

    assert locate_executable(ProcessorConfig()) is None


def test_build_command_prefixes_as_files_flag() -> None:
    command = build_command(Path("/opt/zorba"), '--query "my query.xq" --indent')

    assert command == ["/opt/zorba", "--as-files", "--query", "my query.xq", "--indent"]


def test_execute_returns_none_when_binary_missing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("xqrun.processor.invoke", _fail_if_called)
    processor = XQueryProcessor(ProcessorConfig(executable=tmp_path / "absent"))

    assert processor.execute(OptionSet({"query": "a.xq"})) is None


def test_execute_returns_none_when_not_on_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("xqrun.processor.shutil.which", lambda _: None)
    monkeypatch.setattr("xqrun.processor.invoke", _fail_if_called)

    assert XQueryProcessor().execute(OptionSet({"query": "a.xq"})) is None


def test_execute_returns_none_when_not_executable(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    script = tmp_path / "zorba"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o644)
    monkeypatch.setattr("xqrun.processor.invoke", _fail_if_called)

    assert XQueryProcessor(ProcessorConfig(executable=script)).execute(OptionSet()) is None


def test_execute_returns_output_lines(fake_processor: Callable[[str], Path]) -> None:
    script = fake_processor('for arg in "$@"; do printf "%s\\n" "$arg"; done')
    processor = XQueryProcessor(ProcessorConfig(executable=script))

    lines = processor.execute(OptionSet({"query": "a b.xq", "indent": True}))

    assert lines == ["--as-files", "--query", "a b.xq", "--indent"]


def test_execute_returns_none_on_non_zero_exit(fake_processor: Callable[[str], Path]) -> None:
    script = fake_processor("echo partial; echo boom >&2; exit 3")
    processor = XQueryProcessor(ProcessorConfig(executable=script))

    assert processor.execute(OptionSet({"query": "a.xq"})) is None


def test_run_reports_exit_code_and_stderr(fake_processor: Callable[[str], Path]) -> None:
    script = fake_processor("echo out; echo err >&2; exit 2")
    processor = XQueryProcessor(ProcessorConfig(executable=script))

    result = processor.run(OptionSet())

    assert result == InvocationResult(lines=("out",), exit_code=2, stderr="err\n")
    assert not result.succeeded


def test_validate_forces_parse_only_on_a_clone(fake_processor: Callable[[str], Path]) -> None:
    script = fake_processor('case "$*" in *--parse-only*) exit 0;; *) exit 1;; esac')
    processor = XQueryProcessor(ProcessorConfig(executable=script))
    options = OptionSet({"query": "a.xq"})

    assert processor.validate(options) is True
    assert not options.has("parse-only")
    assert options.render() == '--query "a.xq"'
    assert processor.execute(options) is None


def test_validate_reports_parse_failure(fake_processor: Callable[[str], Path]) -> None:
    script = fake_processor("exit 1")
    processor = XQueryProcessor(ProcessorConfig(executable=script))

    assert processor.validate(OptionSet({"query": "broken.xq"})) is False


def test_new_option_set_applies_configured_defaults() -> None:
    processor = XQueryProcessor(ProcessorConfig(defaults={"indent": True, "timeout": 30}))

    options = processor.new_option_set({"query": "a.xq"})

    assert options.render() == '--indent --timeout "30" --query "a.xq"'


def test_configured_env_and_timeout_reach_subprocess(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    script = tmp_path / "zorba"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o755)
    captured: dict[str, object] = {}

    def fake_invoke(path: Path, rendered: str, *, options: CommandOptions | None = None) -> InvocationResult:
        captured.update(path=path, rendered=rendered, options=options)
        return InvocationResult(lines=("ok",), exit_code=0)

    monkeypatch.setattr("xqrun.processor.invoke", fake_invoke)
    config = ProcessorConfig(executable=script, timeout=5, cwd=tmp_path, env={"ZORBA_HOME": "/opt"})

    assert XQueryProcessor(config).execute(OptionSet({"timing": True})) == ["ok"]
    options = captured["options"]
    assert isinstance(options, CommandOptions)
    assert options.timeout == 5
    assert options.cwd == tmp_path
    assert options.env is not None and options.env["ZORBA_HOME"] == "/opt"
    assert captured["rendered"] == "--timing"


def test_execute_returns_none_when_start_fails(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    script = tmp_path / "zorba"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o755)

    def broken_run(*_args: object, **_kwargs: object) -> subprocess.CompletedProcess[str]:
        raise OSError("exec format error")

    monkeypatch.setattr("xqrun.core.runtime.process.subprocess.run", broken_run)

    assert XQueryProcessor(ProcessorConfig(executable=script)).execute(OptionSet()) is None


def test_invoke_splits_stdout_lines(fake_processor: Callable[[str], Path]) -> None:
    script = fake_processor("printf 'first\\nsecond\\n'")

    result = invoke(script, "")

    assert result.lines == ("first", "second")
    assert result.exit_code == 0


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("external-variable", 'x=say "hi'),
        ("uri-path", "C:\\libs\\"),
    ],
)
def test_execute_returns_none_for_unsplittable_arguments(
    name: str,
    value: str,
    fake_processor: Callable[[str], Path],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    script = fake_processor("exit 0")
    monkeypatch.setattr("xqrun.processor.run_command", _fail_if_called)
    processor = XQueryProcessor(ProcessorConfig(executable=script))
    options = OptionSet({"query": "a.xq", name: value})

    assert processor.execute(options) is None
    assert processor.validate(options) is False


def test_injected_empty_registry_is_kept() -> None:
    registry = OptionRegistry([])

    processor = XQueryProcessor(registry=registry)

    assert processor.registry is registry
    assert processor.new_option_set().registry is registry
