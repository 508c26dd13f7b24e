"""Sanity tests ensuring the scaffolding imports correctly."""

from __future__ import annotations

import importlib
import sys

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "memory_match",
        "memory_match.cards",
        "memory_match.state",
        "memory_match.rules",
        "memory_match.actions",
        "memory_match.agent",
        "memory_match.benchmark",
        "memory_match.cli.main",
        "memory_match.cli.textual",
    ],
)
def test_modules_import(module_name: str) -> None:
    """Ensure all foundational modules can be imported."""

    assert importlib.import_module(module_name)


def test_cli_main_module_import_does_not_run(monkeypatch: pytest.MonkeyPatch) -> None:
    from memory_match.cli import main as cli_main

    calls: list[object] = []
    monkeypatch.setattr(cli_main, "main", lambda: calls.append(None))
    monkeypatch.delitem(sys.modules, "memory_match.cli.__main__", raising=False)

    assert importlib.import_module("memory_match.cli.__main__")
    assert calls == []
