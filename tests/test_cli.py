"""Tests for pkgdesc CLI entrypoints."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

import pkgdesc.main as main
from pkgdesc.cli import generate as generate_module
from pkgdesc.cli import order as order_module
from pkgdesc.packages import register_builtin_packages
from pkgdesc.resolver import ProviderRegistry


def _fresh_registry(monkeypatch: pytest.MonkeyPatch) -> ProviderRegistry:
    """Install an isolated global registry holding the built-in packages."""
    registry = ProviderRegistry()
    monkeypatch.setattr(ProviderRegistry, "_instance", registry)
    register_builtin_packages()
    return registry


def test_main_dispatches_generate_command(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Verify that `main` parses args and dispatches generate_command."""

    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)

    captured: dict[str, object] = {}

    def fake_generate_command(args) -> int:
        captured["args"] = args
        return 0

    monkeypatch.setattr(main, "generate_command", fake_generate_command)
    monkeypatch.setattr(
        sys, "argv", ["pkgdesc", "generate", "chshg", "-o", str(tmp_path)]
    )

    assert main.main() == 0
    parsed = captured["args"]
    assert parsed.package == "chshg"
    assert parsed.output == str(tmp_path)
    assert parsed.config is None


def test_main_requires_command(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Missing subcommands make the CLI print help and fail."""

    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)
    monkeypatch.setattr(sys, "argv", ["pkgdesc"])

    assert main.main() == 1
    assert "Pkgdesc" in capsys.readouterr().out


def test_generate_command_writes_manifest(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _fresh_registry(monkeypatch)
    args = SimpleNamespace(package="chshg", config=None, output=str(tmp_path))

    assert generate_module.generate_command(args) == 0

    data = json.loads((tmp_path / "chshg" / "package.json").read_text(encoding="utf-8"))
    assert data["package"]["main_library"]["identifier"] == "github.com/jurgen-kluft/chshg"
    assert data["package"]["main_library"]["dependencies"] == ["cbase"]
    assert data["package"]["test_project"]["dependencies"] == [
        "cunittest",
        "cbase",
        "chshg",
    ]


def test_generate_command_uses_config_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _fresh_registry(monkeypatch)
    out_dir = tmp_path / "out"
    config_path = tmp_path / "pkgdesc.toml"
    config_path.write_text(
        f'[generator]\noutput_dir = "{out_dir.as_posix()}"\nformats = ["graphml"]\n',
        encoding="utf-8",
    )
    args = SimpleNamespace(package="cbase", config=str(config_path), output=None)

    assert generate_module.generate_command(args) == 0
    assert (out_dir / "cbase" / "package.graphml").is_file()
    assert not (out_dir / "cbase" / "package.json").exists()


def test_generate_command_unknown_package(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _fresh_registry(monkeypatch)
    args = SimpleNamespace(package="missing", config=None, output=str(tmp_path))

    assert generate_module.generate_command(args) == 1


def test_generate_command_not_ready(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _fresh_registry(monkeypatch)
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    args = SimpleNamespace(package="chshg", config=None, output=str(blocker))

    assert generate_module.generate_command(args) == generate_module.EXIT_NOT_READY


def test_order_command_prints_projects(monkeypatch: pytest.MonkeyPatch) -> None:
    _fresh_registry(monkeypatch)
    console = Console(record=True, width=120)

    assert order_module.order_command(SimpleNamespace(package="chshg"), console=console) == 0

    text = console.export_text()
    assert "Build order: chshg" in text
    assert "chshg_test" in text
    assert "cunittest" in text


def test_order_command_unknown_package(monkeypatch: pytest.MonkeyPatch) -> None:
    _fresh_registry(monkeypatch)
    console = Console(record=True)

    assert order_module.order_command(SimpleNamespace(package="nope"), console=console) == 1


def test_packages_command_lists_builtins(monkeypatch: pytest.MonkeyPatch) -> None:
    _fresh_registry(monkeypatch)
    console = Console(record=True)

    assert order_module.packages_command(SimpleNamespace(), console=console) == 0
    assert console.export_text().split() == ["cbase", "chshg", "cunittest"]


def test_packages_command_empty_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ProviderRegistry, "_instance", ProviderRegistry())

    assert order_module.packages_command(SimpleNamespace(), console=Console(record=True)) == 1


def test_generate_command_undecodable_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _fresh_registry(monkeypatch)
    config_path = tmp_path / "pkgdesc.toml"
    config_path.write_bytes(b"\xff\xfe output_dir = 1")
    args = SimpleNamespace(package="chshg", config=str(config_path), output=None)

    assert generate_module.generate_command(args) == 1
