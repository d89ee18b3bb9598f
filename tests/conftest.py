"""Pytest configuration and shared fixtures."""

import importlib
import sys
import textwrap
from collections.abc import Callable, Generator
from itertools import count
from pathlib import Path

import pytest
from loguru import logger

_package_ids = count()


@pytest.fixture(autouse=True)
def lathe_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator:
    """Point settings at a throwaway home directory."""
    from lathe.core.config import clear_settings_cache

    home = tmp_path / "lathe-home"
    monkeypatch.setenv("LATHE_HOME", str(home))
    monkeypatch.setenv("LATHE_LOG_TO_FILE", "false")
    monkeypatch.delenv("LATHE_VERSION", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    # Clear any cached settings
    clear_settings_cache()

    yield home

    # Clear again after test
    clear_settings_cache()


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[..., Path]:
    """Write a project.toml and return its path."""

    def _write(body: str, directory: Path | None = None) -> Path:
        directory = directory or tmp_path / "project"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "project.toml"
        path.write_text(textwrap.dedent(body))
        return path

    return _write


@pytest.fixture
def sample_project_toml() -> str:
    """Provide a typical project file."""
    return """
        name = "org.example/sample"
        version = "1.0.0-SNAPSHOT"
        description = "A sample project"
        dependencies = [["org.clojure/clojure", "1.2.0"], ["rome", "0.9"]]
        dev-dependencies = [["lein-check", "0.1.0"]]
        source-path = "src/main"
        target-dir = "/tmp/sample-target"

        [repositories]
        releases = { url = "https://repo.example.org/releases" }
        snapshots = "https://repo.example.org/snapshots"
    """


@pytest.fixture
def make_package(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Callable[..., str], None, None]:
    """Create an importable package from a {module: source} mapping.

    Returns the package name. Modules are removed from sys.modules afterwards.
    """
    created: list[str] = []
    root = tmp_path / "site"
    root.mkdir()
    monkeypatch.syspath_prepend(str(root))

    def _make(modules: dict[str, str], name: str | None = None) -> str:
        package = name or f"lathe_test_pkg_{next(_package_ids)}"
        package_dir = root / package
        package_dir.mkdir()
        (package_dir / "__init__.py").write_text("")
        for module, source in modules.items():
            (package_dir / f"{module}.py").write_text(textwrap.dedent(source))
        importlib.invalidate_caches()
        created.append(package)
        return package

    yield _make

    for package in created:
        for module in [m for m in sys.modules if m == package or m.startswith(package + ".")]:
            del sys.modules[module]
