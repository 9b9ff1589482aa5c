"""Tests to verify hexagonal architecture structure."""

from pathlib import Path

import pytest

# Compute project root relative to this test file
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def package_path() -> Path:
    """Return the taskapp package directory path."""
    return PROJECT_ROOT / "taskapp"


def test_main_layers_exist(package_path: Path) -> None:
    """Verify all main layer directories exist."""
    for layer in ["domain", "application", "infrastructure", "api", "bootstrap", "config"]:
        assert (package_path / layer).is_dir(), f"Missing layer: {layer}"
        assert (package_path / layer / "__init__.py").is_file(), f"Missing {layer}/__init__.py"


def _imports_in(path: Path) -> list[tuple[Path, str]]:
    return [
        (py_file, line.strip())
        for py_file in path.rglob("*.py")
        for line in py_file.read_text().splitlines()
        if line.strip().startswith(("from taskapp", "import taskapp"))
    ]


def test_domain_has_no_external_layer_imports(package_path: Path) -> None:
    """Domain is the innermost layer and imports nothing from other layers."""
    for py_file, line in _imports_in(package_path / "domain"):
        assert line.startswith(("from taskapp.domain", "import taskapp.domain")), (
            f"{py_file} contains forbidden import: {line}"
        )


def test_application_does_not_import_api(package_path: Path) -> None:
    for py_file, line in _imports_in(package_path / "application"):
        assert "taskapp.api" not in line, f"{py_file} contains forbidden import: {line}"
        assert "taskapp.bootstrap" not in line, f"{py_file} contains forbidden import: {line}"


def test_infrastructure_does_not_import_api(package_path: Path) -> None:
    for py_file, line in _imports_in(package_path / "infrastructure"):
        assert "taskapp.api" not in line, f"{py_file} contains forbidden import: {line}"
