"""Tests to verify the ports-and-adapters layering of fhe_gated."""

from pathlib import Path

import pytest

# Compute project root relative to this test file
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def package_path() -> Path:
    """Return the fhe_gated package directory."""
    return PROJECT_ROOT / "fhe_gated"


def _import_lines(py_file: Path) -> list[str]:
    return [
        line.strip()
        for line in py_file.read_text().split("\n")
        if line.strip().startswith(("from fhe_gated", "import fhe_gated"))
    ]


def test_main_layers_exist(package_path: Path) -> None:
    """Verify all layer packages exist."""
    for layer in ["domain", "application", "infrastructure", "config", "bootstrap"]:
        assert (package_path / layer / "__init__.py").is_file(), (
            f"Missing {layer}/__init__.py"
        )


def test_domain_imports_only_domain(package_path: Path) -> None:
    """Domain is the innermost layer and depends on nothing else."""
    for py_file in (package_path / "domain").rglob("*.py"):
        for line in _import_lines(py_file):
            assert line.startswith(
                ("from fhe_gated.domain", "import fhe_gated.domain")
            ), f"{py_file} contains forbidden import: {line}"


def test_application_has_no_forbidden_imports(package_path: Path) -> None:
    """Application may use observability as a cross-cutting concern only.

    Adapters, stubs and wiring stay out of the application layer.
    """
    forbidden = [
        "fhe_gated.infrastructure.adapters",
        "fhe_gated.infrastructure.stubs",
        "fhe_gated.bootstrap",
        "fhe_gated.cli",
    ]
    for py_file in (package_path / "application").rglob("*.py"):
        for line in _import_lines(py_file):
            for module in forbidden:
                assert module not in line, f"{py_file} contains forbidden import: {line}"


def test_infrastructure_does_not_import_wiring(package_path: Path) -> None:
    for py_file in (package_path / "infrastructure").rglob("*.py"):
        for line in _import_lines(py_file):
            assert "fhe_gated.bootstrap" not in line
            assert "fhe_gated.cli" not in line
