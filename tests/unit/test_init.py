r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import pytest

import logoforge


def test_package_version_is_string() -> None:
    assert isinstance(logoforge.__version__, str)
    assert "." in logoforge.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in logoforge.__all__:
        assert hasattr(logoforge, name), f"{name} is in __all__ but not defined in module"


def test_all_exports_count() -> None:
    assert len(logoforge.__all__) == 15


def test_exception_classes() -> None:
    assert issubclass(logoforge.GenerationError, logoforge.LogoForgeError)
    assert issubclass(logoforge.LogoForgeError, RuntimeError)


@pytest.mark.parametrize(
    "func_name", ["classify_failure", "create_genai_client", "retryable", "with_retry"]
)
def test_functions_are_callable(func_name: str) -> None:
    assert callable(getattr(logoforge, func_name))
