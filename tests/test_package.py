"""Tests for package structure and imports."""

import pytest

import exitcode

PUBLIC_NAMES = {
    "OK",
    "USAGE",
    "DATAERR",
    "NOINPUT",
    "NOUSER",
    "NOHOST",
    "UNAVAILABLE",
    "SOFTWARE",
    "OSERR",
    "OSFILE",
    "CANTCREAT",
    "IOERR",
    "TEMPFAIL",
    "PROTOCOL",
    "NOPERM",
    "CONFIG",
    "ExitCode",
    "is_success",
    "is_error",
    "__version__",
}


@pytest.mark.unit
def test_package_imports():
    assert exitcode is not None


@pytest.mark.unit
def test_version_format():
    parts = exitcode.__version__.split(".")
    assert len(parts) == 3
    for part in parts:
        assert part.isdigit()


@pytest.mark.unit
def test_version_value():
    assert exitcode.__version__ == "0.1.0"


@pytest.mark.unit
def test_public_surface_is_exact():
    assert set(exitcode.__all__) == PUBLIC_NAMES
    for name in PUBLIC_NAMES:
        assert hasattr(exitcode, name)


@pytest.mark.unit
def test_no_name_lookup_helpers():
    """Only constants and the two predicates are exposed."""
    assert not hasattr(exitcode, "lookup")
    assert not hasattr(exitcode, "error_for")


@pytest.mark.unit
def test_no_cli_or_config_modules():
    import importlib.util

    for module in ("exitcode.cli", "exitcode.core.config", "exitcode.core.logging"):
        assert importlib.util.find_spec(module) is None
