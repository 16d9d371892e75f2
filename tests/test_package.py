"""Basic tests for faults package."""


def test_import_faults():
    """Test that faults can be imported."""
    import faults

    assert hasattr(faults, "__version__")
    assert faults.__version__ == "1.0.0"


def test_version_format():
    """Test that version follows semver format."""
    import faults

    parts = faults.__version__.split(".")
    assert len(parts) == 3
    assert all(p.isdigit() for p in parts)


def test_public_names_resolve():
    """Test that every name in __all__ is importable from the package."""
    import faults

    for name in faults.__all__:
        assert hasattr(faults, name), name
