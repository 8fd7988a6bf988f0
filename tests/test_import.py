"""Verify package imports work correctly."""


def test_import_package() -> None:
    """Test that the package imports and its version matches pyproject."""
    import tomllib
    from pathlib import Path

    import strip_json_comments

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert strip_json_comments.__version__ == expected


def test_version_format() -> None:
    from strip_json_comments import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names() -> None:
    import strip_json_comments

    for name in strip_json_comments.__all__:
        assert hasattr(strip_json_comments, name), name
