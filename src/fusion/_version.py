"""Installed FUSION version."""

from importlib.metadata import PackageNotFoundError, version

_DISTRIBUTION = "fusion"


def get_version() -> str:
    """Version of the installed ``fusion`` distribution, or 0.0.0 from a bare checkout."""
    try:
        return version(_DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"
