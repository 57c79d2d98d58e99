"""Installed tokensmith version."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    try:
        return version("tokensmith")
    except PackageNotFoundError:
        return "0.0.0+unknown"
