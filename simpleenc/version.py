"""Version resolution for package metadata and runtime engine version."""

from importlib.metadata import PackageNotFoundError, version as _package_version

from .main import simpleenc

try:
    __version__ = _package_version("simpleenc")
except PackageNotFoundError:
    __version__ = simpleenc.ENGINE_VERSION


__all__ = ["__version__"]
