"""Top-level package for bridge processing fee recommendations."""

from importlib import metadata


def __getattr__(name: str) -> str:
    """Expose the package version via ``bridgefee.__version__``."""
    if name == "__version__":
        try:
            return metadata.version("bridgefee")
        except metadata.PackageNotFoundError:
            return "0.0.0"
    raise AttributeError(name)


__all__ = ["__version__"]
