"""Single source of truth for the package version."""

__version__: str = "2.0.0"
