"""Version information for envconfig."""

__version__ = "1.1.0"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"envconfig v{__version__}"
