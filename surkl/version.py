"""Application version."""

VERSION_MAJOR = 0
VERSION_MINOR = 3
VERSION_RELEASE = 0


def version() -> str:
    """Return the version as ``major.minor.release``."""
    return f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_RELEASE}"