"""Version string reported by the command line tool."""

VERSION = "dev"
COMMIT_HASH = "n/a"
BUILD_TIMESTAMP = "n/a"


def build_version(
    version: str = VERSION,
    commit_hash: str = COMMIT_HASH,
    build_timestamp: str = BUILD_TIMESTAMP,
) -> str:
    """Return the version as ``<version>-<commit> (<timestamp>)``."""
    return f"{version}-{commit_hash} ({build_timestamp})"