"""Version information for sqs_util."""

import os

__version__ = "0.1.0"

# Set by release builds, e.g. "dev" or "rc1"; empty for final releases
VERSION_PRERELEASE = os.environ.get("SQS_UTIL_VERSION_PRERELEASE", "dev")
GIT_COMMIT = os.environ.get("SQS_UTIL_GIT_COMMIT", "unknown")


def version_info(unit: str = "sqs_util", version: str = __version__) -> str:
    """Return the version banner printed by --version."""
    if VERSION_PRERELEASE:
        version = f"{version}-{VERSION_PRERELEASE}"
    return f"{unit} v{version} ({GIT_COMMIT})"
