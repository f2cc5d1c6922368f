"""Download locations and checksums of the archives for each supported platform."""

from __future__ import annotations

import platform as _pyplatform
import sys
from dataclasses import dataclass

JRE_VERSION = "21.0.7+6"
BASE_URL = (
    "https://github.com/adoptium/temurin21-binaries/releases/download/jdk-21.0.7+6"
)

LINUX = "linux"
WINDOWS = "windows"

_AMD64_MACHINES = {"x86_64", "amd64"}


class UnsupportedPlatformError(RuntimeError):
    """Raised when no archives are known for the requested platform."""


@dataclass(frozen=True)
class Release:
    """An archive to fetch: where it lives, its SHA-256 and its local file name."""

    url: str
    sha256: str
    filename: str


_JRE_RELEASES = {
    LINUX: Release(
        url=BASE_URL + "/OpenJDK21U-jre_x64_linux_hotspot_21.0.7_6.tar.gz",
        sha256="6d48379e00d47e6fdd417e96421e973898ac90765ea8ff2d09ae0af6d5d6a1c6",
        filename="jre.tar.gz",
    ),
    WINDOWS: Release(
        url=BASE_URL + "/OpenJDK21U-jre_x64_windows_hotspot_21.0.7_6.zip",
        sha256="b2850a96293048ed3020f8bfca2d92a785ae9bf80c7d96bbfe3ec4ccf45aef98",
        filename="jre.zip",
    ),
}

_DYNAMO_RELEASES = {
    LINUX: Release(
        url="https://d1ni2b6xgvw0s0.cloudfront.net/v2.x/dynamodb_local_latest.tar.gz",
        sha256="9a8e6c1b1d4f5c1030c00a5a7eaee1a9ab2b8f1bbde7b700d5505898a3948fff",
        filename="dynamo.tar.gz",
    ),
    WINDOWS: Release(
        url="https://d1ni2b6xgvw0s0.cloudfront.net/v2.x/dynamodb_local_latest.zip",
        sha256="06e7bdd5d03262d8373696282f79867f9f6beb94b76e230b49da135be080558c",
        filename="dynamo.zip",
    ),
}


def current_platform() -> str:
    """Return the platform key of the running system, or raise if unsupported."""
    machine = _pyplatform.machine().lower()
    if machine not in _AMD64_MACHINES:
        raise UnsupportedPlatformError(f"unsupported architecture: {machine!r}")
    if sys.platform.startswith("linux"):
        return LINUX
    if sys.platform in ("win32", "cygwin"):
        return WINDOWS
    raise UnsupportedPlatformError(f"unsupported operating system: {sys.platform!r}")


def _lookup(table: dict[str, Release], platform: str | None) -> Release:
    key = current_platform() if platform is None else platform
    try:
        return table[key]
    except KeyError:
        raise UnsupportedPlatformError(f"unsupported platform: {key!r}") from None


def get_jre_release(platform: str | None = None) -> Release:
    """Return the JRE archive for the given platform (default: this one)."""
    return _lookup(_JRE_RELEASES, platform)


def get_dynamo_release(platform: str | None = None) -> Release:
    """Return the DynamoDB Local archive for the given platform (default: this one)."""
    return _lookup(_DYNAMO_RELEASES, platform)