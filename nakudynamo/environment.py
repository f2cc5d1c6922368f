"""Preparation of the local working directory holding the JRE and DynamoDB Local."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .download import DownloadError, download_dynamo, download_jre
from .extract import decompress
from .platforms import JRE_VERSION, WINDOWS, UnsupportedPlatformError, current_platform

DEFAULT_PORT = 8000
WORKING_DIR_NAME = ".nakudynamo"
DOWNLOAD_DIR_NAME = ".tmp"
JAR_NAME = "DynamoDBLocal.jar"
EXTRACTED_JRE_DIR = f"jdk-{JRE_VERSION}-jre"


class EnvironmentError_(RuntimeError):
    """Raised when the working environment cannot be prepared."""


@dataclass(frozen=True)
class DynamoEnvironment:
    """Locations needed to run DynamoDB Local."""

    jre_path: Path
    dynamo_jar_path: Path
    working_dir: Path
    port: int = DEFAULT_PORT


def _resolve_home(home: str | os.PathLike[str] | None) -> Path:
    if home is not None:
        return Path(home)
    try:
        return Path.home()
    except RuntimeError as exc:
        raise EnvironmentError_(f"could not get user home: {exc}") from exc


def _install_jre(download_dir: Path, working_dir: Path, platform: str) -> None:
    try:
        archive = download_jre(download_dir, platform)
    except DownloadError as exc:
        raise EnvironmentError_(f"failed to download jre: {exc}") from exc
    try:
        decompress(archive, working_dir)
    except (OSError, ValueError) as exc:
        raise EnvironmentError_(f"failed to extract jre: {exc}") from exc
    try:
        os.rename(working_dir / EXTRACTED_JRE_DIR, working_dir / "jre")
    except OSError as exc:
        raise EnvironmentError_(f"cannot rename the folder: {exc}") from exc


def _install_dynamo(download_dir: Path, working_dir: Path, platform: str) -> None:
    try:
        archive = download_dynamo(download_dir, platform)
    except DownloadError as exc:
        raise EnvironmentError_(f"failed to download DynamoDBLocal: {exc}") from exc
    try:
        decompress(archive, working_dir)
    except (OSError, ValueError) as exc:
        raise EnvironmentError_(f"failed to extract DynamoDBLocal: {exc}") from exc


def prepare_environment(
    home: str | os.PathLike[str] | None = None, platform: str | None = None
) -> DynamoEnvironment:
    """Make sure the JRE and DynamoDB Local are present under home and describe them.

    Missing pieces are downloaded, verified and unpacked. Raises
    EnvironmentError_ when any step fails, and UnsupportedPlatformError when
    something has to be fetched for a platform with no known archives.
    """
    platform = current_platform() if platform is None else platform
    working_dir = _resolve_home(home) / WORKING_DIR_NAME
    download_dir = working_dir / DOWNLOAD_DIR_NAME
    java_name = "java.exe" if platform == WINDOWS else "java"
    jre_path = working_dir / "jre" / "bin" / java_name
    jar_path = working_dir / JAR_NAME

    try:
        working_dir.mkdir(parents=True, exist_ok=True)
        download_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise EnvironmentError_(f"failed to create working dir: {exc}") from exc

    if not jre_path.exists():
        _install_jre(download_dir, working_dir, platform)

    if not jar_path.exists():
        _install_dynamo(download_dir, working_dir, platform)

    return DynamoEnvironment(
        jre_path=jre_path,
        dynamo_jar_path=jar_path,
        working_dir=working_dir,
        port=DEFAULT_PORT,
    )


__all__ = [
    "DynamoEnvironment",
    "EnvironmentError_",
    "UnsupportedPlatformError",
    "prepare_environment",
]