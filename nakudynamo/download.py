"""Fetching and verifying the JRE and DynamoDB Local archives."""

from __future__ import annotations

import os
from pathlib import Path

import requests
from tqdm import tqdm

from .checksum import verify_sha256
from .platforms import Release, get_dynamo_release, get_jre_release

_CHUNK_SIZE = 1 << 16
_TIMEOUT = 60


class DownloadError(RuntimeError):
    """Raised when an archive cannot be fetched or fails verification."""


def _verify(path: Path, expected: str, context: str) -> bool:
    try:
        return verify_sha256(path, expected)
    except OSError as exc:
        raise DownloadError(f"{context}: {exc}") from exc


def fetch_release(release: Release, dest_dir: str | os.PathLike[str], label: str) -> Path:
    """Download a release archive into dest_dir unless a verified copy is there.

    Returns the path of the verified archive.
    """
    out_path = Path(dest_dir) / release.filename

    if out_path.exists():
        if _verify(out_path, release.sha256, f"failed to verify existing {label} file"):
            print(f"{label} archive already downloaded and verified.")
            return out_path
        print(f"Checksum mismatch, re-downloading {label}...")

    try:
        response = requests.get(release.url, stream=True, timeout=_TIMEOUT)
    except requests.RequestException as exc:
        raise DownloadError(f"failed to download {label}: {exc}") from exc

    with response:
        if response.status_code != 200:
            raise DownloadError(
                f"bad response downloading {label}: {response.status_code} {response.reason}"
            )
        total = int(response.headers.get("Content-Length") or 0)
        try:
            with open(out_path, "wb") as out:
                chunks = response.iter_content(chunk_size=_CHUNK_SIZE)
                if total > 0:
                    with tqdm(total=total, unit="B", unit_scale=True) as bar:
                        for chunk in chunks:
                            out.write(chunk)
                            bar.update(len(chunk))
                else:
                    print("Downloading (unknown size)...")
                    for chunk in chunks:
                        out.write(chunk)
        except (OSError, requests.RequestException) as exc:
            raise DownloadError(f"failed to write {label} file: {exc}") from exc

    if not _verify(
        out_path, release.sha256, f"failed to verify {label} checksum after download"
    ):
        out_path.unlink(missing_ok=True)
        raise DownloadError("checksum mismatch after download")

    print(f"{label} downloaded and verified successfully!")
    return out_path


def download_jre(dest_dir: str | os.PathLike[str], platform: str | None = None) -> Path:
    """Fetch the JRE archive for the platform into dest_dir."""
    return fetch_release(get_jre_release(platform), dest_dir, "JRE")


def download_dynamo(dest_dir: str | os.PathLike[str], platform: str | None = None) -> Path:
    """Fetch the DynamoDB Local archive for the platform into dest_dir."""
    return fetch_release(get_dynamo_release(platform), dest_dir, "DynamoDBLocal")