"""Unpacking of the downloaded .tar.gz and .zip archives."""

from __future__ import annotations

import os
import shutil
import stat
import tarfile
import zipfile

from tqdm import tqdm

_PARENT_DIR_MODE = 0o755


def _open_for_write(target: str, mode: int):
    flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)
    return os.fdopen(os.open(target, flags, mode), "wb")


def extract_tar_gz(path: str | os.PathLike[str], dest: str | os.PathLike[str]) -> None:
    """Unpack a gzip-compressed tar archive into dest.

    Directories and regular files are created with their recorded modes;
    symbolic and hard links are skipped; any other entry is written as a file.
    """
    dest = os.fspath(dest)
    size = os.path.getsize(path)
    with open(path, "rb") as raw, tqdm.wrapattr(
        raw, "read", total=size, unit="B", unit_scale=True
    ) as tracked, tarfile.open(fileobj=tracked, mode="r|gz") as archive:
        for member in archive:
            target = os.path.join(dest, member.name)
            mode = member.mode & 0o7777
            if member.isdir():
                os.makedirs(target, mode=mode, exist_ok=True)
            elif member.isreg():
                os.makedirs(os.path.dirname(target), mode=_PARENT_DIR_MODE, exist_ok=True)
                source = archive.extractfile(member)
                with source, open(target, "wb") as out:
                    shutil.copyfileobj(source, out)
                os.chmod(target, mode)
            elif member.issym() or member.islnk():
                continue
            else:
                print(f"Unknown type {member.type!r} — treating {member.name} as file")
                os.makedirs(os.path.dirname(target), mode=_PARENT_DIR_MODE, exist_ok=True)
                source = archive.extractfile(member)
                with open(target, "wb") as out:
                    if source is not None:
                        with source:
                            shutil.copyfileobj(source, out)
                os.chmod(target, mode)


def _zip_mode(info: zipfile.ZipInfo) -> int:
    unix_mode = (info.external_attr >> 16) & 0o7777
    if unix_mode:
        return unix_mode
    if info.is_dir():
        return 0o777
    read_only = info.external_attr & 0x01
    return 0o444 if read_only else 0o666


def extract_zip(path: str | os.PathLike[str], dest: str | os.PathLike[str]) -> None:
    """Unpack a zip archive into dest, keeping the recorded file modes."""
    dest = os.fspath(dest)
    with zipfile.ZipFile(path) as archive:
        for info in archive.infolist():
            target = os.path.join(dest, info.filename)
            mode = _zip_mode(info)
            if info.is_dir():
                os.makedirs(target, mode=mode, exist_ok=True)
                continue
            os.makedirs(os.path.dirname(target), mode=_PARENT_DIR_MODE, exist_ok=True)
            with archive.open(info) as source, tqdm.wrapattr(
                source, "read", total=info.file_size, unit="B", unit_scale=True
            ) as tracked, _open_for_write(target, mode) as out:
                shutil.copyfileobj(tracked, out)


def decompress(path: str | os.PathLike[str], dest: str | os.PathLike[str]) -> None:
    """Unpack an archive into dest, choosing the format from its file name."""
    name = os.fspath(path).lower()
    if name.endswith(".zip"):
        extract_zip(path, dest)
    elif name.endswith((".tar.gz", ".tgz")):
        extract_tar_gz(path, dest)
    else:
        raise ValueError(f"unsupported archive format: {os.fspath(path)}")


__all__ = ["extract_tar_gz", "extract_zip", "decompress", "stat"]