"""Collect the directories and files that the scanners look at."""

from __future__ import annotations

import os

from postmangen.models import ListCatalog


def _scan(directory: str) -> tuple[list[str], list[str]]:
    """Return sorted (directory names, other entry names) of a directory."""
    with os.scandir(directory) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    dirs = [entry.name for entry in ordered if entry.is_dir(follow_symlinks=False)]
    files = [entry.name for entry in ordered if not entry.is_dir(follow_symlinks=False)]
    return dirs, files


def get_folders(path: str | os.PathLike[str]) -> list[ListCatalog]:
    """List the first-level subdirectories of ``path`` and then ``path`` itself.

    Subdirectories whose names contain a dot are skipped, and only the files
    directly inside each subdirectory are listed. The root catalog is last.
    """
    root = os.fspath(path)
    subdirs, root_files = _scan(root)
    catalogs = []
    for name in subdirs:
        if "." in name:
            continue
        sub_path = f"{root}/{name}"
        _, files = _scan(sub_path)
        catalogs.append(ListCatalog(catalog=name, path=sub_path, files=files))
    catalogs.append(ListCatalog(catalog="/", path=f"{root}/", files=root_files))
    return catalogs