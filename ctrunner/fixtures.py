"""
Fixture data directories.

Each ``<test_dir>/*_data`` directory is made visible inside the application's
ebin directory, as a symlink where the platform allows it and as a copy
otherwise.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import List, Union

from .exceptions import FixtureLinkError


logger = logging.getLogger(__name__)

DATA_DIR_GLOB = "*_data"


def find_data_dirs(test_dir: Union[str, Path]) -> List[Path]:
    """Return fixture data directories under test_dir, sorted by name."""
    test_dir = Path(test_dir)
    return sorted(p for p in test_dir.glob(DATA_DIR_GLOB) if p.is_dir())


def _remove(path: Path) -> None:
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)


def symlink_or_copy(source: Path, destination: Path) -> Path:
    """
    Point destination at source.

    An up-to-date symlink is left alone; anything else already at
    destination is replaced.

    Raises:
        FixtureLinkError: If neither a symlink nor a copy could be made
    """
    source = source.resolve()

    if destination.is_symlink() and Path(os.readlink(destination)) == source:
        return destination

    try:
        _remove(destination)
    except OSError as e:
        raise FixtureLinkError(source, destination, str(e)) from e

    try:
        os.symlink(source, destination, target_is_directory=True)
        logger.debug(f"Linked {destination} -> {source}")
        return destination
    except OSError as e:
        logger.debug(f"Symlink failed for {destination} ({e}), copying instead")

    try:
        shutil.copytree(source, destination)
    except OSError as e:
        # A failed copy can leave a partial tree behind
        shutil.rmtree(destination, ignore_errors=True)
        raise FixtureLinkError(source, destination, str(e)) from e

    logger.debug(f"Copied {source} to {destination}")
    return destination


def link_data_dirs(test_dir: Union[str, Path], ebin_path: Union[str, Path]) -> List[Path]:
    """
    Link every fixture data directory into ebin_path.

    Returns:
        Destinations created, in the order the data directories were found
    """
    ebin_path = Path(ebin_path)
    data_dirs = find_data_dirs(test_dir)
    if not data_dirs:
        return []

    ebin_path.mkdir(parents=True, exist_ok=True)

    linked = []
    for data_dir in data_dirs:
        linked.append(symlink_or_copy(data_dir, ebin_path / data_dir.name))
    return linked
