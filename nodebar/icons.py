"""
Icon loading and caching

Icons are decoded lazily on first use and kept for the lifetime of the
cache. Icon sets are small and fixed, so nothing is ever evicted.
"""

from __future__ import annotations
from typing import Callable, Dict, Optional, Union
from pathlib import Path
import logging

import numpy as np
import matplotlib.image as mpimg

from .types import IconRef, Node

logger = logging.getLogger(__name__)

IconLoader = Callable[[IconRef], Optional[np.ndarray]]


class FileIconLoader:
    """Loads icons from image files in a directory"""

    EXTENSIONS = ('.png', '.jpg', '.jpeg')

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    def resolve(self, ref: IconRef) -> Optional[Path]:
        """
        Find the file for an icon reference

        The reference is a file name, with or without extension.
        """
        candidate = self.directory / str(ref)
        if candidate.suffix and candidate.exists():
            return candidate
        for ext in self.EXTENSIONS:
            path = candidate.with_name(candidate.name + ext)
            if path.exists():
                return path
        return None

    def __call__(self, ref: IconRef) -> Optional[np.ndarray]:
        path = self.resolve(ref)
        if path is None:
            logger.debug(f"No icon file for {ref!r} in {self.directory}")
            return None
        return mpimg.imread(str(path))


class IconCache:
    """
    Populate-once cache in front of an icon loader

    A loader returning None or raising FileNotFoundError means the icon
    does not exist; such misses are not cached.
    """

    def __init__(self, loader: IconLoader) -> None:
        self.loader = loader
        self._cache: Dict[IconRef, np.ndarray] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, ref: IconRef) -> bool:
        return ref in self._cache

    def get(self, ref: Optional[IconRef]) -> Optional[np.ndarray]:
        if ref is None:
            return None
        if ref in self._cache:
            return self._cache[ref]
        try:
            image = self.loader(ref)
        except FileNotFoundError as e:
            logger.warning(f"Icon {ref!r} not found: {e}")
            return None
        if image is None:
            return None
        image = np.asarray(image)
        self._cache[ref] = image
        logger.debug(f"Cached icon {ref!r} ({image.shape[1]}x{image.shape[0]})")
        return image

    def preload(self, *refs: Optional[IconRef]) -> None:
        for ref in refs:
            self.get(ref)

    def icon_for(
        self,
        node: Node,
        active: bool,
        default_active: Optional[IconRef] = None,
        default_inactive: Optional[IconRef] = None
    ) -> Optional[np.ndarray]:
        """
        Image for a node in the given state

        The node's own icon wins; otherwise the style default for the state.
        """
        ref = node.icon_for(active)
        if ref is None:
            ref = default_active if active else default_inactive
        return self.get(ref)


def icon_size(image: np.ndarray) -> tuple:
    """(width, height) of a decoded image"""
    return (image.shape[1], image.shape[0])
