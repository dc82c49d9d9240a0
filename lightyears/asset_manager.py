"""Process-wide cache of loaded textures."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Optional

import pygame

from .core import log

__all__ = ["AssetManager"]

Loader = Callable[[str], Any]


def _load_image(path: str) -> Any:
    return pygame.image.load(path)


def _refcount(mapping: Dict[Any, Any], key: Any) -> int:
    return sys.getrefcount(mapping[key])


# Reference count of a value held by nothing but a dictionary, measured
# through the same call pattern that clear_cycle uses.
_UNSHARED_REFCOUNT = _refcount({None: object()}, None)


class AssetManager:
    """Loads textures once and drops those nobody else holds any more."""

    _instance: Optional["AssetManager"] = None

    def __init__(self, loader: Optional[Loader] = None) -> None:
        self._loader: Loader = loader if loader is not None else _load_image
        self._textures: Dict[str, Any] = {}

    @classmethod
    def get(cls) -> "AssetManager":
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load_texture(self, path: str) -> Optional[Any]:
        """Return the texture at ``path``, or None if it cannot be loaded."""
        cached = self._textures.get(path)
        if cached is not None:
            return cached
        try:
            texture = self._loader(path)
        except (pygame.error, OSError):
            return None
        if texture is None:
            return None
        self._textures[path] = texture
        return texture

    def clear_cycle(self) -> None:
        """Forget every texture that only this manager still references."""
        for path in list(self._textures):
            if _refcount(self._textures, path) <= _UNSHARED_REFCOUNT:
                log("cleaning texture : %s", path)
                del self._textures[path]