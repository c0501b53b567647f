"""Optional image sprites, with primitive-shape fallback when missing."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

logger = logging.getLogger(__name__)

# name -> (file, drawn size) ; water pools are scaled to their radius instead
SPRITE_FILES: dict[str, tuple[str, tuple[int, int] | None]] = {
    "player": ("player.png", (40, 44)),
    "tree": ("tree.png", (56, 68)),
    "rock": ("rock.png", (40, 40)),
    "berry": ("berry.png", (24, 24)),
    "water": ("water.png", None),
    "campfire": ("campfire.png", (36, 36)),
}


class Sprites:
    """
    Images for each entity kind, loaded once.

    A sprite that is missing or fails to load is stored as None and the
    renderer draws its primitive shape instead.
    """

    def __init__(self, assets_dir: str | Path | None):
        self._images: dict[str, pygame.Surface | None] = {name: None for name in SPRITE_FILES}
        self._scaled: dict[tuple[str, int], pygame.Surface] = {}
        if assets_dir is None:
            return

        root = Path(assets_dir)
        for name, (filename, size) in SPRITE_FILES.items():
            self._images[name] = self._load(root / filename, size)

    @staticmethod
    def _load(path: Path, size: tuple[int, int] | None) -> pygame.Surface | None:
        if not path.is_file():
            logger.warning("Sprite %s not found, drawing shapes instead", path)
            return None
        try:
            image = pygame.image.load(str(path)).convert_alpha()
        except pygame.error as exc:
            logger.warning("Sprite %s failed to load (%s), drawing shapes instead", path, exc)
            return None
        if size is not None:
            image = pygame.transform.smoothscale(image, size)
        return image

    def get(self, name: str) -> pygame.Surface | None:
        """Get the image for an entity kind, or None to draw a shape."""
        return self._images[name]

    def get_scaled(self, name: str, diameter: int) -> pygame.Surface | None:
        """Get an image scaled to a square of `diameter`, cached per size."""
        image = self._images[name]
        if image is None:
            return None
        key = (name, diameter)
        if key not in self._scaled:
            self._scaled[key] = pygame.transform.smoothscale(image, (diameter, diameter))
        return self._scaled[key]
