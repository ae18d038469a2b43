"""A brick-breaker arcade game built on pygame."""

__all__ = ["resources", "objects", "buff", "blocks", "menus", "game", "app"]