"""Configuration package — re-exports for convenience."""

from invite_gallery.config.loader import ConfigLoader
from invite_gallery.config.settings import Settings

__all__ = ["ConfigLoader", "Settings"]
