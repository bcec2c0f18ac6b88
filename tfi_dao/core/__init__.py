"""Core configuration for the DAO layer."""

from .config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
