"""Configuration package - Settings loaded from the environment."""

from .settings import ExportLabels, Settings, settings

__all__ = ['ExportLabels', 'Settings', 'settings']
