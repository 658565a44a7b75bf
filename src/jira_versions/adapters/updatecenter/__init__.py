"""
Update Center Adapter - Plugin index and PluginMetadataPort implementation.
"""

from .client import UpdateCenterClient

__all__ = ["UpdateCenterClient"]
