"""Loader settings loading."""

from .app import LoaderSettings, get_settings


__all__ = ["LoaderSettings", "get_settings"]
