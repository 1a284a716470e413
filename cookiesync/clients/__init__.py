"""Expose constructed client wrappers."""

from .cookie_cloud import CookieCloudClient

__all__ = ["CookieCloudClient"]
