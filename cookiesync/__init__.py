"""Sync CookieCloud cookies into a KaraKeep cookie file."""

__version__ = "0.1.0"
