"""Admin toggle API client."""

from .client import ToggleApiClient

__all__ = ["ToggleApiClient"]
