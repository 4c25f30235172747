"""Application/UI layer package."""

from .facade import ConfigEntryView, ConfigFacade

__all__ = ["ConfigFacade", "ConfigEntryView"]
