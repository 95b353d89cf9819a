"""Server settings loading and validation."""
from .loader import load_settings
from .models import PathsSettings, ServerSettings, Settings, ToolsSettings, ValidationSettings

__all__ = [
    "Settings",
    "ServerSettings",
    "ValidationSettings",
    "ToolsSettings",
    "PathsSettings",
    "load_settings",
]
