from .protocol import McpMethod, McpProtocol
from .resources import ResourceCatalog, build_resource_catalog
from .schema import validate_tool_args
from .tools import ToolRegistry, build_tool_registry

__all__ = [
    "McpMethod",
    "McpProtocol",
    "ResourceCatalog",
    "ToolRegistry",
    "build_resource_catalog",
    "build_tool_registry",
    "validate_tool_args",
]
