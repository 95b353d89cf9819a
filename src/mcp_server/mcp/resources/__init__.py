"""Read-only resources addressed by URI."""

from .catalog import ResourceCatalog, ResourceSpec, build_resource_catalog

__all__ = ["ResourceCatalog", "ResourceSpec", "build_resource_catalog"]
