"""Media handling: screenshot resources."""

from .resource_registry import Resource, ResourceRegistry, decode_image_data

__all__ = ["Resource", "ResourceRegistry", "decode_image_data"]
