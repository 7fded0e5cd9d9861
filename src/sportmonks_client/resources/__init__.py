"""Ресурсы SportMonks Football API."""

from .registry import RESOURCES, FOOTBALL_ROOT, Endpoint, ResourceDescriptor
from .resource import Resource, build_resources

__all__ = [
    "RESOURCES",
    "FOOTBALL_ROOT",
    "Endpoint",
    "ResourceDescriptor",
    "Resource",
    "build_resources",
]
