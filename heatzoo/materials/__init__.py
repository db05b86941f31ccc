"""Materials: thermal property models."""

from heatzoo.materials.base import (
    StaticIsotropic,
    DynamicIsotropic,
    StaticAnisotropic,
    DynamicAnisotropic,
    PropertyModel,
    check_properties,
)
from heatzoo.materials.library import steel, dynamic_steel

__all__ = [
    "StaticIsotropic",
    "DynamicIsotropic",
    "StaticAnisotropic",
    "DynamicAnisotropic",
    "PropertyModel",
    "check_properties",
    "steel",
    "dynamic_steel",
]
