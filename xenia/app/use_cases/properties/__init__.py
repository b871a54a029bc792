"""
Property Use Cases

Tenant-scoped property CRUD.
"""

from .create_property_use_case import CreatePropertyUseCase
from .deactivate_property_use_case import DeactivatePropertyUseCase
from .dtos import PropertyCreate, PropertyResponse, PropertyUpdate
from .get_property_use_case import GetPropertyUseCase
from .list_properties_use_case import ListPropertiesUseCase
from .update_property_use_case import UpdatePropertyUseCase

__all__ = [
    "ListPropertiesUseCase",
    "CreatePropertyUseCase",
    "GetPropertyUseCase",
    "UpdatePropertyUseCase",
    "DeactivatePropertyUseCase",
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyResponse",
]
