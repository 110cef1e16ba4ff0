"""OpenAPI/Swagger 2.0 document models."""

from swagmodel.openapi.v2.v2 import (
    HTTP_METHODS,
    Info,
    Operation,
    Parameter,
    PathItem,
    Response,
    Schema,
    Swagger,
    Tag,
)

__all__ = [
    # Main model
    "Swagger",
    # Info models
    "Info",
    "Tag",
    # Schema models
    "Schema",
    # Parameter and response models
    "Parameter",
    "Response",
    # Operation models
    "Operation",
    "PathItem",
    # Constants
    "HTTP_METHODS",
]
