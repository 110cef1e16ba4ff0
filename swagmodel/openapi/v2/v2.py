"""
Pydantic V2 models for Swagger/OpenAPI 2.0 documents.

Only the parts of the document that model resolution and operation naming
read are modelled strictly; everything else is accepted as-is so that real
world documents with vendor extensions (x-*) still load.

Usage Example:
-------------

    from swagmodel.openapi.v2 import Swagger

    spec = Swagger.model_validate(swagger_dict)

    for name, schema in (spec.definitions or {}).items():
        print(name, schema.declared_type)

    for path, path_item in spec.paths.items():
        for method, operation in path_item.operations():
            print(method.upper(), path, operation.operation_id)
"""

from typing import Any, Dict, Iterator, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


# ============================================================================
# Base Models
# ============================================================================


class BaseModelWithVendorExtensions(BaseModel):
    """Base model that allows vendor extensions (x- fields)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


# ============================================================================
# Info Models
# ============================================================================


class Info(BaseModelWithVendorExtensions):
    """General information about the API."""

    title: str
    version: str
    description: Optional[str] = None
    terms_of_service: Optional[str] = Field(None, alias="termsOfService")

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, data: Any) -> Any:
        """YAML reads unquoted versions such as 1.0 as numbers."""
        if isinstance(data, (int, float)):
            return str(data)
        return data


class Tag(BaseModelWithVendorExtensions):
    """API tag for grouping operations."""

    name: str
    description: Optional[str] = None


# ============================================================================
# Schema Models
# ============================================================================


class Schema(BaseModelWithVendorExtensions):
    """
    JSON Schema object for Swagger 2.0.

    A schema is either a reference (``ref`` set) or an inline definition.
    Declared ``properties`` keep the order they have in the document.
    """

    ref: Optional[str] = Field(None, alias="$ref")
    format: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    default: Optional[Any] = None
    maximum: Optional[float] = None
    minimum: Optional[float] = None
    max_length: Optional[int] = Field(None, alias="maxLength", ge=0)
    min_length: Optional[int] = Field(None, alias="minLength", ge=0)
    pattern: Optional[str] = None
    max_items: Optional[int] = Field(None, alias="maxItems", ge=0)
    min_items: Optional[int] = Field(None, alias="minItems", ge=0)
    required: Optional[List[str]] = None
    enum: Optional[List[Any]] = None
    type: Optional[Union[str, List[str]]] = None
    items: Optional[Union["Schema", List["Schema"]]] = None
    all_of: Optional[List["Schema"]] = Field(None, alias="allOf")
    properties: Optional[Dict[str, "Schema"]] = None
    additional_properties: Optional[Union["Schema", bool]] = Field(
        None, alias="additionalProperties"
    )
    discriminator: Optional[str] = None
    read_only: bool = Field(False, alias="readOnly")
    example: Optional[Any] = None

    @property
    def declared_type(self) -> Optional[str]:
        """The declared type name, taking the first non-null entry of a type list."""
        if isinstance(self.type, list):
            return next((t for t in self.type if t != "null"), None)
        return self.type

    @property
    def item_schema(self) -> Optional["Schema"]:
        """The single item schema of an array, or None for tuple-style items."""
        if isinstance(self.items, Schema):
            return self.items
        return None

    def declared_properties(self) -> List[Tuple[str, "Schema"]]:
        """Declared properties as (name, schema) pairs in document order."""
        return list((self.properties or {}).items())


# ============================================================================
# Parameter Models
# ============================================================================


class Parameter(BaseModelWithVendorExtensions):
    """Operation parameter (body, query, header, path or formData)."""

    ref: Optional[str] = Field(None, alias="$ref")
    name: Optional[str] = None
    in_: Optional[str] = Field(None, alias="in")
    description: Optional[str] = None
    required: bool = False
    schema_: Optional[Schema] = Field(None, alias="schema")
    type: Optional[str] = None
    format: Optional[str] = None
    items: Optional[Schema] = None
    enum: Optional[List[Any]] = None


# ============================================================================
# Response Models
# ============================================================================


class Response(BaseModelWithVendorExtensions):
    """Response object, or a reference to one."""

    ref: Optional[str] = Field(None, alias="$ref")
    description: Optional[str] = None
    schema_: Optional[Schema] = Field(None, alias="schema")
    headers: Optional[Dict[str, Any]] = None
    examples: Optional[Dict[str, Any]] = None


# ============================================================================
# Operation Models
# ============================================================================


class Operation(BaseModelWithVendorExtensions):
    """Operation (HTTP method) on a path."""

    tags: Optional[List[str]] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    operation_id: Optional[str] = Field(None, alias="operationId")
    consumes: Optional[List[str]] = None
    produces: Optional[List[str]] = None
    parameters: Optional[List[Parameter]] = None
    responses: Dict[str, Response] = Field(default_factory=dict)
    deprecated: bool = False

    @field_validator("responses", mode="before")
    @classmethod
    def validate_responses(cls, data: Any) -> Any:
        """Accept status codes that YAML parsed as integers."""
        if not isinstance(data, dict):
            return data
        return {str(key): value for key, value in data.items()}


class PathItem(BaseModelWithVendorExtensions):
    """Path item with operations."""

    ref: Optional[str] = Field(None, alias="$ref")
    get: Optional[Operation] = None
    put: Optional[Operation] = None
    post: Optional[Operation] = None
    delete: Optional[Operation] = None
    options: Optional[Operation] = None
    head: Optional[Operation] = None
    patch: Optional[Operation] = None
    parameters: Optional[List[Parameter]] = None

    def operations(self) -> Iterator[Tuple[str, Operation]]:
        """Yield (method, operation) pairs for the methods defined on this path."""
        for method in HTTP_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                yield method, operation


# ============================================================================
# Main Swagger Model
# ============================================================================


class Swagger(BaseModelWithVendorExtensions):
    """
    Root Swagger 2.0 specification object.

    This is the document context every ``$ref`` pointer is resolved against.
    """

    swagger: Literal["2.0"]
    info: Info
    host: Optional[str] = None
    base_path: Optional[str] = Field(None, alias="basePath")
    schemes: Optional[List[str]] = None
    consumes: Optional[List[str]] = None
    produces: Optional[List[str]] = None
    paths: Dict[str, PathItem] = Field(default_factory=dict)
    definitions: Optional[Dict[str, Schema]] = None
    parameters: Optional[Dict[str, Parameter]] = None
    responses: Optional[Dict[str, Response]] = None
    tags: Optional[List[Tag]] = None

    @field_validator("swagger", mode="before")
    @classmethod
    def validate_swagger(cls, data: Any) -> Any:
        """Accept an unquoted ``swagger: 2.0`` from YAML."""
        if isinstance(data, float):
            return str(data)
        return data

    @field_validator("paths", mode="before")
    @classmethod
    def validate_paths(cls, data: Any) -> Any:
        """Drop vendor extensions and check that every path starts with '/'."""
        if not isinstance(data, dict):
            return data

        result = {}
        for key, value in data.items():
            if key.startswith("x-"):
                continue
            if not key.startswith("/"):
                raise ValueError(f"Path must start with '/', got: {key}")
            result[key] = value
        return result
