"""Schema resolution for swagmodel.

Main Components:
    - SchemaModelResolver: Turns one schema node into a Model
    - OperationNamer: Derives method names from paths and HTTP methods
    - RefResolver: Resolves $ref pointers to type names and definitions
    - TypeMapper: Maps declared type names to rendered types
    - SchemaLoader: Loads Swagger 2.0 documents from URLs or files
    - ModelCollector: Resolves every definition and operation of a document

Example:
    >>> from swagmodel.codegen import SchemaLoader, SchemaModelResolver
    >>>
    >>> document = SchemaLoader().load('./swagger.json')
    >>> resolver = SchemaModelResolver()
    >>> model = resolver.resolve(document, document.definitions['Pet'], 'Pet')
"""

from swagmodel.codegen.collector import ModelCollector, OperationName
from swagmodel.codegen.comments import get_comment
from swagmodel.codegen.enums import (
    get_enum_symbols,
    get_enum_symbols_from_description,
    get_enum_type,
    get_enum_values,
)
from swagmodel.codegen.models import (
    ArrayModel,
    EnumModel,
    EnumSymbol,
    InterfaceModel,
    MappedType,
    Model,
    PrimitiveModel,
    PropertyModel,
    UntypedModel,
)
from swagmodel.codegen.operation_namer import OperationNamer, get_operation_name
from swagmodel.codegen.references import RefResolver
from swagmodel.codegen.schema_loader import SchemaLoader
from swagmodel.codegen.schema_resolver import SchemaModelResolver
from swagmodel.codegen.type_mapper import TypeMapper, get_type

__all__ = [
    # Resolution
    'SchemaModelResolver',
    'OperationNamer',
    'get_operation_name',
    'ModelCollector',
    'OperationName',
    # Collaborators
    'RefResolver',
    'TypeMapper',
    'get_type',
    'get_comment',
    'get_enum_symbols',
    'get_enum_symbols_from_description',
    'get_enum_type',
    'get_enum_values',
    'SchemaLoader',
    # Models
    'Model',
    'EnumModel',
    'ArrayModel',
    'InterfaceModel',
    'PrimitiveModel',
    'UntypedModel',
    'PropertyModel',
    'EnumSymbol',
    'MappedType',
]
