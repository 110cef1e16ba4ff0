"""swagmodel - Resolve Swagger 2.0 schemas into renderable type models.

swagmodel is the schema-resolution core of a client code generator. Given a
schema definition from a Swagger 2.0 document it produces a language-agnostic
Model (interface, enum, typed array or primitive alias) with the type names
it depends on and a validator expression. It also derives method names for
HTTP operations from their paths.

Quick Start:
    >>> from swagmodel import SchemaLoader, SchemaModelResolver
    >>>
    >>> document = SchemaLoader().load('./swagger.yaml')
    >>> resolver = SchemaModelResolver()
    >>> model = resolver.resolve(document, document.definitions['Pet'], 'Pet')
    >>> model.rendered_type
    'Pet'

CLI Usage:
    $ swagmodel models ./swagger.yaml
    $ swagmodel operations ./swagger.yaml
"""

from importlib.metadata import PackageNotFoundError, version

from swagmodel.codegen import (
    ArrayModel,
    EnumModel,
    EnumSymbol,
    InterfaceModel,
    MappedType,
    Model,
    ModelCollector,
    OperationName,
    OperationNamer,
    PrimitiveModel,
    PropertyModel,
    RefResolver,
    SchemaLoader,
    SchemaModelResolver,
    TypeMapper,
    UntypedModel,
)
from swagmodel.config import (
    DocumentConfig,
    ResolverConfig,
    SwagModelConfig,
    get_config,
)
from swagmodel.exceptions import (
    ConfigurationError,
    CyclicSchemaReferenceError,
    SchemaError,
    SchemaLoadError,
    SchemaReferenceError,
    SchemaValidationError,
    SwagModelError,
    UnsupportedFeatureError,
)

__all__ = [
    # Main classes
    'SchemaModelResolver',
    'OperationNamer',
    'ModelCollector',
    'OperationName',
    'RefResolver',
    'TypeMapper',
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
    # Configuration
    'DocumentConfig',
    'ResolverConfig',
    'SwagModelConfig',
    'get_config',
    # Exceptions
    'SwagModelError',
    'SchemaError',
    'SchemaLoadError',
    'SchemaValidationError',
    'SchemaReferenceError',
    'CyclicSchemaReferenceError',
    'ConfigurationError',
    'UnsupportedFeatureError',
]

try:
    __version__ = version('swagmodel')
except PackageNotFoundError:
    __version__ = 'unknown'
