"""Document-level driver for model resolution and operation naming."""

import dataclasses
import logging

from swagmodel.codegen.models import Model
from swagmodel.codegen.operation_namer import OperationNamer
from swagmodel.codegen.schema_resolver import SchemaModelResolver
from swagmodel.config import ResolverConfig
from swagmodel.openapi.v2 import Swagger

logger = logging.getLogger(__name__)

__all__ = ['ModelCollector', 'OperationName']


@dataclasses.dataclass(frozen=True)
class OperationName:
    path: str
    method: str
    operation_id: str | None
    name: str


class ModelCollector:
    """Walks a Swagger document and resolves everything in it.

    Example:
        >>> collector = ModelCollector(document)
        >>> [model.name for model in collector.collect_models()]
        ['Category', 'Pet', 'Status']
    """

    def __init__(self, document: Swagger, config: ResolverConfig | None = None):
        self.document = document
        self.config = config or ResolverConfig()
        self.resolver = SchemaModelResolver(self.config)
        self.namer = OperationNamer(self.config.prefer_operation_id)

    def collect_models(self) -> list[Model]:
        """Resolve every entry of ``definitions`` in declaration order."""
        models = []
        for name, schema in (self.document.definitions or {}).items():
            models.append(self.resolver.resolve(self.document, schema, name))
        logger.debug(f'Resolved {len(models)} definitions')
        return models

    def collect_operations(self) -> list[OperationName]:
        """Name every operation of every path.

        Names that collide within the document get a numeric suffix, in
        path declaration order: ``getPets``, ``getPets2``.
        """
        operations: list[OperationName] = []
        used: set[str] = set()

        for path, path_item in self.document.paths.items():
            for method, operation in path_item.operations():
                name = self.namer.name(path, method, operation.operation_id)
                if name in used:
                    suffix = 2
                    while f'{name}{suffix}' in used:
                        suffix += 1
                    unique = f'{name}{suffix}'
                    logger.warning(
                        f"Operation name '{name}' for {method.upper()} {path} "
                        f"already used, renaming to '{unique}'"
                    )
                    name = unique
                used.add(name)

                operations.append(
                    OperationName(
                        path=path,
                        method=method,
                        operation_id=operation.operation_id,
                        name=name,
                    )
                )

        return operations
