"""Reference resolution for Swagger 2.0 documents.

This module provides the RefResolver class, which turns ``$ref`` pointers
into rendered type names and into the schema definitions they point at.
"""

import logging
from typing import Any

from pydantic import BaseModel

from swagmodel.codegen.models import MappedType
from swagmodel.codegen.type_mapper import TypeMapper
from swagmodel.exceptions import CyclicSchemaReferenceError, SchemaReferenceError
from swagmodel.openapi.v2 import Schema, Swagger

logger = logging.getLogger(__name__)

__all__ = ['RefResolver']


class RefResolver:
    """Resolves $ref pointers against the document they appear in.

    Two kinds of resolution are offered. ``resolve_type`` only needs the
    pointer itself and maps it to the name of the referenced type.
    ``resolve_definition`` walks the document to fetch the schema a pointer
    targets, following chains of references.

    Example:
        >>> resolver = RefResolver()
        >>> resolver.resolve_type('#/definitions/Pet').rendered_type
        'Pet'
        >>> resolver.resolve_definition(document, Schema(ref='#/definitions/Pet'))
        Schema(...)
    """

    def __init__(self, type_mapper: TypeMapper | None = None, strict: bool = False):
        """Initialize the reference resolver.

        Args:
            type_mapper: Mapper used to name referenced types.
            strict: Raise SchemaReferenceError for dangling or non-local
                pointers instead of degrading them to an empty schema.
        """
        self.type_mapper = type_mapper or TypeMapper()
        self.strict = strict
        self._cache: dict[tuple[int, str], tuple[Swagger, Schema]] = {}

    def resolve_type(self, ref: str) -> MappedType:
        """Map a pointer to the rendered type of its target."""
        return self.type_mapper.get_type(ref)

    def resolve_definition(self, document: Swagger, node: Schema) -> Schema:
        """Return the schema definition ``node`` stands for.

        A node without ``$ref`` is its own definition. Otherwise the pointer
        is followed, repeatedly if the target is itself a reference.

        Raises:
            CyclicSchemaReferenceError: If the chain of pointers loops.
            SchemaReferenceError: If a pointer cannot be resolved and the
                resolver is strict.
        """
        chain: list[str] = []
        current = node
        while current.ref:
            ref = current.ref
            if ref in chain:
                raise CyclicSchemaReferenceError(ref, chain + [ref])
            chain.append(ref)
            current = self._lookup(document, ref)
        return current

    def clear_cache(self) -> None:
        """Clear the reference resolution cache."""
        self._cache.clear()

    def _lookup(self, document: Swagger, ref: str) -> Schema:
        # Entries hold their document, so the id in the key stays unique.
        key = (id(document), ref)
        cached = self._cache.get(key)
        if cached is not None and cached[0] is document:
            return cached[1]

        try:
            schema = self._resolve_pointer(document, ref)
        except SchemaReferenceError as e:
            if self.strict:
                raise
            logger.warning(f'{e.message}; treating it as an untyped schema')
            return Schema()

        self._cache[key] = (document, schema)
        return schema

    def _resolve_pointer(self, document: Swagger, ref: str) -> Schema:
        """Resolve a local JSON Pointer to a schema.

        Args:
            document: The document to walk.
            ref: The local reference (e.g., '#/definitions/Pet').

        Raises:
            SchemaReferenceError: If the pointer is not local, does not exist
                or does not point at a schema.
        """
        if ref.startswith(('http://', 'https://')):
            raise SchemaReferenceError(
                ref,
                'External URL references are not supported. '
                'Consider bundling the document first.',
            )
        if not ref.startswith('#/'):
            raise SchemaReferenceError(ref, 'Local reference must start with #/')

        current: Any = document
        for raw_part in ref[2:].split('/'):
            part = raw_part.replace('~1', '/').replace('~0', '~')
            current = self._step(current, part)
            if current is None:
                raise SchemaReferenceError(ref, f"'{part}' not found")

        if isinstance(current, Schema):
            return current
        if isinstance(current, dict):
            return Schema.model_validate(current)
        schema = getattr(current, 'schema_', None)
        if isinstance(schema, Schema):
            return schema

        raise SchemaReferenceError(ref, 'Reference does not point at a schema')

    @staticmethod
    def _step(current: Any, part: str) -> Any:
        if isinstance(current, BaseModel):
            for field_name, field_info in type(current).model_fields.items():
                if part in (field_name, field_info.alias):
                    return getattr(current, field_name)
            return (current.model_extra or {}).get(part)
        if isinstance(current, dict):
            return current.get(part)
        if isinstance(current, list) and part.isdigit() and int(part) < len(current):
            return current[int(part)]
        return None
