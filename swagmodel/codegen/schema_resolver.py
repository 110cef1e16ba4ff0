"""Resolution of Swagger schema nodes into Models.

This module provides the SchemaModelResolver class, which decides how a
single schema definition is rendered: as an enum, a typed array, an
interface, a primitive alias or, when nothing matches, an untyped ``any``.
"""

import logging

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
from swagmodel.codegen.references import RefResolver
from swagmodel.codegen.type_mapper import TypeMapper
from swagmodel.codegen.validation import array_of, one_of
from swagmodel.config import ResolverConfig
from swagmodel.exceptions import UnsupportedFeatureError
from swagmodel.openapi.v2 import Schema, Swagger

logger = logging.getLogger(__name__)

__all__ = ['SchemaModelResolver']


def _element_expression(rendered_type: str) -> str:
    if ' | ' in rendered_type and not rendered_type.startswith('('):
        return f'({rendered_type})'
    return rendered_type


def _property_key(name: str) -> str:
    if name.isidentifier():
        return name
    return "'" + name.replace("'", "\\'") + "'"


def _inline_object(properties: tuple[PropertyModel, ...]) -> str:
    if not properties:
        return '{}'
    members = []
    for prop in properties:
        optional = '' if prop.required else '?'
        member = f'{_property_key(prop.name)}{optional}: {prop.type}'
        if prop.read_only:
            member = f'readonly {member}'
        members.append(member)
    return '{ ' + '; '.join(members) + ' }'


class SchemaModelResolver:
    """Converts schema nodes into Models.

    Resolution is best effort: shapes the resolver does not understand
    degrade to an UntypedModel instead of raising. The first matching rule
    wins, in this order:

    1. a non-empty ``enum`` list (always string-backed),
    2. an ``integer`` whose description lists its codes (number-backed),
    3. an ``array`` with an item schema,
    4. an ``object`` with ``properties``,
    5. any other declared ``type``, mapped as a primitive or generic,
    6. otherwise untyped.

    ``allOf`` composition is never merged; see ``ResolverConfig.composition``.

    Example:
        >>> resolver = SchemaModelResolver()
        >>> model = resolver.resolve(document, document.definitions['Pet'], 'Pet')
        >>> model.is_interface
        True
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        type_mapper: TypeMapper | None = None,
        ref_resolver: RefResolver | None = None,
    ):
        self.config = config or ResolverConfig()
        self.type_mapper = type_mapper or TypeMapper()
        self.ref_resolver = ref_resolver or RefResolver(
            self.type_mapper, strict=self.config.strict_references
        )

    def resolve(self, document: Swagger, schema: Schema, name: str) -> Model:
        """Resolve one schema node into a Model.

        Args:
            document: The document ``$ref`` pointers are resolved against.
            schema: The schema node to resolve.
            name: Name of the model, either the definition name or a
                placeholder for inline schemas.

        Returns:
            A fresh Model owned by the caller.
        """
        description = get_comment(schema.description)
        declared_type = schema.declared_type

        if schema.enum:
            symbols = get_enum_symbols(schema.enum)
            if symbols:
                return self._enum_model(name, description, symbols, 'string')

        if declared_type == 'integer' and schema.description:
            symbols = get_enum_symbols_from_description(schema.description)
            if symbols:
                return self._enum_model(name, description, symbols, 'number')

        items = schema.item_schema
        if declared_type == 'array' and items is not None:
            if items.ref:
                element = self._reference(document, items.ref)
            else:
                element = self.resolve_anonymous(
                    document, items, self.config.unknown_item_name
                )
            return ArrayModel(
                name=name,
                description=description,
                rendered_type=f'{_element_expression(element.rendered_type)}[]',
                base_type=element.base_type,
                template=element.template,
                imports=element.imports,
                validation=array_of(
                    self.config.validator_namespace, name, element.base_type
                ),
            )

        if declared_type == 'object' and schema.properties is not None:
            return self._interface_model(document, schema, name, description)

        if schema.all_of:
            if self.config.composition == 'error':
                raise UnsupportedFeatureError(
                    f"allOf composition in schema '{name}'",
                    'Inline the parent properties or set composition to "ignore"',
                )
            logger.debug(f"Ignoring allOf composition in schema '{name}'")

        if declared_type:
            mapped = self.type_mapper.get_type(declared_type)
            return PrimitiveModel(
                name=name,
                description=description,
                rendered_type=mapped.rendered_type,
                base_type=mapped.base_type,
                template=mapped.template,
                imports=mapped.imports,
            )

        logger.debug(f"Schema '{name}' has no recognisable shape, using 'any'")
        return UntypedModel(name=name, description=description)

    def resolve_anonymous(
        self, document: Swagger, schema: Schema, fallback_name: str
    ) -> MappedType:
        """Resolve a nested schema to the type expression used where it appears.

        Args:
            document: The document ``$ref`` pointers are resolved against.
            schema: An inline schema or a bare reference.
            fallback_name: Name used for the nested model if it needs one.

        Returns:
            The rendered type and the imports it needs. Inline objects are
            rendered as object literal types.
        """
        if schema.ref:
            return self._reference(document, schema.ref)

        model = self.resolve(document, schema, fallback_name)
        if isinstance(model, InterfaceModel):
            return MappedType(
                rendered_type=_inline_object(model.properties),
                base_type=model.base_type,
                imports=model.imports,
            )
        if isinstance(model, EnumModel):
            return MappedType(
                rendered_type=model.rendered_type, base_type=model.base_type
            )
        return MappedType(
            rendered_type=model.rendered_type,
            base_type=model.base_type,
            template=model.template,
            imports=model.imports,
        )

    def _reference(self, document: Swagger, ref: str) -> MappedType:
        """Name the target of a pointer.

        With ``strict_references`` the target is looked up first, so dangling
        and non-local pointers raise SchemaReferenceError. Otherwise the
        pointer is named without consulting the document.
        """
        if self.config.strict_references:
            self.ref_resolver.resolve_definition(document, Schema(ref=ref))
        return self.ref_resolver.resolve_type(ref)

    def _enum_model(
        self,
        name: str,
        description: str,
        symbols: list[EnumSymbol],
        base_type: str,
    ) -> EnumModel:
        return EnumModel(
            name=name,
            description=description,
            symbols=tuple(symbols),
            rendered_type=get_enum_type(symbols),
            base_type=base_type,
            validation=one_of(
                self.config.validator_namespace, name, get_enum_values(symbols)
            ),
        )

    def _interface_model(
        self, document: Swagger, schema: Schema, name: str, description: str
    ) -> InterfaceModel:
        required = schema.required or []
        properties: list[PropertyModel] = []
        imports: list[str] = []

        for property_name, property_schema in schema.declared_properties():
            property_required = property_name in required

            if property_schema.ref:
                property_type = self._reference(document, property_schema.ref)
                imports.extend(property_type.imports)
                properties.append(
                    PropertyModel(
                        name=property_name,
                        type=property_type.rendered_type,
                        required=property_required,
                    )
                )
                continue

            definition = self.ref_resolver.resolve_definition(document, property_schema)
            property_type = self.resolve_anonymous(document, definition, property_name)
            imports.extend(property_type.imports)
            properties.append(
                PropertyModel(
                    name=property_name,
                    type=property_type.rendered_type,
                    required=property_required,
                    read_only=definition.read_only,
                    description=get_comment(definition.description) or None,
                )
            )

        return InterfaceModel(
            name=name,
            description=description,
            rendered_type=name,
            properties=tuple(properties),
            imports=tuple(imports),
        )
