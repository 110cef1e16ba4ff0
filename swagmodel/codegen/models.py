"""Resolved model types.

A Model is the language-agnostic description of how one schema node should
be rendered. Each variant is its own class so that a model is exactly one of
enum, array, interface, primitive or untyped; the ``is_enum``,
``is_interface`` and ``is_type`` flags are derived from the class rather than
set independently.
"""

import dataclasses
import json
from typing import Any, ClassVar, Literal

__all__ = [
    'ArrayModel',
    'EnumModel',
    'EnumSymbol',
    'InterfaceModel',
    'MappedType',
    'Model',
    'ModelKind',
    'PrimitiveModel',
    'PropertyModel',
    'UntypedModel',
]

ModelKind = Literal['enum', 'array', 'interface', 'primitive', 'untyped']


@dataclasses.dataclass(frozen=True)
class MappedType:
    """A rendered type expression together with what it depends on."""

    rendered_type: str = 'any'
    base_type: str = 'any'
    template: str | None = None
    imports: tuple[str, ...] = ()


@dataclasses.dataclass(frozen=True)
class EnumSymbol:
    name: str
    value: str | int | float | bool

    @property
    def is_numeric(self) -> bool:
        return isinstance(self.value, (int, float)) and not isinstance(self.value, bool)

    @property
    def literal(self) -> str:
        """The value as it appears in a union-of-literals expression."""
        if isinstance(self.value, str):
            return "'" + self.value.replace('\\', '\\\\').replace("'", "\\'") + "'"
        return json.dumps(self.value)


@dataclasses.dataclass(frozen=True)
class PropertyModel:
    name: str
    type: str
    required: bool = False
    nullable: bool = False
    read_only: bool = False
    description: str | None = None


@dataclasses.dataclass(frozen=True, kw_only=True)
class Model:
    """Fields shared by every model variant.

    Attributes:
        name: Identifier supplied by the caller.
        rendered_type: The type expression to emit.
        base_type: Underlying kind used to pick a runtime validator.
        template: Generic-parameter metadata passed through from type mapping.
        validation: Runtime validator expression, if one is produced.
        description: Human-readable text, possibly empty.
        extends: Reserved for composition; always empty.
        imports: External type names in discovery order.
    """

    kind: ClassVar[ModelKind]

    name: str
    rendered_type: str = 'any'
    base_type: str = 'any'
    template: str | None = None
    validation: str | None = None
    description: str = ''
    extends: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()

    @property
    def is_enum(self) -> bool:
        return self.kind == 'enum'

    @property
    def is_interface(self) -> bool:
        return self.kind == 'interface'

    @property
    def is_type(self) -> bool:
        return self.kind in ('array', 'primitive')

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation including the variant kind."""
        return {'kind': self.kind, **dataclasses.asdict(self)}


@dataclasses.dataclass(frozen=True, kw_only=True)
class EnumModel(Model):
    kind: ClassVar[ModelKind] = 'enum'

    symbols: tuple[EnumSymbol, ...] = ()


@dataclasses.dataclass(frozen=True, kw_only=True)
class ArrayModel(Model):
    kind: ClassVar[ModelKind] = 'array'


@dataclasses.dataclass(frozen=True, kw_only=True)
class InterfaceModel(Model):
    kind: ClassVar[ModelKind] = 'interface'

    base_type: str = 'interface'
    properties: tuple[PropertyModel, ...] = ()


@dataclasses.dataclass(frozen=True, kw_only=True)
class PrimitiveModel(Model):
    kind: ClassVar[ModelKind] = 'primitive'


@dataclasses.dataclass(frozen=True, kw_only=True)
class UntypedModel(Model):
    kind: ClassVar[ModelKind] = 'untyped'
