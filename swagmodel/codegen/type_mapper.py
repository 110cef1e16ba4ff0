"""Mapping of declared Swagger type names to rendered types.

The mapper accepts primitive names (``integer``, ``date-time``), model
references (``#/definitions/Pet``) and the generic notation some documents
use for containers (``array[Pet]``, ``Page[Pet]``).
"""

import re

from swagmodel.codegen.models import MappedType
from swagmodel.codegen.utils import sanitize_identifier, strip_namespace

__all__ = ['TypeMapper', 'PRIMITIVE_TYPE_MAP', 'get_type']

PRIMITIVE_TYPE_MAP = {
    'file': 'File',
    'any': 'any',
    'object': 'any',
    'array': 'any[]',
    'boolean': 'boolean',
    'byte': 'number',
    'int': 'number',
    'integer': 'number',
    'long': 'number',
    'float': 'number',
    'double': 'number',
    'short': 'number',
    'number': 'number',
    'char': 'string',
    'date': 'string',
    'date-time': 'string',
    'password': 'string',
    'string': 'string',
    'void': 'void',
    'null': 'void',
}

_GENERIC = re.compile(r'^(.*?)\[(.*)\]$')


class TypeMapper:
    """Resolves type names to MappedType values.

    Example:
        >>> mapper = TypeMapper()
        >>> mapper.get_type('integer').rendered_type
        'number'
        >>> mapper.get_type('#/definitions/Pet').imports
        ('Pet',)
    """

    def __init__(self, type_map: dict[str, str] | None = None):
        self.type_map = dict(PRIMITIVE_TYPE_MAP)
        if type_map:
            self.type_map.update(type_map)

    def has_mapped_type(self, value: str) -> bool:
        return value in self.type_map

    def get_type(self, value: str | None, template: str | None = None) -> MappedType:
        """Map a declared type name or reference to a MappedType.

        Args:
            value: Type name, ``$ref`` pointer or generic expression.
            template: Name of the enclosing generic parameter, if any. A value
                that resolves to it is treated as the parameter itself.

        Returns:
            The mapped type. Unknown or empty input maps to ``any``.
        """
        clean = strip_namespace(value or '').strip()
        rendered = base = 'any'
        result_template: str | None = None
        imports: list[str] = []

        match = _GENERIC.match(clean)
        if match:
            outer = self.get_type(match.group(1))
            inner = self.get_type(match.group(2)) if match.group(2) else None

            if outer.rendered_type == 'any[]' and inner is not None:
                rendered = f'{inner.rendered_type}[]'
                base = inner.rendered_type
                imports.extend(inner.imports)
            elif inner is None:
                rendered = base = result_template = outer.rendered_type
                imports.extend(outer.imports)
            else:
                rendered = f'{outer.rendered_type}<{inner.rendered_type}>'
                base = result_template = outer.rendered_type
                imports.extend(outer.imports)
                imports.extend(inner.imports)
        elif self.has_mapped_type(clean):
            rendered = base = self.type_map[clean]
        elif clean:
            rendered = base = sanitize_identifier(clean)
            imports.append(rendered)

        if template is not None and rendered == template:
            result_template = template
            imports = []

        return MappedType(
            rendered_type=rendered,
            base_type=base,
            template=result_template,
            imports=tuple(imports),
        )


_default_mapper = TypeMapper()


def get_type(value: str | None, template: str | None = None) -> MappedType:
    """Map a type name with the default primitive table."""
    return _default_mapper.get_type(value, template)
