"""Assembly of runtime validator expressions.

The expressions target a yup-style schema builder. They are opaque to the
resolver: built here, carried on the Model, and rendered by the emitter.
"""

from collections.abc import Iterable

__all__ = ['array_of', 'element_validator', 'one_of']

_PRIMITIVE_VALIDATORS = {
    'string': 'string',
    'number': 'number',
    'boolean': 'boolean',
    'interface': 'object',
    'any': 'mixed',
    'File': 'mixed',
    'void': 'mixed',
}


def one_of(namespace: str, name: str, values: Iterable[str]) -> str:
    """Validator accepting only the given rendered literal values."""
    return f'{namespace}.mixed<{name}>().oneOf([{", ".join(values)}])'


def element_validator(namespace: str, base_type: str) -> str:
    """Validator for a single array element of the given base type."""
    if base_type in _PRIMITIVE_VALIDATORS:
        return f'{namespace}.{_PRIMITIVE_VALIDATORS[base_type]}()'
    if not base_type.isidentifier():
        return f'{namespace}.mixed()'
    return f'{base_type}.schema'


def array_of(namespace: str, name: str, base_type: str) -> str:
    """Validator for an array whose elements have the given base type."""
    return f'{namespace}.array<{name}>().of({element_validator(namespace, base_type)})'
