import re
import unicodedata

__all__ = (
    'camel_case',
    'capitalize',
    'sanitize_identifier',
    'strip_namespace',
    'upper_snake_case',
)

_NAMESPACES = (
    '#/definitions/',
    '#/parameters/',
    '#/responses/',
    '#/securityDefinitions/',
)

_SEPARATORS = r'[_.\- ]+'


def capitalize(input_string):
    if not input_string:
        return ''
    return input_string[0].upper() + input_string[1:]


def remove_accents(input_str):
    nfkd_form = unicodedata.normalize('NFKD', input_str)
    return ''.join(c for c in nfkd_form if not unicodedata.combining(c))


def _preserve_camel_case(value: str) -> str:
    """Insert a '-' at every existing camel-case boundary.

    'userId' -> 'user-Id', 'XMLHttpRequest' -> 'XML-Http-Request'.
    """
    chars = list(value)
    i = 0
    last_lower = last_upper = last_last_upper = False
    while i < len(chars):
        char = chars[i]
        is_alpha = char.isascii() and char.isalpha()
        if last_lower and is_alpha and char.isupper():
            chars.insert(i, '-')
            last_lower = False
            last_last_upper = last_upper
            last_upper = True
            i += 1
        elif last_upper and last_last_upper and is_alpha and char.islower():
            chars.insert(i - 1, '-')
            last_last_upper = last_upper
            last_upper = False
            last_lower = True
        else:
            last_lower = char.lower() == char and char.upper() != char
            last_last_upper = last_upper
            last_upper = char.upper() == char and char.lower() != char
        i += 1
    return ''.join(chars)


def camel_case(value: str) -> str:
    """Convert a string to camelCase.

    Runs of '_', '.', '-' and spaces become word boundaries and existing
    camel-case boundaries are kept. Any other character (including '/',
    '{' and '}') is passed through, so URL templates keep their shape:

        >>> camel_case('/pet-store/{pet_id}')
        '/petStore/{petId}'
    """
    value = value.strip()
    if not value:
        return ''
    if len(value) == 1:
        return value.lower()

    if value != value.lower():
        value = _preserve_camel_case(value)

    value = re.sub(rf'^{_SEPARATORS}', '', value).lower()
    value = re.sub(rf'{_SEPARATORS}(\w|$)', lambda m: m.group(1).upper(), value)
    return re.sub(r'\d+(\w|$)', lambda m: m.group(0).upper(), value)


def upper_snake_case(value: str) -> str:
    """Convert a value to an UPPER_SNAKE identifier ('inProgress' -> 'IN_PROGRESS')."""
    value = re.sub(r'([a-z])([A-Z]+)', r'\1_\2', remove_accents(value))
    value = re.sub(r'[^A-Za-z0-9]+', '_', value).strip('_').upper()
    if value and value[0].isdigit():
        value = '_' + value
    return value


def strip_namespace(value: str) -> str:
    """Strip a local definitions/parameters/responses prefix from a reference."""
    for namespace in _NAMESPACES:
        if value.startswith(namespace):
            return value[len(namespace) :]
    return value


def sanitize_identifier(name: str) -> str:
    """Convert a string into a valid type identifier.

    - Replace spaces, dots and hyphens with word boundaries
    - Remove other invalid characters
    - Ensure it doesn't start with a digit
    - Convert multi-part names to PascalCase
    """
    if not name:
        return 'UnnamedType'

    parts = re.sub(r'[^A-Za-z0-9]+', '_', remove_accents(name)).split('_')

    if len(parts) == 1:
        sanitized = parts[0]
    else:
        sanitized = ''.join(capitalize(part) for part in parts if part)

    if sanitized and sanitized[0].isdigit():
        sanitized = '_' + sanitized

    return sanitized or 'UnnamedType'
