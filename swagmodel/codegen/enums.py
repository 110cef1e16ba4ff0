"""Enumeration symbol extraction.

Symbols come either from an explicit ``enum`` list or, for integer schemas,
from a description that lists the codes. Two description conventions are
recognised:

    None=0,Active=1,Disabled=2

    0 - None
    1 - Active
    2 - Disabled

The line form also accepts ``=``, ``:`` or a dash as the separator.
"""

import re
from collections.abc import Iterable
from typing import Any

from swagmodel.codegen.models import EnumSymbol
from swagmodel.codegen.utils import upper_snake_case

__all__ = [
    'get_enum_symbols',
    'get_enum_symbols_from_description',
    'get_enum_type',
    'get_enum_values',
]

_INLINE_PAIR = re.compile(r'(\w+)=(-?[0-9]+)(?:,|$)')
_LISTING_LINE = re.compile(r'^\s*(-?[0-9]+)\s*(?:=|:|-|–|—)\s*(.+?)\s*$')


def _symbol_name(value: str) -> str:
    return upper_snake_case(value) or 'EMPTY'


def _unique_names(symbols: list[EnumSymbol]) -> list[EnumSymbol]:
    """Suffix repeated names with _2, _3 and so on, in declaration order."""
    used: set[str] = set()
    result = []
    for symbol in symbols:
        name = symbol.name
        suffix = 2
        while name in used:
            name = f'{symbol.name}_{suffix}'
            suffix += 1
        used.add(name)
        result.append(EnumSymbol(name=name, value=symbol.value))
    return result


def get_enum_symbols(values: Iterable[Any] | None) -> list[EnumSymbol]:
    """Build symbols from a literal enum list, skipping nulls and duplicates."""
    symbols: list[EnumSymbol] = []
    seen: list[Any] = []
    for value in values or []:
        if value is None or any(value == s and type(value) is type(s) for s in seen):
            continue
        seen.append(value)

        if isinstance(value, bool):
            symbols.append(EnumSymbol(name=str(value).upper(), value=value))
        elif isinstance(value, (int, float)):
            name = f'NUM_{value}'.replace('.', '_').replace('-', 'MINUS_')
            symbols.append(EnumSymbol(name=name, value=value))
        else:
            symbols.append(EnumSymbol(name=_symbol_name(str(value)), value=str(value)))
    return _unique_names(symbols)


def get_enum_symbols_from_description(description: str | None) -> list[EnumSymbol]:
    """Parse integer enum symbols out of a free-text description."""
    if not description:
        return []

    pairs = [(name, int(value)) for name, value in _INLINE_PAIR.findall(description)]
    if not pairs:
        for line in description.splitlines():
            match = _LISTING_LINE.match(line)
            if match:
                pairs.append((match.group(2), int(match.group(1))))

    symbols: list[EnumSymbol] = []
    seen: set[int] = set()
    for name, value in pairs:
        if value in seen:
            continue
        seen.add(value)
        symbols.append(EnumSymbol(name=_symbol_name(name), value=value))
    return _unique_names(symbols)


def get_enum_values(symbols: Iterable[EnumSymbol]) -> list[str]:
    """Unique rendered literals of the symbols, sorted."""
    return sorted({symbol.literal for symbol in symbols})


def get_enum_type(symbols: Iterable[EnumSymbol], add_parentheses: bool = False) -> str:
    """Union-of-literals type expression for the symbols.

    Parentheses are added around unions of more than one value when
    requested, which is needed when the union is used as an array element.
    """
    entries = get_enum_values(symbols)
    if len(entries) > 1 and add_parentheses:
        return f'({" | ".join(entries)})'
    return ' | '.join(entries)
