from typing import Any, Literal

from swagmodel.openapi.v2 import Schema, Swagger

__all__ = [
    'Schema',
    'Swagger',
    'detect_version',
]


def detect_version(data: Any) -> Literal['2.0', '3.x', 'unknown']:
    """Determine the OpenAPI version of a raw document."""
    if isinstance(data, dict):
        # Swagger 2.0 uses the 'swagger' field
        if 'swagger' in data:
            return '2.0'
        if str(data.get('openapi', '')).startswith('3'):
            return '3.x'
    return 'unknown'
