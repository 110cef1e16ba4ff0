"""Generated method names for HTTP operations."""

from swagmodel.codegen.utils import camel_case, capitalize, sanitize_identifier

__all__ = ['OperationNamer', 'get_operation_name']


def get_operation_name(url: str, method: str) -> str:
    """Derive a method name from a URL template and HTTP method.

    Literal path segments become the name body and ``{param}`` segments a
    ``By...And...`` suffix. When there is more than one literal segment the
    first is dropped, since it is the resource prefix every operation under
    that path shares.

        >>> get_operation_name('/users/{id}/orders', 'GET')
        'getOrdersById'
    """
    groups: list[str] = []
    params: list[str] = []
    for section in camel_case(url).split('/'):
        if not section:
            continue
        if section.startswith('{') and section.endswith('}'):
            params.append(section[1:-1])
        else:
            groups.append(section)

    if len(groups) > 1:
        groups.pop(0)

    name = method.lower() + ''.join(capitalize(group) for group in groups)
    if params:
        name += 'By' + 'And'.join(capitalize(param) for param in params)
    return name


class OperationNamer:
    """Names operations, optionally preferring the document's operationId.

    With ``prefer_operation_id`` off (the default) the operationId is
    accepted but not consulted and every name is derived from the path.
    """

    def __init__(self, prefer_operation_id: bool = False):
        self.prefer_operation_id = prefer_operation_id

    def name(self, url: str, method: str, operation_id: str | None = None) -> str:
        if self.prefer_operation_id and operation_id and operation_id.strip():
            return camel_case(sanitize_identifier(operation_id))
        return get_operation_name(url, method)
