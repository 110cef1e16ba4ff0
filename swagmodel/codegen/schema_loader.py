"""Schema loading utilities for Swagger documents.

This module provides utilities for loading Swagger 2.0 documents from URLs
or local file paths, in JSON or YAML, and validating them into the
``Swagger`` model that resolution works on.
"""

import json
import logging
from pathlib import Path
from urllib.parse import urljoin, urlparse

import httpx
import yaml
from pydantic import ValidationError

from swagmodel.exceptions import SchemaLoadError, SchemaValidationError
from swagmodel.openapi import detect_version
from swagmodel.openapi.v2 import Swagger

logger = logging.getLogger(__name__)

__all__ = ['SchemaLoader']


class SchemaLoader:
    """Loads Swagger 2.0 documents from URLs or file paths.

    Example:
        >>> loader = SchemaLoader()
        >>> document = loader.load('https://petstore.swagger.io/v2/swagger.json')
        >>> # or
        >>> document = loader.load('/path/to/swagger.yaml')
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base: str | Path | None = None,
    ):
        """Initialize the schema loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, ``httpx.get`` is used.
            base: Base URL or directory relative sources are resolved against.
                  Defaults to the current working directory.
        """
        self._http_client = http_client
        self._base = str(base) if base else None

    def load(self, source: str) -> Swagger:
        """Load and validate a Swagger document from a URL or file path.

        Args:
            source: URL or file path to the document.

        Returns:
            Validated Swagger object.

        Raises:
            SchemaLoadError: If the document cannot be read or parsed.
            SchemaValidationError: If the document is not Swagger 2.0.
        """
        location = self._locate(source)
        logger.debug(f'Loading Swagger document from {location}')

        try:
            if self._is_url(location):
                content = self._load_from_url(location)
            else:
                content = self._load_from_file(location)
        except SchemaLoadError:
            raise
        except Exception as e:
            raise SchemaLoadError(source, cause=e)

        return self.validate(content, source)

    def validate(self, content: dict, source: str = '<dict>') -> Swagger:
        """Validate already-parsed document content."""
        version = detect_version(content)
        if version != '2.0':
            raise SchemaValidationError(
                source,
                errors=[
                    f'Only Swagger 2.0 documents are supported (detected: {version})'
                ],
            )

        try:
            return Swagger.model_validate(content)
        except ValidationError as e:
            raise SchemaValidationError(
                source,
                errors=[
                    f'{".".join(str(p) for p in err["loc"])}: {err["msg"]}'
                    for err in e.errors()
                ],
            )

    def _locate(self, source: str) -> str:
        if self._is_url(source) or not self._base or Path(source).is_absolute():
            return source
        if self._is_url(self._base):
            return urljoin(self._base.rstrip('/') + '/', source)
        return str(Path(self._base) / source)

    def _is_url(self, text: str) -> bool:
        """Check if a string is an http(s) URL."""
        try:
            result = urlparse(text)
            return result.scheme in ('http', 'https') and bool(result.netloc)
        except ValueError:
            return False

    def _load_from_url(self, url: str) -> dict:
        """Load document content from a URL."""
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=30.0)

            response.raise_for_status()
            content_type = response.headers.get('content-type', '')

            if 'yaml' in content_type or url.endswith(('.yaml', '.yml')):
                return yaml.safe_load(response.text)
            return json.loads(response.text)

        except httpx.HTTPError as e:
            raise SchemaLoadError(url, cause=e)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(url, cause=e)

    def _load_from_file(self, file_path: str) -> dict:
        """Load document content from a file."""
        path = Path(file_path)

        if not path.exists():
            raise SchemaLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            content = path.read_text(encoding='utf-8')
            if path.suffix.lower() in ('.yaml', '.yml'):
                return yaml.safe_load(content)
            return json.loads(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(str(file_path), cause=e)
        except OSError as e:
            raise SchemaLoadError(str(file_path), cause=e)
