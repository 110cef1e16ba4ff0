import json
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from swagmodel.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['swagmodel.yaml', 'swagmodel.yml']


class DocumentConfig(BaseModel):
    """Represents a single Swagger document to be processed."""

    source: str = Field(..., description='Path or URL to the Swagger 2.0 document.')

    base_url: str | None = Field(
        None,
        description='Optional base URL used to resolve relative file sources.',
    )


class ResolverConfig(BaseSettings):
    """Settings for schema resolution and operation naming."""

    model_config = SettingsConfigDict(env_prefix='SWAGMODEL_')

    validator_namespace: str = Field(
        'yup', description='Identifier prefixed to generated validator expressions.'
    )

    prefer_operation_id: bool = Field(
        False,
        description='Use the operationId, when present, as the generated method name.',
    )

    composition: Literal['ignore', 'error'] = Field(
        'ignore',
        description='What to do with allOf schemas: skip the composition or fail.',
    )

    strict_references: bool = Field(
        False,
        description='Raise on dangling or non-local $ref pointers instead of '
        'degrading them to an untyped schema.',
    )

    unknown_item_name: str = Field(
        'unknown', description='Name given to anonymous array item schemas.'
    )


class SwagModelConfig(BaseSettings):
    documents: list[DocumentConfig] = Field(
        default_factory=list, description='List of Swagger documents to process.'
    )

    resolver: ResolverConfig = Field(
        default_factory=ResolverConfig, description='Resolution settings.'
    )


def load_yaml(path: str | Path) -> dict:
    import yaml

    return yaml.safe_load(Path(path).read_text()) or {}


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text())


def _load_config_file(path: str | Path) -> dict:
    path = Path(path)
    if not path.exists():
        raise ConfigurationError('Configuration file not found', config_path=str(path))

    try:
        if path.suffix.lower() == '.json':
            return load_json(path)
        return load_yaml(path)
    except Exception as e:
        raise ConfigurationError(
            f'Could not parse configuration: {e}', config_path=str(path)
        ) from e


def _validate(data: dict, config_path: str) -> SwagModelConfig:
    try:
        return SwagModelConfig.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = '.'.join(str(part) for part in first['loc']) or None
        raise ConfigurationError(
            f'Invalid configuration: {first["msg"]}',
            config_path=config_path,
            field=field,
        ) from e


def get_config(path: str | None = None) -> SwagModelConfig:
    """Load configuration from a file or return the default config.

    Lookup order: the explicit ``path``, then ``swagmodel.yaml`` /
    ``swagmodel.yml`` in the working directory, then ``[tool.swagmodel]``
    in ``pyproject.toml``. When none exists the defaults are returned.
    """
    if path:
        return _validate(_load_config_file(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            return _validate(_load_config_file(candidate), str(candidate))

    candidate = Path(cwd) / 'pyproject.toml'

    if candidate.exists():
        import tomllib

        pyproject = tomllib.loads(candidate.read_text())
        tools = pyproject.get('tool', {})

        if 'swagmodel' in tools:
            return _validate(tools['swagmodel'], str(candidate))

    return SwagModelConfig()
