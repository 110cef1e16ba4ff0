"""Tests for the Swagger 2.0 document models."""

import pytest
from pydantic import ValidationError

from swagmodel.openapi import detect_version
from swagmodel.openapi.v2 import PathItem, Schema, Swagger
from swagmodel.tests.fixtures import (
    MINIMAL_SWAGGER_SPEC,
    OPENAPI_3_SPEC,
    PETSTORE_SWAGGER_SPEC,
)


class TestDetectVersion:
    """Tests for detect_version."""

    def test_swagger(self):
        assert detect_version(PETSTORE_SWAGGER_SPEC) == '2.0'

    def test_openapi_3(self):
        assert detect_version(OPENAPI_3_SPEC) == '3.x'

    def test_unknown(self):
        assert detect_version({'info': {}}) == 'unknown'
        assert detect_version('swagger') == 'unknown'


class TestSchema:
    """Tests for the Schema model."""

    def test_reference_alias(self):
        """Test that $ref is read into ref."""
        assert Schema.model_validate({'$ref': '#/definitions/Pet'}).ref == (
            '#/definitions/Pet'
        )

    def test_declared_type_from_list(self):
        """Test that the first non-null entry of a type list is used."""
        assert Schema(type=['null', 'string']).declared_type == 'string'
        assert Schema(type=['null']).declared_type is None

    def test_item_schema(self):
        """Test that tuple-style items have no single item schema."""
        single = Schema.model_validate({'type': 'array', 'items': {'type': 'string'}})
        tuple_items = Schema.model_validate(
            {'type': 'array', 'items': [{'type': 'string'}, {'type': 'integer'}]}
        )

        assert single.item_schema.declared_type == 'string'
        assert tuple_items.item_schema is None

    def test_declared_properties_keep_order(self):
        """Test that properties are returned in document order."""
        schema = Schema.model_validate(
            {'properties': {'z': {}, 'a': {}, 'm': {}}}
        )

        assert [name for name, _ in schema.declared_properties()] == ['z', 'a', 'm']

    def test_vendor_extensions_are_kept(self):
        """Test that x- fields are accepted."""
        schema = Schema.model_validate({'type': 'string', 'x-nullable': True})

        assert schema.model_extra == {'x-nullable': True}


class TestPathItem:
    """Tests for the PathItem model."""

    def test_operations_order(self):
        """Test that operations are yielded in a fixed method order."""
        item = PathItem.model_validate(
            {
                'delete': {'responses': {}},
                'get': {'responses': {}},
                'post': {'responses': {}},
            }
        )

        assert [method for method, _ in item.operations()] == [
            'get',
            'post',
            'delete',
        ]


class TestSwagger:
    """Tests for the root document model."""

    def test_minimal(self):
        """Test the smallest valid document."""
        document = Swagger.model_validate(MINIMAL_SWAGGER_SPEC)

        assert document.definitions is None
        assert document.paths == {}

    def test_numeric_versions(self):
        """Test that YAML-style numeric versions are accepted."""
        document = Swagger.model_validate(
            {'swagger': 2.0, 'info': {'title': 'API', 'version': 1.5}}
        )

        assert document.swagger == '2.0'
        assert document.info.version == '1.5'

    def test_wrong_version(self):
        """Test that other versions are rejected."""
        with pytest.raises(ValidationError):
            Swagger.model_validate(
                {'swagger': '1.2', 'info': {'title': 'A', 'version': '1'}}
            )
