"""Tests for $ref pointer resolution."""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from swagmodel.codegen.references import RefResolver
from swagmodel.exceptions import CyclicSchemaReferenceError, SchemaReferenceError
from swagmodel.openapi.v2 import Schema, Swagger
from swagmodel.tests.fixtures import PETSTORE_SWAGGER_SPEC

REFERENCE_SPEC = {
    'swagger': '2.0',
    'info': {'title': 'References', 'version': '1.0.0'},
    'paths': {},
    'definitions': {
        'Pet': {'type': 'object', 'properties': {'name': {'type': 'string'}}},
        'PetAlias': {'$ref': '#/definitions/Pet'},
        'AliasOfAlias': {'$ref': '#/definitions/PetAlias'},
        'Loop1': {'$ref': '#/definitions/Loop2'},
        'Loop2': {'$ref': '#/definitions/Loop1'},
        'Self': {'$ref': '#/definitions/Self'},
        'a/b': {'type': 'integer'},
        'x~y': {'type': 'boolean'},
    },
}


def ref(pointer: str) -> Schema:
    return Schema(ref=pointer)


@pytest.fixture
def document():
    return Swagger.model_validate(REFERENCE_SPEC)


@pytest.fixture
def resolver():
    return RefResolver()


class TestResolveType:
    """Tests for naming the target of a pointer."""

    def test_definition(self, resolver):
        """Test that a pointer maps to the referenced name."""
        mapped = resolver.resolve_type('#/definitions/Pet')

        assert mapped.rendered_type == 'Pet'
        assert mapped.imports == ('Pet',)

    def test_does_not_need_the_target(self, resolver):
        """Test that naming works for definitions that do not exist."""
        assert resolver.resolve_type('#/definitions/Ghost').rendered_type == 'Ghost'


class TestResolveDefinition:
    """Tests for fetching the schema a pointer targets."""

    def test_inline_schema_is_its_own_definition(self, resolver, document):
        """Test that a node without $ref is returned unchanged."""
        node = Schema(type='string')

        assert resolver.resolve_definition(document, node) is node

    def test_direct_reference(self, resolver, document):
        """Test a single pointer."""
        schema = resolver.resolve_definition(document, ref('#/definitions/Pet'))

        assert schema is document.definitions['Pet']

    def test_reference_chain(self, resolver, document):
        """Test that chains of aliases are followed to the end."""
        schema = resolver.resolve_definition(
            document, ref('#/definitions/AliasOfAlias')
        )

        assert schema is document.definitions['Pet']

    def test_deep_pointer(self, resolver, document):
        """Test a pointer into the properties of a definition."""
        schema = resolver.resolve_definition(
            document, ref('#/definitions/Pet/properties/name')
        )

        assert schema.declared_type == 'string'

    def test_escaped_segments(self, resolver, document):
        """Test the ~1 and ~0 escapes."""
        slash = resolver.resolve_definition(document, ref('#/definitions/a~1b'))
        tilde = resolver.resolve_definition(document, ref('#/definitions/x~0y'))

        assert slash.declared_type == 'integer'
        assert tilde.declared_type == 'boolean'

    def test_body_parameter(self, resolver):
        """Test that a parameter pointer resolves through its schema."""
        document = Swagger.model_validate(PETSTORE_SWAGGER_SPEC)

        schema = resolver.resolve_definition(document, ref('#/parameters/PetBody'))

        assert schema is document.definitions['Pet']

    def test_cache_follows_the_document(self, resolver, document):
        """Test that switching documents does not reuse cached targets."""
        other = Swagger.model_validate(
            {
                'swagger': '2.0',
                'info': {'title': 'Other', 'version': '1.0.0'},
                'definitions': {'Pet': {'type': 'string'}},
            }
        )

        first = resolver.resolve_definition(document, ref('#/definitions/Pet'))
        second = resolver.resolve_definition(other, ref('#/definitions/Pet'))

        assert first.declared_type == 'object'
        assert second.declared_type == 'string'

    def test_documents_do_not_share_entries(self, resolver, document):
        """Test that alternating documents each get their own targets."""
        other = Swagger.model_validate(
            {
                'swagger': '2.0',
                'info': {'title': 'Other', 'version': '1.0.0'},
                'definitions': {'Pet': {'type': 'string'}},
            }
        )

        for _ in range(3):
            mine = resolver.resolve_definition(document, ref('#/definitions/Pet'))
            theirs = resolver.resolve_definition(other, ref('#/definitions/Pet'))

            assert mine is document.definitions['Pet']
            assert theirs is other.definitions['Pet']

    def test_concurrent_documents(self, resolver, document):
        """Test one resolver used from several threads on different documents."""
        others = [
            Swagger.model_validate(
                {
                    'swagger': '2.0',
                    'info': {'title': f'Other {i}', 'version': '1.0.0'},
                    'definitions': {'Pet': {'type': 'string', 'title': str(i)}},
                }
            )
            for i in range(4)
        ]
        documents = [document, *others] * 25

        def lookup(doc):
            return doc, resolver.resolve_definition(doc, ref('#/definitions/Pet'))

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lookup, documents))

        assert all(schema is doc.definitions['Pet'] for doc, schema in results)

    def test_clear_cache(self, resolver, document):
        """Test that clearing the cache still resolves correctly."""
        resolver.resolve_definition(document, ref('#/definitions/Pet'))
        resolver.clear_cache()

        schema = resolver.resolve_definition(document, ref('#/definitions/Pet'))

        assert schema is document.definitions['Pet']


class TestCycles:
    """Tests for looping reference chains."""

    def test_two_step_cycle(self, resolver, document):
        """Test that a two-definition loop is reported."""
        with pytest.raises(CyclicSchemaReferenceError) as exc_info:
            resolver.resolve_definition(document, document.definitions['Loop1'])

        assert exc_info.value.chain == [
            '#/definitions/Loop2',
            '#/definitions/Loop1',
            '#/definitions/Loop2',
        ]
        assert 'reference cycle' in str(exc_info.value)

    def test_self_reference(self, resolver, document):
        """Test that a definition pointing at itself is reported."""
        with pytest.raises(CyclicSchemaReferenceError) as exc_info:
            resolver.resolve_definition(document, ref('#/definitions/Self'))

        assert exc_info.value.reference == '#/definitions/Self'

    def test_cycle_is_a_reference_error(self, resolver, document):
        """Test that cycles can be caught as reference errors."""
        with pytest.raises(SchemaReferenceError):
            resolver.resolve_definition(document, ref('#/definitions/Loop2'))


class TestDanglingReferences:
    """Tests for pointers that cannot be resolved."""

    def test_missing_target_degrades(self, resolver, document, caplog):
        """Test that a dangling pointer becomes an empty schema with a warning."""
        with caplog.at_level(logging.WARNING):
            schema = resolver.resolve_definition(
                document, ref('#/definitions/Missing')
            )

        assert schema == Schema()
        assert 'Missing' in caplog.text

    def test_missing_target_strict(self, document):
        """Test that strict resolution raises for a dangling pointer."""
        resolver = RefResolver(strict=True)

        with pytest.raises(SchemaReferenceError) as exc_info:
            resolver.resolve_definition(document, ref('#/definitions/Missing'))

        assert exc_info.value.reference == '#/definitions/Missing'
        assert "'Missing' not found" in str(exc_info.value)

    def test_external_url(self, document):
        """Test that remote pointers are rejected."""
        resolver = RefResolver(strict=True)

        with pytest.raises(SchemaReferenceError) as exc_info:
            resolver.resolve_definition(
                document, ref('https://example.com/models.json#/Pet')
            )

        assert 'External URL references are not supported' in str(exc_info.value)

    def test_relative_file(self, document):
        """Test that pointers into other files are rejected."""
        resolver = RefResolver(strict=True)

        with pytest.raises(SchemaReferenceError) as exc_info:
            resolver.resolve_definition(document, ref('models.json#/Pet'))

        assert 'must start with #/' in str(exc_info.value)

    def test_not_a_schema(self, document):
        """Test that pointers at non-schema values are rejected."""
        resolver = RefResolver(strict=True)

        with pytest.raises(SchemaReferenceError) as exc_info:
            resolver.resolve_definition(document, ref('#/info/title'))

        assert 'does not point at a schema' in str(exc_info.value)
