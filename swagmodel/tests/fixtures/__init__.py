"""Test fixtures for swagmodel tests.

This module provides sample Swagger 2.0 documents used across the test suite.
"""

# Minimal Swagger 2.0 document for basic testing
MINIMAL_SWAGGER_SPEC = {
    'swagger': '2.0',
    'info': {'title': 'Minimal API', 'version': '1.0.0'},
    'paths': {},
}

# Petstore-like document with every schema shape the resolver distinguishes
PETSTORE_SWAGGER_SPEC = {
    'swagger': '2.0',
    'info': {
        'title': 'Petstore API',
        'version': '1.0.0',
        'description': 'A sample Petstore API for testing',
    },
    'host': 'petstore.example.com',
    'basePath': '/api/v1',
    'schemes': ['https'],
    'paths': {
        '/pets': {
            'get': {
                'operationId': 'listPets',
                'summary': 'List all pets',
                'responses': {
                    '200': {
                        'description': 'A list of pets',
                        'schema': {'$ref': '#/definitions/PetList'},
                    }
                },
            },
            'post': {
                'operationId': 'addPet',
                'parameters': [{'$ref': '#/parameters/PetBody'}],
                'responses': {'201': {'description': 'Created'}},
            },
        },
        '/pets/{petId}': {
            'get': {
                'operationId': 'getPetById',
                'parameters': [
                    {
                        'name': 'petId',
                        'in': 'path',
                        'required': True,
                        'type': 'integer',
                    }
                ],
                'responses': {
                    '200': {
                        'description': 'A pet',
                        'schema': {'$ref': '#/definitions/Pet'},
                    }
                },
            },
            'delete': {
                'operationId': 'deletePet',
                'responses': {'204': {'description': 'Deleted'}},
            },
        },
        '/store/inventory': {
            'get': {
                'operationId': 'getInventory',
                'responses': {'200': {'description': 'Inventory counts'}},
            }
        },
        '/users/{id}/orders': {
            'get': {
                'responses': {'200': {'description': 'Orders of a user'}},
            }
        },
        'x-internal': {'owner': 'pets-team'},
    },
    'parameters': {
        'PetBody': {
            'name': 'body',
            'in': 'body',
            'required': True,
            'schema': {'$ref': '#/definitions/Pet'},
        }
    },
    'definitions': {
        'Category': {
            'type': 'object',
            'properties': {
                'id': {'type': 'integer', 'format': 'int64'},
                'name': {'type': 'string'},
            },
        },
        'Tag': {
            'type': 'object',
            'properties': {
                'id': {'type': 'integer', 'format': 'int64'},
                'name': {'type': 'string'},
            },
        },
        'Pet': {
            'type': 'object',
            'description': 'A pet for sale in the store',
            'required': ['name', 'photoUrls'],
            'properties': {
                'id': {'type': 'integer', 'format': 'int64'},
                'category': {'$ref': '#/definitions/Category'},
                'name': {'type': 'string', 'example': 'doggie'},
                'photoUrls': {'type': 'array', 'items': {'type': 'string'}},
                'tags': {
                    'type': 'array',
                    'items': {'$ref': '#/definitions/Tag'},
                },
                'status': {
                    'type': 'string',
                    'description': 'pet status in the store',
                    'enum': ['available', 'pending', 'sold'],
                },
                'createdAt': {
                    'type': 'string',
                    'format': 'date-time',
                    'readOnly': True,
                    'description': 'When the pet was listed',
                },
            },
        },
        'PetList': {
            'type': 'array',
            'items': {'$ref': '#/definitions/Pet'},
        },
        'Status': {
            'type': 'string',
            'enum': ['available', 'pending', 'sold'],
        },
        'Priority': {
            'type': 'integer',
            'description': 'Low=0,Medium=1,High=2',
        },
        'Labels': {
            'type': 'array',
            'items': {'type': 'string'},
        },
        'Identifier': {'type': 'string', 'format': 'uuid'},
        'Anything': {'description': 'Free-form payload'},
        'Dog': {
            'allOf': [
                {'$ref': '#/definitions/Pet'},
                {'properties': {'breed': {'type': 'string'}}},
            ]
        },
    },
}

# Two operations that derive the same method name
COLLIDING_PATHS_SPEC = {
    'swagger': '2.0',
    'info': {'title': 'Versioned API', 'version': '1.0.0'},
    'paths': {
        '/v1/pets': {'get': {'responses': {'200': {'description': 'OK'}}}},
        '/v2/pets': {'get': {'responses': {'200': {'description': 'OK'}}}},
    },
}

# OpenAPI 3 document, which the loader rejects
OPENAPI_3_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Modern API', 'version': '1.0.0'},
    'paths': {},
}
