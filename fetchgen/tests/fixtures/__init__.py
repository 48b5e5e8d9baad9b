"""Test fixtures for fetchgen tests.

This module provides sample operation descriptors, in the camelCase form
an upstream parser hands over, covering the main shapes of operation.
"""

SERVER = 'https://api.example.com'

# Single resource lookup with a query parameter and a body-less 404
GET_USER = {
    'path': '/users/{id}',
    'verb': 'get',
    'server': SERVER,
    'positionalParams': [{'name': 'id', 'type': 'string', 'required': True}],
    'queryParams': [
        {'name': 'expand', 'type': 'string', 'description': 'Related fields'}
    ],
    'responses': [
        {
            'code': '200',
            'mediaTypes': [{'mediaType': 'application/json', 'type': 'User'}],
        },
        {'code': '404', 'mediaTypes': []},
    ],
}

# Creation with a JSON body, header parameters and a text fallback response
CREATE_USER = {
    'path': '/users',
    'verb': 'post',
    'server': SERVER,
    'headerParams': [{'name': 'X-Request-Id', 'type': 'string'}],
    'bodyParam': {
        'name': 'body',
        'type': 'NewUser',
        'required': True,
        'mediaType': 'application/json',
    },
    'responses': [
        {
            'code': '201',
            'mediaTypes': [{'mediaType': 'application/json', 'type': 'User'}],
        },
        {
            'code': 'default',
            'mediaTypes': [{'mediaType': 'text/plain', 'type': 'string'}],
        },
    ],
}

# Binary upload that answers without a body
UPLOAD_FILE = {
    'path': '/files/{name}',
    'verb': 'put',
    'server': SERVER,
    'positionalParams': [{'name': 'name', 'type': 'string', 'required': True}],
    'bodyParam': {
        'name': 'file',
        'type': 'Blob',
        'required': True,
        'mediaType': 'application/octet-stream',
    },
    'responses': [{'code': '204', 'mediaTypes': []}],
}

# Text-only responses
GET_REPORT = {
    'path': '/reports/{id}/export',
    'verb': 'get',
    'server': SERVER,
    'positionalParams': [{'name': 'id', 'type': 'number', 'required': True}],
    'queryParams': [{'name': 'format', 'type': '"csv" | "tsv"', 'required': True}],
    'responses': [
        {'code': '200', 'mediaTypes': [{'mediaType': 'text/csv', 'type': 'string'}]},
        {
            'code': '400',
            'mediaTypes': [{'mediaType': 'text/plain', 'type': 'string'}],
        },
    ],
}
