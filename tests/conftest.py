"""Shared fixtures for api_classgen tests."""

import copy

import pytest

from api_classgen.core.config import GeneratorConfig


class RecordingEngine:
    """Template engine double that records every render call."""

    def __init__(self):
        self.calls = []
        self.config = GeneratorConfig()

    def render_template(self, template_name, context):
        self.calls.append((template_name, copy.deepcopy(context)))
        if template_name == self.config.function_template:
            return f"function:{context['function_name']}\nend"
        if template_name == self.config.property_template:
            return f"property:{context['property_name']}={context['value']}"
        return f"class:{context['type_name']}"

    def contexts(self, template_name):
        return [context for name, context in self.calls if name == template_name]

    @property
    def class_context(self):
        return self.contexts(self.config.class_template)[-1]


@pytest.fixture
def engine():
    return RecordingEngine()


@pytest.fixture
def descriptor_document():
    return {
        "classes": [
            {
                "name": "User Account",
                "imports": ['import {User} from "../interface/user";'],
                "properties": [
                    {"propertyName": "id", "value": "string", "required": True},
                ],
                "functions": [
                    {
                        "functionName": "getUser",
                        "httpMethod": "GET",
                        "originalPath": "/users/{id}",
                        "urlParameter": ["id"],
                        "queryParameters": [],
                        "responseClass": "User",
                        "isJsonResponse": True,
                    }
                ],
            },
            {
                "name": "user",
                "description": "A registered user",
                "properties": [
                    {"property_name": "name", "value": "string", "required": True},
                    {"property_name": "tags", "value": "string", "is_array": True},
                ],
            },
        ]
    }
