"""
Operation and property descriptors handed to a ClassModel.

These are the normalized shapes an upstream producer extracts from an
API specification. They carry already-resolved type names; no inference
happens here.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

# Keys used by producers that emit camelCase documents
FUNCTION_KEY_ALIASES = {
    "functionName": "function_name",
    "httpMethod": "http_method",
    "originalPath": "original_path",
    "urlParameter": "url_parameters",
    "urlParameters": "url_parameters",
    "queryParameters": "query_parameters",
    "parameterClassName": "parameter_class_name",
    "requestBodyClass": "request_body_class",
    "isRequestBodyJson": "is_request_body_json",
    "responseClass": "response_class",
    "isJsonResponse": "is_json_response",
    "forceInterceptor": "force_interceptor",
}

PROPERTY_KEY_ALIASES = {
    "propertyName": "property_name",
    "isArray": "is_array",
    "import": "import_name",
}


def _normalize_keys(
    data: Dict[str, Any], aliases: Dict[str, str], known: set
) -> Dict[str, Any]:
    """Map aliased keys to field names and drop anything unknown."""
    result = {}
    for key, value in data.items():
        name = aliases.get(key, key)
        if name in known:
            result[name] = value
    return result


@dataclass
class FunctionDescriptor:
    """One HTTP operation of an API resource."""

    function_name: str
    http_method: str
    original_path: str
    url_parameters: List[str] = field(default_factory=list)
    query_parameters: List[str] = field(default_factory=list)
    description: Optional[str] = None
    parameter_class_name: Optional[str] = None
    request_body_class: Optional[str] = None
    is_request_body_json: bool = False
    response_class: Optional[str] = None
    is_json_response: bool = False
    force_interceptor: bool = False
    imports: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FunctionDescriptor":
        """Build a descriptor from a snake_case or camelCase mapping."""
        known = {f.name for f in fields(cls)}
        values = _normalize_keys(data, FUNCTION_KEY_ALIASES, known)
        # JSON null for list payloads
        for list_field in ("url_parameters", "query_parameters", "imports"):
            if values.get(list_field) is None:
                values.pop(list_field, None)
        return cls(**values)


@dataclass
class PropertyDescriptor:
    """One field of an API schema."""

    property_name: str
    value: str
    required: bool = False
    is_array: bool = False
    description: Optional[str] = None
    import_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PropertyDescriptor":
        """Build a descriptor from a snake_case or camelCase mapping."""
        known = {f.name for f in fields(cls)}
        return cls(**_normalize_keys(data, PROPERTY_KEY_ALIASES, known))
