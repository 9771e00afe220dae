"""JSON Schema cleanup for Gemini function declarations.

The backend's ``parameters`` field accepts an OpenAPI-flavoured subset of
JSON Schema. Keywords outside that subset are removed, ``const`` becomes a
single-value ``enum`` and nullable type arrays collapse to one type.
Property names are preserved even when they collide with keyword names
(a tool parameter called "pattern" or "default" survives).
"""

from typing import Any

UNSUPPORTED_KEYWORDS = frozenset(
    {
        "$id",
        "$ref",
        "$defs",
        "$schema",
        "$comment",
        "definitions",
        "default",
        "examples",
        "title",
        "const",
        "additionalProperties",
        "patternProperties",
        "propertyNames",
        "unevaluatedProperties",
        "unevaluatedItems",
        "dependentRequired",
        "dependentSchemas",
        "exclusiveMinimum",
        "exclusiveMaximum",
        "multipleOf",
        "uniqueItems",
        "contains",
        "minContains",
        "maxContains",
        "if",
        "then",
        "else",
    }
)

EMPTY_OBJECT_SCHEMA: dict[str, Any] = {"type": "object", "properties": {}}


def clean_json_schema(schema: Any) -> Any:
    """Return a cleaned deep copy of ``schema``; the input is not modified."""
    if isinstance(schema, list):
        return [clean_json_schema(item) for item in schema]
    if not isinstance(schema, dict):
        return schema

    cleaned: dict[str, Any] = {}
    for key, value in schema.items():
        if key in UNSUPPORTED_KEYWORDS:
            continue
        if key == "properties" and isinstance(value, dict):
            cleaned[key] = {name: clean_json_schema(sub) for name, sub in value.items()}
        elif key == "enum" and isinstance(value, list):
            cleaned[key] = list(value)
        elif isinstance(value, (dict, list)):
            cleaned[key] = clean_json_schema(value)
        else:
            cleaned[key] = value

    if "const" in schema and "enum" not in cleaned:
        cleaned["enum"] = [schema["const"]]

    schema_type = cleaned.get("type")
    if isinstance(schema_type, list):
        concrete = [t for t in schema_type if t != "null"]
        cleaned["type"] = concrete[0] if concrete else "string"
        if len(concrete) != len(schema_type):
            cleaned["nullable"] = True

    required = cleaned.get("required")
    properties = cleaned.get("properties")
    if isinstance(required, list) and isinstance(properties, dict):
        kept = [name for name in required if name in properties]
        if kept:
            cleaned["required"] = kept
        else:
            del cleaned["required"]

    return cleaned
