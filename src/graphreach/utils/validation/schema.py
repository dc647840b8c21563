"""
Schema validation for graph documents.

``Graph.from_dict`` accepts a plain mapping describing a graph:

    {
        "nodes": ["A", "B", "C"],
        "edges": [["A", "B"], ["B", "C"]]
    }

``nodes`` is optional (edge endpoints are added implicitly) and lets callers
declare isolated nodes. Node values must be JSON scalars so that they are
hashable once loaded.
"""

from typing import Any, Dict

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from ...core.exceptions import ValidationError

NODE_SCHEMA: Dict[str, Any] = {"type": ["string", "integer", "number", "boolean"]}

GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "nodes": {"type": "array", "items": NODE_SCHEMA},
        "edges": {
            "type": "array",
            "items": {
                "type": "array",
                "items": NODE_SCHEMA,
                "minItems": 2,
                "maxItems": 2,
            },
        },
    },
    "required": ["edges"],
    "additionalProperties": False,
}


def validate_graph_document(document: Dict[str, Any]) -> None:
    """
    Validate a graph document against ``GRAPH_SCHEMA``.

    Args:
        document: Mapping with ``edges`` and optional ``nodes`` keys

    Raises:
        ValidationError: If the document does not match the schema
    """
    try:
        json_validate(instance=document, schema=GRAPH_SCHEMA)
    except JsonSchemaError as e:
        raise ValidationError(f"Invalid graph document: {e.message}") from e
