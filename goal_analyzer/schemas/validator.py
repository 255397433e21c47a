import json
from pathlib import Path
from typing import Any, Dict, Literal

import jsonschema

from ..errors import AnalyzeRequestError

SchemaType = Literal["analyze_request"]


def _load_schema(name: str) -> Dict[str, Any]:
    schema_path = Path(__file__).with_name(f"{name}.schema.json")
    with schema_path.open("r", encoding="utf-8") as f:
        return json.load(f)["schema"]


_compiled_schemas = {
    "analyze_request": jsonschema.Draft7Validator(_load_schema("analyze_request")),
}


def validate_against_schema(schema_type: SchemaType, data: Any) -> Dict[str, Any]:
    validator = _compiled_schemas[schema_type]
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if not errors:
        return {"valid": True}
    return {
        "valid": False,
        "errors": [f"{'/'.join(map(str, err.path))} {err.message}" for err in errors],
        "keywords": [err.validator for err in errors],
    }


def validate_analyze_body(body: Any, max_length: int) -> str:
    """Check an ``/analyze`` request body and return its trimmed text.

    Checks run in a fixed order: presence, type, emptiness after trimming,
    length after trimming. The first failure raises ``AnalyzeRequestError``.
    """
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise AnalyzeRequestError.bad_request("Invalid input", "Request body must be a JSON object")

    result = validate_against_schema("analyze_request", body)
    if not result["valid"]:
        keywords = result["keywords"]
        if body.get("text") is None or "required" in keywords or "minLength" in keywords:
            raise AnalyzeRequestError.bad_request("Text is required", "Please provide text in the request body")
        raise AnalyzeRequestError.bad_request("Invalid input", "Text must be a string")

    trimmed = body["text"].strip()
    if not trimmed:
        raise AnalyzeRequestError.bad_request("Empty text", "Text cannot be empty")
    if len(trimmed) > max_length:
        raise AnalyzeRequestError.bad_request(
            "Text too long",
            f"Text must be {max_length} characters or less (received {len(trimmed)})",
        )
    return trimmed
