"""
Module: attributes.py
Description: Parsing and serialization of SQS attribute maps.

Parses the JSON text form of message attributes and message system
attributes into AttributeValue maps, applying the SQS attribute
schema. Both attribute namespaces share the same rules.

Expected JSON shape:
    {
        "Author": {"DataType": "String", "StringValue": "octocat"},
        "Retries": {"DataType": "Number", "StringValue": "3"},
        "Payload": {"DataType": "Binary", "BinaryValue": "aGVsbG8="}
    }

Dependencies: json, base64, binascii
"""

import base64
import binascii
import json
from typing import Any, Dict

from sqs_sender.errors import (
    DecodeError,
    MissingAttributeValueError,
    SchemaError,
)
from sqs_sender.models.attribute import AttributeValue, VALID_DATA_TYPES

MAX_ATTRIBUTES = 10


def _coerce_string_value(key: str, value: Any) -> str:
    """Render a JSON scalar as attribute text."""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        raise SchemaError(
            f'StringValue for attribute "{key}" must be a scalar, got {type(value).__name__}'
        )
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        # 1.0 is written as "1"
        return str(int(value))
    # json.dumps keeps JSON spelling for true/false and numbers
    return json.dumps(value)


def _reject_constant(name: str) -> Any:
    """Refuse the NaN and Infinity literals json accepts by default."""
    raise ValueError(f"{name} is not valid JSON")


def _decode_binary_value(key: str, value: Any) -> bytes:
    """Decode a base64 BinaryValue to raw bytes."""
    if not isinstance(value, str):
        raise DecodeError(f'BinaryValue for attribute "{key}" must be base64 text')
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(
            f'BinaryValue for attribute "{key}" is not valid base64: {e}'
        ) from e


def _parse_attribute(key: str, entry: Any) -> AttributeValue:
    """Validate a single attribute entry and build its AttributeValue."""
    valid_types = ', '.join(VALID_DATA_TYPES)

    if not isinstance(entry, dict):
        raise SchemaError(f'Attribute "{key}" must be a JSON object')

    data_type = entry.get("DataType")
    if data_type is None or data_type == "":
        raise SchemaError(
            f'Missing DataType for attribute "{key}". Must be one of: {valid_types}'
        )
    if data_type not in VALID_DATA_TYPES:
        raise SchemaError(
            f'Invalid DataType "{data_type}" for attribute "{key}". Must be one of: {valid_types}'
        )

    if data_type == "Binary":
        if entry.get("BinaryValue") is None:
            raise MissingAttributeValueError(
                f'Missing BinaryValue for attribute "{key}" with DataType "Binary"'
            )
        return AttributeValue(
            data_type=data_type,
            binary_value=_decode_binary_value(key, entry["BinaryValue"])
        )

    if entry.get("StringValue") is None:
        raise MissingAttributeValueError(
            f'Missing StringValue for attribute "{key}" with DataType "{data_type}"'
        )
    return AttributeValue(
        data_type=data_type,
        string_value=_coerce_string_value(key, entry["StringValue"])
    )


def parse_attributes(
    json_text: str,
    max_count: int = MAX_ATTRIBUTES,
    label: str = "message attributes"
) -> Dict[str, AttributeValue]:
    """
    Parse attribute JSON into a map of AttributeValue.

    Args:
        json_text: JSON object text mapping attribute names to entries
        max_count: Maximum number of top-level attributes allowed
        label: Name of the attribute namespace, used in error messages

    Returns:
        Attribute name to AttributeValue mapping, in source order

    Raises:
        SchemaError: If the text is not a JSON object, has too many keys,
            or an entry has a missing/invalid DataType
        MissingAttributeValueError: If an entry lacks its value field
        DecodeError: If a BinaryValue is not valid base64
    """
    try:
        parsed = json.loads(json_text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise SchemaError(f"Failed to parse {label}: invalid JSON ({e})") from e

    if not isinstance(parsed, dict):
        raise SchemaError(
            f"Failed to parse {label}: expected a JSON object, got {type(parsed).__name__}"
        )

    if len(parsed) > max_count:
        raise SchemaError(
            f"Too many {label}: {len(parsed)}. Maximum allowed is {max_count}."
        )

    return {key: _parse_attribute(key, entry) for key, entry in parsed.items()}


def serialize_attributes(attributes: Dict[str, AttributeValue]) -> str:
    """
    Serialize an attribute map to its canonical JSON text.

    Binary payloads are base64 encoded, so the output parses back with
    parse_attributes() to an equivalent map.

    Args:
        attributes: Attribute name to AttributeValue mapping

    Returns:
        JSON object text
    """
    document = {}
    for name, value in attributes.items():
        if value.data_type == "Binary":
            document[name] = {
                "DataType": value.data_type,
                "BinaryValue": base64.b64encode(value.binary_value).decode("ascii"),
            }
        else:
            document[name] = {
                "DataType": value.data_type,
                "StringValue": value.string_value,
            }
    return json.dumps(document, sort_keys=True)
