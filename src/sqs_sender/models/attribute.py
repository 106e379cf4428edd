"""
Module: attribute.py
Description: Typed message attribute value.

Defines AttributeValue, the tagged value used for both message
attributes and message system attributes. String and Number values
carry text, Binary values carry decoded bytes.

Dependencies: pydantic, typing
"""

from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator

DataType = Literal["String", "Number", "Binary"]

VALID_DATA_TYPES = ("String", "Number", "Binary")


class AttributeValue(BaseModel):
    """
    A single attribute value with its type tag.

    Attributes:
        data_type: One of 'String', 'Number', 'Binary'
        string_value: Text payload for String and Number
        binary_value: Raw bytes payload for Binary
    """

    model_config = ConfigDict(frozen=True)

    data_type: DataType = Field(
        ...,
        description="Attribute type tag"
    )
    string_value: Optional[str] = Field(
        default=None,
        description="Text payload for String/Number attributes"
    )
    binary_value: Optional[bytes] = Field(
        default=None,
        description="Decoded payload for Binary attributes"
    )

    @model_validator(mode='after')
    def validate_payload_matches_type(self) -> 'AttributeValue':
        """Ensure exactly the payload the type tag calls for is set."""
        if self.data_type == "Binary":
            if self.binary_value is None:
                raise ValueError("Binary attributes require binary_value")
            if self.string_value is not None:
                raise ValueError("Binary attributes cannot carry string_value")
        else:
            if self.string_value is None:
                raise ValueError(f"{self.data_type} attributes require string_value")
            if self.binary_value is not None:
                raise ValueError(f"{self.data_type} attributes cannot carry binary_value")
        return self

    def to_sqs(self) -> Dict[str, Any]:
        """Render in the shape the SQS API expects."""
        if self.data_type == "Binary":
            return {"DataType": self.data_type, "BinaryValue": self.binary_value}
        return {"DataType": self.data_type, "StringValue": self.string_value}
