"""Phone numbers for JSON serialization and deserialization."""

from typing import Any

import phonenumbers
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic_core import core_schema

DEFAULT_COUNTRY_CODE = "+1"
_SEPARATORS = "-() "


class PhoneNumber:
    """A phone number, or the absence of one."""

    __slots__ = ("number",)

    def __init__(self, number: phonenumbers.PhoneNumber | None = None):
        self.number = number

    @classmethod
    def parse(cls, value: str) -> "PhoneNumber":
        """Parse a loosely formatted phone number.

        An empty or blank string is an absent number. Numbers without a
        leading ``+`` are assumed to be in the default country.
        """
        if not value.strip():
            return cls()
        if not value.strip().startswith("+"):
            value = f"{DEFAULT_COUNTRY_CODE}{value}"
        for char in _SEPARATORS:
            value = value.replace(char, "")
        try:
            number = phonenumbers.parse(value, None)
        except phonenumbers.NumberParseException as e:
            raise ValueError(f"invalid phone number `{value}`: {e}") from e
        return cls(number)

    def is_empty(self) -> bool:
        return self.number is None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PhoneNumber):
            return self.number == other.number
        return NotImplemented

    def __hash__(self) -> int:
        if self.number is None:
            return hash(None)
        return hash(phonenumbers.format_number(self.number, phonenumbers.PhoneNumberFormat.E164))

    def __str__(self) -> str:
        if self.number is None:
            return ""
        return phonenumbers.format_number(self.number, phonenumbers.PhoneNumberFormat.INTERNATIONAL)

    def __repr__(self) -> str:
        return f"PhoneNumber({str(self)!r})"

    @classmethod
    def _validate(cls, value: Any) -> "PhoneNumber":
        if isinstance(value, PhoneNumber):
            return value
        if isinstance(value, phonenumbers.PhoneNumber):
            return cls(value)
        # Anything that is not a string loads as an absent number.
        if not isinstance(value, str):
            value = ""
        return cls.parse(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler) -> dict:
        return {"type": "string", "format": "phone"}
