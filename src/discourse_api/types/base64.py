"""Base64 data that encodes to URL-safe base64, but decodes from several variants.

Clients and libraries disagree on the base64 flavour they emit, so decoding
accepts standard, URL-safe (padded and unpadded), MIME and unpadded standard
input. Encoding always produces URL-safe base64 without padding.
"""

import base64
import binascii
import re
from typing import Any, NamedTuple

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic_core import core_schema


class _Encoding(NamedTuple):
    name: str
    altchars: bytes | None
    padded: bool
    ignore: str = ""


_STANDARD_ALPHABET = re.compile(r"[A-Za-z0-9+/]*")
_URL_SAFE_ALPHABET = re.compile(r"[A-Za-z0-9\-_]*")

# Tried in this order; the first successful decode wins.
ALLOWED_DECODING_FORMATS = (
    _Encoding("standard", None, padded=True),
    _Encoding("url_safe", b"-_", padded=True),
    _Encoding("url_safe_nopad", b"-_", padded=False),
    _Encoding("mime", None, padded=True, ignore=" \t\r\n"),
    _Encoding("standard_nopad", None, padded=False),
)


def _decode_with(encoding: _Encoding, text: str) -> bytes:
    """Strictly decode text in one base64 variant, raising ValueError on mismatch."""
    for char in encoding.ignore:
        text = text.replace(char, "")

    symbols = text.rstrip("=") if encoding.padded else text
    alphabet = _URL_SAFE_ALPHABET if encoding.altchars else _STANDARD_ALPHABET
    if not alphabet.fullmatch(symbols):
        raise ValueError(f"invalid symbol for {encoding.name} base64")
    if encoding.padded and len(text) % 4:
        raise ValueError(f"invalid length for {encoding.name} base64")
    if len(symbols) % 4 == 1:
        raise ValueError(f"invalid length for {encoding.name} base64")

    padding = "=" * (-len(symbols) % 4)
    if encoding.padded and text[len(symbols):] != padding:
        raise ValueError(f"invalid padding for {encoding.name} base64")

    try:
        data = base64.b64decode(symbols + padding, altchars=encoding.altchars, validate=True)
    except binascii.Error as e:
        raise ValueError(str(e)) from e

    # Trailing bits must be zero, i.e. re-encoding yields the same symbols.
    canonical = base64.b64encode(data, altchars=encoding.altchars).decode("ascii").rstrip("=")
    if canonical != symbols:
        raise ValueError(f"non-zero trailing bits for {encoding.name} base64")
    return data


class Base64Data:
    """A container for binary data that is base64 encoded in serialization."""

    __slots__ = ("data",)

    def __init__(self, data: bytes = b""):
        self.data = bytes(data)

    @classmethod
    def decode(cls, text: str) -> "Base64Data":
        """Decode text with the first base64 variant that accepts it."""
        for encoding in ALLOWED_DECODING_FORMATS:
            try:
                return cls(_decode_with(encoding, text))
            except ValueError:
                continue
        raise ValueError(f"Could not decode base64 data: {text}")

    def encode(self) -> str:
        return base64.urlsafe_b64encode(self.data).decode("ascii").rstrip("=")

    def is_empty(self) -> bool:
        return not self.data

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Base64Data):
            return self.data == other.data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.data)

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"Base64Data({self.data!r})"

    @classmethod
    def _validate(cls, value: Any) -> "Base64Data":
        if isinstance(value, Base64Data):
            return value
        if isinstance(value, (bytes, bytearray)):
            return cls(value)
        if isinstance(value, str):
            return cls.decode(value)
        raise ValueError("a base64 encoded string")

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(cls.encode),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler) -> dict:
        return {"type": "string", "format": "byte"}
