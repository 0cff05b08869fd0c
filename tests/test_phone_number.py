import pytest
from pydantic import ValidationError

from discourse_api.types.base import DiscourseModel
from discourse_api.types.phone_number import PhoneNumber


class Contact(DiscourseModel):
    phone: PhoneNumber | None = None


class TestPhoneNumberParse:
    @pytest.mark.parametrize("text", [
        "+1 555-555-5555",
        "555-555-5555",
        "5555555555",
        "(555) 555-5555",
        "+1 (555) 555-5555",
    ])
    def test_equivalent_inputs(self, text):
        number = PhoneNumber.parse(text)
        assert number == PhoneNumber.parse("+15555555555")
        assert str(number) == "+1 555-555-5555"

    def test_other_us_number(self):
        assert str(PhoneNumber.parse("(510) 864-1234")) == "+1 510-864-1234"

    def test_international_skips_default_country(self):
        assert str(PhoneNumber.parse("+49 30 1234 1234")) == "+49 30 12341234"

    def test_empty_is_absent(self):
        number = PhoneNumber.parse("")
        assert number.is_empty()
        assert str(number) == ""
        assert PhoneNumber.parse("   ") == number

    def test_invalid_names_input(self):
        with pytest.raises(ValueError, match="invalid phone number `\\+1abc`"):
            PhoneNumber.parse("abc")

    def test_hash_matches_equality(self):
        assert len({PhoneNumber.parse("555-555-5555"), PhoneNumber.parse("+1 555 555 5555")}) == 1


class TestPhoneNumberInModels:
    def test_serializes_international_format(self):
        contact = Contact.model_validate({"phone": "555-555-5555"})
        assert contact.to_dict() == {"phone": "+1 555-555-5555"}

    def test_empty_string_round_trips_as_empty(self):
        contact = Contact.model_validate({"phone": ""})
        assert contact.phone.is_empty()
        assert Contact.from_json(contact.to_json()) == contact

    def test_non_string_loads_as_absent(self):
        contact = Contact.model_validate({"phone": 5555555555})
        assert contact.phone.is_empty()

    def test_malformed_is_validation_error(self):
        with pytest.raises(ValidationError):
            Contact.model_validate({"phone": "not a phone"})

    def test_json_schema(self):
        schema = Contact.model_json_schema()
        assert {"type": "string", "format": "phone"} in schema["properties"]["phone"]["anyOf"]
