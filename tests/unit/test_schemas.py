"""Tests for demo request validation rules."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from goloyal.models import DemoRequest
from goloyal.schemas.demo_request import DemoRequestIn


def _failing_fields(exc: ValidationError) -> set[str]:
    return {".".join(str(p) for p in err["loc"]) for err in exc.errors()}


class TestDemoRequestIn:

    def test_accepts_camel_case_payload(self, demo_payload):
        data = DemoRequestIn.model_validate(demo_payload)
        assert data.business_name == "Bean There Café"
        assert data.email == "demo@example.com"

    def test_strips_whitespace(self, demo_payload):
        demo_payload["contactName"] = "  Dina  "
        assert DemoRequestIn.model_validate(demo_payload).contact_name == "Dina"

    def test_blank_names_rejected(self, demo_payload):
        demo_payload["businessName"] = "   "
        demo_payload["contactName"] = ""
        with pytest.raises(ValidationError) as exc_info:
            DemoRequestIn.model_validate(demo_payload)
        assert _failing_fields(exc_info.value) == {"businessName", "contactName"}

    def test_invalid_email_rejected(self, demo_payload):
        demo_payload["email"] = "not-an-email"
        with pytest.raises(ValidationError) as exc_info:
            DemoRequestIn.model_validate(demo_payload)
        assert _failing_fields(exc_info.value) == {"email"}

    def test_phone_is_free_form(self, demo_payload):
        demo_payload["phone"] = "call me maybe"
        assert DemoRequestIn.model_validate(demo_payload).phone == "call me maybe"

    def test_all_missing_fields_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            DemoRequestIn.model_validate({})
        assert _failing_fields(exc_info.value) == {
            "businessName", "contactName", "email", "phone",
        }


class TestDemoRequestSerialization:

    def test_dumps_camel_case(self, demo_request_in):
        record = DemoRequest(
            id="abc",
            created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
            **demo_request_in.model_dump(),
        )
        dump = record.model_dump(mode="json", by_alias=True)

        assert set(dump) == {"id", "businessName", "contactName", "email", "phone", "createdAt"}
        assert dump["createdAt"].startswith("2025-01-01T00:00:00")

    def test_snake_case_keys_not_accepted(self):
        with pytest.raises(ValidationError) as exc_info:
            DemoRequestIn.model_validate({
                "business_name": "Shop",
                "contact_name": "Dina",
                "email": "demo@example.com",
                "phone": "555",
            })
        assert _failing_fields(exc_info.value) == {"businessName", "contactName"}
