"""Tests for api/errors.py."""

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from api import app
from api.errors import to_field_error


class TestToFieldError:
    def test_nested_location(self):
        error = {"loc": ("body", "vehicle", "type"), "msg": "Invalid vehicle type"}
        field_error = to_field_error(error)
        assert field_error.field == "vehicle.type"
        assert field_error.message == "Invalid vehicle type"
        assert field_error.location == "body"

    def test_list_index_location(self):
        field_error = to_field_error({"loc": ("query", "ids", 0), "msg": "bad"})
        assert field_error.field == "ids.0"
        assert field_error.location == "query"


class TestUnhandledErrors:
    def test_store_failure_becomes_generic_500(self, container, fake_db, registration_payload):
        """Infrastructure failures answer 500 without leaking details."""

        async def unreachable(*args, **kwargs):
            raise ServerSelectionTimeoutError("db.internal:27017: connection refused")

        fake_db["captains"].find_one = unreachable
        client = TestClient(app, raise_server_exceptions=False)

        response = client.post("/captains/register", json=registration_payload)

        assert response.status_code == 500
        assert response.json() == {
            "error": "InternalServerError",
            "message": "Internal server error",
            "details": {},
        }
        assert "db.internal" not in response.text
        assert fake_db["captains"].documents == []
