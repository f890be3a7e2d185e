"""Tests for validation error translation"""
import json
import logging

from fastapi import status
from fastapi.testclient import TestClient

from taskapi.api.errors import collect_field_errors


class TestCollectFieldErrors:
    """Tests for collect_field_errors"""

    def test_uses_last_location_name(self):
        """Test body and path locations map to their field names"""
        errors = [
            {"loc": ("body", "name"), "msg": "Name cannot be empty!"},
            {"loc": ("path", "task_id"), "msg": "bad id"},
        ]

        assert collect_field_errors(errors) == {"name": "Name cannot be empty!", "task_id": "bad id"}

    def test_first_message_wins(self):
        """Test only the first violation per field is kept"""
        errors = [
            {"loc": ("body", "name"), "msg": "first"},
            {"loc": ("body", "name"), "msg": "second"},
        ]

        assert collect_field_errors(errors) == {"name": "first"}

    def test_body_level_error(self):
        """Test errors without a field name are keyed as body"""
        assert collect_field_errors([{"loc": ("body",), "msg": "Field required"}]) == {
            "body": "Field required"
        }

    def test_list_index_locations(self):
        """Test numeric location parts are skipped"""
        errors = [{"loc": ("body", 0, "phone"), "msg": "m"}]

        assert collect_field_errors(errors) == {"phone": "m"}

    def test_no_errors(self):
        """Test an empty error list yields an empty object"""
        assert collect_field_errors([]) == {}


class TestValidationHandler:
    """Tests for the application-wide validation handler"""

    def test_logs_warning(self, client: TestClient, caplog):
        """Test validation failures are logged at warning level"""
        with caplog.at_level(logging.WARNING, logger="taskapi.api.errors"):
            response = client.post("/tasks", json={"name": "", "surname": "B", "phone": "C"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert any(
            record.levelno == logging.WARNING and "Validation error" in record.getMessage()
            for record in caplog.records
        )

    def test_body_is_valid_json_object(self, client: TestClient):
        """Test the error body parses as a JSON object"""
        response = client.post("/tasks", json={})

        body = json.loads(response.text)
        assert isinstance(body, dict)
        assert set(body) == {"name", "surname", "phone"}

    def test_malformed_json(self, client: TestClient):
        """Test malformed JSON is a 400, not a 422"""
        response = client.post(
            "/tasks", content=b"{not json", headers={"content-type": "application/json"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
