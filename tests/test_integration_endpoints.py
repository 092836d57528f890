"""
Integration Tests for Endpoint Flows

This module tests the full request/response flow of the API routers with
the services mocked out:

- GET /api/transcript/{video_id}
- POST /api/process-transcript
- POST /api/suggest-templates
- GET /api/templates
- POST/GET /api/history
- POST /api/export
"""

import pytest
from unittest.mock import patch, MagicMock, AsyncMock
from fastapi.testclient import TestClient

from main import app
from models.db_models import FormatTemplateModel, TranscriptHistoryModel
from services.errors import (
    GenerationFailed,
    NoPromptProvided,
    TemplateNotFound,
    TranscriptUnavailable,
)


# =============================================================================
# Test Client Fixture
# =============================================================================

@pytest.fixture
def client():
    """Create a test client for the FastAPI app (lifespan not started)."""
    return TestClient(app)


@pytest.fixture
def templates():
    return [
        FormatTemplateModel(id=1, name="Tech Talk", description="x", prompt="p1"),
        FormatTemplateModel(id=2, name="Casual", description="business chat", prompt="p2"),
    ]


# =============================================================================
# Transcript Endpoint
# =============================================================================

class TestTranscriptEndpoint:
    """Integration tests for GET /api/transcript/{video_id}."""

    def test_returns_transcript(self, client):
        with patch("routers.transcripts.TranscriptService") as mock_service:
            mock_instance = MagicMock()
            mock_instance.fetch_transcript = AsyncMock(return_value="Hello world")
            mock_service.return_value = mock_instance

            response = client.get("/api/transcript/dQw4w9WgXcQ")

        assert response.status_code == 200, response.text
        assert response.json() == {"transcript": "Hello world"}
        mock_instance.fetch_transcript.assert_awaited_once_with("dQw4w9WgXcQ")

    def test_accepts_short_url(self, client):
        with patch("routers.transcripts.TranscriptService") as mock_service:
            mock_instance = MagicMock()
            mock_instance.fetch_transcript = AsyncMock(return_value="Hello")
            mock_service.return_value = mock_instance

            response = client.get("/api/transcript/youtu.be/dQw4w9WgXcQ")

        assert response.status_code == 200, response.text
        mock_instance.fetch_transcript.assert_awaited_once_with("dQw4w9WgXcQ")

    def test_invalid_id_returns_400(self, client):
        response = client.get("/api/transcript/not-an-id")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid YouTube video id"

    def test_unavailable_returns_error_details(self, client):
        with patch("routers.transcripts.TranscriptService") as mock_service:
            mock_instance = MagicMock()
            mock_instance.fetch_transcript = AsyncMock(
                side_effect=TranscriptUnavailable("dQw4w9WgXcQ", details="Transcripts are disabled")
            )
            mock_service.return_value = mock_instance

            response = client.get("/api/transcript/dQw4w9WgXcQ")

        assert response.status_code == 404
        assert response.json() == {
            "error": "Failed to fetch transcript",
            "details": "Transcripts are disabled",
        }


# =============================================================================
# Process Transcript Endpoint
# =============================================================================

class TestProcessTranscriptEndpoint:
    """Integration tests for POST /api/process-transcript."""

    def _mock_service(self, mock_service, **kwargs):
        mock_instance = MagicMock()
        mock_instance.format_transcript = AsyncMock(**kwargs)
        mock_service.return_value = mock_instance
        return mock_instance

    def test_returns_formatted_transcript(self, client):
        with patch("routers.transcripts.ReformattingService") as mock_service:
            mock_instance = self._mock_service(mock_service, return_value="# Summary")

            response = client.post(
                "/api/process-transcript",
                json={"transcript": "raw text", "templateId": 1}
            )

        assert response.status_code == 200, response.text
        assert response.json() == {"formattedTranscript": "# Summary"}
        mock_instance.format_transcript.assert_awaited_once_with(
            "raw text", template_id=1, custom_prompt=None
        )

    def test_custom_prompt_forwarded(self, client):
        with patch("routers.transcripts.ReformattingService") as mock_service:
            mock_instance = self._mock_service(mock_service, return_value="done")

            response = client.post(
                "/api/process-transcript",
                json={"transcript": "raw text", "customPrompt": "Make it short"}
            )

        assert response.status_code == 200
        mock_instance.format_transcript.assert_awaited_once_with(
            "raw text", template_id=None, custom_prompt="Make it short"
        )

    def test_missing_transcript_returns_400(self, client):
        response = client.post("/api/process-transcript", json={"templateId": 1})

        assert response.status_code == 400
        assert response.json()["error"] == "Transcript is required"

    def test_non_integer_template_id_returns_error_body(self, client):
        with patch("routers.transcripts.ReformattingService") as mock_service:
            response = client.post(
                "/api/process-transcript",
                json={"transcript": "x", "templateId": "abc"}
            )

        assert response.status_code == 400
        data = response.json()
        assert set(data) == {"error", "details"}
        assert data["error"] == "Invalid request"
        assert "templateId" in data["details"]
        mock_service.assert_not_called()

    def test_non_object_body_returns_error_body(self, client):
        response = client.post("/api/process-transcript", json=["not", "an", "object"])

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"

    def test_no_prompt_returns_400(self, client):
        with patch("routers.transcripts.ReformattingService") as mock_service:
            self._mock_service(mock_service, side_effect=NoPromptProvided())

            response = client.post("/api/process-transcript", json={"transcript": "raw"})

        assert response.status_code == 400
        assert response.json()["error"] == "No prompt provided"

    def test_unknown_template_returns_404(self, client):
        with patch("routers.transcripts.ReformattingService") as mock_service:
            self._mock_service(mock_service, side_effect=TemplateNotFound(99))

            response = client.post(
                "/api/process-transcript",
                json={"transcript": "raw", "templateId": 99}
            )

        assert response.status_code == 404
        assert response.json() == {"error": "Template not found", "details": "No template with id 99"}

    def test_generation_failure_returns_502_with_details(self, client):
        with patch("routers.transcripts.ReformattingService") as mock_service:
            self._mock_service(
                mock_service,
                side_effect=GenerationFailed(details="rate limited", chunk_index=1)
            )

            response = client.post(
                "/api/process-transcript",
                json={"transcript": "raw", "customPrompt": "Format"}
            )

        assert response.status_code == 502
        assert response.json() == {"error": "Failed to process transcript", "details": "rate limited"}

    def test_end_to_end_with_mocked_generation(self, client):
        """Three chunks go through the real pipeline with a mocked model."""
        generation = MagicMock()
        generation.generate = AsyncMock(side_effect=["One .", "Two", "Three"])
        store = MagicMock()
        store.get_by_id = AsyncMock(return_value=None)

        with patch("services.reformatting_service.GenerationService", return_value=generation), \
                patch("services.reformatting_service.TemplateStore", return_value=store):
            response = client.post(
                "/api/process-transcript",
                json={"transcript": "x" * 65000, "customPrompt": "Format"}
            )

        assert response.status_code == 200, response.text
        assert response.json() == {"formattedTranscript": "One.\nTwo\nThree"}
        assert generation.generate.await_count == 3
        store.get_by_id.assert_not_called()


# =============================================================================
# Suggest Templates Endpoint
# =============================================================================

class TestSuggestTemplatesEndpoint:
    """Integration tests for POST /api/suggest-templates."""

    def test_returns_ranked_suggestions(self, client, templates):
        store = MagicMock()
        store.list_templates = AsyncMock(return_value=templates)
        generation = MagicMock()
        generation.generate = AsyncMock(return_value="technical, business")

        with patch("routers.transcripts.TemplateStore", return_value=store), \
                patch("services.suggestion_service.GenerationService", return_value=generation):
            response = client.post("/api/suggest-templates", json={"transcript": "some talk"})

        assert response.status_code == 200, response.text
        assert response.json() == [
            {"id": 1, "name": "Tech Talk", "description": "x", "score": 1},
            {"id": 2, "name": "Casual", "description": "business chat", "score": 1},
        ]

    def test_missing_transcript_returns_400(self, client):
        response = client.post("/api/suggest-templates", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Transcript is required"

    def test_no_suggestions_returns_empty_list(self, client, templates):
        store = MagicMock()
        store.list_templates = AsyncMock(return_value=templates)

        with patch("routers.transcripts.TemplateStore", return_value=store), \
                patch("routers.transcripts.SuggestionService") as mock_service:
            mock_instance = MagicMock()
            mock_instance.suggest_templates = AsyncMock(return_value=[])
            mock_service.return_value = mock_instance

            response = client.post("/api/suggest-templates", json={"transcript": "cooking"})

        assert response.status_code == 200
        assert response.json() == []

    def test_generation_failure_returns_502(self, client, templates):
        store = MagicMock()
        store.list_templates = AsyncMock(return_value=templates)

        with patch("routers.transcripts.TemplateStore", return_value=store), \
                patch("routers.transcripts.SuggestionService") as mock_service:
            mock_instance = MagicMock()
            mock_instance.suggest_templates = AsyncMock(side_effect=GenerationFailed(details="down"))
            mock_service.return_value = mock_instance

            response = client.post("/api/suggest-templates", json={"transcript": "talk"})

        assert response.status_code == 502
        assert response.json()["details"] == "down"


# =============================================================================
# Templates Endpoint
# =============================================================================

class TestTemplatesEndpoint:
    """Integration tests for GET /api/templates."""

    def test_lists_templates(self, client, templates):
        store = MagicMock()
        store.list_templates = AsyncMock(return_value=templates)

        with patch("routers.templates.TemplateStore", return_value=store):
            response = client.get("/api/templates")

        assert response.status_code == 200, response.text
        data = response.json()
        assert [t["name"] for t in data] == ["Tech Talk", "Casual"]
        assert data[0]["prompt"] == "p1"
        assert "createdAt" in data[0]

    def test_store_failure_returns_500(self, client):
        store = MagicMock()
        store.list_templates = AsyncMock(side_effect=RuntimeError("connection refused"))

        with patch("routers.templates.TemplateStore", return_value=store):
            response = client.get("/api/templates")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch templates", "details": "connection refused"}


# =============================================================================
# History Endpoints
# =============================================================================

class TestHistoryEndpoints:
    """Integration tests for /api/history."""

    def test_save_history(self, client):
        saved = TranscriptHistoryModel(
            id=7, video_id="dQw4w9WgXcQ", video_title="Video",
            original_transcript="raw", formatted_transcript="formatted",
            format_template_id=1
        )
        store = MagicMock()
        store.save_entry = AsyncMock(return_value=saved)

        with patch("routers.history.HistoryStore", return_value=store):
            response = client.post("/api/history", json={
                "videoId": "dQw4w9WgXcQ",
                "videoTitle": "Video",
                "originalTranscript": "raw",
                "formattedTranscript": "formatted",
                "formatTemplateId": 1,
            })

        assert response.status_code == 200, response.text
        data = response.json()
        assert data["id"] == 7
        assert data["videoId"] == "dQw4w9WgXcQ"
        assert data["formatTemplateId"] == 1

    def test_save_history_validation_error(self, client):
        response = client.post("/api/history", json={"videoId": "abc"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"

    def test_list_history_limit_out_of_range(self, client):
        response = client.get("/api/history?limit=0")

        assert response.status_code == 400
        assert set(response.json()) == {"error", "details"}

    def test_list_history(self, client):
        rows = [TranscriptHistoryModel(
            id=1, video_id="v", video_title="t",
            original_transcript="o", formatted_transcript="f", custom_prompt="c"
        )]
        store = MagicMock()
        store.list_entries = AsyncMock(return_value=rows)

        with patch("routers.history.HistoryStore", return_value=store):
            response = client.get("/api/history?limit=5")

        assert response.status_code == 200
        assert response.json()[0]["customPrompt"] == "c"
        store.list_entries.assert_awaited_once_with(limit=5)


# =============================================================================
# Export Endpoint
# =============================================================================

class TestExportEndpoint:
    """Integration tests for POST /api/export."""

    def test_markdown_attachment(self, client):
        response = client.post(
            "/api/export",
            json={"content": "# Notes", "format": "markdown", "fileName": "notes"}
        )

        assert response.status_code == 200
        assert response.text == "# Notes"
        assert response.headers["content-type"].startswith("text/markdown")
        disposition = response.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="notes-')
        assert disposition.endswith('.md"')

    def test_unknown_format_returns_400(self, client):
        response = client.post("/api/export", json={"content": "x", "format": "pdf"})

        assert response.status_code == 400
        assert response.json()["error"] == "Unsupported export format"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
