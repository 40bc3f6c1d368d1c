"""
Generation pipeline tests
=========================
Validation, backend call, error mapping and history recording.
"""
from datetime import datetime, timezone

import requests

from conftest import FakeResponse
from leadfolder.backend_client import NO_FOLDER_FALLBACK, TRANSPORT_MESSAGE, UPSTREAM_FALLBACK
from leadfolder.pipeline import EMPTY_LEAD_MESSAGE, UNSUPPORTED_SETTINGS_MESSAGE


LEAD = "Lead Name: Claire Meyer\nBudget: €5,000"


class TestValidation:
    def test_blank_lead_makes_no_call(self, make_pipeline, state, history):
        pipeline, session = make_pipeline(FakeResponse(200, {"projectFolder": "x"}))
        state.output_text = "previous output"

        assert pipeline.generate("   \n ", "gpt-4.1-mini", "premium") is None

        assert session.calls == []
        assert state.error_text == EMPTY_LEAD_MESSAGE
        assert state.output_text == ""
        assert len(history) == 0

    def test_unknown_model_makes_no_call(self, make_pipeline, state):
        pipeline, session = make_pipeline(FakeResponse(200, {"projectFolder": "x"}))
        assert pipeline.generate(LEAD, "gpt-99", "premium") is None
        assert session.calls == []
        assert state.error_text == UNSUPPORTED_SETTINGS_MESSAGE


class TestRequest:
    def test_posts_json_body(self, make_pipeline):
        pipeline, session = make_pipeline(FakeResponse(200, {"projectFolder": "## 1. Project Overview\nHi"}))
        pipeline.generate(LEAD, "gpt-4.1", "concise")

        assert len(session.calls) == 1
        url, kwargs = session.calls[0]
        assert url == "http://backend.test/api/generate-project-folder"
        assert kwargs["json"] == {"leadText": LEAD, "model": "gpt-4.1", "tone": "concise"}
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert "timeout" not in kwargs


class TestSuccess:
    def test_records_history_and_marks_active(self, make_pipeline, state, history):
        folder = "## 1. Project Overview\nHello"
        pipeline, _ = make_pipeline(FakeResponse(200, {"projectFolder": folder}))
        pipeline.clock = lambda: datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)

        item = pipeline.generate(LEAD, "gpt-4.1-mini", "friendly")

        assert item is not None
        assert state.output_text == folder
        assert state.error_text == ""
        assert state.is_loading is False
        assert state.active_history_id == item.id == "id-1"
        assert history.items == [item]
        assert item.title == "Claire Meyer"
        assert item.lead_text == LEAD
        assert (item.model, item.tone) == ("gpt-4.1-mini", "friendly")
        assert item.created_at == datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)

    def test_missing_project_folder_is_not_an_error(self, make_pipeline, state, history):
        pipeline, _ = make_pipeline(FakeResponse(200, {}))
        item = pipeline.generate(LEAD, "gpt-4.1-mini", "premium")
        assert state.output_text == NO_FOLDER_FALLBACK
        assert state.error_text == ""
        assert item.output_text == NO_FOLDER_FALLBACK
        assert len(history) == 1

    def test_resets_transient_state(self, make_pipeline, state):
        state.error_text = "old"
        state.active_tab = "proposal"
        state.active_history_id = "stale"
        state.copy_notice.show("Copied to clipboard.")
        pipeline, _ = make_pipeline(FakeResponse(200, {"projectFolder": "doc"}))

        pipeline.generate(LEAD, "gpt-4.1-mini", "premium")

        assert state.active_tab == "all"
        assert state.copy_notice.message == ""
        assert state.active_history_id == "id-1"

    def test_placeholder_shown_while_loading(self, make_pipeline, state):
        seen = {}

        class PeekingSession:
            def post(self, url, **kwargs):
                seen["output"] = state.output_text
                seen["loading"] = state.is_loading
                seen["active"] = state.active_history_id
                return FakeResponse(200, {"projectFolder": "done"})

        pipeline, _ = make_pipeline()
        pipeline.client.session = PeekingSession()
        state.active_history_id = "previous"
        pipeline.generate(LEAD, "gpt-4.1-mini", "premium")

        assert seen == {"output": "Generating project folder from backend…", "loading": True, "active": None}
        assert state.is_loading is False


class TestFailures:
    def test_non_2xx_uses_server_message(self, make_pipeline, state, history):
        pipeline, _ = make_pipeline(FakeResponse(500, {"error": "OPENAI_API_KEY is not set on the server."}))
        state.output_text = "previous output"

        assert pipeline.generate(LEAD, "gpt-4.1-mini", "premium") is None

        assert state.error_text == "OPENAI_API_KEY is not set on the server."
        assert state.output_text == ""
        assert state.is_loading is False
        assert len(history) == 0

    def test_non_2xx_without_body_uses_fallback(self, make_pipeline, state):
        pipeline, _ = make_pipeline(FakeResponse(502))
        pipeline.generate(LEAD, "gpt-4.1-mini", "premium")
        assert state.error_text == UPSTREAM_FALLBACK

    def test_non_2xx_with_unexpected_json(self, make_pipeline, state):
        pipeline, _ = make_pipeline(FakeResponse(400, ["nope"]))
        pipeline.generate(LEAD, "gpt-4.1-mini", "premium")
        assert state.error_text == UPSTREAM_FALLBACK

    def test_network_error_is_generic(self, make_pipeline, state, history):
        pipeline, _ = make_pipeline(exc=requests.ConnectionError("connection reset"))
        pipeline.generate(LEAD, "gpt-4.1-mini", "premium")
        assert state.error_text == TRANSPORT_MESSAGE
        assert state.output_text == ""
        assert len(history) == 0

    def test_undecodable_success_body(self, make_pipeline, state, history):
        pipeline, _ = make_pipeline(FakeResponse(200, body="<html>oops"))
        pipeline.generate(LEAD, "gpt-4.1-mini", "premium")
        assert state.error_text == TRANSPORT_MESSAGE
        assert len(history) == 0

    def test_failure_keeps_existing_history(self, make_pipeline, state, history):
        pipeline, session = make_pipeline(FakeResponse(200, {"projectFolder": "first"}))
        pipeline.generate(LEAD, "gpt-4.1-mini", "premium")
        session.response = FakeResponse(500, {"error": "boom"})

        pipeline.generate(LEAD, "gpt-4.1-mini", "premium")

        assert len(history) == 1
        assert state.output_text == ""
        assert state.error_text == "boom"

    def test_no_retry(self, make_pipeline):
        pipeline, session = make_pipeline(exc=requests.Timeout("slow"))
        pipeline.generate(LEAD, "gpt-4.1-mini", "premium")
        assert len(session.calls) == 1


class TestBackendTimeout:
    def test_timeout_passed_when_configured(self, make_pipeline):
        pipeline, session = make_pipeline(FakeResponse(200, {"projectFolder": "x"}))
        pipeline.client.timeout = 30.0
        pipeline.generate(LEAD, "gpt-4.1-mini", "premium")
        assert session.calls[0][1]["timeout"] == 30.0


class TestNewProject:
    def test_clears_workspace_but_keeps_history(self, make_pipeline, state, history):
        pipeline, _ = make_pipeline(FakeResponse(200, {"projectFolder": "doc"}))
        pipeline.generate(LEAD, "gpt-4.1", "concise")
        state.lead_text = LEAD
        state.active_tab = "brief"

        state.new_project()

        assert (state.lead_text, state.output_text, state.error_text) == ("", "", "")
        assert state.active_tab == "all"
        assert state.active_history_id is None
        assert (state.model, state.tone) == ("gpt-4.1-mini", "premium")
        assert len(history) == 1
