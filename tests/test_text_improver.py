import pytest
import requests
from unittest.mock import Mock, patch

from content_optimizer.improve import TextImprover, ImproverError, ImproverConfigError


@pytest.fixture
def improver():
    return TextImprover(config={"api_key": "test-key", "model": "test/model"})


def _response(payload):
    resp = Mock()
    resp.raise_for_status.return_value = None
    resp.json.return_value = payload
    return resp


@pytest.mark.parametrize("api_key", [None, "", "   ", "your_huggingface_api_key_here"])
def test_missing_or_placeholder_key_is_rejected(api_key):
    with pytest.raises(ImproverConfigError):
        TextImprover(config={"api_key": api_key})


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        TextImprover(config={})


def test_invalid_endpoint_is_rejected():
    with pytest.raises(ImproverConfigError):
        TextImprover(config={"api_key": "k", "endpoint": "ftp://example.com/model"})


def test_endpoint_defaults_to_model_url(improver):
    assert improver.endpoint.endswith("/models/test/model")
    assert improver.session.headers["Authorization"] == "Bearer test-key"


def test_improve_returns_generated_text(improver):
    with patch.object(improver.session, "post", return_value=_response([{"generated_text": " Better text. "}])) as post:
        assert improver.improve("Bad text.") == "Better text."
    _, kwargs = post.call_args
    assert kwargs["json"]["inputs"] == "Bad text."


def test_improve_accepts_dict_payload(improver):
    with patch.object(improver.session, "post", return_value=_response({"summary_text": "Short."})):
        assert improver.improve("Long text.") == "Short."


def test_service_error_payload_raises(improver):
    with patch.object(improver.session, "post", return_value=_response({"error": "Model is loading"})):
        with pytest.raises(ImproverError, match="Model is loading"):
            improver.improve("text")


def test_unexpected_payload_raises(improver):
    with patch.object(improver.session, "post", return_value=_response([])):
        with pytest.raises(ImproverError):
            improver.improve("text")


def test_transport_failure_raises(improver):
    with patch.object(improver.session, "post", side_effect=requests.exceptions.ConnectionError("boom")):
        with pytest.raises(ImproverError, match="boom"):
            improver.improve("text")


def test_invalid_json_raises(improver):
    resp = _response(None)
    resp.json.side_effect = ValueError("no json")
    with patch.object(improver.session, "post", return_value=resp):
        with pytest.raises(ImproverError, match="invalid JSON"):
            improver.improve("text")


def test_undecodable_body_is_reported_as_invalid_json(improver):
    resp = _response(None)
    resp.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "", 0)
    with patch.object(improver.session, "post", return_value=resp):
        with pytest.raises(ImproverError, match="invalid JSON"):
            improver.improve("text")


def test_blank_text_skips_request(improver):
    with patch.object(improver.session, "post") as post:
        assert improver.improve("   ") == ""
    post.assert_not_called()
