from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from mutants.api.client import MutantApiClient


def _response(status_code: int, payload: object = None) -> Mock:
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.json.return_value = payload
    response.text = ""
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    else:
        response.raise_for_status.return_value = None
    return response


def test_is_mutant_maps_status_codes() -> None:
    session = Mock()
    client = MutantApiClient(base_url="http://mutants.local/", session=session)

    session.post.return_value = _response(200, {"result": "mutant"})
    assert client.is_mutant(("AAAA", "AAAA", "CAGT", "TTAT")) is True
    session.post.assert_called_with(
        "http://mutants.local/mutant",
        json={"dna": ["AAAA", "AAAA", "CAGT", "TTAT"]},
        timeout=10.0,
    )

    session.post.return_value = _response(403, {"result": "human"})
    assert client.is_mutant(["AAAA", "CAGT", "TTAT", "AGAC"]) is False


def test_is_mutant_raises_on_rejected_request() -> None:
    session = Mock()
    session.post.return_value = _response(400, {"message": "DNA sequence cannot be empty"})
    client = MutantApiClient(base_url="http://mutants.local", session=session)

    with pytest.raises(RuntimeError, match="cannot be empty"):
        client.is_mutant([])


def test_stats_returns_payload() -> None:
    session = Mock()
    payload = {"count_mutant_dna": 40, "count_human_dna": 100, "ratio": 0.4}
    session.get.return_value = _response(200, payload)
    client = MutantApiClient(base_url="http://mutants.local", timeout=2.0, session=session)

    assert client.stats() == payload
    session.get.assert_called_once_with("http://mutants.local/stats", timeout=2.0)


def test_stats_wraps_http_errors() -> None:
    session = Mock()
    session.get.return_value = _response(500, {"message": "boom"})
    client = MutantApiClient(base_url="http://mutants.local", session=session)

    with pytest.raises(RuntimeError, match="Failed to fetch stats"):
        client.stats()
