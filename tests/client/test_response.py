from __future__ import annotations

import httpx
import pytest

from sbg_api.client import (
    SUCCESS_MARKER,
    ApiRequest,
    ResponseParseError,
    ResponseStatusError,
    check_and_retrieve_response,
)


def test_ok_with_body_returns_parsed_json() -> None:
    response = httpx.Response(200, content=b'{"a":1}')
    assert check_and_retrieve_response(response) == {'a': 1}


def test_created_returns_body_as_is() -> None:
    response = httpx.Response(201, json=[{'id': 'task-1'}, {'id': 'task-2'}])
    assert check_and_retrieve_response(response) == [{'id': 'task-1'}, {'id': 'task-2'}]


def test_no_content_returns_success_marker() -> None:
    result = check_and_retrieve_response(httpx.Response(204))
    assert result == {SUCCESS_MARKER: 204}


def test_ok_without_body_returns_success_marker() -> None:
    assert check_and_retrieve_response(httpx.Response(200)) == {SUCCESS_MARKER: 200}


def test_not_found_raises_with_status_and_reason() -> None:
    with pytest.raises(ResponseStatusError) as excinfo:
        check_and_retrieve_response(httpx.Response(404, json={'message': 'missing'}))

    message = str(excinfo.value)
    assert '404' in message
    assert 'Not Found' in message
    assert excinfo.value.status_code == 404
    assert excinfo.value.reason == 'Not Found'


@pytest.mark.parametrize('status', [202, 206, 301, 400, 401, 403, 409, 500, 503])
def test_statuses_outside_success_set_raise(status: int) -> None:
    with pytest.raises(ResponseStatusError) as excinfo:
        check_and_retrieve_response(httpx.Response(status))
    assert excinfo.value.status_code == status


def test_malformed_json_raises_parse_error() -> None:
    with pytest.raises(ResponseParseError):
        check_and_retrieve_response(httpx.Response(200, content=b'{"a": '))


def test_client_method_delegates(mock_client) -> None:
    client, _ = mock_client(200, {'a': 1})
    request = ApiRequest('token', 'user', 'GET', client=client)
    response = request.generate_request()
    assert request.check_and_retrieve_response(response) == {'a': 1}


def test_client_method_surfaces_server_errors(mock_client) -> None:
    client, _ = mock_client(500, {'message': 'boom'})
    request = ApiRequest('token', 'user', 'GET', client=client)
    with pytest.raises(ResponseStatusError, match='500'):
        request.execute()
