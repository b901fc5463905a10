from unittest.mock import MagicMock

import pytest
import requests

from conftest import make_response
from deficheck.clients.rpc import SolanaRPCClient
from deficheck.errors import DecodeError, RPCError, TransportError

RPC_URL = "https://rpc.example"


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return SolanaRPCClient(RPC_URL, timeout=5.0, session=session)


def _sent_payload(session, call_index=0):
    return session.post.call_args_list[call_index].kwargs["json"]


def test_get_account_info_sends_jsonrpc_envelope(client, session):
    session.post.return_value = make_response(
        {"jsonrpc": "2.0", "id": 1, "result": {"context": {}, "value": None}}
    )

    result = client.get_account_info("Pool111")

    assert result == {"context": {}, "value": None}
    call = session.post.call_args
    assert call.args == (RPC_URL,)
    assert call.kwargs["headers"] == {"Content-Type": "application/json"}
    assert call.kwargs["timeout"] == 5.0
    assert call.kwargs["json"] == {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "getAccountInfo",
        "params": ["Pool111", {"encoding": "base64"}],
    }


def test_request_ids_increase(client, session):
    session.post.side_effect = [
        make_response({"jsonrpc": "2.0", "id": 1, "result": {"value": None}}),
        make_response({"jsonrpc": "2.0", "id": 2, "result": {"value": None}}),
    ]

    client.get_account_info("A")
    client.get_token_account_balance("B")

    assert _sent_payload(session, 0)["id"] == 1
    assert _sent_payload(session, 1)["id"] == 2
    assert _sent_payload(session, 1)["method"] == "getTokenAccountBalance"
    assert _sent_payload(session, 1)["params"] == ["B"]


def test_get_multiple_accounts_returns_value_list(client, session):
    accounts = [{"data": ["AA==", "base64"]}, None]
    session.post.return_value = make_response(
        {"jsonrpc": "2.0", "id": 1, "result": {"context": {}, "value": accounts}}
    )

    assert client.get_multiple_accounts(["V1", "V2"]) == accounts
    assert _sent_payload(session)["params"] == [["V1", "V2"], {"encoding": "base64"}]


def test_get_multiple_accounts_rejects_missing_value(client, session):
    session.post.return_value = make_response(
        {"jsonrpc": "2.0", "id": 1, "result": {"context": {}}}
    )

    with pytest.raises(DecodeError, match="no account list"):
        client.get_multiple_accounts(["V1"])


def test_rpc_error_object_raises_rpc_error(client, session):
    session.post.return_value = make_response(
        {
            "jsonrpc": "2.0",
            "id": 1,
            "error": {"code": -32602, "message": "Invalid param: WrongSize"},
        }
    )

    with pytest.raises(RPCError) as exc_info:
        client.get_account_info("bad")

    assert exc_info.value.code == -32602
    assert exc_info.value.rpc_message == "Invalid param: WrongSize"
    assert exc_info.value.method == "getAccountInfo"
    assert "code: -32602" in str(exc_info.value)


def test_http_error_raises_transport_error(client, session):
    session.post.return_value = make_response(status_code=429)

    with pytest.raises(TransportError) as exc_info:
        client.get_account_info("A")

    assert exc_info.value.status_code == 429
    assert exc_info.value.url == RPC_URL


def test_connection_failure_raises_transport_error(client, session):
    session.post.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(TransportError, match="connection refused"):
        client.get_account_info("A")


def test_timeout_raises_transport_error(client, session):
    session.post.side_effect = requests.Timeout("read timed out")

    with pytest.raises(TransportError, match="read timed out"):
        client.get_token_account_balance("A")


def test_malformed_json_raises_transport_error(client, session):
    session.post.return_value = make_response(
        json_error=requests.JSONDecodeError("Expecting value", "<html>", 0)
    )

    with pytest.raises(TransportError, match="malformed JSON"):
        client.get_account_info("A")


def test_response_without_result_raises_decode_error(client, session):
    session.post.return_value = make_response({"jsonrpc": "2.0", "id": 1})

    with pytest.raises(DecodeError, match="no result"):
        client.get_account_info("A")


def test_response_body_is_released(client, session):
    response = make_response({"jsonrpc": "2.0", "id": 1, "result": {"value": None}})
    session.post.return_value = response

    client.get_account_info("A")

    response.__exit__.assert_called_once()


def test_response_body_is_released_on_http_error(client, session):
    response = make_response(status_code=500)
    session.post.return_value = response

    with pytest.raises(TransportError):
        client.get_account_info("A")

    response.__exit__.assert_called_once()


def test_no_retries_on_failure(client, session):
    session.post.side_effect = requests.ConnectionError("boom")

    with pytest.raises(TransportError):
        client.get_account_info("A")

    assert session.post.call_count == 1


@pytest.mark.parametrize("code", ["oops", None, 1.5, True])
def test_non_integer_error_code_falls_back(client, session, code):
    session.post.return_value = make_response(
        {"jsonrpc": "2.0", "id": 1, "error": {"code": code, "message": "bad node"}}
    )

    with pytest.raises(RPCError) as exc_info:
        client.get_account_info("A")

    assert exc_info.value.code == -1
    assert exc_info.value.rpc_message == "bad node"


def test_error_without_code_falls_back(client, session):
    session.post.return_value = make_response(
        {"jsonrpc": "2.0", "id": 1, "error": {"message": "bad node"}}
    )

    with pytest.raises(RPCError) as exc_info:
        client.get_account_info("A")

    assert exc_info.value.code == -1
