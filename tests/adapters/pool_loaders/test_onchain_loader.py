from unittest.mock import MagicMock

import pytest

from conftest import BASE_VAULT, QUOTE_VAULT, account_info_result, token_balance
from deficheck.adapters.pool_loaders import OnchainPoolLoader
from deficheck.clients.rpc import SolanaRPCClient
from deficheck.constants import USDC_MINT, WSOL_MINT
from deficheck.domain import PoolLocation
from deficheck.errors import DecodeError, PoolNotFoundError, RPCError

POOL = "58oQChx4yWmvKdwLLZzBi4ChoCc2fqCUWBkwMihLYQo2"


@pytest.fixture
def rpc(pool_account):
    rpc = MagicMock(spec=SolanaRPCClient)
    rpc.get_account_info.return_value = account_info_result(pool_account)
    rpc.get_token_account_balance.side_effect = [
        token_balance("50000000000000", 6),
        token_balance("1000000000000", 9),
    ]
    return rpc


def test_loader_name(rpc):
    assert OnchainPoolLoader(rpc).loader_name == "onchain"


def test_load_reads_pool_then_both_vaults(rpc):
    pool = OnchainPoolLoader(rpc).load(PoolLocation(POOL))

    assert pool.pool_address == POOL
    assert pool.base_mint == USDC_MINT
    assert pool.quote_mint == WSOL_MINT
    assert pool.base_reserve == 50_000_000_000_000
    assert pool.quote_reserve == 1_000_000_000_000
    assert pool.base_decimals == 6
    assert pool.quote_decimals == 9
    assert [c.args[0] for c in rpc.get_token_account_balance.call_args_list] == [
        BASE_VAULT,
        QUOTE_VAULT,
    ]
    rpc.get_multiple_accounts.assert_not_called()


def test_load_missing_pool(rpc):
    rpc.get_account_info.return_value = account_info_result(None)

    with pytest.raises(PoolNotFoundError):
        OnchainPoolLoader(rpc).load(PoolLocation(POOL))
    rpc.get_token_account_balance.assert_not_called()


def test_load_bad_quote_balance_names_the_vault(rpc):
    rpc.get_token_account_balance.side_effect = [
        token_balance("100"),
        {"value": {"amount": "n/a"}},
    ]

    with pytest.raises(DecodeError, match=f"quote reserve from vault {QUOTE_VAULT}"):
        OnchainPoolLoader(rpc).load(PoolLocation(POOL))


def test_load_propagates_rpc_errors(rpc):
    rpc.get_token_account_balance.side_effect = RPCError(
        -32602, "Invalid param: not a Token account", method="getTokenAccountBalance"
    )

    with pytest.raises(RPCError):
        OnchainPoolLoader(rpc).load(PoolLocation(POOL))


def test_load_logs_source(rpc, caplog):
    with caplog.at_level("INFO", logger="deficheck"):
        OnchainPoolLoader(rpc).load(PoolLocation(POOL))

    assert f"Using onchain data for pool {POOL}" in caplog.text
