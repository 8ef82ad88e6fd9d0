"""
Token balance test support.

Balances are read from the token contract's `ledger` big_map:

- FA1.2 ledger: address -> nat
- FA2 ledger: (token_id, address) -> nat

A missing ledger entry is a zero balance.
"""
import logging
from typing import Any, Awaitable, Callable

from tezpack.tezos.client.error import UnknownAccountError
from tezpack.tezos.client.model import Address, BigMapId, TokenId
from tezpack.tezos.client.protocols import Contract, TezosClient
from tezpack.tezos.michelson.micheline import (
    ADDRESS,
    NAT,
    Node,
    nat,
    pair,
    prim_type,
    string,
)

Action = Callable[[], Awaitable[Any]]

FA2_LEDGER_KEY_TYPE = prim_type("pair", NAT, ADDRESS)

_logger = logging.getLogger(__name__)


class InvalidBalanceDeltaError(AssertionError):
    """
    Raised when the balance delta does not match the expected delta
    """

    def __init__(
        self,
        holder: str,
        delta: int,
        expected: int,
        token_id: TokenId | None = None,
    ):
        self.holder = holder
        self.delta = delta
        self.expected = expected
        self.token_id = token_id

        if token_id is None:
            msg = f"Invalid delta balance of {delta} tokens for {holder}"
        else:
            msg = f"Invalid delta balance of {delta} tokens '{token_id}' for {holder}"
        super().__init__(f"{msg} (expected {expected})")


class InvalidBalanceError(AssertionError):
    """
    Raised when the balance does not match the expected balance
    """

    def __init__(self, balance: int, expected: int):
        self.balance = balance
        self.expected = expected
        super().__init__(f"Invalid balance of: expected {expected}, got {balance}")


async def get_big_map_value(
    client: TezosClient,
    big_map_id: BigMapId,
    key: Node,
    key_type: Node,
) -> int:
    """
    :return: 0 if the key does not exist
    """
    value = await client.get_value_from_big_map(big_map_id, key, key_type)
    if value is None:
        return 0
    return int(value.value)  # type: ignore


async def get_ledger_id(contract: Contract) -> BigMapId:
    storage = await contract.get_storage()
    return BigMapId(storage["ledger"])


async def get_fa12_balance(
    client: TezosClient,
    contract: Contract,
    address: Address,
) -> int:
    return await get_big_map_value(
        client,
        await get_ledger_id(contract),
        string(address),
        ADDRESS,
    )


async def get_fa2_balance(
    client: TezosClient,
    contract: Contract,
    token_id: TokenId,
    address: Address,
) -> int:
    return await get_big_map_value(
        client,
        await get_ledger_id(contract),
        pair(nat(token_id), string(address)),
        FA2_LEDGER_KEY_TYPE,
    )


def account_name(client: TezosClient, address: Address) -> str:
    """
    :return: account name, or the address if the account is unknown
    """
    try:
        return client.get_account(address).name
    except UnknownAccountError:
        return address


async def check_fa12_balance(
    client: TezosClient,
    contract: Contract,
    address: Address,
    expected_delta: int,
    action: Action,
):
    """
    Checks that running the action changes the FA1.2 balance by the expected delta.

    :exception InvalidBalanceDeltaError: if balance after - balance before != expected delta
    """
    balance_before = await get_fa12_balance(client, contract, address)
    await action()
    balance_after = await get_fa12_balance(client, contract, address)

    delta = balance_after - balance_before
    _logger.debug(
        "FA1.2 balance: address=%s before=%s after=%s delta=%s",
        address,
        balance_before,
        balance_after,
        delta,
    )
    if delta != expected_delta:
        raise InvalidBalanceDeltaError(
            holder=account_name(client, address),
            delta=delta,
            expected=expected_delta,
        )


async def check_fa2_balance(
    client: TezosClient,
    contract: Contract,
    token_id: TokenId,
    address: Address,
    expected_delta: int,
    action: Action,
):
    """
    Checks that running the action changes the FA2 token balance by the expected delta.

    :exception InvalidBalanceDeltaError: if balance after - balance before != expected delta
    """
    balance_before = await get_fa2_balance(client, contract, token_id, address)
    await action()
    balance_after = await get_fa2_balance(client, contract, token_id, address)

    delta = balance_after - balance_before
    _logger.debug(
        "FA2 balance: token_id=%s address=%s before=%s after=%s delta=%s",
        token_id,
        address,
        balance_before,
        balance_after,
        delta,
    )
    if delta != expected_delta:
        raise InvalidBalanceDeltaError(
            holder=account_name(client, address),
            delta=delta,
            expected=expected_delta,
            token_id=token_id,
        )


async def check_fa2_balance_of(
    balance_proxy: Contract,
    fa2: Contract,
    owner: Address,
    token_id: TokenId,
    expected: int,
):
    """
    Checks the FA2 balance using a proxy contract that calls the FA2 `balance_of` entry point and stores the balance
    in its storage.

    :exception InvalidBalanceError: if the balance != expected
    """
    await balance_proxy.call(
        "balanceof",
        {"fa2": fa2.address, "owner": owner, "tokenid": token_id},
    )
    balance = int(await balance_proxy.get_storage())
    if balance != expected:
        raise InvalidBalanceError(balance=balance, expected=expected)
