"""
Tezos client protocols

The test support code only depends on these protocols. PyTezosClient provides the live implementation.
"""
from typing import Any, Protocol

from tezpack.tezos.client.model import Account, Address, BigMapId
from tezpack.tezos.michelson.micheline import Node


class Packer(Protocol):
    def pack_typed(self, value: Node, value_type: Node) -> bytes:
        """
        Serializes the value using the Michelson PACK encoding for the specified type.

        :param value: Micheline value
        :param value_type: Michelson type expression
        :return: packed bytes, including the 0x05 prefix
        """
        ...


class TezosClient(Packer, Protocol):
    async def get_value_from_big_map(
        self,
        big_map_id: BigMapId,
        key: Node,
        key_type: Node,
    ) -> Node | None:
        """
        :return: None if the key does not exist in the big_map
        """
        ...

    def get_account(self, address: Address) -> Account:
        """
        :exception UnknownAccountError: if no account is registered for the address
        """
        ...

    def get_endpoint(self) -> str:
        """
        :return: RPC endpoint URL the client is connected to
        """
        ...


class Contract(Protocol):
    """
    Deployed smart contract
    """

    @property
    def address(self) -> Address:
        ...

    async def get_storage(self) -> Any:
        """
        :return: current storage snapshot. Big maps are referenced by their BigMapId.
        """
        ...

    async def call(self, entrypoint: str, arg: Any) -> Any:
        """
        Invokes the contract entry point and waits for the operation to be included.
        """
        ...
