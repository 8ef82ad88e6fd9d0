"""
pytezos backed TezosClient

pytezos is blocking. Blocking calls are run on the provided thread pool executor.

Requires the `pytezos` extra.
"""
import asyncio
import functools
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from pytezos import pytezos
from pytezos.contract.interface import ContractInterface
from pytezos.michelson.forge import forge_script_expr
from pytezos.michelson.types.base import MichelsonType
from pytezos.rpc.errors import RpcError

from tezpack.core.logging import get_logger
from tezpack.tezos.client.config import TezosConfig
from tezpack.tezos.client.error import BigMapKeyNotFoundError
from tezpack.tezos.client.model import Account, Address, BigMapId
from tezpack.tezos.client.protocols import TezosClient, Contract
from tezpack.tezos.michelson.micheline import Node, from_micheline


def handle_rpc_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator function that maps pytezos RPC errors to TezosClientError exceptions.
    If the exceptions cannot be mapped, then they are simply re-raised.

    - RPC 'Not found' is mapped to BigMapKeyNotFoundError
    """

    @functools.wraps(func)
    def wrapped_func(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RpcError as err:
            if "Not found" in str(err):
                raise BigMapKeyNotFoundError from err
            raise

    return wrapped_func


class PyTezosContract(Contract):
    def __init__(self, contract: ContractInterface, executor: ThreadPoolExecutor):
        self.__contract = contract
        self.__executor = executor

    @property
    def address(self) -> Address:
        return Address(self.__contract.address)

    async def get_storage(self) -> Any:
        return await asyncio.get_event_loop().run_in_executor(
            self.__executor,
            self.__contract.storage,
        )

    async def call(self, entrypoint: str, arg: Any) -> Any:
        def _call():
            return getattr(self.__contract, entrypoint)(arg).send(min_confirmations=1)

        return await asyncio.get_event_loop().run_in_executor(
            self.__executor,
            _call,
        )


class PyTezosClient(TezosClient):
    def __init__(self, config: TezosConfig, executor: ThreadPoolExecutor):
        self.__config = config
        self.__executor = executor
        self.__client = pytezos.using(shell=config.endpoint, key=config.key)
        self.__logger = get_logger(self)

    def pack_typed(self, value: Node, value_type: Node) -> bytes:
        michelson_type = MichelsonType.match(value_type.to_micheline())
        return michelson_type.from_micheline_value(value.to_micheline()).pack()

    async def get_value_from_big_map(
        self,
        big_map_id: BigMapId,
        key: Node,
        key_type: Node,
    ) -> Node | None:
        key_hash = forge_script_expr(self.pack_typed(key, key_type))

        @handle_rpc_errors
        def _lookup():
            return self.__client.shell.head.context.big_maps[big_map_id][key_hash]()

        def _get_value() -> Node | None:
            self.__logger.debug("big_map lookup: %s/%s", big_map_id, key_hash)
            try:
                return from_micheline(_lookup())
            except BigMapKeyNotFoundError:
                return None

        return await asyncio.get_event_loop().run_in_executor(
            self.__executor,
            _get_value,
        )

    def get_account(self, address: Address) -> Account:
        return self.__config.get_account(address)

    def get_endpoint(self) -> str:
        return self.__config.endpoint

    def contract(self, address: Address) -> PyTezosContract:
        return PyTezosContract(self.__client.contract(address), self.__executor)
