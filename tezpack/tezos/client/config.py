"""
Tezos client configuration

TOML config file format:

[tezos]
endpoint="http://localhost:8732"
# secret key, or path to a key file, used to sign operations
key="edsk..."

[accounts]
alice="tz1..."
bob="tz1..."
"""
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from tezpack.tezos.client.error import UnknownAccountError
from tezpack.tezos.client.model import Account, Address
from tezpack.tezos.client.protocols import TezosClient

# local sandbox node, e.g., flextesa
SANDBOX_ENDPOINT: Final[str] = "http://localhost:8732"


@dataclass(slots=True)
class TezosConfig:
    endpoint: str = SANDBOX_ENDPOINT
    key: str | None = None
    # account name -> address
    accounts: dict[str, Address] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "TezosConfig":
        tezos = config.get("tezos", {})
        return cls(
            endpoint=tezos.get("endpoint", SANDBOX_ENDPOINT),
            key=tezos.get("key"),
            accounts={
                name: Address(address)
                for name, address in config.get("accounts", {}).items()
            },
        )

    @classmethod
    def from_config_file(cls, file: Path) -> "TezosConfig":
        """
        Loads the config from the specified TOML config file
        """
        with open(file, "rb") as config_file:
            config = tomllib.load(config_file)
        return cls.from_dict(config)

    @classmethod
    def from_env(cls) -> "TezosConfig":
        """
        Env vars
        --------
        - TEZOS_ENDPOINT - defaults to the sandbox endpoint
        - TEZOS_KEY - optional
        """
        endpoint = os.environ.setdefault("TEZOS_ENDPOINT", SANDBOX_ENDPOINT)
        return cls(endpoint=endpoint, key=os.environ.get("TEZOS_KEY"))

    def get_account(self, address: Address) -> Account:
        """
        :exception UnknownAccountError: if the address is not registered in the config
        """
        for name, account_address in self.accounts.items():
            if account_address == address:
                return Account(name=name, address=address)
        raise UnknownAccountError(address)

    @property
    def sandbox(self) -> bool:
        return is_sandbox(self.endpoint)


def is_sandbox(endpoint: str | TezosClient) -> bool:
    """
    :param endpoint: endpoint URL, or the client whose configured endpoint is checked
    :return: True only if the endpoint is exactly the local sandbox endpoint
    """
    if not isinstance(endpoint, str):
        endpoint = endpoint.get_endpoint()
    return endpoint == SANDBOX_ENDPOINT
