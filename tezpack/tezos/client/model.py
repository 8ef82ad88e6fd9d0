"""
Tezos domain model
"""
from dataclasses import dataclass
from typing import NewType

# base58check encoded account or contract address, e.g. tz1..., KT1...
Address = NewType("Address", str)

# FA2 token ID
TokenId = NewType("TokenId", int)

# big_map pointer as exposed by contract storage
BigMapId = NewType("BigMapId", int)


@dataclass(slots=True, frozen=True)
class Account:
    """
    Named account, e.g., a sandbox bootstrap account.
    """

    name: str
    address: Address

    def __str__(self) -> str:
        return self.name
