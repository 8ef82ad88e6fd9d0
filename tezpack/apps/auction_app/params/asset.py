"""
Asset descriptors used by auction and bid parameters.

Depending on the asset type, the descriptor is either a packed value (Bytes) or a Micheline tree.
"""
import logging
from dataclasses import dataclass
from enum import IntEnum

from tezpack.tezos.client.model import Address
from tezpack.tezos.client.protocols import Packer
from tezpack.tezos.michelson.micheline import (
    ADDRESS,
    NAT,
    Bytes,
    Node,
    bytes_,
    left,
    nat,
    pair,
    prim_type,
    right,
    some,
    string,
)

# XTZ has no locator, only the asset class tag
XTZ_ASSET_TAG = b"\x00"

# FA2 asset class: Right (Right (Left 1))
FA2_ASSET_CLASS = right(right(left(nat(1))))

# returned for unrecognized asset types
EMPTY_ASSET = Bytes("")


class AssetType(IntEnum):
    """
    Asset type. The value is the contract's asset type tag.

    - XTZ       - native currency
    - FA_1_2    - single asset token contract
    - FA_2_NFT  - multi asset token contract, non-fungible token
    - FA_2_FT   - multi asset token contract, fungible token
    """

    XTZ = 0
    FA_1_2 = 1
    FA_2_NFT = 2
    FA_2_FT = 3

    def __repr__(self) -> str:
        return f"{self.name}({self.value})"


@dataclass(slots=True, frozen=True)
class Asset:
    """
    Asset locator

    - XTZ: no contract or asset ID
    - FA_1_2: contract
    - FA_2_NFT, FA_2_FT: contract and asset ID
    """

    asset_type: AssetType
    contract: Address | None = None
    asset_id: int | None = None


def mk_xtz_asset() -> Bytes:
    return bytes_(XTZ_ASSET_TAG)


def mk_fa12_asset(packer: Packer, contract: Address) -> Bytes:
    return bytes_(packer.pack_typed(string(contract), ADDRESS))


def mk_fungible_fa2_asset(packer: Packer, contract: Address, asset_id: int) -> Bytes:
    return bytes_(
        packer.pack_typed(
            pair(string(contract), nat(asset_id)),
            prim_type("pair", ADDRESS, NAT),
        )
    )


def mk_non_fungible_fa2_asset(contract: Address, asset_id: int) -> Node:
    return pair(
        FA2_ASSET_CLASS,
        pair(some(string(contract)), some(nat(asset_id))),
    )


# The following descriptors are malformed on purpose. They are used to verify that contracts reject them.


def mk_non_fungible_fa2_asset_with_missing_asset_id(
    packer: Packer, contract: Address
) -> Bytes:
    return bytes_(packer.pack_typed(string(contract), ADDRESS))


def mk_non_fungible_fa2_asset_with_missing_contract(
    packer: Packer, asset_id: int
) -> Bytes:
    return bytes_(packer.pack_typed(nat(asset_id), NAT))


def mk_non_fungible_fa2_asset_with_missing_contract_and_id(packer: Packer) -> Bytes:
    return bytes_(packer.pack_typed(nat(""), NAT))


def mk_buy_asset(
    packer: Packer,
    asset_type: AssetType | int,
    contract: Address | None = None,
    asset_id: int | None = None,
) -> Node:
    """
    Builds the asset descriptor for the specified asset type.

    NOTE: unrecognized asset types are not rejected. An empty payload is returned, which the contract is expected
    to reject.
    """
    match asset_type:
        case AssetType.XTZ:
            return mk_xtz_asset()
        case AssetType.FA_1_2:
            return mk_fa12_asset(packer, contract)  # type: ignore
        case AssetType.FA_2_NFT:
            return mk_non_fungible_fa2_asset(contract, asset_id)  # type: ignore
        case AssetType.FA_2_FT:
            return mk_fungible_fa2_asset(packer, contract, asset_id)  # type: ignore
        case _:
            logging.getLogger(__name__).warning(
                "unrecognized asset type: %r", asset_type
            )
            return EMPTY_ASSET


def mk_asset(packer: Packer, asset: Asset) -> Node:
    return mk_buy_asset(packer, asset.asset_type, asset.contract, asset.asset_id)
