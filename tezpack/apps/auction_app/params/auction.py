"""
Auction contract `start_auction` parameter builders

Parameter layout (right comb of pairs):

    sell asset contract
    sell asset ID
    asset quantity
    buy asset type
    buy asset (packed)
    seller
    start date (option)
    duration
    min price
    buy out price
    min step
    payouts
    origin fees
    data type (option) - reserved
    data (option) - reserved

The sell asset specific variants replace the (sell asset contract, sell asset ID) pair with a single asset descriptor
and the (buy asset type, buy asset) pair with the buy asset descriptor.
"""
from dataclasses import dataclass
from typing import Any, Sequence

from tezpack.apps.auction_app.params.asset import (
    Asset,
    mk_asset,
    mk_fa12_asset,
    mk_fungible_fa2_asset,
    mk_non_fungible_fa2_asset_with_missing_asset_id,
    mk_non_fungible_fa2_asset_with_missing_contract,
    mk_non_fungible_fa2_asset_with_missing_contract_and_id,
    mk_xtz_asset,
)
from tezpack.tezos.client.model import Address
from tezpack.tezos.client.protocols import Packer
from tezpack.tezos.michelson.micheline import (
    Bytes,
    Node,
    Prim,
    bytes_,
    nat,
    none,
    pair,
    seq,
    some,
    string,
)


@dataclass(slots=True, frozen=True)
class Part:
    """
    Payout or origin fee share
    """

    account: Address
    # basis points
    value: int


@dataclass(slots=True, frozen=True)
class AuctionTerms:
    """
    Auction settings shared by all auction parameter variants
    """

    # pylint: disable=too-many-instance-attributes

    asset_qty: int
    seller: Address
    # seconds
    duration: int
    min_price: int
    buy_out_price: int
    min_step: int
    # timestamp (seconds) - if not set, then the auction starts when it is created
    start_date: int | None = None
    payouts: Sequence[Part] = ()
    origin_fees: Sequence[Part] = ()


def mk_part(account: Address, value: int) -> Prim:
    return pair(string(account), nat(value))


def mk_parts(parts: Sequence[Part]) -> Node:
    return seq(mk_part(part.account, part.value) for part in parts)


def mk_start_date(start_date: Any, *, legacy_falsy: bool = True) -> Prim:
    """
    :param legacy_falsy: if True, then any falsy value, e.g., 0 or "", is encoded as None.
                         Otherwise, only None is encoded as None.
    """
    if legacy_falsy:
        return some(nat(start_date)) if start_date else none()
    return none() if start_date is None else some(nat(start_date))


def _mk_terms(terms: AuctionTerms) -> list[Node]:
    return [
        string(terms.seller),
        mk_start_date(terms.start_date),
        nat(terms.duration),
        nat(terms.min_price),
        nat(terms.buy_out_price),
        nat(terms.min_step),
        mk_parts(terms.payouts),
        mk_parts(terms.origin_fees),
        none(),
        none(),
    ]


def mk_auction(
    sell_asset_contract: Address,
    sell_asset_id: int,
    buy_asset_type: int,
    buy_asset: bytes | str | Bytes,
    terms: AuctionTerms,
) -> Prim:
    """
    :param buy_asset: packed buy asset, e.g., as returned by mk_buy_asset for the packed asset types
    :exception TypeError: if buy_asset is a tree, e.g., the FA2 NFT descriptor
    """
    return pair(
        string(sell_asset_contract),
        nat(sell_asset_id),
        nat(terms.asset_qty),
        nat(buy_asset_type),
        bytes_(buy_asset),
        *_mk_terms(terms),
    )


def _mk_asset_auction(
    packer: Packer,
    sell_asset: Node,
    buy_asset: Asset,
    terms: AuctionTerms,
) -> Prim:
    return pair(
        sell_asset,
        nat(terms.asset_qty),
        mk_asset(packer, buy_asset),
        *_mk_terms(terms),
    )


def mk_fungible_fa2_auction(
    packer: Packer,
    sell_asset_contract: Address,
    sell_asset_id: int,
    buy_asset: Asset,
    terms: AuctionTerms,
) -> Prim:
    return _mk_asset_auction(
        packer,
        mk_fungible_fa2_asset(packer, sell_asset_contract, sell_asset_id),
        buy_asset,
        terms,
    )


def mk_fa12_auction(
    packer: Packer,
    sell_asset_contract: Address,
    buy_asset: Asset,
    terms: AuctionTerms,
) -> Prim:
    return _mk_asset_auction(
        packer,
        mk_fa12_asset(packer, sell_asset_contract),
        buy_asset,
        terms,
    )


def mk_xtz_auction(packer: Packer, buy_asset: Asset, terms: AuctionTerms) -> Prim:
    return _mk_asset_auction(packer, mk_xtz_asset(), buy_asset, terms)


# The following auctions are malformed on purpose: the FA2 sell asset is missing its contract and/or asset ID.
# They are used to verify that the auction contract rejects them.


def mk_auction_with_missing_fa2_asset_contract(
    packer: Packer,
    sell_asset_id: int,
    buy_asset: Asset,
    terms: AuctionTerms,
) -> Prim:
    return _mk_asset_auction(
        packer,
        mk_non_fungible_fa2_asset_with_missing_contract(packer, sell_asset_id),
        buy_asset,
        terms,
    )


def mk_auction_with_missing_fa2_asset_id(
    packer: Packer,
    sell_asset_contract: Address,
    buy_asset: Asset,
    terms: AuctionTerms,
) -> Prim:
    return _mk_asset_auction(
        packer,
        mk_non_fungible_fa2_asset_with_missing_asset_id(packer, sell_asset_contract),
        buy_asset,
        terms,
    )


def mk_auction_with_missing_fa2_asset_contract_and_id(
    packer: Packer,
    buy_asset: Asset,
    terms: AuctionTerms,
) -> Prim:
    return _mk_asset_auction(
        packer,
        mk_non_fungible_fa2_asset_with_missing_contract_and_id(packer),
        buy_asset,
        terms,
    )
