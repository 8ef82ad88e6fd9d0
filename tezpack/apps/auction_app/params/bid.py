"""
Auction contract `put_bid` parameter builder
"""
from dataclasses import dataclass
from typing import Sequence

from tezpack.apps.auction_app.params.auction import Part, mk_parts
from tezpack.tezos.client.model import Address
from tezpack.tezos.michelson.micheline import Prim, nat, none, pair, string


@dataclass(slots=True, frozen=True)
class Bid:
    # auctioned asset
    asset_contract: Address
    asset_id: int

    amount: int
    bidder: Address
    payouts: Sequence[Part] = ()
    origin_fees: Sequence[Part] = ()


def mk_bid(bid: Bid) -> Prim:
    """
    Parameter layout: asset contract, asset ID, payouts, origin fees, amount, bidder,
    data type (option), data (option)
    """
    return pair(
        string(bid.asset_contract),
        nat(bid.asset_id),
        mk_parts(bid.payouts),
        mk_parts(bid.origin_fees),
        nat(bid.amount),
        string(bid.bidder),
        none(),
        none(),
    )
