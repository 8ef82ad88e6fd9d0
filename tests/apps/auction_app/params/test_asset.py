import unittest

from tests.support.tezos import FA12_CONTRACT, FA2_CONTRACT, JsonPacker, packed
from tezpack.apps.auction_app.params.asset import (
    EMPTY_ASSET,
    Asset,
    AssetType,
    mk_asset,
    mk_buy_asset,
    mk_fa12_asset,
    mk_fungible_fa2_asset,
    mk_non_fungible_fa2_asset,
    mk_non_fungible_fa2_asset_with_missing_asset_id,
    mk_non_fungible_fa2_asset_with_missing_contract,
    mk_non_fungible_fa2_asset_with_missing_contract_and_id,
    mk_xtz_asset,
)
from tezpack.tezos.michelson.micheline import (
    ADDRESS,
    NAT,
    Bytes,
    bytes_,
    nat,
    pair,
    prim_type,
    string,
)


class AssetTestCase(unittest.TestCase):
    packer = JsonPacker()

    def test_asset_type(self):
        self.assertEqual(
            [0, 1, 2, 3],
            [
                AssetType.XTZ,
                AssetType.FA_1_2,
                AssetType.FA_2_NFT,
                AssetType.FA_2_FT,
            ],
        )
        self.assertEqual("FA_2_FT(3)", repr(AssetType.FA_2_FT))

    def test_mk_xtz_asset(self):
        self.assertEqual(Bytes("00"), mk_xtz_asset())
        for contract, asset_id in ((None, None), (FA2_CONTRACT, 1)):
            with self.subTest(contract=contract, asset_id=asset_id):
                self.assertEqual(
                    Bytes("00"),
                    mk_buy_asset(self.packer, AssetType.XTZ, contract, asset_id),
                )

    def test_mk_fa12_asset(self):
        self.assertEqual(
            bytes_(packed(string(FA12_CONTRACT), ADDRESS)),
            mk_fa12_asset(self.packer, FA12_CONTRACT),
        )

    def test_mk_fungible_fa2_asset(self):
        self.assertEqual(
            bytes_(
                packed(
                    pair(string(FA2_CONTRACT), nat(7)),
                    prim_type("pair", ADDRESS, NAT),
                )
            ),
            mk_fungible_fa2_asset(self.packer, FA2_CONTRACT, 7),
        )

    def test_mk_non_fungible_fa2_asset(self):
        self.assertEqual(
            {
                "prim": "Pair",
                "args": [
                    {
                        "prim": "Right",
                        "args": [
                            {
                                "prim": "Right",
                                "args": [{"prim": "Left", "args": [{"int": "1"}]}],
                            }
                        ],
                    },
                    {
                        "prim": "Pair",
                        "args": [
                            {"prim": "Some", "args": [{"string": FA2_CONTRACT}]},
                            {"prim": "Some", "args": [{"int": "42"}]},
                        ],
                    },
                ],
            },
            mk_non_fungible_fa2_asset(FA2_CONTRACT, 42).to_micheline(),
        )

    def test_mk_buy_asset(self):
        expected = {
            AssetType.XTZ: mk_xtz_asset(),
            AssetType.FA_1_2: mk_fa12_asset(self.packer, FA2_CONTRACT),
            AssetType.FA_2_NFT: mk_non_fungible_fa2_asset(FA2_CONTRACT, 1),
            AssetType.FA_2_FT: mk_fungible_fa2_asset(self.packer, FA2_CONTRACT, 1),
        }
        for asset_type in AssetType:
            with self.subTest(asset_type=asset_type):
                self.assertEqual(
                    expected[asset_type],
                    mk_buy_asset(self.packer, asset_type, FA2_CONTRACT, 1),
                )
                self.assertEqual(
                    expected[asset_type],
                    mk_asset(self.packer, Asset(asset_type, FA2_CONTRACT, 1)),
                )

        with self.subTest("asset type int tag"):
            self.assertEqual(
                expected[AssetType.FA_2_FT],
                mk_buy_asset(self.packer, 3, FA2_CONTRACT, 1),
            )

    def test_mk_buy_asset_with_unrecognized_asset_type(self):
        for asset_type in (4, -1, "XTZ", None):
            with self.subTest(asset_type=asset_type):
                with self.assertLogs(
                    "tezpack.apps.auction_app.params.asset", level="WARNING"
                ):
                    self.assertEqual(
                        EMPTY_ASSET,
                        mk_buy_asset(self.packer, asset_type, FA2_CONTRACT, 1),  # type: ignore
                    )
        self.assertEqual(Bytes(""), EMPTY_ASSET)

    def test_malformed_fa2_assets(self):
        with self.subTest("missing asset ID"):
            self.assertEqual(
                bytes_(packed(string(FA2_CONTRACT), ADDRESS)),
                mk_non_fungible_fa2_asset_with_missing_asset_id(
                    self.packer, FA2_CONTRACT
                ),
            )

        with self.subTest("missing contract"):
            self.assertEqual(
                bytes_(packed(nat(5), NAT)),
                mk_non_fungible_fa2_asset_with_missing_contract(self.packer, 5),
            )

        with self.subTest("missing contract and asset ID"):
            self.assertEqual(
                bytes_(packed(nat(""), NAT)),
                mk_non_fungible_fa2_asset_with_missing_contract_and_id(self.packer),
            )


if __name__ == "__main__":
    unittest.main()
