import unittest

from tezpack.apps.auction_app.contracts.errors import (
    ContractError,
    assert_contract_error,
)


class ContractErrorTestCase(unittest.TestCase):
    def test_contract_error(self):
        self.assertEqual('"FA2_INSUFFICIENT_BALANCE"', ContractError.FA2_INSUFFICIENT_BALANCE)
        self.assertEqual(
            '(Pair "AssetNotFound" "ledger")', str(ContractError.LEDGER_NOT_FOUND)
        )

    def test_contract_errors_are_distinct(self):
        # enum members with equal values would silently become aliases
        self.assertEqual(40, len(ContractError.__members__))
        self.assertEqual(40, len(ContractError))

        for error, expected in [
            (ContractError.ARCHETYPE_NOT_REGISTERED, '"Archetype not registered"'),
            (
                ContractError.SERIAL_OOB,
                '"MintingValidator: serial number out of bounds"',
            ),
            (
                ContractError.ERC1155_INSUFFICIENT_BALANCE,
                '"ERC1155: insufficient balance for transfer"',
            ),
            (
                ContractError.USDC_ALLOWANCE_TOO_LOW,
                '"ERC20: transfer amount exceeds allowance"',
            ),
            (
                ContractError.QUARTZ_MINTER_RECOVER_FAILED,
                '"QUARTZ_MINTER: invalid signature"',
            ),
            (
                ContractError.META_TRANSACTION_WRONG_SIGNATURE,
                '"NativeMetaTransaction: WRONG_SIGNATURE"',
            ),
        ]:
            with self.subTest(error=error.name):
                self.assertEqual(expected, error)

    def test_assert_contract_error(self):
        err = Exception(
            'Script failed: FAILWITH instruction reached: "FA2_INSUFFICIENT_BALANCE"'
        )
        with self.subTest("expected error"):
            assert_contract_error(err, ContractError.FA2_INSUFFICIENT_BALANCE)
            assert_contract_error(err, '"FA2_INSUFFICIENT_BALANCE"')

        with self.subTest("unexpected error"):
            with self.assertRaises(AssertionError) as ctx:
                assert_contract_error(err, ContractError.FA2_NOT_OPERATOR)
            self.assertIn('"FA2_NOT_OPERATOR"', str(ctx.exception))
            self.assertIs(err, ctx.exception.__cause__)


if __name__ == "__main__":
    unittest.main()
