"""
Contract failure messages, as they appear in the node's error output (Michelson literal form)
"""
from enum import StrEnum


class ContractError(StrEnum):
    CALLER_NOT_OWNER = '"CALLER_NOT_OWNER"'
    NOT_FOUND = '"NotFound"'
    LEDGER_NOT_FOUND = '(Pair "AssetNotFound" "ledger")'
    INVALID_CALLER = '"InvalidCaller"'
    INVALID_AMOUNT = '"FA2_INVALID_AMOUNT"'
    FA2_INSUFFICIENT_BALANCE = '"FA2_INSUFFICIENT_BALANCE"'
    FA2_NOT_OPERATOR = '"FA2_NOT_OPERATOR"'
    ARCHETYPE_ALREADY_REGISTERED = '"Archetype already registered"'
    ARCHETYPE_INVALID_VALIDATOR = (
        '"Archetype requires a minting validator contract address"'
    )
    ARCHETYPE_NOT_REGISTERED = '"Archetype not registered"'
    LIMIT_ALREADY_SET = '"MintingValidator: minting limit already set"'
    SERIAL_OOB = '"MintingValidator: serial number out of bounds"'
    ALREADY_MINTED = '"Token already minted"'
    DEADLINE_REACHED = '"MintingValidator: deadline reached"'
    DEADLINE_ALREADY_SET = '"MintingValidator: deadline already set"'
    MUST_BE_MINTER = '"Must be a minter"'
    DOES_NOT_EXIST = '"Token does not exist"'
    NOT_WHITELISTED = '"TO_NOT_ALLOWED"'
    WHITELIST_TO_RESTRICTED = '"TO_RESTRICTED"'
    NOT_ADMIN = '"Must be an administrator"'
    ERC1155_NOT_APPROVED = '"ERC1155: caller is not owner nor approved"'
    ERC1155_INSUFFICIENT_BALANCE = '"ERC1155: insufficient balance for transfer"'
    ARCHETYPE_QUOTA = '"Archetype quota reached"'
    COOLDOWN = '"Transfer cooldown"'
    USDC_WRONG_SIG = '"FiatTokenV2: invalid signature"'
    USDC_BALANCE_TOO_LOW = '"ERC20: transfer amount exceeds balance"'
    USDC_ALLOWANCE_TOO_LOW = '"ERC20: transfer amount exceeds allowance"'
    QUARTZ_MINTER_AUTHORIZATION_EXPIRED = '"QUARTZ_MINTER: authorization expired"'
    QUARTZ_MINTER_RECOVER_FAILED = '"QUARTZ_MINTER: invalid signature"'
    PAUSED = '"Pausable: paused"'
    NOT_PAUSED = '"Pausable: not paused"'
    META_TRANSACTION_WRONG_SIGNATURE = '"NativeMetaTransaction: WRONG_SIGNATURE"'
    # followed by the signed payload
    MISSIGNED = '(Pair "MISSIGNED"'
    EXPIRED_PERMIT = '"PERMIT_EXPIRED"'
    EXPIRY_NEGATIVE = '"EXPIRY_NEGATIVE"'
    EXPIRY_TOO_BIG = '"EXPIRY_TOO_BIG"'
    NOT_PERMIT_ISSUER = '"NOT_PERMIT_ISSUER"'
    CONTRACT_PAUSED = '"CONTRACT_PAUSED"'
    KEY_EXISTS = '(Pair "KeyExists" "royalties")'
    TOKEN_METADATA_KEY_EXISTS = '(Pair "KeyExists" "token_metadata")'


def assert_contract_error(err: BaseException, expected: ContractError | str):
    """
    Checks that the contract call failed with the expected error.

    :exception AssertionError: if the expected error message is not found in the exception message
    """
    if str(expected) not in str(err):
        raise AssertionError(
            f"expected contract error {expected}, but failed with: {err}"
        ) from err
