"""
Tezos client related errors
"""


class TezosClientError(Exception):
    """
    Tezos client base exception
    """


class BigMapKeyNotFoundError(TezosClientError):
    """
    The big_map has no value bound to the key
    """


class UnknownAccountError(TezosClientError):
    """
    No account is registered for the address
    """
