"""
Tezos auction contract test support
"""
