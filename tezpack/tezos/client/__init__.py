"""
Tezos client support
"""
