"""
Auction contract entry point parameter builders
"""
