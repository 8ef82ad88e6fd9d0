"""
Michelson / Micheline support
"""
