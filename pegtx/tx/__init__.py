"""
Transaction elements and the UTXO types consumed by the builder
"""
# tx/__init__.py
from pegtx.tx.tx import *
from pegtx.tx.utxo import *
