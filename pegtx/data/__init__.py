"""
All methods for encoding and decoding data in pegtx
"""

# data/__init__.py
from pegtx.data.base58 import *
from pegtx.data.compact_size import *
from pegtx.data.der import *
from pegtx.data.segwit_address import *
