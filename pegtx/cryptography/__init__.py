"""
Elliptic curve cryptography and hash functions
"""
# cryptography/__init__.py

from pegtx.cryptography.ecc import *
from pegtx.cryptography.ecdsa import *
from pegtx.cryptography.hash_functions import *
