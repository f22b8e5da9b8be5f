"""
Signing providers: anything that turns a 32-byte digest into a DER signature with its sighash byte
"""
# signing/__init__.py
from pegtx.signing.signer import *
