"""
Scripts: locking scripts, the P2SH redemption scriptsig, the deposit redeem script and the legacy sighash
"""
# script/__init__.py
from pegtx.script.parser import *
from pegtx.script.script import *
from pegtx.script.redeem import *
from pegtx.script.scriptpubkey import *
from pegtx.script.scriptsig import *
from pegtx.script.sighash import *
