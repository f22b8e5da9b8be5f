"""
The P2SH redemption scriptsig
"""
from pegtx.core import ScriptError
from pegtx.script.script import Script, pushdata

__all__ = ["p2sh_scriptsig"]


def p2sh_scriptsig(signature: bytes, redeem_script: Script | bytes) -> Script:
    """
    P2SH | OP_PUSHBYTES + SIGNATURE + OP_PUSHBYTES + REDEEM SCRIPT
    """
    redeem_bytes = bytes(redeem_script)
    if not signature:
        raise ScriptError("Empty signature for P2SH scriptsig")
    if not redeem_bytes:
        raise ScriptError("Empty redeem script for P2SH scriptsig")
    return Script(pushdata(signature) + pushdata(redeem_bytes))
