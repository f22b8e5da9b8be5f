"""
Methods for parsing script
"""
from pegtx.core import ScriptError, OPCODES

__all__ = ["to_asm"]


def to_asm(script: bytes) -> list:
    """
    Given a script, we return the associated ASM
    """
    if not isinstance(script, bytes):
        raise ScriptError("Tried to parse unserialized object")

    data = script
    pos = 0
    length = len(data)
    asm_log = []

    while pos < length:
        opcode_int = data[pos]
        pos += 1

        # Direct push length (0x01-0x4b)
        if 0x01 <= opcode_int <= 0x4b:
            asm_log.append(f"OP_PUSHBYTES_{opcode_int}")
            if pos + opcode_int > length:
                raise ScriptError("Script truncated during push operation")
            asm_log.append(data[pos:pos + opcode_int].hex())
            pos += opcode_int

        # OP_PUSHDATA1, OP_PUSHDATA2, OP_PUSHDATA4
        elif 0x4c <= opcode_int <= 0x4e:
            size_bytes = {0x4c: 1, 0x4d: 2, 0x4e: 4}[opcode_int]
            if pos + size_bytes > length:
                raise ScriptError(f"Script truncated during {OPCODES[opcode_int]}")

            push_length = int.from_bytes(data[pos:pos + size_bytes], "little")
            pos += size_bytes

            asm_log.append(OPCODES[opcode_int])
            asm_log.append(f"{push_length:x}")

            if pos + push_length > length:
                raise ScriptError(f"Script truncated during {OPCODES[opcode_int]} data")
            asm_log.append(data[pos:pos + push_length].hex())
            pos += push_length

        else:
            opcode_name = OPCODES.get(opcode_int)
            if opcode_name is None:
                raise ScriptError(f"Unknown OP Code: {opcode_int:02x}")
            asm_log.append(opcode_name)

    return asm_log
