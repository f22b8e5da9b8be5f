"""
The transaction builder

Natural call sequence:
    plan = assemble_outputs(recipients, change_address, utxos, sats_per_byte, extra_output)
    unsigned = unsigned_transaction(plan.outputs, utxos)
    inputs = sign_inputs(unsigned, signer, redeem_script)
    tx = finalize_transaction(plan.outputs, inputs)
or in one step:
    tx = build_signed_transaction(sats_per_byte, recipients, change_address, signer, utxos, redeem_script)
"""
# builder/__init__.py
from pegtx.builder.builder import *
from pegtx.builder.fee import *
from pegtx.builder.outputs import *
from pegtx.builder.signing import *
