"""
The custom exceptions used throughout pegtx
"""
__all__ = ["TxBuildError", "InsufficientFundsError", "AddressEncodingError", "SigningError", "MalformedUtxoError",
           "FeeError", "AmountError", "StreamError", "ReadError", "WriteError", "DataEncodingError", "ECDSAError",
           "ECCPrivateKeyError", "ScriptError"]


class TxBuildError(Exception):
    """
    Parent class for every error raised while building a signed transaction
    """
    pass


class InsufficientFundsError(TxBuildError):
    """
    Raised when the recipient total plus the fee exceeds the value of the supplied UTXOs
    """

    def __init__(self, utxo_total: int, total_to_spend: int, fee: int):
        self.utxo_total = utxo_total
        self.total_to_spend = total_to_spend
        self.fee = fee
        super().__init__(
            f"Not enough UTXO value to make transaction! UTXO total: {utxo_total}, outgoing total: {total_to_spend}, "
            f"fee: {fee}"
        )


class AddressEncodingError(TxBuildError):
    """
    Raised when an address can't be turned into a locking script
    """

    def __init__(self, address: str, reason: str = "unsupported address"):
        self.address = address
        super().__init__(f"Could not encode locking script for address {address!r}: {reason}")


class SigningError(TxBuildError):
    """
    For a missing key or any failure during signing
    """
    pass


class MalformedUtxoError(TxBuildError):
    """
    For a UTXO reference that can't be converted into a transaction input
    """
    pass


class FeeError(TxBuildError, ValueError):
    """
    For negative input counts, output counts or fee rates
    """
    pass


class AmountError(TxBuildError, ValueError):
    """
    For a recipient amount that is not a positive number of satoshis
    """
    pass


class StreamError(Exception):
    """
    Catchall for stream errors
    """
    pass


class ReadError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass


class WriteError(StreamError):
    """
    For when writing data that would be otherwise out of bounds
    """
    pass


class DataEncodingError(Exception):
    """
    For use in encoding/decoding algorithms
    """
    pass


class ECDSAError(Exception):
    """
    Raised during ECDSA operations for out of bounds values
    """
    pass


class ECCPrivateKeyError(Exception):
    """
    For if the private key is out of bounds
    """
    pass


class ScriptError(TxBuildError):
    """
    For malformed, truncated or empty scripts, the redeem script included
    """
    pass
