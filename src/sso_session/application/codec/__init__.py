"""Client list codec."""

from .client_list_codec import ClientListDecodeResult, encode, decode, is_valid_client_id

__all__ = [
    "ClientListDecodeResult",
    "encode",
    "decode",
    "is_valid_client_id",
]
