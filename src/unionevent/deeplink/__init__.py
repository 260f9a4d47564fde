"""
Deep links

Build and read ``scheme://`` application links carrying a path and
key/value data.
"""

from .url import (
    DeepLink, build_url, parse_url, key_values_from_query, encode_query,
    join_path, path_components, ENCODING_FAILURE, DECODING_FAILURE,
)

__all__ = [
    "DeepLink",
    "build_url",
    "parse_url",
    "key_values_from_query",
    "encode_query",
    "join_path",
    "path_components",
    "ENCODING_FAILURE",
    "DECODING_FAILURE",
]
