from packages.imgix_urls.infrastructure.path_codec import encode_path
from packages.imgix_urls.infrastructure.query_codec import encode_query
from packages.imgix_urls.infrastructure.signer import sign

__all__ = [
    "encode_path",
    "encode_query",
    "sign",
]
