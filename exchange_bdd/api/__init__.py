"""
Exchange API client used by the BDD step definitions.

The aggregator in exchange_bdd.testing never calls this module.
"""

from .context import ApiContext
from .client import (
    get,
    post,
    encode_params,
    get_url_and_query_string,
    get_content_as_string,
    get_content_as_json,
)
from .signing import get_api_sign

__all__ = [
    "ApiContext",
    "get",
    "post",
    "encode_params",
    "get_url_and_query_string",
    "get_content_as_string",
    "get_content_as_json",
    "get_api_sign",
]
