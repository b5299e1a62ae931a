"""Request signature for private exchange endpoints."""

import base64
import hashlib
import hmac


def get_api_sign(nonce: str, uri_path: str, secret_key: str, url_encoded_params: str) -> str:
    """
    Compute the API-Sign header value.

    HMAC-SHA512 of (URI path + SHA256(nonce + POST data)), keyed with the
    base64-decoded secret, returned base64-encoded.

    Args:
        nonce: Nonce sent in the request body
        uri_path: Path of the endpoint (e.g. /0/private/OpenOrders)
        secret_key: Base64-encoded API secret
        url_encoded_params: Exact URL-encoded request body

    Returns:
        Base64 signature
    """
    sha256 = hashlib.sha256((str(nonce) + url_encoded_params).encode("utf-8")).digest()
    message = uri_path.encode("utf-8") + sha256

    mac = hmac.new(base64.b64decode(secret_key), message, hashlib.sha512)
    return base64.b64encode(mac.digest()).decode("ascii")
