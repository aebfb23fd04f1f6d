"""Domain service helpers for password digests."""

import hashlib
import hmac
import secrets

_ALGORITHM = "sha256"
_ITERATIONS = 120_000


def hash_password(password: str) -> str:
    """Return a salted PBKDF2 digest in ``algorithm$iterations$salt$hash`` form."""
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        _ALGORITHM, password.encode("utf-8"), bytes.fromhex(salt), _ITERATIONS
    )
    return f"pbkdf2_{_ALGORITHM}${_ITERATIONS}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    """Check a plain password against a digest produced by ``hash_password``."""
    try:
        scheme, iterations, salt, expected = encoded.split("$")
    except ValueError:
        return False
    algorithm = scheme.removeprefix("pbkdf2_")
    digest = hashlib.pbkdf2_hmac(
        algorithm, password.encode("utf-8"), bytes.fromhex(salt), int(iterations)
    )
    return hmac.compare_digest(digest.hex(), expected)
