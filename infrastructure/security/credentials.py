import logging
import os
import secrets
from dataclasses import dataclass

import bcrypt

logger = logging.getLogger(__name__)

DEFAULT_USERNAME = "admin"
DEFAULT_PASSWORD = "password123"
DEFAULT_BCRYPT_ROUNDS = 10


@dataclass(frozen=True, slots=True)
class Credentials:
    username: str
    password_hash: str


def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode(
        "ascii"
    )


def load_credentials() -> Credentials:
    """
    Build the API credential from the environment.

    API_PASSWORD_HASH takes precedence over API_PASSWORD. A plain password
    is hashed once, here, with BCRYPT_ROUNDS.
    """
    username = os.getenv("API_USERNAME", DEFAULT_USERNAME)
    password_hash = os.getenv("API_PASSWORD_HASH")
    if password_hash:
        return Credentials(username=username, password_hash=password_hash)

    if not os.getenv("API_PASSWORD"):
        logger.warning("API_PASSWORD not set, using the default password")
    rounds = int(os.getenv("BCRYPT_ROUNDS", str(DEFAULT_BCRYPT_ROUNDS)))
    password = os.getenv("API_PASSWORD", DEFAULT_PASSWORD)
    return Credentials(username=username, password_hash=hash_password(password, rounds))


class CredentialChecker:
    def __init__(self, credentials: Credentials) -> None:
        self._credentials = credentials

    def verify(self, username: str, password: str) -> bool:
        username_ok = secrets.compare_digest(
            username.encode("utf-8"), self._credentials.username.encode("utf-8")
        )
        try:
            password_ok = bcrypt.checkpw(
                password.encode("utf-8"),
                self._credentials.password_hash.encode("utf-8"),
            )
        except ValueError:
            logger.error("Configured password hash is not a valid bcrypt hash")
            return False
        return username_ok and password_ok
