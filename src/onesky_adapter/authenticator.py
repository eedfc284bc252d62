"""
Authenticator module for deriving per-request OneSky credentials
"""

import hashlib
import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Credentials:
    """Public/private key pair supplied once per client"""
    public_key: str
    private_key: str


@dataclass(frozen=True)
class AuthToken:
    """Timestamp and dev hash sent with a single request"""
    timestamp: int
    dev_hash: str


def compute_dev_hash(timestamp: int, secret: str,
                     hash_factory: Callable = hashlib.md5) -> str:
    """Hex digest over the timestamp immediately followed by the secret"""
    payload = f"{timestamp}{secret}".encode('utf-8')
    return hash_factory(payload).hexdigest()


class Authenticator:
    """Derives a fresh AuthToken for every outbound request"""

    def __init__(self, clock: Callable[[], float] = time.time,
                 hash_factory: Callable = hashlib.md5):
        self.clock = clock
        self.hash_factory = hash_factory

    def derive_token(self, secret: str) -> AuthToken:
        """
        Derive the authentication token for one request

        Args:
            secret: Private key shared with OneSky

        Returns:
            AuthToken with whole-second timestamp and hex digest
        """
        timestamp = int(self.clock())
        return AuthToken(
            timestamp=timestamp,
            dev_hash=compute_dev_hash(timestamp, secret, self.hash_factory)
        )
