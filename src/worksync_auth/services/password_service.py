"""Password storage service.

Passwords are kept verbatim by default, matching how existing accounts
were created. Deployments can switch to bcrypt; under the bcrypt scheme,
bcrypt hashes and plaintext values are told apart by their ``$2`` prefix so
a database can be moved over gradually. The plaintext scheme always compares
verbatim, so hashes written under bcrypt stop verifying if a deployment
switches back.
"""

import hmac
from enum import Enum

import bcrypt


class PasswordScheme(str, Enum):
    PLAINTEXT = "plaintext"
    BCRYPT = "bcrypt"


class PasswordService:
    """Service for storing and verifying user passwords.

    Examples
    --------
    >>> service = PasswordService(PasswordScheme.BCRYPT)
    >>> stored = service.hash("my_password")
    >>> service.verify("my_password", stored)
    True
    >>> service.verify("wrong_password", stored)
    False
    """

    def __init__(
        self,
        scheme: PasswordScheme | str = PasswordScheme.PLAINTEXT,
        rounds: int = 12,
    ):
        """Initialize the password service.

        Parameters
        ----------
        scheme
            How new passwords are stored ("plaintext" or "bcrypt")
        rounds
            The bcrypt work factor (log2 of iterations), bcrypt only
        """
        self._scheme = PasswordScheme(scheme)
        self._rounds = rounds

    @property
    def scheme(self) -> PasswordScheme:
        return self._scheme

    def hash(self, password: str) -> str:
        """Return the value to store for a password."""
        if self._scheme == PasswordScheme.PLAINTEXT:
            return password

        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, stored: str) -> bool:
        """Verify a password against its stored value.

        Under the bcrypt scheme, stored bcrypt hashes are checked with
        bcrypt. Anything else is compared for exact equality.
        """
        if self._scheme == PasswordScheme.BCRYPT and self.is_bcrypt_hash(stored):
            try:
                return bcrypt.checkpw(
                    password.encode("utf-8"),
                    stored.encode("utf-8"),
                )
            except (ValueError, TypeError):
                # Invalid hash format
                return False

        return hmac.compare_digest(password.encode("utf-8"), stored.encode("utf-8"))

    @staticmethod
    def is_bcrypt_hash(stored: str) -> bool:
        return stored.startswith(("$2a$", "$2b$", "$2y$")) and len(stored) == 60
