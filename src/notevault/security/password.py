"""Password hashing utilities."""

from passlib.context import CryptContext

from ..config import Settings


def build_password_context(rounds: int) -> CryptContext:
    """Create a hashing context with the given bcrypt work factor.

    bcrypt_sha256 pre-hashes with SHA-256 so passwords longer than bcrypt's
    72-byte limit are not silently truncated. Salts are generated per hash.
    """
    return CryptContext(
        schemes=["bcrypt_sha256"],
        deprecated="auto",
        bcrypt_sha256__rounds=rounds,
    )


class PasswordHasher:
    """Hashes and checks passwords with a fixed work factor."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self.context = build_password_context(rounds)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordHasher":
        return cls(rounds=settings.password_hash_rounds)

    def hash(self, password: str) -> str:
        """Hash a password."""
        return self.context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return self.context.verify(plain_password, hashed_password)

    def dummy_verify(self) -> None:
        """Spend the same time as a real verification when there is no hash to check."""
        self.context.dummy_verify()
