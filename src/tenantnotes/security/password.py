"""Password hashing utilities."""

from passlib.context import CryptContext

# bcrypt_sha256 pre-hashes with SHA-256, so passwords longer than 72 bytes
# are not silently truncated.
pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash. Unknown or malformed hashes never match."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def needs_update(hashed_password: str) -> bool:
    """Check if password hash needs updating."""
    try:
        return pwd_context.needs_update(hashed_password)
    except (ValueError, TypeError):
        return False
