"""Password hashing context, password limits and clock helpers."""

from datetime import datetime, timezone

from passlib.context import CryptContext

# bcrypt only reads the first 72 bytes of a secret and rejects NUL bytes
MAX_PASSWORD_BYTES = 72


def build_password_context(work_factor: int) -> CryptContext:
    """bcrypt context whose cost is ``work_factor`` (log2 rounds).

    Hashing a secret longer than MAX_PASSWORD_BYTES raises
    PasswordTruncateError instead of silently dropping the tail.
    """
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=work_factor,
        bcrypt__truncate_error=True,
    )


def password_problem(password: str) -> str | None:
    """Why bcrypt cannot store ``password`` faithfully, or None if it can."""
    if "\x00" in password:
        return "password must not contain NUL characters"
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return f"password must be at most {MAX_PASSWORD_BYTES} bytes in UTF-8"
    return None


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
