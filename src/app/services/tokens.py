import re
import secrets

SESSION_TOKEN_PATTERN = re.compile(r"^[a-f0-9]{64}$")


def generate_session_token() -> str:
    """Generate a 64-character hex token (256 bits)"""
    return secrets.token_hex(32)


def is_valid_session_token(token: str) -> bool:
    """Check that a string looks like a session token (64 lowercase hex chars)"""
    return bool(token) and SESSION_TOKEN_PATTERN.match(token) is not None


def token_prefix(token: str) -> str:
    """Loggable form of a session token"""
    return f"{token[:8]}..." if token else "<empty>"
