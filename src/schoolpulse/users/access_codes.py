"""Access code generation.

Codes are 4-character alphanumeric (A-Z, 0-9), drawn from a cryptographic
random source. Uniqueness is checked against the store through a callback;
the caller persists the code together with the new user.
"""

from __future__ import annotations

import re
import secrets
import string
from collections.abc import Awaitable, Callable

from schoolpulse.errors import GenerationExhausted

ACCESS_CODE_CHARSET = string.ascii_uppercase + string.digits  # A-Z, 0-9
ACCESS_CODE_LENGTH = 4
MAX_ATTEMPTS = 100

_ACCESS_CODE_RE = re.compile(rf"^[A-Z0-9]{{{ACCESS_CODE_LENGTH}}}$")

CodeExists = Callable[[str], Awaitable[bool]]


def generate_access_code() -> str:
    """Generate a random 4-character access code."""
    return "".join(secrets.choice(ACCESS_CODE_CHARSET) for _ in range(ACCESS_CODE_LENGTH))


def normalize_access_code(code: str) -> str:
    """Normalize a user-entered code for lookup."""
    return code.strip().upper()


def is_valid_access_code(code: str) -> bool:
    """True if the code is exactly 4 characters of [A-Z0-9]."""
    return bool(_ACCESS_CODE_RE.match(code))


async def generate_unique_access_code(code_exists: CodeExists, max_attempts: int = MAX_ATTEMPTS) -> str:
    """Generate a code for which ``code_exists`` returns False.

    Raises GenerationExhausted after ``max_attempts`` collisions.
    """
    for _ in range(max_attempts):
        code = generate_access_code()
        if not await code_exists(code):
            return code
    raise GenerationExhausted(f"Unable to generate unique access code after {max_attempts} attempts")
