"""
Session tokens for Places Autocomplete.

A session token groups the autocomplete keystrokes and the closing
details call into one billing session. It is a correlation id, not a
secret, so a pseudo-random fallback is acceptable when the OS entropy
source is unavailable.
"""

import random
import re
import uuid
from typing import Optional

from ..config.logger_module import log_warning

UUID4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


def fallback_session_token(rng: Optional[random.Random] = None) -> str:
    """Build a version-4 UUID string from a non-cryptographic generator."""
    rng = rng or random.Random()
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def create_session_token() -> str:
    """
    Generate a session token shaped like a UUID v4.

    Uses uuid.uuid4() (backed by os.urandom); falls back to the random
    module when no OS randomness source exists.
    """
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        log_warning("OS randomness unavailable, using pseudo-random session token")
        return fallback_session_token()


def is_session_token(value: str) -> bool:
    return bool(UUID4_PATTERN.match(value))
