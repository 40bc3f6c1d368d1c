# leadfolder/ids.py
"""
History item ids.

Two interchangeable strategies: a random UUID when the platform has an OS
randomness source, otherwise a millisecond timestamp plus a pseudo-random hex
suffix. The choice is made once, at import time.
"""
from __future__ import annotations

import os
import random
import time
import uuid
from typing import Callable

IdFactory = Callable[[], str]


def uuid_id() -> str:
    return str(uuid.uuid4())


def timestamp_id() -> str:
    return f"{int(time.time() * 1000)}-{random.getrandbits(52):x}"


def has_secure_random() -> bool:
    try:
        os.urandom(16)
    except NotImplementedError:
        return False
    return True


def select_id_factory(secure_random: bool | None = None) -> IdFactory:
    if secure_random is None:
        secure_random = has_secure_random()
    return uuid_id if secure_random else timestamp_id


make_id: IdFactory = select_id_factory()
