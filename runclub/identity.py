import logging

from runclub.config import USER_KEY
from runclub.store import Store

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Student"


class UserIdentity:
    """The display name of whoever is using this profile, if anyone."""

    def __init__(self, store: Store) -> None:
        self.store = store

    def current(self) -> str | None:
        name = self.store.get(USER_KEY)
        return name or None

    def set(self, name: str) -> None:
        self.store.set(USER_KEY, name)
        logger.debug("Display name updated.")

    def clear(self) -> None:
        self.store.remove(USER_KEY)


def name_from_email(email: str) -> str:
    local = str(email or "").strip().split("@")[0]
    if not local:
        return DEFAULT_NAME
    return local[0].upper() + local[1:]
