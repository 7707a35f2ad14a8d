import uuid
from dataclasses import replace
from typing import Final

from ..domain.entities import User
from ..domain.exceptions import UserNotFoundError
from ..logging_config import get_logger
from ..logging_utils import log_user_action
from ..metrics import record_user_created, record_user_deleted

logger: Final = get_logger(__name__)


class UserService:
    """In-memory user store behind the /user sub-router.

    Users live for the lifetime of the process only. All access happens on
    the event loop, so no locking is needed.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def list_users(self) -> list[User]:
        return list(self._users.values())

    def get_user(self, user_id: str) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def create_user(self, first_name: str, last_name: str, age: int) -> User:
        user = User(
            id=str(uuid.uuid4()), first_name=first_name, last_name=last_name, age=age
        )
        self._users[user.id] = user

        logger.debug("Created user", user_id=user.id)
        log_user_action("create_user", user.id, first_name=first_name)
        record_user_created()
        return user

    def update_user(
        self,
        user_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
        age: int | None = None,
    ) -> User:
        """Update only the fields that are given.

        Raises:
            UserNotFoundError: If no user has this id
            ValidationError: If the updated user breaks a domain rule
        """
        user = self.get_user(user_id)

        changes: dict[str, str | int] = {}
        if first_name is not None:
            changes["first_name"] = first_name
        if last_name is not None:
            changes["last_name"] = last_name
        if age is not None:
            changes["age"] = age

        # replace() re-runs validation, so the stored user is only swapped
        # once the new values are known to be valid
        updated = replace(user, **changes)
        self._users[user_id] = updated

        log_user_action("update_user", user_id, fields=sorted(changes))
        return updated

    def delete_user(self, user_id: str) -> User:
        user = self.get_user(user_id)
        del self._users[user_id]

        log_user_action("delete_user", user_id)
        record_user_deleted()
        return user


# Process-wide store used by the default /user sub-router
user_service: Final = UserService()


def get_user_service() -> UserService:
    """FastAPI dependency returning the process-wide user store."""
    return user_service
