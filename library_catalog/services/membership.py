import logging
from typing import List, Union

from library_catalog.exceptions import InvalidRoleSelector
from library_catalog.store import RecordStore
from library_catalog.user import Role, User

logger = logging.getLogger(__name__)

# Menu selectors accepted in place of a Role
ROLE_SELECTORS = {
    "1": Role.STUDENT,
    "2": Role.FACULTY,
}


def resolve_role(role: Union[Role, int, str]) -> Role:
    """Map a Role or a menu selector (1 = Student, 2 = Faculty) to a Role."""
    if isinstance(role, Role):
        return role
    # bool is an int subclass; True must not pass as selector 1
    if isinstance(role, bool) or not isinstance(role, (int, str)):
        raise InvalidRoleSelector(role)
    resolved = ROLE_SELECTORS.get(str(role).strip())
    if resolved is None:
        raise InvalidRoleSelector(role)
    return resolved


class MembershipService:
    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def register_user(self, name: str, role: Union[Role, int, str]) -> User:
        resolved = resolve_role(role)
        user = self.store.create_user(name, resolved)
        logger.info(f"User registered: id={user.user_id}, name={user.name!r}, role={resolved.label}")
        return user

    def list_users(self) -> List[User]:
        return self.store.list_users()
