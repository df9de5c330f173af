# =============================================================================
# core/services/user_store.py - User Store
# =============================================================================
# Owns the ordered, process-local collection of users and the id counter.
# Enforces id and email uniqueness and implements the CRUD operations.
#
# Every operation returns a Result instead of raising, so this module has
# no dependency on FastAPI or any HTTP concept.
# =============================================================================

import logging
import re
import threading
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from core.models.result import ErrorKind, Result
from core.models.user import NestedResource, User, UserList

logger = logging.getLogger(__name__)


# =============================================================================
# Messages
# =============================================================================

MSG_NOT_FOUND = "user not found"
MSG_REQUIRED_FIELDS = "name and email are required"
MSG_NOTHING_TO_UPDATE = "name or email is required to update a user"
MSG_EMAIL_EXISTS = "email already exists"
MSG_INVALID_ID = "id must be an integer"

MSG_CREATED = "user created"
MSG_UPDATED = "user updated"
MSG_DELETED = "user deleted"


# =============================================================================
# Seed Data
# =============================================================================

SEED_USERS: list[tuple[str, str]] = [
    ("Park Changgi", "kim@example.com"),
    ("Lim Kyungmin", "lee@example.com"),
    ("Kim Jinyoung", "jin@example.com"),
    ("Lee Bohee", "boh@example.com"),
    ("Baek Suhyun", "baek@example.com"),
    ("Ryu Jehee", "ryu@example.com"),
    ("Choi Jinyoung", "choi@example.com"),
    ("Kim Yushin", "yushin@example.com"),
    ("Oh Marin", "omarin@example.com"),
    ("Ko Youngwoo", "goyoung@example.com"),
    ("Lee Jungyun", "jungyun@example.com"),
    ("Park Jieun", "jieun@example.com"),
    ("Kim Yoonki", "yoonki@example.com"),
    ("Lee Yuri", "yuri@example.com"),
    ("Park Sunghoon", "sunghoon@example.com"),
]


_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


def parse_id(value: int | str) -> int | None:
    """
    Parse a user id from a path parameter.

    Accepts ints and base-10 integer strings (surrounding whitespace and
    a leading sign allowed). Returns None for anything else.

    Example:
        parse_id("12")   # 12
        parse_id(" 7 ")  # 7
        parse_id("abc")  # None
        parse_id("1.5")  # None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


class UserStore:
    """
    In-memory user collection.

    Records keep insertion order. Ids come from a counter that only moves
    forward, so an id is never handed out twice even after deletions.

    A single lock guards every operation, which keeps the email and id
    uniqueness checks atomic with the mutation that follows them.

    Example:
        store = UserStore.with_seed_data()
        result = store.create(name="Kim", email="kim2@example.com")
        if result.ok:
            print(result.value.id)
    """

    def __init__(
        self,
        users: Iterable[User] = (),
        clock: Callable[[], datetime] = utc_now,
    ):
        self._clock = clock
        self._lock = threading.Lock()
        self._users: list[User] = []
        self._last_id = 0

        for user in users:
            if self._find(user.id) is not None:
                raise ValueError(f"Duplicate user id: {user.id}")
            if self._find_by_email(user.email) is not None:
                raise ValueError(f"Duplicate user email: {user.email}")
            self._users.append(user.model_copy())
            self._last_id = max(self._last_id, user.id)

    @classmethod
    def with_seed_data(
        cls,
        clock: Callable[[], datetime] = utc_now,
    ) -> "UserStore":
        """Build a store holding the default seed users (ids 1..15)."""
        created_at = clock()
        users = [
            User(id=index, name=name, email=email, created_at=created_at)
            for index, (name, email) in enumerate(SEED_USERS, start=1)
        ]
        return cls(users, clock=clock)

    # -------------------------------------------------------------------------
    # Lookup helpers (caller must hold the lock)
    # -------------------------------------------------------------------------

    def _find(self, user_id: int) -> User | None:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def _find_by_email(self, email: str, exclude_id: int | None = None) -> User | None:
        for user in self._users:
            if user.email == email and user.id != exclude_id:
                return user
        return None

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def list_all(self) -> Result[UserList]:
        """Return every user in insertion order together with the count."""
        with self._lock:
            users = [user.model_copy() for user in self._users]
        return Result.success(UserList(users=users, count=len(users)))

    def get_by_id(self, user_id: int | str) -> Result[User]:
        """
        Look up a single user.

        An id that does not parse as an integer cannot match any record
        and is reported as not found.
        """
        parsed = parse_id(user_id)

        with self._lock:
            user = self._find(parsed) if parsed is not None else None
            if user is None:
                return Result.failure(ErrorKind.NOT_FOUND, MSG_NOT_FOUND)
            return Result.success(user.model_copy())

    def create(self, name: str | None, email: str | None) -> Result[User]:
        """
        Create a user.

        Fails with:
            BAD_REQUEST: name or email missing or empty
            CONFLICT: another user already has this email
        """
        if not name or not email:
            logger.debug("Rejected create: missing name or email")
            return Result.failure(ErrorKind.BAD_REQUEST, MSG_REQUIRED_FIELDS)

        with self._lock:
            if self._find_by_email(email) is not None:
                logger.debug(f"Rejected create: email already in use: {email}")
                return Result.failure(ErrorKind.CONFLICT, MSG_EMAIL_EXISTS)

            self._last_id += 1
            user = User(
                id=self._last_id,
                name=name,
                email=email,
                created_at=self._clock(),
            )
            self._users.append(user)

        logger.info(f"Created user: {user.id}")
        return Result.success(user.model_copy(), MSG_CREATED)

    def patch_by_id(
        self,
        user_id: int | str,
        name: str | None = None,
        email: str | None = None,
    ) -> Result[User]:
        """
        Partially update a user.

        Only the supplied fields are written; an empty string counts as
        not supplied. Checks run in order: nothing to update
        (BAD_REQUEST), unknown id (NOT_FOUND), email held by another
        user (CONFLICT).
        """
        if not name and not email:
            return Result.failure(ErrorKind.BAD_REQUEST, MSG_NOTHING_TO_UPDATE)

        parsed = parse_id(user_id)

        with self._lock:
            user = self._find(parsed) if parsed is not None else None
            if user is None:
                return Result.failure(ErrorKind.NOT_FOUND, MSG_NOT_FOUND)

            if email and self._find_by_email(email, exclude_id=user.id) is not None:
                logger.debug(f"Rejected update of user {user.id}: email already in use")
                return Result.failure(ErrorKind.CONFLICT, MSG_EMAIL_EXISTS)

            if name:
                user.name = name
            if email:
                user.email = email
            user.updated_at = self._clock()
            updated = user.model_copy()

        logger.info(f"Updated user: {updated.id}")
        return Result.success(updated, MSG_UPDATED)

    def delete_by_id(self, user_id: int | str) -> Result[User]:
        """
        Remove a user and return the removed record.

        Fails with BAD_REQUEST when the id is not an integer and
        NOT_FOUND when no record has it. Remaining users keep their order.
        """
        parsed = parse_id(user_id)
        if parsed is None:
            return Result.failure(ErrorKind.BAD_REQUEST, MSG_INVALID_ID)

        with self._lock:
            for index, user in enumerate(self._users):
                if user.id == parsed:
                    del self._users[index]
                    break
            else:
                return Result.failure(ErrorKind.NOT_FOUND, MSG_NOT_FOUND)

        logger.info(f"Deleted user: {user.id}")
        return Result.success(user, MSG_DELETED)

    def get_nested_resource(self, user_id: str, post_id: str) -> Result[NestedResource]:
        """Echo the nested path parameters. There is no posts collection."""
        return Result.success(NestedResource(user_id=str(user_id), post_id=str(post_id)))

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
