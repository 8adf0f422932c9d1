from __future__ import annotations

import pytest

from loginsystem.application.use_cases.admin.ensure_default_admin import EnsureDefaultAdminUseCase
from loginsystem.domain.users.entities import User
from loginsystem.domain.users.exceptions import DuplicateUserError
from loginsystem.infrastructure.admin_setup import AdminSetupError, setup_admin_user


def _use_case(users, hasher) -> EnsureDefaultAdminUseCase:
    return EnsureDefaultAdminUseCase(users=users, password_hasher=hasher, username="admin", password="pass")


def test_creates_admin_on_fresh_system(users, hasher) -> None:
    admin = _use_case(users, hasher).execute()

    assert admin.username == "admin"
    assert hasher.verify("pass", admin.password_hash)
    assert users.exists("admin")


def test_running_twice_keeps_a_single_admin(users, hasher) -> None:
    use_case = _use_case(users, hasher)

    first = use_case.execute()
    second = use_case.execute()

    assert first == second
    assert [u.username for u in users._users.values()] == ["admin"]


def test_existing_admin_is_left_untouched(users, hasher) -> None:
    existing = users.add(User.new("admin", hasher.hash("already-changed")))

    assert _use_case(users, hasher).execute() == existing
    assert hasher.verify("already-changed", users.find_by_username("admin").password_hash)


class _LosesTheRace:
    """Existence check misses the admin a concurrent worker is inserting."""

    def __init__(self, inner) -> None:
        self._inner = inner

    def find_by_username(self, username: str):
        return None

    def add(self, user: User) -> User:
        self._inner.add(User.new(user.username, user.password_hash))
        return self._inner.add(user)


def test_concurrent_first_run_reports_duplicate(users, hasher) -> None:
    with pytest.raises(DuplicateUserError) as info:
        _use_case(_LosesTheRace(users), hasher).execute()

    assert info.value.status == 409
    assert info.value.username == "admin"
    assert len(users._users) == 1


def test_startup_setup_tolerates_losing_the_race(users, hasher) -> None:
    setup_admin_user(_use_case(_LosesTheRace(users), hasher))

    assert users.exists("admin")


def test_startup_setup_wraps_other_failures(hasher) -> None:
    class BrokenUsers:
        def find_by_username(self, username: str):
            raise RuntimeError("database is down")

    with pytest.raises(AdminSetupError):
        setup_admin_user(_use_case(BrokenUsers(), hasher))
