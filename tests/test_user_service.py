import pytest

from src.application.user_service import UserService
from src.domain.exceptions import UserNotFoundError, ValidationError


def test_create_user_assigns_unique_ids(user_service: UserService):
    first = user_service.create_user("Ada", "Lovelace", 36)
    second = user_service.create_user("Ada", "Lovelace", 36)

    assert first.id != second.id
    assert len(user_service.list_users()) == 2


def test_get_user(user_service: UserService):
    created = user_service.create_user("Alan", "Turing", 41)

    assert user_service.get_user(created.id) == created


def test_get_unknown_user_raises(user_service: UserService):
    with pytest.raises(UserNotFoundError) as exc_info:
        user_service.get_user("missing")

    assert exc_info.value.user_id == "missing"


def test_update_user_keeps_unspecified_fields(user_service: UserService):
    created = user_service.create_user("Alan", "Turing", 41)

    updated = user_service.update_user(created.id, last_name="Mathison")

    assert updated.first_name == "Alan"
    assert updated.last_name == "Mathison"
    assert updated.age == 41
    assert user_service.get_user(created.id) == updated


def test_invalid_update_leaves_user_untouched(user_service: UserService):
    created = user_service.create_user("Alan", "Turing", 41)

    with pytest.raises(ValidationError):
        user_service.update_user(created.id, first_name="   ")

    assert user_service.get_user(created.id) == created


def test_delete_user(user_service: UserService):
    created = user_service.create_user("Alan", "Turing", 41)

    deleted = user_service.delete_user(created.id)

    assert deleted == created
    assert user_service.list_users() == []
    with pytest.raises(UserNotFoundError):
        user_service.delete_user(created.id)


@pytest.mark.parametrize(
    ("first_name", "age", "message"),
    [
        ("", 30, "cannot be empty"),
        ("Tab\there", 30, "control characters"),
        ("x" * 101, 30, "cannot be longer"),
        ("Ada", -1, "between"),
        ("Ada", 151, "between"),
    ],
)
def test_create_user_validates_fields(
    user_service: UserService, first_name: str, age: int, message: str
):
    with pytest.raises(ValidationError, match=message):
        user_service.create_user(first_name, "Lovelace", age)

    assert user_service.list_users() == []
