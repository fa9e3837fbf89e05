import sys
import os
from unittest.mock import Mock

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bookstore.database import UserDatabase
from bookstore.domain import User
from bookstore.events import EventBus, USER_REGISTERED, USER_UPDATED
from bookstore.services import UserService


@pytest.fixture
def test_user():
    return User("testUser", "testPassword", "test@google.com")


@pytest.fixture
def mock_database():
    database = Mock(spec=UserDatabase)
    database.contains_key.return_value = False
    database.get.return_value = None
    return database


@pytest.fixture
def mocked_service(mock_database):
    service = UserService()
    service.set_user_database(mock_database)
    return service


@pytest.fixture
def service():
    return UserService(UserDatabase())


# Against the mocked collaborator

def test_register_user_success(mocked_service, mock_database, test_user):
    assert mocked_service.register_user(test_user) is True
    mock_database.contains_key.assert_called_once_with("testUser")
    mock_database.put.assert_called_once_with("testUser", test_user)


def test_register_user_duplicate(mocked_service, mock_database, test_user):
    mock_database.contains_key.side_effect = [False, True]

    assert mocked_service.register_user(test_user) is True
    assert mocked_service.register_user(test_user) is False
    assert mock_database.contains_key.call_count == 2
    mock_database.put.assert_called_once()


def test_login_user_success(mocked_service, mock_database, test_user):
    mock_database.get.return_value = test_user

    assert mocked_service.login_user("testUser", "testPassword") is test_user
    mock_database.get.assert_called_once_with("testUser")


def test_login_user_wrong_username(mocked_service, mock_database):
    assert mocked_service.login_user("wrongUsername", "testPassword") is None
    mock_database.get.assert_called_once_with("wrongUsername")


def test_login_user_wrong_password(mocked_service, mock_database, test_user):
    mock_database.get.return_value = test_user

    assert mocked_service.login_user("testUser", "wrongPassword") is None


def test_update_user_profile_success(mocked_service, mock_database, test_user):
    result = mocked_service.update_user_profile(test_user, "newUsername", "Password123", "hello@google.com")

    assert result is True
    mock_database.contains_key.assert_called_once_with("newUsername")
    mock_database.put.assert_called_once_with("newUsername", test_user)


def test_update_user_profile_taken(mocked_service, mock_database, test_user):
    mock_database.contains_key.return_value = True

    result = mocked_service.update_user_profile(test_user, "someoneElse", "Password123", "hello@google.com")

    assert result is False
    mock_database.put.assert_not_called()
    assert test_user.username == "testUser"
    assert test_user.password == "testPassword"


def test_update_user_profile_empty_values(mocked_service, mock_database, test_user):
    assert mocked_service.update_user_profile(test_user, "", "", "") is True
    mock_database.contains_key.assert_called_once_with("")
    mock_database.put.assert_called_once_with("", test_user)
    assert (test_user.username, test_user.password, test_user.email) == ("", "", "")


# Against the in-memory database

def test_register_duplicate_keeps_original(service, test_user):
    impostor = User("testUser", "other", "other@google.com")

    assert service.register_user(test_user) is True
    assert service.register_user(impostor) is False
    assert service.user_database.get("testUser") is test_user


def test_login_flow(service, test_user):
    service.register_user(test_user)

    assert service.login_user("testUser", "testPassword") is test_user
    assert service.login_user("testUser", "wrongPassword") is None
    assert service.login_user("nobody", "testPassword") is None


def test_update_profile_rekeys_user(service, test_user):
    service.register_user(test_user)

    assert service.update_user_profile(test_user, "newName", "p", "e") is True
    assert service.user_database.get("newName") is test_user
    assert not service.user_database.contains_key("testUser")
    assert test_user.password == "p"
    assert test_user.email == "e"
    assert service.login_user("newName", "p") is test_user


def test_update_profile_same_username(service, test_user):
    """Keeping the current username only changes password and email"""
    service.register_user(test_user)

    assert service.update_user_profile(test_user, "testUser", "Password123", "hello@google.com") is True
    assert service.user_database.get("testUser") is test_user
    assert len(service.user_database) == 1
    assert test_user.email == "hello@google.com"


def test_update_profile_to_existing_username(service, test_user):
    other = User("other", "pw", "other@google.com")
    service.register_user(test_user)
    service.register_user(other)

    assert service.update_user_profile(test_user, "other", "x", "y") is False
    assert service.user_database.get("other") is other
    assert service.user_database.get("testUser") is test_user


def test_default_database_is_created():
    service = UserService()
    assert isinstance(service.user_database, UserDatabase)
    assert len(service.user_database) == 0


def test_user_events(test_user):
    event_bus = EventBus()
    service = UserService(UserDatabase(), event_bus)

    service.register_user(test_user)
    service.register_user(test_user)
    service.update_user_profile(test_user, "renamed", "pw", "mail")

    history = event_bus.get_event_history()
    assert [event.name for event in history] == [USER_REGISTERED, USER_UPDATED]
    assert history[1].payload == {'old_username': 'testUser', 'username': 'renamed'}


def test_update_profile_unregistered_user_cannot_take_over(service):
    """A look-alike User object must not replace the stored account"""
    owner = User("alice", "secret", "alice@example.com")
    service.register_user(owner)
    impostor = User("alice", "x", "evil@example.com")

    assert service.update_user_profile(impostor, "alice", "hacked", "evil@example.com") is False
    assert service.user_database.get("alice") is owner
    assert service.login_user("alice", "secret") is owner
    assert service.login_user("alice", "hacked") is None
