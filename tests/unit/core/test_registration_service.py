"""Unit tests for the registration flow."""

from unittest.mock import Mock

import pytest

from src.user_registry.core.errors import DuplicateEmailError, StoreUnavailableError
from src.user_registry.core.services.registration.registration_service import (
    Registered,
    RegistrationService,
)
from src.user_registry.core.services.registration.validator import Rejected
from src.user_registry.core.storage import InMemoryUserStore, UserStore
from src.user_registry.entities.user import RegistrationRequest, User


class TestRegistrationService:
    """Test validate-then-persist orchestration."""

    def setup_method(self):
        self.store = InMemoryUserStore()
        self.service = RegistrationService(self.store)

    def test_register_valid_payload(self, alice_payload):
        outcome = self.service.register(alice_payload)

        assert isinstance(outcome, Registered)
        assert outcome.user.name == "alice"
        assert outcome.user.email == "alice@example.com"
        assert self.service.list_users() == [outcome.user]

    def test_rejected_payload_never_reaches_store(self):
        store = Mock(spec=UserStore)
        service = RegistrationService(store)

        outcome = service.register(
            {"username": "ab", "email": "not-an-email", "password": "short"}
        )

        assert isinstance(outcome, Rejected)
        assert outcome.fields == ["username", "email", "password"]
        store.insert.assert_not_called()

    def test_accepted_payload_is_inserted_once_as_validated_request(
        self, alice_payload
    ):
        store = Mock(spec=UserStore)
        store.insert.return_value = User(
            id=1, name="alice", email="alice@example.com", password="password1"
        )
        service = RegistrationService(store)

        outcome = service.register(alice_payload)

        assert outcome == Registered(store.insert.return_value)
        store.insert.assert_called_once_with(RegistrationRequest(**alice_payload))

    def test_duplicate_email_propagates(self, alice_payload):
        self.service.register(alice_payload)

        with pytest.raises(DuplicateEmailError):
            self.service.register({**alice_payload, "username": "alice2"})

        assert len(self.service.list_users()) == 1

    def test_store_fault_is_raised_and_logged(self, alice_payload, log_messages):
        store = Mock(spec=UserStore)
        store.insert.side_effect = StoreUnavailableError("insert", "OperationalError")
        service = RegistrationService(store)

        with pytest.raises(StoreUnavailableError):
            service.register(alice_payload)

        store.insert.assert_called_once()
        errors = [m for m in log_messages if m.startswith("ERROR")]
        assert len(errors) == 1
        assert "User store unavailable" in errors[0]
        assert "'operation': 'insert'" in errors[0]
        # The payload must not leak into logs
        assert all("password1" not in message for message in log_messages)

    def test_unexpected_store_error_propagates(self, alice_payload):
        store = Mock(spec=UserStore)
        store.insert.side_effect = RuntimeError("boom")
        service = RegistrationService(store)

        with pytest.raises(RuntimeError, match="boom"):
            service.register(alice_payload)

    def test_list_users_fault_is_logged(self, log_messages):
        store = Mock(spec=UserStore)
        store.list_all.side_effect = StoreUnavailableError("list_all")
        service = RegistrationService(store)

        with pytest.raises(StoreUnavailableError):
            service.list_users()

        assert any("'operation': 'list_all'" in m for m in log_messages)
