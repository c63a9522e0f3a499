"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules,
most importantly an in-memory stand-in for the remote data service.
"""

import asyncio
from typing import Any, Callable, Optional

import pytest

from api.dependencies import reset_container
from shared.config import get_settings
from shared.database import reset_client_cache
from shared.models import Identity, Session
from modules.auth.exceptions import ServiceError
from modules.auth.models import ServiceResult
from modules.profiles.models import Table


class FakeDataClient:
    """
    In-memory IDataServiceClient.

    Session-change handlers are awaited in place when the session changes,
    so a sign-in has finished loading profiles by the time it returns.
    Individual operations can be made to fail through `errors`, and record
    fetches can be held open through `hold`.
    """

    def __init__(self) -> None:
        self.tables: dict[Table, dict[str, dict[str, Any]]] = {table: {} for table in Table}
        self.accounts: dict[str, tuple[str, Identity]] = {}
        self.session: Optional[Session] = None
        self.handlers: list[Callable] = []
        self.calls: list[tuple[Any, ...]] = []
        self.errors: dict[str, ServiceError] = {}
        self.hold: dict[str, asyncio.Event] = {}

    # Helpers -------------------------------------------------------------

    def add_user(
        self,
        user_id: str,
        role: str,
        email: Optional[str] = None,
        password: str = "secret123",
        role_row: Optional[dict[str, Any]] = None,
    ) -> Session:
        email = email or f"{user_id}@example.com"
        identity = Identity(id=user_id, email=email)
        self.accounts[email] = (password, identity)
        self.tables[Table.USER_PROFILES][user_id] = {
            "id": user_id,
            "email": email,
            "full_name": f"User {user_id}",
            "role": role,
        }
        if role_row is not None:
            table = Table.STUDENTS if role == "student" else Table.TEACHERS
            self.tables[table][user_id] = {"id": user_id, **role_row}
        return Session(access_token=f"token-{user_id}", identity=identity)

    async def emit(self, session: Optional[Session]) -> None:
        self.session = session
        for handler in list(self.handlers):
            await handler(session)

    def calls_to(self, name: str) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == name]

    # IDataServiceClient --------------------------------------------------

    async def get_current_session(self) -> ServiceResult[Session]:
        self.calls.append(("get_current_session",))
        if "get_current_session" in self.errors:
            return ServiceResult.failure(self.errors["get_current_session"])
        return ServiceResult.success(self.session)

    def on_session_change(self, handler):
        self.handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self.handlers:
                self.handlers.remove(handler)

        return unsubscribe

    async def sign_up(self, email, password, metadata) -> ServiceResult[Identity]:
        self.calls.append(("sign_up", email, metadata))
        if "sign_up" in self.errors:
            return ServiceResult.failure(self.errors["sign_up"])
        identity = Identity(id=f"user-{len(self.accounts) + 1}", email=email)
        self.accounts[email] = (password, identity)
        return ServiceResult.success(identity)

    async def sign_in(self, email, password) -> ServiceResult[Session]:
        self.calls.append(("sign_in", email))
        account = self.accounts.get(email)
        if account is None or account[0] != password:
            return ServiceResult.failure(
                ServiceError("Invalid login credentials", code="invalid_credentials")
            )
        session = Session(access_token=f"token-{account[1].id}", identity=account[1])
        await self.emit(session)
        return ServiceResult.success(session)

    async def sign_out(self) -> ServiceResult[None]:
        self.calls.append(("sign_out",))
        if "sign_out" in self.errors:
            return ServiceResult.failure(self.errors["sign_out"])
        await self.emit(None)
        return ServiceResult.success()

    async def fetch_record(self, table, record_id) -> ServiceResult[dict[str, Any]]:
        self.calls.append(("fetch_record", table, record_id))
        if record_id in self.hold:
            await self.hold[record_id].wait()
        if f"fetch:{table.value}" in self.errors:
            return ServiceResult.failure(self.errors[f"fetch:{table.value}"])
        row = self.tables[table].get(record_id)
        return ServiceResult.success(dict(row) if row else None)

    async def insert_record(self, table, record) -> ServiceResult[None]:
        self.calls.append(("insert_record", table, record))
        if f"insert:{table.value}" in self.errors:
            return ServiceResult.failure(self.errors[f"insert:{table.value}"])
        self.tables[table][record["id"]] = dict(record)
        return ServiceResult.success()

    async def update_record(self, table, record_id, partial) -> ServiceResult[None]:
        self.calls.append(("update_record", table, record_id, partial))
        if f"update:{table.value}" in self.errors:
            return ServiceResult.failure(self.errors[f"update:{table.value}"])
        if record_id in self.tables[table]:
            self.tables[table][record_id].update(partial)
        return ServiceResult.success()


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, client and container around each test."""
    get_settings.cache_clear()
    reset_client_cache()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_client_cache()
    reset_container()


@pytest.fixture
def fake_client() -> FakeDataClient:
    """Provide an empty in-memory data service."""
    return FakeDataClient()


@pytest.fixture
def student_session(fake_client: FakeDataClient) -> Session:
    """A signed-in student with 120 eco points."""
    session = fake_client.add_user(
        "student-1",
        "student",
        role_row={"grade": "8th", "school": "Green Valley", "state": "Kerala", "eco_points": 120},
    )
    fake_client.session = session
    return session


@pytest.fixture
def teacher_session(fake_client: FakeDataClient) -> Session:
    """A signed-in teacher with a teachers row."""
    session = fake_client.add_user(
        "teacher-1",
        "teacher",
        role_row={"school": "Green Valley", "subject": "Biology", "experience_years": 7},
    )
    fake_client.session = session
    return session
