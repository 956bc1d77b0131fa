"""Tests for modules/captains/service.py."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from modules.captains.interfaces import ICaptainService
from modules.captains.service import CaptainService


@pytest.fixture
def repository():
    repository = MagicMock()
    repository.create = AsyncMock(return_value="created")
    repository.get_by_email = AsyncMock(return_value="by-email")
    repository.get_by_id = AsyncMock(return_value="by-id")
    return repository


class TestCaptainService:
    @pytest.mark.asyncio
    async def test_create_captain_delegates(self, repository):
        service = CaptainService(repository)
        new_captain = MagicMock()
        assert await service.create_captain(new_captain) == "created"
        repository.create.assert_awaited_once_with(new_captain)

    @pytest.mark.asyncio
    async def test_find_by_email_delegates(self, repository):
        service = CaptainService(repository)
        assert await service.find_by_email("a@b.com") == "by-email"
        repository.get_by_email.assert_awaited_once_with("a@b.com")

    @pytest.mark.asyncio
    async def test_get_captain_delegates(self, repository):
        service = CaptainService(repository)
        assert await service.get_captain("abc") == "by-id"
        repository.get_by_id.assert_awaited_once_with("abc")

    def test_service_has_interface_methods(self):
        for method in ["create_captain", "find_by_email", "get_captain"]:
            assert hasattr(ICaptainService, method)
            assert callable(getattr(CaptainService, method))
