"""
Unit tests for services.auth_service against the in-memory registry.
"""
import pytest

from storefront.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from storefront.core.security import decode_access_token
from storefront.repositories.users import InMemoryUserRepository
from storefront.services.auth_service import AuthService


pytestmark = pytest.mark.asyncio


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def service(repo):
    return AuthService(repo)


async def test_register_returns_public_projection(service, repo):
    user = await service.register("a@example.com", "pw", "A")
    assert user == {"id": 1, "email": "a@example.com", "name": "A"}
    stored = await repo.get_by_email("a@example.com")
    assert stored.password_hash != "pw"


async def test_register_duplicate_email(service):
    await service.register("a@example.com", "pw", "A")
    with pytest.raises(ConflictError):
        await service.register("a@example.com", "other", "B")


@pytest.mark.parametrize("email, password, name", [("", "pw", "A"), ("a@x", "", "A"), ("a@x", "pw", "")])
async def test_register_empty_field_leaves_registry_untouched(service, repo, email, password, name):
    with pytest.raises(ValidationError):
        await service.register(email, password, name)
    assert await repo.list() == []


async def test_login(service):
    await service.register("a@example.com", "pw", "A")
    result = await service.login("a@example.com", "pw")
    assert result["id"] == 1
    assert result["email"] == "a@example.com"
    assert decode_access_token(result["token"])["sub"] == "1"


async def test_login_failures(service):
    await service.register("a@example.com", "pw", "A")
    with pytest.raises(ValidationError):
        await service.login("a@example.com", "")
    with pytest.raises(AuthError):
        await service.login("a@example.com", "wrong")
    with pytest.raises(AuthError):
        await service.login("nobody@example.com", "pw")


async def test_delete_user(service):
    await service.register("a@example.com", "pw", "A")
    await service.delete_user(1)
    assert await service.list_users() == []
    with pytest.raises(NotFoundError):
        await service.delete_user(1)
