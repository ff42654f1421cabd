import pytest
from httpx import AsyncClient

from src.app.services.passwords import hash_password
from src.domain.entities import UserRole
from tests.fixtures.factories import auth_headers


@pytest.mark.asyncio
async def test_successful_login(client: AsyncClient, factory):
    """Successful Login

    Given an active user with a password
    When they log in with matching email (any case) and password
    Then they receive a bearer token and their profile without a password
    And the token authenticates later requests
    """
    organization = await factory.organization()
    user = await factory.user(
        UserRole.manager,
        organization,
        email="ana@freshlinen.example",
        password_hash=hash_password("laundry-42"),
    )

    response = await client.post(
        "/auth/login",
        json={"email": "Ana@FreshLinen.example", "password": "laundry-42"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["tokenType"] == "Bearer"
    assert data["expiresIn"] > 0
    assert data["user"]["id"] == str(user.id)
    assert data["user"]["organizationName"] == organization.name
    assert data["user"]["lastLoginAt"] is not None
    assert "password" not in data["user"]
    assert "passwordHash" not in data["user"]

    token = data["accessToken"]
    me = await client.get(
        f"/users/{user.id}", headers={"Authorization": f"Bearer {token}"}
    )
    assert me.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email,password",
    [
        ("ana@freshlinen.example", "wrong-password"),
        ("nobody@freshlinen.example", "laundry-42"),
    ],
)
async def test_login_invalid_credentials(client: AsyncClient, factory, email, password):
    """Invalid Credentials

    Wrong password and unknown email fail the same way
    """
    await factory.user(
        UserRole.user,
        email="ana@freshlinen.example",
        password_hash=hash_password("laundry-42"),
    )

    response = await client.post("/auth/login", json={"email": email, "password": password})

    assert response.status_code == 401
    body = response.json()
    assert body == {
        "success": False,
        "message": "Invalid email or password",
        "error": "UNAUTHENTICATED",
        "statusCode": 401,
    }


@pytest.mark.asyncio
async def test_login_inactive_user(client: AsyncClient, factory):
    await factory.user(
        UserRole.user,
        email="idle@freshlinen.example",
        password_hash=hash_password("laundry-42"),
        is_active=False,
    )

    response = await client.post(
        "/auth/login", json={"email": "idle@freshlinen.example", "password": "laundry-42"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_login_malformed_email_is_validation_error(client: AsyncClient):
    response = await client.post("/auth/login", json={"email": "not-an-email", "password": "x"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["statusCode"] == 400


@pytest.mark.asyncio
async def test_protected_route_requires_token(client: AsyncClient):
    response = await client.get("/collections")

    assert response.status_code == 401
    assert response.json()["error"] == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_protected_route_rejects_bad_token(client: AsyncClient):
    response = await client.get(
        "/collections", headers={"Authorization": "Bearer not.a.token"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


@pytest.mark.asyncio
async def test_token_of_deactivated_user_is_rejected(client: AsyncClient, factory):
    """A valid token stops working once the user is deactivated"""
    user = await factory.user(UserRole.admin, is_active=False)

    response = await client.get("/organizations", headers=auth_headers(user))

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["data"] == {"status": "ok"}


@pytest.mark.asyncio
async def test_current_user_profile(client: AsyncClient, factory):
    """Current user

    Given a collector assigned to one client
    When they ask for their own profile
    Then it carries the organization name and the assigned clients
    """
    organization = await factory.organization(name="Fresh Linen Co")
    laundry_client = await factory.client(organization)
    collector = await factory.user(UserRole.collector, organization, [laundry_client])

    response = await client.get("/auth/me", headers=auth_headers(collector))

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Profile retrieved successfully"
    data = body["data"]
    assert data["id"] == str(collector.id)
    assert data["organizationName"] == "Fresh Linen Co"
    assert data["clients"] == [str(laundry_client.id)]
    assert "passwordHash" not in data


@pytest.mark.asyncio
async def test_current_user_profile_requires_token(client: AsyncClient):
    response = await client.get("/auth/me")

    assert response.status_code == 401
