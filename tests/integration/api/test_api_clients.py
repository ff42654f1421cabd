import pytest
from httpx import AsyncClient

from src.domain.entities import UserRole
from tests.fixtures.factories import auth_headers


def clients_url(organization) -> str:
    return f"/organizations/{organization.id}/clients"


@pytest.mark.asyncio
async def test_supervisor_creates_client(client: AsyncClient, factory, test_data):
    """Create Client

    Given a supervisor of an organization
    When they create a client there
    Then email is lowercased, the code uppercased and nested documents kept
    """
    organization = await factory.organization(name="Fresh Linen Co")
    supervisor = await factory.user(UserRole.supervisor, organization)

    response = await client.post(
        clients_url(organization),
        json=test_data.get_copy("client"),
        headers=auth_headers(supervisor),
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["email"] == "frontdesk@harborview.example"
    assert data["clientCode"] == "HVH-01"
    assert data["organizationId"] == str(organization.id)
    assert data["organizationName"] == "Fresh Linen Co"
    assert data["address"]["landmark"] == "Opposite the ferry terminal"
    assert data["contactPerson"]["name"] == "Dana Reyes"
    assert data["taxInfo"] == {"gstNumber": "GST-998877"}
    assert data["createdBy"] == str(supervisor.id)


@pytest.mark.asyncio
async def test_collector_cannot_create_client(client: AsyncClient, factory, test_data):
    organization = await factory.organization()
    collector = await factory.user(UserRole.collector, organization)

    response = await client.post(
        clients_url(organization),
        json=test_data.get_copy("client"),
        headers=auth_headers(collector),
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_client_of_other_organization_is_hidden(client: AsyncClient, factory):
    """Organization isolation

    Given a client in O1 and a manager of O2
    When the manager reads or lists O1's clients
    Then the client is reported as not found
    """
    o1 = await factory.organization()
    o2 = await factory.organization()
    target = await factory.client(o1)
    manager = await factory.user(UserRole.manager, o2)
    headers = auth_headers(manager)

    read = await client.get(f"{clients_url(o1)}/{target.id}", headers=headers)
    assert read.status_code == 404

    listed = await client.get(clients_url(o1), headers=headers)
    assert listed.status_code == 404

    # Addressing O1's client through O2's path does not find it either
    crossed = await client.get(f"{clients_url(o2)}/{target.id}", headers=headers)
    assert crossed.status_code == 404

    own = await client.get(clients_url(o2), headers=headers)
    assert own.status_code == 200
    assert own.json()["data"] == []


@pytest.mark.asyncio
async def test_client_email_unique_per_organization_among_live_clients(
    client: AsyncClient, factory, test_data
):
    o1 = await factory.organization()
    o2 = await factory.organization()
    admin = await factory.user(UserRole.admin)
    headers = auth_headers(admin)
    payload = test_data.get_copy("second_client")

    first = await client.post(clients_url(o1), json=payload, headers=headers)
    assert first.status_code == 201

    duplicate = await client.post(clients_url(o1), json=payload, headers=headers)
    assert duplicate.status_code == 409
    assert duplicate.json()["error"] == "CONFLICT"

    elsewhere = await client.post(clients_url(o2), json=payload, headers=headers)
    assert elsewhere.status_code == 201

    client_id = first.json()["data"]["id"]
    deleted = await client.delete(f"{clients_url(o1)}/{client_id}", headers=headers)
    assert deleted.status_code == 200

    reused = await client.post(clients_url(o1), json=payload, headers=headers)
    assert reused.status_code == 201


@pytest.mark.asyncio
async def test_delete_client_twice_and_restore(client: AsyncClient, factory):
    organization = await factory.organization()
    target = await factory.client(organization)
    manager = await factory.user(UserRole.manager, organization)
    headers = auth_headers(manager)
    url = f"{clients_url(organization)}/{target.id}"

    assert (await client.delete(url, headers=headers)).status_code == 200
    assert (await client.delete(url, headers=headers)).status_code == 404
    assert (await client.get(url, headers=headers)).status_code == 404

    listed = await client.get(clients_url(organization), headers=headers)
    assert listed.json()["data"] == []

    restored = await client.patch(f"{url}/restore", headers=headers)
    assert restored.status_code == 200
    assert restored.json()["data"]["isActive"] is True

    listed = await client.get(clients_url(organization), headers=headers)
    assert [c["id"] for c in listed.json()["data"]] == [str(target.id)]


@pytest.mark.asyncio
async def test_supervisor_cannot_delete_client(client: AsyncClient, factory):
    organization = await factory.organization()
    target = await factory.client(organization)
    supervisor = await factory.user(UserRole.supervisor, organization)

    response = await client.delete(
        f"{clients_url(organization)}/{target.id}", headers=auth_headers(supervisor)
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_search_and_filter_clients(client: AsyncClient, factory):
    organization = await factory.organization()
    await factory.client(organization, name="Harbor View Hotel", client_code="HVH")
    await factory.client(
        organization,
        name="St. Clare Clinic",
        address={
            "street": "40 Mill Lane",
            "city": "Southampton",
            "state": "Hampshire",
            "country": "UK",
            "zipCode": "SO14 0AA",
        },
    )
    supervisor = await factory.user(UserRole.supervisor, organization)
    headers = auth_headers(supervisor)

    found = await client.get(
        f"{clients_url(organization)}/search", params={"q": "hvh"}, headers=headers
    )
    assert found.status_code == 200
    assert [c["name"] for c in found.json()["data"]] == ["Harbor View Hotel"]

    by_city = await client.get(
        clients_url(organization), params={"city": "southampton"}, headers=headers
    )
    assert [c["name"] for c in by_city.json()["data"]] == ["St. Clare Clinic"]


@pytest.mark.asyncio
async def test_update_client_keeps_unsent_fields(client: AsyncClient, factory):
    organization = await factory.organization()
    target = await factory.client(organization, phone="+15550100", notes="Back door")
    manager = await factory.user(UserRole.manager, organization)

    response = await client.put(
        f"{clients_url(organization)}/{target.id}",
        json={"phone": "+15550999"},
        headers=auth_headers(manager),
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["phone"] == "+15550999"
    assert data["notes"] == "Back door"
    assert data["name"] == target.name


@pytest.mark.asyncio
async def test_search_wildcards_are_literal(client: AsyncClient, factory):
    """Search term with LIKE wildcards

    Given a client whose name contains "50%" and one that does not
    When a supervisor searches for "50%" or filters names by "_"
    Then only literal matches come back
    """
    organization = await factory.organization()
    await factory.client(organization, name="50% Off Laundry")
    await factory.client(organization, name="Harbor View Hotel")
    supervisor = await factory.user(UserRole.supervisor, organization)
    headers = auth_headers(supervisor)

    found = await client.get(
        f"{clients_url(organization)}/search", params={"q": "50%"}, headers=headers
    )
    assert [c["name"] for c in found.json()["data"]] == ["50% Off Laundry"]

    underscore = await client.get(
        clients_url(organization), params={"name": "_"}, headers=headers
    )
    assert underscore.json()["data"] == []
