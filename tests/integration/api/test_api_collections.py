import asyncio

import pytest
from httpx import AsyncClient

from src.domain.base import utc_now
from src.domain.entities import CollectionStatus, UserRole
from tests.fixtures.factories import auth_headers


def todays_prefix() -> str:
    return "COL" + utc_now().strftime("%Y%m%d")


@pytest.mark.asyncio
async def test_collection_codes_follow_daily_sequence(client: AsyncClient, factory, test_data):
    """Collection code generation

    Given a collector assigned to a client
    When they record two collections today without a code
    Then the codes are COL<today>0001 and COL<today>0002
    """
    organization = await factory.organization()
    laundry_client = await factory.client(organization)
    collector = await factory.user(UserRole.collector, organization, [laundry_client])
    payload = test_data.payload("collection", clientId=str(laundry_client.id))

    codes = []
    for _ in range(2):
        response = await client.post(
            "/collections", json=payload, headers=auth_headers(collector)
        )
        assert response.status_code == 201
        codes.append(response.json()["data"]["collectionCode"])

    assert codes == [f"{todays_prefix()}0001", f"{todays_prefix()}0002"]


@pytest.mark.asyncio
async def test_collection_code_continues_after_existing_codes(client: AsyncClient, factory):
    organization = await factory.organization()
    laundry_client = await factory.client(organization)
    collector = await factory.user(UserRole.collector, organization, [laundry_client])
    await factory.collection(
        laundry_client, collector, collection_code=f"{todays_prefix()}0007"
    )

    response = await client.post(
        "/collections",
        json={"clientId": str(laundry_client.id)},
        headers=auth_headers(collector),
    )

    assert response.status_code == 201
    assert response.json()["data"]["collectionCode"] == f"{todays_prefix()}0008"


@pytest.mark.asyncio
async def test_collection_codes_are_per_organization(client: AsyncClient, factory):
    o1 = await factory.organization()
    o2 = await factory.organization()
    first_client = await factory.client(o1)
    second_client = await factory.client(o2)
    c1 = await factory.user(UserRole.collector, o1, [first_client])
    c2 = await factory.user(UserRole.collector, o2, [second_client])

    r1 = await client.post(
        "/collections", json={"clientId": str(first_client.id)}, headers=auth_headers(c1)
    )
    r2 = await client.post(
        "/collections", json={"clientId": str(second_client.id)}, headers=auth_headers(c2)
    )

    assert r1.json()["data"]["collectionCode"] == f"{todays_prefix()}0001"
    assert r2.json()["data"]["collectionCode"] == f"{todays_prefix()}0001"


@pytest.mark.asyncio
async def test_supplied_code_does_not_block_generated_codes(client: AsyncClient, factory):
    """Supplied code inside today's sequence

    Given today's counter handed out 0001
    When someone records a collection with the supplied code 0002
    Then later generated codes continue at 0003 without conflicts
    """
    organization = await factory.organization()
    laundry_client = await factory.client(organization)
    collector = await factory.user(UserRole.collector, organization, [laundry_client])
    headers = auth_headers(collector)
    body = {"clientId": str(laundry_client.id)}

    first = await client.post("/collections", json=body, headers=headers)
    assert first.json()["data"]["collectionCode"] == f"{todays_prefix()}0001"

    supplied = await client.post(
        "/collections",
        json={**body, "collectionCode": f"{todays_prefix()}0002"},
        headers=headers,
    )
    assert supplied.status_code == 201

    codes = []
    for _ in range(3):
        response = await client.post("/collections", json=body, headers=headers)
        assert response.status_code == 201
        codes.append(response.json()["data"]["collectionCode"])

    assert codes == [f"{todays_prefix()}{n:04d}" for n in (3, 4, 5)]


@pytest.mark.asyncio
async def test_generated_code_skips_stored_code_behind_counter(client: AsyncClient, factory):
    organization = await factory.organization()
    laundry_client = await factory.client(organization)
    collector = await factory.user(UserRole.collector, organization, [laundry_client])
    headers = auth_headers(collector)
    body = {"clientId": str(laundry_client.id)}

    first = await client.post("/collections", json=body, headers=headers)
    assert first.status_code == 201
    # Written straight to the store, so the counter never heard of it
    await factory.collection(
        laundry_client, collector, collection_code=f"{todays_prefix()}0002"
    )

    response = await client.post("/collections", json=body, headers=headers)

    assert response.status_code == 201
    assert response.json()["data"]["collectionCode"] == f"{todays_prefix()}0003"


@pytest.mark.asyncio
async def test_concurrent_creates_get_distinct_sequences(client: AsyncClient, factory):
    """Concurrent creates

    Given six collections posted at the same time for one organization
    Then every request succeeds and the sequences are exactly 1..6
    """
    organization = await factory.organization()
    laundry_client = await factory.client(organization)
    collector = await factory.user(UserRole.collector, organization, [laundry_client])
    headers = auth_headers(collector)
    body = {"clientId": str(laundry_client.id)}

    responses = await asyncio.gather(
        *(client.post("/collections", json=body, headers=headers) for _ in range(6))
    )

    assert [r.status_code for r in responses] == [201] * 6
    codes = sorted(r.json()["data"]["collectionCode"] for r in responses)
    assert codes == [f"{todays_prefix()}{n:04d}" for n in range(1, 7)]


@pytest.mark.asyncio
async def test_created_collection_view(client: AsyncClient, factory, test_data):
    organization = await factory.organization(name="Fresh Linen Co")
    laundry_client = await factory.client(organization, name="Harbor View Hotel", client_code="HVH")
    collector = await factory.user(UserRole.collector, organization, [laundry_client])
    payload = test_data.payload("collection", clientId=str(laundry_client.id))

    response = await client.post("/collections", json=payload, headers=auth_headers(collector))

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "pending"
    assert data["totalItems"] == 32
    assert data["clientName"] == "Harbor View Hotel"
    assert data["clientCode"] == "HVH"
    assert data["organizationName"] == "Fresh Linen Co"
    assert data["collectedBy"] == str(collector.id)
    assert data["collectedByUsername"] == collector.username


@pytest.mark.asyncio
async def test_collection_access_matrix(client: AsyncClient, factory):
    """Collection access

    Given collectors C1 and C2 where only C1 is assigned to client A
    Then C2 cannot create for A
    And C1 can
    And C3, also assigned to A, can view C1's collection but not delete it
    And C1 can delete their own collection
    """
    organization = await factory.organization()
    client_a = await factory.client(organization)
    c1 = await factory.user(UserRole.collector, organization, [client_a])
    c2 = await factory.user(UserRole.collector, organization)
    c3 = await factory.user(UserRole.collector, organization, [client_a])
    body = {"clientId": str(client_a.id)}

    denied = await client.post("/collections", json=body, headers=auth_headers(c2))
    assert denied.status_code == 403
    assert denied.json()["error"] == "FORBIDDEN"

    created = await client.post("/collections", json=body, headers=auth_headers(c1))
    assert created.status_code == 201
    collection_id = created.json()["data"]["id"]

    assert (await client.get(f"/collections/{collection_id}", headers=auth_headers(c3))).status_code == 200
    assert (await client.get(f"/collections/{collection_id}", headers=auth_headers(c2))).status_code == 403
    assert (await client.delete(f"/collections/{collection_id}", headers=auth_headers(c3))).status_code == 403

    deleted = await client.delete(f"/collections/{collection_id}", headers=auth_headers(c1))
    assert deleted.status_code == 200
    again = await client.delete(f"/collections/{collection_id}", headers=auth_headers(c1))
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_manager_delete_requires_client_assignment(client: AsyncClient, factory):
    organization = await factory.organization()
    client_a = await factory.client(organization)
    collector = await factory.user(UserRole.collector, organization, [client_a])
    unassigned = await factory.user(UserRole.manager, organization)
    assigned = await factory.user(UserRole.manager, organization, [client_a])
    collection = await factory.collection(client_a, collector)

    response = await client.delete(f"/collections/{collection.id}", headers=auth_headers(unassigned))
    assert response.status_code == 403

    response = await client.delete(f"/collections/{collection.id}", headers=auth_headers(assigned))
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_user_role_cannot_create_collection(client: AsyncClient, factory):
    organization = await factory.organization()
    client_a = await factory.client(organization)
    user = await factory.user(UserRole.user, organization, [client_a])

    response = await client.post(
        "/collections", json={"clientId": str(client_a.id)}, headers=auth_headers(user)
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_collector_list_is_narrowed_to_own_and_assigned(client: AsyncClient, factory):
    organization = await factory.organization()
    client_a = await factory.client(organization)
    client_b = await factory.client(organization)
    c1 = await factory.user(UserRole.collector, organization, [client_a])
    c2 = await factory.user(UserRole.collector, organization, [client_b])
    manager = await factory.user(UserRole.manager, organization)
    on_a = await factory.collection(client_a, c2)
    own = await factory.collection(client_b, c1)
    await factory.collection(client_b, c2)

    listed = await client.get("/collections", headers=auth_headers(c1))
    assert listed.status_code == 200
    assert {c["id"] for c in listed.json()["data"]} == {str(on_a.id), str(own.id)}

    everything = await client.get("/collections", headers=auth_headers(manager))
    assert everything.json()["pagination"]["total"] == 3


@pytest.mark.asyncio
async def test_collections_pagination(client: AsyncClient, factory):
    organization = await factory.organization()
    client_a = await factory.client(organization)
    manager = await factory.user(UserRole.manager, organization)
    for _ in range(25):
        await factory.collection(client_a, manager)

    response = await client.get(
        "/collections", params={"page": 3, "limit": 10}, headers=auth_headers(manager)
    )

    assert response.status_code == 200
    body = response.json()
    assert len(body["data"]) == 5
    assert body["pagination"] == {
        "page": 3,
        "limit": 10,
        "total": 25,
        "totalPages": 3,
        "hasNext": False,
        "hasPrev": True,
    }


@pytest.mark.asyncio
async def test_page_size_above_maximum_is_rejected(client: AsyncClient, factory):
    organization = await factory.organization()
    manager = await factory.user(UserRole.manager, organization)

    response = await client.get(
        "/collections", params={"limit": 1000}, headers=auth_headers(manager)
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_collection_stats_counts_every_status(client: AsyncClient, factory):
    organization = await factory.organization()
    client_a = await factory.client(organization)
    manager = await factory.user(UserRole.manager, organization)
    for status in (
        CollectionStatus.pending,
        CollectionStatus.pending,
        CollectionStatus.washing,
        CollectionStatus.delivered,
    ):
        await factory.collection(client_a, manager, status=status)

    response = await client.get("/collections/stats", headers=auth_headers(manager))

    assert response.status_code == 200
    data = response.json()["data"]
    assert set(data["statusCounts"]) == {s.value for s in CollectionStatus}
    assert data["statusCounts"]["pending"] == 2
    assert data["statusCounts"]["cancelled"] == 0
    assert data["totalCollections"] == sum(data["statusCounts"].values()) == 4
    assert len(data["recentCollections"]) == 4


@pytest.mark.asyncio
async def test_list_by_status_and_client(client: AsyncClient, factory):
    organization = await factory.organization()
    client_a = await factory.client(organization)
    client_b = await factory.client(organization)
    manager = await factory.user(UserRole.manager, organization, [client_a])
    washing = await factory.collection(client_a, manager, status=CollectionStatus.washing)
    await factory.collection(client_b, manager)
    headers = auth_headers(manager)

    by_status = await client.get("/collections/status/washing", headers=headers)
    assert [c["id"] for c in by_status.json()["data"]] == [str(washing.id)]

    invalid = await client.get("/collections/status/lost", headers=headers)
    assert invalid.status_code == 400

    by_client = await client.get(f"/collections/client/{client_a.id}", headers=headers)
    assert [c["id"] for c in by_client.json()["data"]] == [str(washing.id)]

    unassigned = await client.get(f"/collections/client/{client_b.id}", headers=headers)
    assert unassigned.status_code == 403


@pytest.mark.asyncio
async def test_update_collection_status(client: AsyncClient, factory):
    organization = await factory.organization()
    client_a = await factory.client(organization)
    collector = await factory.user(UserRole.collector, organization, [client_a])
    collection = await factory.collection(client_a, collector, notes="Two bags")

    response = await client.put(
        f"/collections/{collection.id}",
        json={"status": "in_transit"},
        headers=auth_headers(collector),
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "in_transit"
    assert data["notes"] == "Two bags"
    assert data["collectionCode"] == collection.collection_code
