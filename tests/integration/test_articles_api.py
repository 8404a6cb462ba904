"""End-to-end tests for the /articles endpoints against a SQLite database."""

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy import func, select

from median.infrastructure.database.models import ArticleModel

ARTICLES_DATA = [
    {
        "id": 100001,
        "title": "title1",
        "description": "description1",
        "body": "body1",
        "published": True,
    },
    {
        "id": 100002,
        "title": "title2",
        "description": "description2",
        "body": "body2",
        "published": False,
    },
]

ARTICLE_KEYS = {"id", "title", "description", "body", "published", "createdAt", "updatedAt"}


@pytest_asyncio.fixture
async def seeded(session_factory):
    async with session_factory() as session:
        session.add_all([ArticleModel(**data) for data in ARTICLES_DATA])
        await session.commit()


async def _count(session_factory) -> int:
    async with session_factory() as session:
        result = await session.execute(select(func.count()).select_from(ArticleModel))
        return result.scalar_one()


def _assert_article_shape(article: dict) -> None:
    assert set(article) == ARTICLE_KEYS
    assert isinstance(article["id"], int)
    assert isinstance(article["title"], str)
    assert isinstance(article["body"], str)
    assert isinstance(article["published"], bool)
    assert isinstance(article["createdAt"], str)
    assert isinstance(article["updatedAt"], str)


# ── GET /articles, GET /articles/drafts ─────────────────────────────


@pytest.mark.asyncio
async def test_list_returns_only_published_articles(client: AsyncClient, seeded):
    response = await client.get("/articles")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 1
    _assert_article_shape(body[0])
    assert body[0]["id"] == 100001
    assert body[0]["published"] is True


@pytest.mark.asyncio
async def test_drafts_returns_only_unpublished_articles(client: AsyncClient, seeded):
    response = await client.get("/articles/drafts")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 1
    _assert_article_shape(body[0])
    assert body[0]["id"] == 100002
    assert body[0]["published"] is False


@pytest.mark.asyncio
async def test_empty_store_lists_are_empty_arrays(client: AsyncClient):
    assert (await client.get("/articles")).json() == []
    assert (await client.get("/articles/drafts")).json() == []


@pytest.mark.asyncio
async def test_published_and_drafts_partition_all_articles(
    client: AsyncClient, session_factory, seeded,
):
    for i, published in enumerate([True, False, False]):
        response = await client.post(
            "/articles",
            json={"title": f"extra{i}", "body": "b", "published": published},
        )
        assert response.status_code == 201

    published_ids = {a["id"] for a in (await client.get("/articles")).json()}
    draft_ids = {a["id"] for a in (await client.get("/articles/drafts")).json()}

    assert published_ids.isdisjoint(draft_ids)
    assert len(published_ids | draft_ids) == await _count(session_factory)


# ── GET /articles/{id} ─────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_returns_article(client: AsyncClient, seeded):
    response = await client.get("/articles/100001")

    assert response.status_code == 200
    body = response.json()
    _assert_article_shape(body)
    assert body["id"] == 100001
    assert body["description"] == "description1"


@pytest.mark.asyncio
async def test_get_missing_article_returns_404(client: AsyncClient, seeded):
    response = await client.get("/articles/100")

    assert response.status_code == 404
    assert response.json()["statusCode"] == 404
    assert "id" not in response.json()


@pytest.mark.asyncio
@pytest.mark.parametrize("raw_id", ["string-id", "1.5", "1e3", "12abc", "0x10", "true"])
async def test_get_with_non_integer_id_returns_400(client: AsyncClient, seeded, raw_id: str):
    response = await client.get(f"/articles/{raw_id}")

    assert response.status_code == 400
    assert response.json() == {
        "statusCode": 400,
        "message": "Validation failed (numeric string is expected)",
    }


@pytest.mark.asyncio
async def test_get_with_out_of_range_id_returns_404(client: AsyncClient, seeded):
    response = await client.get("/articles/99999999999999999999")

    assert response.status_code == 404


# ── POST /articles ─────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_article(client: AsyncClient, session_factory, seeded):
    before = await _count(session_factory)

    response = await client.post(
        "/articles",
        json={
            "title": "title3",
            "description": "description3",
            "body": "body3a",
            "published": False,
        },
    )

    assert response.status_code == 201
    body = response.json()
    _assert_article_shape(body)
    assert body["id"] not in {100001, 100002}
    assert body["published"] is False
    assert await _count(session_factory) - before == 1


@pytest.mark.asyncio
async def test_create_strips_unknown_fields(client: AsyncClient):
    response = await client.post(
        "/articles",
        json={"id": 7, "title": "t", "body": "b", "published": True, "author": "x"},
    )

    assert response.status_code == 201
    body = response.json()
    assert "author" not in body
    assert body["id"] != 7


@pytest.mark.asyncio
async def test_create_without_published_stores_false(client: AsyncClient):
    response = await client.post("/articles", json={"title": "t", "body": "b"})

    assert response.status_code == 201
    assert response.json()["published"] is False
    assert response.json()["description"] is None


@pytest.mark.asyncio
async def test_create_without_title_returns_400_and_stores_nothing(
    client: AsyncClient, session_factory, seeded,
):
    before = await _count(session_factory)

    response = await client.post(
        "/articles",
        json={"description": "description4", "body": "body4", "published": True},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["statusCode"] == 400
    assert isinstance(body["message"], list)
    assert any(m.startswith("title") for m in body["message"])
    assert await _count(session_factory) == before


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"title": "", "body": "b", "published": True},
        {"title": "t", "published": True},
        {"title": "t", "body": "b", "published": "maybe"},
        ["not", "an", "object"],
    ],
)
async def test_create_rejects_invalid_payloads(client: AsyncClient, payload):
    response = await client.post("/articles", json=payload)

    assert response.status_code == 400
    assert response.json()["statusCode"] == 400


@pytest.mark.asyncio
async def test_create_with_malformed_json_returns_400(client: AsyncClient):
    response = await client.post(
        "/articles",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_duplicate_title_yields_one_201_and_one_409(client: AsyncClient, session_factory):
    payload = {"title": "same", "body": "b", "published": True}

    first = await client.post("/articles", json=payload)
    second = await client.post("/articles", json=payload)

    assert sorted([first.status_code, second.status_code]) == [201, 409]
    conflict = second.json()
    assert conflict["statusCode"] == 409
    assert "\n" not in conflict["message"]
    assert await _count(session_factory) == 1


# ── PATCH /articles/{id} ───────────────────────────────────────────


@pytest.mark.asyncio
async def test_update_publishes_draft(client: AsyncClient, seeded):
    before = (await client.get("/articles/100002")).json()

    response = await client.patch("/articles/100002", json={"published": True})

    assert response.status_code == 200
    body = response.json()
    assert body["published"] is True
    assert body["title"] == "title2"
    assert body["createdAt"] == before["createdAt"]
    assert len((await client.get("/articles")).json()) == 2


@pytest.mark.asyncio
async def test_update_missing_article_returns_404(client: AsyncClient, seeded):
    response = await client.patch("/articles/100", json={"title": "x"})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_with_non_integer_id_returns_400(client: AsyncClient, seeded):
    response = await client.patch("/articles/abc", json={"title": "x"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_to_existing_title_returns_409(client: AsyncClient, seeded):
    response = await client.patch("/articles/100002", json={"title": "title1"})

    assert response.status_code == 409
    assert (await client.get("/articles/100002")).json()["title"] == "title2"


# ── Framework errors ───────────────────────────────────────────────


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client: AsyncClient):
    response = await client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {"statusCode": 404, "message": "Not Found"}


@pytest.mark.asyncio
async def test_stored_and_fresh_timestamps_both_carry_utc_offset(client: AsyncClient, seeded):
    response = await client.patch("/articles/100002", json={"published": True})

    assert response.status_code == 200
    body = response.json()
    assert body["createdAt"].endswith("Z")
    assert body["updatedAt"].endswith("Z")
