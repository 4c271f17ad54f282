"""HTTP-level tests for the article and export endpoints."""

from datetime import datetime

import pytest
from httpx import AsyncClient

BASE = "/api/v1/articles"


async def _create(client: AsyncClient, title: str, content: str = "", **props: str) -> dict:
    response = await client.post(
        BASE,
        json={
            "title": title,
            "content": content,
            "properties": [
                {"property_name": k, "property_value": v} for k, v in props.items()
            ],
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def _pairs(article: dict) -> list[tuple[str, str]]:
    return [(p["property_name"], p["property_value"]) for p in article["properties"]]


@pytest.mark.asyncio
async def test_create_and_read_back(client: AsyncClient):
    created = await _create(client, "First", "<p>Hi</p>", Author="John Doe")

    response = await client.get(f"{BASE}/{created['id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "First"
    assert data["content"] == "<p>Hi</p>"
    assert _pairs(data) == [("Author", "John Doe")]
    assert "created_at" in data and "updated_at" in data


@pytest.mark.asyncio
async def test_create_accepts_title_only(client: AsyncClient):
    response = await client.post(BASE, json={"title": "Bare"})
    assert response.status_code == 201
    assert response.json()["content"] == ""
    assert response.json()["properties"] == []


@pytest.mark.asyncio
async def test_create_preserves_duplicate_property_names(client: AsyncClient):
    response = await client.post(
        BASE,
        json={
            "title": "Dupes",
            "properties": [
                {"property_name": "Tag", "property_value": "a"},
                {"property_name": "Tag", "property_value": "b"},
            ],
        },
    )
    article_id = response.json()["id"]

    fetched = (await client.get(f"{BASE}/{article_id}")).json()
    assert _pairs(fetched) == [("Tag", "a"), ("Tag", "b")]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"title": ""},
        {"content": "no title"},
        {"title": "T", "properties": [{"property_name": "", "property_value": "x"}]},
    ],
)
async def test_create_rejects_invalid_input(client: AsyncClient, payload: dict):
    response = await client.post(BASE, json=payload)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_missing_article_returns_null(client: AsyncClient):
    response = await client.get(f"{BASE}/999")
    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
async def test_list_articles_ordered_by_id(client: AsyncClient):
    first = await _create(client, "One", Author="Ann")
    second = await _create(client, "Two")

    response = await client.get(BASE)

    assert response.status_code == 200
    data = response.json()
    assert [a["id"] for a in data] == [first["id"], second["id"]]
    assert data[1]["properties"] == []


@pytest.mark.asyncio
async def test_update_title_keeps_content_and_properties(client: AsyncClient):
    created = await _create(client, "Original", "Original content", category="tech")

    response = await client.put(f"{BASE}/{created['id']}", json={"title": "X"})

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "X"
    assert data["content"] == "Original content"
    assert _pairs(data) == [("category", "tech")]
    assert datetime.fromisoformat(data["updated_at"]) > datetime.fromisoformat(created["updated_at"])


@pytest.mark.asyncio
async def test_update_with_empty_properties_clears_them(client: AsyncClient):
    created = await _create(client, "Props", a="1", b="2")

    await client.put(f"{BASE}/{created['id']}", json={"properties": []})

    fetched = (await client.get(f"{BASE}/{created['id']}")).json()
    assert fetched["properties"] == []


@pytest.mark.asyncio
async def test_update_missing_article_returns_404(client: AsyncClient):
    response = await client.put(f"{BASE}/999", json={"title": "Ghost"})
    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


@pytest.mark.asyncio
async def test_update_rejects_empty_title(client: AsyncClient):
    created = await _create(client, "Keep")
    response = await client.put(f"{BASE}/{created['id']}", json={"title": ""})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_article(client: AsyncClient):
    created = await _create(client, "Doomed", Author="Ann")

    response = await client.delete(f"{BASE}/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True}

    assert (await client.get(f"{BASE}/{created['id']}")).json() is None
    again = await client.delete(f"{BASE}/{created['id']}")
    assert again.json() == {"success": False}


@pytest.mark.asyncio
async def test_export_all_and_download(client: AsyncClient):
    first = await _create(
        client, "First Article", "<p>First body</p>", Author="John Doe", Category="Technology"
    )
    second = await _create(client, "Second Article", "<p>Second body</p>", Author="Jane Smith")

    response = await client.post(f"{BASE}/export", json={"format": "html"})

    assert response.status_code == 200
    result = response.json()
    assert result["success"] is True
    assert result["article_count"] == 2
    assert result["download_url"].startswith("/exports/articles_")

    download = await client.get(result["download_url"])
    assert download.status_code == 200
    document = download.text
    assert f'<a href="#article-{first["id"]}">First Article</a>' in document
    assert f'<a href="#article-{second["id"]}">Second Article</a>' in document
    for text in ("John Doe", "Technology", "Jane Smith"):
        assert text in document


@pytest.mark.asyncio
async def test_export_selected_article_omits_others(client: AsyncClient):
    first = await _create(client, "First Article", Author="John Doe")
    await _create(client, "Second Article", Author="Jane Smith")

    result = (
        await client.post(f"{BASE}/export", json={"format": "html", "article_ids": [first["id"]]})
    ).json()

    document = (await client.get(result["download_url"])).text
    assert "First Article" in document
    assert "Jane Smith" not in document


@pytest.mark.asyncio
async def test_export_escapes_title(client: AsyncClient):
    await _create(client, "<script>alert(1)</script>")

    result = (await client.post(f"{BASE}/export", json={"format": "html"})).json()

    document = (await client.get(result["download_url"])).text
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in document
    assert "<script>" not in document


@pytest.mark.asyncio
async def test_export_with_nothing_to_export(client: AsyncClient):
    response = await client.post(f"{BASE}/export", json={"format": "pdf"})
    assert response.status_code == 200
    assert response.json()["success"] is False
    assert response.json()["download_url"] is None

    unmatched = await client.post(f"{BASE}/export", json={"format": "html", "article_ids": [999]})
    assert unmatched.json()["success"] is False
    assert unmatched.json()["missing_ids"] == [999]


@pytest.mark.asyncio
async def test_export_rejects_unknown_format(client: AsyncClient):
    response = await client.post(f"{BASE}/export", json={"format": "docx"})
    assert response.status_code == 422


OUT_OF_RANGE_IDS = [0, -1, 2**31, 99999999999999999999]


@pytest.mark.asyncio
@pytest.mark.parametrize("article_id", OUT_OF_RANGE_IDS)
async def test_get_out_of_range_id_is_rejected(client: AsyncClient, article_id: int):
    response = await client.get(f"{BASE}/{article_id}")
    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize("article_id", OUT_OF_RANGE_IDS)
async def test_delete_out_of_range_id_is_rejected(client: AsyncClient, article_id: int):
    response = await client.delete(f"{BASE}/{article_id}")
    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize("article_id", OUT_OF_RANGE_IDS)
async def test_update_out_of_range_id_is_rejected(client: AsyncClient, article_id: int):
    response = await client.put(f"{BASE}/{article_id}", json={"title": "Ghost"})
    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize("article_id", OUT_OF_RANGE_IDS)
async def test_export_out_of_range_id_is_rejected(client: AsyncClient, article_id: int):
    await _create(client, "Exists")

    response = await client.post(
        f"{BASE}/export", json={"format": "html", "article_ids": [article_id]}
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_largest_valid_id_reports_absence(client: AsyncClient):
    largest = 2**31 - 1

    assert (await client.get(f"{BASE}/{largest}")).json() is None
    assert (await client.delete(f"{BASE}/{largest}")).json() == {"success": False}
    export = await client.post(f"{BASE}/export", json={"format": "html", "article_ids": [largest]})
    assert export.json()["missing_ids"] == [largest]


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["title", "content", "properties"])
async def test_update_rejects_explicit_null(client: AsyncClient, field: str):
    created = await _create(client, "Unchanged", "<p>Body</p>", Author="Ann")

    response = await client.put(f"{BASE}/{created['id']}", json={field: None})

    assert response.status_code == 422
    fetched = (await client.get(f"{BASE}/{created['id']}")).json()
    assert fetched["title"] == "Unchanged"
    assert fetched["content"] == "<p>Body</p>"
    assert _pairs(fetched) == [("Author", "Ann")]
