"""
System smoke test: full API flow in-process against the seeded archive.

Covers health, public search and detail visibility, back-office CRUD,
role gating, competition listing and entry, the staff directory and the
virtual tour.
"""

import logging

import pytest
from httpx import AsyncClient

from museum_archive.logging_config import RequestContextFilter

ARCHIVIST = "archivist@museum.gov.bd"
CURATOR = "curator@museum.gov.bd"
RESEARCHER = "researcher@museum.gov.bd"
ADMIN = "admin@museum.gov.bd"


async def test_health_and_root(client: AsyncClient):
    health = await client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "ok"
    assert health.json()["session"] == "anonymous"
    assert "X-Request-ID" in health.headers

    root = await client.get("/")
    assert root.json()["api"]["v1"] == "/api/v1"


async def test_request_id_is_echoed(client: AsyncClient):
    response = await client.get("/health", headers={"X-Request-ID": "trace-123"})
    assert response.headers["X-Request-ID"] == "trace-123"


class TestPublicArtifacts:

    async def test_search_lists_published_only(self, client: AsyncClient):
        response = await client.get("/api/v1/artifacts/search")

        data = response.json()
        assert data["total"] == 5
        assert [a["id"] for a in data["items"]] == ["1", "2", "3", "4", "5"]

    async def test_search_text_and_type(self, client: AsyncClient):
        response = await client.get("/api/v1/artifacts/search", params={"q": "rifle", "object_type": "Weapon"})

        assert {a["id"] for a in response.json()["items"]} == {"3", "5"}

    async def test_search_never_matches_unpublished(self, client: AsyncClient):
        response = await client.get("/api/v1/artifacts/search", params={"q": "Mass Uprising"})
        assert response.json()["total"] == 0

    async def test_unpublished_detail_is_staff_only(self, client: AsyncClient, login_as):
        assert (await client.get("/api/v1/artifacts/6")).status_code == 404

        headers = await login_as(ARCHIVIST)
        response = await client.get("/api/v1/artifacts/6", headers=headers)
        assert response.status_code == 200
        assert response.json()["is_public"] is False

    async def test_related_and_citation(self, client: AsyncClient):
        related = await client.get("/api/v1/artifacts/1/related")
        assert [a["id"] for a in related.json()] == ["2", "3", "4"]

        citation = await client.get("/api/v1/artifacts/2/citation", params={"style": "mla"})
        assert citation.json()["style"] == "mla"
        assert "Declaration of Independence Transcript" in citation.json()["citation"]


class TestBackOffice:

    async def test_anonymous_is_redirected_to_login(self, client: AsyncClient):
        response = await client.get("/api/v1/artifacts")

        assert response.status_code == 401
        assert response.json()["detail"] == {
            "message": "Please log in to continue",
            "redirect_to": "/login",
            "return_to": "/api/v1/artifacts",
        }

    async def test_curator_is_denied(self, client: AsyncClient, login_as):
        headers = await login_as(CURATOR)

        response = await client.get("/api/v1/artifacts", headers=headers)

        assert response.status_code == 403
        assert response.json()["detail"]["redirect_to"] == "/"

    async def test_artifact_crud(self, client: AsyncClient, login_as):
        headers = await login_as(ARCHIVIST)

        created = await client.post(
            "/api/v1/artifacts",
            headers=headers,
            json={
                "collection_number": "LW-200",
                "accession_number": "ACC-1971-200",
                "object_type": "Medal",
                "object_head": "Bir Uttom Medal",
                "images": ["https://example.org/medal.jpg"],
            },
        )
        assert created.status_code == 201
        artifact = created.json()
        assert artifact["is_public"] is False

        updated = await client.patch(
            f"/api/v1/artifacts/{artifact['id']}",
            headers=headers,
            json={"is_public": True},
        )
        assert updated.json()["is_public"] is True
        assert updated.json()["object_head"] == "Bir Uttom Medal"

        search = await client.get("/api/v1/artifacts/search", params={"q": "bir uttom"})
        assert search.json()["total"] == 1

        stats = await client.get("/api/v1/artifacts/stats", headers=headers)
        assert stats.json()["total"] == 7
        assert stats.json()["created_this_month"] == 1

        deleted = await client.delete(f"/api/v1/artifacts/{artifact['id']}", headers=headers)
        assert deleted.status_code == 200
        assert (await client.get(f"/api/v1/artifacts/{artifact['id']}")).status_code == 404

    async def test_patch_with_identity_field_is_rejected(self, client: AsyncClient, login_as):
        headers = await login_as(ARCHIVIST)

        response = await client.patch("/api/v1/artifacts/1", headers=headers, json={"id": "99"})

        assert response.status_code == 422

    async def test_news_events_and_exhibitions(self, client: AsyncClient, login_as):
        news = await client.get("/api/v1/news")
        assert [a["id"] for a in news.json()] == ["1", "2", "3"]

        october = await client.get("/api/v1/events", params={"month": "October"})
        assert {e["id"] for e in october.json()} == {"3", "4"}

        featured = await client.get("/api/v1/exhibitions", params={"featured": "true"})
        assert [e["id"] for e in featured.json()] == ["1", "3"]

        headers = await login_as(ARCHIVIST)
        created = await client.post(
            "/api/v1/exhibitions",
            headers=headers,
            json={"title": "Voices of 1971"},
        )
        assert created.status_code == 201
        assert created.json()["id"] not in {"1", "2", "3"}


class TestCompetitions:

    async def test_listing_hides_drafts_and_classifies_by_time(self, client: AsyncClient):
        response = await client.get("/api/v1/competitions")

        listing = {c["id"]: c for c in response.json()}
        assert set(listing) == {"1", "2", "4"}
        assert listing["1"]["time_category"] == "current"
        assert listing["1"]["accepting_submissions"] is True
        assert listing["2"]["time_category"] == "upcoming"
        assert listing["4"]["time_category"] == "past"

    async def test_listing_filters(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/competitions",
            params=[("time", "current"), ("time", "past"), ("type", "photography")],
        )
        assert [c["id"] for c in response.json()] == ["4"]

    async def test_draft_detail_is_hidden(self, client: AsyncClient):
        assert (await client.get("/api/v1/competitions/3")).status_code == 404
        assert (await client.get("/api/v1/competitions/2/next")).status_code == 404

    async def test_entry_flow(self, client: AsyncClient, login_as):
        headers = await login_as(CURATOR)

        entered = await client.post("/api/v1/competitions/1/entries", headers=headers)
        assert entered.status_code == 201
        assert entered.json()["status"] == "submitted"
        assert entered.json()["user_id"] == "3"

        again = await client.post("/api/v1/competitions/1/entries", headers=headers)
        assert again.status_code == 409
        assert again.json()["code"] == "DuplicateSubmissionError"

        mine = await client.get("/api/v1/competitions/1/entries/me", headers=headers)
        assert mine.json()["id"] == entered.json()["id"]

        withdrawn = await client.delete("/api/v1/competitions/1/entries", headers=headers)
        assert withdrawn.json() == {"competition_id": "1", "removed": 1}

        again = await client.delete("/api/v1/competitions/1/entries", headers=headers)
        assert again.json()["removed"] == 0

    async def test_entering_closed_competition(self, client: AsyncClient, login_as):
        headers = await login_as(RESEARCHER)

        response = await client.post("/api/v1/competitions/4/entries", headers=headers)

        assert response.status_code == 400
        assert response.json()["code"] == "CompetitionClosedError"

    async def test_entry_requires_login(self, client: AsyncClient):
        response = await client.post("/api/v1/competitions/1/entries")
        assert response.status_code == 401

    async def test_review_and_cascade_delete(self, client: AsyncClient, login_as):
        headers = await login_as(ARCHIVIST)

        review = await client.patch(
            "/api/v1/competitions/submissions/1",
            headers=headers,
            json={"status": "qualified", "score": 88},
        )
        assert review.json()["status"] == "qualified"
        assert review.json()["score"] == 88

        assert (await client.delete("/api/v1/competitions/1", headers=headers)).status_code == 200
        assert (await client.get("/api/v1/competitions/1/submissions", headers=headers)).status_code == 404
        assert (await client.patch(
            "/api/v1/competitions/submissions/1",
            headers=headers,
            json={"status": "winner"},
        )).status_code == 404

    async def test_invalid_date_order_patch(self, client: AsyncClient, login_as):
        headers = await login_as(ARCHIVIST)

        response = await client.patch(
            "/api/v1/competitions/1",
            headers=headers,
            json={"end_date": "2026-09-01T00:00:00Z"},
        )

        assert response.status_code == 422

    async def test_create_defaults_owner_to_caller(self, client: AsyncClient, login_as):
        headers = await login_as(ARCHIVIST)

        response = await client.post(
            "/api/v1/competitions",
            headers=headers,
            json={
                "title": "Poems of Freedom",
                "level": "district",
                "type": "poem-writing",
                "start_date": "2026-11-01T00:00:00Z",
                "end_date": "2026-11-30T00:00:00Z",
                "status": "upcoming",
            },
        )

        assert response.status_code == 201
        assert response.json()["admin_user_id"] == "2"
        assert response.json()["time_category"] == "upcoming"


class TestStaffDirectory:

    async def test_archivist_cannot_list_staff(self, client: AsyncClient, login_as):
        headers = await login_as(ARCHIVIST)
        assert (await client.get("/api/v1/users", headers=headers)).status_code == 403

    async def test_super_admin_lists_and_filters(self, client: AsyncClient, login_as):
        headers = await login_as(ADMIN)

        everyone = await client.get("/api/v1/users", headers=headers)
        assert [u["id"] for u in everyone.json()] == ["1", "2", "3", "4"]

        curators = await client.get("/api/v1/users", headers=headers, params={"role": "curator"})
        assert [u["name"] for u in curators.json()] == ["Mohammad Hassan"]

        assert (await client.get("/api/v1/users/99", headers=headers)).status_code == 404


class TestVirtualTour:

    async def test_stops(self, client: AsyncClient):
        response = await client.get("/api/v1/tour/stops")

        data = response.json()
        assert [s["id"] for s in data["stops"]] == ["lwm-main", "lwm-gallery", "lwm-garden", "lwm-library"]
        assert data["panorama_search_radius_m"] == 100

    async def test_stop_neighbours_wrap(self, client: AsyncClient):
        response = await client.get("/api/v1/tour/stops/lwm-main")

        assert response.json()["next_stop_id"] == "lwm-gallery"
        assert response.json()["previous_stop_id"] == "lwm-library"
        assert (await client.get("/api/v1/tour/stops/nowhere")).status_code == 404


class _RecordingHandler(logging.Handler):

    def __init__(self):
        super().__init__()
        self.records = []
        self.addFilter(RequestContextFilter())

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def store_log():
    logger = logging.getLogger("museum_archive.kernel.store.archive_store")
    handler = _RecordingHandler()
    level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    yield handler.records
    logger.removeHandler(handler)
    logger.setLevel(level)


async def test_store_logs_carry_request_and_session_user(client: AsyncClient, login_as, store_log):
    headers = await login_as(ARCHIVIST)

    response = await client.post(
        "/api/v1/news",
        headers={**headers, "X-Request-ID": "trace-news"},
        json={"title": "Archive reopens", "date": "2026-10-01"},
    )

    assert response.status_code == 201
    added = [r for r in store_log if r.getMessage() == "Added news"]
    assert len(added) == 1
    assert added[0].request_id == "trace-news"
    assert added[0].user_id == "2"
