"""API endpoint tests"""

import pytest
from fastapi.testclient import TestClient

from globalwatch.api.deps import get_age_progression_client, get_wanted_service
from globalwatch.ingestion.fbi_source import FBISource
from globalwatch.ingestion.interpol_source import InterpolSource
from globalwatch.main import app
from globalwatch.services.age_progression import AgeProgressionClient
from globalwatch.services.wanted_service import WantedService
from globalwatch.tests.factories import interpol_notice, interpol_page, json_transport

PHOTO = "data:image/png;base64,iVBORw0KGgo="


def interpol_handler(request):
    path = request.url.path
    if path.endswith("/images"):
        return {"_embedded": {"images": []}}
    if path.endswith("/2023-12345"):
        return interpol_notice("2023/12345")
    if path.endswith("/yellow"):
        return interpol_page([interpol_notice("2023/12345"), interpol_notice("2022/999")])
    return 404


class TestAPI:
    """Test API endpoints"""

    @pytest.fixture
    def client(self, fbi_transport):
        """Create test client over mocked sources"""
        service = WantedService(
            [
                FBISource(transport=fbi_transport, page_delay=0),
                InterpolSource(notice_type="yellow", transport=json_transport(interpol_handler), page_delay=0),
            ]
        )
        app.dependency_overrides[get_wanted_service] = lambda: service
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_health_check(self, client):
        """Test health check endpoint"""
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert "ageProgressionConfigured" in body

    def test_readiness(self, client):
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_list_people(self, client):
        """Test people endpoint merges both sources"""
        response = client.get("/people?page_size=2")
        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 4
        assert body["pageSize"] == 2
        assert "requestId" in body
        assert "apiLatencyMs" in body
        first = body["data"][0]
        assert first["id"] == "fbi-a1"
        assert first["classification"] == "WANTED_CRIMINAL"
        assert first["thumbnailUrl"] == "https://www.fbi.gov/a1/original.jpg"
        assert first["originalData"]["uid"] == "a1"

    def test_people_with_filters(self, client):
        """Test people endpoint with filters"""
        response = client.get("/people?page_size=2&classification=MISSING_PERSON")
        assert response.status_code == 200
        assert [p["source"] for p in response.json()["data"]] == ["interpol", "interpol"]

        response = client.get("/people?source=fbi&page_size=2")
        assert [p["id"] for p in response.json()["data"]] == ["fbi-a1", "fbi-a2"]

    @pytest.mark.parametrize(
        "query",
        ["page_size=0", "page_size=100000", "page=0", "classification=BOGUS", "source=cia"],
    )
    def test_invalid_query(self, client, query):
        response = client.get(f"/people?{query}")
        assert response.status_code == 422

    def test_categories(self, client):
        """Test categories endpoint groups in category order"""
        response = client.get("/people/categories?page_size=2")
        assert response.status_code == 200
        categories = response.json()["categories"]
        assert [(c["classification"], c["label"], c["count"]) for c in categories] == [
            ("WANTED_CRIMINAL", "Wanted", 2),
            ("MISSING_PERSON", "Missing Person", 2),
        ]

    def test_person_detail(self, client):
        response = client.get("/people/fbi/a1")
        assert response.status_code == 200
        body = response.json()
        assert body["data"]["id"] == "fbi-a1"
        assert body["primaryImageUrl"] == "https://www.fbi.gov/a1/original.jpg"

    def test_interpol_detail_with_slash_id(self, client):
        response = client.get("/people/interpol/2023/12345")
        assert response.status_code == 200
        assert response.json()["data"]["id"] == "interpol-2023-12345"

    def test_person_not_found(self, client):
        response = client.get("/people/fbi/nobody")
        assert response.status_code == 404
        assert response.json()["detail"] == "Person 'nobody' not found in fbi"

    def test_unknown_source(self, client):
        response = client.get("/people/cia/x")
        assert response.status_code == 422

    def test_invalid_endpoint(self, client):
        """Test invalid endpoint returns 404"""
        response = client.get("/invalid")
        assert response.status_code == 404


class TestAgeProgressionAPI:
    """Photo aging endpoint"""

    @pytest.fixture
    def make_client(self):
        def _make(aging_client: AgeProgressionClient) -> TestClient:
            app.dependency_overrides[get_age_progression_client] = lambda: aging_client
            return TestClient(app)

        yield _make
        app.dependency_overrides.clear()

    def test_success(self, make_client):
        aged = "data:image/png;base64,AGED"
        seen = []

        def handler(request):
            seen.append(request)
            return {"updatedPhotoDataUri": aged}

        client = make_client(AgeProgressionClient(url="http://aging.local/age", transport=json_transport(handler)))
        response = client.post("/age-progression", json={"photoDataUri": PHOTO, "yearsElapsed": 10})

        assert response.status_code == 200
        assert response.json() == {"updatedPhotoDataUri": aged}
        assert b'"yearsElapsed":10' in seen[0].content.replace(b" ", b"")

    def test_not_configured(self, make_client):
        client = make_client(AgeProgressionClient(url=""))
        response = client.post("/age-progression", json={"photoDataUri": PHOTO, "yearsElapsed": 10})
        assert response.status_code == 503

    def test_upstream_failure(self, make_client):
        client = make_client(AgeProgressionClient(url="http://aging.local/age", transport=json_transport(lambda r: 500)))
        response = client.post("/age-progression", json={"photoDataUri": PHOTO, "yearsElapsed": 10})
        assert response.status_code == 502

    @pytest.mark.parametrize(
        "payload",
        [
            {"photoDataUri": PHOTO, "yearsElapsed": 0},
            {"photoDataUri": PHOTO, "yearsElapsed": 101},
            {"photoDataUri": "https://example.com/photo.jpg", "yearsElapsed": 10},
            {"yearsElapsed": 10},
        ],
    )
    def test_invalid_request(self, make_client, payload):
        client = make_client(AgeProgressionClient(url=""))
        response = client.post("/age-progression", json=payload)
        assert response.status_code == 422
