"""Unit tests for places proxy routes, with the upstream API mocked at the transport."""

import httpx

PLACE = {
    "id": "ChIJ-court",
    "displayName": {"text": "Smash Arena"},
    "formattedAddress": "1 Jalan Badminton",
    "rating": 4.2,
    "photos": [{"name": "places/ChIJ-court/photos/ref-1"}],
}


def test_search_returns_count_and_places(client, places_upstream):
    places_upstream.handler = lambda request: httpx.Response(200, json={"places": [PLACE, {"id": "other"}]})

    response = client.get("/api/places/search", params={"query": "badminton court kuala lumpur"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["count"] == len(body["places"]) == 2
    assert body["places"][0]["name"] == "Smash Arena"
    assert body["places"][0]["phone"] == "Phone not available"
    assert body["places"][1]["name"] == "Unknown"


def test_search_without_query_is_400(client, places_upstream):
    response = client.get("/api/places/search")

    assert response.status_code == 400
    assert response.json() == {"error": "Query parameter is required"}
    assert places_upstream.requests == []


def test_search_with_empty_query_is_400(client):
    assert client.get("/api/places/search?query=").status_code == 400


def test_search_upstream_failure_is_500_with_detail(client, places_upstream):
    places_upstream.handler = lambda request: httpx.Response(403, json={"error": "denied"})

    response = client.get("/api/places/search", params={"query": "court"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to search places: Google API error: 403"}


def test_details_returns_place(client, places_upstream):
    places_upstream.handler = lambda request: httpx.Response(
        200, json={**PLACE, "location": {"latitude": 3.1, "longitude": 101.7}}
    )

    response = client.get("/api/places/details/ChIJ-court")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    place = body["place"]
    assert place["place_id"] == "ChIJ-court"
    assert place["business_status"] == "UNKNOWN"
    assert place["location"] == {"latitude": 3.1, "longitude": 101.7}
    assert place["photos"][0].endswith("/places/ChIJ-court/photos/ref-1/media?maxWidthPx=400&key=test-key")
    assert str(places_upstream.requests[0].url) == "https://places.test/v1/places/ChIJ-court"


def test_details_with_partial_location_drops_it(client, places_upstream):
    places_upstream.handler = lambda request: httpx.Response(200, json={**PLACE, "location": {"latitude": 3.1}})

    response = client.get("/api/places/details/ChIJ-court")

    assert response.status_code == 200
    assert response.json()["place"]["location"] is None


def test_details_unknown_place_is_500(client, places_upstream):
    places_upstream.handler = lambda request: httpx.Response(404, text="not found")

    response = client.get("/api/places/details/does-not-exist")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to get place details"}


def test_details_without_id_is_400(client, places_upstream):
    for path in ("/api/places/details", "/api/places/details/"):
        response = client.get(path)
        assert response.status_code == 400
        assert response.json() == {"error": "Place ID is required"}
    assert places_upstream.requests == []


def test_details_blank_id_is_400(client):
    assert client.get("/api/places/details/%20").status_code == 400
