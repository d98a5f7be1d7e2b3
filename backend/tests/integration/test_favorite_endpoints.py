"""
Integration tests for favorites: check, add, remove and list
"""


class TestFavorites:
    """/api/v1/favorites"""

    def test_toggle(self, client, auth_headers, create_material):
        material = create_material()
        check_url = f"/api/v1/favorites/{material['id']}/check"

        assert client.get(check_url, headers=auth_headers).json() == {"isFavorite": False}

        added = client.post("/api/v1/favorites", json={"materialId": material["id"]}, headers=auth_headers)
        assert added.status_code == 201
        assert added.json()["userId"] == "user-123"
        assert client.get(check_url, headers=auth_headers).json() == {"isFavorite": True}

        removed = client.delete(f"/api/v1/favorites/{material['id']}", headers=auth_headers)
        assert removed.status_code == 204
        assert client.get(check_url, headers=auth_headers).json() == {"isFavorite": False}

    def test_add_twice_keeps_one_row(self, client, auth_headers, create_material):
        material = create_material()

        first = client.post("/api/v1/favorites", json={"materialId": material["id"]}, headers=auth_headers)
        second = client.post("/api/v1/favorites", json={"materialId": material["id"]}, headers=auth_headers)

        assert first.json()["id"] == second.json()["id"]
        assert len(client.get("/api/v1/favorites", headers=auth_headers).json()) == 1

    def test_remove_missing_is_noop(self, client, auth_headers, create_material):
        material = create_material()

        response = client.delete(f"/api/v1/favorites/{material['id']}", headers=auth_headers)

        assert response.status_code == 204

    def test_list_embeds_material(self, client, auth_headers, create_material):
        older = create_material(name="Older")
        newer = create_material(name="Newer")
        client.post("/api/v1/favorites", json={"materialId": older["id"]}, headers=auth_headers)
        client.post("/api/v1/favorites", json={"materialId": newer["id"]}, headers=auth_headers)

        favorites = client.get("/api/v1/favorites", headers=auth_headers).json()

        assert [f["material"]["name"] for f in favorites] == ["Newer", "Older"]

    def test_favorites_are_per_user(self, client, auth_headers, other_auth_headers, create_material):
        material = create_material()
        client.post("/api/v1/favorites", json={"materialId": material["id"]}, headers=auth_headers)

        assert client.get("/api/v1/favorites", headers=other_auth_headers).json() == []
        check = client.get(f"/api/v1/favorites/{material['id']}/check", headers=other_auth_headers)
        assert check.json() == {"isFavorite": False}

    def test_unknown_material(self, client, auth_headers):
        response = client.post("/api/v1/favorites", json={"materialId": 9999}, headers=auth_headers)

        assert response.status_code == 404

    def test_requires_authentication(self, client, create_material):
        material = create_material()

        assert client.get("/api/v1/favorites").status_code == 401
        assert client.post("/api/v1/favorites", json={"materialId": material["id"]}).status_code == 401
        assert client.delete(f"/api/v1/favorites/{material['id']}").status_code == 401
        assert client.get(f"/api/v1/favorites/{material['id']}/check").status_code == 401
