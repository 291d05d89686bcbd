"""
End-to-end tests for the remote calls exposed under /api.
"""
from fastapi import status

from antique_store.utils.rate_limit import limiter


class TestHealth:
    """Unit tests for health endpoints"""

    def test_healthcheck(self, client):
        response = client.get("/api/healthcheck")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["status"] == "ok"
        assert "timestamp" in body

    def test_health_db(self, client):
        response = client.get("/health/db")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["database"] == "connected"

    def test_unknown_call_is_json_404(self, client):
        response = client.get("/api/getUnicorns")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"] == "Not Found"
        assert response.headers["access-control-allow-origin"] == "*"

    def test_wrong_method_is_json_405(self, client):
        response = client.get("/api/createAntiqueItem")

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.json()["error"] == "Method Not Allowed"
        assert "POST" in response.headers["allow"]


class TestAntiqueItems:
    """Tests for the antique item calls"""

    def test_vase_scenario(self, client, vase_payload):
        """Create, list, update and read back a single item"""
        created = client.post("/api/createAntiqueItem", json=vase_payload)
        assert created.status_code == status.HTTP_200_OK
        item_id = created.json()["id"]

        listed = client.get("/api/getAntiqueItems").json()
        assert len(listed) == 1
        assert listed[0]["price"] == 75
        assert isinstance(listed[0]["price"], float)
        assert listed[0]["year"] is None

        updated = client.post("/api/updateAntiqueItem", json={"id": item_id, "price": 80})
        assert updated.status_code == status.HTTP_200_OK

        item = client.get("/api/getAntiqueItemById", params={"id": item_id}).json()
        assert item["price"] == 80
        for field in ("name", "description", "origin", "category", "condition",
                      "availability_status", "dimensions", "material", "main_image_url", "created_at"):
            assert item[field] == listed[0][field]
        assert item["updated_at"] >= listed[0]["updated_at"]

    def test_price_serialized_as_number(self, client, vase_payload):
        vase_payload["price"] = 1250.50
        body = client.post("/api/createAntiqueItem", json=vase_payload).json()

        assert body["price"] == 1250.5
        assert '"price":1250.5' in client.get("/api/getAntiqueItems").text

    def test_unstorable_prices_rejected(self, client, vase_payload):
        for price in (0.004, 99999999.996, "75"):
            response = client.post("/api/createAntiqueItem", json={**vase_payload, "price": price})
            assert response.status_code == status.HTTP_400_BAD_REQUEST

        assert client.get("/api/getAntiqueItems").json() == []

    def test_get_missing_item_is_null(self, client):
        response = client.get("/api/getAntiqueItemById", params={"id": 999})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() is None

    def test_update_missing_item_is_null(self, client):
        response = client.post("/api/updateAntiqueItem", json={"id": 999, "name": "Ghost"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() is None

    def test_delete(self, client, vase_payload):
        item_id = client.post("/api/createAntiqueItem", json=vase_payload).json()["id"]

        assert client.post("/api/deleteAntiqueItem", json={"id": item_id}).json() is True
        assert client.post("/api/deleteAntiqueItem", json={"id": item_id}).json() is False
        assert client.get("/api/getAntiqueItemById", params={"id": item_id}).json() is None

    def test_validation_lists_every_field(self, client, vase_payload):
        vase_payload.update({
            "name": "",
            "price": -5,
            "condition": "mint",
            "main_image_url": "not a url",
        })

        response = client.post("/api/createAntiqueItem", json=vase_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["error"] == "Validation error"
        fields = {error["loc"][-1] for error in body["detail"]}
        assert {"name", "price", "condition", "main_image_url"} <= fields
        assert client.get("/api/getAntiqueItems").json() == []

    def test_update_rejects_null_for_required_field(self, client, vase_payload):
        item_id = client.post("/api/createAntiqueItem", json=vase_payload).json()["id"]

        response = client.post("/api/updateAntiqueItem", json={"id": item_id, "name": None})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get("/api/getAntiqueItemById", params={"id": item_id}).json()["name"] == "Vase"

    def test_non_positive_id_rejected(self, client):
        assert client.get("/api/getAntiqueItemById", params={"id": 0}).status_code == 400
        assert client.post("/api/deleteAntiqueItem", json={"id": -1}).status_code == 400
        assert client.post("/api/updateAntiqueItem", json={"name": "No id"}).status_code == 400


class TestGallery:
    """Tests for the gallery calls"""

    def test_featured_images(self, client):
        client.post("/api/createGalleryImage", json={
            "title": "Window", "image_url": "https://images.example.com/window.jpg",
        })
        client.post("/api/createGalleryImage", json={
            "title": "Clock", "image_url": "https://images.example.com/clock.jpg",
            "display_order": 2, "is_featured": True,
        })
        client.post("/api/createGalleryImage", json={
            "title": "Lamp", "image_url": "https://images.example.com/lamp.jpg",
            "display_order": 1, "is_featured": True, "alt_text": "Brass lamp",
        })

        all_titles = [img["title"] for img in client.get("/api/getGalleryImages").json()]
        featured_titles = [img["title"] for img in client.get("/api/getFeaturedGalleryImages").json()]

        assert all_titles == ["Window", "Lamp", "Clock"]
        assert featured_titles == ["Lamp", "Clock"]

    def test_invalid_image_rejected(self, client):
        response = client.post("/api/createGalleryImage", json={
            "title": "Bad", "image_url": "nope", "display_order": -1,
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fields = {error["loc"][-1] for error in response.json()["detail"]}
        assert {"image_url", "display_order"} <= fields

    def test_delete(self, client):
        image_id = client.post("/api/createGalleryImage", json={
            "title": "Temp", "image_url": "https://images.example.com/temp.jpg",
        }).json()["id"]

        assert client.post("/api/deleteGalleryImage", json={"id": image_id}).json() is True
        assert client.post("/api/deleteGalleryImage", json={"id": image_id}).json() is False


class TestPageContent:
    """Tests for the CMS calls"""

    def test_duplicate_slug_conflict(self, client):
        page = {"page_slug": "about", "title": "About", "content": "<p>Since 1962</p>"}

        assert client.post("/api/createPageContent", json=page).status_code == status.HTTP_200_OK
        response = client.post("/api/createPageContent", json=page)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error"] == "Conflict"
        assert response.json()["field"] == "page_slug"
        slugs = [p["page_slug"] for p in client.get("/api/getAllPageContent").json()]
        assert slugs == ["about"]

    def test_unpublished_page_hidden_by_slug(self, client):
        client.post("/api/createPageContent", json={
            "page_slug": "draft", "title": "Draft", "content": "<p>WIP</p>", "is_published": False,
        })

        assert client.get("/api/getPageContentBySlug", params={"slug": "draft"}).json() is None
        assert len(client.get("/api/getAllPageContent").json()) == 1

    def test_update_and_delete(self, client):
        page_id = client.post("/api/createPageContent", json={
            "page_slug": "terms", "title": "Terms", "content": "<p>v1</p>",
        }).json()["id"]

        updated = client.post("/api/updatePageContent", json={"id": page_id, "content": "<p>v2</p>"})
        assert updated.json()["content"] == "<p>v2</p>"
        assert client.get("/api/getPageContentBySlug", params={"slug": "terms"}).json()["content"] == "<p>v2</p>"

        assert client.post("/api/deletePageContent", json={"id": page_id}).json() is True
        assert client.post("/api/deletePageContent", json={"id": page_id}).json() is False


class TestContactForms:
    """Tests for the contact form calls"""

    form = {
        "name": "Sam",
        "email": "sam@example.com",
        "subject": "Opening hours",
        "message": "Are you open on Sundays?",
    }

    def test_submit_list_and_mark_read(self, client):
        form_id = client.post("/api/createContactForm", json=self.form).json()["id"]

        forms = client.get("/api/getContactForms").json()
        assert forms[0]["is_read"] is False
        assert forms[0]["phone"] is None

        first = client.post("/api/markContactFormRead", json={"id": form_id})
        second = client.post("/api/markContactFormRead", json={"id": form_id})
        assert first.json()["is_read"] is True
        assert second.status_code == status.HTTP_200_OK
        assert second.json()["is_read"] is True

        assert client.post("/api/markContactFormRead", json={"id": 999}).json() is None

    def test_invalid_email_rejected(self, client):
        response = client.post("/api/createContactForm", json={**self.form, "email": "sam-at-example"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get("/api/getContactForms").json() == []

    def test_submission_rate_limited(self, client):
        limiter.enabled = True

        statuses = [
            client.post("/api/createContactForm", json=self.form).status_code
            for _ in range(6)
        ]

        assert statuses[:5] == [status.HTTP_200_OK] * 5
        assert statuses[5] == status.HTTP_429_TOO_MANY_REQUESTS


class TestStoreSettings:
    """Tests for the store settings calls"""

    def test_settings_upsert(self, client):
        assert client.get("/api/getStoreSettings").json() is None

        first = client.post("/api/updateStoreSettings", json={
            "store_name": "Old Curiosity Shop",
            "contact_phone": "555-0100",
        })
        assert first.status_code == status.HTTP_200_OK
        assert first.json()["contact_email"] == "info@antiquestore.com"

        second = client.post("/api/updateStoreSettings", json={"contact_email": "shop@curiosity.example"})
        body = second.json()
        assert body["id"] == first.json()["id"]
        assert body["store_name"] == "Old Curiosity Shop"
        assert body["contact_phone"] == "555-0100"
        assert body["contact_email"] == "shop@curiosity.example"

        assert client.get("/api/getStoreSettings").json() == body

    def test_invalid_settings_rejected(self, client):
        response = client.post("/api/updateStoreSettings", json={
            "contact_email": "nope",
            "social_facebook": "facebook",
            "store_name": None,
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fields = {error["loc"][-1] for error in response.json()["detail"]}
        assert {"contact_email", "social_facebook", "store_name"} <= fields
        assert client.get("/api/getStoreSettings").json() is None
