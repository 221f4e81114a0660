def create(client, **overrides):
    payload = {"name": "Red Lipstick", "type": "makeup", "category": "women", "price": 1500, "description": "Bold."}
    payload.update(overrides)
    return client.post("/api/products", json=payload)


def test_create_product_with_fallback_seo(client, silk_serum_payload):
    response = client.post("/api/products", json=silk_serum_payload)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    product = body["data"]
    assert product["slug"] == "silk-serum"
    assert product["meta_title"].startswith("Silk Serum")
    assert {"skincare", "pakistan"} <= set(product["meta_keywords"])
    assert response.headers["x-correlation-id"]


def test_create_product_with_ai_seo(client, fake_generator, make_seo_json, silk_serum_payload):
    fake_generator.seo_reply = "```json\n" + make_seo_json() + "\n```"

    product = client.post("/api/products", json=silk_serum_payload).json()["data"]

    assert product["slug"] == "silk-serum-glow"
    assert product["meta_description"] == "Hydrating silk serum for radiant skin."


def test_duplicate_names_get_suffixed_slugs(client):
    slugs = [create(client).json()["data"]["slug"] for _ in range(3)]

    assert slugs == ["red-lipstick", "red-lipstick-1", "red-lipstick-2"]


def test_invalid_draft_is_a_client_error(client, fake_generator):
    response = client.post("/api/products", json={"name": "", "type": "makeup", "price": 10})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["details"][0]["field"] == "name"
    assert fake_generator.calls == []


def test_non_object_body_is_rejected(client):
    response = client.post("/api/products", json=["not", "an", "object"])

    assert response.status_code == 422
    assert response.json()["success"] is False


def test_listing_filters_and_cache(client):
    create(client)
    create(client, name="Oud Nights", type="fragrances", category="men", price=9000)

    first = client.get("/api/products", params={"category": "men"}).json()
    again = client.get("/api/products", params={"category": "men"}).json()

    assert [p["name"] for p in first["data"]] == ["Oud Nights"]
    assert first["count"] == 1
    assert first["cached"] is False
    assert again["cached"] is True

    # a write invalidates cached listings
    create(client, name="Cedar Musk", type="fragrances", category="men", price=7000)
    refreshed = client.get("/api/products", params={"category": "men"}).json()
    assert refreshed["cached"] is False
    assert [p["name"] for p in refreshed["data"]] == ["Cedar Musk", "Oud Nights"]


def test_get_by_id_and_slug(client):
    product = create(client).json()["data"]

    assert client.get(f"/api/products/{product['id']}").json()["data"]["slug"] == "red-lipstick"
    assert client.get("/api/products/slug/red-lipstick").json()["data"]["id"] == product["id"]

    missing = client.get("/api/products/slug/unknown")
    assert missing.status_code == 404
    assert missing.json() == {"success": False, "error": "Product not found"}


def test_update_keeps_slug_unless_regenerated(client):
    product = create(client).json()["data"]

    renamed = client.put(f"/api/products/{product['id']}", json={"name": "Ruby Lipstick", "price": 1700})
    assert renamed.status_code == 200
    assert renamed.json()["data"]["slug"] == "red-lipstick"
    assert renamed.json()["data"]["price"] == 1700

    regenerated = client.put(
        f"/api/products/{product['id']}", params={"regenerate_seo": "true"}, json={}
    ).json()["data"]
    assert regenerated["slug"] == "ruby-lipstick"
    assert regenerated["meta_title"].startswith("Ruby Lipstick")


def test_regenerate_flag_in_body(client):
    product = create(client).json()["data"]

    updated = client.put(
        f"/api/products/{product['id']}", json={"name": "Coral Lipstick", "regenerate_seo": True}
    ).json()["data"]

    assert updated["slug"] == "coral-lipstick"


def test_update_missing_product(client):
    response = client.put("/api/products/missing", json={"price": 5})

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_delete_product(client):
    product = create(client).json()["data"]

    assert client.delete(f"/api/products/{product['id']}").status_code == 200
    assert client.get(f"/api/products/{product['id']}").status_code == 404
    assert client.delete(f"/api/products/{product['id']}").status_code == 404
