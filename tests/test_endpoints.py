"""
HTTP tests for the menu catalog endpoints.
"""

from unittest.mock import patch

from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from test_constants import MASALA_DOSA, PNG_BYTES, TEA, TWO_MIB
from test_fixtures import TEST_BASE_URL, client, menu_collection, test_settings, upload_dir


def _png(name="tea.png", data=PNG_BYTES, content_type="image/png"):
    return {"image": (name, data, content_type)}


# =============================================================================
# HEALTH
# =============================================================================


def test_health_check(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
    assert "X-Request-ID" in r.headers


def test_health_check_ignores_database(client, menu_collection):
    menu_collection.fail_with = ServerSelectionTimeoutError("down")

    assert client.get("/").status_code == 200


# =============================================================================
# POST /menu
# =============================================================================


def test_add_item_json_then_list(client):
    r = client.post("/menu", json=TEA)
    assert r.status_code == 201
    assert r.json()["message"] == "Item added successfully"

    items = client.get("/menu").json()
    assert len(items) == 1
    tea = items[0]
    assert tea["id"] == r.json()["id"]
    assert tea["name"] == "Tea"
    assert tea["price"] == 10
    assert tea["category"] == "Drinks"
    assert tea["orders"] == 0
    assert tea["image"] == ""
    assert tea["createdAt"] is not None


def test_add_item_form_without_file(client):
    r = client.post("/menu", data=MASALA_DOSA)
    assert r.status_code == 201

    [dosa] = client.get("/menu").json()
    assert dosa["subCategory"] == "South Indian"
    assert dosa["rating"] == "4.5"
    assert dosa["orders"] == 37
    assert dosa["price"] == 120


def test_add_item_with_image_is_served(client, upload_dir):
    r = client.post("/menu", data={"name": "Tea", "price": "10", "category": "Drinks"}, files=_png())
    assert r.status_code == 201

    [tea] = client.get("/menu").json()
    prefix = f"{TEST_BASE_URL}/uploads/"
    assert tea["image"].startswith(prefix)
    blob_ref = tea["image"][len(prefix):]
    assert blob_ref.endswith(".png")
    assert (upload_dir / blob_ref).read_bytes() == PNG_BYTES

    served = client.get(f"/uploads/{blob_ref}")
    assert served.status_code == 200
    assert served.content == PNG_BYTES


def test_empty_file_part_means_no_image(client, upload_dir):
    r = client.post("/menu", data={"name": "Tea", "price": "10", "category": "Drinks"}, files=_png(name="", data=b""))
    assert r.status_code == 201

    [tea] = client.get("/menu").json()
    assert tea["image"] == ""
    assert not upload_dir.exists()


def test_non_numeric_orders_defaults_to_zero(client):
    client.post("/menu", data={**MASALA_DOSA, "orders": "lots"})

    [dosa] = client.get("/menu").json()
    assert dosa["orders"] == 0


def test_missing_name_is_rejected(client, menu_collection, upload_dir):
    r = client.post("/menu", data={"price": "10", "category": "Drinks"}, files=_png())

    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "name is required"
    assert body["code"] == "VALIDATION_FAILED_MISSING_NAME"
    assert menu_collection.docs == []
    assert not upload_dir.exists()


def test_invalid_price_is_rejected(client, menu_collection):
    r = client.post("/menu", json={**TEA, "price": "ten"})

    assert r.status_code == 400
    assert "price" in r.json()["error"]
    assert menu_collection.docs == []


def test_oversized_image_is_rejected(client, menu_collection, upload_dir):
    r = client.post("/menu", data={"name": "Tea", "price": "10", "category": "Drinks"}, files=_png(data=b"\x00" * (TWO_MIB + 1)))

    assert r.status_code == 413
    assert "error" in r.json()
    assert menu_collection.docs == []
    assert not upload_dir.exists()


def test_non_image_upload_is_rejected(client, menu_collection, upload_dir):
    r = client.post(
        "/menu",
        data={"name": "Tea", "price": "10", "category": "Drinks"},
        files=_png(name="menu.txt", data=b"hello", content_type="text/plain"),
    )

    assert r.status_code == 415
    assert menu_collection.docs == []
    assert not upload_dir.exists()


def test_malformed_json_is_rejected(client):
    r = client.post("/menu", content=b"{not json", headers={"content-type": "application/json"})

    assert r.status_code == 400


def test_json_array_body_is_rejected(client):
    r = client.post("/menu", json=[TEA])

    assert r.status_code == 400


def test_database_down_on_create(client, menu_collection, upload_dir):
    menu_collection.fail_with = ServerSelectionTimeoutError("down")

    r = client.post("/menu", data={"name": "Tea", "price": "10", "category": "Drinks"}, files=_png())

    assert r.status_code == 503
    assert r.json()["error"] == "Failed to add item"
    assert "down" not in r.text
    assert list(upload_dir.iterdir()) == []


# =============================================================================
# GET /menu
# =============================================================================


def test_list_empty_menu(client):
    r = client.get("/menu")
    assert r.status_code == 200
    assert r.json() == []


def test_list_is_idempotent(client):
    client.post("/menu", json=TEA)
    client.post("/menu", data=MASALA_DOSA, files=_png())

    first = client.get("/menu").json()
    second = client.get("/menu").json()

    assert first == second
    assert [i["name"] for i in first] == ["Tea", "Masala Dosa"]


def test_list_database_down(client, menu_collection):
    client.post("/menu", json=TEA)
    menu_collection.fail_with = ServerSelectionTimeoutError("no servers")

    r = client.get("/menu")

    assert r.status_code == 503
    assert r.json()["error"] == "Failed to fetch menu"
    assert "no servers" not in r.text


def test_missing_upload_is_404(client):
    assert client.get("/uploads/1718000000000-missing.png").status_code == 404


def test_list_with_null_name_document(client, menu_collection):
    """A document with null text fields still lists instead of failing the whole menu."""
    client.post("/menu", json=TEA)
    menu_collection.docs.append({"_id": ObjectId(), "name": None, "price": 5, "category": "Drinks", "image": ""})

    r = client.get("/menu")

    assert r.status_code == 200
    assert [i["name"] for i in r.json()] == ["Tea", ""]


def test_storage_write_failure_creates_no_record(client, menu_collection):
    with patch("adapters.blob_store.open", side_effect=PermissionError("read-only filesystem"), create=True):
        r = client.post("/menu", data={"name": "Tea", "price": "10", "category": "Drinks"}, files=_png())

    assert r.status_code == 500
    body = r.json()
    assert body["error"] == "Failed to add item"
    assert body["code"] == "STORAGE_WRITE_FAILED"
    assert "read-only" not in r.text
    assert menu_collection.docs == []
