import pytest

from app.flow.states import ApprovalStatus


@pytest.fixture
def category_id(seed):
    return seed.category("Fashion")


@pytest.fixture
def approved_seller(seed):
    user_id, headers = seed.user("uid-approved")
    seller_id = seed.seller(user_id, status=ApprovalStatus.APPROVED, store_name="Approved Store")
    return seller_id, headers


def test_add_product_defaults(client, approved_seller, category_id):
    seller_id, headers = approved_seller

    response = client.post(
        "/api/sellers/products",
        json={"name": "Shirt", "price": "499", "categoryId": category_id},
        headers=headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Product added successfully"
    product = data["product"]
    assert product["isActive"] is True
    assert product["image"] == "/placeholder-product.jpg"
    assert product["price"] == "499"
    assert product["originalPrice"] is None
    assert product["sellerId"] == seller_id
    assert product["categoryId"] == category_id


def test_price_round_trips_as_exact_decimal_text(client, approved_seller, category_id):
    _, headers = approved_seller
    client.post(
        "/api/sellers/products",
        json={
            "name": "Kurta",
            "description": "Cotton",
            "price": "199.99",
            "originalPrice": "249.90",
            "categoryId": category_id,
            "image": "/img/kurta.jpg",
            "brand": "Desi",
        },
        headers=headers,
    )

    response = client.get("/api/sellers/products", headers=headers)

    assert response.status_code == 200
    products = response.json()
    assert len(products) == 1
    assert products[0]["price"] == "199.99"
    assert products[0]["originalPrice"] == "249.90"
    assert products[0]["image"] == "/img/kurta.jpg"


def test_numeric_prices_are_stored_as_text(client, approved_seller, category_id):
    _, headers = approved_seller

    response = client.post(
        "/api/sellers/products",
        json={"name": "Cap", "price": 499, "originalPrice": 599.5, "categoryId": category_id},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["product"]["price"] == "499"
    assert response.json()["product"]["originalPrice"] == "599.5"


@pytest.mark.parametrize(
    "price",
    ["abc", "", "NaN", "-5", None, True, "1_000", "\u0661\u0662", "1e100000", "9" * 33],
)
def test_invalid_price_is_a_validation_error(client, approved_seller, category_id, price):
    _, headers = approved_seller

    response = client.post(
        "/api/sellers/products",
        json={"name": "Broken", "price": price, "categoryId": category_id},
        headers=headers,
    )

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_non_integer_category_is_a_validation_error(client, approved_seller):
    _, headers = approved_seller
    response = client.post(
        "/api/sellers/products",
        json={"name": "Shirt", "price": "10", "categoryId": "shoes"},
        headers=headers,
    )
    assert response.status_code == 422


def test_unknown_category_is_a_validation_error(client, approved_seller, category_id):
    _, headers = approved_seller

    response = client.post(
        "/api/sellers/products",
        json={"name": "Shirt", "price": "10", "categoryId": category_id + 100},
        headers=headers,
    )

    assert response.status_code == 422
    assert response.json()["details"] == {"categoryId": category_id + 100}
    assert client.get("/api/sellers/products", headers=headers).json() == []


@pytest.mark.parametrize("status", [ApprovalStatus.PENDING, ApprovalStatus.REJECTED])
def test_unapproved_seller_cannot_add_products(client, seed, category_id, status):
    user_id, headers = seed.user(f"uid-{status.value}")
    seed.seller(user_id, status=status)

    valid = client.post(
        "/api/sellers/products",
        json={"name": "Shirt", "price": "499", "categoryId": category_id},
        headers=headers,
    )
    invalid = client.post(
        "/api/sellers/products",
        json={"price": "not-a-number", "categoryId": "x"},
        headers=headers,
    )

    assert valid.status_code == 403
    assert valid.json()["error"] == "Seller not approved"
    assert invalid.status_code == 403


def test_body_that_is_not_json_fails_before_the_approval_gate(client, seed):
    user_id, headers = seed.user("uid-garbled")
    seed.seller(user_id, status=ApprovalStatus.PENDING)

    response = client.post(
        "/api/sellers/products",
        content="{not json",
        headers={**headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_user_without_application_cannot_list_products(client, seed):
    _, headers = seed.user("uid-buyer")

    response = client.get("/api/sellers/products", headers=headers)

    assert response.status_code == 403
    assert response.json()["code"] == "FORBIDDEN"


def test_products_are_scoped_to_the_seller(client, seed, approved_seller, category_id):
    _, headers = approved_seller
    other_user, other_headers = seed.user("uid-other")
    seed.seller(other_user, status=ApprovalStatus.APPROVED, store_name="Other")

    client.post("/api/sellers/products", json={"name": "Mine", "price": "1", "categoryId": category_id}, headers=headers)
    client.post("/api/sellers/products", json={"name": "Theirs", "price": "2", "categoryId": category_id}, headers=other_headers)

    mine = client.get("/api/sellers/products", headers=headers).json()
    theirs = client.get("/api/sellers/products", headers=other_headers).json()

    assert [p["name"] for p in mine] == ["Mine"]
    assert [p["name"] for p in theirs] == ["Theirs"]


def test_rejected_price_writes_nothing(client, approved_seller, category_id):
    _, headers = approved_seller

    response = client.post(
        "/api/sellers/products",
        json={"name": "Broken", "price": "1_000", "categoryId": category_id},
        headers=headers,
    )
    listed = client.get("/api/sellers/products", headers=headers)

    assert response.status_code == 422
    assert listed.json() == []
