from decimal import Decimal

from helpers import auth, stock_of


def _order_body(product_id, quantity=2, price="100.00", total=None, **extra):
    body = {
        "items": [{"productId": product_id, "quantity": quantity, "price": price}],
        "itemsPrice": str(Decimal(price) * quantity),
        "taxPrice": "0",
        "shippingPrice": "0",
        "totalPrice": total or str(Decimal(price) * quantity),
        "paymentMethod": "card",
    }
    body.update(extra)
    return body


def test_create_order_scenario(client, database, users, products, dispatcher):
    resp = client.post("/orders", json=_order_body(products["aspirin"]), headers=auth(users["customer"]))

    assert resp.status_code == 201
    data = resp.json()
    assert data["orderStatus"] == "Processing"
    assert data["userId"] == users["customer"].id
    assert Decimal(data["totalPrice"]) == Decimal("200.00")
    assert Decimal(data["itemsPrice"]) == Decimal("200.00")
    assert data["paymentInfo"] == {"method": "card", "status": "pending"}
    assert [(i["productId"], i["quantity"]) for i in data["orderItems"]] == [(products["aspirin"], 2)]
    assert stock_of(database, products["aspirin"]) == 3
    assert dispatcher.calls[0][0] == data["id"]


def test_create_order_insufficient_stock(client, database, users, products):
    resp = client.post(
        "/orders",
        json=_order_body(products["syrup"], quantity=2, price="25.50"),
        headers=auth(users["customer"]),
    )

    assert resp.status_code == 400
    assert stock_of(database, products["syrup"]) == 1
    assert client.get("/orders/me", headers=auth(users["customer"])).json() == []


def test_create_order_without_items(client, users):
    body = {"items": [], "totalPrice": "0", "paymentMethod": "card"}
    resp = client.post("/orders", json=body, headers=auth(users["customer"]))
    assert resp.status_code == 400


def test_create_order_with_malformed_item(client, users, products):
    body = _order_body(products["aspirin"])
    del body["items"][0]["quantity"]
    resp = client.post("/orders", json=body, headers=auth(users["customer"]))
    assert resp.status_code == 422


def test_create_order_requires_identity(client, products):
    assert client.post("/orders", json=_order_body(products["aspirin"])).status_code == 401
    assert client.post("/orders", json=_order_body(products["aspirin"]), headers={"X-User-Id": "999"}).status_code == 401


def test_get_order_access_rules(client, users, products):
    order_id = client.post("/orders", json=_order_body(products["vitamin"], 1, "10.00"), headers=auth(users["customer"])).json()["id"]

    assert client.get(f"/orders/{order_id}", headers=auth(users["customer"])).status_code == 200
    assert client.get(f"/orders/{order_id}", headers=auth(users["admin"])).status_code == 200
    assert client.get(f"/orders/{order_id}", headers=auth(users["other"])).status_code == 403
    assert client.get("/orders/9999", headers=auth(users["admin"])).status_code == 404


def test_list_all_is_admin_only(client, users, products):
    client.post("/orders", json=_order_body(products["vitamin"], 1, "10.00"), headers=auth(users["customer"]))

    assert client.get("/orders", headers=auth(users["customer"])).status_code == 403
    resp = client.get("/orders", headers=auth(users["admin"]))
    assert resp.status_code == 200
    assert len(resp.json()) == 1
    assert resp.json()[0]["userPhone"] == "+48111111111"


def test_update_status_flow(client, users, products):
    first = client.post("/orders", json=_order_body(products["vitamin"], 1, "10.00"), headers=auth(users["customer"])).json()
    second = client.post("/orders", json=_order_body(products["vitamin"], 1, "10.00"), headers=auth(users["customer"])).json()

    resp = client.put(f"/orders/{first['id']}/status", json={"status": "Shipped"}, headers=auth(users["admin"]))
    assert resp.status_code == 200
    assert resp.json()["orderStatus"] == "Shipped"

    assert client.get(f"/orders/{first['id']}", headers=auth(users["customer"])).json()["orderStatus"] == "Shipped"
    assert client.get(f"/orders/{second['id']}", headers=auth(users["customer"])).json()["orderStatus"] == "Processing"


def test_cancelled_order_stays_cancelled(client, database, users, products):
    order_id = client.post("/orders", json=_order_body(products["aspirin"]), headers=auth(users["customer"])).json()["id"]
    assert stock_of(database, products["aspirin"]) == 3

    assert client.put(f"/orders/{order_id}/status", json={"status": "Cancelled"}, headers=auth(users["admin"])).status_code == 200
    assert stock_of(database, products["aspirin"]) == 5

    resp = client.put(f"/orders/{order_id}/status", json={"status": "Processing"}, headers=auth(users["admin"]))
    assert resp.status_code == 400
    assert client.put(f"/orders/{order_id}/status", json={"status": "Cancelled"}, headers=auth(users["admin"])).status_code == 200
    assert stock_of(database, products["aspirin"]) == 5


def test_update_status_rejects_unknown_and_non_admin(client, users, products):
    order_id = client.post("/orders", json=_order_body(products["vitamin"], 1, "10.00"), headers=auth(users["customer"])).json()["id"]

    assert client.put(f"/orders/{order_id}/status", json={"status": "Lost"}, headers=auth(users["admin"])).status_code == 422
    assert client.put(f"/orders/{order_id}/status", json={"status": "Shipped"}, headers=auth(users["customer"])).status_code == 403
    assert client.put("/orders/9999/status", json={"status": "Shipped"}, headers=auth(users["admin"])).status_code == 404


def test_delete_order(client, users, products):
    order_id = client.post("/orders", json=_order_body(products["vitamin"], 1, "10.00"), headers=auth(users["customer"])).json()["id"]

    assert client.delete(f"/orders/{order_id}", headers=auth(users["customer"])).status_code == 403
    assert client.delete(f"/orders/{order_id}", headers=auth(users["admin"])).status_code == 200
    assert client.get(f"/orders/{order_id}", headers=auth(users["admin"])).status_code == 404
    assert client.delete(f"/orders/{order_id}", headers=auth(users["admin"])).status_code == 404


def test_my_orders_newest_first(client, users, products):
    ids = [
        client.post("/orders", json=_order_body(products["vitamin"], 1, "10.00"), headers=auth(users["customer"])).json()["id"]
        for _ in range(3)
    ]
    client.post("/orders", json=_order_body(products["vitamin"], 1, "10.00"), headers=auth(users["other"]))

    mine = client.get("/orders/me", headers=auth(users["customer"])).json()
    assert [o["id"] for o in mine] == list(reversed(ids))
