from storefront.data.models import ReviewModel

from helpers import auth


def _place_order(client, user, product_id):
    body = {
        "items": [{"productId": product_id, "quantity": 1, "price": "10.00"}],
        "totalPrice": "10.00",
        "paymentMethod": "cash",
    }
    assert client.post("/orders", json=body, headers=auth(user)).status_code == 201


def test_get_and_update_profile(client, users):
    profile = client.get("/profile", headers=auth(users["customer"])).json()
    assert profile["phone"] == "+48111111111"
    assert profile["firstName"] == "Anna"

    resp = client.put("/profile", json={"lastName": "Nowak", "gender": "female"}, headers=auth(users["customer"]))
    assert resp.status_code == 200
    assert resp.json()["firstName"] == "Anna"
    assert resp.json()["lastName"] == "Nowak"
    assert resp.json()["gender"] == "female"
    assert resp.json()["profileUpdatedAt"] is not None

    # puste pole nie nadpisuje imienia
    assert client.put("/profile", json={"firstName": ""}, headers=auth(users["customer"])).json()["firstName"] == "Anna"
    assert client.put("/profile", json={"gender": "robot"}, headers=auth(users["customer"])).status_code == 422
    assert client.get("/profile").status_code == 401


def test_delete_own_account(client, database, users, products):
    client.post(f"/reviews/product/{products['aspirin']}", json={"rating": 4}, headers=auth(users["other"]))

    assert client.delete("/profile", headers=auth(users["other"])).status_code == 200
    assert client.get("/profile", headers=auth(users["other"])).status_code == 401
    with database.session() as session:
        assert session.query(ReviewModel).count() == 0


def test_account_with_orders_cannot_be_deleted(client, users, products):
    _place_order(client, users["customer"], products["vitamin"])

    assert client.delete("/profile", headers=auth(users["customer"])).status_code == 409
    assert client.get("/profile", headers=auth(users["customer"])).status_code == 200


def test_admin_lists_users(client, users):
    assert client.get("/admin/users", headers=auth(users["customer"])).status_code == 403

    listed = client.get("/admin/users", headers=auth(users["admin"])).json()
    assert [u["phone"] for u in listed] == ["+48111111111", "+48222222222", "+48333333333"]
    assert [u["isAdmin"] for u in listed] == [False, False, True]


def test_admin_deletes_users(client, users, products):
    _place_order(client, users["customer"], products["vitamin"])

    assert client.delete(f"/admin/users/{users['other'].id}", headers=auth(users["customer"])).status_code == 403
    assert client.delete(f"/admin/users/{users['admin'].id}", headers=auth(users["admin"])).status_code == 403
    assert client.delete(f"/admin/users/{users['customer'].id}", headers=auth(users["admin"])).status_code == 409
    assert client.delete("/admin/users/9999", headers=auth(users["admin"])).status_code == 404

    assert client.delete(f"/admin/users/{users['other'].id}", headers=auth(users["admin"])).status_code == 200
    assert client.get(f"/users/{users['other'].id}").status_code == 404
