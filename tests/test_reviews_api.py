from storefront.data.models import ReviewModel

from helpers import auth


def _review_count(database):
    with database.session() as session:
        return session.query(ReviewModel).count()


def test_create_and_list_reviews(client, users, products):
    url = f"/reviews/product/{products['aspirin']}"

    first = client.post(url, json={"rating": 5, "comment": "Działa szybko"}, headers=auth(users["customer"]))
    assert first.status_code == 201
    assert first.json()["userName"] == "Anna"
    assert first.json()["productId"] == products["aspirin"]

    client.post(url, json={"rating": 3}, headers=auth(users["other"]))

    listed = client.get(url).json()
    assert [r["rating"] for r in listed] == [3, 5]
    assert [r["userName"] for r in listed] == ["Piotr", "Anna"]
    assert client.get(f"/reviews/product/{products['syrup']}").json() == []


def test_one_review_per_product(client, users, products):
    url = f"/reviews/product/{products['syrup']}"

    assert client.post(url, json={"rating": 4}, headers=auth(users["customer"])).status_code == 201
    assert client.post(url, json={"rating": 2}, headers=auth(users["customer"])).status_code == 400


def test_review_input_rules(client, users, products):
    url = f"/reviews/product/{products['syrup']}"

    assert client.post(url, json={"rating": 6}, headers=auth(users["customer"])).status_code == 422
    assert client.post(url, json={"rating": 0}, headers=auth(users["customer"])).status_code == 422
    assert client.post(url, json={"rating": 4}).status_code == 401
    assert client.post("/reviews/product/9999", json={"rating": 4}, headers=auth(users["customer"])).status_code == 404
    assert client.get("/reviews/product/9999").status_code == 404


def test_delete_review_by_owner_or_admin(client, database, users, products):
    url = f"/reviews/product/{products['vitamin']}"
    mine = client.post(url, json={"rating": 5}, headers=auth(users["customer"])).json()["id"]
    theirs = client.post(url, json={"rating": 1}, headers=auth(users["other"])).json()["id"]

    assert client.delete(f"/reviews/{mine}", headers=auth(users["other"])).status_code == 403
    assert client.delete(f"/reviews/{mine}", headers=auth(users["customer"])).status_code == 200
    assert client.delete(f"/reviews/{theirs}", headers=auth(users["admin"])).status_code == 200
    assert client.delete(f"/reviews/{theirs}", headers=auth(users["admin"])).status_code == 404
    assert _review_count(database) == 0


def test_reviews_removed_with_product(client, database, users, products):
    client.post(f"/reviews/product/{products['vitamin']}", json={"rating": 5}, headers=auth(users["customer"]))
    assert _review_count(database) == 1

    assert client.delete(f"/products/{products['vitamin']}", headers=auth(users["admin"])).status_code == 200
    assert _review_count(database) == 0
