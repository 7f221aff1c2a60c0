from external.database import db
from market.users.models import User
from market.users.services import generate_initials

from conftest import OTHER, OWNER, as_user


def test_generate_initials():
    assert generate_initials("arjun.sharma@iitkgp.ac.in") == "AS"
    assert generate_initials("rohit@iitkgp.ac.in") == "RO"
    assert generate_initials("") == "NA"


def test_create_user(client):
    res = client.post(
        "/user/create",
        json={"email": OWNER, "name": "Arjun Sharma", "mobileNumber": "9876543210"},
        headers=as_user(OWNER),
    )
    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert body["message"] == "User created/updated successfully"
    assert body["user"]["id"].startswith("USR_")
    assert body["user"]["name"] == "Arjun Sharma"
    assert body["user"]["mobileNumber"] == "9876543210"


def test_create_user_is_an_upsert(client):
    client.post("/user/create", json={"name": "Arjun"}, headers=as_user(OWNER))
    client.post("/user/create", json={"mobileNumber": "123"}, headers=as_user(OWNER))

    assert db.session.query(User).filter_by(email=OWNER).count() == 1
    user = client.get("/user/create", headers=as_user(OWNER)).get_json()["user"]
    assert user["name"] == "Arjun"
    assert user["mobileNumber"] == "123"


def test_create_user_rejects_other_domains(client):
    res = client.post("/user/create", json={}, headers=as_user("someone@example.com"))
    assert res.status_code == 400
    assert res.get_json()["error"] == "Only IIT KGP emails are allowed"


def test_create_user_rejects_foreign_email(client):
    res = client.post("/user/create", json={"email": OTHER}, headers=as_user(OWNER))
    assert res.status_code == 403


def test_get_unknown_user(client):
    res = client.get("/user/create", headers=as_user(OWNER))
    assert res.status_code == 404
    assert client.get("/user/create").status_code == 401


def test_profile_is_created_on_first_visit(client):
    res = client.get("/user/profile", headers=as_user("rohit@iitkgp.ac.in"))
    assert res.status_code == 200
    # Session name wins over the generated initials
    assert res.get_json()["user"]["name"] == "Test User"
    assert db.session.query(User).filter_by(email="rohit@iitkgp.ac.in").count() == 1


def test_update_profile(client):
    res = client.put(
        "/user/profile",
        json={"name": "Arjun S", "mobileNumber": "555"},
        headers=as_user(OWNER),
    )
    user = res.get_json()["user"]
    assert user["name"] == "Arjun S"
    assert user["mobileNumber"] == "555"

    res = client.put("/user/profile", json={"name": None}, headers=as_user(OWNER))
    user = res.get_json()["user"]
    assert user["name"] == "AS"
    assert user["mobileNumber"] == "555"


def test_own_listings(client, make_product, make_service, make_demand):
    make_product("Study Lamp")
    make_product("Novel", owner=OTHER)
    make_service("Maths Tutoring")
    make_demand("Need a chair")

    body = client.get("/user/listings", headers=as_user(OWNER)).get_json()
    assert [p["title"] for p in body["products"]] == ["Study Lamp"]
    assert [s["title"] for s in body["services"]] == ["Maths Tutoring"]
    assert [d["title"] for d in body["demands"]] == ["Need a chair"]

    body = client.get("/user/listings", headers=as_user("new@iitkgp.ac.in")).get_json()
    assert body == {"products": [], "services": [], "demands": []}


def test_public_profile(client, make_product, make_demand):
    lamp = make_product("Study Lamp")
    make_demand("Need a chair")
    owner_id = lamp.owner.id

    res = client.get(f"/users/{owner_id}")
    assert res.status_code == 200
    user = res.get_json()["user"]
    assert user["email"] == OWNER
    assert [p["title"] for p in user["products"]] == ["Study Lamp"]
    assert user["counts"] == {"products": 1, "services": 0, "demands": 1}


def test_public_profile_missing(client):
    res = client.get("/users/USR_MISSING1")
    assert res.status_code == 404
    assert res.get_json() == {"error": "User not found"}
