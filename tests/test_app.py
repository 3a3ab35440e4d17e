"""End-to-end tests for the page controllers and JSON endpoints."""

from bs4 import BeautifulSoup

from runclub.config import HISTORY_KEY, USER_KEY


def soup(response):
    return BeautifulSoup(response.text, "html.parser")


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_home_redirects_by_identity(client, identity):
    response = client.get("/", follow_redirects=False)
    assert response.headers["location"] == "/login"

    identity.set("Alex")
    response = client.get("/", follow_redirects=False)
    assert response.headers["location"] == "/dashboard"


def test_login_derives_name_from_email(client, store):
    response = client.post("/login", data={"email": "john@ufv.ca"}, follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard"
    assert store.get(USER_KEY) == "John"


def test_signup_requires_pledge(client, store):
    response = client.post("/signup", data={"fullname": "Maya Chen"})
    assert response.status_code == 400
    assert "Community Pledge" in response.text
    assert store.get(USER_KEY) is None

    response = client.post("/signup", data={"fullname": "Maya Chen", "pledge": "yes"}, follow_redirects=False)
    assert response.status_code == 303
    assert store.get(USER_KEY) == "Maya Chen"


def test_logout_keeps_history(client, identity, ledger, store):
    identity.set("Alex")
    ledger.append(3, "FoodBank")
    response = client.get("/logout", follow_redirects=False)
    assert response.headers["location"] == "/login"
    assert store.get(USER_KEY) is None
    assert store.get(HISTORY_KEY) is not None


def test_tracker_empty_state(client):
    doc = soup(client.get("/tracker"))
    rows = doc.select(".data-table tbody > tr")
    assert len(rows) == 1
    assert "No runs logged yet" in rows[0].get_text()


def test_tracker_post_records_and_shows_run_on_top(client, ledger):
    ledger.append(2, "none")
    response = client.post("/tracker", data={"distance": "4.5", "pledge": "FoodBank"})
    assert response.status_code == 200

    doc = soup(response)
    rows = doc.select(".data-table tbody > tr")
    assert len(rows) == 2
    assert [td.get_text() for td in rows[0].find_all("td")][1:] == ["4.5 km", "-", "FOODBANK", "+$4.50"]
    assert doc.select_one("#tracker-feedback .success-message") is not None

    runs = ledger.load()
    assert runs[0].distance == 4.5
    assert runs[0].wealth == "4.50"


def test_tracker_post_rejects_bad_distance(client, store):
    response = client.post("/tracker", data={"distance": "fast", "pledge": "none"})
    assert response.status_code == 400
    assert "distance" in response.json()["detail"]
    assert store.get(HISTORY_KEY) is None


def test_dashboard_shows_summary(client, ledger, identity):
    identity.set("Alex")
    ledger.append(3, "ReliefFund")
    ledger.append(5, "none")

    doc = soup(client.get("/dashboard"))
    assert [s.get_text() for s in doc.select(".stat-value")] == ["$3.00", "8.0 km", "None"]
    assert len(doc.select(".activity-feed .activity-item")) == 2
    assert doc.select_one("#user-welcome").get_text() == "Welcome, Alex"


def test_leaderboard_fills_current_user_row(client, ledger, identity):
    identity.set("Alex")
    ledger.append(2, "FoodBank")

    doc = soup(client.get("/leaderboard"))
    cells = doc.select(".data-table tbody > tr")[2].find_all("td")
    assert cells[1].get_text() == "Alex (You)"
    assert cells[2].get_text() == "2.0 km"
    assert cells[4].get_text() == "$2.00"


def test_leaderboard_untouched_without_runs(client, identity):
    identity.set("Alex")
    doc = soup(client.get("/leaderboard"))
    cells = doc.select(".data-table tbody > tr")[2].find_all("td")
    assert cells[1].get_text() == "You"


def test_api_runs_and_summary(client):
    created = client.post("/api/runs", json={"distance": 3, "pledge": "ReliefFund"}).json()
    assert created["wealth"] == "3.00"
    client.post("/api/runs", json={"distance": 5, "pledge": "none"})

    runs = client.get("/api/runs").json()
    assert [r["distance"] for r in runs] == [5.0, 3.0]

    summary = client.get("/api/summary").json()
    assert summary == {"total_distance": 8.0, "total_wealth": 3.0, "active_pledge": "None"}


def test_api_rejects_negative_distance(client):
    response = client.post("/api/runs", json={"distance": -2})
    assert response.status_code == 400
    assert client.get("/api/runs").json() == []
