"""
Tests for /jobs routes.
"""

from sqlalchemy import text

ALL_JOBS = [
    {"id": 1, "title": "j1", "salary": 100000, "equity": 0, "companyHandle": "c1"},
    {"id": 2, "title": "j2", "salary": 80000, "equity": 0.2, "companyHandle": "c1"},
    {"id": 3, "title": "j3", "salary": 40000, "equity": 0, "companyHandle": "c2"},
]


class TestCreateJob:
    new_job = {"title": "j4", "salary": 20000, "equity": 0.5, "companyHandle": "c3"}

    def test_admin(self, client, admin_headers):
        resp = client.post("/jobs", json=self.new_job, headers=admin_headers)
        assert resp.status_code == 201
        job = resp.json()["job"]
        assert job == {"id": job["id"], **self.new_job}

    def test_non_admin(self, client, user_headers):
        resp = client.post("/jobs", json=self.new_job, headers=user_headers)
        assert resp.status_code == 403

    def test_missing_data(self, client, admin_headers):
        resp = client.post("/jobs", json={"title": "j4"}, headers=admin_headers)
        assert resp.status_code == 400

    def test_equity_out_of_range(self, client, admin_headers):
        resp = client.post("/jobs", json={**self.new_job, "equity": 1.5}, headers=admin_headers)
        assert resp.status_code == 400

    def test_unknown_company(self, client, admin_headers):
        resp = client.post("/jobs", json={**self.new_job, "companyHandle": "c100"}, headers=admin_headers)
        assert resp.status_code == 404


class TestListJobs:
    def test_anon(self, client):
        resp = client.get("/jobs")
        assert resp.status_code == 200
        assert resp.json() == {"jobs": ALL_JOBS}

    def test_filters(self, client):
        resp = client.get("/jobs", params={"title": "j", "minSalary": 50000, "hasEquity": "true"})
        assert resp.status_code == 200
        assert resp.json() == {"jobs": [ALL_JOBS[1]]}

    def test_has_equity_false(self, client):
        resp = client.get("/jobs", params={"hasEquity": "false"})
        assert resp.json() == {"jobs": ALL_JOBS}

    def test_store_failure(self, client, db_session):
        db_session.execute(text("DROP TABLE jobs"))
        db_session.commit()

        resp = client.get("/jobs")
        assert resp.status_code == 500
        assert resp.json()["error"]["code"] == "DB_ERROR"


class TestGetJob:
    def test_anon(self, client):
        resp = client.get("/jobs/1")
        assert resp.status_code == 200
        job = resp.json()["job"]
        assert job["title"] == "j1"
        assert job["company"]["handle"] == "c1"
        assert "companyHandle" not in job

    def test_not_found(self, client):
        assert client.get("/jobs/0").status_code == 404

    def test_non_integer_id(self, client):
        assert client.get("/jobs/abc").status_code == 400


class TestUpdateJob:
    def test_admin(self, client, admin_headers):
        resp = client.patch("/jobs/1", json={"salary": 1}, headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json() == {"job": {**ALL_JOBS[0], "salary": 1}}

    def test_company_handle_rejected(self, client, admin_headers):
        resp = client.patch("/jobs/1", json={"companyHandle": "c2"}, headers=admin_headers)
        assert resp.status_code == 400

    def test_null_title_rejected(self, client, admin_headers):
        resp = client.patch("/jobs/1", json={"title": None}, headers=admin_headers)
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"
        assert client.get("/jobs/1").json()["job"]["title"] == "j1"

    def test_null_salary_and_equity_allowed(self, client, admin_headers):
        resp = client.patch("/jobs/1", json={"salary": None, "equity": None}, headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json() == {"job": {**ALL_JOBS[0], "salary": None, "equity": None}}

    def test_anon(self, client):
        assert client.patch("/jobs/1", json={"salary": 1}).status_code == 401

    def test_not_found(self, client, admin_headers):
        assert client.patch("/jobs/0", json={"salary": 1}, headers=admin_headers).status_code == 404


class TestDeleteJob:
    def test_admin(self, client, admin_headers):
        resp = client.delete("/jobs/1", headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json() == {"deleted": 1}
        assert client.get("/jobs/1").status_code == 404

    def test_non_admin(self, client, user_headers):
        assert client.delete("/jobs/1", headers=user_headers).status_code == 403

    def test_not_found(self, client, admin_headers):
        assert client.delete("/jobs/0", headers=admin_headers).status_code == 404
