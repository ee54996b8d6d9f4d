"""Tests for Job API endpoints."""

from decimal import Decimal

NEW_JOB = {
    "title": "new",
    "salary": 100000,
    "equity": 0.025,
    "companyHandle": "c1",
}


class TestJobCreateAPI:
    def test_create_job_admin(self, client, auth_headers, companies):
        response = client.post("/jobs", headers=auth_headers, json=NEW_JOB)

        assert response.status_code == 201
        data = response.json()
        assert isinstance(data["id"], int)
        assert data["title"] == "new"
        assert data["salary"] == 100000
        assert Decimal(data["equity"]) == Decimal("0.025")
        assert data["companyHandle"] == "c1"

    def test_create_job_non_admin(self, client, user_headers, companies):
        response = client.post("/jobs", headers=user_headers, json=NEW_JOB)

        assert response.status_code == 403

    def test_create_job_missing_data(self, client, auth_headers, companies):
        response = client.post("/jobs", headers=auth_headers, json={"equity": "0.001"})

        assert response.status_code == 422

    def test_create_job_equity_above_one(self, client, auth_headers, companies):
        response = client.post("/jobs", headers=auth_headers, json={**NEW_JOB, "equity": 1.5})

        assert response.status_code == 422

    def test_create_job_unknown_company(self, client, auth_headers, companies):
        response = client.post(
            "/jobs", headers=auth_headers, json={**NEW_JOB, "companyHandle": "nope"}
        )

        assert response.status_code == 404


class TestJobListAPI:
    def test_list_all(self, client, jobs):
        response = client.get("/jobs")

        assert response.status_code == 200
        assert [j["title"] for j in response.json()] == ["j1", "j2", "j3"]

    def test_has_equity_true_and_min_salary(self, client, jobs):
        response = client.get("/jobs", params={"hasEquity": "true", "minSalary": 2})

        assert response.status_code == 200
        assert [j["title"] for j in response.json()] == ["j2"]

    def test_has_equity_false_matches_all(self, client, jobs):
        response = client.get("/jobs", params={"hasEquity": "false", "minSalary": 1})

        assert [j["title"] for j in response.json()] == ["j1", "j2", "j3"]

    def test_title_filter(self, client, jobs):
        response = client.get("/jobs", params={"title": "1"})

        assert [j["title"] for j in response.json()] == ["j1"]

    def test_unknown_filter(self, client, jobs):
        response = client.get("/jobs", params={"companyHandle": "c1"})

        assert response.status_code == 400

    def test_non_numeric_salary(self, client, jobs):
        response = client.get("/jobs", params={"minSalary": "high"})

        assert response.status_code == 400


class TestJobGetAPI:
    def test_get(self, client, jobs):
        response = client.get(f"/jobs/{jobs[0].id}")

        assert response.status_code == 200
        assert response.json()["title"] == "j1"
        assert response.json()["companyHandle"] == "c1"

    def test_get_not_found(self, client, jobs):
        response = client.get("/jobs/0")

        assert response.status_code == 404


class TestJobUpdateAPI:
    def test_update_admin(self, client, auth_headers, jobs):
        response = client.patch(
            f"/jobs/{jobs[0].id}", headers=auth_headers, json={"title": "updated", "salary": None}
        )

        assert response.status_code == 200
        assert response.json()["title"] == "updated"
        assert response.json()["salary"] is None
        assert response.json()["companyHandle"] == "c1"

    def test_update_company_handle_rejected(self, client, auth_headers, jobs):
        response = client.patch(
            f"/jobs/{jobs[0].id}", headers=auth_headers, json={"companyHandle": "c2"}
        )

        assert response.status_code == 422

    def test_update_non_admin(self, client, user_headers, jobs):
        response = client.patch(f"/jobs/{jobs[0].id}", headers=user_headers, json={"title": "x"})

        assert response.status_code == 403

    def test_update_not_found(self, client, auth_headers, jobs):
        response = client.patch("/jobs/0", headers=auth_headers, json={"title": "x"})

        assert response.status_code == 404

    def test_update_null_title_rejected(self, client, auth_headers, jobs):
        response = client.patch(f"/jobs/{jobs[0].id}", headers=auth_headers, json={"title": None})

        assert response.status_code == 422
        assert client.get(f"/jobs/{jobs[0].id}").json()["title"] == "j1"


class TestJobDeleteAPI:
    def test_delete_admin(self, client, auth_headers, jobs):
        response = client.delete(f"/jobs/{jobs[0].id}", headers=auth_headers)

        assert response.status_code == 204

    def test_delete_anonymous(self, client, jobs):
        response = client.delete(f"/jobs/{jobs[0].id}")

        assert response.status_code == 401
