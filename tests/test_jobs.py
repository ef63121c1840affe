"""
Test suite for the /jobs endpoints.

Tests cover:
- Job creation (admin only)
- Listing and filtering
- Retrieval, partial update and deletion
- Error handling
"""

from sqlalchemy import text


class TestJobCreation:
    """Tests for POST /jobs"""

    def test_create_job_as_admin(self, client, sample_job_data, admin_headers):
        response = client.post("/jobs", json=sample_job_data, headers=admin_headers)

        assert response.status_code == 201
        job = response.json()["job"]
        assert isinstance(job["id"], int)
        assert job["title"] == "developer"
        assert job["salary"] == 80000
        assert float(job["equity"]) == 0.05
        assert job["companyHandle"] == "c1"

    def test_forbidden_for_regular_user(self, client, sample_job_data, u1_headers):
        response = client.post("/jobs", json=sample_job_data, headers=u1_headers)

        assert response.status_code == 403

    def test_unauthorized_for_anon(self, client, sample_job_data):
        response = client.post("/jobs", json=sample_job_data)

        assert response.status_code == 401

    def test_missing_fields(self, client, admin_headers):
        response = client.post("/jobs", json={"title": "developer", "salary": 80000}, headers=admin_headers)

        assert response.status_code == 400

    def test_invalid_salary_type(self, client, sample_job_data, admin_headers):
        response = client.post("/jobs", json={**sample_job_data, "salary": "80000"}, headers=admin_headers)

        assert response.status_code == 400

    def test_equity_out_of_range(self, client, sample_job_data, admin_headers):
        response = client.post("/jobs", json={**sample_job_data, "equity": 1.5}, headers=admin_headers)

        assert response.status_code == 400

    def test_unknown_company(self, client, sample_job_data, admin_headers):
        response = client.post("/jobs", json={**sample_job_data, "companyHandle": "c999"}, headers=admin_headers)

        assert response.status_code == 404
        assert "c999" in response.json()["detail"]

    def test_duplicate(self, client, sample_job_data, admin_headers):
        client.post("/jobs", json=sample_job_data, headers=admin_headers)
        response = client.post("/jobs", json=sample_job_data, headers=admin_headers)

        assert response.status_code == 400

    def test_duplicate_without_salary_or_equity(self, client, admin_headers):
        data = {"title": "nulljob", "companyHandle": "c1"}
        first = client.post("/jobs", json=data, headers=admin_headers)
        response = client.post("/jobs", json=data, headers=admin_headers)

        assert first.status_code == 201
        assert response.status_code == 400


class TestJobListing:
    """Tests for GET /jobs"""

    def test_list_for_anon(self, client):
        response = client.get("/jobs")

        assert response.status_code == 200
        jobs = response.json()["jobs"]
        assert [j["title"] for j in jobs] == ["cat wrangler", "test job", "test job2"]
        assert jobs[2]["equity"] is None
        assert set(jobs[0]) == {"id", "title", "salary", "equity", "companyHandle"}

    def test_title_filter(self, client):
        response = client.get("/jobs?title=cat")

        assert [j["title"] for j in response.json()["jobs"]] == ["cat wrangler"]

    def test_multiple_filters(self, client):
        response = client.get("/jobs?title=test&hasEquity=true")

        assert [j["title"] for j in response.json()["jobs"]] == ["test job"]

    def test_min_salary_filter(self, client):
        response = client.get("/jobs?minSalary=100000")

        assert [j["title"] for j in response.json()["jobs"]] == ["cat wrangler", "test job"]

    def test_has_equity_false_is_no_filter(self, client):
        response = client.get("/jobs?hasEquity=false")

        assert len(response.json()["jobs"]) == 3

    def test_unknown_param(self, client):
        response = client.get("/jobs?chungus=big")

        assert response.status_code == 400

    def test_invalid_param_type(self, client):
        response = client.get("/jobs?minSalary=foo")

        assert response.status_code == 400

    def test_invalid_token_treated_as_anon(self, client):
        response = client.get("/jobs", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 200
        assert len(response.json()["jobs"]) == 3

    def test_database_failure_is_500(self, client, db_session, u1_headers):
        db_session.execute(text("DROP TABLE jobs"))

        response = client.get("/jobs", headers=u1_headers)

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"


class TestJobRetrieval:
    """Tests for GET /jobs/{id}"""

    def test_get_job(self, client, job_id):
        response = client.get(f"/jobs/{job_id}")

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["id"] == job_id
        assert job["title"] == "cat wrangler"
        assert float(job["equity"]) == 0.75
        assert job["companyHandle"] == "c3"

    def test_not_found(self, client):
        response = client.get("/jobs/999999")

        assert response.status_code == 404

    def test_non_integer_id(self, client):
        response = client.get("/jobs/abc")

        assert response.status_code == 400


class TestJobUpdate:
    """Tests for PATCH /jobs/{id}"""

    def test_update_as_admin(self, client, job_id, admin_headers):
        response = client.patch(f"/jobs/{job_id}", json={"title": "dog catcher"}, headers=admin_headers)

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["title"] == "dog catcher"
        assert job["salary"] == 150000
        assert job["companyHandle"] == "c3"

    def test_set_fields_to_null(self, client, job_id, admin_headers):
        response = client.patch(f"/jobs/{job_id}", json={"salary": None, "equity": None}, headers=admin_headers)

        job = response.json()["job"]
        assert job["salary"] is None
        assert job["equity"] is None

    def test_unauthorized_for_anon(self, client, job_id):
        response = client.patch(f"/jobs/{job_id}", json={"title": "dog catcher"})

        assert response.status_code == 401

    def test_expired_token_is_unauthorized(self, client, job_id):
        from datetime import timedelta
        from app.core.security import create_token

        token = create_token("admin", True, expires_delta=timedelta(minutes=-1))
        response = client.patch(
            f"/jobs/{job_id}",
            json={"title": "dog catcher"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401

    def test_forbidden_for_regular_user(self, client, job_id, u1_headers):
        response = client.patch(f"/jobs/{job_id}", json={"title": "dog catcher"}, headers=u1_headers)

        assert response.status_code == 403

    def test_not_found(self, client, admin_headers):
        response = client.patch("/jobs/999999", json={"title": "dog catcher"}, headers=admin_headers)

        assert response.status_code == 404

    def test_company_handle_change_rejected(self, client, job_id, admin_headers):
        response = client.patch(f"/jobs/{job_id}", json={"companyHandle": "c2"}, headers=admin_headers)

        assert response.status_code == 400

    def test_invalid_data(self, client, job_id, admin_headers):
        response = client.patch(f"/jobs/{job_id}", json={"salary": "NAN"}, headers=admin_headers)

        assert response.status_code == 400

    def test_empty_body(self, client, job_id, admin_headers):
        response = client.patch(f"/jobs/{job_id}", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No data"

    def test_lowercase_bearer_prefix(self, client, job_id, admin_token):
        response = client.patch(
            f"/jobs/{job_id}",
            json={"title": "dog catcher"},
            headers={"Authorization": f"bearer {admin_token}"},
        )

        assert response.status_code == 200


class TestJobDeletion:
    """Tests for DELETE /jobs/{id}"""

    def test_delete_as_admin(self, client, job_id, admin_headers):
        response = client.delete(f"/jobs/{job_id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": str(job_id)}
        assert client.get(f"/jobs/{job_id}").status_code == 404

    def test_unauthorized_for_anon(self, client, job_id):
        response = client.delete(f"/jobs/{job_id}")

        assert response.status_code == 401

    def test_forbidden_for_regular_user(self, client, job_id, u1_headers):
        response = client.delete(f"/jobs/{job_id}", headers=u1_headers)

        assert response.status_code == 403

    def test_not_found(self, client, admin_headers):
        response = client.delete("/jobs/999999", headers=admin_headers)

        assert response.status_code == 404
