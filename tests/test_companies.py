"""
Tests for the read-only company endpoints.
"""

from jobly.crud import job as job_crud

COMPANIES_URL = "/api/v1/companies/"


class TestCompanyListing:

    def test_list_companies(self, client, companies):
        response = client.get(COMPANIES_URL)

        assert response.status_code == 200
        assert [c["handle"] for c in response.json()["companies"]] == ["c1", "c2", "c3"]
        assert response.json()["companies"][0] == {
            "handle": "c1",
            "name": "C1",
            "description": "Desc1",
            "numEmployees": 1,
            "logoUrl": "http://c1.img",
        }

    def test_filter_by_name(self, client, companies):
        response = client.get(COMPANIES_URL, params={"name": "c2"})

        assert [c["handle"] for c in response.json()["companies"]] == ["c2"]


class TestCompanyRetrieval:

    def test_get_company_with_jobs(self, client, job_ids):
        response = client.get(f"{COMPANIES_URL}c1")

        assert response.status_code == 200
        company = response.json()["company"]
        assert company["name"] == "C1"
        assert company["jobs"] == [
            {"id": job_ids[0], "title": "j1", "salary": 10000, "equity": "0.1"},
            {"id": job_ids[1], "title": "j2", "salary": 20000, "equity": "0.2"},
        ]

    def test_company_without_jobs(self, client, job_ids):
        response = client.get(f"{COMPANIES_URL}c3")

        assert response.json()["company"]["jobs"] == []

    def test_get_nonexistent_company(self, client, companies):
        response = client.get(f"{COMPANIES_URL}nope")

        assert response.status_code == 404
        assert response.json()["detail"] == "No company: nope"

    def test_company_jobs_small_equity(self, client, db_session, companies):
        job_crud.create(db_session, company_handle="c3", title="tiny", equity="0.000002")

        response = client.get(f"{COMPANIES_URL}c3")

        assert response.json()["company"]["jobs"][0]["equity"] == "0.000002"
