"""
Test suite for job endpoints.

Tests cover:
- Job creation and validation
- Listing, filtering and sorting
- Partial updates and status edits
- Deletion
- Ownership isolation between users
- Stats aggregation
"""

import uuid
from datetime import datetime, timedelta, timezone

from sqlalchemy.exc import SQLAlchemyError

from app.crud import job as job_crud
from app.models.job import Job, JobStatus, WorkType

BASE = "/api/v1/job"


class TestJobCreation:
    """Tests for job creation endpoint"""

    def test_create_job_success(self, client, auth_headers, user, sample_job_data):
        response = client.post(f"{BASE}/create-job", json=sample_job_data, headers=auth_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Job created successfully"
        job = data["job"]
        assert job["company"] == "Acme"
        assert job["position"] == "Engineer"
        assert job["work_type"] == "full-time"
        assert job["status"] == "pending"
        assert job["owner_id"] == str(user.id)
        assert job["id"]
        assert job["created_at"]

    def test_create_job_defaults(self, client, auth_headers):
        response = client.post(
            f"{BASE}/create-job",
            json={"company": "Initech", "position": "Analyst"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        job = response.json()["job"]
        assert job["status"] == "pending"
        assert job["work_type"] == "full-time"
        assert job["work_location"] == "Remote"

    def test_create_job_missing_fields(self, client, auth_headers):
        response = client.post(f"{BASE}/create-job", json={"company": "Acme"}, headers=auth_headers)
        assert response.status_code == 422

    def test_create_job_blank_company(self, client, auth_headers):
        response = client.post(
            f"{BASE}/create-job",
            json={"company": "   ", "position": "Engineer"},
            headers=auth_headers,
        )
        assert response.status_code == 422

    def test_create_job_unknown_work_type_rejected(self, client, auth_headers, sample_job_data, db_session):
        response = client.post(
            f"{BASE}/create-job",
            json={**sample_job_data, "work_type": "freelance"},
            headers=auth_headers,
        )
        assert response.status_code == 422
        assert db_session.query(Job).count() == 0

    def test_create_job_unknown_status_rejected(self, client, auth_headers, sample_job_data):
        response = client.post(
            f"{BASE}/create-job",
            json={**sample_job_data, "status": "ghosted"},
            headers=auth_headers,
        )
        assert response.status_code == 422

    def test_create_job_requires_auth(self, client, sample_job_data):
        response = client.post(f"{BASE}/create-job", json=sample_job_data)
        assert response.status_code in (401, 403)

    def test_create_job_persistence_failure(self, client, auth_headers, sample_job_data, monkeypatch):
        def broken_create(*args, **kwargs):
            raise SQLAlchemyError("connection lost")

        monkeypatch.setattr(job_crud, "create", broken_create)

        response = client.post(f"{BASE}/create-job", json=sample_job_data, headers=auth_headers)

        assert response.status_code == 500
        assert response.json()["detail"].startswith("Failed to create job")


class TestJobListing:
    """Tests for the list endpoint"""

    def test_list_empty(self, client, auth_headers):
        response = client.get(f"{BASE}/get-jobs", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_all_jobs(self, client, auth_headers, create_job):
        for i in range(3):
            create_job(position=f"Engineer {i}")

        response = client.get(f"{BASE}/get-jobs", headers=auth_headers)

        assert response.status_code == 200
        assert len(response.json()) == 3

    def test_filter_by_status_and_work_type(self, client, auth_headers, create_job):
        create_job(status="pending", work_type="full-time")
        create_job(status="interview", work_type="part-time")
        create_job(status="interview", work_type="internship")

        response = client.get(f"{BASE}/get-jobs?status=interview", headers=auth_headers)
        assert {job["status"] for job in response.json()} == {"interview"}
        assert len(response.json()) == 2

        response = client.get(f"{BASE}/get-jobs?status=interview&work_type=part-time", headers=auth_headers)
        data = response.json()
        assert len(data) == 1
        assert data[0]["work_type"] == "part-time"

    def test_filter_with_unknown_status_rejected(self, client, auth_headers):
        response = client.get(f"{BASE}/get-jobs?status=hired", headers=auth_headers)
        assert response.status_code == 422

    def test_search_matches_company_or_position(self, client, auth_headers, create_job):
        create_job(company="Acme", position="Backend Engineer")
        create_job(company="Globex", position="Designer")
        create_job(company="Initech", position="Data Analyst")

        response = client.get(f"{BASE}/get-jobs?search=ENGINEER", headers=auth_headers)
        assert [job["company"] for job in response.json()] == ["Acme"]

        response = client.get(f"{BASE}/get-jobs?search=glob", headers=auth_headers)
        assert [job["position"] for job in response.json()] == ["Designer"]

    def test_search_treats_wildcards_literally(self, client, auth_headers, create_job):
        create_job(company="Acme")
        create_job(company="100% Remote Co")

        response = client.get(f"{BASE}/get-jobs", params={"search": "%"}, headers=auth_headers)
        assert [job["company"] for job in response.json()] == ["100% Remote Co"]

        response = client.get(f"{BASE}/get-jobs", params={"search": "_"}, headers=auth_headers)
        assert response.json() == []

    def test_sort_orders(self, client, auth_headers, db_session, user):
        now = datetime.now(timezone.utc)
        for offset, position in enumerate(["Bravo", "Alpha", "Charlie"]):
            db_session.add(Job(
                owner_id=user.id,
                company="Acme",
                position=position,
                created_at=now - timedelta(days=offset),
            ))
        db_session.commit()

        def positions(sort):
            response = client.get(f"{BASE}/get-jobs?sort={sort}", headers=auth_headers)
            assert response.status_code == 200
            return [job["position"] for job in response.json()]

        assert positions("latest") == ["Bravo", "Alpha", "Charlie"]
        assert positions("oldest") == ["Charlie", "Alpha", "Bravo"]
        assert positions("a-z") == ["Alpha", "Bravo", "Charlie"]
        assert positions("z-a") == ["Charlie", "Bravo", "Alpha"]


class TestJobUpdate:
    """Tests for the partial update endpoint"""

    def test_partial_update_keeps_other_fields(self, client, auth_headers, create_job):
        job = create_job()

        response = client.patch(
            f"{BASE}/update-job/{job['id']}",
            json={"work_location": "Remote", "work_type": "contract"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Job updated successfully"
        updated = data["job"]
        assert updated["work_location"] == "Remote"
        assert updated["work_type"] == "contract"
        assert updated["company"] == job["company"]
        assert updated["status"] == job["status"]
        assert updated["created_at"] == job["created_at"]
        assert updated["updated_at"] is not None

    def test_update_empty_body(self, client, auth_headers, create_job):
        job = create_job()
        response = client.patch(f"{BASE}/update-job/{job['id']}", json={}, headers=auth_headers)
        assert response.status_code == 400

    def test_update_null_company_rejected(self, client, auth_headers, create_job):
        job = create_job()
        response = client.patch(f"{BASE}/update-job/{job['id']}", json={"company": None}, headers=auth_headers)
        assert response.status_code == 422

    def test_update_nonexistent_job(self, client, auth_headers):
        response = client.patch(f"{BASE}/update-job/{uuid.uuid4()}", json={"status": "reject"}, headers=auth_headers)

        assert response.status_code == 404
        assert "not found" in response.json()["detail"].lower()

    def test_update_invalid_id(self, client, auth_headers):
        response = client.patch(f"{BASE}/update-job/not-a-uuid", json={"status": "reject"}, headers=auth_headers)
        assert response.status_code == 422


class TestJobStatusEdit:
    """Tests for the status-only edit endpoint"""

    def test_edit_status(self, client, auth_headers, create_job):
        job = create_job()

        response = client.post(f"{BASE}/edit-job/{job['id']}", json={"status": "interview"}, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Status updated successfully!"
        assert data["job"]["status"] == "interview"
        assert data["job"]["updated_at"] is not None

    def test_edit_to_same_status_sets_updated_at(self, client, auth_headers, create_job):
        job = create_job(status="pending")
        assert job["updated_at"] is None

        response = client.post(f"{BASE}/edit-job/{job['id']}", json={"status": "pending"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["job"]["status"] == "pending"
        assert response.json()["job"]["updated_at"] is not None

    def test_edit_status_outside_set_rejected(self, client, auth_headers, create_job, db_session):
        job = create_job()

        response = client.post(f"{BASE}/edit-job/{job['id']}", json={"status": "hired"}, headers=auth_headers)

        assert response.status_code == 422
        stored = db_session.query(Job).filter(Job.id == uuid.UUID(job["id"])).one()
        assert stored.status == JobStatus.PENDING

    def test_edit_status_missing_job(self, client, auth_headers):
        response = client.post(f"{BASE}/edit-job/{uuid.uuid4()}", json={"status": "reject"}, headers=auth_headers)
        assert response.status_code == 404


class TestJobDeletion:
    """Tests for job deletion"""

    def test_delete_job(self, client, auth_headers, create_job):
        job = create_job()

        response = client.delete(f"{BASE}/delete-job/{job['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Success, Job Deleted!"}

        listing = client.get(f"{BASE}/get-jobs", headers=auth_headers)
        assert listing.json() == []

    def test_delete_nonexistent_job(self, client, auth_headers):
        response = client.delete(f"{BASE}/delete-job/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404


class TestOwnershipIsolation:
    """One user's jobs are invisible to every other user"""

    def test_list_excludes_other_users_jobs(self, client, auth_headers, other_auth_headers, create_job):
        create_job()
        create_job(position="Manager")

        response = client.get(f"{BASE}/get-jobs", headers=other_auth_headers)

        assert response.status_code == 200
        assert response.json() == []

    def test_delete_other_users_job_is_not_found(self, client, other_auth_headers, create_job, db_session):
        job = create_job()

        response = client.delete(f"{BASE}/delete-job/{job['id']}", headers=other_auth_headers)

        assert response.status_code == 404
        assert db_session.query(Job).filter(Job.id == uuid.UUID(job["id"])).count() == 1

    def test_update_other_users_job_is_not_found(self, client, auth_headers, other_auth_headers, create_job):
        job = create_job()

        response = client.patch(f"{BASE}/update-job/{job['id']}", json={"status": "reject"}, headers=other_auth_headers)
        assert response.status_code == 404

        response = client.post(f"{BASE}/edit-job/{job['id']}", json={"status": "reject"}, headers=other_auth_headers)
        assert response.status_code == 404

        listing = client.get(f"{BASE}/get-jobs", headers=auth_headers)
        assert listing.json()[0]["status"] == "pending"

    def test_stats_only_count_own_jobs(self, client, auth_headers, other_auth_headers, create_job):
        create_job()
        create_job(headers=other_auth_headers)
        create_job(headers=other_auth_headers, status="reject")

        response = client.get(f"{BASE}/job-stats", headers=auth_headers)
        assert response.json()["total_jobs"] == 1


class TestJobStats:
    """Tests for the stats aggregation"""

    def test_stats_with_no_jobs(self, client, auth_headers):
        response = client.get(f"{BASE}/job-stats", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "total_jobs": 0,
            "status": {"pending": 0, "interview": 0, "reject": 0},
            "work_type": {"full-time": 0, "part-time": 0, "internship": 0, "contract": 0},
        }

    def test_stats_groupings_sum_to_total(self, client, auth_headers, create_job):
        create_job(status="pending", work_type="full-time")
        create_job(status="pending", work_type="internship")
        create_job(status="interview", work_type="full-time")
        create_job(status="reject", work_type="contract")
        create_job(status="interview", work_type="part-time")

        data = client.get(f"{BASE}/job-stats", headers=auth_headers).json()

        assert data["total_jobs"] == 5
        assert data["status"] == {"pending": 2, "interview": 2, "reject": 1}
        assert data["work_type"] == {"full-time": 2, "part-time": 1, "internship": 1, "contract": 1}
        assert sum(data["status"].values()) == data["total_jobs"]
        assert sum(data["work_type"].values()) == data["total_jobs"]

    def test_crud_stats_directly(self, db_session, user):
        db_session.add_all([
            Job(owner_id=user.id, company="A", position="X", status=JobStatus.REJECT, work_type=WorkType.CONTRACT),
            Job(owner_id=user.id, company="B", position="Y"),
        ])
        db_session.commit()

        stats = job_crud.stats(db_session, user.id)

        assert stats["total_jobs"] == 2
        assert stats["status"]["reject"] == 1
        assert stats["status"]["pending"] == 1
        assert stats["work_type"]["contract"] == 1
        assert stats["work_type"]["full-time"] == 1


class TestJobLifecycle:
    """Create, edit status, delete end to end"""

    def test_full_lifecycle(self, client, auth_headers, user):
        create = client.post(
            f"{BASE}/create-job",
            json={"company": "Acme", "position": "Engineer", "work_type": "full-time", "status": "pending"},
            headers=auth_headers,
        )
        assert create.status_code == 201

        jobs = client.get(f"{BASE}/get-jobs", headers=auth_headers).json()
        assert len(jobs) == 1
        job = jobs[0]
        assert job["company"] == "Acme"
        assert job["position"] == "Engineer"
        assert job["work_type"] == "full-time"
        assert job["status"] == "pending"
        assert job["owner_id"] == str(user.id)
        assert job["id"] and job["created_at"]

        edit = client.post(f"{BASE}/edit-job/{job['id']}", json={"status": "interview"}, headers=auth_headers)
        assert edit.status_code == 200
        jobs = client.get(f"{BASE}/get-jobs", headers=auth_headers).json()
        assert jobs[0]["status"] == "interview"

        delete = client.delete(f"{BASE}/delete-job/{job['id']}", headers=auth_headers)
        assert delete.status_code == 200
        assert client.get(f"{BASE}/get-jobs", headers=auth_headers).json() == []
