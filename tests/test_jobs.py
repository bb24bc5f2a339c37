from conftest import make_job


class TestJobsCRUD:
    def test_create_then_get_round_trips(self, client):
        payload = make_job(skills=["react", "tailwind"])
        r = client.post("/job", json=payload)
        assert r.status_code == 200
        ack = r.json()
        assert ack["acknowledged"] is True
        job_id = ack["insertedId"]

        r = client.get(f"/job/{job_id}")
        assert r.status_code == 200
        assert r.json() == {**payload, "_id": job_id}

    def test_browser_deadline_comes_back_unchanged(self, client):
        payload = make_job(deadline="2026-12-01T18:30:15.250Z")
        job_id = client.post("/job", json=payload).json()["insertedId"]

        job = client.get(f"/job/{job_id}").json()
        assert job["deadline"] == "2026-12-01T18:30:15.250Z"
        assert job == {**payload, "_id": job_id}

    def test_unparseable_deadline_is_rejected(self, client):
        r = client.post("/job", json=make_job(deadline="next tuesday"))
        assert r.status_code == 422

    def test_create_requires_core_fields(self, client):
        r = client.post("/job", json={"title": "No buyer"})
        assert r.status_code == 422

    def test_list_all_jobs(self, client):
        client.post("/job", json=make_job(title="Job 1"))
        client.post("/job", json=make_job(title="Job 2"))

        r = client.get("/jobs")
        assert r.status_code == 200
        assert sorted(j["title"] for j in r.json()) == ["Job 1", "Job 2"]

    def test_get_missing_job_returns_null(self, client):
        r = client.get("/job/65f0c0ffee0000000000beef")
        assert r.status_code == 200
        assert r.json() is None

    def test_malformed_id_is_client_error(self, client):
        assert client.get("/job/not-an-id").status_code == 400
        assert client.delete("/job/not-an-id").status_code == 400
        assert client.put("/job/not-an-id", json=make_job()).status_code == 400

    def test_update_replaces_fields(self, client):
        job_id = client.post("/job", json=make_job()).json()["insertedId"]

        r = client.put(f"/job/{job_id}", json=make_job(title="New Title", max_price=900))
        assert r.status_code == 200
        ack = r.json()
        assert ack["matchedCount"] == 1
        assert ack["modifiedCount"] == 1
        assert ack["upsertedId"] is None

        job = client.get(f"/job/{job_id}").json()
        assert job["title"] == "New Title"
        assert job["max_price"] == 900

    def test_update_upserts_missing_job(self, client):
        job_id = "65f0c0ffee0000000000cafe"
        r = client.put(f"/job/{job_id}", json=make_job(title="Upserted"))
        assert r.status_code == 200
        ack = r.json()
        assert ack["matchedCount"] == 0
        assert ack["upsertedCount"] == 1
        assert ack["upsertedId"] == job_id

        assert client.get(f"/job/{job_id}").json()["title"] == "Upserted"

    def test_delete_job(self, client):
        job_id = client.post("/job", json=make_job()).json()["insertedId"]

        r = client.delete(f"/job/{job_id}")
        assert r.status_code == 200
        assert r.json()["deletedCount"] == 1
        assert client.get(f"/job/{job_id}").json() is None

    def test_delete_missing_job_is_noop(self, client):
        job_id = "65f0c0ffee0000000000dead"
        r = client.delete(f"/job/{job_id}")
        assert r.status_code == 200
        assert r.json() == {"acknowledged": True, "deletedCount": 0}
        assert client.get(f"/job/{job_id}").json() is None


class TestJobsPagination:
    def _seed(self, client):
        categories = ["Web Development", "Graphics Design", "Digital Marketing"]
        for i in range(7):
            client.post("/job", json=make_job(
                title=f"Job {i}",
                category=categories[i % 3],
                deadline=f"2026-12-{(7 - i) * 3:02d}T00:00:00",
            ))

    def test_pages_reconstruct_full_set(self, client):
        self._seed(client)
        size = 3
        total = client.get("/jobs-count").json()["count"]
        assert total == 7

        titles = []
        for page in range(1, (total + size - 1) // size + 1):
            r = client.get("/all-jobs", params={"page": page, "size": size})
            assert r.status_code == 200
            titles.extend(j["title"] for j in r.json())

        assert len(titles) == total
        assert sorted(titles) == sorted(j["title"] for j in client.get("/jobs").json())

    def test_page_past_end_is_empty(self, client):
        self._seed(client)
        r = client.get("/all-jobs", params={"page": 5, "size": 3})
        assert r.json() == []

    def test_filter_matches_count(self, client):
        self._seed(client)
        r = client.get("/all-jobs", params={"page": 1, "size": 100, "filter": "Web Development"})
        jobs = r.json()
        assert jobs
        assert all(j["category"] == "Web Development" for j in jobs)

        count = client.get("/jobs-count", params={"filter": "Web Development"}).json()["count"]
        assert count == len(jobs)

    def test_sort_by_deadline(self, client):
        self._seed(client)
        asc = client.get("/all-jobs", params={"page": 1, "size": 100, "sort": "asc"}).json()
        deadlines = [j["deadline"] for j in asc]
        assert deadlines == sorted(deadlines)

        dsc = client.get("/all-jobs", params={"page": 1, "size": 100, "sort": "dsc"}).json()
        deadlines = [j["deadline"] for j in dsc]
        assert deadlines == sorted(deadlines, reverse=True)

    def test_invalid_page_is_rejected(self, client):
        assert client.get("/all-jobs", params={"page": 0, "size": 3}).status_code == 422
        assert client.get("/all-jobs", params={"page": 1, "size": 0}).status_code == 422
