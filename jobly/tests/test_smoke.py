from jobly.logs import LogContext, search_logs


def test_health_and_version(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "db": "ok"}

    v = client.get("/version")
    assert v.status_code == 200
    assert v.json().get("app") == "jobly-api"


def test_logs_search_after_failed_delete(client, seeded):
    assert client.delete("/jobs/nope").status_code == 404
    r = client.get("/api/logs/search", params={"action": "DELETE_JOB"})
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 1
    assert body["items"][0]["result"] == "ERROR"
    assert body["items"][0]["err_msg"] == "No job: nope"


def test_log_context_write_and_search(conn):
    log = LogContext("UNIT")
    log.set_entity("JOB", "1")
    log.set_payload({"title": "Dev"})
    log.write("OK", conn=conn)
    total, items = search_logs(conn, "Dev", None, None, None, 1, 10)
    assert total == 1
    assert items[0]["action"] == "UNIT"
    assert items[0]["entity_id"] == "1"


def test_unexpected_error_is_logged(client, seeded, monkeypatch, caplog):
    from jobly.routes import jobs as jobs_routes

    def boom(*args, **kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(jobs_routes, "remove_job", boom)
    with caplog.at_level("ERROR", logger="jobly.routes.jobs"):
        r = client.delete("/jobs/j1")
    assert r.status_code == 500
    assert r.json()["detail"] == "internal error"
    assert any("DELETE_JOB failed" in rec.getMessage() and rec.exc_info for rec in caplog.records)

    items = client.get("/api/logs/search", params={"action": "DELETE_JOB"}).json()["items"]
    assert items[0]["err_msg"] == "disk on fire"
