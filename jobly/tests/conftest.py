import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "jobly_test.db"
    # Point the app to this temp DB
    os.environ["JOBLY_DB_PATH"] = str(path)
    from jobly.logs import ensure_log_schema
    schema = Path(_PROJECT_ROOT / "schema.sql").read_text(encoding="utf-8")
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(schema)
        ensure_log_schema(conn)
        conn.commit()
    finally:
        conn.close()
    return str(path)


@pytest.fixture()
def client(tmp_db_path):
    from jobly.api import app
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture()
def conn(tmp_db_path):
    from jobly.db import get_conn
    with get_conn(tmp_db_path) as c:
        yield c


@pytest.fixture()
def log():
    from jobly.logs import LogContext
    return LogContext("TEST")


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_path):
    # Safety: only ever wipe the temp DB, never a real one
    assert os.environ.get("JOBLY_DB_PATH") == tmp_db_path, "Refusing to clean non-temp DB"
    conn = sqlite3.connect(tmp_db_path)
    try:
        for t in ("jobs", "companies", "operation_log"):
            conn.execute(f"DELETE FROM {t}")
        conn.commit()
    finally:
        conn.close()
    yield


@pytest.fixture()
def seeded(conn):
    """Two companies and three jobs with salaries 10000 / 60000 / 50000."""
    conn.executescript(
        """
        INSERT INTO companies(handle, name, num_employees, description, logo_url) VALUES
          ('c1', 'C1', 1, 'Desc1', 'http://c1.img'),
          ('c2', 'C2', 2, 'Desc2', 'http://c2.img');
        INSERT INTO jobs(title, salary, equity, company_handle) VALUES
          ('j1', 10000, 0.1, 'c1'),
          ('j2', 60000, 0, 'c1'),
          ('J3 Senior', 50000, NULL, 'c2');
        """
    )
    return conn
