import json
import logging

from fastapi import FastAPI
from starlette.testclient import TestClient

from municipality_api.core.logging.builder import setup_logging
from municipality_api.core.logging.middleware import REQUEST_ID_HEADER, RequestIDMiddleware


class StdoutJsonSettings:
    LOG_FORMAT = "json"
    LOG_LEVEL = "INFO"
    LOG_TO_STDOUT = True
    LOG_DIR = None
    LOG_MAX_BYTES = 1000
    LOG_BACKUP_COUNT = 1
    ENV = "production"
    ENABLE_SQL_LOGGING = False


def make_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/hello")
    def hello():
        logging.getLogger("municipality_api.test").info("handling hello")
        return {"ok": True}

    return app


def test_request_id_in_response_and_logs(capsys):
    setup_logging(StdoutJsonSettings())
    client = TestClient(make_app())

    response = client.get("/hello")

    assert response.status_code == 200
    rid = response.headers.get(REQUEST_ID_HEADER)
    assert rid

    records = []
    for line in capsys.readouterr().out.splitlines():
        try:
            records.append(json.loads(line))
        except ValueError:
            continue
    assert any(r.get("request_id") == rid and r.get("message") == "handling hello" for r in records)


def test_incoming_request_id_is_echoed():
    client = TestClient(make_app())

    response = client.get("/hello", headers={REQUEST_ID_HEADER: "upstream-42"})

    assert response.headers[REQUEST_ID_HEADER] == "upstream-42"


def test_unsafe_incoming_request_id_is_replaced():
    client = TestClient(make_app())

    response = client.get("/hello", headers={REQUEST_ID_HEADER: "x" * 500})

    assert response.headers[REQUEST_ID_HEADER] != "x" * 500
    assert len(response.headers[REQUEST_ID_HEADER]) == 36
