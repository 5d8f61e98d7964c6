import pytest
from fastapi.testclient import TestClient

from emptyok.app import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def test_get_root_is_empty_ok(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["content-length"] == "0"


def test_post_with_body_is_empty_ok(client):
    response = client.post("/", content=b'{"anything": [1, 2, 3]}', headers={"Content-Type": "application/json"})
    assert response.status_code == 200
    assert response.content == b""


@pytest.mark.parametrize(
    "method",
    ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "PROPFIND", "PURGE", "MKCOL"],
)
def test_every_method_on_root(client, method):
    response = client.request(method, "/")
    assert response.status_code == 200
    assert response.content == b""


def test_request_contents_are_ignored(client):
    response = client.get(
        "/",
        params={"q": "ignored"},
        headers={"Accept": "application/json", "X-Custom": "value", "Cookie": "a=b"},
    )
    assert response.status_code == 200
    assert response.content == b""


def test_no_content_type_on_empty_response(client):
    assert "content-type" not in client.get("/").headers


@pytest.mark.parametrize("path", ["/missing", "/docs", "/openapi.json", "/index.html"])
def test_other_paths_are_not_found(client, path):
    response = client.get(path)
    assert response.status_code == 404
