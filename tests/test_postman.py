import json

import pytest

from postmangen.models import GroupRoute, ListRoute
from postmangen.postman import (
    BASE_HOST,
    POSTMAN_ID,
    SCHEMA_URL,
    build_collection,
    build_folders,
    build_response,
    generate_postman,
)


def _route(**kwargs):
    defaults = dict(name="Create", link="/user/create", method="POST", raw_body="{}")
    defaults.update(kwargs)
    return ListRoute(**defaults)


def test_build_response_fields():
    route = _route()
    response = build_response(route, "http://localhost")
    assert response["status"] == "OK"
    assert response["code"] == 200
    assert response["_postman_previewlanguage"] == "json"
    request = response["originalRequest"]
    assert request["method"] == "POST"
    assert request["url"]["host"] == ["http://localhost"]
    assert request["url"]["raw"] == route.link
    assert request["url"]["path"] == ["user", "create"]
    assert request["body"]["mode"] == "raw"
    assert request["body"]["raw"] == route.raw_body
    assert request["body"]["options"]["raw"]["language"] == "json"


def test_folders_use_base_variable_for_requests():
    groups = [GroupRoute(name="User", group=[_route(), _route(name="Get", method="GET")])]
    folders = build_folders(groups, "http://localhost")
    assert [folder["name"] for folder in folders] == ["User"]
    items = folders[0]["item"]
    assert [item["name"] for item in items] == ["Create", "Get"]
    for item in items:
        assert item["request"]["url"]["host"] == [BASE_HOST]
        assert len(item["response"]) == 1
        assert item["response"][0]["name"] == item["name"]


def test_empty_group_has_null_items():
    folders = build_folders([GroupRoute(name="Empty")], "h")
    assert folders[0]["item"] is None


def test_collection_info_and_variable():
    host, port = "http://localhost", "8080"
    collection = build_collection([], host, port, "api")
    assert collection["info"] == {"_postman_id": POSTMAN_ID, "name": "api", "schema": SCHEMA_URL}
    assert collection["variable"] == [{"key": "base", "value": f"{host}:{port}"}]
    assert collection["item"] is None
    assert collection["event"] is None


def test_generate_writes_collection(tmp_path):
    groups = [GroupRoute(name="User", group=[_route()])]
    folders = generate_postman(tmp_path, groups, "http://localhost", "8080", "api")
    written = (tmp_path / "api.json").read_text(encoding="utf-8")
    assert json.loads(written) == build_collection(groups, "http://localhost", "8080", "api")
    assert folders == build_folders(groups, "http://localhost")
    assert written.startswith("{\n  \"info\"")


def test_generate_escapes_html_characters(tmp_path):
    groups = [GroupRoute(name="A", group=[_route(link="/a/b?x=1&y=2")])]
    generate_postman(tmp_path, groups, "h", "1", "out")
    written = (tmp_path / "out.json").read_text(encoding="utf-8")
    assert "&" not in written
    assert "\\u0026" in written
    loaded = json.loads(written)
    assert loaded["item"][0]["item"][0]["request"]["url"]["raw"] == "/a/b?x=1&y=2"


def test_generate_into_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        generate_postman(tmp_path / "missing", [], "h", "1", "out")