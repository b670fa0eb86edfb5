import pytest

from postmangen.models import GroupRoute, ListCatalog, ListModel, ListRoute
from postmangen.rawbody import (
    attach_raw_body,
    attach_raw_body_chi,
    find_handler_source,
    model_for_route,
    model_from_declaration,
    search_model_code,
)

CREATE_USER = (
    "var CreateUser = func(w http.ResponseWriter, r *http.Request) {\n"
    "\tuser := &models.User{}\n"
    "\terr := json.NewDecoder(r.Body).Decode(user)\n"
    "\tif err != nil {\n"
    "\t\treturn\n"
    "\t}\n"
    "}"
)
LIST_USERS = (
    "var ListUsers = func(w http.ResponseWriter, r *http.Request) {\n"
    "\tu.Respond(w, nil)\n"
    "}"
)
SAVE_PAYLOAD = (
    "var Save = func(w http.ResponseWriter, r *http.Request) {\n"
    "\tbody := Payload{}\n"
    "\terr := json.NewDecoder(r.Body).Decode(&body)\n"
    "}"
)
USER_SCHEMA = '{\n    "name":"text"\n}'
FILTER_SCHEMA = '{\n    "page":0\n}'


@pytest.fixture
def catalog(tmp_path):
    content = "package controllers\n\n" + CREATE_USER + "\n\n" + LIST_USERS + "\n\n" + SAVE_PAYLOAD + "\n"
    (tmp_path / "user.go").write_text(content)
    return ListCatalog(catalog="controllers", path=str(tmp_path), files=["user.go"])


def test_find_handler_source(catalog):
    assert find_handler_source("CreateUser", catalog) == CREATE_USER
    assert find_handler_source("ListUsers", catalog) == LIST_USERS


def test_find_handler_source_missing(catalog):
    assert find_handler_source("Nowhere", catalog) == ""


def test_find_handler_source_without_brace(tmp_path):
    line = "func Ping(w http.ResponseWriter, r *http.Request)"
    (tmp_path / "ping.go").write_text(line + "\n{\n}\n")
    found = find_handler_source("Ping", ListCatalog(catalog="x", path=str(tmp_path), files=["ping.go"]))
    assert found == line


def test_search_model_code():
    assert search_model_code(CREATE_USER) == "models.User"
    assert search_model_code(SAVE_PAYLOAD) == "Payload"


def test_search_model_code_without_decode():
    assert search_model_code(LIST_USERS) == ""


def test_model_from_declaration():
    assert model_from_declaration("user", CREATE_USER) == "models.User"
    assert model_from_declaration("missing", CREATE_USER) == ""


def test_model_for_route(catalog):
    route = ListRoute(folder="controllers", function="CreateUser", method="POST")
    models = [ListModel(name="User", jsonschema=USER_SCHEMA)]
    assert model_for_route(route, [catalog], models) == USER_SCHEMA


def test_model_for_route_unknown_folder(catalog):
    route = ListRoute(folder="other", function="CreateUser", method="POST")
    models = [ListModel(name="User", jsonschema=USER_SCHEMA)]
    assert model_for_route(route, [catalog], models) == ""


def test_model_for_route_reference_without_package(catalog):
    route = ListRoute(folder="controllers", function="Save", method="POST")
    with pytest.raises(ValueError):
        model_for_route(route, [catalog], [ListModel(name="Payload")])
    assert model_for_route(route, [catalog], []) == ""


def test_attach_raw_body(catalog):
    post = ListRoute(folder="controllers", function="CreateUser", method="POST")
    get = ListRoute(folder="controllers", function="CreateUser", method="GET", raw_body="keep")
    delete = ListRoute(folder="absent", function="CreateUser", method="DELETE", raw_body="old")
    groups = [GroupRoute(name="User", group=[post, get, delete])]
    models = [ListModel(name="User", jsonschema=USER_SCHEMA)]
    result = attach_raw_body(groups, models, [catalog])
    assert result is groups
    assert [route.raw_body for route in result[0].group] == [USER_SCHEMA, "keep", ""]


def test_attach_raw_body_chi():
    routes = [
        ListRoute(link="/user/get-list", method="POST"),
        ListRoute(link="/user/update", method="PUT"),
        ListRoute(link="/user/one", method="GET", raw_body="old"),
    ]
    models = [
        ListModel(name="Filter", jsonschema=FILTER_SCHEMA),
        ListModel(name="User", jsonschema=USER_SCHEMA),
    ]
    result = attach_raw_body_chi([GroupRoute(name="User", group=routes)], models)
    assert [route.raw_body for route in result[0].group] == [FILTER_SCHEMA, USER_SCHEMA, ""]


def test_attach_raw_body_chi_without_models():
    routes = [ListRoute(link="/item/add", method="POST", raw_body="old")]
    result = attach_raw_body_chi([GroupRoute(name="Item", group=routes)], [])
    assert result[0].group[0].raw_body == ""