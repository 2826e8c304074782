import json

import pytest
from pydantic import ValidationError

from notion_sdk.core.domain.envelope import (
    BlockObject,
    DatabaseObject,
    ErrorObject,
    ListObject,
    PageObject,
    UserObject,
    decode_object,
    encode_object,
)
from notion_sdk.core.domain.pagination import PaginationCursor, PaginationParams
from notion_sdk.core.domain.requests import (
    AppendBlockChildrenRequest,
    CreateCommentRequest,
    QueryDatabaseRequest,
    SearchFilter,
    SearchRequest,
)

PAGE = {
    "object": "page",
    "id": "59833787-2cf9-4fdf-8782-e53db20768a5",
    "created_time": "2022-03-01T19:05:00.000Z",
    "last_edited_time": "2022-07-06T20:25:00.000Z",
    "archived": False,
    "parent": {"type": "database_id", "database_id": "d9824bdc-8445-4327-be8b-5b47500af6ce"},
    "properties": {"Name": {"id": "title", "type": "title", "title": []}},
    "url": "https://www.notion.so/Tuscan-kale-598337872cf94fdf8782e53db20768a5",
    "public_url": None,
}


def test_decode_selects_variant_by_tag():
    assert isinstance(decode_object('{"object": "user", "id": "u1"}'), UserObject)
    assert isinstance(decode_object(json.dumps(PAGE)), PageObject)
    assert isinstance(decode_object('{"object": "block", "id": "b1", "type": "paragraph"}'), BlockObject)
    assert isinstance(
        decode_object('{"object": "error", "status": 400, "code": "validation_error", "message": "bad"}'),
        ErrorObject,
    )


def test_unknown_fields_are_kept():
    page = decode_object(json.dumps(PAGE))

    assert page.model_extra["public_url"] is None
    assert page.properties["Name"]["type"] == "title"


@pytest.mark.parametrize(
    "payload",
    [
        '{"object": "workspace", "id": "w1"}',
        '{"object": "", "id": "w1"}',
        '{"object": 7, "id": "w1"}',
        '{"id": "w1"}',
        '{"object": "user"}',
        '{"object": "error", "message": "no status or code"}',
    ],
)
def test_decode_rejects_bad_envelopes(payload):
    with pytest.raises(ValidationError):
        decode_object(payload)


@pytest.mark.parametrize(
    "obj",
    [
        UserObject(id="u1", type="person", name="Ada", person={"email": "ada@example.com"}),
        PageObject.model_validate(PAGE),
        DatabaseObject(id="d1", title=[{"type": "text", "plain_text": "Tasks"}], properties={}),
        ListObject(results=[UserObject(id="u1"), PageObject(id="p1")], next_cursor="c2", has_more=True, type="user"),
    ],
)
def test_encode_then_decode_is_structurally_equal(obj):
    decoded = decode_object(encode_object(obj))

    assert type(decoded) is type(obj)
    assert decoded.model_dump() == obj.model_dump()


def test_list_results_are_typed_and_cursor_exposed():
    payload = {
        "object": "list",
        "results": [PAGE, {"object": "database", "id": "d1", "title": [{"plain_text": "Tasks"}]}],
        "next_cursor": "fe2cc560-036c-44cd-90e8-294d5a74cebc",
        "has_more": True,
        "type": "page_or_database",
        "page_or_database": {},
    }

    listing = decode_object(json.dumps(payload))

    assert isinstance(listing, ListObject)
    assert isinstance(listing.results[0], PageObject)
    assert isinstance(listing.results[1], DatabaseObject)
    assert listing.results[1].plain_title() == "Tasks"
    assert listing.cursor == PaginationCursor(next_cursor="fe2cc560-036c-44cd-90e8-294d5a74cebc", has_more=True)


def test_list_rejects_nested_error():
    payload = {"object": "list", "results": [{"object": "error", "status": 500, "code": "x"}]}

    with pytest.raises(ValidationError):
        decode_object(json.dumps(payload))


def test_last_page_cursor():
    listing = decode_object('{"object": "list", "results": [], "next_cursor": null, "has_more": false}')

    assert listing.cursor.has_more is False
    assert listing.cursor.next_cursor is None


def test_pagination_params():
    cursor = PaginationCursor(next_cursor="abc", has_more=True)

    assert PaginationParams.after(cursor, page_size=50).as_query() == {"start_cursor": "abc", "page_size": 50}
    assert PaginationParams().as_query() == {}
    with pytest.raises(ValidationError):
        PaginationParams(page_size=0)
    with pytest.raises(ValidationError):
        PaginationParams(page_size=101)


def test_request_bodies_drop_unset_fields():
    body = SearchRequest(query="roadmap", filter=SearchFilter(value="page"), page_size=10)

    assert body.to_json() == {
        "query": "roadmap",
        "filter": {"property": "object", "value": "page"},
        "page_size": 10,
    }
    assert QueryDatabaseRequest().to_json() == {}


def test_append_children_requires_blocks():
    with pytest.raises(ValidationError):
        AppendBlockChildrenRequest(children=[])


def test_comment_needs_exactly_one_target():
    assert CreateCommentRequest.text("hi", page_id="p1").to_json()["parent"] == {"page_id": "p1"}
    assert CreateCommentRequest.text("hi", discussion_id="d1").to_json()["discussion_id"] == "d1"
    with pytest.raises(ValidationError):
        CreateCommentRequest.text("hi")
    with pytest.raises(ValidationError):
        CreateCommentRequest.text("hi", page_id="p1", discussion_id="d1")
