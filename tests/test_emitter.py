"""Tests for converting routes into OpenAPI objects."""

import logging
from typing import Optional

from pydantic import BaseModel

from routedoc import (
    Int64,
    ParameterIn,
    SchemaEmitter,
    content,
    header,
    parameter,
    route,
    with_mime,
    with_mime_json,
    with_status,
)
from routedoc import openapi


class User(BaseModel):
    name: str
    age: int


def test_parameter_emission():
    p = (
        parameter("id", ParameterIn.PATH)
        .description("User id")
        .required(True)
        .schema(Int64)
    )

    emitted = SchemaEmitter().parameter(p)

    assert emitted.to_dict() == {
        "name": "id",
        "in": "path",
        "description": "User id",
        "required": True,
        "schema": {"type": "integer", "format": "int64"},
    }


def test_parameter_without_schema_or_format():
    emitted = SchemaEmitter().parameter(parameter("q", "query").schema(str))
    bare = SchemaEmitter().parameter(parameter("raw", "header"))

    assert emitted.to_dict()["schema"] == {"type": "string"}
    assert "schema" not in bare.to_dict()
    assert bare.location == "header"


def test_parameter_format_override():
    p = parameter("since", "query").schema(str).format("date-time")

    assert SchemaEmitter().parameter(p).to_dict()["schema"] == {
        "type": "string",
        "format": "date-time",
    }


def test_media_types_fan_out_shared_group():
    body = content().entry(
        with_mime("application/json", "application/xml").schema(User).example({"name": "a", "age": 1})
    )

    emitted = SchemaEmitter().media_types(body)

    assert list(emitted) == ["application/json", "application/xml"]
    assert emitted["application/json"] == emitted["application/xml"]
    media = emitted["application/json"].to_dict()
    assert media["schema"]["type"] == "object"
    assert set(media["schema"]["properties"]) == {"name", "age"}
    assert media["schema"]["example"] == {"name": "a", "age": 1}
    assert media["example"] == {"name": "a", "age": 1}


def test_media_type_without_schema_drops_schema():
    body = content().entry(with_mime("text/plain").example("hello"))

    media = SchemaEmitter().media_types(body)["text/plain"]

    assert media.schema_ is None
    assert media.to_dict() == {"example": "hello"}


def test_media_types_use_custom_resolver():
    calls = []

    def resolver(native_type, example):
        calls.append((native_type, example))
        return openapi.Schema(type="object")

    body = content().entry(with_mime_json().schema(User).named_example("min", {"name": "x"}))

    media = SchemaEmitter(resolver=resolver).media_types(body)["application/json"]

    assert calls == [(User, None)]
    assert media.to_dict() == {
        "schema": {"type": "object"},
        "examples": {"min": {"value": {"name": "x"}}},
    }


def test_headers_absent_versus_empty():
    emitter = SchemaEmitter()

    assert emitter.headers(with_status(200)) is None
    assert emitter.headers(with_status(200).headers()) == {}
    assert "headers" not in emitter.response(with_status(200)).to_dict()
    assert emitter.response(with_status(200).headers()).to_dict()["headers"] == {}


def test_header_emission():
    entry = with_status(200).headers(
        header("X-Rate-Limit").schema(int).description("Calls per hour"),
        header("X-Opaque"),
    )

    emitted = SchemaEmitter().headers(entry)

    assert list(emitted) == ["X-Rate-Limit", "X-Opaque"]
    assert emitted["X-Rate-Limit"].to_dict() == {
        "description": "Calls per hour",
        "schema": {"type": "integer", "format": "int32"},
    }
    assert emitted["X-Opaque"].to_dict() == {}


def test_duplicate_status_last_write_wins(caplog):
    r = (
        route()
        .response()
        .add(with_status(200).description("first"))
        .add(with_status(404).description("missing"))
        .add(with_status(200).description("second"))
        .build()
    )

    with caplog.at_level(logging.WARNING, logger="routedoc.emitter"):
        responses = SchemaEmitter().responses(r.response())

    assert list(responses) == ["200", "404"]
    assert responses["200"].description == "second"
    assert "Duplicate response status 200" in caplog.text


def test_request_body_absent_when_empty():
    assert SchemaEmitter().request_body(route().request()) is None


def test_request_body_emission():
    r = (
        route()
        .request()
        .description("User to create")
        .required(True)
        .content(content().entry(with_mime_json().schema(User)))
        .build()
    )

    body = SchemaEmitter().request_body(r.request()).to_dict()

    assert body["description"] == "User to create"
    assert body["required"] is True
    assert list(body["content"]) == ["application/json"]


def test_operation_emission():
    r = (
        route()
        .id("getUser")
        .summary("Get a user")
        .tag("users")
        .deprecated(False)
        .security({"bearer": []})
        .response()
        .add(
            with_status(200)
            .description("OK")
            .content(content().entry(with_mime_json().schema(User)))
        )
        .add(with_status("default").description("Error"))
        .build()
        .params(lambda: parameter("id", ParameterIn.PATH).required(True).schema(int))
    )

    op = SchemaEmitter().operation(r).to_dict()

    assert op["operationId"] == "getUser"
    assert op["summary"] == "Get a user"
    assert op["tags"] == ["users"]
    assert op["deprecated"] is False
    assert op["security"] == [{"bearer": []}]
    assert op["parameters"] == [
        {"name": "id", "in": "path", "required": True, "schema": {"type": "integer", "format": "int32"}}
    ]
    assert "requestBody" not in op
    assert list(op["responses"]) == ["200", "default"]
    assert op["responses"]["default"] == {"description": "Error"}


def test_operation_without_tag_or_security():
    op = SchemaEmitter().operation(route()).to_dict()

    assert op == {"parameters": [], "responses": {}}


def test_named_examples_are_example_objects():
    body = content().entry(with_mime_json().named_example("min", {"a": 1}))

    media = SchemaEmitter().media_types(body)["application/json"]

    assert media.to_dict() == {"examples": {"min": {"value": {"a": 1}}}}


class Address(BaseModel):
    city: str


class Customer(BaseModel):
    name: str
    nickname: Optional[str] = None
    address: Address


def test_nested_models_reference_components():
    body = content().entry(with_mime_json().schema(Customer))

    schema = SchemaEmitter().media_types(body)["application/json"].to_dict()["schema"]

    assert schema["properties"]["address"] == {"$ref": "#/components/schemas/Address"}
    assert set(schema["$defs"]) == {"Address"}
