"""Fluent route documentation builders producing OpenAPI objects."""

from .content import Content, ContentEntry, content, with_mime, with_mime_json
from .document import ApiDocument
from .emitter import SchemaEmitter, pydantic_schema
from .formats import Float32, FormatType, Int64, resolve
from .route import (
    Header,
    Parameter,
    ParameterIn,
    ParameterScope,
    Request,
    Response,
    ResponseEntry,
    Route,
    header,
    parameter,
    route,
    with_status,
)

__version__ = "0.1.0"
__all__ = [
    "ApiDocument",
    "Content",
    "ContentEntry",
    "Float32",
    "FormatType",
    "Header",
    "Int64",
    "Parameter",
    "ParameterIn",
    "ParameterScope",
    "Request",
    "Response",
    "ResponseEntry",
    "Route",
    "SchemaEmitter",
    "content",
    "header",
    "parameter",
    "pydantic_schema",
    "resolve",
    "route",
    "with_mime",
    "with_mime_json",
    "with_status",
]
