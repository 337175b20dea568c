"""
Conversion of route builders into OpenAPI objects.

The emitter only reads the builders. Schemas for body types are produced by
a resolver callable, `pydantic_schema` by default, which receives the native
type and the entry's example.
"""

import logging
from typing import Any, Callable, Dict, Optional

from pydantic import TypeAdapter

from . import openapi
from .content import Content
from .formats import FormatType
from .route import Header, Parameter, Request, Response, ResponseEntry, Route

logger = logging.getLogger(__name__)

SchemaResolver = Callable[[Any, Any], openapi.Schema]


COMPONENTS_REF_TEMPLATE = "#/components/schemas/{model}"


def pydantic_schema(native_type: Any, example: Any = None) -> openapi.Schema:
    """Build a schema for a native type through pydantic, seeded with an example.

    Nested models are kept under `$defs` and referenced through
    `#/components/schemas/...`; ApiDocument moves them into the components
    section of the document.

    Args:
        native_type: Any type pydantic can describe (builtins, models, dataclasses)
        example: Optional example value stored on the schema

    Returns:
        The schema object
    """
    schema = TypeAdapter(native_type).json_schema(ref_template=COMPONENTS_REF_TEMPLATE)
    if example is not None:
        schema["example"] = example
    return openapi.Schema.model_validate(schema)


def _format_schema(
    format_type: Optional[FormatType], format_override: Optional[str] = None
) -> Optional[openapi.Schema]:
    if format_type is None:
        return None
    schema = format_type.to_schema()
    if format_override is not None:
        schema["format"] = format_override
    return openapi.Schema.model_validate(schema)


class SchemaEmitter:
    """Walks a route and produces the corresponding OpenAPI objects."""

    def __init__(self, resolver: SchemaResolver = pydantic_schema):
        self.resolver = resolver

    def parameter(self, parameter: Parameter) -> openapi.Parameter:
        return openapi.Parameter(
            name=parameter.name(),
            location=str(parameter.location()),
            description=parameter.description(),
            required=parameter.required(),
            schema_=_format_schema(parameter.schema(), parameter.format()),
        )

    def media_types(self, content: Content) -> Dict[str, openapi.MediaType]:
        """Fan each entry out into one media type object per MIME type.

        An entry without a schema type gets no schema, even when it has an
        example.
        """
        result: Dict[str, openapi.MediaType] = {}
        for entry in content.entries():
            schema = None
            if entry.schema() is not None:
                schema = self.resolver(entry.schema(), entry.example())
            examples = {
                name: openapi.Example(value=value)
                for name, value in entry.examples().items()
            }
            media_type = openapi.MediaType(
                schema_=schema,
                example=entry.example(),
                examples=examples or None,
            )
            for mime_type in entry.mime_types():
                result[mime_type] = media_type
        return result

    def header(self, header: Header) -> openapi.Header:
        return openapi.Header(
            description=header.description(),
            schema_=_format_schema(header.schema()),
        )

    def headers(self, entry: ResponseEntry) -> Optional[Dict[str, openapi.Header]]:
        """Emit the headers of a response entry.

        Returns None when headers were never set on the entry, and an empty
        dict when they were set to nothing.
        """
        headers = entry.get_headers()
        if headers is None:
            return None
        return {header.name(): self.header(header) for header in headers}

    def response(self, entry: ResponseEntry) -> openapi.Response:
        content = entry.content()
        return openapi.Response(
            description=entry.description() or "",
            headers=self.headers(entry),
            content=self.media_types(content) if content is not None else None,
        )

    def responses(self, response: Response) -> Dict[str, openapi.Response]:
        result: Dict[str, openapi.Response] = {}
        for entry in response.entries():
            if entry.status() in result:
                logger.warning(
                    "Duplicate response status %s, keeping the last entry",
                    entry.status(),
                )
            result[entry.status()] = self.response(entry)
        return result

    def request_body(self, request: Request) -> Optional[openapi.RequestBody]:
        content = request.content()
        if content is None and request.description() is None:
            return None
        return openapi.RequestBody(
            description=request.description(),
            required=request.required(),
            content=self.media_types(content) if content is not None else {},
        )

    def operation(self, route: Route) -> openapi.Operation:
        logger.debug("Emitting operation for %r", route)
        security = route.get_security()
        return openapi.Operation(
            operation_id=route.id(),
            summary=route.summary(),
            description=route.description(),
            tags=[route.tag()] if route.tag() is not None else None,
            deprecated=route.deprecated(),
            security=list(security) if security is not None else None,
            parameters=[self.parameter(p) for p in route.params()],
            request_body=self.request_body(route.request()),
            responses=self.responses(route.response()),
        )
