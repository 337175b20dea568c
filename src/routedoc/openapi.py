"""
OpenAPI objects produced by the schema emitter.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OpenAPIModel(BaseModel):
    """Base for emitted objects; frozen once built, dumped by OpenAPI names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Schema(OpenAPIModel):
    """A schema object. Keys beyond type/format/example are kept as given."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    type: Optional[str] = None
    format: Optional[str] = None
    example: Optional[Any] = None


class Parameter(OpenAPIModel):
    name: str
    location: str = Field(alias="in")
    description: Optional[str] = None
    required: Optional[bool] = None
    schema_: Optional[Schema] = Field(default=None, alias="schema")


class Example(OpenAPIModel):
    summary: Optional[str] = None
    description: Optional[str] = None
    value: Optional[Any] = None


class MediaType(OpenAPIModel):
    schema_: Optional[Schema] = Field(default=None, alias="schema")
    example: Optional[Any] = None
    examples: Optional[Dict[str, Example]] = None


class Header(OpenAPIModel):
    description: Optional[str] = None
    schema_: Optional[Schema] = Field(default=None, alias="schema")


class Response(OpenAPIModel):
    description: str = ""
    headers: Optional[Dict[str, Header]] = None
    content: Optional[Dict[str, MediaType]] = None


class RequestBody(OpenAPIModel):
    description: Optional[str] = None
    required: Optional[bool] = None
    content: Dict[str, MediaType] = Field(default_factory=dict)


class Operation(OpenAPIModel):
    operation_id: Optional[str] = Field(default=None, alias="operationId")
    summary: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    deprecated: Optional[bool] = None
    security: Optional[List[Any]] = None
    parameters: List[Parameter] = Field(default_factory=list)
    request_body: Optional[RequestBody] = Field(default=None, alias="requestBody")
    responses: Dict[str, Response] = Field(default_factory=dict)
