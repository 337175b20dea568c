"""
Fluent builders describing the documentation of one HTTP route.

A Route owns exactly one Request and one Response, created with it. Every
setter returns its owner so calls can be chained, and `build()` on the
route, its request or its response closes the chain by returning the route.
"""

import enum
from typing import Any, Callable, List, Optional, Tuple, Union

from .content import UNSET, Content
from .context import active_route, current_route
from .formats import FormatType, resolve


class ParameterIn(str, enum.Enum):
    """Where a parameter is carried in the HTTP request."""

    QUERY = "query"
    PATH = "path"
    HEADER = "header"
    COOKIE = "cookie"

    def __str__(self) -> str:
        return self.value


def _format_of(schema: Any) -> Optional[FormatType]:
    if isinstance(schema, FormatType):
        return schema
    return resolve(schema)


class Parameter:
    """A named, located input of a route."""

    def __init__(self, name: str, location: Union[ParameterIn, str]):
        self._name = name
        self._location = ParameterIn(location)
        self._description: Optional[str] = None
        self._required: Optional[bool] = None
        self._schema: Optional[FormatType] = None
        self._format: Optional[str] = None
        self._route: Optional["Route"] = None

    def name(self) -> str:
        return self._name

    def location(self) -> ParameterIn:
        return self._location

    def route(self) -> Optional["Route"]:
        """The route this parameter was added to, if any."""
        return self._route

    def description(self, description: Any = UNSET):
        if description is UNSET:
            return self._description
        self._description = description
        return self

    def required(self, required: Any = UNSET):
        if required is UNSET:
            return self._required
        self._required = required
        return self

    def schema(self, schema: Any = UNSET):
        """Set the schema from a native type, or read the resolved FormatType.

        The type is resolved right away, so the stored value is the
        FormatType (or None for an unsupported type), never the type itself.
        """
        if schema is UNSET:
            return self._schema
        self._schema = _format_of(schema)
        return self

    def format(self, format: Any = UNSET):
        """Override the format the schema type would otherwise map to."""
        if format is UNSET:
            return self._format
        self._format = format
        return self

    def __repr__(self) -> str:
        return f"Parameter({self._name!r}, {self._location.value!r})"


class Header:
    """A response header."""

    def __init__(self, name: str):
        self._name = name
        self._schema: Optional[FormatType] = None
        self._description: Optional[str] = None

    def name(self) -> str:
        return self._name

    def schema(self, schema: Any = UNSET):
        if schema is UNSET:
            return self._schema
        self._schema = _format_of(schema)
        return self

    def description(self, description: Any = UNSET):
        if description is UNSET:
            return self._description
        self._description = description
        return self

    def __repr__(self) -> str:
        return f"Header({self._name!r})"


class ResponseEntry:
    """The documentation of one response status."""

    def __init__(self, status: Union[int, str]):
        self._status = str(status)
        self._description: Optional[str] = None
        self._content: Optional[Content] = None
        self._headers: Optional[Tuple[Header, ...]] = None

    def status(self) -> str:
        return self._status

    def description(self, description: Any = UNSET):
        if description is UNSET:
            return self._description
        self._description = description
        return self

    def content(self, content: Any = UNSET):
        if content is UNSET:
            return self._content
        self._content = content
        return self

    def headers(self, *headers: Header) -> "ResponseEntry":
        """Replace the headers of this response.

        Calling with no arguments documents an empty set of headers, which is
        not the same as never calling it.
        """
        self._headers = headers
        return self

    def get_headers(self) -> Optional[Tuple[Header, ...]]:
        return self._headers

    def __repr__(self) -> str:
        return f"ResponseEntry({self._status!r})"


class Response:
    """The ordered response entries of a route."""

    def __init__(self, route: "Route"):
        self._route = route
        self._entries: List[ResponseEntry] = []

    def add(self, entry: ResponseEntry) -> "Response":
        # Entries sharing a status are all kept
        self._entries.append(entry)
        return self

    def entries(self) -> List[ResponseEntry]:
        return list(self._entries)

    def build(self) -> "Route":
        return self._route


class Request:
    """The documented request body of a route."""

    def __init__(self, response: Response, route: "Route"):
        self._response = response
        self._route = route
        self._description: Optional[str] = None
        self._required = False
        self._content: Optional[Content] = None

    def response(self) -> Response:
        return self._response

    def description(self, description: Any = UNSET):
        if description is UNSET:
            return self._description
        self._description = description
        return self

    def required(self, required: Any = UNSET):
        if required is UNSET:
            return self._required
        self._required = required
        return self

    def content(self, content: Any = UNSET):
        if content is UNSET:
            return self._content
        self._content = content
        return self

    def build(self) -> "Route":
        return self._route


class Route:
    """The documentation of one endpoint."""

    def __init__(self):
        self._response = Response(self)
        self._request = Request(self._response, self)
        self._id: Optional[str] = None
        self._summary: Optional[str] = None
        self._description: Optional[str] = None
        self._tag: Optional[str] = None
        self._deprecated: Optional[bool] = None
        self._security: Optional[Tuple[Any, ...]] = None
        self._parameters: List[Parameter] = []

    def request(self) -> Request:
        return self._request

    def response(self) -> Response:
        return self._response

    def id(self, id: Any = UNSET):
        if id is UNSET:
            return self._id
        self._id = id
        return self

    def summary(self, summary: Any = UNSET):
        if summary is UNSET:
            return self._summary
        self._summary = summary
        return self

    def description(self, description: Any = UNSET):
        if description is UNSET:
            return self._description
        self._description = description
        return self

    def tag(self, tag: Any = UNSET):
        if tag is UNSET:
            return self._tag
        self._tag = tag
        return self

    def deprecated(self, deprecated: Any = UNSET):
        if deprecated is UNSET:
            return self._deprecated
        self._deprecated = deprecated
        return self

    def security(self, *requirements: Any) -> "Route":
        """Replace the security requirements, stored as given."""
        self._security = requirements
        return self

    def get_security(self) -> Optional[Tuple[Any, ...]]:
        return self._security

    def add(self, parameter: Parameter) -> "Route":
        parameter._route = self
        self._parameters.append(parameter)
        return self

    def params(self, block: Optional[Callable[[], Any]] = None):
        """Run a parameter block against this route, or list its parameters.

        With a block, every `parameter()` created while the block runs is
        added to this route. Blocks are serialized process wide; an exception
        raised by the block propagates after the slot has been cleared.

        Without a block, returns the parameters in insertion order.
        """
        if block is None:
            return list(self._parameters)
        with active_route(self):
            block()
        return self

    def with_params(self, fn: Callable[["ParameterScope"], Any]) -> "Route":
        """Declare parameters through an explicit scope bound to this route."""
        fn(ParameterScope(self))
        return self

    def build(self) -> "Route":
        return self

    def __repr__(self) -> str:
        return f"Route(id={self._id!r})"


class ParameterScope:
    """Creates parameters attached to one route, without the shared slot."""

    def __init__(self, route: Route):
        self._route = route

    def route(self) -> Route:
        return self._route

    def parameter(self, name: str, location: Union[ParameterIn, str]) -> Parameter:
        created = Parameter(name, location)
        self._route.add(created)
        return created


def route() -> Route:
    return Route()


def parameter(name: str, location: Union[ParameterIn, str]) -> Parameter:
    """Create a parameter, adding it to the route of the enclosing `params` block.

    Outside of a block the parameter is returned without being attached.
    """
    created = Parameter(name, location)
    target = current_route()
    if target is not None:
        target.add(created)
    return created


def header(name: str) -> Header:
    return Header(name)


def with_status(status: Union[int, str]) -> ResponseEntry:
    return ResponseEntry(status)
