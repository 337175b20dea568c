"""
Assembly of documented routes into a complete OpenAPI document.
"""

import json
import logging
from typing import Any, Dict, Optional

import yaml

from .emitter import SchemaEmitter
from .route import Route

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def _hoist_definitions(obj: Any, schemas: Dict[str, Any]) -> Any:
    """Move every `$defs` block found in obj into schemas.

    Args:
        obj: A dumped OpenAPI object, possibly nested
        schemas: Collected component schemas, keyed by model name

    Returns:
        A copy of obj without `$defs` keys
    """
    if isinstance(obj, list):
        return [_hoist_definitions(item, schemas) for item in obj]
    if not isinstance(obj, dict):
        return obj

    result = {}
    for key, value in obj.items():
        if key == "$defs" and isinstance(value, dict):
            for name, definition in value.items():
                schemas[name] = _hoist_definitions(definition, schemas)
            continue
        result[key] = _hoist_definitions(value, schemas)
    return result


class ApiDocument:
    """Collects routes by path and method and renders the OpenAPI document."""

    def __init__(
        self,
        title: str,
        version: str,
        openapi: str = "3.1.0",
        description: Optional[str] = None,
        emitter: Optional[SchemaEmitter] = None,
    ):
        """Initialize an empty document.

        Args:
            title: API title written to the info object
            version: API version written to the info object
            openapi: OpenAPI version string of the document
            description: Optional API description
            emitter: Emitter used to convert routes, a default one if omitted
        """
        self.title = title
        self.version = version
        self.openapi = openapi
        self.description = description
        self.emitter = emitter or SchemaEmitter()
        self.paths: Dict[str, Dict[str, Route]] = {}

    def add(self, path: str, method: str, route: Route) -> "ApiDocument":
        """Document a route under a path and HTTP method.

        Args:
            path: URL path template, e.g. "/users/{id}"
            method: HTTP method, case-insensitive
            route: The route description

        Returns:
            The document, for chaining

        Raises:
            ValueError: If the method is not an HTTP method OpenAPI knows
        """
        method = method.lower()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        operations = self.paths.setdefault(path, {})
        if method in operations:
            logger.warning("Replacing %s %s", method.upper(), path)
        operations[method] = route
        return self

    def to_dict(self) -> Dict[str, Any]:
        info: Dict[str, Any] = {"title": self.title, "version": self.version}
        if self.description is not None:
            info["description"] = self.description

        schemas: Dict[str, Any] = {}
        paths: Dict[str, Any] = {}
        for path, operations in self.paths.items():
            paths[path] = {
                method: _hoist_definitions(self.emitter.operation(route).to_dict(), schemas)
                for method, route in operations.items()
            }

        document = {"openapi": self.openapi, "info": info, "paths": paths}
        if schemas:
            document["components"] = {"schemas": schemas}
        return document

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
