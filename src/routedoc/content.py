"""
Documented body shapes: a Content holds entries, each entry a group of MIME
types sharing one schema and example.
"""

from typing import Any, Dict, List, Optional

# Distinguishes "read the value" from "set the value to None" in accessors
UNSET: Any = object()

JSON_MIME = "application/json"


class ContentEntry:
    """One MIME-type group of a documented body."""

    def __init__(self, mime_type: str, *more: str):
        self._mime_types: List[str] = [mime_type, *more]
        self._schema: Optional[type] = None
        self._example: Any = None
        self._examples: Dict[str, Any] = {}

    def with_mime(self, mime_type: str) -> "ContentEntry":
        """Add another MIME type served by the same schema and example."""
        self._mime_types.append(mime_type)
        return self

    def mime_types(self) -> List[str]:
        return list(self._mime_types)

    def schema(self, schema: Any = UNSET):
        if schema is UNSET:
            return self._schema
        self._schema = schema
        return self

    def example(self, example: Any = UNSET):
        if example is UNSET:
            return self._example
        self._example = example
        return self

    def named_example(self, name: str, example: Any) -> "ContentEntry":
        """Register an example under a name, emitted in the `examples` map."""
        self._examples[name] = example
        return self

    def examples(self) -> Dict[str, Any]:
        return dict(self._examples)

    def __repr__(self) -> str:
        return f"ContentEntry({self._mime_types!r}, schema={self._schema!r})"


class Content:
    """An ordered collection of ContentEntry groups."""

    def __init__(self):
        self._entries: List[ContentEntry] = []

    def entry(self, entry: ContentEntry) -> "Content":
        self._entries.append(entry)
        return self

    def entries(self) -> List[ContentEntry]:
        return list(self._entries)

    def __repr__(self) -> str:
        return f"Content({self._entries!r})"


def content() -> Content:
    return Content()


def with_mime(mime_type: str, *more: str) -> ContentEntry:
    """Start a content entry for one or more MIME types."""
    return ContentEntry(mime_type, *more)


def with_mime_json(mime_type: str = JSON_MIME) -> ContentEntry:
    return ContentEntry(mime_type)
