"""Shared plumbing for resource classes."""

from typing import TYPE_CHECKING, Any, Optional, TypeVar
from urllib.parse import quote

from pydantic import BaseModel

if TYPE_CHECKING:
    from ..http import CarespaceHttpClient

M = TypeVar("M", bound=BaseModel)


class BaseResource:
    """
    Base class for all API groups.

    Subclasses expose one coroutine per endpoint. They build the path with
    ``_path``, validate arguments, call the transport and parse the decoded
    body into a model when the group is typed.
    """

    def __init__(self, http: "CarespaceHttpClient"):
        if http is None:
            raise ValueError("http transport is required")
        self._http = http

    @staticmethod
    def _path(template: str, **ids: Any) -> str:
        """
        Fill ``{name}`` placeholders with URL-encoded IDs.

        Raises:
            ValueError: If an ID is missing or blank
        """
        values = {}
        for name, value in ids.items():
            if value is None or not str(value).strip():
                label = name.replace("_", " ").capitalize()
                raise ValueError(f"{label} is required")
            values[name] = quote(str(value).strip(), safe="")
        return template.format(**values)

    @staticmethod
    def _require(body: Any, name: str) -> Any:
        if body is None:
            raise ValueError(f"{name} is required")
        return body

    @staticmethod
    def _parse(model: type[M], payload: Any) -> M:
        if payload is None:
            payload = {}
        return model.model_validate(payload)

    @staticmethod
    def _page_params(page: int, limit: int, **extra: Optional[Any]) -> dict[str, Any]:
        if page < 1:
            raise ValueError("page must be >= 1")
        if limit < 1:
            raise ValueError("limit must be >= 1")
        return {"page": page, "limit": limit, **extra}
