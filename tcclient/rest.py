"""Thin JSON/text helper over the TeamCity REST API."""

from __future__ import annotations

from typing import Any

import requests

_JSON_HEADERS = {"Accept": "application/json"}


class TeamCityError(Exception):
    """Raised when the server answers a request with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def _encode(body: Any) -> Any:
    to_json = getattr(body, "to_json", None)
    return to_json() if callable(to_json) else body


class RestHelper:
    """Issues requests relative to a base URL and decodes the answers."""

    def __init__(self, base_url: str, session: requests.Session | None = None) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.session = session if session is not None else requests.Session()

    def sub(self, path: str) -> RestHelper:
        """Return a helper rooted at a path below this one, sharing the session."""
        return RestHelper(self.base_url + path, self.session)

    def _request(
        self, method: str, path: str, action: str, description: str, **kwargs: Any
    ) -> requests.Response:
        response = self.session.request(method, self.base_url + path, **kwargs)
        if not 200 <= response.status_code < 300:
            body = response.text
            raise TeamCityError(
                f"{response.status_code} {response.reason} - error when {action} "
                f"{description}: {body}",
                status_code=response.status_code,
                body=body,
            )
        return response

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content.strip():
            return None
        return response.json()

    def get(self, path: str, resource_description: str) -> Any:
        response = self._request(
            "GET", path, "retrieving", resource_description, headers=_JSON_HEADERS
        )
        return self._decode(response)

    def post(self, path: str, body: Any, resource_description: str) -> Any:
        response = self._request(
            "POST", path, "creating", resource_description,
            json=_encode(body), headers=_JSON_HEADERS,
        )
        return self._decode(response)

    def put(self, path: str, body: Any, resource_description: str) -> Any:
        response = self._request(
            "PUT", path, "updating", resource_description,
            json=_encode(body), headers=_JSON_HEADERS,
        )
        return self._decode(response)

    def put_text_plain(self, path: str, body: str, resource_description: str) -> str:
        response = self._request(
            "PUT", path, "updating", resource_description,
            data=body.encode("utf-8"),
            headers={"Content-Type": "text/plain", "Accept": "text/plain"},
        )
        return response.text

    def delete(self, path: str, resource_description: str) -> None:
        self._request("DELETE", path, "deleting", resource_description, headers=_JSON_HEADERS)