from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response

from weather_cli.exceptions import ParseError, ProviderError


@dataclass
class RequestConfig:
    # None leaves the transport's own default in place
    timeout: Optional[float] = None


class WeatherProvider:
    """Base class for HTTP providers: one request, errors mapped to ProviderError."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            detail = self._error_detail(response)
            reason = f"HTTP {response.status_code}"
            if detail:
                reason = f"{reason} ({detail})"
            raise ProviderError(f"Failed to fetch weather data: {reason}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise ProviderError(f"Failed to fetch weather data: {exc}") from exc
        return self._handle_response(response)

    # helpers ------------------------------------------------------------
    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise ParseError(f"Failed to parse weather data: {exc}") from exc

    def _error_detail(self, response: Response) -> Optional[str]:
        try:
            payload = response.json()
        except ValueError:
            return None
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return None


__all__ = ["WeatherProvider", "RequestConfig"]
