"""Wrapper de httpx para la consola remota.

Por qué un wrapper:
- Estandariza timeouts, headers, cookie de sesión y verificación TLS.
- Traduce las respuestas httpx a `RawResponse`: el Core no conoce httpx.
- Facilita testeo: se puede inyectar un `httpx.Client` con `MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from core.config import AppSettings
from core.domain.models import RawResponse
from core.errors import TransportError

logger = logging.getLogger(__name__)

SESSION_COOKIE = "JSESSIONID"
CSRF_HEADER = "X-CSRF-TOKEN"


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con los defaults de la consola.

    `transport` permite inyectar un `httpx.MockTransport` en tests.
    No sigue redirecciones: un POST redirigido al login (sesión caducada) debe
    llegar al intérprete con su status 3xx.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/json;q=0.9,*/*;q=0.8",
    }
    if settings.csrf_token:
        headers[CSRF_HEADER] = settings.csrf_token
    if extra_headers:
        headers.update(extra_headers)

    cookies = {SESSION_COOKIE: settings.session_id} if settings.session_id else None

    return httpx.Client(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        verify=settings.verify_ssl,
        headers=headers,
        cookies=cookies,
        transport=transport,
    )


class HttpConsoleTransport:
    """Implementación httpx de `core.interfaces.transport.ConsoleTransport`.

    Un único intento por llamada: sin reintentos ni backoff.
    """

    def __init__(self, client: httpx.Client, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def _timeout(self, wait_for_completion: bool) -> httpx.Timeout:
        if wait_for_completion:
            return httpx.Timeout(
                self._settings.http_timeout_seconds,
                read=self._settings.execution_timeout_seconds,
            )
        return httpx.Timeout(self._settings.http_timeout_seconds)

    def post(
        self,
        path: str,
        params: Mapping[str, str],
        *,
        wait_for_completion: bool = False,
    ) -> RawResponse:
        url = path if path.startswith("/") else f"/{path}"
        logger.debug("POST %s%s (wait_for_completion=%s)", self.base_url, url, wait_for_completion)
        try:
            response = self._client.post(
                url,
                data=dict(params),
                timeout=self._timeout(wait_for_completion),
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"{exc} ({self.base_url}{url})") from exc

        body = response.content if response.content else None
        return RawResponse(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            body=body,
        )

    def close(self) -> None:
        self._client.close()
