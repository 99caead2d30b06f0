"""Interpretación de respuestas de la consola.

Cada `OperationKind` tiene su estrategia:
- Endpoints ImpEx: HTML con un elemento marcador (`data-level` / `data-result`).
- Endpoints de consulta y script: JSON, a veces envuelto en el `<body>` de
  una página HTML.

`interpret` es una función pura de la respuesta: los errores internos son
excepciones de `core.errors` que se convierten aquí en un `ConsoleResult`.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from http import HTTPStatus
from typing import Any, ClassVar

from bs4 import BeautifulSoup
from pydantic import BaseModel, ValidationError

from core.domain.models import (
    ConsoleResult,
    FlexibleSearchResponse,
    RawResponse,
    ScriptResponse,
)
from core.domain.operations import OperationKind
from core.errors import (
    ConsoleError,
    HttpStatusError,
    MissingMarkerError,
    ParseError,
    RemoteExecutionError,
)
from core.interfaces.response_strategy import ResponseStrategy
from core.services.table_builder import TableBuilder

logger = logging.getLogger(__name__)

HTTP_OK = 200
HTTP_BAD_REQUEST = 400


def reason_for(response: RawResponse) -> str:
    """Reason phrase de la respuesta o, si viene vacía (HTTP/2), la estándar."""

    if response.reason_phrase:
        return response.reason_phrase
    try:
        return HTTPStatus(response.status_code).phrase
    except ValueError:
        return f"HTTP {response.status_code}"


def decode_body(response: RawResponse, *, http_code: int | None = None) -> str:
    if not response.body:
        return ""
    try:
        return response.body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Cannot decode response body: {exc}", http_code=http_code) from exc


def _collapse(text: str) -> str:
    return " ".join(text.split())


class MarkerStrategy:
    """Endpoints ImpEx: lee el marcador `#<marker_id>` de la página."""

    def __init__(self, marker_id: str, *, detail_class: str | None = None) -> None:
        self.marker_id = marker_id
        self.detail_class = detail_class

    def status_error_message(self, response: RawResponse) -> str:
        return reason_for(response)

    def parse(self, response: RawResponse) -> ConsoleResult:
        soup = BeautifulSoup(decode_body(response), "html.parser")

        marker = soup.find(id=self.marker_id)
        if marker is None:
            raise MissingMarkerError()
        if not (marker.has_attr("data-level") and marker.has_attr("data-result")):
            raise MissingMarkerError()

        data_result = str(marker["data-result"])
        if marker["data-level"] == "error":
            raise RemoteExecutionError(data_result, detail_message=self._detail(soup))
        return ConsoleResult(http_code=response.status_code, output=data_result)

    def _detail(self, soup: BeautifulSoup) -> str | None:
        if self.detail_class is None:
            return None
        container = soup.find(class_=self.detail_class)
        if container is None:
            return None
        first_child = container.find(recursive=False)
        if first_child is None:
            return None
        return _collapse(first_child.get_text())


class JsonStrategy(ABC):
    """Endpoints cuyo cuerpo es un documento JSON (crudo o dentro de `<body>`).

    Las subclases fijan `schema` y convierten el payload validado en resultado.
    """

    schema: ClassVar[type[BaseModel]]

    def status_error_message(self, response: RawResponse) -> str:
        return f"[{response.status_code}] {reason_for(response)}"

    def parse(self, response: RawResponse) -> ConsoleResult:
        if response.body is None:
            raise HttpStatusError(self.status_error_message(response))
        payload = self.load(response)
        return self.to_result(payload, response)

    def load(self, response: RawResponse) -> Any:
        text = self.extract_json_text(decode_body(response, http_code=HTTP_BAD_REQUEST))
        if not text:
            raise MissingMarkerError()
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError es un ValueError; el anidamiento excesivo agota la pila.
            raise ParseError(f"Invalid JSON in response: {exc}", http_code=HTTP_BAD_REQUEST) from exc
        try:
            return self.schema.model_validate(data)
        except ValidationError as exc:
            raise ParseError(
                f"Unexpected response structure: {exc.error_count()} validation error(s)",
                http_code=HTTP_BAD_REQUEST,
            ) from exc
        except RecursionError as exc:
            raise ParseError(
                f"Unexpected response structure: {exc}",
                http_code=HTTP_BAD_REQUEST,
            ) from exc

    @staticmethod
    def extract_json_text(text: str) -> str:
        stripped = text.strip()
        if stripped.startswith(("{", "[")):
            return stripped
        soup = BeautifulSoup(text, "html.parser")
        node = soup.body if soup.body is not None else soup
        return node.get_text().strip()

    @abstractmethod
    def to_result(self, payload: Any, response: RawResponse) -> ConsoleResult:
        ...


class FlexibleSearchStrategy(JsonStrategy):
    schema = FlexibleSearchResponse

    def to_result(self, payload: FlexibleSearchResponse, response: RawResponse) -> ConsoleResult:
        if payload.exception is not None:
            raise RemoteExecutionError(
                payload.exception.message or "Remote console reported an exception"
            )
        if payload.headers is None or payload.result_list is None:
            raise MissingMarkerError()

        table = TableBuilder().add_row(*payload.headers).add_rows(payload.result_list)
        return ConsoleResult(http_code=response.status_code, output=str(table))


class ScriptStrategy(JsonStrategy):
    schema = ScriptResponse

    def to_result(self, payload: ScriptResponse, response: RawResponse) -> ConsoleResult:
        if payload.stacktrace_text is not None and str(payload.stacktrace_text) != "":
            raise RemoteExecutionError(str(payload.stacktrace_text))

        return ConsoleResult(
            http_code=response.status_code,
            output=None if payload.output_text is None else str(payload.output_text),
            result=None if payload.execution_result is None else str(payload.execution_result),
        )


STRATEGIES: dict[OperationKind, ResponseStrategy] = {
    OperationKind.VALIDATE_IMPORT: MarkerStrategy("validationResultMsg"),
    OperationKind.RUN_IMPORT: MarkerStrategy("impexResult", detail_class="impexResult"),
    OperationKind.RUN_QUERY: FlexibleSearchStrategy(),
    OperationKind.RUN_SCRIPT: ScriptStrategy(),
}


def interpret(kind: OperationKind, response: RawResponse) -> ConsoleResult:
    """Convierte la respuesta cruda de `kind` en un `ConsoleResult`.

    Nunca eleva errores de consola: status != 200, marcadores ausentes,
    errores remotos y cuerpos mal formados terminan en `error_message`.
    """

    strategy = STRATEGIES[kind]
    try:
        if response.status_code != HTTP_OK:
            raise HttpStatusError(strategy.status_error_message(response))
        return strategy.parse(response)
    except ParseError as exc:
        logger.warning("%s: %s", kind.label(), exc.message)
        return _error_result(exc, response)
    except ConsoleError as exc:
        logger.debug("%s failed (%s): %s", kind.label(), type(exc).__name__, exc.message)
        return _error_result(exc, response)


def _error_result(exc: ConsoleError, response: RawResponse) -> ConsoleResult:
    return ConsoleResult(
        http_code=exc.http_code if exc.http_code is not None else response.status_code,
        error_message=exc.message or type(exc).__name__,
        detail_message=exc.detail_message,
    )
