"""Cliente de la consola remota (HAC).

Orquesta las tres piezas del Core para cada operación:
1. `build_request` arma el formulario.
2. El transporte hace un único POST.
3. `interpret` convierte la respuesta en un `ConsoleResult`.

Los fallos de transporte también terminan en un `ConsoleResult`: quien llama
(CLI/UI) decide cómo mostrarlo y si reintentar.
"""

from __future__ import annotations

import logging

from adapters.http_client import HttpConsoleTransport, build_client
from core.config import AppSettings
from core.domain.models import (
    ConsoleResult,
    FlexibleSearchRequest,
    ImpexRequest,
    ScriptRequest,
)
from core.domain.operations import OperationKind
from core.errors import TransportError
from core.interfaces.transport import ConsoleTransport
from core.services.request_builder import OperationRequest, build_request
from core.services.response_interpreter import interpret

logger = logging.getLogger(__name__)


class HacConsoleClient:
    """Operaciones de la consola: ImpEx, FlexibleSearch/SQL y Groovy."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: ConsoleTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport or HttpConsoleTransport(
            build_client(self._settings), self._settings
        )

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def execute(self, kind: OperationKind, request: OperationRequest) -> ConsoleResult:
        params = build_request(kind, request)
        try:
            response = self._transport.post(
                kind.path,
                params,
                wait_for_completion=kind.waits_for_completion,
            )
        except TransportError as exc:
            logger.warning("%s: %s", kind.label(), exc.message, exc_info=exc)
            return ConsoleResult(http_code=0, error_message=exc.message)
        return interpret(kind, response)

    def validate_impex(self, request: ImpexRequest) -> ConsoleResult:
        return self.execute(OperationKind.VALIDATE_IMPORT, request)

    def import_impex(self, request: ImpexRequest) -> ConsoleResult:
        return self.execute(OperationKind.RUN_IMPORT, request)

    def execute_flexible_search(
        self,
        content: str,
        *,
        commit: bool = False,
        plain_sql: bool = False,
        max_rows: int | None = None,
    ) -> ConsoleResult:
        request = FlexibleSearchRequest(
            content=content,
            commit=commit,
            plain_sql=plain_sql,
            max_rows=max_rows or self._settings.default_max_rows,
        )
        return self.execute(OperationKind.RUN_QUERY, request)

    def execute_groovy_script(self, content: str, *, commit: bool = False) -> ConsoleResult:
        return self.execute(OperationKind.RUN_SCRIPT, ScriptRequest(content=content, commit=commit))

    def check_connection(self) -> ConsoleResult:
        """Prueba de conexión: valida un ImpEx vacío.

        Éxito = la consola respondió 200 con el marcador de validación.
        """

        return self.validate_impex(ImpexRequest(content=""))

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "HacConsoleClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
