"""Operations exposed by the remote console.

Each kind knows its endpoint and whether the caller should wait for the full
execution (long read timeout) or expects a quick answer.
"""

from __future__ import annotations

from enum import Enum


class OperationKind(str, Enum):
    """Console operations supported by the client."""

    VALIDATE_IMPORT = "validate-import"
    RUN_IMPORT = "run-import"
    RUN_QUERY = "run-query"
    RUN_SCRIPT = "run-script"

    @property
    def path(self) -> str:
        """Endpoint path relative to the console root."""

        return _PATHS[self]

    @property
    def waits_for_completion(self) -> bool:
        """Query and script executions may run for a long time."""

        return self in (OperationKind.RUN_QUERY, OperationKind.RUN_SCRIPT)

    @property
    def returns_json(self) -> bool:
        """Endpoints whose page body is a JSON document."""

        return self in (OperationKind.RUN_QUERY, OperationKind.RUN_SCRIPT)

    def label(self) -> str:
        """Human readable label for the CLI and logging."""

        return _LABELS[self]


_PATHS: dict[OperationKind, str] = {
    OperationKind.VALIDATE_IMPORT: "/console/impex/import/validate",
    OperationKind.RUN_IMPORT: "/console/impex/import",
    OperationKind.RUN_QUERY: "/console/flexsearch/execute",
    OperationKind.RUN_SCRIPT: "/console/scripting/execute",
}

_LABELS: dict[OperationKind, str] = {
    OperationKind.VALIDATE_IMPORT: "ImpEx validation",
    OperationKind.RUN_IMPORT: "ImpEx import",
    OperationKind.RUN_QUERY: "FlexibleSearch",
    OperationKind.RUN_SCRIPT: "Groovy script",
}
