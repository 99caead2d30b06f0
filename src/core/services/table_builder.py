"""Renderizado de filas como tabla de texto de ancho fijo."""

from __future__ import annotations

from typing import Iterable


class TableBuilder:
    """Acumula filas y las renderiza con columnas alineadas.

    - Cada columna se rellena hasta la celda más ancha.
    - Las columnas se separan con dos espacios; no se añade espacio final.
    - Celdas `None` se muestran vacías y las filas cortas se completan.
    """

    separator = "  "

    def __init__(self) -> None:
        self._rows: list[list[str]] = []

    def add_row(self, *cells: str | None) -> "TableBuilder":
        self._rows.append(["" if c is None else str(c) for c in cells])
        return self

    def add_rows(self, rows: Iterable[Iterable[str | None]]) -> "TableBuilder":
        for row in rows:
            self.add_row(*row)
        return self

    def __len__(self) -> int:
        return len(self._rows)

    def __str__(self) -> str:
        if not self._rows:
            return ""

        columns = max(len(r) for r in self._rows)
        widths = [0] * columns
        for row in self._rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(cell))

        lines: list[str] = []
        for row in self._rows:
            padded = row + [""] * (columns - len(row))
            line = self.separator.join(cell.ljust(widths[i]) for i, cell in enumerate(padded))
            lines.append(line.rstrip())
        return "\n".join(lines)
