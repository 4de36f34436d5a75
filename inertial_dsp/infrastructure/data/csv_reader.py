"""
Leitura de colunas numéricas de arquivos CSV.

Cada linha é separada por vírgulas; a célula da coluna alvo
(índice base zero) é convertida com a semântica de `atof` do C:
o maior prefixo numérico é usado e texto não numérico vira 0.0.
Linhas sem a coluna alvo não contribuem com valores. Uma linha em
branco conta como uma única célula vazia, logo contribui 0.0 para a
coluna 0. Campos vazios (`a,,b`) são preservados como células.
"""

from __future__ import annotations

import csv
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np

from ...domain.entities.sensor_data import SensorSeries

logger = logging.getLogger(__name__)

READ_ERROR = -1

_NUMERIC_PREFIX = re.compile(
    r"""
    [+-]?
    (?:
        (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
        | inf(?:inity)?
        | nan
    )
    """,
    re.IGNORECASE | re.VERBOSE,
)


def parse_float(token: str) -> float:
    """Converte uma célula como `atof`: prefixo numérico ou 0.0."""
    match = _NUMERIC_PREFIX.match(token.strip())
    if match is None:
        return 0.0
    return float(match.group(0))


@dataclass
class ColumnReadResult:
    """Resultado da extração de uma coluna."""
    column: int
    values: np.ndarray
    count: int
    total_rows: int = 0
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.count >= 0

    def to_series(self, name: Optional[str] = None, sampling_rate: Optional[float] = None) -> SensorSeries:
        """Converte para a entidade de domínio."""
        return SensorSeries(
            name=name or f"column_{self.column}",
            column=self.column,
            samples=self.values,
            sampling_rate=sampling_rate,
            total_rows=self.total_rows,
        )


def read_csv_column(
    path: Union[str, Path],
    max_size: int,
    column: int,
) -> ColumnReadResult:
    """
    Extrai a coluna `column` de um CSV, com no máximo `max_size` valores.

    Todas as linhas são contadas em `total_rows`, mesmo depois de
    atingida a capacidade.

    Returns:
        ColumnReadResult; em falha ao abrir o arquivo, `count == -1`
        e `error` descreve o problema
    """
    values = []
    total_rows = 0

    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
            for row in csv.reader(f):
                row = row or [""]
                total_rows += 1
                if 0 <= column < len(row) and len(values) < max_size:
                    values.append(parse_float(row[column]))
    except OSError as e:
        logger.error("Não foi possível abrir o arquivo %s: %s", path, e)
        return ColumnReadResult(
            column=column,
            values=np.zeros(0),
            count=READ_ERROR,
            error=str(e),
        )

    logger.info("Total de linhas: %d", total_rows)
    logger.info("Valores na coluna alvo (%d): %d", column, len(values))

    return ColumnReadResult(
        column=column,
        values=np.asarray(values, dtype=float),
        count=len(values),
        total_rows=total_rows,
    )
