"""
Validador de buffers de amostras.

Verifica as pré-condições comuns a todos os filtros: buffers
presentes, tamanho efetivo positivo e buffers longos o bastante
para o tamanho pedido. Também valida parâmetros escalares.
"""

import math
from typing import Any, Optional, Sequence
import numpy as np

from .base import Validator, ValidationResult, ValidationConfig


class BufferValidator(Validator):
    """
    Validador de buffers emprestados pelo chamador.

    O primeiro buffer define o tamanho quando `config.data_size`
    não é informado. O tamanho resolvido vai em `metadata["data_size"]`.
    """

    name = "buffers"

    def validate(
        self,
        data: Sequence[Any],
        config: ValidationConfig = None
    ) -> ValidationResult:
        """Valida uma sequência de buffers."""
        cfg = config or ValidationConfig()

        if not data:
            return ValidationResult.fail("Nenhum buffer informado")

        lengths = []
        for position, buffer in enumerate(data):
            if buffer is None:
                return ValidationResult.fail(f"Buffer {position} ausente")
            try:
                lengths.append(len(buffer))
            except TypeError:
                return ValidationResult.fail(
                    f"Buffer {position} não é uma sequência: {type(buffer).__name__}"
                )

        data_size = lengths[0] if cfg.data_size is None else cfg.data_size

        try:
            data_size = int(data_size)
        except (TypeError, ValueError):
            return ValidationResult.fail(f"data_size inválido: {data_size!r}")

        result = ValidationResult.ok(data_size=data_size, lengths=lengths)

        if data_size < cfg.min_data_points:
            result.add_error(
                f"data_size muito pequeno: {data_size} < {cfg.min_data_points}"
            )

        for position, length in enumerate(lengths):
            if length < data_size:
                result.add_error(
                    f"Buffer {position} tem {length} elementos, esperado >= {data_size}"
                )

        if len(set(lengths)) > 1:
            result.add_warning(f"Buffers com tamanhos diferentes: {lengths}")

        return result


_buffer_validator = BufferValidator()


def validate_buffers(
    *buffers: Any,
    data_size: Optional[int] = None,
    min_size: int = 1,
) -> ValidationResult:
    """Atalho para validar buffers com o validador registrado."""
    return _buffer_validator.validate(
        buffers,
        ValidationConfig(min_data_points=min_size, data_size=data_size),
    )


def check_positive(result: ValidationResult, **values: Any) -> ValidationResult:
    """
    Adiciona erro para cada valor que não seja um número finito > 0.

    NaN e infinito são rejeitados.
    """
    for name, value in values.items():
        try:
            number = float(value)
        except (TypeError, ValueError):
            result.add_error(f"{name} deve ser numérico, recebido: {value!r}")
            continue
        if not math.isfinite(number) or number <= 0:
            result.add_error(f"{name} deve ser > 0, recebido: {value}")
    return result


def check_positive_int(result: ValidationResult, **values: Any) -> ValidationResult:
    """Como `check_positive`, exigindo também valor inteiro (ex: janelas)."""
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            result.add_error(f"{name} deve ser inteiro, recebido: {value!r}")
        elif value <= 0:
            result.add_error(f"{name} deve ser >= 1, recebido: {value}")
    return result
