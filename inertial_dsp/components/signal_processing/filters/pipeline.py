"""
Encadeamento de filtros registrados.

Cada etapa recebe a saída da anterior; o sinal do chamador nunca
é modificado.
"""

import numpy as np
from typing import List, Dict, Any, Optional
from .base import SignalFilter, FilterRegistry


FilterSpec = Any  # nome, {"name": ..., **params} ou instância de SignalFilter


def _build_filter(spec: FilterSpec) -> SignalFilter:
    if isinstance(spec, SignalFilter):
        return spec
    if isinstance(spec, str):
        return FilterRegistry.create(spec)
    if isinstance(spec, dict):
        params = dict(spec)
        name = params.pop("name", None)
        if not name:
            raise ValueError(f"Filtro sem 'name': {spec}")
        return FilterRegistry.create(name, **params)
    raise ValueError(f"Especificação de filtro não suportada: {spec!r}")


class FilterPipeline:
    """
    Sequência ordenada de filtros.

    Uso:
        pipeline = FilterPipeline([
            {"name": "moving_average", "window": 13},
            {"name": "lowpass", "cutoff_freq": 5.0, "sample_rate": 50.0},
        ])
        smoothed = pipeline.apply(accel)

    Parâmetros inválidos falham na construção (ValueError) e nomes
    desconhecidos com KeyError.
    """

    def __init__(self, filters: Optional[List[FilterSpec]] = None):
        self.filters: List[SignalFilter] = [_build_filter(spec) for spec in filters or []]

    def apply(self, signal: np.ndarray, **kwargs) -> np.ndarray:
        """Aplica as etapas em ordem sobre uma cópia de `signal`."""
        result = np.array(signal, dtype=float)
        if len(result) == 0:
            return result

        for step in self.filters:
            result = step.apply(result, **kwargs)
        return result

    def apply_with_history(self, signal: np.ndarray, **kwargs) -> Dict[str, np.ndarray]:
        """
        Como `apply`, guardando a saída de cada etapa.

        Chaves: "original", "step_<i>_<nome>" por etapa e "final".
        """
        result = np.array(signal, dtype=float)
        history = {"original": result.copy()}

        for i, step in enumerate(self.filters):
            result = step.apply(result, **kwargs)
            history[f"step_{i}_{step.name}"] = result.copy()

        history["final"] = result
        return history

    def describe(self) -> List[Dict[str, Any]]:
        return [
            {"name": f.name, "description": f.description, "params": f.params}
            for f in self.filters
        ]

    @classmethod
    def from_preset(cls, preset_config: Dict[str, Any]) -> "FilterPipeline":
        """Cria a partir de um preset `{"filters": [...]}`."""
        return cls(preset_config.get("filters", []))

    def __len__(self) -> int:
        return len(self.filters)

    def __repr__(self) -> str:
        return f"FilterPipeline([{' -> '.join(f.name for f in self.filters)}])"


def create_filter_pipeline(config: Optional[Dict[str, Any]]) -> Optional[FilterPipeline]:
    """
    Cria pipeline a partir de `{"enabled": bool, "filters": [...]}`.

    Retorna None quando desabilitado ou sem filtros.
    """
    if not config or not config.get("enabled", True):
        return None
    if not config.get("filters"):
        return None
    return FilterPipeline.from_preset(config)


def create_smoothing_pipeline(
    window: int = 13,
    cutoff_freq: Optional[float] = None,
    sample_rate: float = 50.0,
) -> FilterPipeline:
    """Média móvel e, se `cutoff_freq` for dado, passa-baixa em seguida."""
    filters: List[Dict[str, Any]] = [{"name": "moving_average", "window": window}]
    if cutoff_freq is not None:
        filters.append({"name": "lowpass", "cutoff_freq": cutoff_freq, "sample_rate": sample_rate})
    return FilterPipeline(filters)
