"""
Classes base para detectores de movimento e de repouso.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Type, Any
import numpy as np

from ...domain.entities.parameters import FilterParameters


@dataclass
class DetectionConfig:
    """Configuração para detecção de movimento/repouso."""
    threshold: float = 0.5
    sampling_rate: float = 50.0
    zupt_threshold: float = 0.1
    continuous_count_threshold: int = 5

    @classmethod
    def from_parameters(cls, params: FilterParameters) -> "DetectionConfig":
        """Extrai a configuração de detecção dos parâmetros globais."""
        return cls(
            threshold=params.motion_threshold,
            sampling_rate=params.sampling_rate,
            zupt_threshold=params.zupt_threshold,
            continuous_count_threshold=params.continuous_count_threshold,
        )


@dataclass
class DetectionResult:
    """Resultado de uma detecção."""
    detected: bool
    detector_name: str = ""
    reason: str = ""
    status: str = "ok"
    output: Optional[np.ndarray] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.status == "ok"

    @classmethod
    def not_detected(cls, detector_name: str, reason: str, **kwargs) -> "DetectionResult":
        """Factory para resultado avaliado sem detecção."""
        return cls(
            detected=False,
            detector_name=detector_name,
            reason=reason,
            **kwargs
        )

    @classmethod
    def detected_with(cls, detector_name: str, reason: str, **kwargs) -> "DetectionResult":
        """Factory para resultado avaliado com detecção."""
        return cls(
            detected=True,
            detector_name=detector_name,
            reason=reason,
            **kwargs
        )

    @classmethod
    def invalid(cls, detector_name: str, reason: str, **kwargs) -> "DetectionResult":
        """Factory para entrada que não pôde ser avaliada."""
        return cls(
            detected=False,
            detector_name=detector_name,
            reason=reason,
            status="invalid_input",
            **kwargs
        )


class MotionDetector(ABC):
    """
    Classe base abstrata para detectores.

    Cada detector implementa uma estratégia específica sobre
    uma sequência de amostras de eixo único.
    """

    name: str = "base"
    description: str = "Detector base"

    def __init__(self, config: DetectionConfig = None, **kwargs):
        """Inicializa o detector com configuração."""
        self.config = config or DetectionConfig(**kwargs)

    @abstractmethod
    def detect(
        self,
        signal: np.ndarray,
        velocity: Optional[np.ndarray] = None,
        config: DetectionConfig = None
    ) -> DetectionResult:
        """
        Executa a detecção.

        Args:
            signal: Amostras de entrada (posição ou aceleração)
            velocity: Velocidades associadas (usado pelo ZUPT)
            config: Configuração opcional (sobrescreve config da instância)

        Returns:
            DetectionResult com a saída calculada em `output`
        """
        pass


class DetectorRegistry:
    """
    Registry para detectores.

    Permite registrar e recuperar detectores por nome.
    """

    _detectors: Dict[str, Type[MotionDetector]] = {}

    @classmethod
    def register(cls, detector_class: Type[MotionDetector]) -> Type[MotionDetector]:
        """
        Decorator para registrar um detector.

        Uso:
            @DetectorRegistry.register
            class MyDetector(MotionDetector):
                name = "my_detector"
                ...
        """
        cls._detectors[detector_class.name] = detector_class
        return detector_class

    @classmethod
    def get(cls, name: str) -> Optional[Type[MotionDetector]]:
        """Retorna classe do detector pelo nome."""
        return cls._detectors.get(name)

    @classmethod
    def create(
        cls,
        name: str,
        config: DetectionConfig = None,
        **kwargs
    ) -> MotionDetector:
        """
        Cria instância de um detector pelo nome.

        Raises:
            ValueError: Se detector não encontrado
        """
        detector_class = cls._detectors.get(name)
        if detector_class is None:
            available = list(cls._detectors.keys())
            raise ValueError(f"Detector '{name}' não encontrado. Disponíveis: {available}")
        return detector_class(config=config, **kwargs)

    @classmethod
    def list_detectors(cls) -> List[str]:
        """Lista todos os detectores registrados."""
        return list(cls._detectors.keys())

    @classmethod
    def get_info(cls) -> List[Dict[str, str]]:
        """Retorna informações de todos os detectores."""
        return [
            {"name": d.name, "description": d.description}
            for d in cls._detectors.values()
        ]
