"""
Router principal da API.

Cada endpoint copia as amostras recebidas para um buffer de saída
e chama a função correspondente; com entrada inválida o buffer não
é tocado e a resposta repete a entrada com status "invalid_input".
"""

import logging
from typing import Any, Dict, List, Tuple

import numpy as np
from fastapi import APIRouter, Depends

from .schemas import (
    MovingAverageRequest,
    LowPassRequest,
    ExponentialRequest,
    MotionRequest,
    ZuptRequest,
    PipelineRequest,
    SignalResponse,
    ZuptResponse,
    PipelineResponse,
)
from .dependencies import validate_api_key
from ..components.signal_processing.filters import (
    FilterRegistry,
    FilterPipeline,
    calculate_moving_average,
    butterworth_low_pass,
    exponential_smoothing_in_place,
)
from ..components.motion_detection import DetectorRegistry, apply_zupt, detect_movement

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(validate_api_key)])


def _buffers(samples: List[float]) -> Tuple[np.ndarray, np.ndarray]:
    input_data = np.asarray(samples, dtype=float)
    return input_data, input_data.copy()


@router.get("/filters", summary="Lista filtros registrados")
def list_filters() -> Dict[str, str]:
    return FilterRegistry.list_filters()


@router.get("/detectors", summary="Lista detectores registrados")
def list_detectors() -> List[Dict[str, str]]:
    return DetectorRegistry.get_info()


@router.post("/filters/moving-average", response_model=SignalResponse)
def moving_average(request: MovingAverageRequest) -> SignalResponse:
    input_data, output = _buffers(request.samples)
    status = calculate_moving_average(input_data, output, request.window_size, request.data_size)
    return SignalResponse(status=status.value, output=output.tolist())


@router.post("/filters/lowpass", response_model=SignalResponse)
def lowpass(request: LowPassRequest) -> SignalResponse:
    input_data, output = _buffers(request.samples)
    status = butterworth_low_pass(
        input_data,
        output,
        request.cutoff_frequency,
        request.sampling_rate,
        request.data_size,
    )
    return SignalResponse(status=status.value, output=output.tolist())


@router.post("/filters/exponential", response_model=SignalResponse)
def exponential(request: ExponentialRequest) -> SignalResponse:
    _, data = _buffers(request.samples)
    status = exponential_smoothing_in_place(data, request.data_size, request.alpha)
    return SignalResponse(status=status.value, output=data.tolist())


@router.post("/detectors/motion", response_model=SignalResponse)
def motion(request: MotionRequest) -> SignalResponse:
    input_data, output = _buffers(request.samples)
    status = detect_movement(
        input_data,
        output,
        request.threshold,
        request.sampling_rate,
        request.data_size,
    )
    return SignalResponse(status=status.value, output=output.tolist())


@router.post("/detectors/zupt", response_model=ZuptResponse)
def zupt(request: ZuptRequest) -> ZuptResponse:
    velocity = np.asarray(request.velocity, dtype=float)
    status = apply_zupt(
        velocity,
        np.asarray(request.accel, dtype=float),
        request.threshold,
        request.continuous_count_threshold,
        request.data_size,
    )
    return ZuptResponse(status=int(status), velocity=velocity.tolist())


@router.post("/pipeline", response_model=PipelineResponse)
def pipeline(request: PipelineRequest) -> PipelineResponse:
    try:
        chain = FilterPipeline(request.filters)
        output = chain.apply(np.asarray(request.samples, dtype=float))
    except (KeyError, ValueError, TypeError) as e:
        logger.warning("Pipeline inválido %s: %s", request.filters, e)
        return PipelineResponse(success=False, error=str(e))

    steps: List[Dict[str, Any]] = chain.describe()
    return PipelineResponse(success=True, output=output.tolist(), steps=steps)
