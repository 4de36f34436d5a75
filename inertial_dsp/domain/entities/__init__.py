"""
Domain Entities - Modelos de dados do domínio.
"""

from .sensor_data import SensorSeries
from .parameters import FilterParameters

__all__ = [
    "SensorSeries",
    "FilterParameters",
]
