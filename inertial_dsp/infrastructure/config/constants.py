"""
Constantes numéricas dos filtros e detectores.

Centraliza valores que antes ficavam embutidos nas fórmulas,
para que o ajuste de frequência de corte e de suavização
seja explícito e testável isoladamente.
"""

import math

# Filtro passa-baixa de primeira ordem: RC = 1 / (2π·fc)
TWO_PI = 2.0 * math.pi

# Suavização exponencial in-place (variante de parâmetro único)
DEFAULT_SMOOTHING_ALPHA = 0.1

# Diferença finita de segunda ordem precisa de ao menos um ponto interior
MIN_MOTION_SAMPLES = 3

# Valores da máscara de movimento
MOTION_DETECTED = 1.0
NO_MOTION = 0.0

# Valor escrito na velocidade durante um intervalo estacionário
ZERO_VELOCITY = 0.0
