"""
Módulo de Processamento de Sinais.

Contém componentes para suavização e filtragem de sinais de sensores:

- filters/: Filtros de sinal (média móvel, passa-baixa, exponencial)
"""

# Importar submódulos principais
from . import filters
