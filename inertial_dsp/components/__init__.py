"""
Componentes de processamento: filtros de sinal e detectores.
"""
