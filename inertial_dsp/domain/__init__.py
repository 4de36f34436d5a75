"""
Camada de domínio: entidades e validadores.
"""
