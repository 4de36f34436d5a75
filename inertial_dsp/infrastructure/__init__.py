"""
Infraestrutura: configuração, fontes de dados e visualização.
"""
