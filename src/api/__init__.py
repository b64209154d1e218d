"""API: camada de borda: adapta entradas externas para modelos internos.

Subpastas:
- normalizers/: conversão de listas exportadas/coladas → UserRecord

NÃO PODE conter: regras de comparação, persistência, orquestração de use cases.
"""
