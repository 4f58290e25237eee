# src/denvar/export/__init__.py
"""
Exportação de ambientes para sinks remotos de configuração.

O core apenas produz a sequência ordenada de pares (chave, valor); este
pacote entrega cada par a um sink, um de cada vez, registrando o
resultado individual sem interromper a sequência em caso de falha.
"""
