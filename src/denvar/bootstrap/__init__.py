# src/denvar/bootstrap/__init__.py
"""Criação de arquivos de exemplo e descoberta do arquivo de ambiente."""
