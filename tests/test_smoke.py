# tests/test_smoke.py


def test_smoke():
    """
    Smoke test mínimo do repositório.

    Valida apenas que o pacote é importável e expõe a fachada pública.
    Não testa nenhuma funcionalidade real.
    """
    import denvar

    assert callable(denvar.load)
    assert callable(denvar.get_npm_config)
