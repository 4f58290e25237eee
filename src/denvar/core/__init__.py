# src/denvar/core/__init__.py
"""
Core do Denvar.

Reúne a resolução de configuração propriamente dita: opções e tokens
reservados, leitura e seleção de camadas (`ConfigStore`), merge com
precedência e extração reversa (`ResolutionEngine`), além dos tipos de
resultado e do event log estruturado.

Invariantes:
    - Valores pré-existentes no espaço alvo nunca são sobrescritos
    - A camada `common` é aplicada antes da camada do ambiente
    - Nenhum estado persiste entre chamadas (o arquivo é relido sempre)

Limites explícitos:
    - Não executa comandos externos (ver `denvar.export`)
    - Não cria arquivos (ver `denvar.bootstrap`)
"""
