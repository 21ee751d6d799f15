# src/component_framework/core/__init__.py
"""
Core do Component Framework.

Este pacote reúne as peças independentes da aplicação host concreta:

Componentes principais:
    - registry → descoberta de componentes e mapa nome → módulo
    - config   → settings em camadas (template + YAML + override)
    - host     → colaborador aplicação host (paths, initializers, assets)
    - options  → opções imutáveis de inicialização
    - log      → log de inicialização condicionado a `verbose`
    - errors   → hierarquia de exceções

Princípios fundamentais:
    - Nenhuma decisão silenciosa: falhas de resolução são fatais e tipadas
    - Artefatos opcionais ausentes nunca são erro
    - Listas de paths são sempre ordenadas
"""
