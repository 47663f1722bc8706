from __future__ import annotations
import os
from functools import lru_cache
from pathlib import Path
from typing import Dict

_DEFAULTS: Dict[str, str] = {
    # Importação de clientes
    "CUSTOMERS_IMPORT": "data/raw/clientes.xlsx",
    "CUSTOMERS_REPORT": "data/processed/clientes_validados.csv",
    # Contratos de dados
    "DATA_CONTRACTS": "data/docs/data_contracts.yaml",
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}

def _coerce(p: str) -> str:
    # normaliza separador e expande ~ e vars
    return str(Path(os.path.expandvars(os.path.expanduser(p))))

@lru_cache(maxsize=1)
def paths() -> Dict[str, str]:
    """
    Retorna um dicionário de paths:
    - ENV tem prioridade (chave igual ao nome exato, p.ex. CUSTOMERS_IMPORT)
    - overrides definidos via set_paths()
    - defaults do projeto
    Como o resultado fica em cache, mudanças de ENV exigem reset_paths().
    """
    merged: Dict[str, str] = {}
    for k, default in _DEFAULTS.items():
        env_val = os.environ.get(k)
        if env_val:
            merged[k] = _coerce(env_val)
        elif k in _runtime_overrides:
            merged[k] = _runtime_overrides[k]
        else:
            merged[k] = _coerce(default)
    return dict(merged)

def set_paths(overrides: Dict[str, str]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de paths().
    """
    _runtime_overrides.update({k: _coerce(v) for k, v in (overrides or {}).items()})
    paths.cache_clear()

def reset_paths() -> None:
    """Descarta overrides e o cache."""
    _runtime_overrides.clear()
    paths.cache_clear()

def path(key: str) -> str:
    """Atalho: paths()[key] com KeyError amigável."""
    p = paths()
    if key not in p:
        raise KeyError(f"Path '{key}' não configurado. Chaves válidas: {', '.join(sorted(p.keys()))}")
    return p[key]
