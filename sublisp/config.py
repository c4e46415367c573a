from __future__ import annotations
import os
from dataclasses import dataclass, replace


_DEFAULT_MAX_DEPTH = 200
_DEFAULT_LOG_LEVEL = 'WARNING'

_TRUTHY = {'1', 'true', 'yes', 'on'}

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass(frozen=True)
class Settings:
    """Evaluation limits shared by one top-level evaluation.

    `max_depth` bounds nested evaluations, not procedure calls. A recursive step
    written with self-application, such as mapping over a list, nests about three
    levels (the if-form, the call holding the recursive call, the call itself),
    so the default of 200 allows roughly 65 recursive steps.
    """

    max_depth: int = _DEFAULT_MAX_DEPTH
    # Reject calls whose argument count differs from the parameter count.
    # Off by default: unmatched parameters are left as free symbols.
    strict_arity: bool = False

    def with_overrides(self, **changes) -> Settings:
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f'{var} must be an integer, got {raw!r}') from None
    if value <= 0:
        raise ValueError(f'{var} must be positive, got {value}')
    return value


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def load_settings() -> Settings:
    return Settings(
        max_depth=int_from_env('SUBLISP_MAX_DEPTH', _DEFAULT_MAX_DEPTH),
        strict_arity=flag_from_env('SUBLISP_STRICT_ARITY'),
    )


def get_log_level() -> str:
    level = os.environ.get('SUBLISP_LOG_LEVEL', '').strip().upper()
    return level if level in LOG_LEVELS else _DEFAULT_LOG_LEVEL
