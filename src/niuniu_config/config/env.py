"""Environment overlay for configuration documents.

Every leaf field of the schema is bound to one environment variable name:
the document keys along the path, joined with '.' and uppercased.

    AppName                  -> APPNAME
    DbConfig.maxIdle         -> DBCONFIG.MAXIDLE
    MsgChannelType.KafkaHosts -> MSGCHANNELTYPE.KAFKAHOSTS

Variable names are matched case-insensitively, and '__' may be used
instead of '.' (DBCONFIG__MAXIDLE) since most shells reject dots in names.
A variable that is set but empty counts as unset, so the file value stays.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from niuniu_config.config.constants import ENV_KEY_SEPARATOR, ENV_KEY_SHELL_SEPARATOR
from niuniu_config.config.schemas import Config
from niuniu_config.data_model.base import submodel_type


@dataclass(frozen=True)
class EnvBinding:
    """One entry of the environment binding table.

    Attributes:
        env_key: Canonical variable name, e.g. 'DBCONFIG.DSN'.
        path: Field names from the root record down to the leaf.
        document_key: Dotted document spelling, e.g. 'DbConfig.dsn'.
    """

    env_key: str
    path: tuple[str, ...]
    document_key: str


def build_env_bindings(
    model_cls: type[BaseModel] = Config,
    _prefix: tuple[tuple[str, str], ...] = (),
) -> tuple[EnvBinding, ...]:
    """Build the binding table for every leaf field of a model.

    Args:
        model_cls: Root model to walk.

    Returns:
        Bindings in schema declaration order.
    """
    bindings: list[EnvBinding] = []
    for name, field in model_cls.model_fields.items():
        step = (name, field.alias or name)
        nested = submodel_type(model_cls, name)
        if nested is not None:
            bindings.extend(build_env_bindings(nested, (*_prefix, step)))
            continue
        steps = (*_prefix, step)
        document_key = ENV_KEY_SEPARATOR.join(alias for _, alias in steps)
        bindings.append(
            EnvBinding(
                env_key=document_key.upper(),
                path=tuple(field_name for field_name, _ in steps),
                document_key=document_key,
            )
        )
    return tuple(bindings)


CONFIG_ENV_BINDINGS = build_env_bindings(Config)


def canonical_env_key(name: str) -> str:
    """Normalize an environment variable name for binding lookup."""
    return name.upper().replace(ENV_KEY_SHELL_SEPARATOR, ENV_KEY_SEPARATOR)


def collect_env_overrides(
    environ: Mapping[str, str],
    bindings: tuple[EnvBinding, ...] = CONFIG_ENV_BINDINGS,
) -> dict[EnvBinding, str]:
    """Pick the environment variables that name a bound key.

    Empty values are skipped. When several spellings of the same key are
    set, the one using the canonical '.' form wins.

    Args:
        environ: Process environment or a test mapping.
        bindings: Binding table to match against.

    Returns:
        Mapping of matched binding to its raw string value.
    """
    by_key = {binding.env_key: binding for binding in bindings}
    overrides: dict[EnvBinding, str] = {}
    canonical_hits: set[EnvBinding] = set()
    for name, value in environ.items():
        binding = by_key.get(canonical_env_key(name))
        if binding is None or value == "":
            continue
        is_canonical = ENV_KEY_SHELL_SEPARATOR not in name
        if binding in canonical_hits and not is_canonical:
            continue
        overrides[binding] = value
        if is_canonical:
            canonical_hits.add(binding)
    return overrides


def apply_env_overrides(
    data: Mapping[str, Any], overrides: Mapping[EnvBinding, str]
) -> dict[str, Any]:
    """Overlay environment values on a folded document.

    Args:
        data: Document already folded onto field names.
        overrides: Values returned by collect_env_overrides.

    Returns:
        New document; the input is left untouched.
    """
    merged = _copy_tree(data)
    for binding, value in overrides.items():
        node: Any = merged
        for field_name in binding.path[:-1]:
            if not isinstance(node, dict):
                break
            node = node.setdefault(field_name, {})
        # A scalar where a sub-record belongs is left for decoding to reject.
        if isinstance(node, dict):
            node[binding.path[-1]] = value
    return merged


def _copy_tree(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: _copy_tree(value) if isinstance(value, Mapping) else value
        for key, value in data.items()
    }
