"""Shared Pydantic base models."""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


def normalize_key(key: str) -> str:
    """Normalize a document key for case-insensitive matching.

    Args:
        key: Raw key as written in the document or environment.

    Returns:
        Lowercased key with underscores removed.
    """
    return key.lower().replace("_", "")


def submodel_type(model_cls: type[BaseModel], field_name: str) -> type[BaseModel] | None:
    """Return the nested model class of a field, if the field is a sub-record."""
    annotation = model_cls.model_fields[field_name].annotation
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    return None


@lru_cache(maxsize=None)
def field_lookup(model_cls: type[BaseModel]) -> dict[str, str]:
    """Map every accepted key spelling of a model to its field name.

    A field is addressable by its Python name and by its alias, both
    compared through normalize_key.
    """
    lookup: dict[str, str] = {}
    for name, field in model_cls.model_fields.items():
        lookup[normalize_key(name)] = name
        if field.alias:
            lookup[normalize_key(field.alias)] = name
    return lookup


def fold_keys(model_cls: type[BaseModel], data: Mapping[Any, Any]) -> dict[str, Any]:
    """Fold a raw mapping onto the field names of a model.

    Unknown keys and null values are dropped so that the corresponding
    fields keep their defaults. Nested mappings are folded recursively.

    Args:
        model_cls: Model whose fields the keys are matched against.
        data: Raw mapping, typically parsed YAML.

    Returns:
        New dictionary keyed by field name.
    """
    lookup = field_lookup(model_cls)
    folded: dict[str, Any] = {}
    for key, value in data.items():
        name = lookup.get(normalize_key(str(key)))
        if name is None or value is None:
            continue
        nested = submodel_type(model_cls, name)
        if nested is not None and isinstance(value, Mapping):
            value = fold_keys(nested, value)
        folded[name] = value
    return folded


class FoldedBaseModel(BaseModel):
    """Base model for configuration records.

    Records are immutable, ignore unknown keys, and accept keys in any
    case. Numbers are coerced to strings for text fields.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def fold_document_keys(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return fold_keys(cls, data)
        return data
