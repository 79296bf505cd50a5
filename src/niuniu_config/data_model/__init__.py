"""Shared data model primitives."""

from niuniu_config.data_model.base import FoldedBaseModel, fold_keys, normalize_key


__all__ = ["FoldedBaseModel", "fold_keys", "normalize_key"]
