from __future__ import annotations
import yaml
from pathlib import Path
from typing import Any, Dict
from .goods.labels_schema import StorageConfig
from .storage.ledger import StorageLedger


def load_yaml_config(path: str | Path) -> Dict[str, Any]:
	p = Path(path)
	with p.open("r", encoding="utf-8") as f:
		cfg = yaml.safe_load(f)
	return cfg or {}


def load_storage_config(path: str | Path) -> StorageConfig:
	return StorageConfig.model_validate(load_yaml_config(path))


def build_ledger(cfg: Dict[str, Any] | StorageConfig) -> StorageLedger:
	if not isinstance(cfg, StorageConfig):
		cfg = StorageConfig.model_validate(cfg)
	return StorageLedger(cfg.container_capacity, cfg.storage_capacity, labels=cfg.labels)
