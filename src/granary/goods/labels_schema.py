from __future__ import annotations
from pydantic import BaseModel, field_validator
from typing import Dict
from .kinds import Goods, parse_goods


class StorageConfig(BaseModel):
	container_capacity: float
	storage_capacity: float
	labels: Dict[Goods, str] = {}

	@field_validator("labels", mode="before")
	@classmethod
	def _parse_label_keys(cls, v):
		if v is None:
			return {}
		if not isinstance(v, dict):
			raise ValueError("labels must be a mapping of goods kind to display label")
		return {parse_goods(k): str(label) for k, label in v.items()}
