from __future__ import annotations
from enum import Enum
from typing import Dict, Mapping


class Goods(Enum):
	BUCKWHEAT = "buckwheat"
	RICE = "rice"
	MILLET = "millet"
	PEAS = "peas"
	BULGUR = "bulgur"


DEFAULT_LABELS: Dict[Goods, str] = {
	Goods.BUCKWHEAT: "Buckwheat",
	Goods.RICE: "Rice",
	Goods.MILLET: "Millet",
	Goods.PEAS: "Peas",
	Goods.BULGUR: "Bulgur",
}


def parse_goods(name: str | Goods) -> Goods:
	"""Accept a member, its name or its value, case-insensitive."""
	if isinstance(name, Goods):
		return name
	key = str(name).strip()
	try:
		return Goods[key.upper()]
	except KeyError:
		return Goods(key.lower())


def label_of(kind: Goods, labels: Mapping[Goods, str] | None = None) -> str:
	if labels and kind in labels:
		return labels[kind]
	return DEFAULT_LABELS[kind]
