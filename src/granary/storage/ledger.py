from __future__ import annotations
import logging
import math
from typing import Dict, Iterator, Mapping
from ..goods.kinds import Goods, label_of, parse_goods
from .errors import CapacityExceeded, InvalidArgument, NotFound

logger = logging.getLogger(__name__)

EMPTY_STORAGE_TEXT = "Storage holds no containers"


class StorageLedger:
	"""Containers of bulk goods inside a storage of fixed total capacity.

	At most one container per kind. The number of containers is bounded by
	floor(storage_capacity / container_capacity).
	"""

	def __init__(
		self,
		container_capacity: float,
		storage_capacity: float,
		labels: Mapping[Goods, str] | None = None,
	):
		container_capacity = float(container_capacity)
		storage_capacity = float(storage_capacity)
		if not container_capacity >= 0:
			raise InvalidArgument(f"Container capacity must not be negative, got {container_capacity}")
		if not storage_capacity >= container_capacity:
			raise InvalidArgument(
				f"Storage capacity {storage_capacity} is less than container capacity {container_capacity}"
			)
		self._container_capacity = container_capacity
		self._storage_capacity = storage_capacity
		self._labels: Dict[Goods, str] = dict(labels) if labels else {}
		self._contents: Dict[Goods, float] = {}

	@property
	def container_capacity(self) -> float:
		return self._container_capacity

	@property
	def storage_capacity(self) -> float:
		return self._storage_capacity

	@property
	def max_containers(self) -> float:
		# x/0 is unlimited, 0/0 and inf/inf leave no slot at all
		if self._container_capacity == 0:
			return math.inf if self._storage_capacity > 0 else 0
		slots = self._storage_capacity / self._container_capacity
		if math.isnan(slots):
			return 0
		if math.isinf(slots):
			return math.inf
		return math.floor(slots)

	@property
	def free_slots(self) -> float:
		return self.max_containers - len(self._contents)

	def add_goods(self, kind: Goods, amount: float) -> float:
		"""Pour goods into the container of this kind, creating it if needed.

		Returns the amount that did not fit. Raises CapacityExceeded when a new
		container is needed but every slot is taken.
		"""
		kind = _checked_kind(kind)
		amount = _checked_amount(amount, "add")
		if kind not in self._contents:
			if self.free_slots <= 0:
				raise CapacityExceeded(
					f"No free slot for a {kind.value} container: "
					f"{len(self._contents)} of {self.max_containers} in use"
				)
			logger.debug("Creating %s container", kind.value)
			self._contents[kind] = 0.0
		total = self._contents[kind] + amount
		if total <= self._container_capacity:
			self._contents[kind] = total
			return 0.0
		self._contents[kind] = self._container_capacity
		remainder = total - self._container_capacity
		logger.debug("%s container full, %s left over", kind.value, remainder)
		return remainder

	def take_goods(self, kind: Goods, amount: float) -> float:
		"""Take up to `amount` out of the container; returns what was actually taken."""
		kind = _checked_kind(kind)
		amount = _checked_amount(amount, "take")
		current = self.amount_of(kind)
		if current >= amount:
			if kind in self._contents:
				self._contents[kind] = current - amount
			return amount
		if kind in self._contents:
			self._contents[kind] = 0.0
		return current

	def remove_container(self, kind: Goods) -> bool:
		kind = _checked_kind(kind)
		if self._contents.get(kind) != 0.0:
			return False
		del self._contents[kind]
		logger.debug("Removed empty %s container", kind.value)
		return True

	def amount_of(self, kind: Goods) -> float:
		return self._contents.get(_checked_kind(kind), 0.0)

	def free_space_of(self, kind: Goods) -> float:
		kind = _checked_kind(kind)
		if kind not in self._contents:
			raise NotFound(f"No {kind.value} container in storage")
		return self._container_capacity - self._contents[kind]

	def has_container(self, kind: Goods) -> bool:
		return _checked_kind(kind) in self._contents

	def label_of(self, kind: Goods) -> str:
		return label_of(_checked_kind(kind), self._labels)

	def snapshot(self) -> Dict[Goods, float]:
		return {kind: self._contents[kind] for kind in self}

	def describe(self) -> str:
		if not self._contents:
			return EMPTY_STORAGE_TEXT
		return "\n".join(f"{self.label_of(kind)}: {self._contents[kind]}" for kind in self)

	def __iter__(self) -> Iterator[Goods]:
		# Declaration order of Goods keeps describe() stable
		return (kind for kind in Goods if kind in self._contents)

	def __contains__(self, kind: object) -> bool:
		try:
			return _checked_kind(kind) in self._contents
		except InvalidArgument:
			return False

	def __len__(self) -> int:
		return len(self._contents)

	def __str__(self) -> str:
		return self.describe()

	def __repr__(self) -> str:
		return (
			f"StorageLedger(container_capacity={self._container_capacity}, "
			f"storage_capacity={self._storage_capacity}, containers={len(self._contents)})"
		)


def _checked_kind(kind: object) -> Goods:
	try:
		return parse_goods(kind)
	except ValueError:
		raise InvalidArgument(f"Unknown goods kind {kind!r}") from None


def _checked_amount(amount: float, action: str) -> float:
	amount = float(amount)
	if not amount >= 0:
		raise InvalidArgument(f"Amount to {action} must not be negative, got {amount}")
	return amount
