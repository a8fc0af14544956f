from __future__ import annotations


class StorageError(Exception):
	pass


class InvalidArgument(StorageError, ValueError):
	"""Negative or non-numeric amount, or inconsistent capacities."""


class CapacityExceeded(StorageError, RuntimeError):
	"""No free slot left for another container."""


class NotFound(StorageError, KeyError):
	"""The requested container does not exist."""

	def __str__(self) -> str:
		# KeyError repr()s its message otherwise
		return str(self.args[0]) if self.args else ""
