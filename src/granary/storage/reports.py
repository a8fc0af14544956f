from __future__ import annotations
import json
import math
from pathlib import Path
from typing import Any, Dict, List
import pandas as pd
from .ledger import StorageLedger

COLUMNS = ["kind", "label", "amount", "free_space", "fill_fraction"]


def snapshot_frame(ledger: StorageLedger) -> pd.DataFrame:
	cap = ledger.container_capacity
	rows: List[Dict[str, Any]] = []
	for kind, amount in ledger.snapshot().items():
		rows.append({
			"kind": kind.value,
			"label": ledger.label_of(kind),
			"amount": amount,
			"free_space": ledger.free_space_of(kind),
			# zero-capacity containers count as full
			"fill_fraction": amount / cap if cap > 0 else 1.0,
		})
	return pd.DataFrame(rows, columns=COLUMNS)


def summarize(ledger: StorageLedger) -> Dict[str, Any]:
	max_containers = ledger.max_containers
	unlimited = math.isinf(max_containers)
	return {
		"container_capacity": ledger.container_capacity,
		"storage_capacity": ledger.storage_capacity,
		"max_containers": None if unlimited else int(max_containers),
		"containers": len(ledger),
		"free_slots": None if unlimited else int(ledger.free_slots),
		"total_amount": float(sum(ledger.snapshot().values())),
	}


def write_report(ledger: StorageLedger, out_dir: Path) -> None:
	out_dir = Path(out_dir)
	out_dir.mkdir(parents=True, exist_ok=True)
	snapshot_frame(ledger).to_csv(out_dir / "containers.csv", index=False)
	with (out_dir / "summary.json").open("w", encoding="utf-8") as f:
		json.dump(summarize(ledger), f, indent=2)
