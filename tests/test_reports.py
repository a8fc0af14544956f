import json
import pandas as pd
from granary.goods.kinds import Goods
from granary.storage.ledger import StorageLedger
from granary.storage.reports import COLUMNS, snapshot_frame, summarize, write_report


def test_snapshot_frame_rows():
	s = StorageLedger(10.0, 25.0)
	s.add_goods(Goods.RICE, 7.0)
	s.add_goods(Goods.BUCKWHEAT, 2.5)
	df = snapshot_frame(s)
	assert list(df.columns) == COLUMNS
	assert df["kind"].tolist() == ["buckwheat", "rice"]
	assert df["free_space"].tolist() == [7.5, 3.0]
	assert df["fill_fraction"].tolist() == [0.25, 0.7]


def test_snapshot_frame_empty():
	df = snapshot_frame(StorageLedger(1.0, 1.0))
	assert df.empty
	assert list(df.columns) == COLUMNS


def test_summary_with_unlimited_slots():
	s = StorageLedger(0.0, 1.0)
	s.add_goods(Goods.PEAS, 0.0)
	summary = summarize(s)
	assert summary["max_containers"] is None
	assert summary["free_slots"] is None
	assert summary["containers"] == 1


def test_write_report(tmp_path):
	s = StorageLedger(10.0, 25.0)
	s.add_goods(Goods.MILLET, 4.0)
	out = tmp_path / "report"
	write_report(s, out)
	df = pd.read_csv(out / "containers.csv")
	assert df["label"].tolist() == ["Millet"]
	with (out / "summary.json").open("r", encoding="utf-8") as f:
		summary = json.load(f)
	assert summary == {
		"container_capacity": 10.0,
		"storage_capacity": 25.0,
		"max_containers": 2,
		"containers": 1,
		"free_slots": 1,
		"total_amount": 4.0,
	}


def test_summary_with_infinite_storage():
	s = StorageLedger(1.0, float("inf"))
	s.add_goods(Goods.RICE, 0.5)
	summary = summarize(s)
	assert summary["max_containers"] is None
	assert summary["free_slots"] is None
	assert summary["total_amount"] == 0.5
