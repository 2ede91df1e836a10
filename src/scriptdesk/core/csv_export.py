# -*- coding: utf-8 -*-
"""
scriptdesk/core/csv_export.py

CSV 导出（以及拆解表的读回）。

- 表头固定（BREAKDOWN_HEADER / SHOT_LIST_HEADER）
- 标准 CSV 引用：含逗号/双引号/换行的字段整体加引号，内部双引号写成两个
"""

from __future__ import annotations

import csv
import io
from typing import Iterable, List

from scriptdesk.core.schemas import BreakdownElementSet, ShotRecord


BREAKDOWN_HEADER = ["Category", "Element"]

SHOT_LIST_HEADER = [
	"Scene",
	"Shot",
	"Description",
	"Type",
	"Angle",
	"Movement",
	"Equipment",
	"Lens",
	"Framing",
	"Duration",
	"Frame Rate",
	"Notes",
]


def _writer(buf: io.StringIO):
	return csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")


def breakdown_to_csv(elements: BreakdownElementSet) -> str:
	buf = io.StringIO()
	w = _writer(buf)
	w.writerow(BREAKDOWN_HEADER)
	for category, items in elements:
		for item in items:
			w.writerow([category, item])
	return buf.getvalue()


def shots_to_csv(shots: Iterable[ShotRecord]) -> str:
	buf = io.StringIO()
	w = _writer(buf)
	w.writerow(SHOT_LIST_HEADER)
	for s in shots:
		w.writerow([
			s.scene,
			s.shot_number,
			s.description,
			s.type,
			s.angle,
			s.movement,
			s.equipment,
			s.lens,
			s.framing,
			s.duration,
			s.frame_rate,
			s.notes,
		])
	return buf.getvalue()


def read_breakdown_csv(text: str) -> BreakdownElementSet:
	"""
	读回 breakdown_to_csv 的输出。
	表头不对直接 raise ValueError；空行跳过。
	"""
	rows: List[List[str]] = list(csv.reader(io.StringIO(text)))
	if not rows or rows[0] != BREAKDOWN_HEADER:
		raise ValueError("not a breakdown CSV: header mismatch")

	out = BreakdownElementSet()
	for row in rows[1:]:
		if not row:
			continue
		if len(row) != 2:
			raise ValueError(f"bad breakdown row: {row!r}")
		out.append(row[0], row[1])
	return out
