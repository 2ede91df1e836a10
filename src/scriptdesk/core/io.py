# -*- coding: utf-8 -*-
"""
scriptdesk/core/io.py

目的：
- 统一管理项目目录的路径约定（哪些文件放哪里）。
- 统一创建项目目录骨架（ensure_dirs）。

项目目录约定（v0.1）：
- script.txt            : 导入的剧本原文（可选，便于人工查看）
- store/<key>.json      : JsonStore 的键值文件（shot_list、script_breakdown 等）
- exports/              : CSV 导出
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ProjectPaths:
	"""
	只存路径，不做读写；ensure_dirs() 负责创建目录骨架。
	"""
	root: Path
	script: Path
	store_dir: Path
	exports_dir: Path
	breakdown_csv: Path
	shot_list_csv: Path

	def ensure_dirs(self) -> None:
		# 重复执行必须安全
		for d in (self.root, self.store_dir, self.exports_dir):
			d.mkdir(parents=True, exist_ok=True)


def project_paths(project_dir: str | Path) -> ProjectPaths:
	root = Path(project_dir)

	return ProjectPaths(
		root=root,
		script=root / "script.txt",
		store_dir=root / "store",
		exports_dir=root / "exports",
		breakdown_csv=root / "exports" / "script_breakdown.csv",
		shot_list_csv=root / "exports" / "shot_list.csv",
	)
