# -*- coding: utf-8 -*-
"""
scriptdesk/core/store.py

持久化：key -> JSON blob 的最小存储（每个 key 一个 <root>/<key>.json）。

语义：
- 写即覆盖（last-write-wins），没有事务
- 读不到 / 读坏了：返回 default，并打 warning（不让会话起不来）
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonStore:
	def __init__(self, root: str | Path):
		self.root = Path(root)

	def _path(self, key: str) -> Path:
		if not _KEY_RE.match(key) or key in (".", ".."):
			raise ValueError(f"invalid store key: {key!r}")
		return self.root / f"{key}.json"

	def get(self, key: str, default: Any = None) -> Any:
		path = self._path(key)
		if not path.exists():
			return default

		try:
			return json.loads(path.read_text(encoding="utf-8"))
		except (OSError, ValueError) as e:
			logger.warning("[store] failed to read %s, using default: %s", path, e)
			return default

	def set(self, key: str, value: Any) -> None:
		path = self._path(key)
		path.parent.mkdir(parents=True, exist_ok=True)
		path.write_text(json.dumps(value, ensure_ascii=False, indent=2), encoding="utf-8")

	def delete(self, key: str) -> None:
		path = self._path(key)
		if path.exists():
			path.unlink()
