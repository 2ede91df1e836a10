# -*- coding: utf-8 -*-
"""
scriptdesk/core/schemas/breakdown.py

BreakdownElementSet：剧本拆解结果（固定类别 -> 有序片段列表）。

约束：
- 类别集合固定且完整（CATEGORIES），不接受新类别
- 每个类别只能 append/remove，顺序即插入顺序（展示时有意义）
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple


CATEGORIES = [
	"props",
	"wardrobe",
	"cast",
	"locations",
	"sfx",
	"vehicles",
	"animals",
	"stunts",
	"makeup",
	"equipment",
	"extras",
]

# 编辑器里给已标注片段上的底色
ELEMENT_COLORS: Dict[str, str] = {
	"props": "#FFD700",
	"wardrobe": "#FF69B4",
	"cast": "#4169E1",
	"locations": "#228B22",
	"sfx": "#FF4500",
	"vehicles": "#4682B4",
	"animals": "#8B4513",
	"stunts": "#DC143C",
	"makeup": "#BA55D3",
	"equipment": "#2F4F4F",
	"extras": "#808080",
}


def _check_category(category: str) -> None:
	if category not in CATEGORIES:
		raise ValueError(f"unknown breakdown category: {category}")


class BreakdownElementSet:
	def __init__(self, elements: Optional[Mapping[str, List[str]]] = None):
		self._elements: Dict[str, List[str]] = {c: [] for c in CATEGORIES}
		if elements:
			for category, items in elements.items():
				_check_category(category)
				self._elements[category] = list(items)

	def items(self, category: str) -> List[str]:
		_check_category(category)
		return list(self._elements[category])

	def append(self, category: str, item: str) -> None:
		_check_category(category)
		self._elements[category].append(item)

	def remove(self, category: str, index: int) -> str:
		_check_category(category)
		return self._elements[category].pop(index)

	def extend(self, other: "BreakdownElementSet") -> None:
		for category, items in other:
			self._elements[category].extend(items)

	def total(self) -> int:
		return sum(len(v) for v in self._elements.values())

	def __iter__(self) -> Iterator[Tuple[str, List[str]]]:
		for c in CATEGORIES:
			yield c, list(self._elements[c])

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, BreakdownElementSet):
			return NotImplemented
		return self.to_dict() == other.to_dict()

	def __repr__(self) -> str:
		return f"BreakdownElementSet({self.to_dict()!r})"

	def to_dict(self) -> Dict[str, List[str]]:
		return {c: list(self._elements[c]) for c in CATEGORIES}

	@classmethod
	def from_payload(cls, payload: Any) -> "BreakdownElementSet":
		"""
		从模型 payload（或本地存储）构造。

		容错：
		- 未知类别丢弃，缺失类别为空列表
		- 只保留字符串条目（strip 后非空）
		"""
		out = cls()
		if not isinstance(payload, Mapping):
			return out

		for category in CATEGORIES:
			items = payload.get(category)
			if not isinstance(items, list):
				continue
			for item in items:
				if isinstance(item, str) and item.strip():
					out._elements[category].append(item.strip())
		return out
