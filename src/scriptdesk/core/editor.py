# -*- coding: utf-8 -*-
"""
scriptdesk/core/editor.py

编辑器表面的最小模型：纯文本 + 高亮区间。

只提供两种能力：
- 读：selected_text() / plain_text()
- 写：apply_highlight()（给字符区间加底色 + 前景色）

不做任何富文本格式（粗体、标题等），那是 UI 的事。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Selection:
	"""半开区间 [start, end)，按字符计。"""
	start: int
	end: int

	@property
	def length(self) -> int:
		return self.end - self.start


@dataclass
class Highlight:
	start: int
	end: int
	background: str
	color: str = "#000000"


@dataclass
class ScriptDocument:
	text: str = ""
	highlights: List[Highlight] = field(default_factory=list)

	def _check(self, sel: Selection) -> None:
		if sel.start < 0 or sel.end > len(self.text) or sel.start > sel.end:
			raise ValueError(f"selection out of range: [{sel.start},{sel.end}) for text of length {len(self.text)}")

	def plain_text(self) -> str:
		return self.text

	def selected_text(self, sel: Selection) -> str:
		self._check(sel)
		return self.text[sel.start:sel.end]

	def apply_highlight(self, sel: Selection, background: str, color: str = "#000000") -> Highlight:
		self._check(sel)
		h = Highlight(start=sel.start, end=sel.end, background=background, color=color)
		self.highlights.append(h)
		return h

	def highlights_at(self, index: int) -> List[Highlight]:
		return [h for h in self.highlights if h.start <= index < h.end]

	def to_dict(self) -> Dict[str, Any]:
		return {
			"text": self.text,
			"highlights": [
				{"start": h.start, "end": h.end, "background": h.background, "color": h.color}
				for h in self.highlights
			],
		}

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "ScriptDocument":
		return cls(
			text=data.get("text", ""),
			highlights=[Highlight(**h) for h in data.get("highlights", [])],
		)
