# -*- coding: utf-8 -*-
"""
scriptdesk/core/session.py

两个工作流的会话状态（原先在 UI 组件里）：
- ShotListSession：剧本 + 镜头列表；增/改/删按 id
- BreakdownSession：剧本文档（含高亮）+ 拆解元素集合

原则：
- 会话开始时从 JsonStore 读；每次修改立刻写回（last-write-wins）
- 不调用模型：AI 结果由调用方拿 service 的结果再交给 add_generated / accept_suggestion
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, List, Optional

from scriptdesk.core.editor import ScriptDocument, Selection
from scriptdesk.core.schemas import (
	BreakdownElementSet,
	ELEMENT_COLORS,
	ShotRecord,
	new_shot,
)
from scriptdesk.core.store import JsonStore


SHOT_LIST_KEY = "shot_list"
SHOT_LIST_SCRIPT_KEY = "shot_list_script"
BREAKDOWN_KEY = "script_breakdown"
BREAKDOWN_DOCUMENT_KEY = "breakdown_document"

# 从选区预填镜头描述时截取的长度
SELECTION_DESCRIPTION_CHARS = 150


class ShotListSession:
	def __init__(self, store: JsonStore):
		self.store = store
		self.shots: List[ShotRecord] = [
			ShotRecord.from_dict(d) for d in store.get(SHOT_LIST_KEY, []) if isinstance(d, dict)
		]
		self.script: str = store.get(SHOT_LIST_SCRIPT_KEY, "") or ""

	def _save_shots(self) -> None:
		self.store.set(SHOT_LIST_KEY, [s.to_dict() for s in self.shots])

	def set_script(self, text: str) -> None:
		self.script = text
		self.store.set(SHOT_LIST_SCRIPT_KEY, text)

	def get(self, shot_id: str) -> Optional[ShotRecord]:
		for s in self.shots:
			if s.id == shot_id:
				return s
		return None

	def next_shot_number(self, scene: str) -> str:
		return str(sum(1 for s in self.shots if s.scene == scene) + 1)

	def add(self, shot: ShotRecord) -> ShotRecord:
		if self.get(shot.id) is not None:
			raise ValueError(f"duplicate shot id: {shot.id}")
		self.shots.append(shot)
		self._save_shots()
		return shot

	def update(self, shot_id: str, **changes: Any) -> ShotRecord:
		for i, s in enumerate(self.shots):
			if s.id == shot_id:
				if "id" in changes:
					raise ValueError("shot id cannot be changed")
				updated = replace(s, **changes)
				self.shots[i] = updated
				self._save_shots()
				return updated
		raise KeyError(f"shot not found: {shot_id}")

	def delete(self, shot_id: str) -> None:
		before = len(self.shots)
		self.shots = [s for s in self.shots if s.id != shot_id]
		if len(self.shots) == before:
			raise KeyError(f"shot not found: {shot_id}")
		self._save_shots()

	def add_generated(self, shots: Iterable[ShotRecord], current_scene: str = "1") -> List[ShotRecord]:
		"""AI 生成的镜头追加到末尾；scene 为空的补当前场次。"""
		added = []
		for s in shots:
			if not s.scene:
				s = replace(s, scene=current_scene)
			if self.get(s.id) is not None:
				raise ValueError(f"duplicate shot id: {s.id}")
			self.shots.append(s)
			added.append(s)
		if added:
			self._save_shots()
		return added

	def shot_from_selection(self, document: ScriptDocument, selection: Selection, scene: str = "1") -> ShotRecord:
		"""
		从剧本选区起一个新镜头（尚未加入列表）：
		- description 取选中文本前 150 字符
		- script_segment 保留完整选中文本
		"""
		selected = document.selected_text(selection)
		shot = new_shot(scene=scene, shot_number=self.next_shot_number(scene))
		return replace(
			shot,
			description=selected[:SELECTION_DESCRIPTION_CHARS],
			script_segment=selected,
		)


class BreakdownSession:
	def __init__(self, store: JsonStore):
		self.store = store
		self.elements = BreakdownElementSet.from_payload(store.get(BREAKDOWN_KEY, {}))
		doc = store.get(BREAKDOWN_DOCUMENT_KEY)
		self.document = ScriptDocument.from_dict(doc) if isinstance(doc, dict) else ScriptDocument()

	def _save_elements(self) -> None:
		self.store.set(BREAKDOWN_KEY, self.elements.to_dict())

	def _save_document(self) -> None:
		self.store.set(BREAKDOWN_DOCUMENT_KEY, self.document.to_dict())

	def set_script(self, text: str) -> None:
		# 换剧本：旧高亮的位置已失效
		self.document = ScriptDocument(text=text)
		self._save_document()

	def add(self, category: str, item: str) -> None:
		self.elements.append(category, item)
		self._save_elements()

	def remove(self, category: str, index: int) -> str:
		item = self.elements.remove(category, index)
		self._save_elements()
		return item

	def accept_suggestion(self, category: str, item: str) -> None:
		self.add(category, item)

	def accept_all(self, suggestions: BreakdownElementSet) -> int:
		self.elements.extend(suggestions)
		self._save_elements()
		return suggestions.total()

	def tag_selection(self, selection: Selection, category: str) -> str:
		"""
		标注选区：
		- 选中文本 strip 后加入对应类别
		- 选区上高亮（类别色底 + 黑字）
		"""
		if category not in ELEMENT_COLORS:
			raise ValueError(f"unknown breakdown category: {category}")

		text = self.document.selected_text(selection).strip()
		if not text:
			raise ValueError("empty selection")

		self.elements.append(category, text)
		self.document.apply_highlight(selection, background=ELEMENT_COLORS[category], color="#000000")
		self._save_elements()
		self._save_document()
		return text
