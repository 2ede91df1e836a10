# -*- coding: utf-8 -*-
"""
scriptdesk/core/schemas/request.py

一次分析调用的输入/输出契约：
- TaskKind：封闭的任务枚举；每个任务有固定的 payload 形状（text/object/array）
- AnalysisRequest：调用输入（不可变，调用结束即丢弃）
- AnalysisResult：结果信封 {success, data}，外加 fallback/空结果标记

调用状态机：idle -> requesting -> {succeeded, failed}
- requesting 没有中间态（不流式、无部分结果）
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping


class TaskKind(str, Enum):
	TONE = "tone"
	GRAMMAR = "grammar"
	CHARACTER = "character"
	CHARACTER_SUGGESTIONS = "character_suggestions"
	PLOT = "plot"
	SCENE = "scene"
	READABILITY = "readability"
	MANUSCRIPT = "manuscript"
	SCRIPT_BREAKDOWN = "script_breakdown"
	SHOT_LIST = "shot_list"
	PARAPHRASE = "paraphrase"
	ADVANCED_PARAPHRASE = "advanced_paraphrase"
	SUMMARIZE = "summarize"
	SYNONYMS = "synonyms"
	HUMANIZE = "humanize"


class PayloadShape(str, Enum):
	TEXT = "text"
	OBJECT = "object"
	ARRAY = "array"


TASK_SHAPES: Dict[TaskKind, PayloadShape] = {
	TaskKind.TONE: PayloadShape.OBJECT,
	TaskKind.GRAMMAR: PayloadShape.OBJECT,
	TaskKind.CHARACTER: PayloadShape.OBJECT,
	TaskKind.CHARACTER_SUGGESTIONS: PayloadShape.ARRAY,
	TaskKind.PLOT: PayloadShape.OBJECT,
	TaskKind.SCENE: PayloadShape.OBJECT,
	TaskKind.READABILITY: PayloadShape.OBJECT,
	TaskKind.MANUSCRIPT: PayloadShape.OBJECT,
	TaskKind.SCRIPT_BREAKDOWN: PayloadShape.OBJECT,
	TaskKind.SHOT_LIST: PayloadShape.ARRAY,
	TaskKind.PARAPHRASE: PayloadShape.TEXT,
	TaskKind.ADVANCED_PARAPHRASE: PayloadShape.TEXT,
	TaskKind.SUMMARIZE: PayloadShape.TEXT,
	TaskKind.SYNONYMS: PayloadShape.ARRAY,
	TaskKind.HUMANIZE: PayloadShape.TEXT,
}

# 失败信息前缀："<label> failed: <upstream message>"
TASK_LABELS: Dict[TaskKind, str] = {
	TaskKind.TONE: "Tone analysis",
	TaskKind.GRAMMAR: "Grammar check",
	TaskKind.CHARACTER: "Character analysis",
	TaskKind.CHARACTER_SUGGESTIONS: "Character suggestions",
	TaskKind.PLOT: "Plot analysis",
	TaskKind.SCENE: "Scene analysis",
	TaskKind.READABILITY: "Readability analysis",
	TaskKind.MANUSCRIPT: "Manuscript analysis",
	TaskKind.SCRIPT_BREAKDOWN: "Script breakdown",
	TaskKind.SHOT_LIST: "Shot list generation",
	TaskKind.PARAPHRASE: "Paraphrasing",
	TaskKind.ADVANCED_PARAPHRASE: "Advanced paraphrasing",
	TaskKind.SUMMARIZE: "Summarization",
	TaskKind.SYNONYMS: "Synonyms",
	TaskKind.HUMANIZE: "Humanization",
}


class CallState(str, Enum):
	IDLE = "idle"
	REQUESTING = "requesting"
	SUCCEEDED = "succeeded"
	FAILED = "failed"


@dataclass(frozen=True)
class AnalysisRequest:
	task: TaskKind
	text: str = ""
	options: Mapping[str, Any] = field(default_factory=dict)

	@property
	def shape(self) -> PayloadShape:
		return TASK_SHAPES[self.task]


@dataclass
class AnalysisResult:
	"""
	结果信封。

	used_fallback：
	- True 表示模型输出无法解析，data 是占位默认值（仍然 success=True）
	- 调用方可据此把“降级结果”和真实的中性分析区分开

	is_empty：
	- 成功但序列为空（例如一个镜头都没生成），是独立的提示状态，不算错误
	"""
	success: bool
	data: Any = None
	error: str = ""
	state: CallState = CallState.SUCCEEDED
	used_fallback: bool = False
	meta: Dict[str, Any] = field(default_factory=dict)

	@property
	def is_empty(self) -> bool:
		return self.success and isinstance(self.data, list) and not self.data
