# -*- coding: utf-8 -*-
"""
scriptdesk/service.py

Service Facade：每个分析任务一个方法，统一流程：
  1) build prompt（选项不对 -> ConfigurationError，同步抛出）
  2) 调用模型（失败 -> success=False 的结果，不重试）
  3) normalize（解析不了 -> 占位默认值，success=True + used_fallback=True）
  4) 任务后处理（shot ingestion / breakdown 集合 / synonyms 逗号兜底 / 长度统计）

注意：
- 这里只依赖一个 llm 接口：llm.generate_text(prompt) -> str
- llm 为 None 表示没配置 key：任何方法都先抛 ConfigurationError，不发请求
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from scriptdesk.core.json_extract import strip_code_fences
from scriptdesk.core.normalizer import NormalizedResponse, normalize_response
from scriptdesk.core.schemas import (
	AnalysisRequest,
	AnalysisResult,
	BreakdownElementSet,
	CallState,
	TaskKind,
	TASK_LABELS,
)
from scriptdesk.core.shot_ingest import ingest_shots
from scriptdesk.errors import ConfigurationError
from scriptdesk.prompts import build_prompt
from scriptdesk.providers.llm.base import TextModel

logger = logging.getLogger(__name__)

MAX_SYNONYMS = 8


def _split_synonyms(raw: str) -> List[str]:
	"""模型没给 JSON 数组时：按逗号切，去引号，最多 8 个。"""
	out = []
	for part in raw.split(","):
		word = part.strip().replace('"', "").replace("'", "")
		if word:
			out.append(word)
	return out[:MAX_SYNONYMS]


class ScriptService:
	def __init__(self, llm: Optional[TextModel]):
		self.llm = llm

	# ---- 通用流程 ----

	def run(self, request: AnalysisRequest) -> AnalysisResult:
		if self.llm is None:
			raise ConfigurationError("API key not set. Please configure your Gemini API key.")

		prompt = build_prompt(request)
		label = TASK_LABELS[request.task]

		logger.debug(
			"[call] task=%s state=%s -> %s",
			request.task.value,
			CallState.IDLE.value,
			CallState.REQUESTING.value,
		)
		try:
			raw = self.llm.generate_text(prompt)
		except Exception as e:
			# 调用异常一律转成 failed 结果
			logger.warning("[call] task=%s state=%s: %s", request.task.value, CallState.FAILED.value, e)
			return AnalysisResult(
				success=False,
				error=f"{label} failed: {e}",
				state=CallState.FAILED,
			)

		logger.debug("[call] task=%s state=%s", request.task.value, CallState.SUCCEEDED.value)
		if isinstance(raw, str):
			logger.debug("[call] raw response: %s...", raw[:200])

		normalized = normalize_response(request.task, raw, subject_text=request.text)
		return self._finish(request, raw, normalized)

	def _finish(self, request: AnalysisRequest, raw: Any, normalized: NormalizedResponse) -> AnalysisResult:
		task = request.task
		data = normalized.payload
		used_fallback = normalized.used_fallback
		meta: Dict[str, Any] = {}

		if task == TaskKind.SHOT_LIST:
			# normalizer 降级时交给 ingestion 再从原文兜底一次
			data = ingest_shots(
				None if used_fallback else data,
				raw_text=raw if isinstance(raw, str) else "",
			)
			if used_fallback and data:
				used_fallback = False
			if not data:
				logger.info("[shots] no shots generated")

		elif task == TaskKind.SCRIPT_BREAKDOWN:
			data = BreakdownElementSet.from_payload(data)

		elif task == TaskKind.SYNONYMS:
			if used_fallback and isinstance(raw, str):
				data = _split_synonyms(strip_code_fences(raw))
				used_fallback = not data
			else:
				# bool 是 int 的子类，要单独排除
				words = [s for s in data if isinstance(s, (str, int, float)) and not isinstance(s, bool)]
				data = [str(s) for s in words][:MAX_SYNONYMS]

		elif task in (TaskKind.PARAPHRASE, TaskKind.ADVANCED_PARAPHRASE, TaskKind.HUMANIZE):
			meta = {"original_length": len(request.text), "new_length": len(data)}

		elif task == TaskKind.SUMMARIZE:
			original = len(request.text)
			ratio = round((original - len(data)) / original * 100, 1) if original else 0.0
			meta = {
				"original_length": original,
				"summary_length": len(data),
				"compression_ratio": ratio,
			}

		return AnalysisResult(
			success=True,
			data=data,
			state=CallState.SUCCEEDED,
			used_fallback=used_fallback,
			meta=meta,
		)

	# ---- 每个任务一个方法 ----

	def analyze_tone(self, text: str) -> AnalysisResult:
		return self.run(AnalysisRequest(TaskKind.TONE, text))

	def check_grammar(self, text: str, level: str) -> AnalysisResult:
		return self.run(AnalysisRequest(TaskKind.GRAMMAR, text, {"level": level}))

	def analyze_character(self, text: str, character_name: str, analysis_type: str) -> AnalysisResult:
		return self.run(AnalysisRequest(
			TaskKind.CHARACTER,
			text,
			{"character_name": character_name, "analysis_type": analysis_type},
		))

	def suggest_character_enhancements(
		self,
		character_name: str,
		traits: List[str],
		focus_area: str,
	) -> AnalysisResult:
		return self.run(AnalysisRequest(
			TaskKind.CHARACTER_SUGGESTIONS,
			"",
			{"character_name": character_name, "traits": traits, "focus_area": focus_area},
		))

	def analyze_plot(self, text: str, structure: str) -> AnalysisResult:
		return self.run(AnalysisRequest(TaskKind.PLOT, text, {"structure": structure}))

	def analyze_scene(self, text: str, scene_type: str) -> AnalysisResult:
		return self.run(AnalysisRequest(TaskKind.SCENE, text, {"scene_type": scene_type}))

	def analyze_readability(self, text: str, target_audience: str) -> AnalysisResult:
		return self.run(AnalysisRequest(TaskKind.READABILITY, text, {"target_audience": target_audience}))

	def analyze_manuscript(self, chapters: List[Mapping[str, Any]]) -> AnalysisResult:
		return self.run(AnalysisRequest(TaskKind.MANUSCRIPT, "", {"chapters": chapters}))

	def analyze_script_breakdown(self, script: str) -> AnalysisResult:
		return self.run(AnalysisRequest(TaskKind.SCRIPT_BREAKDOWN, script))

	def generate_shot_list(self, script: str) -> AnalysisResult:
		return self.run(AnalysisRequest(TaskKind.SHOT_LIST, script))

	def paraphrase(self, text: str, mode: str = "standard", custom_prompt: str = "") -> AnalysisResult:
		options: Dict[str, Any] = {"mode": mode}
		if custom_prompt:
			options["custom_prompt"] = custom_prompt
		return self.run(AnalysisRequest(TaskKind.PARAPHRASE, text, options))

	def advanced_paraphrase(
		self,
		text: str,
		mode: str,
		writing_style: str,
		target_audience: str,
		preserve_dialogue: bool,
	) -> AnalysisResult:
		return self.run(AnalysisRequest(
			TaskKind.ADVANCED_PARAPHRASE,
			text,
			{
				"mode": mode,
				"writing_style": writing_style,
				"target_audience": target_audience,
				"preserve_dialogue": preserve_dialogue,
			},
		))

	def summarize(self, text: str, length: str = "medium") -> AnalysisResult:
		return self.run(AnalysisRequest(TaskKind.SUMMARIZE, text, {"length": length}))

	def get_synonyms(self, word: str, context: str) -> AnalysisResult:
		return self.run(AnalysisRequest(TaskKind.SYNONYMS, word, {"context": context}))

	def humanize(self, text: str) -> AnalysisResult:
		return self.run(AnalysisRequest(TaskKind.HUMANIZE, text))
