# -*- coding: utf-8 -*-
"""
scriptdesk/prompts/builder.py

Prompt Builder 的统一入口：build_prompt(request) -> str

- 按 TaskKind 查表分发（封闭集合）；模块导入时检查每个 TaskKind 都有 builder，
  新增任务漏写 builder 会在 import 阶段直接报错。
- 纯函数：无网络、无状态。选项缺失/非法 -> ConfigurationError。
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from scriptdesk.core.schemas import AnalysisRequest, TaskKind
from scriptdesk.errors import ConfigurationError

from . import production, writing


PromptBuilder = Callable[[str, Mapping[str, Any]], str]


BUILDERS: Dict[TaskKind, PromptBuilder] = {
	TaskKind.TONE: writing.build_tone_prompt,
	TaskKind.GRAMMAR: writing.build_grammar_prompt,
	TaskKind.CHARACTER: writing.build_character_prompt,
	TaskKind.CHARACTER_SUGGESTIONS: writing.build_character_suggestions_prompt,
	TaskKind.PLOT: writing.build_plot_prompt,
	TaskKind.SCENE: writing.build_scene_prompt,
	TaskKind.READABILITY: writing.build_readability_prompt,
	TaskKind.MANUSCRIPT: writing.build_manuscript_prompt,
	TaskKind.SCRIPT_BREAKDOWN: production.build_script_breakdown_prompt,
	TaskKind.SHOT_LIST: production.build_shot_list_prompt,
	TaskKind.PARAPHRASE: writing.build_paraphrase_prompt,
	TaskKind.ADVANCED_PARAPHRASE: writing.build_advanced_paraphrase_prompt,
	TaskKind.SUMMARIZE: writing.build_summarize_prompt,
	TaskKind.SYNONYMS: writing.build_synonyms_prompt,
	TaskKind.HUMANIZE: writing.build_humanize_prompt,
}

_missing = set(TaskKind) - set(BUILDERS)
if _missing:
	raise RuntimeError(f"prompt builders missing for: {sorted(t.value for t in _missing)}")


def build_prompt(request: AnalysisRequest) -> str:
	if not isinstance(request.task, TaskKind):
		raise ConfigurationError(f"unknown task: {request.task!r}")
	if not isinstance(request.text, str):
		raise ConfigurationError("subject text must be a string")

	return BUILDERS[request.task](request.text, request.options or {})
