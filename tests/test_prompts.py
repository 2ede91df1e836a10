# -*- coding: utf-8 -*-
"""Prompt 组装测试（纯函数，无 LLM 调用）。"""

from __future__ import annotations

import pytest

from scriptdesk.core.schemas import AnalysisRequest, TaskKind, TASK_LABELS, TASK_SHAPES
from scriptdesk.errors import ConfigurationError
from scriptdesk.prompts import build_prompt
from scriptdesk.prompts.builder import BUILDERS
from scriptdesk.prompts.production import SHOT_LIST_MAX_CHARS


VALID_OPTIONS = {
	TaskKind.TONE: {},
	TaskKind.GRAMMAR: {"level": "literary"},
	TaskKind.CHARACTER: {"character_name": "ANNA", "analysis_type": "voice"},
	TaskKind.CHARACTER_SUGGESTIONS: {"character_name": "ANNA", "traits": ["brave", "stubborn"], "focus_area": "dialogue"},
	TaskKind.PLOT: {"structure": "freytag"},
	TaskKind.SCENE: {"scene_type": "confrontation"},
	TaskKind.READABILITY: {"target_audience": "young adult"},
	TaskKind.MANUSCRIPT: {"chapters": [{"title": "One", "wordCount": 2500}]},
	TaskKind.SCRIPT_BREAKDOWN: {},
	TaskKind.SHOT_LIST: {},
	TaskKind.PARAPHRASE: {"mode": "formal"},
	TaskKind.ADVANCED_PARAPHRASE: {
		"mode": "noir",
		"writing_style": "terse",
		"target_audience": "adults",
		"preserve_dialogue": True,
	},
	TaskKind.SUMMARIZE: {"length": "short"},
	TaskKind.SYNONYMS: {"context": "a quick exit"},
	TaskKind.HUMANIZE: {},
}

# 这两个任务的主体不是 text（章节列表 / 角色名）
NO_SUBJECT_TEXT = {TaskKind.MANUSCRIPT, TaskKind.CHARACTER_SUGGESTIONS}


class TestDispatchTable:
	def test_every_task_is_covered(self):
		assert set(BUILDERS) == set(TaskKind)
		assert set(TASK_SHAPES) == set(TaskKind)
		assert set(TASK_LABELS) == set(TaskKind)
		assert set(VALID_OPTIONS) == set(TaskKind)

	@pytest.mark.parametrize("task", list(TaskKind))
	def test_subject_text_embedded_verbatim(self, task):
		text = 'She whispers, "{not a placeholder}" and leaves.'
		prompt = build_prompt(AnalysisRequest(task, text, VALID_OPTIONS[task]))
		assert isinstance(prompt, str) and prompt
		if task not in NO_SUBJECT_TEXT:
			assert text in prompt

	@pytest.mark.parametrize("task", [t for t, s in TASK_SHAPES.items() if s.value != "text"])
	def test_structured_tasks_ask_for_json(self, task):
		prompt = build_prompt(AnalysisRequest(task, "x", VALID_OPTIONS[task]))
		assert "JSON" in prompt


class TestOptions:
	def test_missing_enum_option(self):
		with pytest.raises(ConfigurationError, match="missing option: level"):
			build_prompt(AnalysisRequest(TaskKind.GRAMMAR, "text"))

	def test_invalid_enum_option(self):
		with pytest.raises(ConfigurationError, match="invalid structure"):
			build_prompt(AnalysisRequest(TaskKind.PLOT, "text", {"structure": "five-act"}))

	def test_missing_text_option(self):
		with pytest.raises(ConfigurationError, match="character_name"):
			build_prompt(AnalysisRequest(TaskKind.CHARACTER, "text", {"analysis_type": "voice"}))

	def test_text_option_wrong_type(self):
		with pytest.raises(ConfigurationError, match="invalid character_name: expected text, got int"):
			build_prompt(AnalysisRequest(TaskKind.CHARACTER, "text", {"character_name": 42, "analysis_type": "voice"}))

	def test_paraphrase_defaults_to_standard(self):
		prompt = build_prompt(AnalysisRequest(TaskKind.PARAPHRASE, "text"))
		assert prompt.startswith("Paraphrase the following text.")

	def test_custom_paraphrase_needs_prompt(self):
		with pytest.raises(ConfigurationError, match="custom_prompt"):
			build_prompt(AnalysisRequest(TaskKind.PARAPHRASE, "text", {"mode": "custom"}))
		prompt = build_prompt(AnalysisRequest(
			TaskKind.PARAPHRASE,
			"text",
			{"mode": "custom", "custom_prompt": "Rewrite as a limerick"},
		))
		assert prompt == 'Rewrite as a limerick. Provide ONLY the result: "text"'

	def test_summarize_defaults_to_medium(self):
		prompt = build_prompt(AnalysisRequest(TaskKind.SUMMARIZE, "text"))
		assert "concise summary" in prompt

	def test_preserve_dialogue_accepts_strings(self):
		opts = dict(VALID_OPTIONS[TaskKind.ADVANCED_PARAPHRASE], preserve_dialogue="false")
		prompt = build_prompt(AnalysisRequest(TaskKind.ADVANCED_PARAPHRASE, "text", opts))
		assert "- Preserve Dialogue: false" in prompt

	def test_traits_must_be_a_list(self):
		opts = dict(VALID_OPTIONS[TaskKind.CHARACTER_SUGGESTIONS], traits="brave")
		with pytest.raises(ConfigurationError):
			build_prompt(AnalysisRequest(TaskKind.CHARACTER_SUGGESTIONS, "", opts))


class TestProductionPrompts:
	def test_shot_list_truncates_from_start(self):
		script = "A" * SHOT_LIST_MAX_CHARS + "TAIL_MARKER"
		prompt = build_prompt(AnalysisRequest(TaskKind.SHOT_LIST, script))
		assert "A" * SHOT_LIST_MAX_CHARS in prompt
		assert "TAIL_MARKER" not in prompt

	def test_shot_list_short_script_untouched(self):
		prompt = build_prompt(AnalysisRequest(TaskKind.SHOT_LIST, "INT. HOUSE - DAY"))
		assert '"INT. HOUSE - DAY"' in prompt
		assert '"frameRate": "24 fps"' in prompt

	def test_breakdown_lists_all_categories(self):
		prompt = build_prompt(AnalysisRequest(TaskKind.SCRIPT_BREAKDOWN, "script"))
		for category in ("props", "wardrobe", "cast", "locations", "sfx", "vehicles",
				"animals", "stunts", "makeup", "equipment", "extras"):
			assert f'"{category}": [' in prompt

	def test_manuscript_serializes_chapters(self):
		prompt = build_prompt(AnalysisRequest(TaskKind.MANUSCRIPT, "", VALID_OPTIONS[TaskKind.MANUSCRIPT]))
		assert '[{"title": "One", "wordCount": 2500}]' in prompt
