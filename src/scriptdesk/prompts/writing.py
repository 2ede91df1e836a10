# -*- coding: utf-8 -*-
"""
scriptdesk/prompts/writing.py

写作分析类任务的 prompt（tone/grammar/character/plot/scene/readability/
manuscript，以及 paraphrase/summarize/synonyms/humanize 这些纯文本任务）。

关键点：
- 原文逐字嵌入，不做任何清洗
- 结构化任务：强调“只输出 JSON，不要 Markdown”，并给出确切字段
- 纯文本任务：强调“只给结果，不要解释”
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from .options import (
	CHARACTER_FOCUS,
	GRAMMAR_DEPTH,
	PLOT_GUIDES,
	CharacterFocus,
	GrammarLevel,
	ParaphraseMode,
	PlotStructure,
	SummaryLength,
	bool_option,
	enum_option,
	list_option,
	text_option,
)
from scriptdesk.errors import ConfigurationError


JSON_OBJECT_ONLY = "Respond with ONLY a valid JSON object (no markdown formatting) in this exact format:\n"
JSON_ARRAY_ONLY = "Respond with ONLY a valid JSON array (no markdown formatting) in this exact format:\n"


def build_tone_prompt(text: str, options: Mapping[str, Any]) -> str:
	return (
		"Analyze the tone of the following text.\n\n"
		f'Text: "{text}"\n\n'
		+ JSON_OBJECT_ONLY
		+ "{\n"
		'  "overallTone": "description",\n'
		'  "sentiment": "positive",\n'
		'  "confidence": "high",\n'
		'  "emotions": ["emotion1", "emotion2"],\n'
		'  "suggestions": "improvement suggestions"\n'
		"}"
	)


def build_grammar_prompt(text: str, options: Mapping[str, Any]) -> str:
	level = enum_option(options, "level", GrammarLevel)
	return (
		f"Perform a {level.value} grammar and style analysis of the following text.\n\n"
		f"{GRAMMAR_DEPTH[level]}\n\n"
		f'Text: "{text}"\n\n'
		+ JSON_OBJECT_ONLY
		+ "{\n"
		'  "overallScore": 85,\n'
		'  "issues": [\n'
		"    {\n"
		'      "type": "Grammar",\n'
		'      "severity": "critical",\n'
		'      "originalText": "exact text with issue",\n'
		'      "description": "explanation of the issue",\n'
		'      "suggestion": "corrected version"\n'
		"    }\n"
		"  ],\n"
		'  "readability": "Grade level or description",\n'
		'  "sentenceVariety": "Assessment of sentence structure variety",\n'
		'  "vocabularyLevel": "Assessment of vocabulary complexity",\n'
		'  "passiveVoiceUsage": 15,\n'
		'  "styleNotes": "Overall style assessment"\n'
		"}"
	)


def build_character_prompt(text: str, options: Mapping[str, Any]) -> str:
	name = text_option(options, "character_name")
	focus = enum_option(options, "analysis_type", CharacterFocus)
	return (
		f'Analyze the character "{name}" in the following text.\n\n'
		f"Focus: {CHARACTER_FOCUS[focus]}\n\n"
		f'Text: "{text}"\n\n'
		+ JSON_OBJECT_ONLY
		+ "{\n"
		'  "traits": ["trait1", "trait2", "trait3"],\n'
		'  "voiceTone": "description of speaking style",\n'
		'  "speechPattern": "characteristic speech patterns",\n'
		'  "vocabularyLevel": "assessment of vocabulary used",\n'
		'  "emotionalRange": "range of emotions displayed",\n'
		'  "developmentNotes": "character development observations",\n'
		'  "inconsistencies": ["issue1", "issue2"],\n'
		'  "strengths": ["strength1", "strength2"],\n'
		'  "improvementAreas": ["area1", "area2"]\n'
		"}"
	)


def build_character_suggestions_prompt(text: str, options: Mapping[str, Any]) -> str:
	name = text_option(options, "character_name")
	traits = [str(t) for t in list_option(options, "traits")]
	focus_area = text_option(options, "focus_area")
	return (
		f'Generate creative enhancement suggestions for the character "{name}" '
		f"with traits: {', '.join(traits)}.\n\n"
		f"Focus area: {focus_area}\n\n"
		"Provide practical, creative suggestions for character development.\n\n"
		+ JSON_ARRAY_ONLY
		+ "[\n"
		"  {\n"
		'    "category": "Dialogue",\n'
		'    "description": "detailed suggestion",\n'
		'    "example": "example implementation"\n'
		"  }\n"
		"]"
	)


def build_plot_prompt(text: str, options: Mapping[str, Any]) -> str:
	structure = enum_option(options, "structure", PlotStructure)
	return (
		f"Analyze the plot structure of the following story using {PLOT_GUIDES[structure]}.\n\n"
		f'Text: "{text}"\n\n'
		+ JSON_OBJECT_ONLY
		+ "{\n"
		'  "overallScore": 85,\n'
		'  "stages": [\n'
		"    {\n"
		'      "name": "stage name",\n'
		'      "completion": 80,\n'
		'      "description": "assessment of this stage",\n'
		'      "suggestions": ["improvement1", "improvement2"]\n'
		"    }\n"
		"  ],\n"
		'  "pacing": "assessment of story pacing",\n'
		'  "conflict": "analysis of conflict development",\n'
		'  "characterArc": "character development assessment",\n'
		'  "themeDevelopment": "theme analysis",\n'
		'  "recommendations": [\n'
		"    {\n"
		'      "priority": "high",\n'
		'      "title": "recommendation title",\n'
		'      "description": "detailed recommendation"\n'
		"    }\n"
		"  ]\n"
		"}"
	)


def build_scene_prompt(text: str, options: Mapping[str, Any]) -> str:
	scene_type = text_option(options, "scene_type")
	return (
		"Analyze this scene for conflict, tension, and effectiveness:\n\n"
		f"Scene Type: {scene_type}\n"
		f'Scene Text: "{text}"\n\n'
		+ JSON_OBJECT_ONLY
		+ "{\n"
		'  "conflictLevel": 85,\n'
		'  "tensionRating": 90,\n'
		'  "paceRating": 75,\n'
		'  "dialogueQuality": 80,\n'
		'  "characterDevelopment": 70,\n'
		'  "conflictTypes": ["internal", "external"],\n'
		'  "tensionTechniques": ["technique1", "technique2"],\n'
		'  "strengths": ["strength1", "strength2"],\n'
		'  "improvements": ["improvement1", "improvement2"],\n'
		'  "suggestions": [\n'
		"    {\n"
		'      "type": "Conflict",\n'
		'      "description": "suggestion description",\n'
		'      "example": "example implementation"\n'
		"    }\n"
		"  ]\n"
		"}"
	)


def build_readability_prompt(text: str, options: Mapping[str, Any]) -> str:
	audience = text_option(options, "target_audience")
	return (
		f"Analyze the readability of this text for target audience: {audience}\n\n"
		f'Text: "{text}"\n\n'
		+ JSON_OBJECT_ONLY
		+ "{\n"
		'  "readabilityScore": 85,\n'
		'  "gradeLevel": "8th Grade",\n'
		'  "targetMatch": true,\n'
		'  "wordComplexity": "appropriate",\n'
		'  "sentenceLength": "good",\n'
		'  "vocabularyLevel": "suitable",\n'
		'  "improvements": [\n'
		"    {\n"
		'      "issue": "issue description",\n'
		'      "suggestion": "how to fix",\n'
		'      "example": "example fix"\n'
		"    }\n"
		"  ],\n"
		'  "strengths": ["strength1", "strength2"],\n'
		'  "optimizedVersion": "optimized text version"\n'
		"}"
	)


def build_manuscript_prompt(text: str, options: Mapping[str, Any]) -> str:
	chapters = list_option(options, "chapters")
	return (
		"Analyze this manuscript structure and provide insights:\n\n"
		f"Chapters: {json.dumps(chapters, ensure_ascii=False)}\n\n"
		+ JSON_OBJECT_ONLY
		+ "{\n"
		'  "overallProgress": 65,\n'
		'  "totalWordCount": 50000,\n'
		'  "averageChapterLength": 2500,\n'
		'  "paceAnalysis": "analysis of pacing across chapters",\n'
		'  "consistencyIssues": ["issue1", "issue2"],\n'
		'  "suggestions": ["suggestion1", "suggestion2"],\n'
		'  "readabilityScore": 85,\n'
		'  "chapterInsights": [\n'
		"    {\n"
		'      "chapterNumber": 1,\n'
		'      "strengths": ["strength1"],\n'
		'      "improvements": ["improvement1"],\n'
		'      "paceRating": "good"\n'
		"    }\n"
		"  ]\n"
		"}"
	)


_PARAPHRASE_TEMPLATES = {
	ParaphraseMode.STANDARD: 'Paraphrase the following text. Provide ONLY the paraphrased version: "{text}"',
	ParaphraseMode.FORMAL: (
		"Rewrite the following text in a formal, professional tone while maintaining the original meaning. "
		'Provide ONLY the rewritten text without explanations: "{text}"'
	),
	ParaphraseMode.ACADEMIC: (
		"Rewrite the following text in an academic, scholarly style with appropriate terminology. "
		'Provide ONLY the rewritten text: "{text}"'
	),
	ParaphraseMode.SIMPLE: (
		"Simplify the following text to make it easier to read and understand. "
		'Provide ONLY the simplified text: "{text}"'
	),
	ParaphraseMode.CREATIVE: (
		"Creatively rewrite the following text with fresh, original phrasing and style. "
		'Provide ONLY the creative version: "{text}"'
	),
	ParaphraseMode.SHORTEN: (
		"Condense the following text while retaining all main points. "
		'Provide ONLY the shortened text: "{text}"'
	),
	ParaphraseMode.EXPAND: (
		"Expand the following text by adding more detail and elaboration. "
		'Provide ONLY the expanded text: "{text}"'
	),
}


def build_paraphrase_prompt(text: str, options: Mapping[str, Any]) -> str:
	mode = enum_option(options, "mode", ParaphraseMode, default=ParaphraseMode.STANDARD)
	if mode == ParaphraseMode.CUSTOM:
		custom = options.get("custom_prompt")
		if not isinstance(custom, str) or not custom.strip():
			raise ConfigurationError("custom paraphrase mode requires option: custom_prompt")
		return f'{custom.strip()}. Provide ONLY the result: "{text}"'

	# str.format 会吃掉原文里的花括号，这里用 replace 保证逐字嵌入
	return _PARAPHRASE_TEMPLATES[mode].replace("{text}", text)


def build_advanced_paraphrase_prompt(text: str, options: Mapping[str, Any]) -> str:
	mode = text_option(options, "mode")
	style = text_option(options, "writing_style")
	audience = text_option(options, "target_audience")
	preserve = bool_option(options, "preserve_dialogue")
	return (
		"Transform the following text with these specifications:\n"
		f"- Literary Mode: {mode}\n"
		f"- Writing Style: {style}\n"
		f"- Target Audience: {audience}\n"
		f"- Preserve Dialogue: {'true' if preserve else 'false'}\n\n"
		"Focus on:\n"
		"1. Enhancing literary quality while maintaining meaning\n"
		"2. Improving sentence variety and flow\n"
		"3. Elevating vocabulary appropriately\n"
		"4. Maintaining character voice consistency\n\n"
		f'Text: "{text}"\n\n'
		"Provide ONLY the refined version without any explanations or formatting."
	)


def build_summarize_prompt(text: str, options: Mapping[str, Any]) -> str:
	length = enum_option(options, "length", SummaryLength, default=SummaryLength.MEDIUM)
	if length == SummaryLength.SHORT:
		lead = "Provide a brief summary (2-3 sentences) of the following text."
	elif length == SummaryLength.LONG:
		lead = "Provide a detailed summary with key points and supporting details."
	else:
		lead = "Provide a concise summary of the following text."
	return f'{lead} Provide ONLY the summary: "{text}"'


def build_synonyms_prompt(text: str, options: Mapping[str, Any]) -> str:
	context = text_option(options, "context")
	return (
		f'Provide 8 synonyms for the word "{text}" in this context: "{context}".\n'
		'Return ONLY a JSON array of synonyms: ["synonym1", "synonym2", "synonym3", "synonym4", '
		'"synonym5", "synonym6", "synonym7", "synonym8"]'
	)


def build_humanize_prompt(text: str, options: Mapping[str, Any]) -> str:
	return (
		"Make the following AI-generated text sound more natural and human-written. "
		"Provide ONLY the humanized version without explanations:\n\n"
		f'Text: "{text}"'
	)
