# -*- coding: utf-8 -*-
"""
scriptdesk/prompts/options.py

任务选项的取值与校验。

- 枚举型选项：取值不在集合里 / 必填却缺失 -> ConfigurationError
- 文本型选项：必填却缺失或为空 -> ConfigurationError
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from scriptdesk.errors import ConfigurationError


class GrammarLevel(str, Enum):
	BASIC = "basic"
	STANDARD = "standard"
	COMPREHENSIVE = "comprehensive"
	LITERARY = "literary"


class CharacterFocus(str, Enum):
	VOICE = "voice"
	DEVELOPMENT = "development"
	CONSISTENCY = "consistency"
	DIALOGUE = "dialogue"
	BACKSTORY = "backstory"


class PlotStructure(str, Enum):
	THREE_ACT = "three-act"
	HEROS_JOURNEY = "heros-journey"
	SEVEN_POINT = "seven-point"
	FREYTAG = "freytag"
	FICHTEAN = "fichtean"
	CUSTOM = "custom"


class ParaphraseMode(str, Enum):
	STANDARD = "standard"
	FORMAL = "formal"
	ACADEMIC = "academic"
	SIMPLE = "simple"
	CREATIVE = "creative"
	SHORTEN = "shorten"
	EXPAND = "expand"
	CUSTOM = "custom"


class SummaryLength(str, Enum):
	SHORT = "short"
	MEDIUM = "medium"
	LONG = "long"


GRAMMAR_DEPTH: Dict[GrammarLevel, str] = {
	GrammarLevel.BASIC: "Focus only on grammar errors and basic punctuation",
	GrammarLevel.STANDARD: "Check grammar, punctuation, style, and clarity issues",
	GrammarLevel.COMPREHENSIVE: (
		"Comprehensive analysis including grammar, style, flow, consistency, and literary quality"
	),
	GrammarLevel.LITERARY: (
		"Literary analysis focusing on creative writing, narrative voice, "
		"character consistency, and artistic expression"
	),
}

CHARACTER_FOCUS: Dict[CharacterFocus, str] = {
	CharacterFocus.VOICE: "Analyze the character's unique voice, speech patterns, vocabulary, and dialogue style",
	CharacterFocus.DEVELOPMENT: "Analyze character development, growth, motivations, and character arc",
	CharacterFocus.CONSISTENCY: "Check for consistency in character behavior, voice, and personality traits",
	CharacterFocus.DIALOGUE: "Focus on dialogue quality, authenticity, and character-specific speech patterns",
	CharacterFocus.BACKSTORY: "Analyze implied backstory and suggest areas for character depth",
}

PLOT_GUIDES: Dict[PlotStructure, str] = {
	PlotStructure.THREE_ACT: "Three-Act Structure: Setup (25%), Confrontation (50%), Resolution (25%)",
	PlotStructure.HEROS_JOURNEY: (
		"Hero's Journey: Ordinary World, Call to Adventure, Refusal, Meeting Mentor, "
		"Crossing Threshold, Tests, Ordeal, Reward, Road Back, Resurrection, Return"
	),
	PlotStructure.SEVEN_POINT: (
		"Seven-Point Structure: Hook, Plot Turn 1, Pinch Point 1, Midpoint, "
		"Pinch Point 2, Plot Turn 2, Resolution"
	),
	PlotStructure.FREYTAG: "Freytag's Pyramid: Exposition, Rising Action, Climax, Falling Action, Denouement",
	PlotStructure.FICHTEAN: "Fichtean Curve: Series of crises building to climax",
	PlotStructure.CUSTOM: "Custom analysis of narrative structure",
}


E = TypeVar("E", bound=Enum)


def enum_option(
	options: Mapping[str, Any],
	name: str,
	enum_cls: Type[E],
	default: Optional[E] = None,
) -> E:
	value = options.get(name)
	if value is None or value == "":
		if default is not None:
			return default
		raise ConfigurationError(f"missing option: {name}")

	try:
		return enum_cls(value)
	except ValueError:
		allowed = ", ".join(e.value for e in enum_cls)
		raise ConfigurationError(f"invalid {name}: {value!r} (allowed: {allowed})") from None


def text_option(options: Mapping[str, Any], name: str) -> str:
	value = options.get(name)
	if value is not None and not isinstance(value, str):
		raise ConfigurationError(f"invalid {name}: expected text, got {type(value).__name__}")
	if value is None or not value.strip():
		raise ConfigurationError(f"missing option: {name}")
	return value


def bool_option(options: Mapping[str, Any], name: str) -> bool:
	value = options.get(name)
	if isinstance(value, bool):
		return value
	if isinstance(value, str) and value.strip().lower() in ("true", "false", "yes", "no", "1", "0"):
		return value.strip().lower() in ("true", "yes", "1")
	raise ConfigurationError(f"missing option: {name} (expected true/false)")


def list_option(options: Mapping[str, Any], name: str) -> List[Any]:
	value = options.get(name)
	if not isinstance(value, (list, tuple)):
		raise ConfigurationError(f"missing option: {name} (expected a list)")
	return list(value)
