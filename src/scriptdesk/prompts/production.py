# -*- coding: utf-8 -*-
"""
scriptdesk/prompts/production.py

制片类任务的 prompt：
- script_breakdown：按 11 个固定类别抽取制片元素，输出 JSON 对象
- shot_list：给出镜头表，输出 JSON 数组

注意：
- shot_list 的剧本超过 SHOT_LIST_MAX_CHARS 时从开头截断（确定性：只保留前缀）。
"""

from __future__ import annotations

from typing import Any, Mapping

from .writing import JSON_ARRAY_ONLY, JSON_OBJECT_ONLY


SHOT_LIST_MAX_CHARS = 15000

# 类别说明的顺序与 core.schemas.breakdown.CATEGORIES 一致
BREAKDOWN_CATEGORY_GUIDE = (
	"- props: Physical items handled or seen\n"
	"- wardrobe: Clothing items and accessories\n"
	"- cast: Character names\n"
	"- locations: All settings and locations\n"
	"- sfx: Sound effects and audio elements\n"
	"- vehicles: Cars, trucks, planes, etc.\n"
	"- animals: Any animals mentioned\n"
	"- stunts: Physical action sequences\n"
	"- makeup: Special makeup requirements\n"
	"- equipment: Special filmmaking equipment needed\n"
	"- extras: Background performers needed\n"
)


def truncate_script(text: str, limit: int = SHOT_LIST_MAX_CHARS) -> str:
	return text[:limit]


def build_script_breakdown_prompt(text: str, options: Mapping[str, Any]) -> str:
	return (
		"Analyze this screenplay and identify production elements in these categories:\n"
		+ BREAKDOWN_CATEGORY_GUIDE
		+ "\nScript:\n"
		f'"{text}"\n\n'
		+ JSON_OBJECT_ONLY
		+ "{\n"
		'  "props": ["prop1", "prop2"],\n'
		'  "wardrobe": ["item1", "item2"],\n'
		'  "cast": ["character1", "character2"],\n'
		'  "locations": ["location1", "location2"],\n'
		'  "sfx": ["effect1", "effect2"],\n'
		'  "vehicles": ["vehicle1", "vehicle2"],\n'
		'  "animals": ["animal1", "animal2"],\n'
		'  "stunts": ["stunt1", "stunt2"],\n'
		'  "makeup": ["makeup1", "makeup2"],\n'
		'  "equipment": ["equipment1", "equipment2"],\n'
		'  "extras": ["extra1", "extra2"]\n'
		"}"
	)


def build_shot_list_prompt(text: str, options: Mapping[str, Any]) -> str:
	return (
		"Based on this screenplay, create a detailed shot list with appropriate camera setups.\n"
		"For each key moment in the script, suggest a specific shot with these technical details:\n"
		"- scene number\n"
		"- shot number\n"
		"- shot description\n"
		"- shot type (CU, MS, WS, etc.)\n"
		"- camera angle\n"
		"- camera movement\n"
		"- equipment needed\n"
		"- lens recommendation\n"
		"- estimated duration\n"
		"- frame rate\n\n"
		"Script:\n"
		f'"{truncate_script(text)}"\n\n'
		"Generate at least 5 shots for this scene.\n"
		+ JSON_ARRAY_ONLY
		+ "[\n"
		"  {\n"
		'    "scene": "1",\n'
		'    "shotNumber": "1",\n'
		'    "description": "Description of the shot content",\n'
		'    "type": "MS",\n'
		'    "angle": "Eye Level",\n'
		'    "movement": "Static",\n'
		'    "equipment": "Tripod",\n'
		'    "lens": "50mm",\n'
		'    "framing": "Medium",\n'
		'    "notes": "Additional technical notes",\n'
		'    "duration": "5s",\n'
		'    "frameRate": "24 fps"\n'
		"  }\n"
		"]"
	)
