# -*- coding: utf-8 -*-
"""
scriptdesk/core/schemas/shot.py

ShotRecord：分镜表里的一行（一个机位设置），手工录入与 AI 生成的共享契约。
- core 定义，service/session/csv 使用。
- 不依赖任何业务层（LLM、存储等）。

字段默认值：
- SHOT_DEFAULTS：AI 生成时缺字段用它补齐（模型给多少字段都能补全）。
- new_shot()：手工新建镜头时的空白模板（description/equipment 为空）。
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, fields
from typing import Any, Dict, List


SHOT_TYPES = [
	"ECU", "CU", "MCU", "MS", "MLS", "LS", "ELS", "WS",
	"Two Shot", "OTS", "POV", "Insert", "Cutaway", "Establishing",
]

ANGLES = [
	"Eye Level", "High Angle", "Low Angle", "Dutch Angle", "Bird's Eye",
	"Worm's Eye", "Over The Shoulder", "POV",
]

MOVEMENTS = [
	"Static", "Pan", "Tilt", "Dolly In", "Dolly Out", "Truck Left",
	"Truck Right", "Pedestal", "Crane Up", "Crane Down", "Handheld",
	"Steadicam", "Gimbal", "Drone", "Zoom In", "Zoom Out",
]

LENSES = ["16mm", "24mm", "35mm", "50mm", "85mm", "100mm", "135mm"]

FRAME_RATES = ["24 fps", "25 fps", "30 fps", "48 fps", "60 fps", "120 fps"]


# 属性名 -> JSON 键名（与模型输出、本地存储保持一致）
JSON_KEYS: Dict[str, str] = {
	"id": "id",
	"scene": "scene",
	"shot_number": "shotNumber",
	"description": "description",
	"type": "type",
	"angle": "angle",
	"movement": "movement",
	"equipment": "equipment",
	"lens": "lens",
	"framing": "framing",
	"notes": "notes",
	"duration": "duration",
	"frame_rate": "frameRate",
	"script_segment": "scriptSegment",
}

SHOT_DEFAULTS: Dict[str, str] = {
	"scene": "1",
	"shotNumber": "1",
	"description": "Shot description",
	"type": "MS",
	"angle": "Eye Level",
	"movement": "Static",
	"equipment": "Tripod",
	"lens": "50mm",
	"framing": "Medium",
	"notes": "",
	"duration": "5s",
	"frameRate": "24 fps",
	"scriptSegment": "",
}


def new_shot_id() -> str:
	return uuid.uuid4().hex


@dataclass
class ShotRecord:
	"""
	一个镜头。

	id：
	- 会话内唯一；编辑/删除都按 id 定位

	其余字段都是展示用文本：
	- type/angle/movement/lens/frame_rate 有推荐取值（见模块常量），
	  但模型给的自由文本也照单全收
	"""
	id: str
	scene: str = "1"
	shot_number: str = "1"
	description: str = "Shot description"
	type: str = "MS"
	angle: str = "Eye Level"
	movement: str = "Static"
	equipment: str = "Tripod"
	lens: str = "50mm"
	framing: str = "Medium"
	notes: str = ""
	duration: str = "5s"
	frame_rate: str = "24 fps"
	script_segment: str = ""

	def to_dict(self) -> Dict[str, Any]:
		return {JSON_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "ShotRecord":
		"""
		从 JSON 键名的 dict 还原（本地存储读回用）。
		缺 id 时补一个新 id，缺其他字段用 SHOT_DEFAULTS。
		"""
		kwargs: Dict[str, Any] = {}
		for attr, key in JSON_KEYS.items():
			if attr == "id":
				continue
			value = data.get(key)
			kwargs[attr] = SHOT_DEFAULTS[key] if value is None else str(value)
		shot_id = data.get("id")
		return cls(id=str(shot_id) if shot_id else new_shot_id(), **kwargs)


def new_shot(scene: str = "1", shot_number: str = "1") -> ShotRecord:
	"""手工新建镜头的空白模板。"""
	return ShotRecord(
		id=new_shot_id(),
		scene=scene,
		shot_number=shot_number,
		description="",
		equipment="",
	)


def shots_to_dicts(shots: List[ShotRecord]) -> List[Dict[str, Any]]:
	return [s.to_dict() for s in shots]
