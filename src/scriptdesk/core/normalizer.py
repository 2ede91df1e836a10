# -*- coding: utf-8 -*-
"""
scriptdesk/core/normalizer.py

Response Normalizer：模型原始文本 -> 任务约定形状的 payload。

流程：
- text 任务：strip 后原样返回
- object/array 任务：json_extract.extract_json()；失败则换成 fallbacks 里的占位值

保证：
- 永不抛异常；返回值形状永远正确
- 降级时打一条 warning 日志（可观测，但不属于数据契约）
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from scriptdesk.core.fallbacks import fallback_for
from scriptdesk.core.json_extract import JsonExtractError, extract_json
from scriptdesk.core.schemas import PayloadShape, TaskKind, TASK_SHAPES

logger = logging.getLogger(__name__)


@dataclass
class NormalizedResponse:
	payload: Any
	used_fallback: bool = False
	reason: str = ""


def normalize_response(task: TaskKind, raw: Any, subject_text: str = "") -> NormalizedResponse:
	shape = TASK_SHAPES[task]

	if shape == PayloadShape.TEXT:
		if isinstance(raw, str):
			return NormalizedResponse(payload=raw.strip())
		reason = f"response is not text: {type(raw).__name__}"
		logger.warning("[normalize] task=%s fallback: %s", task.value, reason)
		return NormalizedResponse(payload=fallback_for(task, subject_text), used_fallback=True, reason=reason)

	try:
		payload = extract_json(raw, shape)
	except JsonExtractError as e:
		logger.warning("[normalize] task=%s failed to parse JSON, using defaults: %s", task.value, e)
		return NormalizedResponse(payload=fallback_for(task, subject_text), used_fallback=True, reason=str(e))

	return NormalizedResponse(payload=payload)
