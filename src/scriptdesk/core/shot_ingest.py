# -*- coding: utf-8 -*-
"""
scriptdesk/core/shot_ingest.py

这个文件做什么：
- 把 shot list 任务的 payload 变成一串字段齐全的 ShotRecord。
- 纯函数：不读写文件、不调用模型。

流程：
1) payload 不是 list：在原始响应里再找一次 `[{...}]`（独立于 normalizer 的扫描）；
   还找不到就当作空列表
2) 每个元素叠加在 SHOT_DEFAULTS 上（模型给了哪些字段都行），并分配新 id
3) 返回长度 = 找回的元素个数（可以是 0，0 不是错误）
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping

from scriptdesk.core.json_extract import JsonExtractError, recover_object_array
from scriptdesk.core.schemas import SHOT_DEFAULTS, ShotRecord, new_shot_id
from scriptdesk.core.schemas.shot import JSON_KEYS

logger = logging.getLogger(__name__)


def _as_text(value: Any, default: str) -> str:
	if value is None:
		return default
	if isinstance(value, bool):
		return "true" if value else "false"
	if isinstance(value, (dict, list)):
		return default
	return str(value)


def complete_shot(element: Mapping[str, Any], shot_id: str) -> ShotRecord:
	"""把一个（可能残缺的）镜头 dict 叠加到默认值上。"""
	kwargs = {}
	for attr, key in JSON_KEYS.items():
		if attr == "id":
			continue
		kwargs[attr] = _as_text(element.get(key), SHOT_DEFAULTS[key])
	return ShotRecord(id=shot_id, **kwargs)


def _recover_elements(payload: Any, raw_text: str) -> List[Any]:
	if isinstance(payload, list):
		return payload

	try:
		recovered = recover_object_array(raw_text)
	except JsonExtractError as e:
		logger.warning("[shots] payload is not a list and recovery failed: %s", e)
		return []

	logger.warning("[shots] recovered %d element(s) from raw response", len(recovered))
	return recovered


def ingest_shots(
	payload: Any,
	raw_text: str = "",
	id_factory: Callable[[], str] = new_shot_id,
) -> List[ShotRecord]:
	shots: List[ShotRecord] = []
	seen_ids = set()

	for element in _recover_elements(payload, raw_text):
		if isinstance(element, ShotRecord):
			element = element.to_dict()

		if not isinstance(element, Mapping):
			logger.warning("[shots] skip non-object element: %r", element)
			continue

		shot_id = id_factory()
		# 批内唯一：自定义 id_factory 撞号时补一个 uuid
		while shot_id in seen_ids:
			shot_id = new_shot_id()
		seen_ids.add(shot_id)

		shots.append(complete_shot(element, shot_id))

	return shots
