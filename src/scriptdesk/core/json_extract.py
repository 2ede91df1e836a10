# -*- coding: utf-8 -*-
"""
scriptdesk/core/json_extract.py

这个文件做什么：
- 从模型返回的自由文本里“抠”出 JSON：
  1) 去掉 Markdown 代码块围栏（```json / ``` 都去）
  2) 贪婪匹配：第一个 '{' 到最后一个 '}'（或 '[' 到 ']'）
  3) json.loads 严格解析
- 纯函数，不记日志、不做默认值；失败一律 raise JsonExtractError，
  由 normalizer 决定怎么降级。

注意：
- 这是 best-effort：模型输出不受控，这里只处理常见的包装形式。
"""

from __future__ import annotations

import json
import re
from typing import Any

from scriptdesk.core.schemas import PayloadShape


_FENCE_RE = re.compile(r"```[A-Za-z0-9_+-]*[ \t]*\r?\n?")
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")

# shot list 的二次兜底：只认“对象数组”字面量
OBJECT_ARRAY_RE = re.compile(r"\[\s*\{[\s\S]*\}\s*\]")


class JsonExtractError(ValueError):
	pass


def _reject_constant(name: str) -> Any:
	# NaN / Infinity 不是合法 JSON
	raise JsonExtractError(f"non-standard JSON constant: {name}")


def strip_code_fences(text: str) -> str:
	return _FENCE_RE.sub("", text)


def _pattern_for(shape: PayloadShape) -> "re.Pattern[str]":
	if shape == PayloadShape.OBJECT:
		return _OBJECT_RE
	if shape == PayloadShape.ARRAY:
		return _ARRAY_RE
	raise ValueError(f"no JSON pattern for shape: {shape}")


def find_json_literal(text: str, shape: PayloadShape) -> str:
	m = _pattern_for(shape).search(strip_code_fences(text))
	if m is None:
		raise JsonExtractError(f"no JSON {shape.value} found in response")
	return m.group(0)


def _check_shape(value: Any, shape: PayloadShape) -> None:
	if shape == PayloadShape.OBJECT and not isinstance(value, dict):
		raise JsonExtractError(f"expected JSON object, got {type(value).__name__}")
	if shape == PayloadShape.ARRAY and not isinstance(value, list):
		raise JsonExtractError(f"expected JSON array, got {type(value).__name__}")


def extract_json(text: str, shape: PayloadShape) -> Any:
	"""
	文本 -> 期望形状的 JSON 值。

	任何失败（找不到、解析错、顶层类型不对）都 raise JsonExtractError。
	"""
	if not isinstance(text, str):
		raise JsonExtractError(f"response is not text: {type(text).__name__}")

	literal = find_json_literal(text, shape)
	try:
		value = json.loads(literal, parse_constant=_reject_constant)
	except (ValueError, RecursionError) as e:
		raise JsonExtractError(f"invalid JSON: {e}") from e

	_check_shape(value, shape)
	return value


def recover_object_array(text: str) -> Any:
	"""
	独立于 extract_json 的数组兜底：
	- 直接在原文里找 `[{...}]`，能跳过前面诸如 "[5]" 之类的干扰方括号
	"""
	if not isinstance(text, str):
		raise JsonExtractError(f"response is not text: {type(text).__name__}")

	m = OBJECT_ARRAY_RE.search(text)
	if m is None:
		raise JsonExtractError("no JSON object array found in response")

	try:
		value = json.loads(m.group(0), parse_constant=_reject_constant)
	except (ValueError, RecursionError) as e:
		raise JsonExtractError(f"invalid JSON array: {e}") from e

	_check_shape(value, PayloadShape.ARRAY)
	return value
