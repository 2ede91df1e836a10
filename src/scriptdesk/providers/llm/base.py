# -*- coding: utf-8 -*-
"""
providers/llm/base.py

service 层只依赖这个接口：generate_text(prompt) -> str
- 真实实现：gemini_client.GeminiLLMClient
- 测试里换成假的实现即可，不碰任何全局状态
"""

from __future__ import annotations

from typing import Protocol


class TextModel(Protocol):
	def generate_text(self, prompt: str) -> str:
		...
