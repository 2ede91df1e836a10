# -*- coding: utf-8 -*-
"""Prompt 组装：只拼字符串，不调用模型。"""

from .builder import build_prompt

__all__ = ["build_prompt"]
