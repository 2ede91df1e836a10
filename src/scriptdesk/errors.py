# -*- coding: utf-8 -*-
"""
scriptdesk/errors.py

异常分类：
- ConfigurationError：调用前的配置问题（没设 API key、任务选项缺失/非法）。
  同步抛出，调用方修好配置再重试。
- UpstreamCallError：外部模型调用本身失败（网络、配额、模型报错）。
  service 层会把它转成 success=False 的结果，不自动重试。

注意：
- “模型返回了乱七八糟的文本”不是异常，由 normalizer 降级为默认值。
- “生成了 0 个镜头”也不是异常，由结果信封的 is_empty 表达。
"""

from __future__ import annotations


class ScriptDeskError(Exception):
	pass


class ConfigurationError(ScriptDeskError):
	pass


class UpstreamCallError(ScriptDeskError):
	pass
