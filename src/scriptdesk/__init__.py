# -*- coding: utf-8 -*-
"""scriptdesk：剧本拆解 + 分镜表辅助工具（模型调用走 Gemini）。"""

__version__ = "0.1.0"
