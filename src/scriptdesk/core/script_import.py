# -*- coding: utf-8 -*-
"""
scriptdesk/core/script_import.py

剧本文件导入：读出整份纯文本交给会话。

- 内部统一 UTF-8；带 BOM 的 UTF-8 也接受（utf-8-sig）
- 不做 Fountain 等剧本格式解析
- 换行统一成 \n（编辑器按字符计位置，\r\n 会让选区错位）
"""

from __future__ import annotations

from pathlib import Path


def read_script_file(path: str | Path, encoding: str = "utf-8-sig") -> str:
	p = Path(path)
	if not p.exists():
		raise FileNotFoundError(f"script file not found: {p}")

	text = p.read_bytes().decode(encoding)
	return text.replace("\r\n", "\n").replace("\r", "\n")
