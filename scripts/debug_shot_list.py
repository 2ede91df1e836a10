# -*- coding: utf-8 -*-
"""
scripts/debug_shot_list.py

这个脚本做什么：
- 读取剧本文本（默认 docs/script.txt）
- 调用 shot list 任务（通过 Gemini）
- 打印：
  1) 原始响应预览（前 N 字符），便于看模型到底回了什么
  2) 是否走了 fallback、是否为空结果
  3) 预览前 N 个镜头

使用方式：
1) 在项目根目录创建 .env（并确保 .gitignore 忽略它）：
   GEMINI_API_KEY=xxx
   GEMINI_MODEL=gemini-2.0-flash
2) 放入测试剧本：docs/script.txt
3) 运行：
   python scripts/debug_shot_list.py
"""

from __future__ import annotations

import argparse

from scriptdesk.core.normalizer import normalize_response
from scriptdesk.core.schemas import AnalysisRequest, TaskKind
from scriptdesk.core.script_import import read_script_file
from scriptdesk.core.shot_ingest import ingest_shots
from scriptdesk.prompts import build_prompt
from scriptdesk.providers.llm.gemini_client import load_gemini_client


def build_argparser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser()
	p.add_argument("--in_path", default="docs/script.txt", help="输入剧本路径（UTF-8）")
	p.add_argument("--raw_preview", type=int, default=400, help="原始响应预览字符数")
	p.add_argument("--preview", type=int, default=8, help="预览前 N 个镜头")
	return p


def main() -> None:
	args = build_argparser().parse_args()

	text = read_script_file(args.in_path)
	prompt = build_prompt(AnalysisRequest(TaskKind.SHOT_LIST, text))
	print(f"[prompt] chars={len(prompt)} script_chars={len(text)}")

	with load_gemini_client(project_root=".") as llm:
		raw = llm.generate_text(prompt)

	print(f"\n--- raw response (first {args.raw_preview}) ---")
	print(raw[: args.raw_preview])

	normalized = normalize_response(TaskKind.SHOT_LIST, raw)
	shots = ingest_shots(None if normalized.used_fallback else normalized.payload, raw_text=raw)

	print(f"\n[normalize] fallback={normalized.used_fallback} reason={normalized.reason or '-'}")
	print(f"[ingest] shots={len(shots)}")
	if not shots:
		print("[ingest] no shots generated")

	print(f"\n--- preview shots (first {args.preview}) ---")
	for s in shots[: args.preview]:
		snip = s.description.replace("\n", " ")
		if len(snip) > 120:
			snip = snip[:120] + "..."
		print(f"{s.scene}-{s.shot_number} [{s.type} {s.angle} {s.lens}] {snip}")


if __name__ == "__main__":
	main()
