# -*- coding: utf-8 -*-
"""
scriptdesk/cli.py

目的：
- 提供项目的命令行入口。
- init：创建项目目录骨架。
- import：把纯文本剧本导入两个工作流（拆解、分镜表）。
- breakdown / shots：调用模型做剧本拆解 / 生成镜头表，结果写回会话。
- tag：按字符区间手工标注拆解元素。
- analyze：跑任意写作分析任务，打印结果信封 JSON。
- export：导出 CSV。

注意：
- CLI 不做业务细节：只负责参数解析 + 把任务交给 service/session。
- 退出码：配置错误 2，模型调用失败 1。
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from scriptdesk.core.schemas import CATEGORIES, TaskKind

EXIT_FAILED = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(
		prog="scriptdesk",
		description="Script breakdown + shot list assistant (Gemini)",
	)
	p.add_argument("--verbose", action="store_true", help="DEBUG 日志")

	sub = p.add_subparsers(dest="cmd", required=True)

	initp = sub.add_parser("init", help="Create an empty project directory skeleton")
	initp.add_argument("--project_dir", required=True, help="e.g. projects/short_film")

	impp = sub.add_parser("import", help="Import a plain-text script into the project")
	impp.add_argument("--project_dir", required=True)
	impp.add_argument("--script_file", required=True, help=".txt / .fountain，按纯文本读取")

	bdp = sub.add_parser("breakdown", help="AI script breakdown of the imported script")
	bdp.add_argument("--project_dir", required=True)
	bdp.add_argument("--accept", action="store_true", help="把 AI 建议全部并入拆解表")

	tagp = sub.add_parser("tag", help="Tag a character range of the script as a breakdown element")
	tagp.add_argument("--project_dir", required=True)
	tagp.add_argument("--category", required=True, choices=CATEGORIES)
	tagp.add_argument("--start", type=int, required=True)
	tagp.add_argument("--end", type=int, required=True)

	shotp = sub.add_parser("shots", help="AI shot list for the imported script")
	shotp.add_argument("--project_dir", required=True)
	shotp.add_argument("--scene", default="1", help="scene 为空的镜头归到这个场次")

	anp = sub.add_parser("analyze", help="Run a writing analysis task on a text file")
	anp.add_argument("--task", required=True, choices=[t.value for t in TaskKind])
	anp.add_argument("--text_file", default=None, help="输入文本（UTF-8）；manuscript/character_suggestions 可省略")
	anp.add_argument(
		"--option",
		action="append",
		default=[],
		metavar="KEY=VALUE",
		help="任务选项，可重复；值是 JSON 列表 / 对象时按 JSON 解析，其余按字符串",
	)

	expp = sub.add_parser("export", help="Export breakdown or shot list as CSV")
	expp.add_argument("--project_dir", required=True)
	expp.add_argument("--what", required=True, choices=["breakdown", "shots"])
	expp.add_argument("--out", default=None, help="缺省写到 <project_dir>/exports/")

	for sp in (bdp, shotp, anp):
		sp.add_argument("--env_root", default=None, help="查找 .env 的目录，缺省为当前目录")

	return p


def parse_options(pairs: List[str]) -> Dict[str, Any]:
	options: Dict[str, Any] = {}
	for pair in pairs:
		if "=" not in pair:
			raise ValueError(f"option must be KEY=VALUE: {pair!r}")
		key, value = pair.split("=", 1)
		# 只有列表 / 对象按 JSON 解析；标量一律保留原字符串（"42"、"true" 都是合法文本）
		try:
			decoded = json.loads(value)
		except ValueError:
			decoded = None
		options[key.strip()] = decoded if isinstance(decoded, (list, dict)) else value
	return options


def _open_store(project_dir: str):
	from scriptdesk.core.io import project_paths
	from scriptdesk.core.store import JsonStore

	paths = project_paths(project_dir)
	if not paths.store_dir.exists():
		raise FileNotFoundError(f"not a project (run init first): {paths.root}")
	return paths, JsonStore(paths.store_dir)


def _load_service(env_root: Optional[str]):
	from scriptdesk.providers.llm.gemini_client import load_gemini_client
	from scriptdesk.service import ScriptService

	llm = load_gemini_client(project_root=env_root)
	return llm, ScriptService(llm)


def cmd_init(project_dir: str) -> None:
	from scriptdesk.core.io import project_paths

	paths = project_paths(project_dir)
	paths.ensure_dirs()
	print(f"[OK] project skeleton created: {paths.root}")


def cmd_import(project_dir: str, script_file: str) -> None:
	from scriptdesk.core.script_import import read_script_file
	from scriptdesk.core.session import BreakdownSession, ShotListSession

	paths, store = _open_store(project_dir)
	text = read_script_file(script_file)

	paths.script.write_text(text, encoding="utf-8")
	BreakdownSession(store).set_script(text)
	ShotListSession(store).set_script(text)
	print(f"[OK] imported {len(text)} chars -> {paths.script}")


def cmd_breakdown(project_dir: str, accept: bool, env_root: Optional[str] = None) -> int:
	from scriptdesk.core.session import BreakdownSession

	_, store = _open_store(project_dir)
	session = BreakdownSession(store)
	script = session.document.plain_text()
	if not script.strip():
		print("[INFO] script is empty; run import first.")
		return 0

	llm, service = _load_service(env_root)
	try:
		result = service.analyze_script_breakdown(script)
	finally:
		llm.close()

	if not result.success:
		print(f"[ERROR] {result.error}")
		return EXIT_FAILED

	if result.used_fallback:
		print("[INFO] model response could not be parsed; no suggestions.")

	for category, items in result.data:
		if items:
			print(f"{category}: {', '.join(items)}")

	if accept:
		n = session.accept_all(result.data)
		print(f"[OK] accepted {n} element(s)")
	return 0


def cmd_tag(project_dir: str, category: str, start: int, end: int) -> None:
	from scriptdesk.core.editor import Selection
	from scriptdesk.core.session import BreakdownSession

	_, store = _open_store(project_dir)
	session = BreakdownSession(store)
	text = session.tag_selection(Selection(start, end), category)
	print(f"[OK] {category}: {text}")


def cmd_shots(project_dir: str, scene: str, env_root: Optional[str] = None) -> int:
	from scriptdesk.core.session import ShotListSession

	_, store = _open_store(project_dir)
	session = ShotListSession(store)
	if not session.script.strip():
		print("[INFO] script is empty; run import first.")
		return 0

	llm, service = _load_service(env_root)
	try:
		result = service.generate_shot_list(session.script)
	finally:
		llm.close()

	if not result.success:
		print(f"[ERROR] {result.error}")
		return EXIT_FAILED

	if result.is_empty:
		print("[INFO] AI could not generate any shots from this script. Try adding more descriptive scene content.")
		return 0

	added = session.add_generated(result.data, current_scene=scene)
	for s in added:
		print(f"{s.scene}-{s.shot_number} [{s.type}] {s.description}")
	print(f"[OK] added {len(added)} shot(s), total {len(session.shots)}")
	return 0


def cmd_analyze(task: str, text_file: Optional[str], option_pairs: List[str], env_root: Optional[str] = None) -> int:
	from scriptdesk.core.schemas import AnalysisRequest
	from scriptdesk.core.script_import import read_script_file

	text = read_script_file(text_file) if text_file else ""
	request = AnalysisRequest(TaskKind(task), text, parse_options(option_pairs))

	llm, service = _load_service(env_root)
	try:
		result = service.run(request)
	finally:
		llm.close()

	data = result.data
	if isinstance(data, list):
		data = [d.to_dict() if hasattr(d, "to_dict") else d for d in data]
	elif hasattr(data, "to_dict"):
		data = data.to_dict()

	print(json.dumps(
		{
			"success": result.success,
			"data": data,
			"error": result.error,
			"used_fallback": result.used_fallback,
			"meta": result.meta,
		},
		ensure_ascii=False,
		indent=2,
	))
	return 0 if result.success else EXIT_FAILED


def cmd_export(project_dir: str, what: str, out: Optional[str] = None) -> None:
	from scriptdesk.core.csv_export import breakdown_to_csv, shots_to_csv
	from scriptdesk.core.session import BreakdownSession, ShotListSession

	paths, store = _open_store(project_dir)
	if what == "breakdown":
		content = breakdown_to_csv(BreakdownSession(store).elements)
		dest = Path(out) if out else paths.breakdown_csv
	else:
		content = shots_to_csv(ShotListSession(store).shots)
		dest = Path(out) if out else paths.shot_list_csv

	dest.parent.mkdir(parents=True, exist_ok=True)
	dest.write_text(content, encoding="utf-8")
	print(f"[OK] exported {what} -> {dest}")


def main(argv=None) -> int:
	from scriptdesk.errors import ConfigurationError

	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)

	try:
		if args.cmd == "init":
			cmd_init(args.project_dir)
			return 0

		if args.cmd == "import":
			cmd_import(args.project_dir, args.script_file)
			return 0

		if args.cmd == "breakdown":
			return cmd_breakdown(args.project_dir, args.accept, env_root=args.env_root)

		if args.cmd == "tag":
			cmd_tag(args.project_dir, args.category, args.start, args.end)
			return 0

		if args.cmd == "shots":
			return cmd_shots(args.project_dir, args.scene, env_root=args.env_root)

		if args.cmd == "analyze":
			return cmd_analyze(args.task, args.text_file, args.option, env_root=args.env_root)

		if args.cmd == "export":
			cmd_export(args.project_dir, args.what, out=args.out)
			return 0
	except ConfigurationError as e:
		print(f"[ERROR] {e}", file=sys.stderr)
		return EXIT_CONFIG

	return 0
