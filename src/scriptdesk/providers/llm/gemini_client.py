# -*- coding: utf-8 -*-
"""
providers/llm/gemini_client.py

这个文件做什么：
- 提供一个极薄的 Gemini client（REST generateContent），供 service 层调用。
- 支持从项目根目录的 .env 读取配置，避免在 shell 里 export。
- 对外只暴露一个方法：generate_text(prompt) -> str（纯文本进、纯文本出）

配置来源优先级（从高到低）：
1) 显式传参（api_key/base_url/model/timeout_s）
2) 系统环境变量
3) .env 文件（override=False：只补环境里没有的键）

注意：
- key 只保存在 GeminiConfig 里，跟着 client 实例走；没有进程级单例。
- 任何调用失败都包装成 UpstreamCallError，不重试。
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import httpx
from dotenv import load_dotenv

from scriptdesk.errors import ConfigurationError, UpstreamCallError


DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


def _snip(s: str, limit: int = 1000) -> str:
	if len(s) > limit:
		return s[:limit] + "...(truncated)"
	return s


@dataclass
class GeminiConfig:
	api_key: str
	base_url: str = DEFAULT_BASE_URL
	model: str = DEFAULT_MODEL
	timeout_s: float = 60.0
	temperature: Optional[float] = None


class GeminiLLMClient:
	def __init__(self, cfg: GeminiConfig, transport: Optional[httpx.BaseTransport] = None):
		if not cfg.api_key.strip():
			raise ConfigurationError("API key not set. Please configure your Gemini API key.")

		self.cfg = cfg
		self._client = httpx.Client(
			base_url=cfg.base_url,
			timeout=httpx.Timeout(cfg.timeout_s),
			headers={
				"x-goog-api-key": cfg.api_key,
				"Content-Type": "application/json",
			},
			transport=transport,
		)

	def close(self) -> None:
		self._client.close()

	def __enter__(self) -> "GeminiLLMClient":
		return self

	def __exit__(self, *exc: Any) -> None:
		self.close()

	def generate_text(self, prompt: str) -> str:
		payload: Dict[str, Any] = {
			"contents": [
				{"role": "user", "parts": [{"text": prompt}]},
			],
		}
		if self.cfg.temperature is not None:
			payload["generationConfig"] = {"temperature": self.cfg.temperature}

		try:
			r = self._client.post(f"/models/{self.cfg.model}:generateContent", json=payload)
		except httpx.HTTPError as e:
			raise UpstreamCallError(f"Gemini request failed: {e}") from e

		if r.status_code < 200 or r.status_code >= 300:
			raise UpstreamCallError(f"Gemini HTTP {r.status_code}: {_snip(r.text)}")

		try:
			data = r.json()
		except ValueError:
			raise UpstreamCallError(f"Gemini returned non-JSON body: {_snip(r.text)}") from None

		try:
			parts = data["candidates"][0]["content"]["parts"]
			return "".join(p.get("text", "") for p in parts)
		except (KeyError, IndexError, TypeError, AttributeError):
			raise UpstreamCallError(
				f"Unexpected response shape: {_snip(json.dumps(data, ensure_ascii=False))}"
			) from None


def _load_dotenv_if_present(project_root: Path) -> None:
	env_path = project_root / ".env"
	if env_path.exists():
		load_dotenv(dotenv_path=str(env_path), override=False)


def load_gemini_client(
	project_root: Optional[str] = None,
	api_key: Optional[str] = None,
	base_url: Optional[str] = None,
	model: Optional[str] = None,
	timeout_s: Optional[float] = None,
	transport: Optional[httpx.BaseTransport] = None,
) -> GeminiLLMClient:
	"""
	加载 Gemini client。

	默认从 project_root/.env 读取（project_root 缺省为当前工作目录）。
	没有 key 直接 ConfigurationError，不会发任何请求。
	"""
	root = Path(project_root or os.getcwd()).resolve()
	_load_dotenv_if_present(root)

	key = (api_key or os.environ.get("GEMINI_API_KEY", "")).strip()
	if not key:
		raise ConfigurationError("Missing GEMINI_API_KEY (from .env or env)")

	url = (base_url or os.environ.get("GEMINI_BASE_URL", "")).strip() or DEFAULT_BASE_URL
	m = (model or os.environ.get("GEMINI_MODEL", "")).strip() or DEFAULT_MODEL
	t = float(timeout_s or os.environ.get("GEMINI_TIMEOUT_S", "60").strip() or 60)

	cfg = GeminiConfig(api_key=key, base_url=url, model=m, timeout_s=t)
	return GeminiLLMClient(cfg, transport=transport)
