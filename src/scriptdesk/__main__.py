# -*- coding: utf-8 -*-
"""
scriptdesk/__main__.py

- 支持 `python -m scriptdesk`，直接转发到 cli.main()。
"""

from .cli import main

if __name__ == "__main__":
	raise SystemExit(main())
