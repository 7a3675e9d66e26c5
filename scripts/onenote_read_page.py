#!/usr/bin/env python3
"""Read a OneNote page's content, addressed by path."""

import argparse
import asyncio
import json
import os
import sys

# Auto-detect venv and re-exec if needed
_script_dir = os.path.dirname(os.path.abspath(__file__))
_repo_root = os.path.dirname(_script_dir)
_venv_python = os.path.join(_repo_root, ".venv", "bin", "python3")
if os.path.exists(_venv_python) and sys.executable != _venv_python:
    os.execv(_venv_python, [_venv_python] + sys.argv)

sys.path.insert(0, os.path.join(_repo_root, "src"))

from onenote_kit import auth
from onenote_kit.connector import OneNoteConnector
from onenote_kit.html_convert import html_to_markdown
from onenote_kit.logging_config import setup_logging


async def main() -> None:
    parser = argparse.ArgumentParser(description="Read a OneNote page")
    parser.add_argument("--notebook", required=True, help="Notebook name")
    parser.add_argument("--path", required=True, help="Page path, e.g. 'Journal/2022/2022-05/2022-05-05'")
    parser.add_argument("--markdown", action="store_true", help="Convert the HTML content to Markdown")
    args = parser.parse_args()

    setup_logging()
    try:
        connector = OneNoteConnector(auth.get_graph_client())
        stream = await connector.get_page_content_stream(args.notebook, args.path)
        with stream:
            content = stream.read().decode("utf-8")
        if args.markdown:
            content = html_to_markdown(content)
        print(json.dumps({"notebook": args.notebook, "path": args.path, "content": content}, indent=2))
    except Exception as exc:
        print(json.dumps({"error": str(exc)}), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
