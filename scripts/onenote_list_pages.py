#!/usr/bin/env python3
"""List the pages of a OneNote section addressed by path."""

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
from onenote_kit.logging_config import setup_logging
from onenote_kit.onenote import notebooks, pages, sections


async def main() -> None:
    parser = argparse.ArgumentParser(description="List pages in a OneNote section")
    parser.add_argument("--notebook", required=True, help="Notebook name")
    parser.add_argument("--path", required=True, help="Section path, e.g. 'Journal/2022/2022-05'")
    args = parser.parse_args()

    setup_logging()
    try:
        client = auth.get_graph_client()
        notebook = await notebooks.find_notebook(client, args.notebook)
        section = await sections.resolve_section(client, notebook.id, args.path)
        result = await pages.list_pages(client, section.id)
        print(json.dumps(result, indent=2))
    except Exception as exc:
        print(json.dumps({"error": str(exc)}), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
