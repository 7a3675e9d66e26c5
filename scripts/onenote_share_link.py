#!/usr/bin/env python3
"""Get a link to a OneNote page or section, addressed by path."""

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

from onenote_kit import auth, config
from onenote_kit.connector import LINK_SCOPES, LINK_TYPES, OneNoteConnector
from onenote_kit.logging_config import setup_logging


async def main() -> None:
    parser = argparse.ArgumentParser(description="Create a link to a OneNote page or section")
    parser.add_argument("--notebook", required=True, help="Notebook name")
    parser.add_argument("--path", required=True, help="Page path, or section path with --section")
    parser.add_argument("--section", action="store_true", help="Treat --path as a section path")
    parser.add_argument("--type", default=config.DEFAULT_LINK_TYPE, choices=list(LINK_TYPES), help="Link type")
    parser.add_argument("--scope", default=config.DEFAULT_LINK_SCOPE, choices=list(LINK_SCOPES), help="Link scope")
    args = parser.parse_args()

    setup_logging()
    try:
        connector = OneNoteConnector(auth.get_graph_client())
        if args.section:
            link = await connector.create_section_share_link(args.notebook, args.path, args.type, args.scope)
        else:
            link = await connector.create_page_share_link(args.notebook, args.path, args.type, args.scope)
        print(json.dumps({"notebook": args.notebook, "path": args.path, "link": link}, indent=2))
    except Exception as exc:
        print(json.dumps({"error": str(exc)}), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
