#!/usr/bin/env python3
"""Check current Microsoft Graph authentication status."""

import argparse
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


def main() -> None:
    parser = argparse.ArgumentParser(description="Check or clear Microsoft Graph sign-in")
    parser.add_argument("--logout", action="store_true", help="Forget the saved sign-in")
    args = parser.parse_args()

    setup_logging()
    try:
        if args.logout:
            auth.logout()
            print(json.dumps({"authenticated": False, "reason": "Logged out."}, indent=2))
            return
        print(json.dumps(auth.check_auth_status(), indent=2))
    except Exception as exc:
        print(json.dumps({"error": str(exc)}, indent=2), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
