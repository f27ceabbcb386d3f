#!/usr/bin/env python3
"""
Migration management script for Myymotto.
Thin wrapper around the alembic CLI.
"""

import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent

COMMANDS = {
    "init": ["upgrade", "head"],
    "current": ["current"],
    "history": ["history", "--verbose"],
    "heads": ["heads", "--verbose"],
}


def run_alembic(*args: str) -> int:
    print(f"▶ alembic {' '.join(args)}")
    return subprocess.call(["alembic", *args], cwd=project_root)


def main() -> int:
    if len(sys.argv) < 2 or sys.argv[1].lower() == "help":
        print_help()
        return 0 if len(sys.argv) >= 2 else 1

    command = sys.argv[1].lower()
    extra = sys.argv[2:]

    if command in COMMANDS:
        return run_alembic(*COMMANDS[command])
    if command == "upgrade":
        return run_alembic("upgrade", extra[0] if extra else "head")
    if command == "downgrade":
        return run_alembic("downgrade", extra[0] if extra else "-1")
    if command == "create":
        if not extra:
            print("❌ Error: Please provide a message for the migration")
            print("Usage: python migrate.py create 'add service log table'")
            return 1
        code = run_alembic("revision", "--autogenerate", "-m", " ".join(extra))
        print("⚠️  Please review the generated migration file before applying it")
        return code

    print(f"Unknown command: {command}")
    print_help()
    return 1


def print_help():
    print("""
🗄️  Myymotto Migration Tool

Usage: python migrate.py <command> [options]

Commands:
  init              Upgrade database to head
  create <message>  Create a new migration with autogenerate
  upgrade [rev]     Upgrade to a specific revision (default: head)
  downgrade [rev]   Downgrade to a specific revision (default: -1)
  current           Show current database revision
  history           Show all migration history
  heads             Show head revisions
  help              Show this help message
""")


if __name__ == "__main__":
    sys.exit(main())
