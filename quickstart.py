#!/usr/bin/env python3
# quickstart.py
"""
Quick start script for bigint-logical development.
"""

import subprocess
import sys


def main():
    print("bigint-logical Quick Start\n")

    # Python 3.11+ is required (declared in pyproject.toml)
    print(f"Using Python {sys.version}")

    print("Installing bigint-logical in development mode...")
    subprocess.run([sys.executable, "-m", "pip", "install", "-e", ".[dev]"])

    print("Testing installation...")
    subprocess.run([sys.executable, "-m", "bigint_logical.cli", "info", "--max-size", "8"])

    print("\nTry these commands:")
    print("  bigint-logical info                        # Digit capacity per fixed size")
    print("  bigint-logical diagnose                    # Check environment")
    print("  bigint-logical check --schemas ./schemas   # Validate bigint annotations")
    print("  bigint-logical encode -- -129              # -> ff7f")
    print("  bigint-logical decode --type bytes 0080    # -> 128")
    print("  python -m pytest                           # Run the tests")


if __name__ == "__main__":
    main()
