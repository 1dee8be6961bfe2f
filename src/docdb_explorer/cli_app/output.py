"""Output helpers for CLI commands."""

from __future__ import annotations

import argparse
import json
from typing import Any


def add_output_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )


def emit(args: argparse.Namespace, payload: Any) -> None:
    if getattr(args, "output", "text") == "json":
        print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))
        return

    if isinstance(payload, dict):
        for key, value in payload.items():
            if isinstance(value, list):
                print(f"{key}:")
                for entry in value:
                    print(f"  - {entry}")
            else:
                print(f"{key}: {value}")
        return

    print(payload)
