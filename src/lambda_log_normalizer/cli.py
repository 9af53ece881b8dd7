from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path

from lambda_log_normalizer.core.batch import normalize_batch
from lambda_log_normalizer.core.config import LOG_LEVEL_ENV, FailurePolicy, parse_policy
from lambda_log_normalizer.core.models import log_result_to_dict
from lambda_log_normalizer.core.reader import load_records


def _workers(s: str) -> int:
    try:
        value = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError("workers must be an integer") from e
    if value < 1:
        raise argparse.ArgumentTypeError("workers must be >= 1")
    return value


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Normalize captured runtime log records to JSON.")
    p.add_argument("log_path", help="JSON array or JSON lines of {time, type, record} envelopes")
    p.add_argument(
        "--policy",
        choices=[fp.value for fp in FailurePolicy],
        default=None,
        help="drop: silently skip failures; strict: also report them on stderr",
    )
    p.add_argument("--workers", type=_workers, default=None, help="Parallel workers (default: 1)")
    p.add_argument("--compact", action="store_true", help="One JSON document per line")

    args = p.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, os.getenv(LOG_LEVEL_ENV, "WARNING").upper(), logging.WARNING),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        records = asyncio.run(load_records(Path(args.log_path)))
        policy = parse_policy(args.policy) if args.policy else None
        batch = normalize_batch(records, policy=policy, max_workers=args.workers)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    indent = None if args.compact else 2
    for r in batch.results:
        print(json.dumps(log_result_to_dict(r), indent=indent))

    for f in batch.failures:
        print(f"record {f.index}: {type(f.error).__name__}: {f.error}", file=sys.stderr)

    print(
        f"\nNormalized {len(batch.results)} records "
        f"({batch.excluded} excluded, {len(batch.failures)} reported failures).",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
