from __future__ import annotations
import json
import logging
import sys
from typing import Dict, List

from .api.orchestrator import evaluate
from .inputs.boundary import parse_inputs, to_percent_units

logger = logging.getLogger(__name__)

USAGE = "Usage: python -m chainroi.cli [field=value ...]  (rates in percent, e.g. discount_rate=10)"


def parse_args(argv: List[str]) -> Dict[str, float]:
    out: Dict[str, float] = {}
    for arg in argv:
        key, sep, value = arg.partition("=")
        if not sep or not key:
            raise ValueError(f"expected field=value, got {arg!r}")
        try:
            out[key] = float(value)
        except ValueError:
            raise ValueError(f"{key} must be a number") from None
    return out


def main(argv: List[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("-h", "--help"):
        print(USAGE)
        return 0
    try:
        inputs = parse_inputs(parse_args(args))
    except ValueError as e:
        logger.error("%s", e)
        print(USAGE, file=sys.stderr)
        return 2
    result = evaluate(inputs)
    print(json.dumps({**result.to_dict(), "inputs": to_percent_units(inputs)}, indent=2))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    sys.exit(main())
