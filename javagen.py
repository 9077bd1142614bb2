#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import List

from javagen_lib import ConfigError, GeneratorConfig, load_config, run


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Generate the Java function interfaces and tuple classes of arity 0..N."
        )
    )
    parser.add_argument(
        "-c",
        "--config",
        help="YAML file with output_dir, max_arity and charset (optional)",
    )
    parser.add_argument(
        "-o",
        "--out",
        help="Output directory (default: src-gen/main/java)",
    )
    parser.add_argument(
        "-n",
        "--max-arity",
        type=int,
        help="Highest arity to generate (default: 13)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Command line values win over the config file
    try:
        config = load_config(args.config) if args.config else GeneratorConfig()
        config = config.with_overrides(output_dir=args.out, max_arity=args.max_arity)
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        written = run(config)
    except Exception as e:
        print(f"Generation failed: {e}", file=sys.stderr)
        return 1

    print(f"Generation completed. {len(written)} files written to: {config.output_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
