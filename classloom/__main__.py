import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .core.builder import ClassLoom
from .core.config import ClassLoomConfig, ConfigError, load_config
from .core.uml_parser import list_notations


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            # stdout carries the JSON document
            logging.StreamHandler(sys.stderr)
        ]
    )


logger = logging.getLogger(__name__)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def main(argv=None) -> int:
    """Main entry point for ClassLoom."""
    parser = argparse.ArgumentParser(
        prog="classloom",
        description="ClassLoom - parse textual class diagrams into JSON",
    )
    parser.add_argument(
        "source",
        type=str,
        help="Diagram file to parse, or '-' for stdin"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a classloom.yaml file"
    )
    parser.add_argument(
        "--notation",
        type=str,
        default=None,
        choices=list_notations(),
        help="Diagram notation (overrides config)"
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indent (overrides config)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (overrides config)"
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"classloom: {e}", file=sys.stderr)
        return 2

    overrides = {
        key: value
        for key, value in (
            ("notation", args.notation),
            ("json_indent", args.indent),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    if overrides:
        try:
            config = ClassLoomConfig(**{**config.model_dump(), **overrides})
        except ValidationError as e:
            print(f"classloom: invalid option: {e}", file=sys.stderr)
            return 2

    setup_logging(config.log_level)
    logger.debug(f"Using config: {config.model_dump()}")

    try:
        text = _read_input(args.source)
    except OSError as e:
        print(f"classloom: cannot read {args.source}: {e}", file=sys.stderr)
        return 1

    app = ClassLoom(config)
    diagram = app.build(text)
    for err in diagram.errors:
        logger.warning(f"line {err.line}: {err.message}")

    print(app.render_json(diagram))
    return 0


if __name__ == "__main__":
    sys.exit(main())
