import argparse
import json
import sys
from typing import Any, Callable

from envtyped.main import bootstrap
from envtyped.utils import EnvConfig, EnvVarError, configure_logging
from envtyped.utils.parsing import parse_bool_token, parse_int_prefix, parse_json

ACCESSORS: dict[str, Callable[[EnvConfig], Callable[..., Any]]] = {
    "str": lambda cfg: cfg.get_str,
    "int": lambda cfg: cfg.get_int,
    "bool": lambda cfg: cfg.get_bool,
    "json": lambda cfg: cfg.get_json,
}


def _parse_default(kind: str, text: str) -> Any:
    if kind == "str":
        return text
    if kind == "json":
        try:
            return parse_json(text)
        except ValueError as e:
            raise ValueError(f"invalid json default: {e}") from e
    value = parse_int_prefix(text) if kind == "int" else parse_bool_token(text)
    if value is None:
        raise ValueError(f"invalid {kind} default: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="envtyped",
        description="Read a typed value from the environment",
    )
    p.add_argument("key", help="Environment variable name")
    p.add_argument(
        "--type",
        dest="kind",
        default="str",
        choices=sorted(ACCESSORS),
        help="Target type",
    )
    p.add_argument("--default", default=None, help="Default value, coerced like the variable itself")
    p.add_argument("--env-file", default=None, help="Dotenv file to load first")
    p.add_argument(
        "--log-format",
        default=None,
        choices=["plain", "json"],
        help="Log output format (overrides LOG_FORMAT)",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = bootstrap(args.env_file)
    configure_logging(fmt=args.log_format, config=cfg)

    accessor = ACCESSORS[args.kind](cfg)
    try:
        if args.default is None:
            value = accessor(args.key)
        else:
            value = accessor(args.key, _parse_default(args.kind, args.default))
    except EnvVarError as e:
        print(str(e), file=sys.stderr)
        return 1
    except ValueError as e:
        parser.print_usage(sys.stderr)
        print(f"envtyped: error: {e}", file=sys.stderr)
        return 2

    if args.kind in ("json", "bool"):
        print(json.dumps(value, ensure_ascii=False))
    else:
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
