from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from zulip_doc_examples import __version__
from zulip_doc_examples.examples import DEFAULT_ORDER, build_registry
from zulip_doc_examples.logging_config import configure_logging
from zulip_doc_examples.results import ResultAccumulator


def _write_text(text: str, *, out_path: str | None) -> None:
    if out_path is None:
        sys.stdout.write(text)
        return
    Path(out_path).write_text(text, encoding="utf-8")
    sys.stderr.write(f"Wrote output: {out_path}\n")


def _cmd_run(args: argparse.Namespace) -> int:
    # Avoid importing HTTP dependencies for `list` / `snippet`.
    from zulip_doc_examples.api import run
    from zulip_sdk import load_settings

    settings = load_settings(Path(args.config_file) if args.config_file else None)
    names = args.only or list(DEFAULT_ORDER)
    accumulator = run(settings, names=names)
    _write_text(accumulator.to_json() + "\n", out_path=args.out)
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    registry = build_registry()
    lines = [f"{d.name}  {d.method.upper()} {d.path}  {d.status_code}" for d in registry]
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


def _cmd_snippet(args: argparse.Namespace) -> int:
    from zulip_doc_examples.snippets import extract_code_examples

    descriptor = build_registry().lookup(args.name)
    blocks = extract_code_examples(descriptor.operation)
    sys.stdout.write("\n\n".join(blocks) + "\n")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    from zulip_doc_examples.validation import OpenApiResponseValidator, validate_records

    if args.input is None or args.input == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.input).read_text(encoding="utf-8")

    records = ResultAccumulator.from_json(text)
    validator = OpenApiResponseValidator.load(Path(args.openapi))
    report = validate_records(records, validator)
    ok = all(not errors for _, errors in report)

    if args.format == "json":
        payload = {"ok": ok, "results": [{"name": name, "errors": errors} for name, errors in report]}
        sys.stdout.write(json.dumps(payload, indent=2, sort_keys=False) + "\n")
    else:
        lines = []
        for name, errors in report:
            lines.append(f"- {'FAIL' if errors else 'PASS'} {name}")
            for e in errors:
                lines.append(f"    - {e}")
        lines.append(f"records={len(report)} ok={ok}")
        sys.stdout.write("\n".join(lines) + "\n")
    return 0 if ok else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="zulip-doc-examples")
    parser.add_argument("--version", action="version", version=f"zulip-doc-examples {__version__}")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--json-logs", action="store_true", help="Render log lines as JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Run the examples against a live server and print their responses")
    run.add_argument("--only", action="append", metavar="NAME", help="Repeatable; run only these examples, in the given order")
    run.add_argument("--config-file", type=str, help="Path to a zuliprc file (overrides ZULIP_* variables)")
    run.add_argument("--out", type=str, help="Write the JSON array to a file instead of stdout")
    run.set_defaults(handler=_cmd_run)

    list_cmd = sub.add_parser("list", help="List registered examples")
    list_cmd.set_defaults(handler=_cmd_list)

    snippet = sub.add_parser("snippet", help="Print the documented code blocks of one example")
    snippet.add_argument("name")
    snippet.set_defaults(handler=_cmd_snippet)

    validate = sub.add_parser("validate", help="Validate generated records against an OpenAPI document")
    validate.add_argument("--openapi", required=True, help="OpenAPI document (YAML or JSON)")
    validate.add_argument("--input", type=str, help="Generated JSON array (default: stdin)")
    validate.add_argument("--format", default="text", choices=["text", "json"])
    validate.set_defaults(handler=_cmd_validate)

    args = parser.parse_args(argv)
    configure_logging(args.log_level, json_logs=args.json_logs)
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
