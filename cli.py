# JSON Diff Pro v1.0.0
#!/usr/bin/env python3
"""
JSON Diff Pro CLI

Command-line interface for formatting, validating and comparing relaxed JSON.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1


def _load(path: str):
    """Load and validate a file, printing its diagnostic on failure."""
    from core import parse_json_file
    from config import settings

    try:
        parsed = parse_json_file(path, tab_width=settings.TAB_WIDTH, context_radius=settings.CONTEXT_RADIUS)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read {path}: {e}", file=sys.stderr)
        return None

    if not parsed.valid:
        print(f"{path}: {parsed.validation.diagnostic.render()}", file=sys.stderr)
        return None
    return parsed


def _mark_segment(segment: dict) -> str:
    if segment["op"] == "removed":
        return f"[-{segment['text']}-]"
    if segment["op"] == "added":
        return f"{{+{segment['text']}+}}"
    return segment["text"]


def compare_files(before_path: str, after_path: str, inline: bool = False, as_json: bool = False) -> int:
    """Compare two JSON files and print differences."""
    from core import compare_values, MISSING

    before = _load(before_path)
    after = _load(after_path)
    if before is None or after is None:
        return EXIT_INVALID

    result = compare_values(before.value, after.value, inline=inline)

    if as_json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return EXIT_OK

    print(f"\nComparing: {before_path} vs {after_path}")
    print("=" * 60)

    if result.is_identical:
        print("No differences found")
        return EXIT_OK

    print(f"{result.change_count} difference(s) found:\n")

    for change in result.changes:
        print(f"  Path:  {change.path_str}")
        print(f"  Type:  {change.change_type.value}")
        if change.old_value is not MISSING:
            print(f"  Old:   {json.dumps(change.old_value, ensure_ascii=False)}")
        if change.new_value is not MISSING:
            print(f"  New:   {json.dumps(change.new_value, ensure_ascii=False)}")
        if change.inline_diff:
            words = "".join(_mark_segment(s) for s in change.inline_diff["segments"])
            print(f"  Diff:  {words}")
        print()

    return EXIT_OK


def format_file(path: str, write: bool = False) -> int:
    """Print a file as indented strict JSON, or rewrite it in place."""
    from core import serialize
    from config import settings

    parsed = _load(path)
    if parsed is None:
        return EXIT_INVALID

    formatted = serialize(parsed.value, indent=settings.INDENT_WIDTH)
    if write:
        Path(path).write_text(formatted + "\n", encoding="utf-8")
        logger.info(f"Rewrote {path}")
    else:
        print(formatted)
    return EXIT_OK


def validate_files(paths: list[str]) -> int:
    """Validate each file, reporting every failure."""
    status = EXIT_OK
    for path in paths:
        if _load(path) is None:
            status = EXIT_INVALID
        else:
            print(f"{path}: valid")
    return status


def clean_file(path: str) -> int:
    """Print the cleaned text of a file without parsing it."""
    from core import clean
    from config import settings

    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read {path}: {e}", file=sys.stderr)
        return EXIT_INVALID

    print(clean(text, tab_width=settings.TAB_WIDTH))
    return EXIT_OK


def run_server(host: str = "127.0.0.1", port: int = 8000, reload: bool = False, workers: int = 1) -> int:
    """Run the FastAPI server."""
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=reload,
        workers=workers if not reload else 1  # reload mode requires single worker
    )
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="JSON Diff Pro CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # compare
    compare_parser = subparsers.add_parser("compare", help="Compare two JSON files")
    compare_parser.add_argument("before", help="Original file")
    compare_parser.add_argument("after", help="Modified file")
    compare_parser.add_argument("--inline", action="store_true", help="Show word-level diffs of changed values")
    compare_parser.add_argument("--json", action="store_true", dest="as_json", help="Print the result as JSON")

    # format
    format_parser = subparsers.add_parser("format", help="Format a relaxed JSON file")
    format_parser.add_argument("file", help="File to format")
    format_parser.add_argument("--write", action="store_true", help="Rewrite the file in place")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate relaxed JSON files")
    validate_parser.add_argument("files", nargs="+", help="Files to validate")

    # clean
    clean_parser = subparsers.add_parser("clean", help="Strip comments, quote keys and drop trailing commas")
    clean_parser.add_argument("file", help="File to clean")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.add_argument("--workers", type=int, default=1, help="Number of worker processes")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.command:
        parser.print_help()
        return EXIT_OK

    if args.command == "compare":
        return compare_files(args.before, args.after, args.inline, args.as_json)
    elif args.command == "format":
        return format_file(args.file, args.write)
    elif args.command == "validate":
        return validate_files(args.files)
    elif args.command == "clean":
        return clean_file(args.file)
    elif args.command == "serve":
        return run_server(args.host, args.port, args.reload, args.workers)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
