"""CLI entry point for the revision diff interpreter."""
import argparse
from dotenv import load_dotenv
import json
import os
import sys
import traceback
from pathlib import Path

from pydantic import ValidationError

from revision_diff.interpreter import DiffInterpreter
from revision_diff.models import DiffResponse, EditDetails
from revision_diff.utils.logging_setup import configure_logging

load_dotenv()

# Exit codes
EXIT_SUCCESS = 0
EXIT_INVALID_INPUT = 1
EXIT_UNEXPECTED = 5
EXIT_KEYBOARD_INTERRUPT = 130

# Defaults
LOG_LEVEL_ENV = "REVISION_DIFF_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SEPARATOR = "\n"
STDIN_PAYLOAD = "-"


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="revision-diff",
        description="Summarize the size change and changed text of a revision diff",
    )
    parser.add_argument(
        "payload",
        type=str,
        help=f"Path to a compare response JSON document ('{STDIN_PAYLOAD}' for stdin)",
    )
    parser.add_argument(
        "--separator",
        type=str,
        default=DEFAULT_SEPARATOR,
        help="Text printed after each changed fragment (default: newline)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        help=f"Log level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        default="text",
        choices=("text", "json"),
        help="Log record format: text (default) or json",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging and tracebacks")
    parser.add_argument(
        "--output-json", action="store_true", help="Output results as JSON"
    )
    return parser


def read_payload(raw_path: str) -> str:
    """Read the compare response document.

    Args:
        raw_path: File path from CLI arguments, or '-' for stdin.

    Returns:
        The raw JSON text.

    Raises:
        SystemExit: If the path is not a readable file.
        UnicodeDecodeError: If the document is not valid UTF-8.
    """
    if raw_path == STDIN_PAYLOAD:
        return sys.stdin.read()
    path = Path(raw_path).expanduser()
    if not path.is_file():
        print(f"Error: '{raw_path}' is not a file.", file=sys.stderr)
        raise SystemExit(EXIT_INVALID_INPUT)
    return path.read_text(encoding="utf-8")


def _escape_unencodable(text: str) -> str:
    """Replace code points UTF-8 cannot encode (lone surrogates) with escapes."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def format_result_json(details: EditDetails) -> str:
    """Serialize EditDetails to a JSON string."""
    payload = json.dumps(details.model_dump(mode="json"), indent=2, ensure_ascii=False)
    return _escape_unencodable(payload)


def print_result_human(details: EditDetails, separator: str) -> None:
    """Print the size delta followed by the rendered change text."""
    print(f"Size delta: {details.size_delta:+d}")
    print(f"Changed fragments: {len(details.fragments)}")
    if details.fragments:
        print()
        sys.stdout.write(_escape_unencodable(details.render(separator)))


def _handle_error(label: str, exc: BaseException, verbose: bool, exit_code: int) -> int:
    """Print error message to stderr and return the exit code."""
    print(f"{label}: {exc}", file=sys.stderr)
    if verbose:
        traceback.print_exc(file=sys.stderr)
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code integer.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(
        "DEBUG" if args.verbose else args.log_level,
        json_format=args.log_format == "json",
    )

    try:
        payload = read_payload(args.payload)
    except SystemExit as exc:
        return exc.code
    except (OSError, UnicodeDecodeError) as exc:
        return _handle_error("Cannot read payload", exc, args.verbose, EXIT_INVALID_INPUT)

    try:
        response = DiffResponse.from_json(payload)
    except ValidationError as exc:
        return _handle_error("Invalid diff payload", exc, args.verbose, EXIT_INVALID_INPUT)

    try:
        details = DiffInterpreter().interpret_response(response)

        if args.output_json:
            print(format_result_json(details))
        else:
            print_result_human(details, args.separator)

        return EXIT_SUCCESS

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_KEYBOARD_INTERRUPT

    except Exception as exc:
        return _handle_error("Unexpected error", exc, args.verbose, EXIT_UNEXPECTED)


def main_entry() -> None:
    """Console script wrapper around main()."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
