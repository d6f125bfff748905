import argparse
import logging
from dataclasses import replace

from jsonlcheck.config import get_settings, load_config_file
from jsonlcheck.errors import InvalidLocatorError, JsonlCheckError, NoPipeError, UsageError
from jsonlcheck.messages import log_message
from jsonlcheck.pipeline import ValidationRunner
from jsonlcheck.report import render_summary


logger = logging.getLogger("jsonlcheck")

EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonlcheck",
        description="Validates a file is in JSON-lines format and conforms to the generic entity specification.",
        epilog=(
            "examples:\n"
            '  jsonlcheck --input-url "file:///path/to/json/lines/file.jsonl"\n'
            '  jsonlcheck --input-url "https://example.com/data/truth-set.json" --file-type JSONL\n'
            "  zcat records.jsonl.gz | jsonlcheck"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-i",
        "--input-url",
        "--inputURL",
        dest="input_url",
        default=None,
        help="input location (file://, http:// or https://); reads standard input when omitted",
    )
    parser.add_argument(
        "--file-type",
        "--fileType",
        dest="file_type",
        default=None,
        type=str.upper,
        choices=["JSONL", "GZ"],
        help="file type override",
    )
    parser.add_argument("--log-level", default=None, help="logging level, e.g. DEBUG, INFO, WARNING")
    parser.add_argument("--config", default=None, help="dotenv file with SENZING_TOOLS_* settings")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    config_loaded = load_config_file(args.config) if args.config else False
    settings = get_settings()
    if args.log_level:
        settings = replace(settings, log_level=args.log_level)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    if config_loaded:
        log_message(logger, logging.INFO, 1001, path=args.config)

    runner = ValidationRunner(settings)
    try:
        tally = runner.run(locator=args.input_url, file_type=args.file_type)
    except InvalidLocatorError:
        locator = args.input_url if args.input_url is not None else settings.input_url
        log_message(logger, logging.ERROR, 4001, locator=locator)
        parser.print_help()
        raise SystemExit(EXIT_USAGE)
    except NoPipeError:
        log_message(logger, logging.ERROR, 4003)
        parser.print_help()
        raise SystemExit(EXIT_USAGE)
    except UsageError as exc:
        log_message(logger, logging.ERROR, 4002, error=exc)
        parser.print_help()
        raise SystemExit(EXIT_USAGE)
    except JsonlCheckError as exc:
        log_message(logger, logging.ERROR, 5001, error=exc, exc_info=logger.isEnabledFor(logging.DEBUG))
        raise SystemExit(EXIT_FAILED)

    for line in render_summary(tally):
        print(line)


if __name__ == "__main__":
    main()
