import argparse
import json
import logging
from pathlib import Path
from typing import Optional

import colorlog
import pandas as pd
import yaml

from ecokit.core.config import DEFAULT_CHUNK_PREFIX, SIZE_DIGITS, URL_TIMEOUT_SEC
from ecokit.core.enums import SizeStandard
from ecokit.core.errors import InvalidArgument

# Size standard choices for argparse
SIZE_STANDARD_CHOICES = list(SizeStandard.__members__.keys())

try:
    from ecokit import __version__ as _PACKAGE_VERSION
except ImportError:  # pragma: no cover
    _PACKAGE_VERSION = "unknown"  # type: ignore[assignment]


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _read_csv(path: str) -> Optional[pd.DataFrame]:
    csv_path = Path(path)
    if not csv_path.exists():
        logging.error("CSV file not found: %s", csv_path)
        return None
    try:
        return pd.read_csv(csv_path, encoding="utf-8-sig")
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logging.error("Failed to read CSV file %s: %s", csv_path, e)
        return None


def cmd_n_unique(args: argparse.Namespace) -> int:
    """Print the number of distinct values per column of a CSV file.

    Returns:
        0 on success, 2 if the file cannot be read.
    """
    from ecokit.transform.distinct import distinct_counts

    df = _read_csv(args.csv)
    if df is None:
        return 2

    report = distinct_counts(df, arrange=not getattr(args, "no_arrange", False))
    records = [
        {"variable": str(row.variable), "n_unique": int(row.n_unique)}
        for row in report.itertuples(index=False)
    ]

    fmt = getattr(args, "format", "text") or "text"
    if fmt == "json":
        print(json.dumps(records, ensure_ascii=False, indent=2))
    elif fmt == "yaml":
        print(yaml.safe_dump(records, allow_unicode=True, sort_keys=False), end="")
    else:
        print(report.to_string(index=False))
    return 0


def cmd_split(args: argparse.Namespace) -> int:
    """Split command-line values into chunks and print them as JSON."""
    from ecokit.transform.partition import partition

    try:
        chunks = partition(list(args.values), args.n_splits, prefix=args.prefix)
    except InvalidArgument as e:
        logging.error("%s", e)
        return 2
    print(json.dumps(chunks, ensure_ascii=False, indent=2))
    return 0


def cmd_split_csv(args: argparse.Namespace) -> int:
    """Split the rows of a CSV file into chunk files under --out-dir."""
    from ecokit.general.files import create_directory
    from ecokit.transform.partition import partition_frame

    df = _read_csv(args.csv)
    if df is None:
        return 2

    try:
        chunks = partition_frame(
            df,
            chunk_size=getattr(args, "chunk_size", None),
            n_chunks=getattr(args, "n_chunks", None),
            prefix=args.prefix,
        )
    except InvalidArgument as e:
        logging.error("%s", e)
        return 2

    out_dir = create_directory(Path(args.out_dir).resolve(), verbose=True)
    for name, chunk in chunks.items():
        chunk_path = out_dir / f"{name}.csv"
        try:
            chunk.to_csv(chunk_path, index=False)
        except OSError as e:
            logging.error("Failed writing chunk %s: %s", chunk_path, e)
            return 1
        logging.info("Saved %s (%d rows)", chunk_path, len(chunk))
    return 0


def cmd_check_url(args: argparse.Namespace) -> int:
    """Check URLs; exit 1 if any is unreachable."""
    from ecokit.general.urls import check_url

    try:
        results = check_url(
            args.urls,
            timeout=args.timeout,
            all_okay=False,
            progress=bool(getattr(args, "progress", False)),
        )
    except InvalidArgument as e:
        logging.error("%s", e)
        return 2

    for url, ok in zip(args.urls, results):
        print(f"{'OK  ' if ok else 'FAIL'} {url}")
    return 0 if all(results) else 1


def cmd_file_size(args: argparse.Namespace) -> int:
    from ecokit.general.files import file_size

    status = 0
    for path in args.paths:
        try:
            size = file_size(path, standard=args.standard, digits=args.digits)
        except FileNotFoundError as e:
            logging.error("%s", e)
            status = 2
            continue
        print(f"{size}\t{path}")
    return status


def cmd_mkdir(args: argparse.Namespace) -> int:
    from ecokit.general.files import create_directory

    for path in args.paths:
        try:
            create_directory(path, verbose=True)
        except OSError as e:
            logging.error("Failed to create %s: %s", path, e)
            return 1
    return 0


def cmd_os(args: argparse.Namespace) -> int:
    from ecokit.general.system import os_name

    print(os_name())
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ecokit",
        description=f"ecokit helpers (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_unique = sub.add_parser("n-unique", help="Count distinct values per column of a CSV file")
    p_unique.add_argument("csv", help="Path to the CSV file")
    p_unique.add_argument(
        "--no-arrange",
        action="store_true",
        help="Keep column order instead of sorting by distinct count (descending)",
    )
    p_unique.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )
    p_unique.set_defaults(func=cmd_n_unique)

    p_split = sub.add_parser("split", help="Split values into near-equal chunks")
    p_split.add_argument("values", nargs="+", help="Values to split, in order")
    p_split.add_argument("--n-splits", type=int, required=True, help="Number of chunks")
    p_split.add_argument(
        "--prefix", default=DEFAULT_CHUNK_PREFIX, help="Chunk name prefix (default: Chunk)"
    )
    p_split.set_defaults(func=cmd_split)

    p_split_csv = sub.add_parser("split-csv", help="Split the rows of a CSV file into chunk files")
    p_split_csv.add_argument("csv", help="Path to the CSV file")
    p_split_csv.add_argument("--out-dir", required=True, help="Directory for chunk CSV files")
    size_group = p_split_csv.add_mutually_exclusive_group()
    size_group.add_argument("--chunk-size", type=int, default=None, help="Rows per chunk")
    size_group.add_argument("--n-chunks", type=int, default=None, help="Number of chunks")
    p_split_csv.add_argument(
        "--prefix", default=DEFAULT_CHUNK_PREFIX, help="Chunk file name prefix (default: Chunk)"
    )
    p_split_csv.set_defaults(func=cmd_split_csv)

    p_url = sub.add_parser("check-url", help="Check whether URLs can be opened")
    p_url.add_argument("urls", nargs="+", help="URLs to check")
    p_url.add_argument(
        "--timeout",
        type=float,
        default=URL_TIMEOUT_SEC,
        help=f"Timeout in seconds per URL (default: {URL_TIMEOUT_SEC})",
    )
    p_url.add_argument("--progress", action="store_true", help="Show a progress bar")
    p_url.set_defaults(func=cmd_check_url)

    p_size = sub.add_parser("file-size", help="Print human-readable file sizes")
    p_size.add_argument("paths", nargs="+", help="Files to measure")
    p_size.add_argument(
        "--standard",
        type=str.upper,
        choices=SIZE_STANDARD_CHOICES,
        default=SizeStandard.IEC.value,
        help="Unit standard (case insensitive, default: IEC)",
    )
    p_size.add_argument(
        "--digits", type=int, default=SIZE_DIGITS, help="Decimal digits (default: 1)"
    )
    p_size.set_defaults(func=cmd_file_size)

    p_mkdir = sub.add_parser("mkdir", help="Create directories (with parents)")
    p_mkdir.add_argument("paths", nargs="+", help="Directories to create")
    p_mkdir.set_defaults(func=cmd_mkdir)

    p_os = sub.add_parser("os", help="Print the operating system name")
    p_os.set_defaults(func=cmd_os)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
