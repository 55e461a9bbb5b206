"""
Command-line interface for building and exporting the vehicle working list.
"""
import argparse
import json
import os
import sys

from pydantic import ValidationError

from .config import config
from .database import db_connect, db_init
from .export import ExportError, export_working_list
from .samples import create_sample_record
from .schemas import parse_record
from .session import DuplicateRecordError, WorkingList
from .utils import init_logger

logger = None


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Collect vehicle records and export them as an Excel import workbook")
    ap.add_argument("--db", type=str, default=config.DB_PATH, help="Path to SQLite working list")
    # Logging
    lvl_choices = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    ap.add_argument("--log-level", choices=lvl_choices, default=None,
                    help="Global log level for both console and file (overrides --log-console/--log-file).")
    ap.add_argument("--log-console", choices=lvl_choices, default=config.LOG_LEVEL,
                    help="Console log level (default from env LOG_LEVEL or INFO).")
    ap.add_argument("--log-file", choices=lvl_choices, default=os.getenv("LOG_FILE", "DEBUG"),
                    help="File log level (default from env LOG_FILE or DEBUG).")
    ap.add_argument("--log-file-path", default=config.LOG_FILE_PATH,
                    help="Path to log file (default from env LOG_FILE_PATH or vehicle_importer.log).")
    ap.add_argument("--no-file-log", action="store_true",
                    help="Disable file logging (only console output).")

    sub = ap.add_subparsers(dest="command", required=True)

    p_add = sub.add_parser("add", help="Add record(s) from a JSON file")
    p_add.add_argument("file", help="JSON file holding one record or a list of records")

    p_sample = sub.add_parser("sample", help="Add sample records")
    p_sample.add_argument("--count", type=int, default=1, help="Number of sample records to add")

    sub.add_parser("list", help="Show records in the working list")

    p_delete = sub.add_parser("delete", help="Remove a record by id")
    p_delete.add_argument("record_id")

    sub.add_parser("clear", help="Remove all records")

    p_export = sub.add_parser("export", help="Write the working list to an .xlsx workbook and clear it")
    p_export.add_argument("--out", type=str, default=None,
                          help="Output .xlsx path (default: <export dir>/whipair-import-<date>.xlsx)")

    return ap.parse_args(argv)


def cmd_add(working_list: WorkingList, args) -> int:
    try:
        with open(args.file, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read {args.file}: {e}")
        return 1
    items = data if isinstance(data, list) else [data]
    try:
        records = [parse_record(item) for item in items]
    except ValidationError as e:
        logger.error(f"Invalid record in {args.file}:\n{e}")
        return 1
    try:
        working_list.add_many(records)
    except DuplicateRecordError as e:
        logger.error(f"Nothing added from {args.file}: {e}")
        return 1
    logger.info(f">>> Added {len(records)} record(s); {len(working_list)} in list")
    return 0


def cmd_sample(working_list: WorkingList, args) -> int:
    for _ in range(args.count):
        working_list.add(create_sample_record())
    logger.info(f">>> Added {args.count} sample record(s); {len(working_list)} in list")
    return 0


def cmd_list(working_list: WorkingList, args) -> int:
    if not len(working_list):
        print("Working list is empty.")
        return 0
    for record in working_list:
        v = record.vehicle
        print(f"{record.id}  {v.brand} {v.model} {v.trim}  "
              f"accessories={len(record.accessories)} tires={len(record.tires)}")
    return 0


def cmd_delete(working_list: WorkingList, args) -> int:
    if not working_list.remove(args.record_id):
        logger.warning(f"No record with id {args.record_id}")
        return 1
    logger.info(f">>> Removed {args.record_id}; {len(working_list)} in list")
    return 0


def cmd_clear(working_list: WorkingList, args) -> int:
    working_list.clear()
    logger.info(">>> Working list cleared")
    return 0


def cmd_export(working_list: WorkingList, args) -> int:
    try:
        if not args.out:
            config.validate()
        export_working_list(working_list, args.out)
    except (ExportError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1
    return 0


COMMANDS = {
    "add": cmd_add,
    "sample": cmd_sample,
    "list": cmd_list,
    "delete": cmd_delete,
    "clear": cmd_clear,
    "export": cmd_export,
}


def main(argv=None) -> int:
    args = parse_args(argv)
    eff_console = args.log_level or args.log_console
    eff_file = args.log_level or args.log_file
    global logger
    logger = init_logger(
        console_level=eff_console,
        file_level=eff_file,
        log_file=None if args.no_file_log else args.log_file_path
    )
    logger.debug(
            f"Logger initialized: console={eff_console}, "
            f"file={'DISABLED' if args.no_file_log else eff_file}, "
            f"path={'N/A' if args.no_file_log else args.log_file_path}"
        )

    os.makedirs(os.path.dirname(args.db) or ".", exist_ok=True)
    conn = db_connect(args.db)
    db_init(conn)
    try:
        working_list = WorkingList(conn)
        return COMMANDS[args.command](working_list, args)
    finally:
        conn.close()


if __name__ == "__main__":
    sys.exit(main())
