import argparse
import sys

import constants
import logic
import utils

EXIT_CODES = {
    logic.OperationStatus.SUCCESS: constants.EXIT_SUCCESS,
    logic.OperationStatus.NOT_FOUND: constants.EXIT_SUCCESS,
    logic.OperationStatus.ABORTED: constants.EXIT_SUCCESS,
    logic.OperationStatus.IO_ERROR: constants.EXIT_FILE_OPERATION_ERROR,
    logic.OperationStatus.MALFORMED_RECORD: constants.EXIT_MALFORMED_TABLE,
    logic.OperationStatus.INVALID_OPTIONS: constants.EXIT_USAGE_ERROR,
}


def build_parser():
    parser = argparse.ArgumentParser(prog="rainbowtable", description="Generate and query word to hash tables.")
    subparsers = parser.add_subparsers(dest="operation", required=True)

    generate = subparsers.add_parser(constants.GENERATE_TABLE_OPERATION, help="hash a word list into a table file")
    generate.add_argument("word_file", help="newline separated word list")
    generate.add_argument("table_file", help="destination rainbow table")
    generate.add_argument("-w", "--workers", type=int, default=constants.DEFAULT_WORKER_COUNT,
                          help="number of hashing workers (default: %(default)s)")
    generate.add_argument("-a", "--algorithm", default=constants.DEFAULT_HASH_ALGORITHM,
                          choices=list(constants.HASH_ALGORITHMS), metavar="ALGORITHM",
                          help="hash algorithm (default: %(default)s)")
    generate.add_argument("--processes", action="store_true", help="hash in worker processes instead of threads")
    generate.add_argument("-y", "--yes", action="store_true", help="overwrite an existing table without asking")

    crack = subparsers.add_parser(constants.CRACK_OPERATION, help="look a hash up in a table file")
    crack.add_argument("table_file", help="rainbow table to search")
    crack.add_argument("hash", help="hex digest to look up")
    return parser


def main(argv=None):
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return constants.EXIT_SUCCESS if e.code == 0 else constants.EXIT_USAGE_ERROR

    try:
        if args.operation == constants.GENERATE_TABLE_OPERATION:
            confirm = (lambda prompt: True) if args.yes else utils.confirm_from_stdin
            result = logic.run_generate_table(args.word_file, args.table_file, args.workers, args.algorithm,
                                              confirm, utils.console_progress_callback, args.processes)
        else:
            result = logic.run_crack(args.table_file, args.hash, utils.console_progress_callback)
    except KeyboardInterrupt:
        utils.print_log("Interrupted by user (KeyboardInterrupt).", is_error=True)
        return constants.EXIT_INTERRUPTED

    if result.failed:
        utils.print_log(result.message, is_error=True)
    elif result.status is logic.OperationStatus.SUCCESS and result.word is not None:
        print(result.word)
    return EXIT_CODES[result.status]


if __name__ == "__main__":
    sys.exit(main())
