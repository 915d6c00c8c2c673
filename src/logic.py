import enum
import time
from dataclasses import dataclass
from typing import Optional

import constants
import rainbow_tables
from exceptions import (InvalidWorkerCountError, MalformedRecordError, RainbowTableError, TableIOError,
                        UnknownAlgorithmError)


class OperationStatus(enum.Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ABORTED = "aborted"
    IO_ERROR = "io_error"
    MALFORMED_RECORD = "malformed_record"
    INVALID_OPTIONS = "invalid_options"


@dataclass
class OperationResult:
    status: OperationStatus
    message: str
    word: Optional[str] = None
    report: Optional[rainbow_tables.GenerationReport] = None
    error: Optional[RainbowTableError] = None

    @property
    def failed(self):
        return self.status in (OperationStatus.IO_ERROR, OperationStatus.MALFORMED_RECORD,
                               OperationStatus.INVALID_OPTIONS)


def _error_result(error):
    if isinstance(error, TableIOError):
        status = OperationStatus.IO_ERROR
    elif isinstance(error, MalformedRecordError):
        status = OperationStatus.MALFORMED_RECORD
    else:
        status = OperationStatus.INVALID_OPTIONS
    return OperationResult(status, str(error), error=error)


def _no_progress(processed, total, message, is_log, speed):
    pass


def run_generate_table(wordlist_path, table_path, worker_count=constants.DEFAULT_WORKER_COUNT,
                       algorithm=constants.DEFAULT_HASH_ALGORITHM, confirm=None, update_ui_callback=None,
                       use_processes=False):
    update_ui = update_ui_callback or _no_progress
    update_ui(0, 1, f"Starting {algorithm} table generation from: {wordlist_path}\n", True, 0)

    try:
        report = rainbow_tables.generate_rainbow_table(wordlist_path, table_path, worker_count, algorithm,
                                                       confirm, update_ui_callback, use_processes)
    except (TableIOError, InvalidWorkerCountError, UnknownAlgorithmError) as e:
        update_ui(0, 1, f"Table generation failed: {e}\n", True, 0)
        return _error_result(e)

    if not report.written:
        message = f"{table_path} was left untouched, table generation aborted."
        update_ui(report.word_count, report.word_count, message + "\n", True, 0)
        return OperationResult(OperationStatus.ABORTED, message, report=report)

    message = (f"Wrote {report.word_count:,} {algorithm} hashes to {table_path} "
               f"in {report.elapsed:.2f}s ({report.hashes_per_second:,.0f} H/s)")
    update_ui(report.word_count, report.word_count, message + "\n", True, report.hashes_per_second)
    return OperationResult(OperationStatus.SUCCESS, message, report=report)


def run_crack(table_path, target_hash, update_ui_callback=None):
    update_ui = update_ui_callback or _no_progress
    start_crack_time = time.time()
    update_ui(0, 1, f"Searching for hash: {target_hash[:32]}...\n", True, 0)

    try:
        outcome = rainbow_tables.crack_hash(table_path, target_hash, update_ui_callback)
    except (TableIOError, MalformedRecordError) as e:
        update_ui(0, 1, f"Error during rainbow table lookup: {e}\n", True, 0)
        return _error_result(e)

    speed = outcome.pairs_scanned / max(time.time() - start_crack_time, 0.001)
    if outcome.found:
        message = f"Password found in rainbow table: {outcome.word}"
        update_ui(1, 1, message + "\n", True, speed)
        return OperationResult(OperationStatus.SUCCESS, message, word=outcome.word)

    message = f"Hash not found in rainbow table after {outcome.pairs_scanned:,} entries"
    update_ui(1, 1, message + "\n", True, speed)
    return OperationResult(OperationStatus.NOT_FOUND, message)
