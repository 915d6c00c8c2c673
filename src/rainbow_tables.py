import enum
import os
import time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import constants
import utils
from exceptions import InvalidWorkerCountError, MalformedRecordError, TableIOError


@dataclass(frozen=True)
class WordHash:
    word: str
    hash: str


@dataclass(frozen=True)
class Chunk:
    """A contiguous slice of the word list, tagged with its offset in it."""
    start: int
    items: Tuple[str, ...]

    def __len__(self):
        return len(self.items)

    @property
    def end(self):
        return self.start + len(self.items)


class GenerationStage(enum.Enum):
    IDLE = "idle"
    READING = "reading"
    PARTITIONING = "partitioning"
    HASHING = "hashing"
    MERGING = "merging"
    CONFIRMING_OVERWRITE = "confirming_overwrite"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


class GenerationStatus(enum.Enum):
    WRITTEN = "written"
    ABORTED = "aborted"


@dataclass
class GenerationReport:
    status: GenerationStatus
    table_path: str
    algorithm: str
    word_count: int
    skipped_count: int
    chunk_sizes: Tuple[int, ...]
    elapsed: float

    @property
    def written(self):
        return self.status is GenerationStatus.WRITTEN

    @property
    def hashes_per_second(self):
        return self.word_count / max(self.elapsed, 1e-6)


@dataclass(frozen=True)
class CrackOutcome:
    target_hash: str
    word: Optional[str]
    pairs_scanned: int

    @property
    def found(self):
        return self.word is not None


def generate_hash_str(word_hash: WordHash) -> str:
    return f"{word_hash.word}{constants.HASH_DELIMITER}{word_hash.hash}"


def deserialize_single_hash(serialized_hash: str, line_number: Optional[int] = None) -> WordHash:
    parts = serialized_hash.split(constants.HASH_DELIMITER)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MalformedRecordError(serialized_hash, line_number)
    return WordHash(word=parts[0], hash=parts[1])


def deserialize_hashes(serialized_hashes: Sequence[str]) -> List[WordHash]:
    # a single bad record rejects the whole table
    return [
        deserialize_single_hash(serialized_hash, line_number)
        for line_number, serialized_hash in enumerate(serialized_hashes, start=1)
    ]


def hash_word_vec(words, algorithm=constants.DEFAULT_HASH_ALGORITHM) -> List[WordHash]:
    return [WordHash(word=word, hash=utils.hash_password(word, algorithm)) for word in words]


def serialize_hashes(words, algorithm=constants.DEFAULT_HASH_ALGORITHM) -> List[str]:
    return [generate_hash_str(word_hash) for word_hash in hash_word_vec(words, algorithm)]


def partition_words(items: Sequence[str], worker_count: int) -> List[Chunk]:
    """Split ``items`` into ``worker_count`` contiguous chunks.

    The first ``len(items) % worker_count`` chunks get one extra item. When
    there are more workers than items the surplus chunks are empty.
    """
    if isinstance(worker_count, bool) or not isinstance(worker_count, int) or worker_count < 1:
        raise InvalidWorkerCountError(worker_count, constants.MAX_WORKER_COUNT)

    items = tuple(items)
    if worker_count == 1:
        return [Chunk(0, items)]

    base, remainder = divmod(len(items), worker_count)
    chunks = []
    start = 0
    for index in range(worker_count):
        size = base + 1 if index < remainder else base
        chunks.append(Chunk(start, items[start:start + size]))
        start += size
    return chunks


def hash_chunk(chunk: Chunk, algorithm: str) -> List[WordHash]:
    return hash_word_vec(chunk.items, algorithm)


def confirm_overwrite(table_path, confirm) -> bool:
    if not os.path.exists(table_path):
        return True
    return bool(confirm(constants.OVERWRITE_PROMPT.format(path=table_path)))


def write_rainbow_table(table_path, hashed_words: Sequence[WordHash]) -> int:
    content = "".join(
        generate_hash_str(word_hash) + constants.RAINBOW_TABLE_LINE_TERMINATOR
        for word_hash in hashed_words
    )
    try:
        with open(table_path, "w", encoding=constants.RAINBOW_TABLE_ENCODING, newline="") as f:
            f.write(content)
    except OSError as e:
        raise TableIOError.from_os_error(table_path, e, "write") from e
    return len(hashed_words)


def load_rainbow_table(table_path) -> List[WordHash]:
    return deserialize_hashes(utils.read_wordlist_lines(table_path))


def find_word(table: Sequence[WordHash], target_hash: str) -> CrackOutcome:
    for scanned, word_hash in enumerate(table, start=1):
        if word_hash.hash == target_hash:
            return CrackOutcome(target_hash, word_hash.word, scanned)
    return CrackOutcome(target_hash, None, len(table))


def crack_hash(table_path, target_hash: str, progress_callback=None) -> CrackOutcome:
    if progress_callback:
        progress_callback(0, 1, f"Loading rainbow table from {table_path}\n", True, 0)
    table = load_rainbow_table(table_path)

    start_time = time.time()
    outcome = find_word(table, target_hash)
    if progress_callback:
        speed = outcome.pairs_scanned / max(time.time() - start_time, 1e-6)
        progress_callback(1, 1, f"Scanned {outcome.pairs_scanned:,} of {len(table):,} precomputed hashes\n", True, speed)
    return outcome


class RainbowTableGenerator:
    """Hash a word list across a pool of workers and write the result.

    Work is split with ``partition_words``, each non-empty chunk is hashed by
    its own worker and the outputs are joined back in chunk order, so the
    written table never depends on which worker finished first.
    """

    def __init__(self, worker_count=constants.DEFAULT_WORKER_COUNT, algorithm=constants.DEFAULT_HASH_ALGORITHM,
                 confirm=None, progress_callback=None, use_processes=False):
        self.worker_count = worker_count
        self.algorithm = algorithm
        self.confirm = confirm or utils.confirm_from_stdin
        self.progress_callback = progress_callback
        self.use_processes = use_processes
        self.stage = GenerationStage.IDLE
        self.failure = None

    def _update(self, processed, total, message, is_log=True, speed=0):
        if self.progress_callback:
            self.progress_callback(processed, total, message, is_log, speed)

    def _validate_options(self):
        if (isinstance(self.worker_count, bool) or not isinstance(self.worker_count, int)
                or not 1 <= self.worker_count <= constants.MAX_WORKER_COUNT):
            raise InvalidWorkerCountError(self.worker_count, constants.MAX_WORKER_COUNT)
        utils.validate_algorithm(self.algorithm)

    def _filter_words(self, lines):
        words = []
        skipped = 0
        for line in lines:
            if not line or constants.HASH_DELIMITER in line:
                skipped += 1
                continue
            words.append(line)
        if skipped:
            self._update(0, len(lines), f"Skipped {skipped} empty or delimiter-containing lines\n")
        return words, skipped

    def _hash_chunks(self, chunks):
        results = [[] for _ in chunks]
        work = [(index, chunk) for index, chunk in enumerate(chunks) if chunk.items]
        if not work:
            return results

        total_words = sum(len(chunk) for _, chunk in work)
        hashed = 0
        start_time = time.time()
        executor_class = ProcessPoolExecutor if self.use_processes else ThreadPoolExecutor
        with executor_class(max_workers=len(work)) as executor:
            futures = [(index, executor.submit(hash_chunk, chunk, self.algorithm)) for index, chunk in work]
            # collected in chunk order, not completion order
            for collected, (index, future) in enumerate(futures, start=1):
                results[index] = future.result()
                hashed += len(results[index])
                speed = hashed / max(time.time() - start_time, 1e-6)
                self._update(hashed, total_words, f"Collected chunk {collected}/{len(futures)}\n", False, speed)
        return results

    def generate(self, wordlist_path, table_path) -> GenerationReport:
        start_time = time.time()
        try:
            self._validate_options()

            self.stage = GenerationStage.READING
            self._update(0, 1, f"Reading words from {wordlist_path}\n")
            words, skipped = self._filter_words(utils.read_wordlist_lines(wordlist_path))

            self.stage = GenerationStage.PARTITIONING
            chunks = partition_words(words, self.worker_count)
            chunk_sizes = tuple(len(chunk) for chunk in chunks)

            self.stage = GenerationStage.HASHING
            self._update(0, len(words), f"Generating {self.algorithm} hashes for {len(words)} words "
                                        f"with {sum(1 for size in chunk_sizes if size)} workers\n")
            chunk_results = self._hash_chunks(chunks)

            self.stage = GenerationStage.MERGING
            hashed_words = [word_hash for chunk_result in chunk_results for word_hash in chunk_result]
            self._update(len(hashed_words), len(words), f"Generated {len(hashed_words)} hashes\n")

            self.stage = GenerationStage.CONFIRMING_OVERWRITE
            if not confirm_overwrite(table_path, self.confirm):
                self.stage = GenerationStage.DONE
                self._update(len(hashed_words), len(words), f"Not overwriting {table_path}\n")
                return GenerationReport(GenerationStatus.ABORTED, str(table_path), self.algorithm,
                                        len(hashed_words), skipped, chunk_sizes, time.time() - start_time)

            self.stage = GenerationStage.WRITING
            self._update(len(hashed_words), len(words), f"Writing generated hashes to {table_path}\n")
            write_rainbow_table(table_path, hashed_words)

            self.stage = GenerationStage.DONE
            self._update(len(hashed_words), len(words), "Write complete!\n")
            return GenerationReport(GenerationStatus.WRITTEN, str(table_path), self.algorithm,
                                    len(hashed_words), skipped, chunk_sizes, time.time() - start_time)
        except Exception as e:
            self.stage = GenerationStage.FAILED
            self.failure = e
            raise


def generate_rainbow_table(wordlist_path, table_path, worker_count=constants.DEFAULT_WORKER_COUNT,
                           algorithm=constants.DEFAULT_HASH_ALGORITHM, confirm=None, progress_callback=None,
                           use_processes=False) -> GenerationReport:
    generator = RainbowTableGenerator(worker_count, algorithm, confirm, progress_callback, use_processes)
    return generator.generate(wordlist_path, table_path)
