import hashlib
import sys
import zlib
from datetime import datetime

import mmh3
import xxhash
from Crypto.Cipher import AES
from Crypto.Util.Padding import pad as pkcs7_pad

import constants
from exceptions import IOErrorKind, TableIOError, UnknownAlgorithmError

AES_FIXED_KEY_FOR_HASHING = hashlib.sha256(b"RainbowTableFixedAESKeyForHashing").digest()[:16]


def print_log(message, log_type="INFO", is_error=False):
    timestamp = datetime.now().strftime('%H:%M:%S')
    prefix_parts = [f"[{timestamp}]"]
    if is_error:
        prefix_parts.append("[ERROR]")
    elif log_type and log_type.upper() != "INFO":
        prefix_parts.append(f"[{log_type.upper()}]")

    prefix = "".join(prefix_parts)
    print(f"{prefix} {message}", file=sys.stderr if is_error else sys.stdout)


def console_progress_callback(processed, total, message, is_log, speed):
    if is_log and message:
        print_log(message.rstrip("\n"))


def validate_algorithm(algorithm_name):
    if algorithm_name not in constants.HASH_ALGORITHMS:
        raise UnknownAlgorithmError(algorithm_name)
    return algorithm_name


def hash_password(password: str, algorithm_name: str = constants.DEFAULT_HASH_ALGORITHM) -> str:
    """Return the hex digest of ``password`` under ``algorithm_name``.

    A fresh hashing context is built on every call, so this is safe to run
    from any number of worker threads or processes at once.
    """
    password_bytes = password.encode('utf-8', errors='surrogatepass')
    constructor = constants.HASH_ALGORITHMS.get(algorithm_name)

    if constructor is None:
        raise UnknownAlgorithmError(algorithm_name)

    if constructor is constants.CUSTOM_HANDLER_SENTINEL:
        if algorithm_name == "CRC32 (HEX)":
            return hex(zlib.crc32(password_bytes) & 0xffffffff)[2:].zfill(8)
        elif algorithm_name == "Murmur3_32":
            return hex(mmh3.hash(password_bytes, seed=0) & 0xffffffff)[2:].zfill(8)
        elif algorithm_name == "XXH32":
            return xxhash.xxh32(password_bytes, seed=0).hexdigest()
        elif algorithm_name == "XXH64":
            return xxhash.xxh64(password_bytes, seed=0).hexdigest()
        elif algorithm_name == "XXH3_64":
            return xxhash.xxh3_64(password_bytes, seed=0).hexdigest()
        elif algorithm_name == "XXH3_128":
            return xxhash.xxh3_128(password_bytes, seed=0).hexdigest()
        elif algorithm_name == "AES-EMU-SHA256":
            cipher = AES.new(AES_FIXED_KEY_FOR_HASHING, AES.MODE_ECB)
            ciphertext = cipher.encrypt(pkcs7_pad(password_bytes, AES.block_size))
            return hashlib.sha256(ciphertext).hexdigest()
        raise UnknownAlgorithmError(algorithm_name)

    hasher = constructor()
    hasher.update(password_bytes)
    if algorithm_name in constants.SHAKE_DIGEST_SIZES:
        return hasher.hexdigest(constants.SHAKE_DIGEST_SIZES[algorithm_name])
    return hasher.hexdigest()


def read_wordlist_lines(wordlist_path):
    """Read ``wordlist_path`` as UTF-8 and return its lines in file order.

    Lines are split on ``\\n`` only, and one ``\\r`` before it is dropped, so a
    lone carriage return stays part of its word. Any failure is raised as a
    ``TableIOError`` before a single line is returned.
    """
    try:
        f = open(wordlist_path, "r", encoding=constants.WORDLIST_ENCODING, newline="")
    except OSError as e:
        raise TableIOError.from_os_error(wordlist_path, e, "open") from e

    try:
        with f:
            content = f.read()
    except OSError as e:
        raise TableIOError.from_os_error(wordlist_path, e, "read") from e
    except UnicodeDecodeError as e:
        raise TableIOError(wordlist_path, IOErrorKind.OTHER, "read", f"not valid UTF-8 ({e.reason})") from e

    lines = content.split("\n")
    # text after the last newline has no terminator to strip
    tail = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if tail:
        lines.append(tail)
    return lines


def is_affirmative_answer(answer):
    return answer.strip() in constants.AFFIRMATIVE_ANSWERS


def confirm_from_stdin(prompt):
    """Ask ``prompt`` on the terminal and read one line from standard input.

    An empty line, ``y`` or ``Y`` confirms. End of input counts as a refusal.
    """
    print(prompt, end="", file=sys.stderr, flush=True)
    try:
        answer = input()
    except EOFError:
        return False
    return is_affirmative_answer(answer)
