import hashlib

CUSTOM_HANDLER_SENTINEL = object()

HASH_ALGORITHMS = {
    "MD5": hashlib.md5,
    "SHA-1": hashlib.sha1,
    "SHA-224": hashlib.sha224,
    "SHA-256": hashlib.sha256,
    "SHA-384": hashlib.sha384,
    "SHA-512": hashlib.sha512,
    "BLAKE2b": hashlib.blake2b,
    "BLAKE2s": hashlib.blake2s,
    "SHA3-256": hashlib.sha3_256,
    "SHA3-384": hashlib.sha3_384,
    "SHA3-512": hashlib.sha3_512,
    "SHAKE128-256": hashlib.shake_128,
    "SHAKE256-512": hashlib.shake_256,

    "CRC32 (HEX)": CUSTOM_HANDLER_SENTINEL,
    "Murmur3_32": CUSTOM_HANDLER_SENTINEL,
    "XXH32": CUSTOM_HANDLER_SENTINEL,
    "XXH64": CUSTOM_HANDLER_SENTINEL,
    "XXH3_64": CUSTOM_HANDLER_SENTINEL,
    "XXH3_128": CUSTOM_HANDLER_SENTINEL,
    "AES-EMU-SHA256": CUSTOM_HANDLER_SENTINEL,
}
DEFAULT_HASH_ALGORITHM = "SHA-256"

# digest sizes in bytes for the variable length SHAKE functions
SHAKE_DIGEST_SIZES = {
    "SHAKE128-256": 32,
    "SHAKE256-512": 64,
}

HASH_DELIMITER = ":"
WORDLIST_ENCODING = "utf-8"
RAINBOW_TABLE_ENCODING = "utf-8"
RAINBOW_TABLE_LINE_TERMINATOR = "\n"

DEFAULT_WORKER_COUNT = 1
MAX_WORKER_COUNT = 512

OVERWRITE_PROMPT = "{path} already exists. Overwrite? [Y/n] "
AFFIRMATIVE_ANSWERS = ("", "y", "Y")

# process exit codes, only main.py maps results onto these
EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_FILE_OPERATION_ERROR = 2
EXIT_MALFORMED_TABLE = 3
EXIT_INTERRUPTED = 130

GENERATE_TABLE_OPERATION = "generate_table"
CRACK_OPERATION = "crack"
