"""Shared fixtures for the rainbow table tests."""

import pytest

POTATO_SHA256 = "e91c254ad58860a02c788dfb5c1a65d6a8846ab1dc649631c7db16fef4af2dec"
RICE_SHA256 = "209f76418ece7c936b65ff4777a578d860f762c37ad6c7f08f5826242199ef51"
AUDI_SHA256 = "b51026e4444f98ecdbe1d7cb1f310427a47d7a6e7659b37ce3d00010b09af252"
BMW_SHA256 = "27df9ed9a477af0fcfe369c8ef3474a75cebf357d8b421ca40f1de6cfd4cbb06"


@pytest.fixture
def write_lines(tmp_path):
    """Write ``lines`` newline-terminated to a file under tmp_path and return its path."""

    def _write(name, lines):
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def word_file(write_lines):
    return write_lines("words.txt", ["potato", "rice"])


@pytest.fixture
def car_table(write_lines):
    return write_lines("cars.txt", [f"audi:{AUDI_SHA256}", f"bmw:{BMW_SHA256}"])


@pytest.fixture
def refuse_confirm():
    prompts = []

    def _confirm(prompt):
        prompts.append(prompt)
        return False

    _confirm.prompts = prompts
    return _confirm


@pytest.fixture
def accept_confirm():
    prompts = []

    def _confirm(prompt):
        prompts.append(prompt)
        return True

    _confirm.prompts = prompts
    return _confirm
