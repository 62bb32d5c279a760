"""Shared pytest fixtures and configuration for all tests."""

import logging

import pytest


HELLO_LOL = "HAI MAEK PARAGRAF hello OIC KTHXBYE"

FULL_LOL = """OBTW sample page TLDR
HAI
MAEK HEAD
  GIMMEH TITLE My Page MKAY
OIC
I HAZ name ITZ lolcat MKAY
MAEK PARAGRAF
  Hello world
OIC
GIMMEH BOLD so bold MKAY
GIMMEH ITALICS such lean MKAY
GIMMEH NEWLINE MKAY
MAEK LIST
  ITEM one
  ITEM two
OIC
GIMMEH SOUNDZ https://example.com/meow.mp3 MKAY
GIMMEH VIDZ https://example.com/cat.mp4 MKAY
LEMME SEE name MKAY
OBTW the end TLDR
KTHXBYE
"""


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer environment flags from changing CLI behaviour."""
    for name in ("LOLHTML_VERBOSE", "LOLHTML_DEBUG", "LOLHTML_RERAISE", "LOLHTML_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
    package_logger = logging.getLogger("lolhtml")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_lol(tmp_path):
    """Factory writing a source file into a temporary directory."""

    def _write(source: str, name: str = "page.lol"):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def hello_file(write_lol):
    return write_lol(HELLO_LOL, "hello.lol")


@pytest.fixture
def full_file(write_lol):
    return write_lol(FULL_LOL, "full.lol")


@pytest.fixture
def full_source():
    return FULL_LOL
