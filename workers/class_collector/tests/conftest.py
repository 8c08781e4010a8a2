"""
Shared pytest fixtures for class_collector tests.

All fixtures are pure Python, with no JDK or javac needed.  Class files are faked
with just the 8-byte header the collector reads, followed by filler.
"""
import struct
from pathlib import Path

import pytest

JDK8 = 52
JDK11 = 55


def _class_bytes(major: int, minor: int = 0) -> bytes:
    return b"\xca\xfe\xba\xbe" + struct.pack(">HH", minor, major) + b"\x00" * 16


def _write_class(path: Path, major: int = JDK8, minor: int = 0) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(_class_bytes(major, minor))
    return path


def _write_text(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


@pytest.fixture
def class_bytes():
    """Factory: class-file header for (major, minor) plus some body bytes."""
    return _class_bytes


@pytest.fixture
def write_class():
    """Factory: write a fake class file at a path, creating parents."""
    return _write_class


@pytest.fixture
def write_text():
    """Factory: write a text file at a path, creating parents."""
    return _write_text


@pytest.fixture
def source_root(tmp_path) -> Path:
    d = tmp_path / "src"
    d.mkdir()
    return d


@pytest.fixture
def class_root(tmp_path) -> Path:
    d = tmp_path / "classes"
    d.mkdir()
    return d


@pytest.fixture
def output_root(tmp_path) -> Path:
    # Not created: the collector must create it.
    return tmp_path / "out"


@pytest.fixture
def mixed_project(source_root, class_root):
    """
    One unit ``pkg/A.java`` with an anonymous class, two resources.

        src/pkg/A.java
        src/pkg/messages.properties
        src/logback.xml
        classes/pkg/A.class      (JDK 8)
        classes/pkg/A$1.class    (JDK 11)
    """
    _write_text(source_root / "pkg" / "A.java", "package pkg; class A {}")
    _write_text(source_root / "pkg" / "messages.properties", "greeting=hi\n")
    _write_text(source_root / "logback.xml", "<configuration/>\n")
    _write_class(class_root / "pkg" / "A.class", JDK8)
    _write_class(class_root / "pkg" / "A$1.class", JDK11)
    return source_root, class_root
