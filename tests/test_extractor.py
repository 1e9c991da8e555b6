from __future__ import annotations

from pathlib import Path

from checkenv.core.scanner import extract_env_vars, read_file_bytes


def test_extracts_single_reference() -> None:
    assert extract_env_vars(b"const x = process.env.TEST_VAR;") == {"TEST_VAR"}


def test_extracts_every_reference_and_dedups() -> None:
    content = b"""
    const a = process.env.API_KEY;
    const b = process.env.API_KEY || process.env.db_host2;
    if (process.env.NODE_ENV === 'production') {}
    """
    assert extract_env_vars(content) == {"API_KEY", "db_host2", "NODE_ENV"}


def test_match_stops_at_first_non_identifier_character() -> None:
    assert extract_env_vars(b"process.env.FOO-BAR process.env.BAZ.length") == {"FOO", "BAZ"}


def test_is_case_sensitive() -> None:
    assert extract_env_vars(b"process.env.foo process.env.FOO") == {"foo", "FOO"}


def test_plain_text_match_includes_comments_and_strings() -> None:
    content = b"// process.env.IN_COMMENT\nconst s = 'process.env.IN_STRING';"
    assert extract_env_vars(content) == {"IN_COMMENT", "IN_STRING"}


def test_ignores_other_access_idioms() -> None:
    content = b"process.env['BRACKET']; process.env; env.DIRECT; process.envFOO"
    assert extract_env_vars(content) == set()


def test_empty_and_non_utf8_content() -> None:
    assert extract_env_vars(b"") == set()
    assert extract_env_vars(b"\xff\xfe process.env.OK \x00") == {"OK"}


def test_read_file_bytes_returns_none_for_missing_file(tmp_path: Path) -> None:
    assert read_file_bytes(str(tmp_path / "gone.js")) is None


def test_read_file_bytes_returns_none_for_directory(tmp_path: Path) -> None:
    assert read_file_bytes(str(tmp_path)) is None


def test_read_file_bytes_reads_raw_content(tmp_path: Path) -> None:
    target = tmp_path / "a.js"
    target.write_bytes(b"process.env.X\n")
    assert read_file_bytes(str(target)) == b"process.env.X\n"
