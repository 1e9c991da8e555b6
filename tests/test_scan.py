from __future__ import annotations

from pathlib import Path

import pytest

from checkenv.core import MissingRootError, ScanRequest, scan


def test_finds_references_in_candidate_files(make_tree, in_tmp: Path) -> None:
    make_tree(
        {
            "src/a.js": "const x = process.env.FOO;",
            "src/b.ts": "process.env.BAR + process.env.FOO",
            "src/c.py": "process.env.FROM_PYTHON",
            "vendor/lib.js": "process.env.SECRET",
            "node_modules/x/index.js": "process.env.DEP",
        }
    )
    result = scan(ScanRequest.from_strings(".", ".js,.ts"))
    assert result.discovered == {"FOO", "BAR"}
    assert result.files_scanned == 2


def test_scan_is_idempotent(make_tree, in_tmp: Path) -> None:
    make_tree({f"src/m{i}.js": f"process.env.V{i}" for i in range(30)})
    request = ScanRequest.from_strings("src", ".js")
    assert scan(request).discovered == scan(request).discovered


def test_each_scan_gets_its_own_discovery_set(make_tree, in_tmp: Path) -> None:
    make_tree({"one/a.js": "process.env.ONE", "two/b.js": "process.env.TWO"})
    first = scan(ScanRequest.from_strings("one", ".js"))
    second = scan(ScanRequest.from_strings("two", ".js"))
    assert first.discovered == {"ONE"}
    assert second.discovered == {"TWO"}


def test_multiple_roots_and_whitespace(make_tree, in_tmp: Path) -> None:
    make_tree({"one/a.js": "process.env.ONE", "two/b.ts": "process.env.TWO"})
    result = scan(ScanRequest.from_strings(" one , two ", " .js, .ts "))
    assert result.discovered == {"ONE", "TWO"}


def test_absolute_roots(make_tree, tmp_path: Path) -> None:
    make_tree({"src/a.js": "process.env.ABS"})
    result = scan(ScanRequest.from_strings(str(tmp_path / "src"), ".js"))
    assert result.discovered == {"ABS"}


def test_missing_root_aborts(make_tree, in_tmp: Path) -> None:
    make_tree({"src/a.js": "process.env.A"})
    with pytest.raises(MissingRootError):
        scan(ScanRequest.from_strings("src,missing", ".js"))


def test_single_worker(make_tree, in_tmp: Path) -> None:
    make_tree({"src/a.js": "process.env.A", "src/b.js": "process.env.B"})
    result = scan(ScanRequest.from_strings("src", ".js", workers=1))
    assert result.discovered == {"A", "B"}


def test_request_rejects_zero_workers() -> None:
    with pytest.raises(ValueError):
        ScanRequest.from_strings("src", ".js", workers=0)


def test_request_defaults() -> None:
    request = ScanRequest.from_strings("src", ".js")
    assert request.roots == ("src",)
    assert request.extensions == frozenset({".js"})
    assert request.ignored_dirs == ("node_modules", "vendor")
    assert request.workers == 10
