import os
import subprocess
from pathlib import Path
from typing import Any

import pytest

from rb2js import rb2js_golden
from rb2js.rb2js_golden import FixtureLocator, ShaStore, SyntaxValidator, ValidationError
from rb2js.rb2js_transpile import translate

TESTDATA = Path(__file__).parent / "testdata"
UPDATE = os.environ.get("UPDATE_GOLDEN") == "true"
LOCATOR = FixtureLocator(TESTDATA)


@pytest.fixture(scope="module")  # type: ignore[misc]
def sha_store(tmp_path_factory: pytest.TempPathFactory) -> ShaStore:
    path = os.environ.get("RB2JS_SHA_STORE")
    if path is None:
        path = str(tmp_path_factory.mktemp("golden") / "shas.json")
    return ShaStore(path)


@pytest.mark.parametrize("name", LOCATOR.golden_files())  # type: ignore[misc]
def test_compile_golden(name: str, sha_store: ShaStore) -> None:
    rb_path = LOCATOR.source_path(name)
    js_path = LOCATOR.expected_path(name)

    rb = rb_path.read_text(encoding="utf-8")
    if SyntaxValidator.available("ruby") and not sha_store.match(rb_path, rb):
        SyntaxValidator.ensure_valid_rb(rb)
        sha_store.update(rb_path, rb)

    js = translate(rb)
    if SyntaxValidator.available("node") and not sha_store.match(js_path, js):
        SyntaxValidator.ensure_valid_js(js)
        sha_store.update(js_path, js)

    if UPDATE or not js_path.exists():
        js_path.write_text(js, encoding="utf-8")

    assert js_path.read_text(encoding="utf-8") == js


def test_locator_finds_pairs(testdata: Path) -> None:
    locator = FixtureLocator(testdata)
    names = locator.golden_files()
    assert names == sorted(names)
    for name in names:
        assert locator.expected_path(name).exists()


def test_locator_requires_minimum(tmp_path: Path) -> None:
    (tmp_path / "rb").mkdir()
    (tmp_path / "rb" / "only.rb").write_text("x\n")
    with pytest.raises(ValidationError, match="only found 1"):
        FixtureLocator(tmp_path).golden_files()
    assert FixtureLocator(tmp_path, minimum=1).golden_files() == ["only"]


def test_sha_store_update(tmp_path: Path) -> None:
    store = ShaStore(tmp_path / "shas.json")
    assert not store.match("file.rb", "rb")
    store.update("file.rb", "rb")
    assert store.match("file.rb", "rb")
    store.update("file.rb", "new rb")
    assert not store.match("file.rb", "rb")


def test_sha_store_persists(tmp_path: Path) -> None:
    ShaStore(tmp_path / "shas.json").update("file.js", "js")
    store = ShaStore(tmp_path / "shas.json")
    assert store.match("file.js", "js")
    assert not store.match("other.js", "js")


def test_sha_store_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "shas.json"
    path.write_text("")
    assert ShaStore(path).shas == {}


def test_validator_reports_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def run(args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        assert args[:2] == ["node", "--check"]
        assert Path(args[-1]).read_text() == "function ("
        return subprocess.CompletedProcess(args, 1, "", "Unexpected end of input")

    monkeypatch.setattr(rb2js_golden.subprocess, "run", run)
    with pytest.raises(ValidationError, match="JavaScript syntax error"):
        SyntaxValidator.ensure_valid_js("function (")


def test_validator_accepts(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[list[str]] = []

    def run(args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        seen.append(args)
        return subprocess.CompletedProcess(args, 0, "Syntax OK", "")

    monkeypatch.setattr(rb2js_golden.subprocess, "run", run)
    SyntaxValidator.ensure_valid_rb("x = 1\n")
    assert seen[0][:2] == ["ruby", "-c"]
    assert not Path(seen[0][-1]).exists()
