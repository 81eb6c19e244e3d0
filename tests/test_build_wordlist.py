import sys
from pathlib import Path

from script.build_wordlist import extract_words, main


def test_extract_words_filters_and_dedupes():
    raw = ["Aaron", "apple", "apple", "it's", "mango ", "grape", "grapes", ""]
    assert extract_words(raw, 5) == ["apple", "mango", "grape"]


def test_main_writes_sorted_list(tmp_path: Path, monkeypatch):
    src = tmp_path / "raw.txt"
    out = tmp_path / "words_6.txt"
    src.write_text("planet\nPlanet\nbanana\nzephyr\nplanet\ncat\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["build_wordlist", "--in", str(src), "--out", str(out),
                                      "--N", "6", "--sort"])
    main()
    assert out.read_text(encoding="utf-8") == "banana\nplanet\nzephyr\n"
