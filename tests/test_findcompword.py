"""
Tests for the findcompword command line
"""

import pytest

import findcompword


def write_words(tmp_path, *words):
    path = tmp_path / "word.list"
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path


class TestMain:
    """End-to-end runs of main()."""

    def test_main_when_compound_exists_then_reports_word_and_parts(self, tmp_path, capsys):
        path = write_words(tmp_path, "a", "ab", "abc", "ababc", "c")
        findcompword.main(["--src", str(path)])
        out = capsys.readouterr().out
        assert "Loaded 5 words" in out
        assert "Longest compound word: ababc (5 chars)" in out
        assert "ab | abc" in out
        assert "Search took" in out

    def test_main_when_no_compound_then_says_so(self, tmp_path, capsys):
        path = write_words(tmp_path, "a", "ab", "c")
        findcompword.main(["--src", str(path)])
        assert "No compound word found" in capsys.readouterr().out

    def test_main_when_parallel_then_reports_longest(self, tmp_path, capsys):
        path = write_words(tmp_path, "世", "世界", "界")
        findcompword.main(["--src", str(path), "--parallel", "--workers", "2"])
        assert "Longest compound word: 世界 (2 chars)" in capsys.readouterr().out

    def test_main_when_unsorted_flag_then_sorts_first(self, tmp_path, capsys):
        path = write_words(tmp_path, "c", "bc", "b", "ab", "a")
        findcompword.main(["--src", str(path), "--unsorted"])
        captured = capsys.readouterr()
        assert "Longest compound word: ab (2 chars)" in captured.out
        assert "Warning" not in captured.err

    def test_main_when_unsorted_without_flag_then_warns(self, tmp_path, capsys):
        path = write_words(tmp_path, "b", "a", "ab")
        findcompword.main(["--src", str(path)])
        assert "not sorted" in capsys.readouterr().err

    def test_main_when_missing_file_then_exits_with_error(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            findcompword.main(["--src", str(tmp_path / "missing.list")])
        assert exc.value.code == 1
        assert "Failed to read word list" in capsys.readouterr().err

    def test_main_when_file_not_utf8_then_exits_with_error(self, tmp_path, capsys):
        path = tmp_path / "latin1.list"
        path.write_bytes(b"caf\xe9\nna\xefve\n")
        with pytest.raises(SystemExit) as exc:
            findcompword.main(["--src", str(path)])
        assert exc.value.code == 1
        assert "Failed to read word list" in capsys.readouterr().err

    def test_main_when_wordfreq_source_then_uses_wordfreq(self, monkeypatch, capsys):
        calls = {}

        def fake_wordfreq_words(lang, limit, *, alphabetic_only, min_length):
            calls.update(lang=lang, limit=limit)
            return ["back", "backyard", "yard"]

        monkeypatch.setattr(findcompword, "wordfreq_words", fake_wordfreq_words)
        findcompword.main(["--source", "wordfreq", "--lang", "en", "--wordfreq-limit", "10"])
        out = capsys.readouterr().out
        assert calls == {"lang": "en", "limit": 10}
        assert "wordfreq top 10 (en)" in out
        assert "Longest compound word: backyard (8 chars)" in out
        assert "back | yard" in out


class TestParseArgs:
    """Tests for option parsing."""

    def test_parse_args_when_defaults_then_sequential_file_search(self):
        args = findcompword.parse_args([])
        assert args.source == "file"
        assert str(args.src) == "word.list"
        assert not args.parallel
        assert args.workers is None

    def test_parse_args_when_zero_workers_then_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            findcompword.parse_args(["--workers", "0"])
        assert exc.value.code == 2
