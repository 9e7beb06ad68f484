import os
import re
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
import requests

import cli
import utils
import wordlist
from dawg import DAWG

ANSI = re.compile(r'\x1b\[[0-9;]*m')


def plain(text):
    return ANSI.sub('', text)


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("g\ngo\nt\n语\n语言\n", encoding="utf-8")
    return str(path)


@pytest.fixture(autouse=True)
def reset_verbose():
    yield
    utils.VERBOSE = False


def test_contains_command(words_file, capsys):
    assert cli.run_cli(["--words", words_file, "contains", "go", "golang", "语"]) == 0
    out = plain(capsys.readouterr().out)
    assert "go: yes" in out
    assert "golang: no" in out
    assert "语: yes" in out


def test_prefixes_command(words_file, capsys):
    assert cli.run_cli(["--words", words_file, "prefixes", "golang", "z", "语言信息处理"]) == 0
    out = plain(capsys.readouterr().out)
    assert "golang: g, go" in out
    assert "z: -" in out
    assert "语言信息处理: 语, 语言" in out


def test_stats_command(words_file, capsys):
    assert cli.run_cli(["--words", words_file, "stats"]) == 0
    out = plain(capsys.readouterr().out)
    assert "Words: 5" in out
    # root + g, o + t + 语, 言
    assert "Nodes: 6" in out


def test_tree_command(words_file, capsys):
    assert cli.run_cli(["--words", words_file, "tree"]) == 0
    lines = plain(capsys.readouterr().out).splitlines()
    tree = lines[lines.index("·"):]
    assert tree == ["·", "  g *", "    o *", "  t *", "  语 *", "    言 *"]


def test_print_tree_marks_empty_word(capsys):
    cli.print_tree(DAWG.build(["", "ab"]))
    lines = plain(capsys.readouterr().out).splitlines()
    assert lines == ["· *", "  a", "    b *"]


def test_upper_flag(words_file, capsys):
    assert cli.run_cli(["--words", words_file, "--upper", "contains", "go"]) == 0
    assert "GO: yes" in plain(capsys.readouterr().out)


def test_length_filters(words_file, capsys):
    assert cli.run_cli(["--words", words_file, "--min-length", "2", "contains", "g", "go"]) == 0
    out = plain(capsys.readouterr().out)
    assert "g: no" in out
    assert "go: yes" in out


def test_verbose_logs_timing(words_file, capsys):
    assert cli.run_cli(["--words", words_file, "--verbose", "stats"]) == 0
    assert "took" in capsys.readouterr().out


def test_missing_word_list(tmp_path, capsys):
    missing = str(tmp_path / "nope.txt")
    assert cli.run_cli(["--words", missing, "stats"]) == 1
    assert "Could not find word list" in capsys.readouterr().out


def test_download_failure(monkeypatch, capsys):
    def fake_get(url, timeout=None):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(wordlist.requests, 'get', fake_get)
    assert cli.run_cli(["--url", "https://example.org/w.txt", "stats"]) == 1
    assert "Error loading word list: offline" in capsys.readouterr().out


def test_bad_command_exits():
    with pytest.raises(SystemExit) as exc:
        cli.run_cli(["search"])
    assert exc.value.code == 2


def test_words_and_url_are_exclusive(words_file):
    with pytest.raises(SystemExit):
        cli.run_cli(["--words", words_file, "--url", "https://example.org/w.txt", "stats"])


def test_print_tree_long_word(capsys):
    cli.print_tree(DAWG.build(["a" * 3000]))
    lines = plain(capsys.readouterr().out).splitlines()
    assert len(lines) == 3001
    assert lines[1] == "  a"
    assert lines[-1] == "  " * 3000 + "a *"


def test_words_command(words_file, capsys):
    assert cli.run_cli(["--words", words_file, "words"]) == 0
    lines = plain(capsys.readouterr().out).splitlines()
    assert lines[-5:] == ["g", "go", "t", "语", "语言"]


def test_url_help_mentions_uppercase_default():
    text = " ".join(cli.build_parser().format_help().split())
    assert utils.DICT_URL in text
    assert "an uppercase list; pair it with --upper" in text
