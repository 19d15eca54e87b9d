"""Tests for the CLI dispatcher."""

import json
from unittest.mock import patch

import pytest

from wordchain.cli import main


class TestCLIDispatch:
    def test_no_command_shows_help(self, capsys):
        ret = main([])
        assert ret == 1
        out = capsys.readouterr().out
        assert "ladder" in out
        assert "dictionary" in out

    def test_skill_without_action_shows_help(self):
        with pytest.raises(SystemExit):
            main(["ladder"])

    def test_ladder_find(self, wordlist_file, capsys):
        ret = main(["ladder", "find", "cat", "dog", "--dictionary", str(wordlist_file)])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["path"] == ["cat", "cot", "cog", "dog"]

    def test_ladder_find_bfs(self, wordlist_file, capsys):
        ret = main([
            "ladder", "find", "ruby", "code",
            "--dictionary", str(wordlist_file),
            "--strategy", "bfs",
        ])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["strategy"] == "bfs"
        assert output["length"] <= 6

    def test_ladder_find_no_path(self, wordlist_file, capsys):
        ret = main([
            "ladder", "find", "cat", "dog",
            "--dictionary", str(wordlist_file),
            "--max-length", "3",
        ])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["found"] is False

    def test_length_mismatch_reported(self, wordlist_file, capsys):
        ret = main(["ladder", "find", "cat", "gold", "--dictionary", str(wordlist_file)])
        assert ret == 1
        output = json.loads(capsys.readouterr().out)
        assert "same length" in output["error"]

    def test_missing_dictionary_reported(self, tmp_path, capsys):
        ret = main(["ladder", "find", "cat", "dog", "--dictionary", str(tmp_path / "x.txt")])
        assert ret == 1
        output = json.loads(capsys.readouterr().out)
        assert "not found" in output["error"]

    def test_ladder_check(self, wordlist_file, capsys):
        ret = main(["ladder", "check", "cat", "cot", "cog", "--dictionary", str(wordlist_file)])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["valid"] is True

    def test_dictionary_info(self, wordlist_file, capsys):
        ret = main(["dictionary", "info", "--dictionary", str(wordlist_file), "--length", "4"])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["word_count"] == 12

    def test_highlight_ladder(self, capsys):
        ret = main(["highlight", "ladder", "cat", "cot", "--format", "html"])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert '<span class="gi">o</span>' in output["rendered"]

    def test_help_lists_all_skills(self, capsys):
        with pytest.raises(SystemExit):
            main(["--help"])
        out = capsys.readouterr().out
        for skill in ("dictionary", "ladder", "highlight", "chain"):
            assert skill in out


class TestChainCommand:
    def test_prints_chain(self, capsys):
        ret = main(["chain", "lead", "gold"])
        assert ret == 0
        out = capsys.readouterr().out
        assert out.startswith("Shortest found path from 'lead' to 'gold': [")
        assert "    load,\n    goad,\n    gold\n]" in out

    def test_no_path_message(self, wordlist_file, capsys):
        ret = main(["chain", "cat", "dog", "--dictionary", str(wordlist_file), "--max-length", "2"])
        assert ret == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No way to traverse from 'cat' to 'dog'" in captured.err

    def test_dispatches_to_ladder_skill(self, capsys):
        mock_result = {"found": True, "path": ["cat", "cot"]}
        with patch("wordchain.skills.ladder.find", return_value=mock_result) as mock_find:
            ret = main(["chain", "cat", "cot", "--strategy", "bfs"])
        assert ret == 0
        mock_find.assert_called_once_with(
            "cat",
            "cot",
            dictionary_path=None,
            max_length=None,
            strategy="bfs",
            alphabet=None,
        )
        assert "[\n    cat,\n    cot\n]" in capsys.readouterr().out

    def test_mismatch_is_usage_error(self, capsys):
        ret = main(["chain", "cat", "gold"])
        assert ret == 1
        assert "same length" in capsys.readouterr().err

    def test_too_few_arguments(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["chain", "cat"])
        assert exc_info.value.code == 2

    def test_too_many_arguments(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["chain", "cat", "cot", "dog"])
        assert exc_info.value.code == 2
