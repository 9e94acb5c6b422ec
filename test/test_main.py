import json

import pytest

from finite_automata.main import EXIT_ACCEPTED, EXIT_ERROR, EXIT_REJECTED, main


@pytest.fixture
def spec_file(tmp_path, linear_spec):
    path = tmp_path / "dfa.json"
    path.write_text(json.dumps(linear_spec), encoding="utf-8")
    return str(path)


def run(argv):
    return main(argv + ["--log-level", "CRITICAL"])


def test_prints_each_state(spec_file, capsys):
    assert run([spec_file, "a", "b"]) == EXIT_ACCEPTED
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "start -> s1"
    assert out[1].endswith("-> s2")
    assert out[2].endswith("-> s3")
    assert out[-1] == "ACCEPTED"


def test_rejected_word(spec_file, capsys):
    assert run([spec_file, "--word", "b"]) == EXIT_REJECTED
    out = capsys.readouterr().out.splitlines()
    assert out[1].endswith("-> <error>")
    assert out[-1] == "REJECTED"


def test_json_output(tmp_path, branching_spec, capsys):
    path = tmp_path / "nfa.json"
    path.write_text(json.dumps(branching_spec), encoding="utf-8")
    assert run([str(path), "--kind", "nfa", "--json", "a"]) == EXIT_ACCEPTED
    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert lines[0]["symbol"] is None
    assert lines[-1]["current"] == ["s2", "s3"]
    assert lines[-1]["accepting"] is True


def test_invalid_spec_exit_code(tmp_path, branching_spec, capsys):
    path = tmp_path / "dfa.json"
    path.write_text(json.dumps(branching_spec), encoding="utf-8")
    assert run([str(path), "a"]) == EXIT_ERROR
    assert "non-deterministic" in capsys.readouterr().err


def test_missing_file_exit_code(tmp_path, capsys):
    assert run([str(tmp_path / "missing.json")]) == EXIT_ERROR
    assert "could not load spec" in capsys.readouterr().err


def test_unknown_symbol_exit_code(spec_file, capsys):
    assert run([spec_file, "a", "z"]) == EXIT_ERROR
    assert "'z'" in capsys.readouterr().err


def test_word_and_symbols_conflict(spec_file):
    with pytest.raises(SystemExit):
        run([spec_file, "a", "--word", "ab"])


def test_state_named_error_prints_distinct_marker(tmp_path, capsys):
    path = tmp_path / "dfa.json"
    path.write_text(json.dumps({
        "alphabet": ["a", "b"],
        "states": ["start", "ERROR"],
        "initialState": "start",
        "finalStates": [],
        "transitions": [["start", "ERROR", "a"]],
    }), encoding="utf-8")
    assert run([str(path), "a", "b"]) == EXIT_REJECTED
    out = capsys.readouterr().out.splitlines()
    assert out[1].endswith("-> ERROR")
    assert out[2].endswith("-> <error>")


def test_json_error_step_is_null(spec_file, capsys):
    assert run([spec_file, "--json", "b"]) == EXIT_REJECTED
    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert lines[-1]["current"] is None
    assert lines[-1]["error"] is True
