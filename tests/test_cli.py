import pytest

from maze_pathfinder.cli import LOG_LEVEL_ENV, env_log_level, main


def write_maze(tmp_path, rows, name='maze.txt'):
    path = tmp_path / name
    path.write_text('\n'.join(rows) + '\n', encoding='utf-8')
    return str(path)


def test_prints_solution(tmp_path, capsys):
    path = write_maze(tmp_path, ["XXXX", "X.IX", "XG.X", "XXXX"])
    assert main([path, '--verify']) == 0
    out = capsys.readouterr().out
    assert 'Solution in 2 moves:' in out
    assert 'is_solution=True cost=2' in out


def test_no_solution_exit_code(tmp_path, capsys):
    path = write_maze(tmp_path, ["XXXXX", "XIXGX", "XXXXX"])
    assert main([path]) == 1
    assert 'No solution found.' in capsys.readouterr().out


def test_invalid_maze_exit_code(tmp_path, capsys):
    path = write_maze(tmp_path, ["XXXX", "X..X", "XXXX"])
    assert main([path]) == 2
    assert 'Invalid maze' in capsys.readouterr().err


def test_missing_file_exit_code(tmp_path, capsys):
    assert main([str(tmp_path / 'nope.txt')]) == 2
    assert 'Invalid maze' in capsys.readouterr().err


def test_log_level_is_case_insensitive(tmp_path):
    path = write_maze(tmp_path, ["XXX", "XIX", "XGX", "XXX"])
    assert main([path, '--log-level', 'debug']) == 0


def test_unknown_log_level_is_usage_error(tmp_path, capsys):
    path = write_maze(tmp_path, ["XXX", "XIX", "XGX", "XXX"])
    with pytest.raises(SystemExit) as exc:
        main([path, '--log-level', 'loud'])
    assert exc.value.code == 2
    assert 'invalid choice' in capsys.readouterr().err


def test_bad_log_level_env_falls_back_to_info(monkeypatch, capsys):
    monkeypatch.setenv(LOG_LEVEL_ENV, 'loud')
    assert env_log_level() == 'INFO'
    assert LOG_LEVEL_ENV in capsys.readouterr().err
    monkeypatch.setenv(LOG_LEVEL_ENV, ' warning ')
    assert env_log_level() == 'WARNING'
