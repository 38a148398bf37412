import json

from space_invaders.highscores import ANONYMOUS, HighScore, HighScoreTable


def test_missing_file_is_an_empty_table(tmp_path):
    table = HighScoreTable(tmp_path / "nope.json")
    assert table.load() == []
    assert table.qualifies(1)
    assert not table.qualifies(0)


def test_submit_keeps_best_first(tmp_path):
    table = HighScoreTable(tmp_path / "scores.json")
    assert table.submit(10) == 1
    assert table.submit(30, "ann") == 1
    assert table.submit(20, "bob") == 2
    assert [e.score for e in table.entries] == [30, 20, 10]
    assert table.entries[2].name == ANONYMOUS


def test_ties_go_below(tmp_path):
    table = HighScoreTable(tmp_path / "scores.json")
    table.submit(10, "first")
    assert table.submit(10, "second") == 2


def test_table_is_limited_to_ten(tmp_path):
    table = HighScoreTable(tmp_path / "scores.json")
    for score in range(10, 120, 10):
        table.submit(score)

    assert len(table) == 10
    assert table.entries[0].score == 110
    assert table.entries[-1].score == 20
    assert not table.qualifies(20)
    assert table.submit(15) is None
    assert table.submit(25) == 10
    assert len(table) == 10


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "scores.json"
    table = HighScoreTable(path)
    table.submit(50, "ann")
    table.submit(70)
    table.save()

    assert json.loads(path.read_text()) == [
        {"name": "anonymous", "score": 70},
        {"name": "ann", "score": 50},
    ]
    assert HighScoreTable(path).load() == [
        HighScore("anonymous", 70),
        HighScore("ann", 50),
    ]


def test_load_sorts_and_truncates(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps([{"name": "a", "score": s} for s in range(15)]))
    entries = HighScoreTable(path).load()
    assert len(entries) == 10
    assert entries[0].score == 14


def test_malformed_file_is_an_empty_table(tmp_path, caplog):
    path = tmp_path / "scores.json"
    path.write_text("{not json")
    assert HighScoreTable(path).load() == []
    assert "Failed to read high scores" in caplog.text


def test_failed_write_is_logged(tmp_path, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("")
    table = HighScoreTable(blocker / "scores.json")
    table.submit(40)

    assert table.save() is False
    assert "Failed to write high scores" in caplog.text
    assert [e.score for e in table.entries] == [40]
