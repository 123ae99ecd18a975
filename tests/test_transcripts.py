"""Tests for trial results and transcript rendering."""

from romanturing.models import Speaker, TrialResult, Verdict
from romanturing.transcripts import list_trials, load_trials, render_trial


def _result(timestamp="20260101T000000Z", verdict=Verdict.PASS):
    result = TrialResult(
        timestamp=timestamp,
        verdict=verdict,
        reason="ack -- gotta run",
        challenge="VII - III",
        expected_answer="IV",
        contender_name="James",
        wall_clock_s=1.5,
    )
    result.record(Speaker.JUDGE, "what's your name?")
    result.record(Speaker.CONTENDER, "James [the bot]")
    return result


def test_save_and_load(tmp_path):
    original = _result()
    path = original.save(tmp_path / original.timestamp)
    assert path.name == "transcript.json"

    loaded = TrialResult.load(tmp_path / original.timestamp)
    assert loaded is not None
    assert loaded.verdict == Verdict.PASS
    assert loaded.expected_answer == "IV"
    assert [e.speaker for e in loaded.transcript] == [Speaker.JUDGE, Speaker.CONTENDER]
    assert loaded.transcript[1].text == "James [the bot]"


def test_load_missing_or_corrupt(tmp_path):
    assert TrialResult.load(tmp_path) is None
    (tmp_path / "transcript.json").write_text("{not json", encoding="utf-8")
    assert TrialResult.load(tmp_path) is None


def test_load_trials_in_order(tmp_path):
    _result("20260102T000000Z", Verdict.FAIL).save(tmp_path / "20260102T000000Z")
    _result("20260101T000000Z").save(tmp_path / "20260101T000000Z")
    (tmp_path / "stray.txt").write_text("", encoding="utf-8")
    trials = load_trials(tmp_path)
    assert [t.timestamp for t in trials] == ["20260101T000000Z", "20260102T000000Z"]


def test_render_trial(console):
    render_trial(_result(), console)
    out = console.file.getvalue()
    assert "James [the bot]" in out
    assert "pass" in out
    assert "VII - III = IV" in out


def test_list_trials(console, tmp_path):
    _result().save(tmp_path / "20260101T000000Z")
    list_trials(console, tmp_path)
    assert "20260101T000000Z" in console.file.getvalue()


def test_list_trials_empty(console, tmp_path):
    list_trials(console, tmp_path / "missing")
    assert "No saved trials" in console.file.getvalue()
