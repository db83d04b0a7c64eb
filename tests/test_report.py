import json
import pytest

from content_optimizer import build_report
from content_optimizer.config import load_config, merge_config, module_config, DEFAULT_CONFIG
from content_optimizer.report import score_band, grade_band, readability_verdict, sentence_count_message
from content_optimizer.text_utils import round_half_up


@pytest.mark.parametrize("score, band", [(100, "good"), (80, "good"), (79, "fair"), (60, "fair"), (59, "poor"), (0, "poor")])
def test_score_band(score, band):
    assert score_band(score) == band


@pytest.mark.parametrize("grade, band", [(1, "good"), (6, "good"), (7, "fair"), (9, "fair"), (10, "poor"), (12, "poor")])
def test_grade_band(grade, band):
    assert grade_band(grade) == band


def test_readability_verdict():
    assert readability_verdict(80) == "Good."
    assert readability_verdict(65) == "Fair."
    assert readability_verdict(10) == "Needs improvement."


def test_sentence_count_message():
    assert sentence_count_message(0, "hard") is None
    assert sentence_count_message(1, "very hard") == "1 sentence is very hard to read."
    assert sentence_count_message(3, "hard") == "3 sentences are hard to read."


def test_build_report_for_empty_text():
    report = build_report("")
    summary = report["summary"]
    assert summary["seoScore"] == 39
    assert summary["seoScoreBand"] == "poor"
    assert summary["readabilityScore"] == 100
    assert summary["readabilityVerdict"] == "Good."
    assert summary["grade"] == 1
    assert summary["sentenceMessages"] == []
    # JSON-serializable end to end
    json.dumps(report)


def test_build_report_sentence_messages(words):
    report = build_report(f"{words(40)}. {words(25)}. {words(22)}.")
    assert report["summary"]["sentenceMessages"] == [
        "1 sentence is very hard to read.",
        "2 sentences are hard to read.",
    ]


def test_build_report_honours_config_sections():
    cfg = merge_config(DEFAULT_CONFIG, {"SEOAnalyzer": {"title_min_length": 3}})
    report = build_report("# Short", cfg)
    assert report["SEOAnalyzer"]["checks"]["title_length"]["score"] == 1.0


def test_merge_config_does_not_mutate_defaults():
    merged = merge_config(DEFAULT_CONFIG, {"SEOAnalyzer": {"title_min_length": 1}, "Extra": 1})
    assert merged["SEOAnalyzer"]["title_min_length"] == 1
    assert merged["Extra"] == 1
    assert DEFAULT_CONFIG["SEOAnalyzer"]["title_min_length"] == 30


def test_module_config_passes_global_down():
    section = module_config(DEFAULT_CONFIG, "ReadabilityAnalyzer")
    assert section["hard_sentence_words"] == 20
    assert section["Global"]["debug"] is False


def test_load_config_from_file(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"Global": {"debug": True}}))
    cfg = load_config(str(path))
    assert cfg["Global"]["debug"] is True
    assert cfg["Global"]["request_timeout"] == 10
    assert "Loaded custom configuration" in capsys.readouterr().out


def test_load_config_falls_back_on_bad_files(tmp_path, capsys):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    assert load_config(str(broken)) == DEFAULT_CONFIG
    assert load_config(str(tmp_path / "missing.json")) == DEFAULT_CONFIG
    out = capsys.readouterr().out
    assert "Error decoding JSON" in out
    assert "not found" in out


def test_debug_logging_prints(capsys):
    cfg = merge_config(DEFAULT_CONFIG, {"Global": {"debug": True}})
    build_report("The cat sat.", cfg)
    assert "[SEOAnalyzer]" in capsys.readouterr().out


@pytest.mark.parametrize("value, expected", [(32.5, 33), (38.75, 39), (38.49, 38), (-2.62, -3), (0, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
