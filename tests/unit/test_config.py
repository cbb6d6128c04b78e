"""Unit tests for analysis config loading."""

import pytest

from jobstream.contexts.analysis.config import DEFAULT_CONFIG_PATH, load_analysis_config
from jobstream.contexts.analysis.word_frequency import WordFrequencyCounter


@pytest.mark.unit
def test_packaged_defaults():
    config = load_analysis_config(DEFAULT_CONFIG_PATH)

    assert config["word_frequency"] == {"word_characters": "ascii", "top_n": 20}
    assert config["queries"]["junior_markers"] == ["junior", "jr"]
    assert config["queries"]["result_limit"] == 3
    assert config["queries"]["menu_size"] == 20
    assert config["dates"]["limit"] == 5


@pytest.mark.unit
def test_override_merges_over_defaults(tmp_path):
    override = tmp_path / "analysis.yaml"
    override.write_text("word_frequency:\n  word_characters: unicode\n")

    config = load_analysis_config(override)

    assert config["word_frequency"]["word_characters"] == "unicode"
    assert config["word_frequency"]["top_n"] == 20
    assert config["queries"]["menu_size"] == 20


@pytest.mark.unit
def test_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError, match="Analysis config not found"):
        load_analysis_config(tmp_path / "absent.yaml")


@pytest.mark.unit
def test_counter_from_loaded_config(tmp_path):
    override = tmp_path / "analysis.yaml"
    override.write_text("word_frequency:\n  word_characters: unicode\n")

    counter = WordFrequencyCounter.from_config(load_analysis_config(override))
    assert counter.count(["Café"]) == {"café": 1}
