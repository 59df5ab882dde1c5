# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for NeuralDharmaSettings."""

from __future__ import annotations

from pathlib import Path

import pytest

from neuraldharma.settings import NeuralDharmaSettings

_ENV_VARS = (
    "NEURAL_DHARMA_ALIGNMENT_THRESHOLD",
    "NEURAL_DHARMA_LOG_LEVEL",
    "NEURAL_DHARMA_KARMA_EVALUATOR__VIOLATION_THRESHOLD",
    "NEURAL_DHARMA_STHITAPRAJNA_GUARD__PREFER_SANITIZE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Tests: Defaults and environment
# =============================================================================


@pytest.mark.unit
class TestEnvironment:
    def test_defaults(self) -> None:
        settings = NeuralDharmaSettings()

        assert settings.log_level == "WARNING"
        assert settings.karma_log_max_entries == 10_000
        config = settings.to_audit_config()
        assert (config.alignment_threshold, config.critical_threshold) == (0.5, 0.25)
        assert (config.aligned_verdict, config.review_verdict) == (0.65, 0.45)

    def test_flat_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEURAL_DHARMA_ALIGNMENT_THRESHOLD", "0.6")
        monkeypatch.setenv("NEURAL_DHARMA_LOG_LEVEL", "debug")

        settings = NeuralDharmaSettings()
        assert settings.to_audit_config().alignment_threshold == 0.6
        assert settings.log_level == "DEBUG"

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEURAL_DHARMA_KARMA_EVALUATOR__VIOLATION_THRESHOLD", "0.35")
        monkeypatch.setenv("NEURAL_DHARMA_STHITAPRAJNA_GUARD__PREFER_SANITIZE", "false")

        settings = NeuralDharmaSettings()
        assert settings.karma_evaluator.violation_threshold == 0.35
        assert settings.sthitaprajna_guard.prefer_sanitize is False

    def test_nested_env_value_is_clamped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEURAL_DHARMA_KARMA_EVALUATOR__VIOLATION_THRESHOLD", "1.7")
        assert NeuralDharmaSettings().karma_evaluator.violation_threshold == 1.0

    def test_out_of_range_audit_threshold_is_clamped(self) -> None:
        config = NeuralDharmaSettings(alignment_threshold=-0.2).to_audit_config()
        assert config.alignment_threshold == 0.0

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            NeuralDharmaSettings(log_level="chatty")


# =============================================================================
# Tests: YAML
# =============================================================================


@pytest.mark.unit
class TestFromYaml:
    def test_yaml_sections(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(
            "alignment_threshold: 0.55\n"
            "review_verdict: 0.5\n"
            "viveka_filter:\n"
            "  max_tamas: 0.4\n"
            "nishkama_optimizer:\n"
            "  temperature: 0.7\n",
            encoding="utf-8",
        )

        settings = NeuralDharmaSettings.from_yaml(path)
        assert settings.to_audit_config().alignment_threshold == 0.55
        assert settings.to_audit_config().review_verdict == 0.5
        assert settings.viveka_filter.max_tamas == 0.4
        assert settings.nishkama_optimizer.temperature == 0.7

    def test_yaml_wins_over_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEURAL_DHARMA_ALIGNMENT_THRESHOLD", "0.9")
        path = tmp_path / "settings.yaml"
        path.write_text("alignment_threshold: 0.3\n", encoding="utf-8")

        assert NeuralDharmaSettings.from_yaml(path).alignment_threshold == 0.3

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert NeuralDharmaSettings.from_yaml(path).alignment_threshold == 0.5

    def test_non_mapping_yaml_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="YAML mapping"):
            NeuralDharmaSettings.from_yaml(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            NeuralDharmaSettings.from_yaml(tmp_path / "absent.yaml")
