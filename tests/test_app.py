"""Tests for the app facade, configuration and structured logging."""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from outfit_app.app import OutfitGeneratorApp
from outfit_app.config import DEFAULT_MAX_ATTEMPTS, GeneratorConfig
from outfit_app.logging_config import (
    JsonFormatter,
    correlation_context,
    generation_context,
    log_event,
    redact_for_log,
)


def _payload(**overrides) -> dict:
    payload = {
        "vibe": "casual",
        "weather": "sunny",
        "items": [
            {"item_id": "tee", "category": "tshirt", "color": "black", "vibe": "casual", "image_ref": "img/tee"},
            {"item_id": "jeans", "category": "jeans", "color": "white", "vibe": "casual", "image_ref": "img/jeans"},
            {"item_id": "shoes", "category": "shoes", "color": "black", "vibe": "casual", "image_ref": "img/shoes"},
        ],
        "seed": 4,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def app(monkeypatch: pytest.MonkeyPatch) -> OutfitGeneratorApp:
    for key in ("APP_ENV", "APP_CONFIG_PATH", "OUTFIT_MAX_ATTEMPTS", "OUTFIT_RANDOM_SEED"):
        monkeypatch.delenv(key, raising=False)
    return OutfitGeneratorApp(GeneratorConfig())


def test_generate_returns_serialized_outfit(app: OutfitGeneratorApp) -> None:
    response = app.generate(_payload())
    assert response["status"] == "ok"
    assert response["outfit"] == {"shape": "separates", "top": "tee", "bottom": "jeans", "footwear": "shoes"}
    assert [entry["slot"] for entry in response["items"]] == ["top", "bottom", "footwear"]
    assert response["items"][0]["image_ref"] == "img/tee"


def test_generate_reports_missing_outerwear_then_proceeds(app: OutfitGeneratorApp) -> None:
    response = app.generate(_payload(weather="cold"))
    assert response["status"] == "failed"
    assert response["reason"] == "missing_required_outerwear"
    assert "proceed_without_outerwear" in response["remediations"]

    retried = app.proceed_without_outerwear(_payload(weather="cold"))
    assert retried["status"] == "ok"
    assert "outerwear" not in retried["outfit"]


def test_generate_flags_invalid_payload(app: OutfitGeneratorApp) -> None:
    response = app.generate(_payload(weather="foggy"))
    assert response["status"] == "needs_review"
    assert response["details"]


def test_generate_is_deterministic_for_a_seed(app: OutfitGeneratorApp) -> None:
    payload = _payload(
        items=_payload()["items"]
        + [
            {"item_id": "dress", "category": "dress", "color": "white", "vibe": "casual"},
            {"item_id": "tee2", "category": "tshirt", "color": "blue", "vibe": "casual"},
        ]
    )
    assert app.generate(payload) == app.generate(payload)


def test_config_uses_configured_max_attempts() -> None:
    app = OutfitGeneratorApp(GeneratorConfig(max_attempts=3))
    items = [
        {"item_id": "tee", "category": "top", "color": "red", "vibe": "edgy"},
        {"item_id": "jeans", "category": "bottom", "color": "green", "vibe": "edgy"},
    ]
    response = app.generate({"vibe": "edgy", "weather": "hot", "items": items})
    assert response["reason"] == "exhausted"
    assert response["attempts"] == 3


def test_config_from_env_layers_file_and_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_file = tmp_path / "demo.yaml"
    config_file.write_text("# demo\nmax_attempts: 25\nrandom_seed: '9'\nlog_level: debug\n")
    monkeypatch.setenv("APP_CONFIG_PATH", str(config_file))
    monkeypatch.setenv("OUTFIT_MAX_ATTEMPTS", "40")
    monkeypatch.delenv("OUTFIT_RANDOM_SEED", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    config = GeneratorConfig.from_env()
    assert config.max_attempts == 40
    assert config.random_seed == 9
    assert config.log_level == "DEBUG"


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("APP_ENV", "APP_CONFIG_PATH", "OUTFIT_MAX_ATTEMPTS", "OUTFIT_RANDOM_SEED", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    config = GeneratorConfig.from_env()
    assert config.max_attempts == DEFAULT_MAX_ATTEMPTS == 100
    assert config.random_seed is None


def test_config_rejects_non_positive_attempts() -> None:
    with pytest.raises(ValueError):
        GeneratorConfig(max_attempts=0)


def test_redact_for_log_masks_image_refs() -> None:
    scrubbed = redact_for_log(
        {"image_ref": "img/1", "note": "mail me@example.com", "urls": ["https://x.test/a.jpg"], "count": 2}
    )
    assert scrubbed == {
        "image_ref": "[redacted]",
        "note": "mail [redacted-email]",
        "urls": ["[redacted-url]"],
        "count": 2,
    }


def test_json_formatter_includes_correlation_and_fields() -> None:
    logger = logging.getLogger("tests.outfit.json")
    records = []

    class _Capture(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(record)

    handler = _Capture()
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        with correlation_context("abc123"):
            log_event(logger, logging.INFO, "generation_finished", status="ok", photo_url="https://x.test/p.jpg")
    finally:
        logger.removeHandler(handler)

    payload = json.loads(JsonFormatter().format(records[0]))
    assert payload["event"] == "generation_finished"
    assert payload["correlation_id"] == "abc123"
    assert payload["status"] == "ok"
    assert payload["photo_url"] == "[redacted]"


class _EventCapture(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self, name: str) -> list:
        return [record for record in self.records if getattr(record, "event", None) == name]


@pytest.fixture()
def events(app: OutfitGeneratorApp):
    capture = _EventCapture()
    root = logging.getLogger()
    root.addHandler(capture)
    try:
        yield capture
    finally:
        root.removeHandler(capture)


def test_each_request_logs_one_start_and_one_finish(app: OutfitGeneratorApp, events: _EventCapture) -> None:
    app.generate(_payload(weather="cold"))

    assert len(events.events("generation_started")) == 1
    (finished,) = events.events("generation_finished")
    assert finished.vibe == "casual"
    assert finished.weather == "cold"
    assert finished.status == "failed"
    assert finished.reason == "missing_required_outerwear"
    assert finished.attempts == 0
    started_id = events.events("generation_started")[0].correlation_id
    assert started_id and finished.correlation_id == started_id


def test_rejected_request_is_logged_once(app: OutfitGeneratorApp, events: _EventCapture) -> None:
    app.generate(_payload(weather="foggy"))

    (rejected,) = events.events("request_rejected")
    assert rejected.fields == ["weather"]
    (finished,) = events.events("generation_finished")
    assert finished.status == "needs_review"


def test_generation_context_marks_crashes() -> None:
    logger = logging.getLogger("tests.outfit.trace")
    capture = _EventCapture()
    logger.addHandler(capture)
    logger.setLevel(logging.INFO)
    try:
        with pytest.raises(RuntimeError):
            with generation_context("casual", "sunny", logger=logger):
                raise RuntimeError("boom")
    finally:
        logger.removeHandler(capture)

    (finished,) = capture.events("generation_finished")
    assert finished.status == "error"


def _rainbow_closet() -> list:
    tops = [
        {"item_id": f"top_{color}", "category": "top", "color": color, "vibe": "casual"}
        for color in ("black", "white", "red", "blue", "green", "pink", "yellow")
    ]
    return tops + [{"item_id": "jeans", "category": "bottom", "color": "black", "vibe": "casual"}]


def test_configured_seed_repeats_generate() -> None:
    app = OutfitGeneratorApp(GeneratorConfig(random_seed=11))
    payload = {"vibe": "casual", "weather": "sunny", "items": _rainbow_closet()}
    outfits = {app.generate(payload)["outfit"]["top"] for _ in range(5)}
    assert len(outfits) == 1


def test_regenerate_ignores_configured_and_payload_seed() -> None:
    app = OutfitGeneratorApp(GeneratorConfig(random_seed=11))
    payload = {"vibe": "casual", "weather": "sunny", "items": _rainbow_closet(), "seed": 3}
    outfits = {app.regenerate(payload)["outfit"]["top"] for _ in range(30)}
    assert len(outfits) > 1


def test_config_reads_environment_file_from_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "staging.yaml").write_text('max_attempts: 12\n\nlog_level: "warning"\nnot a setting\n')
    for key in ("APP_CONFIG_PATH", "OUTFIT_MAX_ATTEMPTS", "OUTFIT_RANDOM_SEED", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("OUTFIT_CONFIG_DIR", str(tmp_path))

    config = GeneratorConfig.from_env()
    assert config.environment == "staging"
    assert config.max_attempts == 12
    assert config.log_level == "WARNING"
    assert config.random_seed is None
