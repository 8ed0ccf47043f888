import random

import pytest

from config import Settings, build_rng, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("RANDOM_SEED", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = get_settings()
    assert settings == Settings(log_level="INFO", random_seed=None)


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RANDOM_SEED", " 42 ")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()
    assert settings.random_seed == 42
    assert settings.log_level == "DEBUG"


def test_bad_seed_names_the_variable(monkeypatch):
    monkeypatch.setenv("RANDOM_SEED", "lucky")
    with pytest.raises(ValueError, match="RANDOM_SEED"):
        get_settings()


def test_build_rng_without_seed_uses_shared_source():
    assert build_rng(Settings()) is None


def test_build_rng_with_seed_is_reproducible():
    rng = build_rng(Settings(random_seed=7))
    assert isinstance(rng, random.Random)
    assert rng.random() == random.Random(7).random()
