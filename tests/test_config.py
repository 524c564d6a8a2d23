from pathlib import Path

import pytest

from facecnn.config import Config


def test_defaults_from_empty_environment():
    config = Config.from_env({})
    assert config.data_dir == Path("./data")
    assert config.models_dir == Path("./models")
    assert config.learning_rate == 0.001
    assert config.epochs == 10
    assert config.model_type == "Cnn"


def test_values_taken_from_environment(tmp_path):
    env = {
        "DATA_DIR": str(tmp_path / "d"),
        "MODELS_DIR": str(tmp_path / "m"),
        "LEARNING_RATE": "0.05",
        "EPOCHS": "3",
        "MODEL_TYPE": "Mlp",
    }
    config = Config.from_env(env)
    assert config.data_dir == tmp_path / "d"
    assert config.models_dir == tmp_path / "m"
    assert config.learning_rate == 0.05
    assert config.epochs == 3
    assert config.model_type == "Mlp"


@pytest.mark.parametrize("rate", ["abc", "", " 0.1", "1,5"])
def test_invalid_learning_rate_falls_back(rate):
    assert Config.from_env({"LEARNING_RATE": rate}).learning_rate == 0.001


@pytest.mark.parametrize("epochs", ["-1", "2.5", "ten", ""])
def test_invalid_epochs_fall_back(epochs):
    assert Config.from_env({"EPOCHS": epochs}).epochs == 10


def test_scientific_learning_rate_is_accepted():
    assert Config.from_env({"LEARNING_RATE": "1e-4"}).learning_rate == pytest.approx(1e-4)


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("EPOCHS", "7")
    monkeypatch.delenv("LEARNING_RATE", raising=False)
    config = Config.from_env()
    assert config.epochs == 7
    assert config.learning_rate == 0.001


def test_ensure_directories_creates_tree(tmp_path):
    config = Config(data_dir=tmp_path / "data", models_dir=tmp_path / "models")
    config.ensure_directories()
    assert (tmp_path / "data" / "raw").is_dir()
    assert (tmp_path / "data" / "processed").is_dir()
    assert (tmp_path / "models").is_dir()
    config.ensure_directories()
    assert (tmp_path / "data" / "raw").is_dir()


def test_model_save_path_joins_models_dir(tmp_path):
    config = Config(models_dir=tmp_path)
    assert config.model_save_path("trained_model.safetensors") == tmp_path / "trained_model.safetensors"