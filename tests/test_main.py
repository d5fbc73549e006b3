import pytest

import main
from wordgraph.config import AnalysisConfig


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.json"
    AnalysisConfig(walk_step_delay=2.0, seed=5).save(path)
    return path


def test_default_walk_step_delay():
    config = main.build_config(main.parse_args(["corpus.txt"]))
    assert config.walk_step_delay == main.DEFAULT_WALK_STEP_DELAY


def test_config_file_delay_is_kept(config_path):
    config = main.build_config(main.parse_args(["corpus.txt", "--config", str(config_path)]))
    assert config.walk_step_delay == 2.0
    assert config.seed == 5


def test_flag_overrides_config_file(config_path):
    args = main.parse_args(["corpus.txt", "--config", str(config_path), "--walk-step-delay", "0"])
    config = main.build_config(args)
    assert config.walk_step_delay == 0.0
    assert config.seed == 5


def test_missing_corpus_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main.main([str(tmp_path / "missing.txt")])
    assert excinfo.value.code == 1


def test_bad_config_file_exits(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text('{"sed": 1}', encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main.main(["corpus.txt", "--config", str(config_path)])
    assert excinfo.value.code == 1
