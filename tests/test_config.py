import pytest

from distle.config import PlayerOptions, load_options


def test_defaults_without_path():
    assert load_options(None) == PlayerOptions()


def test_yaml_overrides(tmp_path):
    p = tmp_path / "player.yaml"
    p.write_text("seed: 3\nmax_guess_pool: 10\n", encoding="utf-8")
    assert load_options(str(p)) == PlayerOptions(max_guess_pool=10, seed=3)


def test_json_overrides(tmp_path):
    p = tmp_path / "player.json"
    p.write_text('{"max_eval_candidates": 50}', encoding="utf-8")
    assert load_options(str(p)).max_eval_candidates == 50


def test_rejects_unknown_keys(tmp_path):
    p = tmp_path / "player.yml"
    p.write_text("depth: 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_options(str(p))


def test_rejects_bad_suffix_and_missing_file(tmp_path):
    p = tmp_path / "player.toml"
    p.write_text("seed = 1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_options(str(p))
    with pytest.raises(FileNotFoundError):
        load_options(str(tmp_path / "nope.yaml"))


@pytest.mark.parametrize("body", ["seed:\n", "max_guess_pool: 2.9\n", "seed: true\n", "seed: '3'\n"])
def test_rejects_non_integer_values(tmp_path, body):
    p = tmp_path / "player.yaml"
    p.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError, match="must be an integer"):
        load_options(str(p))


def test_rejects_non_positive_caps(tmp_path):
    p = tmp_path / "player.yaml"
    p.write_text("max_guess_pool: 0\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_options(str(p))
