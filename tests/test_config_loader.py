import pytest

from netcentral.utils.config_loader import (
    AnalysisConfig,
    load_analysis_config,
    parse_config_text,
)
from netcentral.utils.constants import TOP_K_DEFAULT
from netcentral.utils.errors import ConfigurationError


def test_defaults_without_base_dir():
    cfg = load_analysis_config(None)
    assert cfg == AnalysisConfig()
    assert cfg.top_k == TOP_K_DEFAULT


def test_missing_file_uses_defaults(tmp_path, capsys):
    assert load_analysis_config(tmp_path) == AnalysisConfig()
    assert "[INFO]" in capsys.readouterr().out


def test_load_from_file(tmp_path):
    cfg_dir = tmp_path / "config"
    cfg_dir.mkdir()
    (cfg_dir / "analysis.ini").write_text(
        "# enron run\n"
        "top_k: 500\n"
        "clusters: 4   # four behaviour groups\n"
        "init: first\n"
        "drop-self-loops: yes\n",
        encoding="utf-8",
    )

    cfg = load_analysis_config(tmp_path)

    assert cfg.top_k == 500
    assert cfg.clusters == 4
    assert cfg.init == "first"
    assert cfg.drop_self_loops is True
    assert cfg.max_iters == AnalysisConfig().max_iters


def test_unknown_and_invalid_lines_are_skipped(capsys):
    values = parse_config_text("colour: red\nno separator here\njobs: 2\n")
    assert values == {"jobs": 2}
    assert capsys.readouterr().out.count("[WARN]") == 2


@pytest.mark.parametrize("text", ["top_k: many", "drop_self_loops: maybe"])
def test_bad_values_raise(text):
    with pytest.raises(ConfigurationError):
        parse_config_text(text)


def test_overrides_apply_and_validate():
    cfg = AnalysisConfig().with_overrides(clusters=3, top_k=None)
    assert cfg.clusters == 3
    assert cfg.top_k == TOP_K_DEFAULT

    with pytest.raises(ConfigurationError):
        AnalysisConfig().with_overrides(clusters=0)
    with pytest.raises(ConfigurationError):
        AnalysisConfig().with_overrides(init="random")
