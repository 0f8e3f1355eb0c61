"""
Tests for the pangram checker entry point.
"""

from src.main import format_result, load_config, main


def test_main_prints_result(capsys, tmp_path):
    config_path = tmp_path / 'config.yaml'
    config_path.write_text("logging:\n  level: WARNING\n")

    assert main(['--config', str(config_path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Is this a pangram? true!\n"


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Is this a pangram? true!\n"


def test_format_result():
    assert format_result(True) == "Is this a pangram? true!"
    assert format_result(False) == "Is this a pangram? false!"


def test_load_config(tmp_path):
    config_path = tmp_path / 'config.yaml'
    config_path.write_text("logging:\n  level: DEBUG\n")
    assert load_config(config_path)['logging']['level'] == 'DEBUG'


def test_load_config_empty_file(tmp_path):
    config_path = tmp_path / 'config.yaml'
    config_path.write_text("")
    assert load_config(config_path)['logging']['level'] == 'WARNING'


def test_load_config_missing_file(tmp_path):
    config = load_config(tmp_path / 'missing.yaml')
    assert config['logging']['level'] == 'WARNING'
