"""
Tests for the fluid-css command line interface.
"""

import json

import pytest

from fluid_css.main import main
from fluid_css.utils.config import CONFIG_ENV_VAR

FLUID_VALUE = "clamp(1rem,0.67rem + 1.67vw,2rem)/* fluid from 1rem at 20rem to 2rem at 80rem */"


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def test_generate(capsys):
    assert main(["generate", "1rem", "2rem", "--start-bp", "20rem", "--end-bp", "80rem"]) == 0
    assert capsys.readouterr().out.strip() == FLUID_VALUE


def test_generate_container_with_defaults(capsys):
    # Default container scale runs from 16rem to 80rem
    assert main(["generate", "1rem", "2rem", "--container", "card"]) == 0
    assert capsys.readouterr().out.strip().endswith("(container: card) */")


def test_generate_error_exits_with_status_1(capsys):
    assert main(["generate", "16px", "2rem"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("fluid-css: Start value 16px and end value 2rem must share a unit")


def test_parse(capsys):
    assert main(["parse", FLUID_VALUE]) == 0
    assert json.loads(capsys.readouterr().out) == {
        'start': '1rem',
        'start_bp': '20rem',
        'end': '2rem',
        'end_bp': '80rem',
        'container': False,
        'check_sc144': False,
    }


def test_parse_non_fluid(capsys):
    assert main(["parse", "1rem"]) == 0
    assert json.loads(capsys.readouterr().out) is None


def test_rewrite_file(tmp_path, capsys):
    source = tmp_path / "styles.css"
    source.write_text(f".title {{ font-size: {FLUID_VALUE}; }}", encoding="utf-8")
    output = tmp_path / "out.css"

    assert main(["rewrite", str(source), "--start-bp", "20rem", "--end-bp", "[60rem]", "-o", str(output)]) == 0
    assert output.read_text(encoding="utf-8") == (
        ".title {\n"
        "  font-size: clamp(1rem,0.5rem + 2.5vw,2rem)/* fluid from 1rem at 20rem to 2rem at 60rem */;\n"
        "}\n"
    )


def test_rewrite_with_config(tmp_path, capsys):
    config = tmp_path / "fluid.json"
    config.write_text(json.dumps({
        'screens': {'tablet': '60rem'},
        'defaults': {'start_screen': '20rem'},
    }), encoding="utf-8")
    source = tmp_path / "styles.css"
    source.write_text(f".a {{ margin: {FLUID_VALUE} }}", encoding="utf-8")

    assert main(["--config", str(config), "rewrite", str(source), "--end-bp", "tablet"]) == 0
    assert "/* fluid from 1rem at 20rem to 2rem at 60rem */" in capsys.readouterr().out


def test_rewrite_without_fluid_values(tmp_path, capsys):
    source = tmp_path / "styles.css"
    source.write_text(".a { position: relative }", encoding="utf-8")
    assert main(["rewrite", str(source), "--end-bp", "md"]) == 1
    assert "No fluid declarations" in capsys.readouterr().err


def test_bad_config(tmp_path, capsys):
    config = tmp_path / "fluid.json"
    config.write_text("{", encoding="utf-8")
    assert main(["--config", str(config), "generate", "1rem", "2rem"]) == 1
    assert "Could not load configuration" in capsys.readouterr().err


def test_log_file_receives_debug_output(tmp_path, capsys):
    log_file = tmp_path / "logs" / "fluid.log"
    assert main(["--debug", "--log-file", str(log_file),
                 "generate", "1rem", "2rem", "--start-bp", "20rem", "--end-bp", "80rem"]) == 0
    assert capsys.readouterr().out.strip() == FLUID_VALUE
    assert log_file.exists()
    assert "[DEBUG]" in log_file.read_text(encoding="utf-8")


def test_debug_logs_failures_to_stderr(capsys):
    assert main(["--debug", "generate", "16px", "2rem"]) == 1
    err = capsys.readouterr().err
    assert "generate failed" in err
    assert "fluid-css: Start value 16px" in err
