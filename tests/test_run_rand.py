import json

import pytest

import run_rand


def test_single_seed_run_writes_result(write_plan, capsys):
    path = write_plan(
        "# plano de teste\n"
        "! linha ignorada\n"
        "seed: 1234\n"
        "draws:\n"
        "  - kind: f64\n"
        "    count: 3\n"
    )

    run_rand.main([str(path)])
    captured = capsys.readouterr()

    out_path = path.with_suffix(".result.json")
    assert out_path.exists()
    payload = json.loads(out_path.read_text())
    assert payload["steps"][0]["values"] == [
        0.009657739666131204,
        0.3176305686671429,
        0.41696758867100236,
    ]
    assert "Números aleatórios utilizados: 3" in captured.out
    assert str(out_path) in captured.out


def test_multiple_seeds_write_results_per_seed(write_plan, capsys):
    path = write_plan(
        "seeds: [1234, 42]\n"
        "draws:\n"
        "  - kind: int64\n"
        "    min: 0\n"
        "    max: 100\n"
        "    count: 3\n"
    )

    run_rand.main([str(path)])
    captured = capsys.readouterr()

    payload = json.loads(path.with_suffix(".results.json").read_text())
    assert set(payload) == {"seed_1234", "seed_42"}
    assert payload["seed_1234"]["steps"][0]["values"] == [0, 32, 42]
    assert payload["seed_42"]["seed"] == 42
    assert "RESULTADOS PARA SEMENTE: 1234" in captured.out
    assert "RESULTADOS PARA SEMENTE: 42" in captured.out


def test_custom_parameters_from_config(write_plan):
    path = write_plan(
        "seed: 4321\n"
        "multiplier: 86284\n"
        "increment: 2\n"
        "modulus: 7263957720\n"
    )

    run_rand.main([str(path)])

    payload = json.loads(path.with_suffix(".result.json").read_text())
    assert payload["parameters"] == {"multiplier": 86_284, "increment": 2, "modulus": 7_263_957_720}
    assert payload["final_seed"] == 372_833_166


def test_zero_modulus_exits_with_error(write_plan, capsys):
    path = write_plan("seed: 1\nmodulus: 0\n")

    with pytest.raises(SystemExit) as excinfo:
        run_rand.main([str(path)])

    assert excinfo.value.code == 1
    assert "Erro no plano de sorteios" in capsys.readouterr().out
    assert not path.with_suffix(".result.json").exists()


def test_invalid_plan_exits_with_error(write_plan):
    path = write_plan("seed: 1\ndraws:\n  - kind: gauss\n")

    with pytest.raises(SystemExit) as excinfo:
        run_rand.main([str(path)])
    assert excinfo.value.code == 1


def test_invalid_yaml_exits_with_error(write_plan):
    path = write_plan("seed: [1, 2\n")

    with pytest.raises(SystemExit) as excinfo:
        run_rand.load_config(str(path))
    assert excinfo.value.code == 1


def test_top_level_must_be_mapping(write_plan):
    path = write_plan("- 1\n- 2\n")

    with pytest.raises(SystemExit):
        run_rand.load_config(str(path))


def test_empty_config_loads_as_empty_mapping(write_plan):
    path = write_plan("# só comentários\n")
    assert run_rand.load_config(str(path)) == {}


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_rand.load_config(str(tmp_path / "nao_existe.yml"))


def test_usage_without_arguments(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_rand.main([])
    assert excinfo.value.code == 1
    assert "Uso:" in capsys.readouterr().out


def test_non_numeric_count_exits_with_error(write_plan, capsys):
    path = write_plan("seed: 1\ndraws:\n  - kind: f64\n    count: abc\n")

    with pytest.raises(SystemExit) as excinfo:
        run_rand.main([str(path)])
    assert excinfo.value.code == 1
    assert "'count' deve ser inteiro" in capsys.readouterr().out


def test_exhausted_replay_list_exits_with_error(write_plan, capsys):
    path = write_plan("rndnumbers: [0.5]\ndraws:\n  - kind: f64\n    count: 2\n")

    with pytest.raises(SystemExit) as excinfo:
        run_rand.main([str(path)])
    assert excinfo.value.code == 1
    assert "esgotada" in capsys.readouterr().out
    assert not path.with_suffix(".result.json").exists()
