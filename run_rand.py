import sys
import json
from pathlib import Path

import yaml

from draw_plan import DrawPlan, PlanError
from logging_utils import configure_logging, get_logger
from micro_rand import InvalidModulusError
from streams import RandomNumbersExhausted

logger = get_logger(__name__)


def load_config(path: str) -> dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    lines = [line for line in p.read_text().splitlines() if not line.strip().startswith(('#', '!'))]

    try:
        config = yaml.safe_load("\n".join(lines))
    except yaml.YAMLError as e:
        print(f"Erro ao parsear o arquivo YAML: {e}")
        sys.exit(1)

    if config is None:
        return {}
    if not isinstance(config, dict):
        print(f"O arquivo {path} deve conter um mapeamento YAML no topo.")
        sys.exit(1)
    return config


def print_results(results: dict, seed: int = None):
    if seed is not None:
        print(f"\n--- RESULTADOS PARA SEMENTE: {seed} ---")

    print(f"Fonte: {results['source']}")
    print(f"Números aleatórios utilizados: {results['draws_used']}")
    if "final_seed" in results:
        params = results["parameters"]
        print(f"Parâmetros: a={params['multiplier']}, c={params['increment']}, m={params['modulus']}")
        print(f"Estado final: {results['final_seed']}")

    for i, step in enumerate(results["steps"], start=1):
        bounds = f" [{step['min']}, {step['max']}]" if step["min"] is not None else ""
        print(f"\nPasso {i}: {step['kind']}{bounds} ({len(step['values'])} sorteios)")
        for value in step["values"]:
            print(f"  {value}")


def run_plan(config: dict) -> dict:
    try:
        return DrawPlan(config).run()
    except (PlanError, InvalidModulusError, RandomNumbersExhausted) as e:
        print(f"Erro no plano de sorteios: {e}")
        sys.exit(1)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 1:
        print("Uso: micro-rand <arquivo_plano.yml>")
        sys.exit(1)

    configure_logging("INFO")

    config_path = argv[0]
    config = load_config(config_path)

    if 'seeds' in config:
        all_results = {}
        for seed in config['seeds']:
            run_config = config.copy()
            run_config['seed'] = seed
            logger.info("run.start", config=config_path, seed=seed)
            results = run_plan(run_config)
            print_results(results, seed)
            all_results[f"seed_{seed}"] = results

        out_path = Path(config_path).with_suffix(".results.json")
        out_path.write_text(json.dumps(all_results, indent=2))
        logger.info("run.saved", path=str(out_path), runs=len(all_results))
        print(f"\nResultados de todas as sementes salvos em: {out_path}")

    else:
        logger.info("run.start", config=config_path, seed=config.get('seed'))
        results = run_plan(config)
        print_results(results)

        out_path = Path(config_path).with_suffix(".result.json")
        out_path.write_text(json.dumps(results, indent=2))
        logger.info("run.saved", path=str(out_path))
        print(f"\nResultados salvos em: {out_path}")

if __name__ == "__main__":
    main()
