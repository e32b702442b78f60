from dataclasses import dataclass, field
from typing import Dict, List, Optional

from logging_utils import get_logger
from micro_rand import InvalidModulusError
from streams import RandomSource

logger = get_logger(__name__)

F64 = "f64"
F32 = "f32"
INT64 = "int64"
INT32 = "int32"
UNIFORM = "uniform"

KINDS = (F64, F32, INT64, INT32, UNIFORM)
BOUNDED_KINDS = (INT64, INT32, UNIFORM)


class PlanError(ValueError):
    pass


def _integer(index: int, name: str, value) -> int:
    if isinstance(value, float):
        if not value.is_integer():
            raise PlanError(f"Passo {index}: '{name}' deve ser inteiro, recebido {value!r}.")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise PlanError(f"Passo {index}: '{name}' deve ser inteiro, recebido {value!r}.") from exc


def _real(index: int, name: str, value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise PlanError(f"Passo {index}: '{name}' deve ser numérico, recebido {value!r}.") from exc


@dataclass
class DrawStep:
    kind: str
    count: int = 1
    min_val: Optional[float] = None
    max_val: Optional[float] = None

    values: List = field(default_factory=list)

    @classmethod
    def from_config(cls, index: int, raw: Dict) -> "DrawStep":
        kind = str(raw.get("kind", F64)).lower()
        if kind not in KINDS:
            raise PlanError(f"Passo {index}: tipo de sorteio desconhecido '{kind}' (use {', '.join(KINDS)}).")

        count = _integer(index, "count", raw.get("count", 1))
        if count < 0:
            raise PlanError(f"Passo {index}: count não pode ser negativo ({count}).")

        min_val = raw.get("min")
        max_val = raw.get("max")
        if kind in BOUNDED_KINDS:
            if min_val is None or max_val is None:
                raise PlanError(f"Passo {index}: '{kind}' exige 'min' e 'max'.")
            #inteiros ficam inteiros, uniform aceita float
            cast = _real if kind == UNIFORM else _integer
            min_val, max_val = cast(index, "min", min_val), cast(index, "max", max_val)

        return cls(kind=kind, count=count, min_val=min_val, max_val=max_val)

    def draw_one(self, rng: RandomSource):
        if self.kind == F64:
            return rng.f64()
        if self.kind == F32:
            return float(rng.f32())
        if self.kind == INT64:
            return rng.int64(self.min_val, self.max_val)
        if self.kind == INT32:
            return rng.int32(self.min_val, self.max_val)
        return rng.uniform(self.min_val, self.max_val)()


class DrawPlan:
    def __init__(self, config: Dict):
        try:
            self.rng = RandomSource(config)
        except (TypeError, ValueError) as exc:
            raise PlanError(f"Parâmetros do gerador inválidos: {exc}") from exc
        self.seed = self.rng.generator.seed if self.rng.generator is not None else None
        self.steps: List[DrawStep] = []
        self._build_steps(config)

    def _build_steps(self, config: Dict):
        raw_steps = config.get("draws")
        if raw_steps is None:
            raw_steps = [{"kind": F64}]
        if not isinstance(raw_steps, list):
            raise PlanError("'draws' deve ser uma lista de passos.")

        for index, raw in enumerate(raw_steps, start=1):
            if not isinstance(raw, dict):
                raise PlanError(f"Passo {index}: esperado um mapeamento, recebido {raw!r}.")
            self.steps.append(DrawStep.from_config(index, raw))

    def run(self) -> Dict:
        logger.debug("draw_plan.start", source=self.rng.source, steps=len(self.steps))
        for step in self.steps:
            step.values = []
            for _ in range(step.count):
                try:
                    step.values.append(step.draw_one(self.rng))
                except InvalidModulusError as exc:
                    logger.error("draw_plan.invalid_modulus", kind=step.kind, modulus=exc.modulus)
                    raise
        logger.debug("draw_plan.done", draws_used=self.rng.used)
        return self._get_results()

    def _get_results(self) -> Dict:
        generator = self.rng.generator
        results = {
            "seed": self.seed,
            "source": self.rng.source,
            "draws_used": self.rng.used,
            "steps": [],
        }
        if generator is not None:
            results["parameters"] = {
                "multiplier": generator.multiplier,
                "increment": generator.increment,
                "modulus": generator.modulus,
            }
            results["final_seed"] = generator.seed
        for step in self.steps:
            results["steps"].append({
                "kind": step.kind,
                "min": step.min_val,
                "max": step.max_val,
                "values": step.values,
            })
        return results
