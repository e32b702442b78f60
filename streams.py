from typing import Callable, Dict

import numpy as np

from micro_rand import (
    DEFAULT_INCREMENT,
    DEFAULT_MODULUS,
    DEFAULT_MULTIPLIER,
    Random,
    scale_i32,
    scale_i64,
)

CUSTOM_KEYS = ("multiplier", "increment", "modulus")


class RandomNumbersExhausted(RuntimeError):
    pass


def generator_from_config(config: Dict) -> Random:
    #parâmetros customizados só se algum deles aparecer no config
    seed = int(config.get("seed", 1))
    if not any(key in config for key in CUSTOM_KEYS):
        return Random(seed)
    return Random.custom(
        seed,
        int(config.get("multiplier", DEFAULT_MULTIPLIER)),
        int(config.get("increment", DEFAULT_INCREMENT)),
        int(config.get("modulus", DEFAULT_MODULUS)),
    )


class RandomSource:
    """Fonte de sorteios que conta quantos números foram usados.

    Com 'rndnumbers' (e sem 'seeds') no config, repete a lista dada no lugar
    do gerador; caso contrário sorteia de um Random montado pelo config.
    """

    def __init__(self, config: Dict):
        self.generator = None
        if "rndnumbers" in config and "seeds" not in config:
            self.numbers = iter(config["rndnumbers"])
            self.source = "list"
        else:
            self.generator = generator_from_config(config)
            self.source = "lcg"
        self.used = 0

    def f64(self) -> float:
        self.used += 1
        if self.source == "list":
            try:
                return float(next(self.numbers))
            except StopIteration:
                raise RandomNumbersExhausted(
                    f"Lista de números aleatórios esgotada após {self.used - 1} sorteios."
                ) from None
        return self.generator.next_f64()

    def f32(self) -> np.float32:
        return np.float32(self.f64())

    def int64(self, min_val: int, max_val: int) -> int:
        return scale_i64(self.f64(), min_val, max_val)

    def int32(self, min_val: int, max_val: int) -> int:
        return scale_i32(self.f32(), min_val, max_val)

    def uniform(self, min_val: float, max_val: float) -> Callable[[], float]:
        #distribuição uniforme em [min_val, max_val)
        def sample():
            return min_val + (max_val - min_val) * self.f64()
        return sample
