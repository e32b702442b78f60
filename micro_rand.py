import math

import numpy as np

DEFAULT_MULTIPLIER = 16_807
DEFAULT_INCREMENT = 0
DEFAULT_MODULUS = 2_147_483_647  # 2^31 - 1

I32_MIN, I32_MAX = -(2**31), 2**31 - 1
I64_MIN, I64_MAX = -(2**63), 2**63 - 1


class InvalidModulusError(ZeroDivisionError):
    """Lançada por qualquer sorteio quando o módulo do gerador é zero."""

    def __init__(self, modulus: int, initial_modulus: int):
        super().__init__(
            f"o módulo deve ser diferente de zero (modulus={modulus}, initial_modulus={initial_modulus})"
        )
        self.modulus = modulus
        self.initial_modulus = initial_modulus


def _trunc_mod(value: int, modulus: int) -> int:
    #resto com o sinal do dividendo
    rem = abs(value) % abs(modulus)
    return -rem if value < 0 else rem


def _saturate(value: float, lo: int, hi: int) -> int:
    #trunca em direção a zero, satura nos limites, NaN vira 0
    if math.isnan(value):
        return 0
    if value >= hi:
        return hi
    if value <= lo:
        return lo
    return int(value)


def scale_i64(x: float, min_val: int, max_val: int) -> int:
    return _saturate(x * float(max_val - min_val + 1) + float(min_val), I64_MIN, I64_MAX)


def scale_i32(x: float, min_val: int, max_val: int) -> int:
    #aritmética toda em float32
    with np.errstate(over="ignore", invalid="ignore"):
        value = np.float32(x) * np.float32(max_val - min_val + 1) + np.float32(min_val)
    return _saturate(float(value), I32_MIN, I32_MAX)


class Random:
    """Gerador congruencial linear: seed = (a * seed + c) mod m.

    Random(seed) usa a = 16807, c = 0, m = 2^31 - 1; Random.custom aceita
    outros parâmetros. Nada é validado na construção: módulo zero só falha
    no primeiro sorteio.
    """

    def __init__(self, seed: int = 1, multiplier: int = DEFAULT_MULTIPLIER,
                 increment: int = DEFAULT_INCREMENT, modulus: int = DEFAULT_MODULUS):
        self.seed = seed
        self.multiplier = multiplier
        self.increment = increment
        self.modulus = modulus
        self._initial_modulus = modulus

    @classmethod
    def custom(cls, seed: int, multiplier: int, increment: int, modulus: int) -> "Random":
        return cls(seed, multiplier, increment, modulus)

    @property
    def initial_modulus(self) -> int:
        return self._initial_modulus

    def __repr__(self) -> str:
        return (f"Random(seed={self.seed}, multiplier={self.multiplier}, "
                f"increment={self.increment}, modulus={self.modulus})")

    def next_f64(self) -> float:
        #intervalo [0,1) com parâmetros nominais
        try:
            self.seed = _trunc_mod(self.multiplier * self.seed + self.increment, self.modulus)
            return float(self.seed) / float(self._initial_modulus)
        except ZeroDivisionError as exc:
            raise InvalidModulusError(self.modulus, self._initial_modulus) from exc

    def next_f32(self) -> np.float32:
        return np.float32(self.next_f64())

    def next_int_i64(self, min_val: int, max_val: int) -> int:
        """Próximo inteiro em [min_val, max_val], a partir de next_f64."""
        return scale_i64(self.next_f64(), min_val, max_val)

    def next_int_i32(self, min_val: int, max_val: int) -> int:
        """Próximo inteiro em [min_val, max_val], a partir de next_f32.

        Pode divergir de next_int_i64 para o mesmo estado, já que a conta
        intermediária é feita em precisão simples.
        """
        return scale_i32(self.next_f32(), min_val, max_val)
