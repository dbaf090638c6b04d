# app/math/fraction.py

from typing import Tuple

# toleransi pembanding terhadap 0 atau 1 (akumulasi galat floating point)
EPSILON = 1e-6


def is_zero(value: float) -> bool:
    return abs(value) <= EPSILON


def split_two_to_one(residue: float, males: int, females: int) -> Tuple[float, float]:
    """
    Bagi sisa dengan perbandingan laki-laki 2 : perempuan 1 (lidz-dzakari mitslu hazhzhil untsayayn).
      units      = 2 × laki-laki + perempuan
      unit_value = sisa / units
    Return (bagian seluruh laki-laki, bagian seluruh perempuan).
    Pemanggil wajib memastikan males + females > 0.
    """
    units = 2 * males + females
    unit_value = residue / units
    return 2 * unit_value * males, unit_value * females


def split_by_head(total: float, first: int, second: int) -> Tuple[float, float]:
    """Bagi rata per kepala lintas gender (dipakai untuk saudara seibu)."""
    heads = first + second
    return total * first / heads, total * second / heads
