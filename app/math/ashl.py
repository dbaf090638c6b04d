# app/math/ashl.py

from typing import List, Tuple
import math
from fractions import Fraction

# penyebut maksimum saat membulatkan float ke pecahan sederhana
MAX_DENOMINATOR = 10_000


def to_fraction(value: float) -> Fraction:
    return Fraction(value).limit_denominator(MAX_DENOMINATOR)


def format_fraction(value: float) -> str:
    """
    Pecahan tampilan untuk sebuah bagian, misal 0.75 -> "3/4", 1.0 -> "1".
    """
    f = to_fraction(value)
    if f.denominator == 1:
        return str(f.numerator)
    return f"{f.numerator}/{f.denominator}"


def compute_ashl(fractions: List[float]) -> Tuple[int, List[int]]:
    """
    Menentukan Ashlul Mas'alah dari bagian-bagian akhir.
    Langkah:
    1. Ubah setiap bagian menjadi pecahan sederhana
    2. Cari KPK (lcm) semua penyebut sebagai Ashlul Mas'alah
    3. Hitung saham tiap bagian terhadap AM tersebut
    """
    if not fractions:
        # Default: kalau tidak ada bagian, AM = 1
        return 1, []

    parts = [to_fraction(x) for x in fractions]

    ashl = 1
    for f in parts:
        ashl = math.lcm(ashl, f.denominator)

    saham = [f.numerator * (ashl // f.denominator) for f in parts]
    return ashl, saham
