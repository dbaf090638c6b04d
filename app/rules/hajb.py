# app/rules/hajb.py

from __future__ import annotations
import logging
from typing import Dict, Iterable, List

from schemas import Eligibility, Gender, HeirInput, RelativeType as R

logger = logging.getLogger(__name__)

Counts = Dict[R, int]

SIBLINGS = (
    R.FULL_BROTHER, R.FULL_SISTER,
    R.PATERNAL_BROTHER, R.PATERNAL_SISTER,
    R.MATERNAL_BROTHER, R.MATERNAL_SISTER,
)

# urutan ‘ashabah jauh: yang lebih dekat menghalangi semua di bawahnya
DISTANT_AGNATES = (
    R.FULL_NEPHEW,
    R.PATERNAL_NEPHEW,
    R.FULL_UNCLE,
    R.PATERNAL_UNCLE,
    R.FULL_COUSIN,
    R.PATERNAL_COUSIN,
)

_LABEL = {
    R.SON: "son",
    R.GRANDSON: "grandson",
    R.FATHER: "father",
    R.GRANDFATHER: "grandfather",
    R.FULL_BROTHER: "full brother",
    R.PATERNAL_BROTHER: "paternal brother",
}


# =========================
# 1) Agregasi
# =========================
def aggregate_counts(deceased_gender: Gender, heirs: Iterable[HeirInput], notes: List[str]) -> Counts:
    """
    Gabungkan entri berulang menjadi satu jumlah per jenis kerabat.
    Ke-22 kunci selalu ada (default 0).
    Suami hanya sah bila pewaris perempuan, istri hanya bila pewaris laki-laki;
    entri yang tidak sah dinolkan di sini karena validasi di hulu tidak dijamin.
    """
    counts: Counts = {t: 0 for t in R}
    for h in heirs:
        counts[h.type] += h.count

    invalid_spouse = R.HUSBAND if deceased_gender == Gender.MALE else R.WIFE
    if counts[invalid_spouse] > 0:
        logger.warning(
            "Ignoring %s (count %d) for a %s deceased",
            invalid_spouse.value, counts[invalid_spouse], deceased_gender.value,
        )
        notes.append(f"{invalid_spouse.value} ignored: not a valid spouse for a {deceased_gender.value} deceased.")
        counts[invalid_spouse] = 0

    return counts


# =========================
# 2) Hajb (penghalang)
# =========================
def _exclude(counts: Counts, targets: Iterable[R], blocker: str, notes: List[str]) -> None:
    for t in targets:
        if counts[t] > 0:
            notes.append(f"{t.value} is excluded (mahjub) by {blocker}.")
            counts[t] = 0


def apply_hajb(counts: Counts, notes: List[str]) -> Counts:
    """
    Terapkan aturan hijab secara berurutan. Setiap aturan membaca tabel
    yang SUDAH diubah aturan sebelumnya, dan hanya pernah menolkan jumlah.
    """
    c = dict(counts)

    if c[R.SON] > 0:
        _exclude(c, (R.GRANDSON, R.GRANDDAUGHTER), "son", notes)

    if c[R.FATHER] > 0:
        _exclude(c, (R.GRANDFATHER,), "father", notes)

    if c[R.MOTHER] > 0:
        _exclude(c, (R.GRANDMOTHER,), "mother", notes)

    for blocker in (R.SON, R.GRANDSON, R.FATHER):
        if c[blocker] > 0:
            _exclude(c, SIBLINGS, _LABEL[blocker], notes)
            break

    # hanya tercapai bila ayah tidak ada (kakek sudah dinolkan oleh ayah)
    if c[R.GRANDFATHER] > 0:
        _exclude(c, SIBLINGS, "grandfather", notes)

    for blocker in (R.SON, R.GRANDSON, R.FATHER, R.GRANDFATHER, R.FULL_BROTHER, R.PATERNAL_BROTHER):
        if c[blocker] > 0:
            _exclude(c, DISTANT_AGNATES, _LABEL[blocker], notes)
            break

    for i, nearer in enumerate(DISTANT_AGNATES):
        if c[nearer] > 0:
            _exclude(c, DISTANT_AGNATES[i + 1:], nearer.value.replace("_", " "), notes)
            break

    logger.debug("Counts after hajb: %s", {k.value: v for k, v in c.items() if v})
    return c


# =========================
# 3) Snapshot kelayakan
# =========================
def build_eligibility(counts: Counts, aggregated: Counts) -> Eligibility:
    """
    Predikat dihitung SEKALI dari tabel setelah hajb lalu dibaca saja oleh
    tahap-tahap berikutnya. Pengecualian: jumlah saudara diambil dari tabel
    sebelum hajb, karena saudara yang mahjub oleh ayah tetap menurunkan ibu ke 1/6.
    """
    return Eligibility(
        has_son=counts[R.SON] > 0,
        has_daughter=counts[R.DAUGHTER] > 0,
        has_grandson=counts[R.GRANDSON] > 0,
        has_granddaughter=counts[R.GRANDDAUGHTER] > 0,
        has_father=counts[R.FATHER] > 0,
        has_mother=counts[R.MOTHER] > 0,
        has_grandfather=counts[R.GRANDFATHER] > 0,
        has_husband=counts[R.HUSBAND] > 0,
        has_wife=counts[R.WIFE] > 0,
        has_full_brother=counts[R.FULL_BROTHER] > 0,
        has_paternal_brother=counts[R.PATERNAL_BROTHER] > 0,
        daughter_count=counts[R.DAUGHTER],
        full_sister_count=counts[R.FULL_SISTER],
        sibling_count=sum(aggregated[s] for s in SIBLINGS),
    )
