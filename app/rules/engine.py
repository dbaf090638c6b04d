# app/rules/engine.py

from __future__ import annotations
import logging
from typing import Dict

from schemas import Eligibility, RelativeType as R, ShareAssignment, ShareKind
from app.math.fraction import split_by_head
from app.rules.hajb import Counts

logger = logging.getLogger(__name__)

ShareTable = Dict[R, ShareAssignment]

RULE_KEY_PREFIX = "mirath_results.rules."
NOTE_KEY_PREFIX = "mirath_results."

HALF = 1 / 2
THIRD = 1 / 3
QUARTER = 1 / 4
SIXTH = 1 / 6
EIGHTH = 1 / 8
TWO_THIRDS = 2 / 3


# =========================
# Helper buat ShareAssignment
# =========================
def _fard(type_: R, share: float, key: str, rationale: str,
          prefix: str = RULE_KEY_PREFIX) -> ShareAssignment:
    return ShareAssignment(
        relative_type=type_,
        kind=ShareKind.FARD,
        fixed=share,
        rationale_key=prefix + key,
        rationale=rationale,
    )


def _residuary(type_: R, key: str, rationale: str) -> ShareAssignment:
    """Ashobah murni: bagian 0 yang nanti diisi sisa."""
    return ShareAssignment(
        relative_type=type_,
        kind=ShareKind.ASABAH,
        rationale_key=RULE_KEY_PREFIX + key,
        rationale=rationale,
    )


def _half_or_two_thirds(type_: R, n: int, rationale: str) -> ShareAssignment:
    if n == 1:
        return _fard(type_, HALF, "daughter_1_2", f"1/2 ({rationale})")
    return _fard(type_, TWO_THIRDS, "daughter_2_3", f"2/3 shared ({rationale})")


def _ascendant(type_: R, e: Eligibility) -> ShareAssignment:
    # ayah, atau kakek bila ayah tiada: tiga keadaan yang sama
    if e.has_male_descendant:
        return _fard(type_, SIXTH, "father_1_6", "1/6 (Existence of male descendant)")
    if e.has_descendant:
        return _fard(type_, SIXTH, "father_1_6_residue", "1/6 + Residue (Existence of female descendant)")
    return _residuary(type_, "father_residue", "Residuary (No descendants)")


# =========================
# Mesin penentu furūḍ
# =========================
def determine_furudh(counts: Counts, e: Eligibility) -> ShareTable:
    """
    Menghasilkan tabel bagian tetap (furūḍ) per jenis kerabat dari tabel
    jumlah SETELAH hajb. Ayah/kakek tanpa keturunan dicatat sebagai ashobah
    dengan bagian 0. ‘Aul, ashobah, dan radd ditangani di tahap berikutnya.
    """
    items: ShareTable = {}

    # -----------------------
    # 1) Suami / Istri
    # -----------------------
    if e.has_husband:
        if e.has_descendant:
            items[R.HUSBAND] = _fard(R.HUSBAND, QUARTER, "husband_1_4", "1/4 (Existence of descendants)")
        else:
            items[R.HUSBAND] = _fard(R.HUSBAND, HALF, "husband_1_2", "1/2 (Absence of descendants)")

    if e.has_wife:
        # beberapa istri berbagi satu bagian
        if e.has_descendant:
            items[R.WIFE] = _fard(R.WIFE, EIGHTH, "wife_1_8", "1/8 (Existence of descendants)")
        else:
            items[R.WIFE] = _fard(R.WIFE, QUARTER, "wife_1_4", "1/4 (Absence of descendants)")

    # -----------------------
    # 2) Ayah / Kakek
    # -----------------------
    if e.has_father:
        items[R.FATHER] = _ascendant(R.FATHER, e)
    elif e.has_grandfather:
        items[R.GRANDFATHER] = _ascendant(R.GRANDFATHER, e)

    # -----------------------
    # 3) Ibu / Nenek
    # -----------------------
    if e.has_mother:
        umariyyatayn = e.has_father and e.has_spouse and not e.has_descendant and e.sibling_count == 0
        if umariyyatayn:
            spouse_share = HALF if e.has_husband else QUARTER
            items[R.MOTHER] = _fard(R.MOTHER, (1 - spouse_share) / 3, "umariyyatayn_note",
                                    "1/3 of Remainder (Umariyyatayn)", prefix=NOTE_KEY_PREFIX)
        elif e.has_descendant or e.sibling_count >= 2:
            items[R.MOTHER] = _fard(R.MOTHER, SIXTH, "mother_1_6",
                                    "1/6 (Existence of descendants or 2+ siblings)")
        else:
            items[R.MOTHER] = _fard(R.MOTHER, THIRD, "mother_1_3", "1/3 (No blocking heirs)")
    elif counts[R.GRANDMOTHER] > 0:
        items[R.GRANDMOTHER] = _fard(R.GRANDMOTHER, SIXTH, "grandmother_1_6", "1/6 (Mother is absent)")

    # -----------------------
    # 4) Anak perempuan & cucu perempuan (tanpa anak laki-laki)
    # -----------------------
    if not e.has_son:
        if e.has_daughter:
            items[R.DAUGHTER] = _half_or_two_thirds(R.DAUGHTER, e.daughter_count, "no son")
            # takmilah ats-tsuluthayn
            if e.daughter_count == 1 and e.has_granddaughter and not e.has_grandson:
                items[R.GRANDDAUGHTER] = _fard(R.GRANDDAUGHTER, SIXTH, "granddaughter_1_6",
                                               "1/6 (With one daughter)")
        elif e.has_granddaughter and not e.has_grandson:
            items[R.GRANDDAUGHTER] = _half_or_two_thirds(R.GRANDDAUGHTER, counts[R.GRANDDAUGHTER],
                                                         "no son, daughter or grandson")

    # -----------------------
    # 5) Saudara seibu – lintas gender, rata per kepala
    # -----------------------
    total_li_umm = counts[R.MATERNAL_BROTHER] + counts[R.MATERNAL_SISTER]
    if total_li_umm > 0:
        if total_li_umm == 1:
            pool, key, note = SIXTH, "maternal_1_6", "1/6 (Single maternal sibling)"
        else:
            pool, key, note = THIRD, "maternal_1_3", "1/3 (Multiple maternal siblings)"
        brothers, sisters = split_by_head(pool, counts[R.MATERNAL_BROTHER], counts[R.MATERNAL_SISTER])
        if counts[R.MATERNAL_BROTHER] > 0:
            items[R.MATERNAL_BROTHER] = _fard(R.MATERNAL_BROTHER, brothers, key, note)
        if counts[R.MATERNAL_SISTER] > 0:
            items[R.MATERNAL_SISTER] = _fard(R.MATERNAL_SISTER, sisters, key, note)

    # -----------------------
    # 6) Saudari kandung / seayah
    #     Gugur sebagai ashhabul furudh bila ada keturunan laki-laki, ayah,
    #     kakek, saudara laki-laki sederajat, atau anak/cucu perempuan
    #     (yang terakhir menjadikan mereka ashobah ma‘al ghair).
    # -----------------------
    no_blocking_agnate = not (e.has_male_descendant or e.has_father or e.has_grandfather or e.has_full_brother)

    if no_blocking_agnate and not e.has_female_descendant:
        if e.full_sister_count > 0:
            items[R.FULL_SISTER] = _half_or_two_thirds(R.FULL_SISTER, e.full_sister_count,
                                                       "no descendants, father or brother")

        paternal_sisters = counts[R.PATERNAL_SISTER]
        if paternal_sisters > 0 and not e.has_paternal_brother:
            if e.full_sister_count == 1:
                items[R.PATERNAL_SISTER] = _fard(R.PATERNAL_SISTER, SIXTH, "paternal_sister_1_6",
                                                 "1/6 (With one full sister)")
            elif e.full_sister_count == 0:
                items[R.PATERNAL_SISTER] = _half_or_two_thirds(R.PATERNAL_SISTER, paternal_sisters,
                                                               "no descendants, father, brother or full sister")

    logger.debug("Furudh: %s", {k.value: round(v.fixed, 6) for k, v in items.items()})
    return items


def fixed_total(items: ShareTable) -> float:
    return sum(s.fixed for s in items.values())
