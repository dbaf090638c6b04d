# app/rules/asabah.py

from __future__ import annotations
import logging
from typing import List, Tuple

from schemas import Eligibility, RelativeType as R, ShareAssignment, ShareKind
from app.math.fraction import EPSILON, split_two_to_one
from app.rules.engine import RULE_KEY_PREFIX, ShareTable
from app.rules.hajb import DISTANT_AGNATES, Counts

logger = logging.getLogger(__name__)


def _add_residue(table: ShareTable, type_: R, amount: float, key: str, rationale: str) -> None:
    """
    Tambahkan sisa ke komponen residuary milik entri yang sudah ada
    (misal ayah 1/6 + sisa), atau buat entri ashobah baru.
    """
    current = table.get(type_)
    if current is None:
        table[type_] = ShareAssignment(
            relative_type=type_,
            kind=ShareKind.ASABAH,
            residuary=amount,
            rationale_key=RULE_KEY_PREFIX + key,
            rationale=rationale,
        )
        return

    rationale = current.rationale
    if current.kind == ShareKind.FARD and "Residue" not in rationale:
        rationale += " + Residue"
    table[type_] = current.model_copy(update={
        "residuary": current.residuary + amount,
        "rationale": rationale,
    })


def _two_to_one(table: ShareTable, residue: float, male: R, female: R, males: int, females: int,
                suffix: str, label: str) -> None:
    male_share, female_share = split_two_to_one(residue, males, females)
    _add_residue(table, male, male_share, f"asabah_2_1_{suffix}", f"Asabah (2:1 ratio with {label})")
    if females > 0:
        _add_residue(table, female, female_share, f"asabah_1_2_{suffix}",
                     f"Asabah (1:2 ratio with {male.value.replace('_', ' ')}s)")


def _siblings(table: ShareTable, residue: float, brother: R, sister: R, counts: Counts) -> None:
    if counts[brother] > 0:
        _two_to_one(table, residue, brother, sister, counts[brother], counts[sister],
                    "siblings", "sisters")
    else:
        # ashobah ma‘al ghair: saudari bersama anak/cucu perempuan
        _add_residue(table, sister, residue, "asabah_with_daughters", "Asabah (with daughters)")


def distribute_residue(items: ShareTable, counts: Counts, e: Eligibility, residue: float,
                       notes: List[str]) -> Tuple[ShareTable, float]:
    """
    Bagikan sisa kepada kelompok ‘ashabah terdekat. Diuji berurutan; kelompok
    pertama yang cocok mengambil SELURUH sisa dan kelompok di bawahnya tidak
    diperiksa lagi. Return (tabel baru, sisa yang belum terbagi).
    """
    if residue <= EPSILON:
        return items, 0.0

    table: ShareTable = dict(items)
    claimant = None

    if e.has_son:
        _two_to_one(table, residue, R.SON, R.DAUGHTER, counts[R.SON], counts[R.DAUGHTER],
                    "descendants", "daughters")
        claimant = R.SON
    elif e.has_grandson:
        _two_to_one(table, residue, R.GRANDSON, R.GRANDDAUGHTER, counts[R.GRANDSON], counts[R.GRANDDAUGHTER],
                    "grandchildren", "granddaughters")
        claimant = R.GRANDSON
    elif e.has_father:
        _add_residue(table, R.FATHER, residue, "asabah", "Asabah")
        claimant = R.FATHER
    elif e.has_grandfather:
        _add_residue(table, R.GRANDFATHER, residue, "asabah", "Asabah")
        claimant = R.GRANDFATHER
    elif e.has_full_brother or (counts[R.FULL_SISTER] > 0 and e.has_female_descendant):
        _siblings(table, residue, R.FULL_BROTHER, R.FULL_SISTER, counts)
        claimant = R.FULL_BROTHER if e.has_full_brother else R.FULL_SISTER
    elif e.has_paternal_brother or (counts[R.PATERNAL_SISTER] > 0 and e.has_female_descendant):
        _siblings(table, residue, R.PATERNAL_BROTHER, R.PATERNAL_SISTER, counts)
        claimant = R.PATERNAL_BROTHER if e.has_paternal_brother else R.PATERNAL_SISTER
    else:
        claimant = next((t for t in DISTANT_AGNATES if counts[t] > 0), None)
        if claimant is not None:
            _add_residue(table, claimant, residue, "asabah", "Asabah")

    if claimant is None:
        logger.debug("No asabah claimant for residue %.6f", residue)
        return table, residue

    notes.append(f"Residue {residue:.4f} goes to {claimant.value} as asabah.")
    return table, 0.0
