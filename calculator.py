# calculator.py

from __future__ import annotations
import logging
from typing import List, Tuple

import schemas
from schemas import DistributionStatus, RelativeType as R
from app.math.ashl import compute_ashl, format_fraction
from app.math.fraction import EPSILON, is_zero
from app.rules.asabah import distribute_residue
from app.rules.engine import ShareTable, determine_furudh, fixed_total
from app.rules.hajb import Counts, aggregate_counts, apply_hajb, build_eligibility

logger = logging.getLogger(__name__)

SPOUSES = (R.HUSBAND, R.WIFE)


# --------------------------
# AWL (bagian tetap melebihi harta)
# --------------------------
def _apply_awl(items: ShareTable, total_fixed: float, notes: List[str]) -> ShareTable:
    """
    Semua bagian tetap dikecilkan secara proporsional (× 1/total) sehingga
    jumlahnya tepat 1.
    """
    scale = 1 / total_fixed
    notes.append(f"Awl: fixed shares sum to {total_fixed:.4f} > 1, every share scaled by {scale:.4f}")
    logger.info("Awl applied, fixed total %.6f", total_fixed)
    return {
        t: s.model_copy(update={"fixed": s.fixed * scale})
        for t, s in items.items()
    }


# --------------------------
# RADD (sisa tanpa ‘ashabah)
# --------------------------
def _apply_radd(items: ShareTable, residue: float, notes: List[str]) -> Tuple[ShareTable, float]:
    """
    Kembalikan sisa kepada dzawil furudh selain suami/istri, proporsional
    dengan bagian awal mereka:
        baru = lama / jumlah_lama × (1 − bagian pasangan)
    Bila tidak ada penerima radd, sisa dikembalikan apa adanya (tidak dialokasikan).
    """
    targets = [t for t, s in items.items() if t not in SPOUSES and s.fraction > 0]
    if not targets:
        notes.append(f"No heir eligible for radd: {residue:.4f} of the estate remains unallocated.")
        logger.info("Residue %.6f left unallocated", residue)
        return items, residue

    spouse_total = sum(s.fraction for t, s in items.items() if t in SPOUSES)
    radd_total = sum(items[t].fraction for t in targets)
    available = 1 - spouse_total

    table: ShareTable = dict(items)
    for t in targets:
        s = table[t]
        table[t] = s.model_copy(update={
            "fixed": s.fixed / radd_total * available,
            "residuary": s.residuary / radd_total * available,
            "rationale": s.rationale + " (Increased by Radd)",
            "radd_applied": True,
        })

    notes.append(
        f"Radd: residue {residue:.4f} returned to {', '.join(t.value for t in targets)} "
        f"in proportion to their shares (spouse keeps {spouse_total:.4f})."
    )
    logger.info("Radd applied to %d heir categories", len(targets))
    return table, 0.0


# --------------------------
# Format hasil akhir
# --------------------------
def _format_shares(items: ShareTable, counts: Counts, total_wealth: float) -> Tuple[List[schemas.ShareResult], int]:
    present = [s for s in items.values() if s.fraction > 0]
    ashl, saham = compute_ashl([s.fraction for s in present])

    shares: List[schemas.ShareResult] = []
    for s, sahm in zip(present, saham):
        count = counts[s.relative_type]
        amount = s.fraction * total_wealth
        shares.append(
            schemas.ShareResult(
                relative_type=s.relative_type,
                fraction=s.fraction,
                share_fraction=format_fraction(s.fraction),
                saham=sahm,
                monetary_amount=amount,
                amount_each=amount / count,
                percentage=s.fraction,
                count=count,
                rationale=s.rationale,
                rationale_key=s.rationale_key,
                radd_applied=s.radd_applied,
            )
        )
    return shares, ashl


# ============================================================
#                    FUNGSI UTAMA
# ============================================================
def calculate_inheritance(calculation_input: schemas.CalculationInput) -> schemas.CalculationResult:
    total_wealth = calculation_input.total_wealth
    notes: List[str] = []

    # 1) Agregasi & hajb
    aggregated = aggregate_counts(calculation_input.deceased_gender, calculation_input.heirs, notes)
    counts = apply_hajb(aggregated, notes)
    eligibility = build_eligibility(counts, aggregated)

    # 2) Furudh
    items = determine_furudh(counts, eligibility)
    total_fixed = fixed_total(items)
    notes.append(f"Fixed shares total {total_fixed:.4f}")

    if total_fixed > 1 + EPSILON:
        # 'Aul: ashobah & radd dilewati
        status = DistributionStatus.AWL
        items = _apply_awl(items, total_fixed, notes)
    else:
        # 3) Ashobah
        residue = max(0.0, 1 - total_fixed)
        items, residue = distribute_residue(items, counts, eligibility, residue, notes)

        # 4) Radd
        if not is_zero(residue):
            items, residue = _apply_radd(items, residue, notes)
            status = DistributionStatus.UNALLOCATED if residue else DistributionStatus.RADD
        else:
            status = DistributionStatus.ADIL

    # 5) Hasil
    shares, ashl = _format_shares(items, aggregated, total_wealth)
    total_fraction = sum(s.fraction for s in shares)
    total_distributed = sum(s.monetary_amount for s in shares)

    unallocated_fraction = max(0.0, 1 - total_fraction)
    if is_zero(unallocated_fraction):
        unallocated_fraction = 0.0
    unallocated_amount = max(0.0, total_wealth - total_distributed) if unallocated_fraction else 0.0

    for s in shares:
        if s.count > 1:
            notes.append(
                f"{s.relative_type.value} ({s.count}) = {s.share_fraction} × {total_wealth:,.2f} "
                f"= {s.monetary_amount:,.2f} → each {s.amount_each:,.2f}"
            )
        else:
            notes.append(f"{s.relative_type.value} = {s.share_fraction} × {total_wealth:,.2f} = {s.monetary_amount:,.2f}")

    logger.debug("Distribution finished: status=%s, shares=%d", status.value, len(shares))
    return schemas.CalculationResult(
        total_wealth=total_wealth,
        status=status,
        ashlul_masalah=ashl,
        total_fraction=total_fraction,
        total_distributed=total_distributed,
        unallocated_fraction=unallocated_fraction,
        unallocated_amount=unallocated_amount,
        notes=notes,
        shares=shares,
    )
