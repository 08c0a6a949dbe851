# ward_core/census/selectors.py
from __future__ import annotations

from typing import Any

from ward_core.census.aggregator import CensusFilter, DateRange
from ward_core.common.errors import ValidationError


def census_filter_from_params(params: Any) -> CensusFilter:
    """
    Query params supported:
      - specialty
      - doctor_id (integer)
      - start + end (ISO dates, inclusive; both or neither)
    """
    specialty = (params.get("specialty") or "").strip() or None

    doctor_raw = params.get("doctor_id")
    doctor_id = None
    if doctor_raw not in (None, ""):
        try:
            doctor_id = int(doctor_raw)
        except (TypeError, ValueError):
            raise ValidationError("doctor_id is invalid. Use an integer.", detail={"doctor_id": doctor_raw})

    start = params.get("start")
    end = params.get("end")
    date_range = None
    if start or end:
        if not (start and end):
            raise ValidationError(
                "start and end must be given together.",
                detail={"start": start, "end": end},
            )
        date_range = DateRange.parse(start, end)

    return CensusFilter(specialty=specialty, doctor_id=doctor_id, date_range=date_range)
