"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: a wide flat object, a long array of similar records, and a
deeply nested record array.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_wide_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_record_array(num_records: int, num_fields: int) -> dict[str, Any]:
    """Array of records where field k appears in every (k % 4 + 1)-th record.

    Gives the merge step a realistic mix of always-present and sparse fields.
    """
    records = []
    for r in range(num_records):
        record = {
            f"field_{k}": r * k
            for k in range(num_fields)
            if r % (k % 4 + 1) == 0
        }
        records.append(record)
    return {"records": records}


def _make_nested_records(num_records: int) -> dict[str, Any]:
    """Records with three levels of nested objects and an inner array each.

    Structure per record: user -> profile -> address, plus orders[] with
    line items. Sparse keys vary with the record index.
    """
    records = []
    for r in range(num_records):
        address: dict[str, Any] = {"city": f"c{r}", "zip": r}
        if r % 3 == 0:
            address["country"] = "dk"
        orders = [
            {"id": f"{r}-{o}", "lines": [{"sku": s, "qty": s} for s in range(o + 1)]}
            for o in range(r % 4)
        ]
        records.append(
            {
                "user": {"name": f"n{r}", "profile": {"address": address}},
                "orders": orders,
            }
        )
    return {"records": records}


@pytest.fixture
def doc_wide_1000() -> dict[str, Any]:
    """Flat object with 1000 keys."""
    return generate_wide_object(1000)


@pytest.fixture
def doc_records_5000() -> dict[str, Any]:
    """5000-element record array with 40 fields of varying sparsity."""
    return _make_record_array(5000, 40)


@pytest.fixture
def doc_nested_2000() -> dict[str, Any]:
    """2000 nested records with inner arrays."""
    return _make_nested_records(2000)
