"""
launch_ops/pipelines/finance/vendor_rules.py

Vendor tagging rules.
"""

from __future__ import annotations

from typing import Iterable

from launch_ops.domain.finance import VendorRule
from launch_ops.pipelines.normalizers import cell_text
from launch_ops.pipelines.workbook import RawRow

VENDOR_RULES_SHEET = "Rules_Vendors"


def build_vendor_rules(rows: Iterable[RawRow]) -> list[VendorRule]:
    rules: list[VendorRule] = []
    for row in rows:
        vendor_contains = cell_text(row.get("Vendor_Contains"))
        if not vendor_contains:
            continue
        rules.append(
            VendorRule(
                vendor_contains=vendor_contains,
                assign_category=cell_text(row.get("Assign_Category")),
                assign_subcategory=cell_text(row.get("Assign_Subcategory")),
                tag=cell_text(row.get("Tag")),
            )
        )
    return rules
