"""Record frame validation utilities using pandera."""

import pandas as pd
from pandera.errors import SchemaErrors
from pandera.pandas import DataFrameSchema

from orgchart.utils.types import CheckResult


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> CheckResult:
    """Validate a DataFrame against a pandera schema."""
    try:
        schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": []}
    except SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return {"valid": False, "status": "error", "errors": errors}


def validate_unique(df: pd.DataFrame, columns: list[str]) -> CheckResult:
    """Check that specified columns form a unique key."""
    duplicates = df.duplicated(subset=columns, keep="first")
    dup_values = df.loc[duplicates, columns[0]].astype(str).tolist()

    match len(dup_values):
        case 0:
            return {"valid": True, "status": "ok", "errors": []}
        case n:
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Found {n} duplicate rows on columns {columns}: {dup_values[:5]}"],
            }


def validate_referential_integrity(
    child: pd.DataFrame,
    parent: pd.DataFrame,
    child_key: str,
    parent_key: str,
) -> CheckResult:
    """Validate that all non-null child keys exist in parent."""
    child_keys = child[child_key].dropna()
    orphans = sorted(set(child_keys.unique()) - set(parent[parent_key].unique()))

    match len(orphans):
        case 0:
            return {"valid": True, "status": "ok", "errors": []}
        case n:
            sample = orphans[:5]
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Found {n} unresolved {child_key} values. Sample: {sample}"],
            }
