"""
Excel export of the job status report.

Builds a pandas DataFrame with human readable headers and writes it to an
in-memory xlsx workbook with openpyxl.
"""

import io
from datetime import date
from typing import Optional

import pandas as pd

from shopfloor.schemas.reports import JobStatusRow

# model field -> column header, in sheet order
JOB_STATUS_COLUMNS = {
    "job_number": "Job #",
    "date_sold": "Date Sold",
    "shipping_client_name": "Client",
    "shipping_address": "Address",
    "cut_melamine": "Cut Melamine",
    "cut_finish": "Cut Finish",
    "custom_finish": "Custom Finish",
    "doors": "Doors",
    "drawers": "Drawers",
    "paint": "Paint",
    "assembly": "Assembly",
    "wrap": "Wrap",
    "completion_percentage": "Complete %",
}

STEP_COLUMNS = [
    "cut_melamine",
    "cut_finish",
    "custom_finish",
    "doors",
    "drawers",
    "paint",
    "assembly",
    "wrap",
]

SHEET_NAME = "Job Status"


def format_step_cell(value: Optional[str]) -> str:
    """
    Render a step timestamp as the completion date.

    Args:
        value: ISO timestamp of the completed step, or None

    Returns:
        str: "YYYY-MM-DD" when completed, empty string otherwise
    """
    if value is None or pd.isna(value) or not str(value).strip():
        return ""
    return str(value)[:10]


def job_status_dataframe(rows: list[JobStatusRow]) -> pd.DataFrame:
    """
    Convert job status rows to a DataFrame with report headers.

    Args:
        rows: Report rows, already filtered and sorted

    Returns:
        pd.DataFrame: One row per job, columns as in JOB_STATUS_COLUMNS
    """
    df = pd.DataFrame(
        [row.model_dump() for row in rows],
        columns=list(JOB_STATUS_COLUMNS.keys()),
    )

    for column in STEP_COLUMNS:
        df[column] = df[column].map(format_step_cell)

    df["date_sold"] = df["date_sold"].map(lambda d: d.isoformat() if isinstance(d, date) else "")

    return df.rename(columns=JOB_STATUS_COLUMNS)


def job_status_report_to_excel(rows: list[JobStatusRow]) -> bytes:
    """Write the job status report to xlsx bytes."""
    df = job_status_dataframe(rows)

    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=SHEET_NAME, index=False)

    return buffer.getvalue()
