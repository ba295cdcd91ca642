"""Utility modules for ConsultLens."""

from .data_prep import export_to_json, prepare_export, export_to_csv

__all__ = [
    "export_to_json",
    "prepare_export",
    "export_to_csv",
]
