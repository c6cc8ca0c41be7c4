"""Exporter module for converting layouts to diagram formats."""

from sclattice.exporter.flow import export_to_flow as export_to_flow
from sclattice.exporter.flow import save_to_flow_json as save_to_flow_json

__all__ = [
    "export_to_flow",
    "save_to_flow_json",
]
