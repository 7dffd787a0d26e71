# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Phone directory service package."""
