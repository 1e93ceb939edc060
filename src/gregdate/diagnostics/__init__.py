"""Diagnostics package.

- sweep, holiday_table, pretty_month: always available, stdlib only
- easter_scatter (plotting) and sweep --numpy: need the diagnostics extras
"""

__all__ = ["sweep", "holiday_table", "pretty_month", "easter_scatter"]
