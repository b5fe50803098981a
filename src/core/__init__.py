"""
Core framework: date/time value types, integer math, the chronology contract.

This module contains the building blocks every calendar system plugs into.
They are independent of any particular calendar.
"""
