"""
Conversor de Cirurgias

Extracts surgery records from the hospital system's XML report and writes
them to Excel spreadsheets, optionally one per month.
"""

__version__ = "1.0.0"
