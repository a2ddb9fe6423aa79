"""Spreadsheet reading and writing (pandas / openpyxl)."""
