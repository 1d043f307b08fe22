"""
roofcompliance HTTP service.

Run with ``python -m roofcompliance.service`` or
``uvicorn roofcompliance.service.main:app``.
"""
