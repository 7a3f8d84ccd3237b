"""API Schemas - Pydantic models for request bodies and JSON responses.

Invariants:
    - Every inbound field is optional, mirroring the nullable columns
    - JSON field names are part of the public contract and may differ from
      column names (description_name, fullname)
"""
