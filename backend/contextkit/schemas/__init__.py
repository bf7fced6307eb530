"""Pydantic Schemas — response models for the validation API.

Invariants:
    - Schemas describe API contracts only; validation rules live in core/

Design Decisions:
    - Request bodies stay untyped mappings so every field failure is reported
      by the core validators in one aggregated error, not by Pydantic
"""
