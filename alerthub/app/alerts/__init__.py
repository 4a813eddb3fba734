"""
alerts — Hazard alert lifecycle and retrieval ranking.

Sub-modules:
    models      — ORM entity + Severity enum
    lifecycle   — effectively-active predicate, severity rank, ranking sort
    repository  — typed CRUD plus the active/severity query
    severity    — presentation metadata (tone, suggested action) per severity
"""
