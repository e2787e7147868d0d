"""
API server package: HTTP interface to the analysis engine.

Lets a rendering layer submit prompts and receive analysis plus feedback
as JSON. Holds no state; delegates all logic to analysis_engine.
"""
