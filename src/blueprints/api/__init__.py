"""API layer: response envelopes over BlueprintService.

Rules:

1. No SQLAlchemy imports - only call the service
2. Core errors are translated here and nowhere below
3. Return ApiResponse envelopes only
"""
