"""Application layer: orchestration over domain logic and ports."""
