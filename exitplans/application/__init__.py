"""Application layer: orchestration over domain protocols."""
