"""Service layer — ServiceResult-returning adapters over the graph."""
