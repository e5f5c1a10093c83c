"""Application services returning ``ServiceResult`` objects."""
