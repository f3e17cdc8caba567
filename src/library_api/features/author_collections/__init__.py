"""Author collections feature: bulk author creation and retrieval by id list."""
