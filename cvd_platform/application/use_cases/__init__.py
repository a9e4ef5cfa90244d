"""Use cases of the prediction session."""
