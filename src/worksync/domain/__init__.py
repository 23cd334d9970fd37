"""Domain layer: users, shifts and the scheduling calendar."""
