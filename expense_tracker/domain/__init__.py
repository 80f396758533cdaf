"""Domain layer: the observable expense tracker model and its parts."""
