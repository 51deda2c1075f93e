def compute_points(minutes: int, points_per_minute: int) -> int:
    """Points earned for a focus session of ``minutes`` at the given rate."""
    return minutes * points_per_minute
