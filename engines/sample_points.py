"""Choose which component counts get rendered as result levels."""

from typing import List

DENSE_LIMIT = 20
STEP_GROWTH = 1.5
GROWTH_EVERY = 3


def generate_sample_points(max_components: int) -> List[int]:
    """
    Ascending component counts in [1, max_components], ending at max_components.

    Budgets up to 20 are sampled densely. Larger budgets start with step 1
    and grow the step by 1.5x (rounded down, at least 1) after every third
    point.
    """
    if max_components < 1:
        raise ValueError(f"max_components must be >= 1, got {max_components}")

    if max_components <= DENSE_LIMIT:
        return list(range(1, max_components + 1))

    points = [1]
    current = 1
    step = 1
    while current < max_components:
        current = min(current + step, max_components)
        points.append(current)
        if len(points) % GROWTH_EVERY == 0:
            step = max(1, int(step * STEP_GROWTH))

    if points[-1] != max_components:
        points.append(max_components)
    return points
