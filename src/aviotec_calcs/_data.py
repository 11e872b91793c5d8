import pandas as pd
from .constants import COL_HEIGHT, COL_FLAME, COL_SMOKE, DEFAULT_RANGE_INPUTS
from .range_estimator import HEIGHT_LOOKUP, RangeInputs, estimate


def get_height_table():
    """fetch the calibration rows as a dataframe"""
    return pd.DataFrame(
        [
            {
                COL_HEIGHT: row.height,
                COL_FLAME: row.flame_distance,
                COL_SMOKE: row.smoke_distance,
            }
            for row in HEIGHT_LOOKUP
        ]
    )


def get_range_table(
    min_flame_width=DEFAULT_RANGE_INPUTS["min_flame_width"],
    min_smoke_width=DEFAULT_RANGE_INPUTS["min_smoke_width"],
    heights=None,
    inputs=None,
):
    """
    Estimated detection distances over a range of mounting heights.

    heights: iterable of float
        If None, the calibration heights are used.
    inputs: RangeInputs
        Template for the remaining inputs; its widths are overridden by
        min_flame_width and min_smoke_width.
    """
    if heights is None:
        heights = [row.height for row in HEIGHT_LOOKUP]
    template = inputs or RangeInputs()
    template = template.with_(
        min_flame_width=min_flame_width, min_smoke_width=min_smoke_width
    )

    rows = []
    for height in heights:
        out = estimate(template.with_(mounting_height=height))
        rows.append(
            {
                COL_HEIGHT: height,
                COL_FLAME: out.flame_max_distance,
                COL_SMOKE: out.smoke_max_distance,
                "warnings": "; ".join(out.warnings),
            }
        )
    return pd.DataFrame(rows)
