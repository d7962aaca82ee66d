import json

import pandas as pd

from spanline import TimelineConfig, TimelineRefresher, columnar_from_frame, timeline_to_dicts
from spanline.utils.logging import configure_logging

configure_logging(level="DEBUG")

# one row per profiled page load, times in ms
df = pd.DataFrame(
    {
        "col_a": [0, 2, 1, None],
        "col_b": [120, 180, 140, 160],
        "col_c": [130, 185, 150, 170],
        "col_d": [400, 520, 450, 610],
    }
)
names = {
    "col_a": "Fetch StartTime",
    "col_b": "Fetch EndTime",
    "col_c": "Render StartTime",
    "col_d": "Render EndTime",
}
data, column_info = columnar_from_frame(df, names=names)

# the host aggregates the entries column down to a single cell
data["col_e"] = [json.dumps([
    {"name": "query", "timeRange": [10, 60]},
    {"name": "query", "timeRange": [70, 95]},
    {"name": "layout", "timeRange": [130, 210]},
])]
column_info["col_e"] = {"name": "Trace"}

config = TimelineConfig(marks=list(names), entries=["col_e"], percentile=0.75)


def on_render(groups, domain) -> None:
    print("DOMAIN:", domain)
    print(json.dumps(timeline_to_dicts(groups), indent=2))


refresher = TimelineRefresher(on_render)
refresher.update(config=config, data=data, column_info=column_info)

# switching percentile recomputes and re-renders with the same data
refresher.update(config=TimelineConfig(marks=config.marks, entries=config.entries, percentile=0.95))
