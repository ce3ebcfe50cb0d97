"""Bounded in-memory record of recent samples for display."""

from __future__ import annotations

import threading
from collections import deque

import pandas as pd
import plotly.graph_objects as go

from geotrack import PositionSample

from ..constants import ACCENT_BLUE, PLOTLY_LAYOUT_DEFAULTS, TRAIL_LENGTH

TRAIL_COLUMNS = ["timestamp", "success", "latitude", "longitude", "accuracy", "error"]


class SampleTrail:
    """Keeps the last *maxlen* samples. Subscribe it to a PositionCell."""

    def __init__(self, maxlen: int = TRAIL_LENGTH) -> None:
        self._samples: deque[PositionSample] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def __call__(self, sample: PositionSample) -> None:
        self.append(sample)

    def __len__(self) -> int:
        return len(self._samples)

    def append(self, sample: PositionSample) -> None:
        with self._lock:
            self._samples.append(sample)

    def to_frame(self) -> pd.DataFrame:
        with self._lock:
            rows = [s.model_dump() for s in self._samples]
        return pd.DataFrame(rows, columns=TRAIL_COLUMNS)

    def success_rate(self) -> float | None:
        with self._lock:
            if not self._samples:
                return None
            return sum(s.success for s in self._samples) / len(self._samples)


def accuracy_figure(frame: pd.DataFrame) -> go.Figure:
    """Line of reported accuracy over time, with failed attempts marked on the axis."""
    fig = go.Figure()
    ok = frame[frame["success"]] if not frame.empty else frame
    failed = frame[~frame["success"]] if not frame.empty else frame

    fig.add_trace(go.Scatter(
        x=ok["timestamp"],
        y=ok["accuracy"],
        mode="lines+markers",
        name="Accuracy",
        line=dict(color=ACCENT_BLUE, width=2),
        marker=dict(size=5),
        hovertemplate="%{x|%H:%M:%S}<br>±%{y:.0f} m<extra></extra>",
    ))
    if not failed.empty:
        fig.add_trace(go.Scatter(
            x=failed["timestamp"],
            y=[0] * len(failed),
            mode="markers",
            name="No fix",
            marker=dict(size=9, color="#DD4444", symbol="x"),
            text=failed["error"],
            hovertemplate="%{x|%H:%M:%S}<br>%{text}<extra></extra>",
        ))

    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        xaxis_title="Time",
        yaxis_title="Accuracy (m)",
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        height=300,
    )
    return fig
