import plotly.graph_objs as go
import numpy as np
import matplotlib.pyplot as plt


def _to_scene(points):
    """room (x, y-up, z) -> plotly scene (x, y, z-up)"""
    pts = np.atleast_2d(np.asarray(points, dtype=float))
    return pts[:, 0], pts[:, 2], pts[:, 1]


class CoveragePlotter:
    def __init__(self, room):
        self.room = room

    def plotly(self, fig=None, title=""):
        """
        3D view of the room outline, the composed footprint and the camera.
        Traces are tagged through customdata and updated in place on redraw.
        """
        if fig is None:
            fig = go.Figure()

        fig = self._plot_room(fig)
        coverage = self.room.coverage(warn=False)
        fig = self._plot_coverage(coverage, fig)
        if self.room.placement is not None:
            fig = self._plot_camera(self.room.placement, fig)
        else:
            self._remove_traces_by_ids(fig, ["camera", "camera_normal"])

        bounds = self.room.bounds
        fig.update_layout(
            title=title,
            scene=dict(
                xaxis=dict(range=[0, bounds.length], title="x"),
                yaxis=dict(range=[0, bounds.width], title="z"),
                zaxis=dict(range=[0, bounds.height], title="y"),
                aspectratio=dict(
                    x=bounds.length / bounds.height,
                    y=bounds.width / bounds.height,
                    z=1,
                ),
            ),
            height=750,
            autosize=False,
            margin=go.layout.Margin(l=0, r=0, b=0, t=0, pad=0),
            legend=dict(x=0, y=1, yanchor="top", xanchor="left"),
        )
        fig.layout.annotations = ()
        fig.add_annotation(
            text=f"Coverage area: {coverage.area:.2f} m²",
            xref="paper",
            yref="paper",
            x=0,
            y=0,
            xanchor="left",
            yanchor="bottom",
            showarrow=False,
            font=dict(size=12, color="gray"),
            bgcolor="rgba(255,255,255,0.5)",
            borderpad=4,
        )
        fig.update_scenes(camera_projection_type="orthographic")
        return fig

    def plot_side_view(self, fig=None, ax=None, title=""):
        """Side profile: mounting height against maximum flame distance."""
        fig, ax = self._get_fig_ax(fig, ax)
        profile = self.room.side_profile()
        xs, ys = zip(*profile.triangle)

        ax.fill(xs, ys, color="#3da3ff", alpha=0.2)
        ax.plot(list(xs) + [xs[0]], list(ys) + [ys[0]], color="#3da3ff", lw=2)
        ax.scatter([0], [profile.mounting_height], color="#3da3ff", zorder=3)
        ax.axhline(0, color="#2f3842", lw=2)
        ax.annotate(
            f"{profile.mounting_height:.1f}m",
            xy=(0, profile.mounting_height / 2),
            xytext=(-8, 0),
            textcoords="offset points",
            ha="right",
            va="center",
            color="#8f9ba8",
        )
        ax.annotate(
            f"{profile.reach:.1f}m",
            xy=(profile.reach / 2, 0),
            xytext=(0, -16),
            textcoords="offset points",
            ha="center",
            color="#8f9ba8",
        )
        ax.set_xlim(-0.1 * max(profile.reach, 1), max(profile.reach, 1) * 1.05)
        max_height = max(profile.mounting_height, 1)
        ax.set_ylim(-0.1 * max_height, max_height * 1.1)
        ax.set_xlabel("Distance [m]")
        ax.set_ylabel("Height [m]")
        ax.set_title(title)
        ax.set_aspect("equal", adjustable="box")
        return fig, ax

    def _get_fig_ax(self, fig, ax):
        if fig is None:
            if ax is None:
                fig, ax = plt.subplots()
            else:
                fig = plt.gcf()
        else:
            if ax is None:
                ax = fig.axes[0] if fig.axes else fig.add_subplot()
        return fig, ax

    def _add_or_update(self, fig, trace):
        trace_id = trace.customdata[0]
        for existing in fig.data:
            if existing.customdata is not None and existing.customdata[0] == trace_id:
                updates = trace.to_plotly_json()
                updates.pop("type", None)
                existing.update(updates)
                return fig
        fig.add_trace(trace)
        return fig

    def _remove_traces_by_ids(self, fig, ids):
        traces = list(fig.data)
        for i in reversed(range(len(traces))):
            trace = traces[i]
            if trace.customdata is not None and trace.customdata[0] in ids:
                del traces[i]
        fig.data = traces

    def _plot_room(self, fig):
        """interior outline as a wireframe box"""
        x1, x2 = self.room.bounds.interior_limits["x"]
        z1, z2 = self.room.bounds.interior_limits["z"]
        h = self.room.bounds.height
        lines = []
        gap = (None, None, None)
        for y in (0, h):
            lines += [(x1, y, z1), (x2, y, z1), (x2, y, z2), (x1, y, z2), (x1, y, z1), gap]
        for x, z in ((x1, z1), (x2, z1), (x2, z2), (x1, z2)):
            lines += [(x, 0, z), (x, h, z), gap]
        xs = [p[0] for p in lines]
        ys = [p[2] for p in lines]
        zs = [p[1] for p in lines]
        trace = go.Scatter3d(
            x=xs,
            y=ys,
            z=zs,
            mode="lines",
            line=dict(color="#2f3842", width=2),
            name="Room",
            customdata=["room"],
            showlegend=False,
        )
        return self._add_or_update(fig, trace)

    def _plot_coverage(self, coverage, fig):
        x, y, z = _to_scene(coverage.corners)
        trace = go.Mesh3d(
            x=x,
            y=y,
            z=z,
            i=[0, 0],
            j=[1, 2],
            k=[2, 3],
            color="#3da3ff",
            opacity=0.3,
            name="Footprint",
            customdata=["footprint"],
            showlegend=True,
        )
        return self._add_or_update(fig, trace)

    def _plot_camera(self, placement, fig, length=0.5):
        position = np.asarray(placement.position)
        tip = position + length * np.asarray(placement.normal)
        x, y, z = _to_scene(position)
        marker = go.Scatter3d(
            x=x,
            y=y,
            z=z,
            mode="markers",
            marker=dict(size=6, color="#3da3ff"),
            name="Camera",
            customdata=["camera"],
            showlegend=True,
        )
        x, y, z = _to_scene([position, tip])
        normal = go.Scatter3d(
            x=x,
            y=y,
            z=z,
            mode="lines",
            line=dict(color="black", width=2, dash="dash"),
            name="Camera",
            customdata=["camera_normal"],
            showlegend=False,
        )
        fig = self._add_or_update(fig, marker)
        return self._add_or_update(fig, normal)
