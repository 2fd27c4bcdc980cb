"""
Module: viewer
Description: matplotlib front end for a Session.
             Header (tabs + description), canvas (points, upper chain, lower chain)
             and footer (help line, point-amount box, progress). Every key press is
             forwarded to Session.handle_key and the figure is redrawn.
"""
import logging
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from hull_stepper.config import ViewerConfig
from hull_stepper.errors import HullError
from hull_stepper.logging_config import setup_logging
from hull_stepper.session import InputMode, Session

logger = logging.getLogger(__name__)

UPPER_COLOR = "tab:blue"
LOWER_COLOR = "tab:green"
POINT_COLOR = "tab:red"

# Default matplotlib bindings that collide with the viewer's keys.
_CONFLICTING_KEYMAPS = (
    "keymap.quit", "keymap.back", "keymap.forward", "keymap.home",
    "keymap.save", "keymap.pan", "keymap.zoom", "keymap.fullscreen",
)

_HELP = {
    InputMode.NORMAL: "Press q to exit, i to edit the point amount. "
                      "Left/Right step, Home/End jump, Space play/pause.",
    InputMode.EDITING: "Press Esc to stop editing, Enter to start the algorithm.",
}


def _xy(points) -> np.ndarray:
    return np.asarray(points, dtype=float).reshape(-1, 2)


class HullViewer:
    def __init__(self, session: Session, fig: Optional[plt.Figure] = None):
        self.session = session
        self.fig = fig if fig is not None else plt.figure(figsize=(10, 7))
        config = session.config

        self.header_text = self.fig.text(0.02, 0.97, "", ha="left", va="top", fontsize=11, weight="bold")
        self.description_text = self.fig.text(0.02, 0.92, "", ha="left", va="top", fontsize=9, wrap=True)

        self.ax = self.fig.add_axes([0.06, 0.2, 0.9, 0.62])
        self.ax.set_title("Algorithm")
        self.ax.set_xlim(*config.x_bounds)
        self.ax.set_ylim(*config.y_bounds)

        self.upper_line, = self.ax.plot([], [], "-", color=UPPER_COLOR, lw=1.5, label="Upper chain")
        self.lower_line, = self.ax.plot([], [], "-", color=LOWER_COLOR, lw=1.5, label="Lower chain")
        # Drawn last so the chains never cover the points.
        self.point_scatter = self.ax.scatter([], [], s=12, c=POINT_COLOR, zorder=3, label="Points")
        self.ax.legend(fontsize="small", loc="upper right")

        self.help_text = self.fig.text(0.02, 0.11, "", ha="left", va="top", fontsize=9)
        self.input_text = self.fig.text(0.02, 0.06, "", ha="left", va="top", fontsize=10, family="monospace")
        self.progress_text = self.fig.text(0.55, 0.06, "", ha="left", va="top", fontsize=10, family="monospace")

        self.timer = self.fig.canvas.new_timer(interval=config.tick_rate_ms)
        self.timer.add_callback(self._on_tick)
        self.fig.canvas.mpl_connect("key_press_event", self._on_key)

        self.redraw()

    # ---------- Events ----------
    def _on_key(self, event) -> None:
        try:
            self.session.handle_key(event.key)
        except HullError as exc:
            logger.warning("%s", exc)
            self.session.status = str(exc)

        if self.session.should_quit:
            self.timer.stop()
            plt.close(self.fig)
            return

        if self.session.playing:
            self.timer.start()
        else:
            self.timer.stop()
        self.redraw()

    def _on_tick(self) -> None:
        self.session.tick()
        if not self.session.playing:
            self.timer.stop()
        self.redraw()

    # ---------- Drawing ----------
    def redraw(self) -> None:
        session = self.session
        tab = session.current_tab
        navigator = session.navigator
        frame = navigator.current_chains()

        self.header_text.set_text(f"{session.config.title}   |   " + "   ".join(
            f"[{t.title}]" if i == session.tab_index else t.title for i, t in enumerate(session.tabs)))
        self.description_text.set_text(tab.algorithm.description)

        self.point_scatter.set_offsets(_xy(frame.points))
        upper = _xy(frame.upper)
        self.upper_line.set_data(upper[:, 0], upper[:, 1])
        # The upper prefix of a lower-phase frame is already drawn by the upper line.
        lower = _xy(frame.lower[navigator.prefix_length:])
        self.lower_line.set_data(lower[:, 0], lower[:, 1])

        phase = navigator.phase
        if phase is not None:
            self.ax.set_title(f"Algorithm - {phase.value} chain, "
                              f"step {navigator.cursor + 1}/{navigator.total_steps}")
        else:
            self.ax.set_title("Algorithm")

        self.help_text.set_text(_HELP[session.input_mode])
        cursor_mark = "_" if session.input_mode is InputMode.EDITING else ""
        self.input_text.set_text(f"Point amount: {session.input}{cursor_mark}"
                                 + (f"   {session.status}" if session.status else ""))
        self.progress_text.set_text(f"Progress: {navigator.progress() * 100:.2f}%")

        self.fig.canvas.draw_idle()


def run_viewer(config: Optional[ViewerConfig] = None) -> HullViewer:
    """Open the interactive window and block until it is closed."""
    config = config or ViewerConfig()
    setup_logging(config.log_level, config.log_file)

    session = Session(config)
    if config.initial_points is not None:
        session.input = str(config.initial_points)
        session.commit()

    for name in _CONFLICTING_KEYMAPS:
        plt.rcParams[name] = []

    viewer = HullViewer(session)
    plt.show()
    return viewer
