"""
Mandala Field window.
A tkinter window around a matplotlib canvas: lays out a fresh field of
mandalas whenever the canvas is resized and repaints it on a frame timer so
the noise jitter animates.
"""

import logging
import random
import tkinter as tk
from tkinter import ttk, filedialog, messagebox

import matplotlib
matplotlib.use("TkAgg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from .config import DEFAULT_CONFIG
from .export import export_frame_dxf, export_png
from .sketch import SketchState
from .surface import MatplotlibSurface

logger = logging.getLogger(__name__)

RESIZE_DEBOUNCE_MS = 120
PANEL_BG = "#F5F5F5"
FONT = "Segoe UI"

# button style -> (normal, active, pressed)
BUTTON_COLORS = {
    "Random.TButton": ("#3B6FB6", "#2E5A96", "#224478"),
    "Export.TButton": ("#2D8A4E", "#236B3C", "#1B5230"),
}


def _apply_styles(style):
    style.theme_use("clam")
    style.configure("TFrame", background=PANEL_BG)
    style.configure("TLabel", background=PANEL_BG, foreground="#333333",
                    font=(FONT, 10))
    style.configure("Header.TLabel", font=(FONT, 13, "bold"))
    style.configure("Sub.TLabel", font=(FONT, 9), foreground="#666666")
    for name, (normal, active, pressed) in BUTTON_COLORS.items():
        style.configure(name, font=(FONT, 11, "bold"), foreground="#FFFFFF",
                        background=normal)
        style.map(name, background=[("active", active), ("pressed", pressed)])


def follow_resize(widget, callback):
    """Run ``callback`` on <Configure> as well as matplotlib's own resize
    handler, which keeps the figure the size of the widget."""
    widget.bind("<Configure>", callback, add="+")


class MandalaFieldApp:
    def __init__(self, root, config=DEFAULT_CONFIG):
        self.root = root
        self.root.title("Mandala Field")
        self.root.configure(bg=PANEL_BG)
        self.root.minsize(900, 640)
        self.config = config
        self._pending_resize = None
        self._pending_frame = None
        self._canvas_size = (0, 0)
        self.state = SketchState(config, seed=random.randint(0, 2**31))
        self._build_ui()
        self._tick()

    def _build_ui(self):
        _apply_styles(ttk.Style())

        main = ttk.Frame(self.root)
        main.pack(fill=tk.BOTH, expand=True)

        left = ttk.Frame(main, width=220)
        left.pack(side=tk.LEFT, fill=tk.Y, padx=(10, 0), pady=10)
        left.pack_propagate(False)

        ttk.Label(left, text="Mandala Field",
                  style="Header.TLabel").pack(anchor="w", pady=(0, 2))
        ttk.Label(left, text="Resize the window for a new layout",
                  style="Sub.TLabel").pack(anchor="w", pady=(0, 8))

        ttk.Separator(left, orient="horizontal").pack(fill=tk.X, pady=6)

        self.count_label = ttk.Label(left, text="", style="Sub.TLabel")
        self.count_label.pack(anchor="w", pady=(0, 2))
        self.frame_label = ttk.Label(left, text="", style="Sub.TLabel")
        self.frame_label.pack(anchor="w", pady=(0, 10))

        rand_btn = ttk.Button(left, text="New Layout",
                              style="Random.TButton", command=self._randomize)
        rand_btn.pack(fill=tk.X, pady=(0, 8), ipady=6)
        png_btn = ttk.Button(left, text="Export PNG",
                             style="Export.TButton", command=self._export_png)
        png_btn.pack(fill=tk.X, ipady=6)
        dxf_btn = ttk.Button(left, text="Export DXF",
                             style="Export.TButton", command=self._export_dxf)
        dxf_btn.pack(fill=tk.X, pady=(4, 0), ipady=6)

        right = ttk.Frame(main)
        right.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=10, pady=10)
        self.fig = plt.figure(figsize=(7, 7))
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.canvas = FigureCanvasTkAgg(self.fig, master=right)
        widget = self.canvas.get_tk_widget()
        widget.pack(fill=tk.BOTH, expand=True)
        follow_resize(widget, self._on_configure)

    def _on_configure(self, event):
        size = (event.width, event.height)
        if size == self._canvas_size:
            return
        self._canvas_size = size
        if self._pending_resize is not None:
            self.root.after_cancel(self._pending_resize)
        self._pending_resize = self.root.after(RESIZE_DEBOUNCE_MS, self._apply_resize)

    def _apply_resize(self):
        self._pending_resize = None
        # matplotlib has already resized the figure to the widget
        width, height = self.canvas.get_width_height()
        self.state.on_resize(width, height)
        self.count_label.config(text=f"Patterns: {self.state.pattern_count}")

    def _surface(self):
        return MatplotlibSurface(self.ax, self.state.width, self.state.height,
                                 units_per_point=self.fig.dpi / 72.0)

    def _tick(self):
        if self.state.width > 0 and self.state.height > 0:
            self.state.on_frame(self._surface())
            self.frame_label.config(text=f"Frame: {self.state.frame_count}")
            self.canvas.draw_idle()
        self._pending_frame = self.root.after(self.config.frame_interval_ms,
                                              self._tick)

    def _randomize(self):
        self.state.reseed(random.randint(0, 2**31))
        self.count_label.config(text=f"Patterns: {self.state.pattern_count}")

    def _default_name(self):
        return (f"mandala_field_{self.state.width}x{self.state.height}"
                f"_f{self.state.frame_count}")

    def _export_png(self):
        filepath = filedialog.asksaveasfilename(
            defaultextension=".png", initialfile=self._default_name(),
            filetypes=[("PNG Files", "*.png"), ("All Files", "*.*")],
            title="Export frame as PNG")
        if not filepath:
            return
        try:
            export_png(self.state, filepath)
            messagebox.showinfo("Export Complete", f"Saved: {filepath}")
        except Exception as e:
            logger.exception("PNG export failed")
            messagebox.showerror("Export Error", str(e))

    def _export_dxf(self):
        filepath = filedialog.asksaveasfilename(
            defaultextension=".dxf", initialfile=self._default_name(),
            filetypes=[("DXF Files", "*.dxf"), ("All Files", "*.*")],
            title="Export frame as DXF")
        if not filepath:
            return
        try:
            export_frame_dxf(self.state, filepath)
            messagebox.showinfo("Export Complete",
                f"Saved: {filepath}\n\nPatterns: {self.state.pattern_count}")
        except Exception as e:
            logger.exception("DXF export failed")
            messagebox.showerror("Export Error", str(e))


def main():
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    root = tk.Tk()
    MandalaFieldApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
