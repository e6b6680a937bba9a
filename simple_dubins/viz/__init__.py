from .plotting import draw_planned_path, save_plot

__all__ = ["draw_planned_path", "save_plot"]
