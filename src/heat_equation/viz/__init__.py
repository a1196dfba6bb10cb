from .plot_field import plot_plate, plot_profile

__all__ = ["plot_plate", "plot_profile"]
