from __future__ import annotations
from numbers import Number
from .core.cursor import Cursor

def plot_values(cursor: Cursor, *, show: bool = True):
    """Line plot of numeric recorded values by position, for sanity-checking a walk."""
    import matplotlib.pyplot as plt
    xs, ys = [], []
    for pos, v in enumerate(cursor.get_values()):
        if isinstance(v, Number) and not isinstance(v, bool):
            xs.append(pos)
            ys.append(v)
    fig = plt.figure()
    plt.plot(xs, ys, marker="o")
    plt.xlabel("Position")
    plt.ylabel("Recorded value")
    plt.title("controlled-loop values")
    if show:
        plt.show()
    return fig
