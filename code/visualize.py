from pathlib import Path
from typing import List, Tuple, Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from risk_map import RiskMap


def plot_risk_path(risk_map: RiskMap, path: List[Tuple[int, int]],
                   output_file: Union[str, Path], title: str = "Lowest risk path") -> Path:
    """
    Draw the risk levels as a heat map and overlay the path on top of it.

    Args:
        risk_map (RiskMap): The grid that was searched.
        path (List[Tuple[int, int]]): (row, col) positions from start to goal.
        output_file (Union[str, Path]): Where to save the PNG.
        title (str): Figure title.

    Returns:
        Path: The saved file.
    """
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, 8))
    image = ax.imshow(risk_map.risks, cmap="YlOrRd", vmin=1, vmax=9)
    fig.colorbar(image, ax=ax, label="Risk level")

    if path:
        rows = [row for row, _ in path]
        cols = [col for _, col in path]
        ax.plot(cols, rows, color="blue", linewidth=2)
        ax.scatter([cols[0], cols[-1]], [rows[0], rows[-1]], color="black", zorder=3)

    ax.set_title(title)
    ax.set_xlabel("Column")
    ax.set_ylabel("Row")
    fig.tight_layout()
    fig.savefig(output_file)
    plt.close(fig)
    return output_file
