import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path
from typing import Optional, Sequence

from practicehealth.core.enums import Category
from practicehealth.core.interconnectedness import strength_matrix
from practicehealth.core.models import BusinessHealthScore, CategoryConnection


def plot_category_scores(health_score: BusinessHealthScore, out) -> Optional[Path]:
    """
    Horizontal bar chart of category scores with the industry benchmark line.
    Returns None when nothing was scored.
    """
    if not health_score.categories:
        return None

    labels = [c.category.label for c in health_score.categories]
    scores = [c.score for c in health_score.categories]

    out = Path(out).resolve()
    out.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(7, 4))
    sns.barplot(x=scores, y=labels, ax=ax, color="#4b6cb7")

    ax.axvline(health_score.benchmarks.industry, color="#6b7280", linestyle="--", linewidth=1)
    ax.set_xlim(0, 100)
    ax.set_xlabel("Score")
    ax.set_ylabel("")
    ax.set_title(f"Category Scores (overall {health_score.overall}, {health_score.position.value})")

    for idx, value in enumerate(scores):
        ax.text(value + 1, idx, str(value), va="center", fontsize=8)

    fig.tight_layout()
    fig.savefig(str(out), dpi=150)
    plt.close(fig)

    if out.exists() and out.stat().st_size > 0:
        return out
    return None


def plot_influence_heatmap(connections: Sequence[CategoryConnection], out) -> Optional[Path]:
    if not connections:
        return None

    matrix = strength_matrix(connections)
    short = {c.value: c.label for c in Category}
    matrix = matrix.rename(index=short, columns=short)

    out = Path(out).resolve()
    out.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, 6.5))
    sns.heatmap(
        matrix,
        annot=True,
        fmt=".2f",
        cmap="Blues",
        vmin=0,
        vmax=1,
        annot_kws={"fontsize": 6},
        ax=ax,
    )
    ax.set_title("Category Influence (source → target)")
    ax.set_xlabel("Target")
    ax.set_ylabel("Source")

    fig.tight_layout()
    fig.savefig(str(out), dpi=150)
    plt.close(fig)

    if out.exists() and out.stat().st_size > 0:
        return out
    return None
