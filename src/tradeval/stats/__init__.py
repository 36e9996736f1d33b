"""Population statistics used to derive relative value."""

from .normalize import ScoreDistribution, normalize_scores, score_distribution, z_score

__all__ = ["ScoreDistribution", "normalize_scores", "score_distribution", "z_score"]
