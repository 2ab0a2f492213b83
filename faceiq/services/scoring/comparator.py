"""
Face comparison ("mog battle") between two analyzed faces.

The winner, margin and deciding feature are deterministic; only the roast
line is drawn from the injected random source.
"""
from typing import List, Tuple

from faceiq.domain.interfaces.random_source import RandomSource
from faceiq.domain.value_objects.scoring import AnalysisResult, MogResult, Scores

# (minimum margin, title), checked in order
TITLE_BUCKETS: List[Tuple[int, str]] = [
    (20, "TOTAL DOMINATION"),
    (10, "CLEAR MOG"),
    (5, "SLIGHT EDGE"),
]
CLOSE_CALL_TITLE = "CLOSE CALL"

# (Scores attribute, display label)
REASON_METRICS: List[Tuple[str, str]] = [
    ("jawline", "jawline"),
    ("skin_quality", "skin quality"),
    ("eye_area", "eye area"),
    ("cheekbones", "cheekbones"),
    ("masculinity", "masculinity"),
]
FALLBACK_REASON = "Better overall facial harmony"

GENERIC_ROASTS = [
    "It's over. Time to start mewing.",
    "Even your mirror avoids eye contact.",
    "Certified stat-check failure.",
]
ROAST_CHOICES = 3


def winner_title(diff_score: int) -> str:
    for minimum, title in TITLE_BUCKETS:
        if diff_score >= minimum:
            return title
    return CLOSE_CALL_TITLE


def decisive_reason(winner: Scores, loser: Scores) -> str:
    """Name the metric where the winner leads by the widest margin."""
    best_label, best_diff = None, 0
    best_pair = (0, 0)
    for field, label in REASON_METRICS:
        w, l = getattr(winner, field), getattr(loser, field)
        if w - l > best_diff:
            best_label, best_diff, best_pair = label, w - l, (w, l)
    if best_label is None:
        return FALLBACK_REASON
    return f"Superior {best_label} ({best_pair[0]} vs {best_pair[1]})"


def roast_candidates(loser: AnalysisResult) -> List[str]:
    """Roasts gated on the loser's weak points, followed by the generic pool."""
    roasts: List[str] = []
    attributes = loser.attributes
    if attributes is not None:
        skin = attributes.skinstatus
        if skin.acne > 30:
            roasts.append("That skin needs more help than a dermatologist can provide.")
        if skin.dark_circle > 40:
            roasts.append("Those dark circles look like you haven't slept since 2019.")
        if skin.health < 50:
            roasts.append("Skin looking like it gave up before the battle started.")
        if attributes.beauty_score < 50:
            roasts.append("The scanner had to double-check those numbers. Twice.")
        if attributes.beauty_score < 40:
            roasts.append("The algorithm is requesting hazard pay.")
    else:
        scores = loser.scores
        if scores.skin_quality < 50:
            roasts.append("Skin looking like it gave up before the battle started.")
        if scores.eye_area < 60:
            roasts.append("Those eyes are running on two hours of sleep and regret.")
        if scores.overall < 50:
            roasts.append("The scanner had to double-check those numbers. Twice.")

    roasts.extend(GENERIC_ROASTS)
    return roasts


def pick_roast(candidates: List[str], rng: RandomSource) -> str:
    pool = candidates[:ROAST_CHOICES] or GENERIC_ROASTS
    draw = rng.next()
    if not 0.0 <= draw < 1.0:
        draw = 0.0
    return pool[min(int(draw * len(pool)), len(pool) - 1)]


def compare(first: AnalysisResult, second: AnalysisResult, rng: RandomSource) -> MogResult:
    """Compare two analyses; an error on either side yields the error sentinel.

    Args:
        first: Analysis of the first (left) face
        second: Analysis of the second (right) face
        rng: Source used to pick the roast line

    Returns:
        MogResult naming the winner, the margin and the deciding feature
    """
    if first.is_error or second.is_error:
        return MogResult.error()

    winner_index = 0 if first.scores.overall >= second.scores.overall else 1
    winner, loser = (first, second) if winner_index == 0 else (second, first)
    diff_score = round(abs(first.scores.overall - second.scores.overall))

    return MogResult(
        winner_index=winner_index,
        winner_title=winner_title(diff_score),
        diff_score=diff_score,
        reason=decisive_reason(winner.scores, loser.scores),
        roast=pick_roast(roast_candidates(loser), rng),
    )
