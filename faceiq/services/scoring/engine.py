"""Face scoring engine composing normalization, aggregation, tiers and planning."""
from typing import Optional

from faceiq.core.logging import get_logger
from faceiq.domain.entities.face import FaceAttributes, FaceRectangle
from faceiq.domain.interfaces.random_source import RandomSource
from faceiq.domain.value_objects.scoring import AnalysisResult, MogResult, Scores
from faceiq.domain.value_objects.weights import DEFAULT_WEIGHTS, ScoringWeights
from faceiq.services.scoring.aggregator import aggregate
from faceiq.services.scoring.comparator import compare
from faceiq.services.scoring.feedback import generate_feedback
from faceiq.services.scoring.normalizer import Landmarks, base_attractiveness, normalize
from faceiq.services.scoring.planner import plan
from faceiq.services.scoring.tiers import classify

logger = get_logger(__name__)


class FaceScoringEngine:
    """Turns detector payloads into AnalysisResults and compares them.

    The engine never raises past ``analyze``/``compare``: unexpected failures
    are logged and returned as error sentinels.

    Example:
        ```python
        engine = FaceScoringEngine(rng=SeededRandomSource(seed=7))
        result = engine.analyze(face.attributes, face.landmarks, face.face_rectangle)
        battle = engine.compare(result, other_result)
        ```
    """

    def __init__(
        self,
        rng: RandomSource,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        beauty_scale: float = 1.0,
    ) -> None:
        """Initialize the scoring engine.

        Args:
            rng: Random source for potential growth and roast selection
            weights: Weighting policy for the overall score
            beauty_scale: Multiplier applied to the raw detector beauty score
        """
        self.rng = rng
        self.weights = weights
        self.beauty_scale = beauty_scale

    def analyze(
        self,
        attributes: FaceAttributes,
        landmarks: Optional[Landmarks],
        face_rectangle: Optional[FaceRectangle],
    ) -> AnalysisResult:
        """Score a single face payload."""
        try:
            metrics = normalize(attributes, landmarks, face_rectangle, self.beauty_scale)
            beauty = base_attractiveness(attributes, self.beauty_scale)
            overall, potential = aggregate(metrics, beauty, self.rng, self.weights)

            rounded_overall = round(overall)
            scores = Scores(
                overall=rounded_overall,
                potential=max(round(potential), rounded_overall),
                masculinity=round(metrics.masculinity),
                jawline=round(metrics.jawline),
                skin_quality=round(metrics.skin_quality),
                cheekbones=round(metrics.cheekbones),
                eye_area=round(metrics.eye_area),
            )
            result = AnalysisResult(
                scores=scores,
                tier=classify(scores.overall),
                feedback=generate_feedback(attributes, scores.overall),
                improvements=plan(metrics),
                metrics=metrics,
                attributes=attributes,
            )
            logger.debug(
                "Scored face",
                overall=scores.overall,
                potential=scores.potential,
                tier=result.tier.value,
            )
            return result
        except Exception as e:
            logger.error("Face scoring failed", error=str(e), exc_info=True)
            return AnalysisResult.error()

    def compare(self, first: AnalysisResult, second: AnalysisResult) -> MogResult:
        """Compare two scored faces."""
        try:
            result = compare(first, second, self.rng)
            logger.debug(
                "Compared faces",
                winner_index=result.winner_index,
                diff_score=result.diff_score,
                title=result.winner_title,
            )
            return result
        except Exception as e:
            logger.error("Face comparison failed", error=str(e), exc_info=True)
            return MogResult.error()
