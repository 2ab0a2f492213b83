"""
Attribute normalization: detector payload -> FaceMetrics.

Each sub-score looks up only the landmarks it needs. When they are missing or
degenerate (zero-width box, coincident points) the sub-score falls back to a
fixed neutral default instead of failing, so any attribute payload, even one
without landmarks, produces a complete set of metrics.

All geometry works on Face++ style pixel coordinates. Ratios are compared
against ideal constants and mapped to 0-100 with ``100 * (1 - |r - ideal| / ideal)``.
"""
import math
from typing import Mapping, Optional, Union

import numpy as np

from faceiq.domain.entities.face import (
    METRIC_MAX,
    METRIC_MIN,
    FaceAttributes,
    FaceMetrics,
    FaceRectangle,
    Gender,
    LandmarkPoint,
)

Landmarks = Mapping[str, Union[LandmarkPoint, Mapping[str, float]]]

# Neutral defaults used when the required geometry is unavailable
NEUTRAL_BEAUTY = 50.0
NEUTRAL_SKIN = 50.0
NEUTRAL_SYMMETRY = 75.0
NEUTRAL_PROPORTIONS = 72.0
NEUTRAL_JAWLINE = 70.0
NEUTRAL_CHEEKBONES = 72.0
NEUTRAL_EYE_AREA = 72.0
NEUTRAL_MASCULINITY = 50.0

# Ideal ratios
IDEAL_LOWER_THIRD = 0.33      # nose tip to chin / face height
IDEAL_EYE_SEPARATION = 0.30   # eye center distance / face width
IDEAL_FACE_RATIO = 0.80       # face width / face height
IDEAL_CHEEK_WIDTH = 0.77      # cheekbone width / face width
IDEAL_EYE_ASPECT = 2.75       # eye width / eye height

EYE_SYMMETRY_WEIGHT = 0.6
MOUTH_SYMMETRY_WEIGHT = 0.4
JAW_RATIO_WEIGHT = 0.6
JAW_SYMMETRY_WEIGHT = 0.4

LANDMARK_ALIASES = {
    "contour_chin": ("contour_chin", "chin"),
}


def _bounded(value: Optional[float], default: float) -> float:
    """Clamp to [0, 100], substituting ``default`` for missing or non-finite values."""
    if value is None or not math.isfinite(value):
        return default
    return float(min(METRIC_MAX, max(METRIC_MIN, value)))


def _point(landmarks: Landmarks, name: str) -> Optional[np.ndarray]:
    for key in LANDMARK_ALIASES.get(name, (name,)):
        point = landmarks.get(key)
        if point is None:
            continue
        if isinstance(point, LandmarkPoint):
            return np.array([point.x, point.y], dtype=float)
        try:
            return np.array([point["x"], point["y"]], dtype=float)
        except (KeyError, TypeError, ValueError):
            return None
    return None


def _balance(a: float, b: float) -> Optional[float]:
    """Ratio of the smaller to the larger distance; 1.0 means perfectly balanced."""
    if not (math.isfinite(a) and math.isfinite(b)):
        return None
    largest = max(a, b)
    if largest <= 0:
        return None
    return min(a, b) / largest



def _closeness(actual: float, ideal: float) -> float:
    return 1.0 - abs(actual - ideal) / ideal


def _box(face_rectangle: Optional[FaceRectangle]) -> Optional[tuple]:
    if face_rectangle is None:
        return None
    width, height = face_rectangle.width, face_rectangle.height
    if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
        return None
    return width, height


def base_attractiveness(attributes: FaceAttributes, beauty_scale: float = 1.0) -> float:
    """Gender-matched detector beauty score, scaled and clamped to [0, 100]."""
    return _bounded(attributes.beauty_score * beauty_scale, NEUTRAL_BEAUTY)


def skin_score(attributes: FaceAttributes) -> float:
    skin = attributes.skinstatus
    raw = skin.health - 0.3 * skin.stain - 0.4 * skin.acne - 0.3 * skin.dark_circle
    return _bounded(raw, NEUTRAL_SKIN)


def symmetry_score(landmarks: Landmarks) -> float:
    """Bilateral balance of the eyes (and mouth corners when present) around the nose."""
    nose = _point(landmarks, "nose_tip")
    left_eye = _point(landmarks, "left_eye_center")
    right_eye = _point(landmarks, "right_eye_center")
    if nose is None or left_eye is None or right_eye is None:
        return NEUTRAL_SYMMETRY

    midline = nose[0]
    ratio = _balance(abs(left_eye[0] - midline), abs(right_eye[0] - midline))
    if ratio is None:
        return NEUTRAL_SYMMETRY

    mouth_left = _point(landmarks, "mouth_left_corner")
    mouth_right = _point(landmarks, "mouth_right_corner")
    if mouth_left is not None and mouth_right is not None:
        mouth_ratio = _balance(abs(mouth_left[0] - midline), abs(mouth_right[0] - midline))
        if mouth_ratio is not None:
            ratio = EYE_SYMMETRY_WEIGHT * ratio + MOUTH_SYMMETRY_WEIGHT * mouth_ratio

    return _bounded(50.0 + ratio * 50.0, NEUTRAL_SYMMETRY)


def proportions_score(landmarks: Landmarks, face_rectangle: Optional[FaceRectangle]) -> float:
    """Lower-third and eye-separation deviation from the ideal thirds/fifths."""
    box = _box(face_rectangle)
    if box is None:
        return NEUTRAL_PROPORTIONS
    width, height = box

    deviations = []
    nose = _point(landmarks, "nose_tip")
    chin = _point(landmarks, "contour_chin")
    if nose is not None and chin is not None:
        lower_third = abs(chin[1] - nose[1]) / height
        deviations.append(abs(lower_third - IDEAL_LOWER_THIRD) / IDEAL_LOWER_THIRD)

    left_eye = _point(landmarks, "left_eye_center")
    right_eye = _point(landmarks, "right_eye_center")
    if left_eye is not None and right_eye is not None:
        separation = abs(right_eye[0] - left_eye[0]) / width
        deviations.append(abs(separation - IDEAL_EYE_SEPARATION) / IDEAL_EYE_SEPARATION)

    if not deviations:
        return NEUTRAL_PROPORTIONS
    return _bounded(100.0 * (1.0 - float(np.mean(deviations))), NEUTRAL_PROPORTIONS)


def jawline_score(landmarks: Landmarks, face_rectangle: Optional[FaceRectangle]) -> float:
    """Face width:height against the ideal masculine ratio, blended with jaw symmetry."""
    box = _box(face_rectangle)
    if box is None:
        return NEUTRAL_JAWLINE
    width, height = box

    combined = _closeness(width / height, IDEAL_FACE_RATIO)

    jaw_left = _point(landmarks, "contour_left7")
    jaw_right = _point(landmarks, "contour_right7")
    center = _point(landmarks, "contour_chin")
    if center is None:
        center = _point(landmarks, "nose_tip")
    if jaw_left is not None and jaw_right is not None and center is not None:
        jaw_balance = _balance(abs(jaw_left[0] - center[0]), abs(jaw_right[0] - center[0]))
        if jaw_balance is not None:
            combined = JAW_RATIO_WEIGHT * combined + JAW_SYMMETRY_WEIGHT * jaw_balance

    return _bounded(100.0 * combined, NEUTRAL_JAWLINE)


def cheekbone_score(landmarks: Landmarks, face_rectangle: Optional[FaceRectangle]) -> float:
    box = _box(face_rectangle)
    cheek_left = _point(landmarks, "contour_left2")
    cheek_right = _point(landmarks, "contour_right2")
    if box is None or cheek_left is None or cheek_right is None:
        return NEUTRAL_CHEEKBONES

    cheek_width = float(np.linalg.norm(cheek_right - cheek_left)) / box[0]
    return _bounded(100.0 * _closeness(cheek_width, IDEAL_CHEEK_WIDTH), NEUTRAL_CHEEKBONES)


def eye_area_score(landmarks: Landmarks) -> float:
    """Eye width:height aspect against the ideal almond shape, averaged over both eyes."""
    aspects = []
    for side in ("left", "right"):
        outer = _point(landmarks, f"{side}_eye_left_corner")
        inner = _point(landmarks, f"{side}_eye_right_corner")
        top = _point(landmarks, f"{side}_eye_top")
        bottom = _point(landmarks, f"{side}_eye_bottom")
        if outer is None or inner is None or top is None or bottom is None:
            continue
        eye_height = float(np.linalg.norm(top - bottom))
        if eye_height <= 0:
            continue
        aspects.append(float(np.linalg.norm(outer - inner)) / eye_height)

    if not aspects:
        return NEUTRAL_EYE_AREA
    return _bounded(100.0 * _closeness(float(np.mean(aspects)), IDEAL_EYE_ASPECT), NEUTRAL_EYE_AREA)


def masculinity_score(attributes: FaceAttributes, beauty: float) -> float:
    if attributes.gender == Gender.MALE:
        raw = beauty * 0.8 + 20.0
    else:
        raw = 100.0 - beauty * 0.3
    return _bounded(raw, NEUTRAL_MASCULINITY)


def normalize(
    attributes: FaceAttributes,
    landmarks: Optional[Landmarks],
    face_rectangle: Optional[FaceRectangle],
    beauty_scale: float = 1.0,
) -> FaceMetrics:
    """Derive clamped 0-100 sub-scores from a detector payload.

    Args:
        attributes: Detector attributes (gender, age, beauty, skin)
        landmarks: Named landmark points; may be empty or partial
        face_rectangle: Face bounding box used to normalize distances
        beauty_scale: Multiplier applied to the raw beauty score

    Returns:
        FaceMetrics with every field in [0, 100]
    """
    landmarks = landmarks or {}
    beauty = base_attractiveness(attributes, beauty_scale)
    return FaceMetrics(
        skin_quality=skin_score(attributes),
        symmetry=symmetry_score(landmarks),
        proportions=proportions_score(landmarks, face_rectangle),
        jawline=jawline_score(landmarks, face_rectangle),
        cheekbones=cheekbone_score(landmarks, face_rectangle),
        eye_area=eye_area_score(landmarks),
        masculinity=masculinity_score(attributes, beauty),
    )
