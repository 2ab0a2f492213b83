"""CLI tool for scoring or comparing faces from saved Face++ responses or images."""
import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from faceiq.api.models.face import AnalysisResponse, ComparisonResponse
from faceiq.core.config import settings
from faceiq.core.exceptions import FaceIQError
from faceiq.core.logging import get_logger, setup_logging
from faceiq.domain.value_objects.scoring import AnalysisResult
from faceiq.services.detection.facepp import FacePlusPlusDetector, parse_detect_response
from faceiq.services.face_analysis import FaceAnalysisService
from faceiq.services.random_source import SeededRandomSource
from faceiq.services.scoring.engine import FaceScoringEngine

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Score one face, or compare two, from Face++ detect responses"
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="One or two Face++ detect response JSON files (image files with --image)",
    )
    parser.add_argument(
        "--image",
        action="store_true",
        help="Treat inputs as image files and call the Face++ API",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.RANDOM_SEED,
        help="Seed for the potential score and roast selection",
    )
    args = parser.parse_args(argv)
    if len(args.inputs) > 2:
        parser.error("at most two inputs can be compared")
    return args


def load_payload_result(engine: FaceScoringEngine, path: Path) -> AnalysisResult:
    """Score a saved Face++ response, returning the error sentinel on failure."""
    try:
        payload = json.loads(path.read_text())
        face = parse_detect_response(payload)
    except (OSError, ValueError) as e:
        logger.error("Could not read detector payload", path=str(path), error=str(e))
        return AnalysisResult.error(f"Could not read {path}")
    except FaceIQError as e:
        logger.error("Unusable detector payload", path=str(path), error=str(e))
        return AnalysisResult.error(str(e))
    return engine.analyze(face.attributes, face.landmarks, face.face_rectangle)


async def run(args: argparse.Namespace) -> dict:
    engine = FaceScoringEngine(
        rng=SeededRandomSource(seed=args.seed),
        weights=settings.SCORING_WEIGHTS,
        beauty_scale=settings.BEAUTY_SCALE,
    )

    if not args.image:
        results = [load_payload_result(engine, path) for path in args.inputs]
        if len(results) == 2:
            mog = engine.compare(results[0], results[1])
            return ComparisonResponse.from_domain(mog).model_dump(by_alias=True, mode="json")
        return AnalysisResponse.from_domain(results[0]).model_dump(by_alias=True, mode="json")

    detector = FacePlusPlusDetector()
    service = FaceAnalysisService(detector=detector, engine=engine)
    try:
        images = [path.read_bytes() for path in args.inputs]
        if len(images) == 2:
            mog = await service.compare_images(images[0], images[1])
            return ComparisonResponse.from_domain(mog).model_dump(by_alias=True, mode="json")
        result = await service.analyze_image(images[0])
        return AnalysisResponse.from_domain(result).model_dump(by_alias=True, mode="json")
    finally:
        await detector.close()


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    args = parse_args(argv)
    try:
        output = asyncio.run(run(args))
    except OSError as e:
        logger.error("Failed to read input", error=str(e))
        return 1

    print(json.dumps(output, indent=2))
    failed = output.get("tier") == "Error" or output.get("winnerTitle") == "ERROR"
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
