"""File storage tool."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List

from storyteller.models.story import ImagePayload, PipelineResult
from storyteller.utils.config import settings
from storyteller.utils.file_utils import ensure_dir


def result_to_json(result: PipelineResult) -> str:
    return json.dumps(result.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False)


def write_result(path: str, result: PipelineResult) -> str:
    p = Path(path)
    if p.parent != Path("."):
        ensure_dir(str(p.parent))
    p.write_text(result_to_json(result), encoding="utf-8")
    return str(p)


def save_image(name: str, image: ImagePayload) -> str:
    output_dir = ensure_dir(settings.output_dir)
    path = Path(output_dir) / f"{name}.{image.extension}"
    path.write_bytes(image.to_bytes())
    return str(path)


def save_result_images(stem: str, result: PipelineResult) -> List[str]:
    """Decode whichever images are present; absent slots are skipped."""
    files = []
    if result.watercolor_image is not None:
        files.append(save_image(f"{stem}_watercolor", result.watercolor_image))
    if result.landscape_image is not None:
        files.append(save_image(f"{stem}_landscape", result.landscape_image))
    return files


def load_result(path: str) -> PipelineResult:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Missing file: {p}")
    return PipelineResult.model_validate_json(p.read_text(encoding="utf-8"))
