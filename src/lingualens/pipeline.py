"""
Annotation-translation pipeline.

Turns one image into ordered (original, translated) text pairs:

    Image → Text Detection → Per-Fragment Language Filter → Per-Fragment Translation

Stages:
    - detect: one OCR request; any failure aborts the run with DetectionError
    - filter_annotations: keeps fragments whose top-ranked language is SOURCE_LANG
    - translate_annotations: translates each kept fragment into TARGET_LANG

Failure policy per stage:
    - Detection failures are fatal and produce no partial output
    - Language detection failures are fail-closed: the fragment is dropped
    - Translation failures keep the fragment with translated == original

Concurrency model:
    - The filter and translation stages launch one request per fragment at
      once via asyncio.gather and wait until every request has settled
    - Each request writes into a pre-sized list slot at its input index, so
      stage output order never depends on completion order
    - No in-flight cap; fine for the tens of fragments a typical image yields
"""

import asyncio
import time
from collections import deque

from lingualens.backends import (
    get_detection_backend,
    get_language_backend,
    get_translation_backend,
)
from lingualens.backends.base import (
    LanguageDetectionBackend,
    TextDetectionBackend,
    TranslationBackend,
)
from lingualens.backends.types import Annotation, ResultRecord
from lingualens.config import SOURCE_LANG, TARGET_LANG

# Metrics
_metrics = {
    "detect_times": deque(maxlen=100),
    "filter_times": deque(maxlen=100),
    "translate_times": deque(maxlen=100),
    "total_times": deque(maxlen=100),
}
_counters = {
    "dropped_fragments": 0,
    "degraded_fragments": 0,
}


def _avg_ms(times: deque) -> float:
    values = list(times)
    return sum(values) / len(values) * 1000 if values else 0


def get_metrics() -> dict:
    return {
        "avg_detect_time_ms": _avg_ms(_metrics["detect_times"]),
        "avg_filter_time_ms": _avg_ms(_metrics["filter_times"]),
        "avg_translate_time_ms": _avg_ms(_metrics["translate_times"]),
        "avg_total_time_ms": _avg_ms(_metrics["total_times"]),
        "sample_count": len(_metrics["total_times"]),
        **_counters,
    }


async def detect(
    image: bytes,
    backend: TextDetectionBackend | None = None,
) -> list[Annotation]:
    """Run text detection. DetectionError propagates to the caller."""
    backend = backend or get_detection_backend()
    detect_start = time.time()
    annotations = await backend.detect(image)
    _metrics["detect_times"].append(time.time() - detect_start)
    print(f"Detected {len(annotations)} text annotations")
    return annotations


async def filter_annotations(
    annotations: list[Annotation],
    backend: LanguageDetectionBackend | None = None,
    source_lang: str | None = None,
) -> list[Annotation]:
    """
    Keep the annotations whose dominant language is source_lang.

    Only the top-ranked candidate counts; there is no confidence threshold.
    A failed or empty detection counts as a non-match.

    Args:
        annotations: Annotations in detection order
        backend: Language detection backend (configured default if None)
        source_lang: Language to keep (SOURCE_LANG if None)

    Returns:
        Order-preserving subsequence of annotations
    """
    if not annotations:
        return []

    backend = backend or get_language_backend()
    source_lang = source_lang or SOURCE_LANG
    verdicts = [False] * len(annotations)

    async def check(index: int, annotation: Annotation) -> None:
        try:
            candidates = await backend.detect_language(annotation.description)
        except Exception as e:
            _counters["dropped_fragments"] += 1
            print(f"Language detection error for fragment {index}: {e}")
            return
        verdicts[index] = bool(candidates) and candidates[0].language == source_lang

    filter_start = time.time()
    await asyncio.gather(*(check(i, a) for i, a in enumerate(annotations)))
    _metrics["filter_times"].append(time.time() - filter_start)

    return [a for a, keep in zip(annotations, verdicts, strict=True) if keep]


async def translate_annotations(
    annotations: list[Annotation],
    backend: TranslationBackend | None = None,
    tgt_lang: str | None = None,
    src_lang: str | None = None,
) -> list[ResultRecord]:
    """
    Translate every annotation, one record per input in input order.

    A fragment whose translation fails is kept with its original text as the
    translation rather than dropped.
    """
    if not annotations:
        return []

    backend = backend or get_translation_backend()
    tgt_lang = tgt_lang or TARGET_LANG
    results: list[ResultRecord | None] = [None] * len(annotations)

    async def translate_one(index: int, annotation: Annotation) -> None:
        original = annotation.description
        try:
            translated = await backend.translate(original, tgt_lang=tgt_lang, src_lang=src_lang)
        except Exception as e:
            _counters["degraded_fragments"] += 1
            print(f"Translation error for fragment {index}: {e}")
            translated = original
        results[index] = ResultRecord(original=original, translated=translated)

    translate_start = time.time()
    await asyncio.gather(*(translate_one(i, a) for i, a in enumerate(annotations)))
    _metrics["translate_times"].append(time.time() - translate_start)

    return list(results)


async def run(
    image: bytes,
    *,
    detector: TextDetectionBackend | None = None,
    language_detector: LanguageDetectionBackend | None = None,
    translator: TranslationBackend | None = None,
) -> list[ResultRecord]:
    """
    Run the full pipeline on one image.

    Raises:
        DetectionError: If text detection fails. Nothing else escapes once
            detection has succeeded.
    """
    run_start = time.time()

    annotations = await detect(image, detector)
    if not annotations:
        _metrics["total_times"].append(time.time() - run_start)
        return []

    kept = await filter_annotations(annotations, language_detector)
    print(f"Language filter kept {len(kept)}/{len(annotations)} annotations")

    records = await translate_annotations(kept, translator)

    total_time = time.time() - run_start
    _metrics["total_times"].append(total_time)
    print(f"Pipeline finished: {len(records)} records in {total_time * 1000:.1f}ms")
    return records
