"""Construction of content suggestion records.

The legacy/calibrated distinction is decided here, once. Downstream code
dispatches on ``kind`` instead of probing for optional fields.
"""

from pydantic import TypeAdapter

from models.schemas.suggestions import (
    CalibratedSuggestion,
    CalibrationSignals,
    ContentSuggestion,
    InferenceSignals,
    LegacySuggestion,
    SuggestionMode,
)

_CONTENT_SUGGESTION = TypeAdapter(ContentSuggestion)


def build_content_suggestion(
    *,
    type: str,
    section: str,
    original_text: str,
    suggested_text: str | None = None,
    reasoning: str = "",
    urgency: str = "medium",
    id: str | None = None,
    suggestion_mode: SuggestionMode | None = None,
    signals: CalibrationSignals | None = None,
) -> LegacySuggestion | CalibratedSuggestion:
    """Calibrated when both mode and signals are given, legacy otherwise."""
    base = dict(
        id=id,
        type=type,
        section=section,
        original_text=original_text,
        suggested_text=suggested_text,
        reasoning=reasoning,
        urgency=urgency,
    )
    if suggestion_mode is None or signals is None:
        return LegacySuggestion(**base)

    return CalibratedSuggestion(
        **base,
        suggestion_mode=suggestion_mode,
        inference_signals=InferenceSignals(
            ats_score=signals.ats_score,
            experience_level=signals.experience_level,
            missing_keywords_count=signals.missing_keywords_count,
            quantification_density=signals.quantification_density,
        ),
    )


def load_content_suggestion(record: dict) -> LegacySuggestion | CalibratedSuggestion:
    """Rebuild a stored record (snake_case or camelCase keys).

    Records without ``kind`` are treated as calibrated when they carry
    calibration fields, which is how rows written before the tag existed
    are told apart.
    """
    if "kind" not in record:
        calibrated = any(
            k in record for k in ("suggestion_mode", "suggestionMode")
        ) and any(k in record for k in ("inference_signals", "inferenceSignals"))
        record = {**record, "kind": "calibrated" if calibrated else "legacy"}
    return _CONTENT_SUGGESTION.validate_python(record)
