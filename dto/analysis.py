"""
Result DTOs returned by the helper.

JSON-returning operations validate the model output against these shapes:
string fields only accept strings, and missing or unknown fields are
rejected.

    ProblemInfo            <- extract_problem_from_images
    SolutionResponse       <- generate_solution / debug_solution_with_images
      └─ solution: Solution (ProblemInfo + code)
    AnalysisResult         <- analyze_* (raw text, never parsed)
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, StrictStr


class ProblemInfo(BaseModel):
    """Situation analysis extracted from screenshots."""

    model_config = ConfigDict(extra="forbid")

    problem_statement: StrictStr
    context: StrictStr
    suggested_responses: List[StrictStr]
    reasoning: StrictStr


class Solution(ProblemInfo):
    """ProblemInfo plus the proposed remedy."""

    code: StrictStr


class SolutionResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    solution: Solution


class AnalysisResult(BaseModel):
    """Raw model text and its capture time in milliseconds since the epoch."""

    text: str
    timestamp: int
