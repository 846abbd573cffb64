"""
Prompt template sets for the workplace-security analysis helper.

A template set is plain configuration: the helper never depends on the
wording, only on the placeholders.  Two built-in variants exist:

  - ``standard``: general situation analysis
  - ``quoted``:   the analysis quotes the specific words or phrases of the
    input it is commenting on

Any other set can be loaded from JSON (one key per field below).  The
solution and debug templates use ``string.Template`` placeholders
``$problem_info`` and ``$current_state``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Union

from pydantic import BaseModel, ConfigDict

_SYSTEM = """あなたは職場環境セキュリティ分析AIです。ユーザーの言語使用をハラスメントと職場環境セキュリティの観点から分析し、簡潔な日本語でフィードバックを提供します。回答は必ず以下の3つの要素のみで構成してください：
1. 状況分析（1文）
2. フィードバック（1文）
3. 改善点（1文）"""

_SYSTEM_QUOTED = _SYSTEM + """
分析では、問題となる具体的な発言や表現を「」で引用してから評価してください。"""

_EXTRACT_PROBLEM = """画像内容をハラスメント・職場環境セキュリティの観点から分析し、以下のJSON形式で簡潔に回答してください：

{
  "problem_statement": "状況分析（1文）",
  "context": "フィードバック（1文）",
  "suggested_responses": ["改善点（1文）"],
  "reasoning": "総合評価（1文）"
}

重要：各項目は1文のみで簡潔にまとめてください。"""

_EXTRACT_PROBLEM_QUOTED = """画像内の具体的な発言・表現を引用しながら、ハラスメント・職場環境セキュリティの観点から分析し、以下のJSON形式で簡潔に回答してください：

{
  "problem_statement": "引用した表現と状況分析（1文）",
  "context": "フィードバック（1文）",
  "suggested_responses": ["改善点（1文）"],
  "reasoning": "総合評価（1文）"
}

重要：各項目は1文のみで簡潔にまとめてください。"""

_GENERATE_SOLUTION = """以下の職場コミュニケーション問題を分析し、簡潔なJSON形式で回答してください：
$problem_info

{
  "solution": {
    "code": "改善案（1文）",
    "problem_statement": "状況分析（1文）",
    "context": "フィードバック（1文）",
    "suggested_responses": ["改善点（1文）"],
    "reasoning": "総合評価（1文）"
  }
}

重要：各項目は1文のみで簡潔にまとめてください。"""

_GENERATE_SOLUTION_QUOTED = """以下の職場コミュニケーション問題について、問題となる表現を引用しながら分析し、簡潔なJSON形式で回答してください：
$problem_info

{
  "solution": {
    "code": "引用した表現の言い換え案（1文）",
    "problem_statement": "状況分析（1文）",
    "context": "フィードバック（1文）",
    "suggested_responses": ["改善点（1文）"],
    "reasoning": "総合評価（1文）"
  }
}

重要：各項目は1文のみで簡潔にまとめてください。"""

_DEBUG_SOLUTION = """追加画像を含む詳細分析を行い、簡潔なJSON形式で回答してください：
元の問題: $problem_info
現在の対応: $current_state

{
  "solution": {
    "code": "改善された対処法（1文）",
    "problem_statement": "詳細状況分析（1文）",
    "context": "フィードバック（1文）",
    "suggested_responses": ["改善点（1文）"],
    "reasoning": "総合評価（1文）"
  }
}

重要：各項目は1文のみで簡潔にまとめてください。"""

_DEBUG_SOLUTION_QUOTED = """追加画像内の具体的な発言・表現を引用しながら詳細分析を行い、簡潔なJSON形式で回答してください：
元の問題: $problem_info
現在の対応: $current_state

{
  "solution": {
    "code": "改善された対処法（1文）",
    "problem_statement": "引用した表現と詳細状況分析（1文）",
    "context": "フィードバック（1文）",
    "suggested_responses": ["改善点（1文）"],
    "reasoning": "総合評価（1文）"
  }
}

重要：各項目は1文のみで簡潔にまとめてください。"""

_MEDIA_ANALYSIS = """{medium}内容をハラスメント・職場環境セキュリティの観点から分析し、以下の形式で簡潔に回答してください：

**状況分析：**（1文）

**フィードバック：**（1文）

**改善点：**（1文）"""

_MEDIA_ANALYSIS_QUOTED = """{medium}内の具体的な発言・表現を引用しながら、ハラスメント・職場環境セキュリティの観点から分析し、以下の形式で簡潔に回答してください：

**状況分析：**（引用した表現を含めて1文）

**フィードバック：**（1文）

**改善点：**（1文）"""


class PromptTemplates(BaseModel):
    """Immutable set of prompt texts, one per helper operation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    system: str
    extract_problem: str
    generate_solution: str
    debug_solution: str
    analyze_audio: str
    analyze_image: str

    @classmethod
    def standard(cls) -> "PromptTemplates":
        return cls(
            system=_SYSTEM,
            extract_problem=_EXTRACT_PROBLEM,
            generate_solution=_GENERATE_SOLUTION,
            debug_solution=_DEBUG_SOLUTION,
            analyze_audio=_MEDIA_ANALYSIS.format(medium="音声"),
            analyze_image=_MEDIA_ANALYSIS.format(medium="画像"),
        )

    @classmethod
    def quoted(cls) -> "PromptTemplates":
        return cls(
            system=_SYSTEM_QUOTED,
            extract_problem=_EXTRACT_PROBLEM_QUOTED,
            generate_solution=_GENERATE_SOLUTION_QUOTED,
            debug_solution=_DEBUG_SOLUTION_QUOTED,
            analyze_audio=_MEDIA_ANALYSIS_QUOTED.format(medium="音声"),
            analyze_image=_MEDIA_ANALYSIS_QUOTED.format(medium="画像"),
        )

    @classmethod
    def from_style(cls, style: str) -> "PromptTemplates":
        style = style.lower().strip()
        factory = _STYLES.get(style)
        if factory is None:
            raise ValueError(
                f"Unknown prompt style: {style!r} (expected one of {sorted(_STYLES)})"
            )
        return factory()

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "PromptTemplates":
        """Load a complete template set from a JSON file."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))


_STYLES: Dict[str, Callable[[], PromptTemplates]] = {
    "standard": PromptTemplates.standard,
    "quoted": PromptTemplates.quoted,
}
