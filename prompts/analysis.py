"""
Prompt builders for each helper operation.

Every prompt is the template set's system text followed by the
operation-specific instructions.
"""

from __future__ import annotations

from string import Template

from prompts.templates import PromptTemplates


def _with_system(templates: PromptTemplates, body: str) -> str:
    return f"{templates.system}\n\n{body}"


def get_extract_problem_prompt(templates: PromptTemplates) -> str:
    return _with_system(templates, templates.extract_problem)


def get_solution_prompt(templates: PromptTemplates, problem_info: str) -> str:
    """*problem_info* is the already-serialised JSON of the problem."""
    body = Template(templates.generate_solution).safe_substitute(
        problem_info=problem_info,
    )
    return _with_system(templates, body)


def get_debug_prompt(
    templates: PromptTemplates, problem_info: str, current_state: str
) -> str:
    body = Template(templates.debug_solution).safe_substitute(
        problem_info=problem_info,
        current_state=current_state,
    )
    return _with_system(templates, body)


def get_audio_analysis_prompt(templates: PromptTemplates) -> str:
    return _with_system(templates, templates.analyze_audio)


def get_image_analysis_prompt(templates: PromptTemplates) -> str:
    return _with_system(templates, templates.analyze_image)
