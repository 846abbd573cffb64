import json

import pydantic
import pytest

from llm_helper import HelperConfig
from prompts.analysis import get_debug_prompt, get_solution_prompt
from prompts.templates import PromptTemplates

_ENV_VARS = (
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "LLM_HELPER_MODEL",
    "LLM_HELPER_PROMPT_STYLE",
    "LLM_HELPER_PROMPTS_FILE",
    "LLM_HELPER_MAX_ATTEMPTS",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_config_defaults():
    config = HelperConfig(api_key="secret")
    assert config.model == "gemini-2.0-flash"
    assert config.max_attempts == 1
    assert config.prompts == PromptTemplates.standard()
    assert "secret" not in repr(config)


def test_config_is_frozen():
    config = HelperConfig(api_key="secret")
    with pytest.raises(pydantic.ValidationError):
        config.model = "other"


@pytest.mark.parametrize("key", ["", "   "])
def test_config_requires_api_key(key):
    with pytest.raises(pydantic.ValidationError):
        HelperConfig(api_key=key)


def test_from_env_reads_variables(clean_env):
    clean_env.setenv("GOOGLE_API_KEY", "g-key")
    clean_env.setenv("LLM_HELPER_MODEL", "gemini-2.5-flash")
    clean_env.setenv("LLM_HELPER_PROMPT_STYLE", "quoted")
    clean_env.setenv("LLM_HELPER_MAX_ATTEMPTS", "3")

    config = HelperConfig.from_env()

    assert config.api_key == "g-key"
    assert config.model == "gemini-2.5-flash"
    assert config.prompts == PromptTemplates.quoted()
    assert config.max_attempts == 3


def test_from_env_prefers_gemini_key_and_overrides(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "gem")
    clean_env.setenv("GOOGLE_API_KEY", "goo")

    config = HelperConfig.from_env(model="m", prompts=None)

    assert config.api_key == "gem"
    assert config.model == "m"


def test_from_env_without_key_fails(clean_env):
    with pytest.raises(ValueError, match="API key"):
        HelperConfig.from_env()


def test_prompts_file(clean_env, tmp_path):
    custom = PromptTemplates.standard().model_copy(update={"system": "SYSTEM"})
    path = tmp_path / "prompts.json"
    path.write_text(custom.model_dump_json(), encoding="utf-8")
    clean_env.setenv("GEMINI_API_KEY", "k")
    clean_env.setenv("LLM_HELPER_PROMPTS_FILE", str(path))

    assert HelperConfig.from_env().prompts.system == "SYSTEM"


def test_unknown_prompt_style():
    with pytest.raises(ValueError, match="Unknown prompt style"):
        PromptTemplates.from_style("poetic")


def test_prompt_placeholders_are_filled():
    templates = PromptTemplates(
        system="S",
        extract_problem="E",
        generate_solution="info=$problem_info",
        debug_solution="info=$problem_info state=$current_state cost=$5",
        analyze_audio="A",
        analyze_image="I",
    )
    info = json.dumps({"k": "$v"})

    assert get_solution_prompt(templates, info) == 'S\n\ninfo={"k": "$v"}'
    assert get_debug_prompt(templates, "{}", "now") == "S\n\ninfo={} state=now cost=$5"


@pytest.mark.parametrize("factory", [PromptTemplates.standard, PromptTemplates.quoted])
def test_builtin_templates_have_placeholders(factory):
    templates = factory()
    assert "$problem_info" in templates.generate_solution
    assert "$problem_info" in templates.debug_solution
    assert "$current_state" in templates.debug_solution
