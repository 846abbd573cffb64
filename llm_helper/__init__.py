"""
Workplace-security analysis helper on top of a Gemini model session.

  LLMHelper     — facade with the six request operations
  HelperConfig  — frozen construction parameters
  capture       — turns an operation's typed error into an Outcome value
"""

from llm_helper.config import HelperConfig
from llm_helper.helper import LLMHelper
from llm_helper.outcome import ErrorKind, Outcome, capture

__all__ = [
    "HelperConfig",
    "LLMHelper",
    "ErrorKind",
    "Outcome",
    "capture",
]
