from .github import GitHubClientPort
from .llm import LLMClientPort

__all__ = [
    "GitHubClientPort",
    "LLMClientPort",
]
