from .openai_checker import OpenAiConductChecker, load_prompt_template

__all__ = ["OpenAiConductChecker", "load_prompt_template"]
