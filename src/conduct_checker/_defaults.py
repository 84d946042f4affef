DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_REDIRECTS = 5
DEFAULT_TIMEOUT = 60.0
