from .llm_backoff import invoke_with_retry

__all__ = ["invoke_with_retry"]
