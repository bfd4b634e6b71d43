"""
LLM 호출 재시도 헬퍼

레이트리밋/일시적 오류에 대비해 지수 백오프로 재시도합니다.
"""
import time
from typing import Any, Callable, Optional, Sequence

from changelog_update.app.logging_config import get_logger

logger = get_logger("langgraph.llm_backoff")


def invoke_with_retry(
    llm: Any,
    messages: Sequence[Any],
    max_retries: int = 3,
    base_delay: float = 1.0,
    sleep: Optional[Callable[[float], None]] = None
) -> Any:
    """
    llm.invoke(messages)를 최대 max_retries번 시도

    마지막 시도까지 실패하면 마지막 예외를 그대로 올린다.
    """
    sleep = sleep or time.sleep
    attempts = max(1, max_retries)

    for attempt in range(1, attempts + 1):
        try:
            return llm.invoke(list(messages))
        except Exception as e:
            if attempt == attempts:
                logger.error(f"LLM invoke failed after {attempts} attempts: {e}")
                raise
            delay = base_delay * (2 ** (attempt - 1))
            logger.warning(f"LLM invoke failed (attempt {attempt}/{attempts}), retrying in {delay:.1f}s: {e}")
            sleep(delay)
