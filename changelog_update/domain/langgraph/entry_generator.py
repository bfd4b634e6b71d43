import subprocess
from typing import Any, Callable, List, Optional, Protocol

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from changelog_update.app.config import Settings, get_settings
from changelog_update.app.logging_config import get_logger

from ..changelog.errors import EntryGenerationError
from ..changelog.heading_parser import format_version_heading
from ..changelog.schema import EntryContext
from .prompts import build_entry_prompt
from .utils.llm_backoff import invoke_with_retry

logger = get_logger("langgraph.entry_generator")

SUPPORTED_MODELS = ("claude", "openai", "mock")


class EntryGenerator(Protocol):
    """버전 컨텍스트 -> `## [버전]`으로 시작하는 항목 텍스트"""

    def generate(self, context: EntryContext) -> str: ...


def _strip_code_fence(text: str) -> str:
    """```markdown ... ``` 로 감싼 응답이면 펜스를 제거"""
    stripped = text.strip()
    if stripped.startswith("```") and stripped.endswith("```"):
        lines = stripped.split("\n")
        if len(lines) >= 2:
            return "\n".join(lines[1:-1]).strip()
    return stripped


class ClaudeEntryGenerator:
    """`claude -p <prompt>` CLI 실행으로 항목 생성"""

    name = "claude"

    def __init__(self, binary: str = "claude", runner: Optional[Callable[..., Any]] = None):
        self.binary = binary
        self.runner = runner or subprocess.run

    def generate(self, context: EntryContext) -> str:
        logger.info(f"Generating entry for {context.version} with {self.binary}")
        system_prompt, user_prompt = build_entry_prompt(context)
        prompt = f"{system_prompt}\n{user_prompt}"

        try:
            result = self.runner(
                [self.binary, "-p", prompt],
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise EntryGenerationError(self.name, f"{e}: {e.stderr or ''}".strip()) from e
        except OSError as e:
            raise EntryGenerationError(self.name, f"failed to run {self.binary} command: {e}") from e

        return _strip_code_fence(result.stdout)


class OpenAIEntryGenerator:
    """LangChain ChatOpenAI 기반 항목 생성기"""

    name = "openai"

    def __init__(
        self,
        openai_api_key: Optional[str] = None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.3,
        max_retries: int = 3,
        retry_base_delay: float = 1.0,
        llm: Optional[Any] = None
    ):
        self.llm = llm or ChatOpenAI(
            model=model,
            temperature=temperature,
            api_key=openai_api_key
        )
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def generate(self, context: EntryContext) -> str:
        logger.info(f"Generating entry for {context.version} with {self.name}")
        system_prompt, user_prompt = build_entry_prompt(context)
        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=user_prompt)
        ]

        try:
            response = invoke_with_retry(
                self.llm,
                messages,
                max_retries=self.max_retries,
                base_delay=self.retry_base_delay
            )
        except Exception as e:
            raise EntryGenerationError(self.name, str(e)) from e

        content = getattr(response, "content", response)
        if isinstance(content, list):
            # LangChain 메시지 content가 list 형태일 수 있으므로 문자열로 변환
            content = "\n".join(
                c.get("text", "") if isinstance(c, dict) else str(c)
                for c in content
            )
        return _strip_code_fence(str(content))


class MockEntryGenerator:
    """개발/테스트용 Mock 항목 생성기"""

    name = "mock"

    def __init__(self):
        self.contexts: List[EntryContext] = []

    def generate(self, context: EntryContext) -> str:
        self.contexts.append(context)

        lines = [format_version_heading(context.version, context.date), ""]
        if context.is_initial:
            lines += ["### 추가", "", "- 첫 릴리스"]
            return "\n".join(lines)

        added = [c.path for c in context.changed_files + context.staged_changes if c.is_added]
        changed = [c.path for c in context.changed_files + context.staged_changes if not c.is_added]
        if added:
            lines += ["### 추가", ""] + [f"- {path}" for path in added] + [""]
        if changed:
            lines += ["### 변경", ""] + [f"- {path}" for path in changed] + [""]
        if not added and not changed:
            commits = [c for c in context.commit_log.split("\n") if c.strip()]
            lines += ["### 변경", ""] + [f"- {c.strip()}" for c in commits or ["변경 사항 없음"]]

        return "\n".join(lines).rstrip()


def get_entry_generator(model: str, settings: Optional[Settings] = None) -> EntryGenerator:
    """모델 이름으로 항목 생성기 선택 (실행 시점에 한 번만 결정)"""
    settings = settings or get_settings()

    if model == "claude":
        return ClaudeEntryGenerator(binary=settings.claude_binary)
    if model == "openai":
        if not settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required for the openai model")
        return OpenAIEntryGenerator(
            openai_api_key=settings.openai_api_key,
            model=settings.openai_model,
            temperature=settings.openai_temperature,
            max_retries=settings.llm_max_retries,
            retry_base_delay=settings.llm_retry_base_delay
        )
    if model == "mock":
        return MockEntryGenerator()

    raise ValueError(f"invalid model specified: {model}")
