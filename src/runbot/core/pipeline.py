"""Message to execution to reply pipeline."""

from __future__ import annotations

from typing import Literal, Protocol

from loguru import logger

from runbot.core.chunker import chunk, crop_notice, crop_to_fit, render_fragments
from runbot.core.extractor import extract, normalize_newlines
from runbot.core.languages import LanguageRegistry, resolve
from runbot.core.types import ExecutionResult, ResolvedRequest
from runbot.errors import EmptyCodeError, InvalidInputError, MissingLanguageError, UnresolvedLanguageError

OutputMode = Literal["chunk", "crop"]

TOO_FEW_LINES = "Invalid input: too few lines"
NOT_CODE_BLOCK = "Invalid input: you must put code in code blocks"
NO_CODE = "Invalid input: do you have any code?"
NO_LANGUAGE = "Please specify a language, e.g. `!run python` or a ```python code block"
ERROR_HEADER = "Encountered Error:"
LANGUAGES_HEADER = "Supported languages:"
CROP_TEMPLATE = "Received Output:\n```\n{output}\n```\n"
ERROR_TEMPLATE = "Encountered Error:\n```\n{output}\n```\n"


class Executor(Protocol):
    async def run(self, language: str, code: str) -> ExecutionResult: ...


def prepare_request(text: str, registry: LanguageRegistry, language_hint: str | None = None) -> ResolvedRequest:
    """Turn message text into an execution request or raise ``InvalidInputError``.

    A language given on the command line takes precedence over the fence tag.
    """

    if len(normalize_newlines(text).split("\n")) < 2:
        raise InvalidInputError(TOO_FEW_LINES)

    parsed = extract(text)
    if not parsed.is_code_message:
        raise InvalidInputError(NOT_CODE_BLOCK)
    if not parsed.body.strip():
        raise EmptyCodeError(NO_CODE)

    tag = (language_hint or parsed.raw_tag).strip()
    if not tag:
        raise MissingLanguageError(NO_LANGUAGE)

    request = ResolvedRequest(language=resolve(tag, registry), code=parsed.body)
    if request.language is None:
        raise UnresolvedLanguageError(tag)
    return request


class RunPipeline:
    """Run fenced code from chat messages and format the replies."""

    def __init__(
        self,
        registry: LanguageRegistry,
        executor: Executor,
        *,
        message_char_limit: int = 500,
        output_mode: OutputMode = "chunk",
        list_languages_on_unresolved: bool = True,
    ) -> None:
        self.registry = registry
        self.executor = executor
        self.message_char_limit = message_char_limit
        self.output_mode = output_mode
        self.list_languages_on_unresolved = list_languages_on_unresolved

    async def handle(self, text: str, language_hint: str | None = None) -> list[str]:
        """Return the replies for one message, in delivery order."""

        try:
            request = prepare_request(text, self.registry, language_hint)
        except UnresolvedLanguageError as exc:
            logger.info("pipeline.rejected reason=unresolved tag={}", exc.tag)
            replies = [str(exc)]
            if self.list_languages_on_unresolved:
                replies.extend(self.render_languages())
            return replies
        except InvalidInputError as exc:
            logger.info("pipeline.rejected reason={}", type(exc).__name__)
            return [str(exc)]

        logger.info("pipeline.execute language={} code_chars={}", request.language, len(request.code))
        result = await self.executor.run(request.language, request.code)
        if result.error is not None:
            logger.warning("pipeline.execute.failed language={} error={}", request.language, result.error[:100])
            return self.render_error(result.error)

        logger.debug("pipeline.execute.done language={} output_chars={}", request.language, len(result.output))
        return self.render_output(result.output)

    def render_output(self, output: str) -> list[str]:
        if self.output_mode == "crop":
            return [self.render_cropped(output)]
        return render_fragments(chunk(output, self.message_char_limit))

    def render_error(self, error: str) -> list[str]:
        if self.output_mode == "crop":
            return [self.render_cropped(error, ERROR_TEMPLATE)]
        return [ERROR_HEADER, *render_fragments(chunk(error, self.message_char_limit))]

    def render_cropped(self, output: str, template: str = CROP_TEMPLATE) -> str:
        overhead = len(template.format(output=""))
        result = crop_to_fit(output, overhead, self.message_char_limit)
        response = template.format(output=result.text)
        if result.cropped:
            response += crop_notice(result.dropped)
        logger.debug("pipeline.crop dropped={} final_length={}", result.dropped, len(response))
        return response

    def render_languages(self) -> list[str]:
        names = ", ".join(self.registry.names)
        return [LANGUAGES_HEADER, *render_fragments(chunk(names, self.message_char_limit))]
