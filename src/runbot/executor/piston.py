"""Client for Piston-compatible code execution services."""

from __future__ import annotations

import asyncio
import json
from typing import Any
from urllib import error as urllib_error
from urllib import parse as urllib_parse
from urllib import request as urllib_request

from loguru import logger

from runbot.core.languages import LanguageRegistry
from runbot.core.types import ExecutionResult
from runbot.errors import ExecutionServiceError

DEFAULT_API_BASE = "https://emkc.org/api/v2/piston"
REQUEST_TIMEOUT_SECONDS = 60
USER_AGENT = "runbot/0.1"


class PistonExecutor:
    """Run code through the ``/execute`` endpoint of a Piston API."""

    def __init__(self, api_base: str = DEFAULT_API_BASE, *, timeout_seconds: float = REQUEST_TIMEOUT_SECONDS) -> None:
        normalized = normalize_api_base(api_base)
        if normalized is None:
            raise ValueError(f"invalid execution api base: {api_base!r}")
        self.api_base = normalized
        self.timeout_seconds = timeout_seconds

    async def run(self, language: str, code: str) -> ExecutionResult:
        """Execute code without blocking the event loop; failures come back as ``error``."""

        return await asyncio.to_thread(self.run_sync, language, code)

    def run_sync(self, language: str, code: str) -> ExecutionResult:
        payload = {
            "language": language,
            "version": "*",
            "files": [{"content": code}],
        }
        try:
            data = self._request("/execute", payload)
        except ExecutionServiceError as exc:
            logger.warning("executor.request.failed language={} error={}", language, exc)
            return ExecutionResult(error=str(exc))
        return parse_execute_response(data)

    def fetch_runtimes_sync(self) -> LanguageRegistry:
        data = self._request("/runtimes")
        if not isinstance(data, list):
            raise ExecutionServiceError("runtimes catalog is not a list")
        registry = LanguageRegistry.from_runtimes(item for item in data if isinstance(item, dict))
        logger.info("executor.runtimes loaded={}", len(registry))
        return registry

    def _request(self, path: str, payload: dict[str, Any] | None = None) -> Any:
        headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        body = None
        if payload is not None:
            body = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"
        request = urllib_request.Request(  # noqa: S310 - api base is validated by normalize_api_base.
            f"{self.api_base}{path}",
            data=body,
            headers=headers,
            method="POST" if payload is not None else "GET",
        )

        try:
            with urllib_request.urlopen(request, timeout=self.timeout_seconds) as response:  # noqa: S310
                response_body = response.read().decode("utf-8", errors="replace")
        except urllib_error.HTTPError as exc:
            detail = _http_error_detail(exc)
            if detail:
                raise ExecutionServiceError(f"http {exc.code}: {detail}") from exc
            raise ExecutionServiceError(f"http {exc.code}") from exc
        except urllib_error.URLError as exc:
            raise ExecutionServiceError(str(exc.reason)) from exc
        except OSError as exc:
            raise ExecutionServiceError(str(exc)) from exc

        try:
            return json.loads(response_body)
        except json.JSONDecodeError as exc:
            raise ExecutionServiceError(f"invalid json response: {exc!s}") from exc


def parse_execute_response(data: Any) -> ExecutionResult:
    """Map an ``/execute`` response onto output or error text."""

    if not isinstance(data, dict):
        return ExecutionResult(error="unexpected response from execution service")
    if data.get("message"):
        return ExecutionResult(error=str(data["message"]))

    compile_stage = data.get("compile")
    if isinstance(compile_stage, dict) and _stage_failed(compile_stage):
        return ExecutionResult(error=_stage_failure(compile_stage, "compile"))

    run_stage = data.get("run")
    if not isinstance(run_stage, dict):
        return ExecutionResult(error="execution service returned no run stage")
    if _stage_failed(run_stage):
        return ExecutionResult(error=_stage_failure(run_stage, "run"))
    return ExecutionResult(output=_stage_output(run_stage))


def _stage_failed(stage: dict[str, Any]) -> bool:
    code = stage.get("code")
    return bool(stage.get("signal")) or (code is not None and code != 0)


def _stage_output(stage: dict[str, Any]) -> str:
    output = stage.get("output")
    if output is None:
        output = (stage.get("stdout") or "") + (stage.get("stderr") or "")
    return str(output)


def _stage_failure(stage: dict[str, Any], name: str) -> str:
    if stage.get("signal"):
        status = f"{name} killed by {stage['signal']}"
    else:
        status = f"{name} exited with code {stage.get('code')}"
    output = _stage_output(stage).strip()
    return f"{status}\n{output}" if output else status


def _http_error_detail(exc: urllib_error.HTTPError) -> str:
    raw = exc.read().decode("utf-8", errors="replace").strip()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return raw
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return raw


def normalize_api_base(raw_api_base: str) -> str | None:
    normalized = raw_api_base.strip().rstrip("/")
    if not normalized:
        return None

    parsed = urllib_parse.urlparse(normalized)
    if parsed.scheme in {"http", "https"} and parsed.netloc:
        return normalized
    return None
