"""Tool execution dispatch."""

import json
import logging
from typing import Any, Mapping, Optional, Tuple, Union

from backend import Backend
from sandbox_tools._common import ToolResult
from sandbox_tools.schemas import TOOL_IMPLEMENTATIONS, get_tool

logger = logging.getLogger(__name__)


def _decode_inputs(input_json: Union[str, bytes, Mapping[str, Any], None]) -> Mapping[str, Any]:
    """Decode the argument payload. Malformed JSON propagates to the caller."""
    if input_json is None:
        return {}
    if isinstance(input_json, Mapping):
        return input_json
    inputs = json.loads(input_json)
    if not isinstance(inputs, Mapping):
        raise TypeError(f"Tool arguments must be a JSON object, got {type(inputs).__name__}")
    return inputs


def _serialize(result: Any) -> Optional[str]:
    if result is None or isinstance(result, str):
        return result
    return json.dumps(result)


def execute_tool(
    name: str,
    input_json: Union[str, bytes, Mapping[str, Any], None],
    backend: Optional[Backend] = None,
) -> Optional[ToolResult]:
    """Execute a tool by name. Returns None for an unknown tool name."""
    if get_tool(name) is None:
        logger.warning(f"Ignoring call to unknown tool: {name}")
        return None
    inputs = _decode_inputs(input_json)
    impl = TOOL_IMPLEMENTATIONS[name]
    kwargs = dict(inputs)
    if "backend" in kwargs:
        return ToolResult(output=None, error=f"Invalid arguments for {name}: unexpected argument 'backend'")
    if backend is not None:
        kwargs["backend"] = backend
    try:
        result, error = impl(**kwargs)
    except TypeError as e:
        return ToolResult(output=None, error=f"Invalid arguments for {name}: {e}")
    except Exception as e:
        logger.exception(f"Tool execution error: {name}")
        return ToolResult(output=None, error=f"Tool error: {e}")
    if error:
        logger.debug(f"{name} failed: {error}")
    return ToolResult(output=_serialize(result), error=error)


def process_tool_use(
    name: str,
    input_json: Union[str, bytes, Mapping[str, Any], None],
    backend: Optional[Backend] = None,
) -> Tuple[Optional[str], Optional[str]]:
    """Tuple form of execute_tool: (result, error), or (None, None) for an unknown tool."""
    res = execute_tool(name, input_json, backend=backend)
    if res is None:
        return None, None
    return res.output, res.error
