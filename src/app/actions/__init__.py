from .registry import invoke_tool, get_tool_registry
from .catalog import get_available_tools, get_tool_names
