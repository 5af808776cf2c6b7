from .chat import ask_handler, research_handler, reason_handler, perform_chat_completion
from .utils import format_chat_completion
