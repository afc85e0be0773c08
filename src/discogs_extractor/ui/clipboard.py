"""
System clipboard access through the platform's command line tools.
"""

import shutil
import subprocess
from typing import List, Optional

from ..core.exceptions import ClipboardError
from ..core.logger import get_logger

logger = get_logger("ui.clipboard")

CLIPBOARD_COMMANDS: List[List[str]] = [
    ["pbpaste"],
    ["wl-paste", "--no-newline"],
    ["xclip", "-selection", "clipboard", "-o"],
    ["xsel", "--clipboard", "--output"],
    ["powershell", "-NoProfile", "-Command", "Get-Clipboard"],
]


def read_clipboard(commands: Optional[List[List[str]]] = None, timeout: int = 5) -> str:
    """
    Read text from the system clipboard.

    Tries each available clipboard tool in turn.

    Raises:
        ClipboardError: If no tool is installed or none could read the clipboard
    """
    tried = []
    for command in commands or CLIPBOARD_COMMANDS:
        if shutil.which(command[0]) is None:
            continue
        tried.append(command[0])
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                check=True,
                timeout=timeout,
                text=True
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
            logger.debug(f"Clipboard command {command[0]} failed: {e}")
            continue
        return completed.stdout

    if not tried:
        raise ClipboardError("No clipboard tool found (install xclip, xsel or wl-clipboard)")
    raise ClipboardError(f"Could not read the clipboard using {', '.join(tried)}")
