"""
Menu picker (wofi, rofi, dmenu, fuzzel, ...).

The command is a template from config; `{prompt}` is substituted.
Options go in on stdin one per line, the chosen line comes back on stdout.
"""

import shlex
from typing import List, Optional

from capmenu.runner.base import Runner


class Picker:
    def __init__(self, runner: Runner, template: str):
        self.runner = runner
        self.template = template

    def command(self, prompt: str) -> List[str]:
        return [part.replace("{prompt}", prompt) for part in shlex.split(self.template)]

    def choose(self, prompt: str, options: List[str]) -> Optional[str]:
        """
        Show options and return the selected one.

        Returns:
            The chosen line, or None when the menu was dismissed
        """
        output, code = self.runner.run(self.command(prompt), input="\n".join(options) + "\n")
        choice = output.strip()
        if code != 0 or not choice:
            return None
        return choice
