from typing import Dict, Optional

from pydantic import BaseModel, Field


class ShellContext(BaseModel):
    """
    What the shell knows while it assembles a command's option set.

    Fields:
      - command: The command being rendered (e.g. "web mvc language").
      - parameters: Raw option values typed so far, keyed by option name.
    """
    command: str
    parameters: Dict[str, str] = Field(default_factory=dict)

    def get_parameter(self, key: str) -> Optional[str]:
        return self.parameters.get(key)

    def has_parameter(self, key: str) -> bool:
        return key in self.parameters
