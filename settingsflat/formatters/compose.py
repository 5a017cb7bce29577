from __future__ import annotations

from .base import FormatterPlugin
from ..core.models import FlatMapping


class DockerComposeFormatter(FormatterPlugin):
    NAME = "docker-compose"
    ALIASES = ["compose", "dockercompose"]
    DESCRIPTION = "'- KEY=VALUE' lines for a compose service environment block."

    def render(self, mapping: FlatMapping, *, slot_setting: bool = False) -> str:
        # slot settings have no meaning for compose
        return "\n".join(f"- {entry.key}={entry.value}" for entry in mapping)


DockerCompose = DockerComposeFormatter
