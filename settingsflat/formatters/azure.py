from __future__ import annotations
import json

from .base import FormatterPlugin
from ..core.models import FlatMapping, SettingRecord


class AzureFormatter(FormatterPlugin):
    NAME = "azure"
    ALIASES = ["records"]
    DESCRIPTION = "JSON list of {name, value, slotSetting} records for App Service advanced edit."

    def render(self, mapping: FlatMapping, *, slot_setting: bool = False) -> str:
        records = [
            SettingRecord(name=entry.key, value=entry.value, slot_setting=slot_setting).to_dict()
            for entry in mapping
        ]
        return json.dumps(records, indent=2, ensure_ascii=False)


Azure = AzureFormatter
