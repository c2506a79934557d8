from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional
import yaml
from pydantic import BaseModel, Field

# ---- Report (how the CLI presents results) ----
class ReportConfig(BaseModel):
    format: Literal["text", "json"] = "text"
    show_formatted: bool = True  # print the spaced form of valid IBANs

# ---- Root config ----
class RayConfig(BaseModel):
    strict: bool = True  # exit code 1 when any checked IBAN is invalid
    report: ReportConfig = Field(default_factory=ReportConfig)

# ---- Loader ----
def load_config(path: Optional[Path]) -> RayConfig:
    if not path:
        return RayConfig()
    data = yaml.safe_load(Path(path).read_text())
    if data is None:
        return RayConfig()
    return RayConfig.model_validate(data)
