from __future__ import annotations
from pydantic import BaseModel
from typing import List, Literal
import yaml

class LoggingCfg(BaseModel):
    level: str = "INFO"
    renderer: Literal["console", "json"] = "console"

class StatusCfg(BaseModel):
    # feed status tags, ESPN naming by default
    scheduled: List[str] = ["STATUS_SCHEDULED", "PRE"]
    in_progress: List[str] = [
        "STATUS_IN_PROGRESS", "IN_PROGRESS", "LIVE", "STATUS_HALFTIME", "STATUS_END_PERIOD",
    ]
    final: List[str] = ["STATUS_FINAL", "POST", "FINAL"]

class FullConfig(BaseModel):
    logging: LoggingCfg = LoggingCfg()
    status: StatusCfg = StatusCfg()

def load_config(path: str) -> FullConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    return FullConfig.model_validate(raw)
