# catfetch/models/models.py
from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Literal


class UsageStats(BaseModel):
    total: int
    used: int


class DiskUsage(BaseModel):
    mount_point: str
    fs_type: str
    total: int
    used: int


class NetworkAddress(BaseModel):
    interface: str
    address: str
    prefix_len: int

    def display(self) -> str:
        return f"{self.address}/{self.prefix_len} ({self.interface})"


class InfoLine(BaseModel):
    label: Optional[str] = None
    value: str


def split_lines(text: str) -> List[str]:
    """Split on newlines only, dropping one trailing carriage return per line and a final empty line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class LogoBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    text: str
    source: Literal["builtin", "file"] = "builtin"

    @property
    def lines(self) -> List[str]:
        return split_lines(self.text)
