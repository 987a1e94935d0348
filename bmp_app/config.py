import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .pixels import STRIDE_MODES

NAMING_MODES = ("full", "basename")


@dataclass
class ConversionConfig:
    debug: bool = False
    prefix: str = "INV_"
    naming: str = "full"
    stride: str = "fixed"
    strict: bool = False
    cleanup_partial: bool = False
    verify: bool = False

    def __post_init__(self) -> None:
        if self.naming not in NAMING_MODES:
            raise ValueError(f"Unknown naming mode: {self.naming}")
        if self.stride not in STRIDE_MODES:
            raise ValueError(f"Unknown stride mode: {self.stride}")

    def save(self, path: str | Path) -> None:
        Path(path).write_text(json.dumps(asdict(self), ensure_ascii=False, indent=2), encoding="utf-8")

    @staticmethod
    def load(path: str | Path) -> "ConversionConfig":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        known = {field.name for field in fields(ConversionConfig)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return ConversionConfig(**data)
