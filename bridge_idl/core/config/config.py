from pydantic import BaseModel, Field
from typing import List, Optional, Tuple
import json
import os


class Config(BaseModel):
    source_dirs: List[str] = Field(default=["."])
    file_extensions: Tuple[str, ...] = Field(default=('.d.ts',))
    exclude: List[str] = Field(default=['.DS_Store', '.git', '__pycache__', '.idea', 'node_modules', 'build', 'dist'])
    output_file: str = Field(default="bridge_objects.json")
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = None


def load_config(path: str = "bridge_idl.json") -> Config:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")
    with open(path, 'r') as f:
        data = json.load(f)
    return Config(**data)
