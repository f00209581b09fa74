"""
Small helpers for the command-line front end: logger setup and key files.
"""

import json
import logging
from pathlib import Path

from .cipher.hill import make_key
from .core_math.matrix import Matrix


def setup_basic_logger(name: str = "hill97", level: int = logging.INFO) -> logging.Logger:
    """
    Return a logger configured with a StreamHandler and a compact formatter.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger
    ch = logging.StreamHandler()
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    return logger


def read_key_file(path: str) -> Matrix:
    """
    Load a key matrix from JSON.
    
    Accepted layouts:
        [[0, -3], [5, 6]]
        {"key": [[0, -3], [5, 6]]}
        
    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the JSON does not describe a matrix of integers
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Key file not found: {path}")
    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    
    rows = data.get("key") if isinstance(data, dict) else data
    if not isinstance(rows, list) or not all(isinstance(r, list) for r in rows):
        raise ValueError(f"Key file must hold a list of rows: {path}")
    if not all(isinstance(v, int) and not isinstance(v, bool) for r in rows for v in r):
        raise ValueError(f"Key entries must be integers: {path}")
    return make_key(rows)
