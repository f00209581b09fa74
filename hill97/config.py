"""
Default configuration and loader.

Library functions take explicit keyword arguments; this dictionary only
feeds the command-line front end. A JSON file may override any key.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .cipher.alphabet import PAD_SYMBOL
from .core_math.inverse import DEFAULT_PIVOTING


DEFAULT_CONFIG: Dict[str, Any] = {
    "pad_symbol": PAD_SYMBOL,      # appended to fill the last block
    "pivoting": DEFAULT_PIVOTING,  # "largest" or "first_nonzero"
    "log_level": "WARNING",
}


def load_config(path: str, base: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load a JSON config file and merge it into base (shallow merge).
    
    Args:
        path: Path to JSON config file
        base: Base configuration to update (DEFAULT_CONFIG if None)
        
    Returns:
        Merged configuration dictionary
        
    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file does not hold a JSON object
    """
    merged = dict(base if base is not None else DEFAULT_CONFIG)
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    merged.update(data)
    return merged
